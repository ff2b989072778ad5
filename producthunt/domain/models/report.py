"""Report audit log — one row per (product, reporter)."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.sql import func

from producthunt.infrastructure.database import Base


class Report(Base):
    __tablename__ = "reports"
    __table_args__ = (UniqueConstraint("product_id", "reporter", name="uq_reports_product_reporter"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)
    reporter = Column(String(255), nullable=False)
    reason = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Report {self.product_id} by {self.reporter}>"
