"""Product domain model — maps to the 'products' table."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, JSON, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from producthunt.infrastructure.database import Base

PRODUCT_STATUSES = ("pending", "accepted", "rejected")


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False, index=True)
    description = Column(Text, nullable=True)
    image = Column(Text, nullable=True)  # base64
    tags = Column(JSON, nullable=False, default=list)
    external_links = Column(Text, nullable=True)

    owner_name = Column(String(200), nullable=True)
    owner_email = Column(String(255), nullable=False, index=True)
    owner_image = Column(Text, nullable=True)

    status = Column(String(20), nullable=False, default="pending", index=True)
    featured = Column(Boolean, nullable=False, default=False)

    # Denormalized counters; source of truth is the child rows below
    votes = Column(Integer, nullable=False, default=0, index=True)
    report_count = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    vote_rows = relationship(
        "ProductVote", cascade="all, delete-orphan", lazy="selectin", order_by="ProductVote.id"
    )
    report_rows = relationship(
        "Report", cascade="all, delete-orphan", lazy="selectin", order_by="Report.id"
    )

    @property
    def voted_by(self) -> list[str]:
        return [v.voter for v in self.vote_rows]

    @property
    def reported_by(self) -> list[str]:
        return [r.reporter for r in self.report_rows]

    def __repr__(self):
        return f"<Product {self.id} - {self.name}>"


class ProductVote(Base):
    """One row per (product, voter); the unique key makes upvotes idempotent."""

    __tablename__ = "product_votes"
    __table_args__ = (UniqueConstraint("product_id", "voter", name="uq_product_votes_product_voter"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)
    voter = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<ProductVote {self.product_id} by {self.voter}>"
