"""Review — free-form feedback left on a product."""

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from producthunt.infrastructure.database import Base


class Review(Base):
    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True, autoincrement=True)
    product_id = Column(Integer, nullable=True, index=True)  # not a foreign key
    reviewer_name = Column(String(200), nullable=True)
    reviewer_image = Column(Text, nullable=True)
    rating = Column(Integer, nullable=True)
    body = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Review {self.id} on {self.product_id}>"
