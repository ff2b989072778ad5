"""SQLAlchemy Implementation of Review Repository."""

from typing import List

from sqlalchemy import select

from producthunt.domain.models.review import Review
from producthunt.domain.repositories.review_repository import ReviewRepository
from producthunt.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyReviewRepository(SQLAlchemyRepository[Review], ReviewRepository):

    def list_by_product(self, product_id: int) -> List[Review]:
        stmt = (
            select(Review)
            .where(Review.product_id == product_id)
            .order_by(Review.created_at.desc(), Review.id.desc())
        )
        return list(self.db.scalars(stmt))
