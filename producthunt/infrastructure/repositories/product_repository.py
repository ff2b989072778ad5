"""
SQLAlchemy Implementation of Product Repository.
"""

import json
from typing import Any, Dict, List, Optional

from sqlalchemy import String, cast, func, or_, select, update
from sqlalchemy.exc import IntegrityError

from producthunt.domain.models.product import Product, ProductVote
from producthunt.domain.models.report import Report
from producthunt.domain.repositories.product_repository import ProductRepository
from producthunt.domain.schemas.product import ProductFilter
from producthunt.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyProductRepository(SQLAlchemyRepository[Product], ProductRepository):
    """Product repository implementation using SQLAlchemy."""

    def get_with_filters(self, filters: ProductFilter) -> Dict[str, Any]:
        """Get products with filtering and pagination."""
        query = select(Product)

        if filters.search:
            pattern = f"%{filters.search}%"
            query = query.where(or_(Product.name.ilike(pattern), Product.description.ilike(pattern)))
        if filters.tag:
            query = query.where(self._has_tag(filters.tag))
        if filters.status:
            query = query.where(Product.status == filters.status)
        if filters.owner_email:
            query = query.where(Product.owner_email == filters.owner_email)

        total = self.db.scalar(select(func.count()).select_from(query.subquery())) or 0
        offset = (filters.page - 1) * filters.limit
        products = self.db.scalars(
            query.order_by(Product.created_at.desc(), Product.id.desc())
            .offset(offset)
            .limit(filters.limit)
        ).all()

        return {
            "items": list(products),
            "total": total,
            "page": filters.page,
            "limit": filters.limit,
        }

    def _has_tag(self, tag: str):
        """Exact match of one element of the JSON ``tags`` list."""
        dialect = self.db.get_bind().dialect.name
        if dialect == "postgresql":
            elements = func.json_array_elements_text(Product.tags).table_valued("value")
        elif dialect == "sqlite":
            elements = func.json_each(Product.tags).table_valued("value")
        else:
            # Stored text uses json.dumps escaping; match the quoted element literally
            needle = json.dumps(tag).replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
            return cast(Product.tags, String).like(f"%{needle}%", escape="\\")
        return select(elements.c.value).where(elements.c.value == tag).exists()

    def count_by_owner(self, owner_email: str) -> int:
        stmt = select(func.count(Product.id)).where(Product.owner_email == owner_email)
        return self.db.scalar(stmt) or 0

    def list_by_owner(self, owner_email: str) -> List[Product]:
        stmt = (
            select(Product)
            .where(Product.owner_email == owner_email)
            .order_by(Product.created_at.desc(), Product.id.desc())
        )
        return list(self.db.scalars(stmt))

    def list_rising(self, min_votes: int) -> List[Product]:
        stmt = select(Product).where(Product.votes >= min_votes).order_by(Product.votes.desc(), Product.id)
        return list(self.db.scalars(stmt))

    def list_featured(self) -> List[Product]:
        stmt = (
            select(Product)
            .where(Product.featured.is_(True), Product.status == "accepted")
            .order_by(Product.created_at.desc(), Product.id.desc())
        )
        return list(self.db.scalars(stmt))

    def list_reported(self) -> List[Product]:
        stmt = select(Product).where(Product.report_count > 0).order_by(Product.report_count.desc(), Product.id)
        return list(self.db.scalars(stmt))

    def add_vote(self, product_id: int, voter: str) -> Optional[int]:
        """Insert the vote row and increment the counter in a single transaction.

        The unique (product_id, voter) key rejects a concurrent duplicate at
        insert time, so the counter can never run ahead of the voter set.
        """
        try:
            self.db.add(ProductVote(product_id=product_id, voter=voter))
            self.db.flush()
            self.db.execute(
                update(Product)
                .where(Product.id == product_id)
                .values(votes=Product.votes + 1)
                .execution_options(synchronize_session=False)
            )
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            return None

        self.db.expire_all()
        return self.db.scalar(select(Product.votes).where(Product.id == product_id))

    def add_report(self, product_id: int, reporter: str, reason: Optional[str]) -> Optional[Report]:
        """Insert the report row and increment the counter in a single transaction."""
        report = Report(product_id=product_id, reporter=reporter, reason=reason)
        try:
            self.db.add(report)
            self.db.flush()
            self.db.execute(
                update(Product)
                .where(Product.id == product_id)
                .values(report_count=Product.report_count + 1)
                .execution_options(synchronize_session=False)
            )
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            return None

        self.db.expire_all()
        self.db.refresh(report)
        return report

    def count_by_status(self, status: str) -> int:
        stmt = select(func.count(Product.id)).where(Product.status == status)
        return self.db.scalar(stmt) or 0

    def total_votes(self) -> int:
        return self.db.scalar(select(func.coalesce(func.sum(Product.votes), 0))) or 0

    def most_voted(self) -> Optional[Product]:
        stmt = select(Product).order_by(Product.votes.desc(), Product.id).limit(1)
        return self.db.scalars(stmt).first()
