"""SQLAlchemy Implementation of Coupon Repository."""

from typing import Optional

from sqlalchemy import select

from producthunt.domain.models.coupon import Coupon
from producthunt.domain.repositories.coupon_repository import CouponRepository
from producthunt.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyCouponRepository(SQLAlchemyRepository[Coupon], CouponRepository):

    def get_by_code(self, code: str) -> Optional[Coupon]:
        stmt = select(Coupon).where(Coupon.code == code).order_by(Coupon.id)
        return self.db.scalars(stmt).first()
