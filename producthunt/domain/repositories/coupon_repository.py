"""Coupon Repository Interface."""

from typing import Optional

from producthunt.domain.repositories.base import BaseRepository
from producthunt.domain.models.coupon import Coupon


class CouponRepository(BaseRepository[Coupon]):

    def get_by_code(self, code: str) -> Optional[Coupon]:
        """Get the first coupon with the given code; codes are not unique."""
        ...
