"""Coupon service — CRUD over discount codes."""

from typing import List

import structlog

from producthunt.core.exceptions import EntityNotFoundException
from producthunt.domain.models.coupon import Coupon
from producthunt.domain.repositories.coupon_repository import CouponRepository
from producthunt.domain.schemas.coupon import CouponWrite

logger = structlog.get_logger(__name__)


def list_coupons(repo: CouponRepository) -> List[Coupon]:
    return repo.list_all()


def create_coupon(repo: CouponRepository, data: CouponWrite) -> Coupon:
    coupon = repo.create(data.model_dump())
    logger.info("Coupon created", coupon_id=coupon.id, code=coupon.code)
    return coupon


def get_coupon_by_code(repo: CouponRepository, code: str) -> Coupon:
    coupon = repo.get_by_code(code)
    if coupon is None:
        raise EntityNotFoundException("Coupon not found", {"code": code})
    return coupon


def update_coupon(repo: CouponRepository, coupon_id: int, data: CouponWrite) -> Coupon:
    coupon = repo.get_by_id(coupon_id)
    if coupon is None:
        raise EntityNotFoundException("Coupon not found for update", {"id": coupon_id})
    return repo.update(coupon, data.model_dump())


def delete_coupon(repo: CouponRepository, coupon_id: int) -> None:
    if repo.delete(coupon_id) is None:
        raise EntityNotFoundException("Coupon not found to delete", {"id": coupon_id})
    logger.info("Coupon deleted", coupon_id=coupon_id)
