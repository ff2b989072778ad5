"""Coupon API routes — public lookup, admin management."""

from fastapi import APIRouter, Depends, status

from producthunt.application.services.coupon_service import (
    create_coupon,
    delete_coupon,
    get_coupon_by_code,
    list_coupons,
    update_coupon,
)
from producthunt.domain.models.user import User
from producthunt.domain.repositories.coupon_repository import CouponRepository
from producthunt.domain.schemas.coupon import CouponRead, CouponWrite
from producthunt.interfaces.api.deps import require_admin
from producthunt.interfaces.deps import get_coupon_repository

router = APIRouter(prefix="/coupons", tags=["Coupons"])


@router.get("")
def all_coupons(repo: CouponRepository = Depends(get_coupon_repository)):
    return {"success": True, "coupons": [CouponRead.model_validate(c) for c in list_coupons(repo)]}


@router.post("", status_code=status.HTTP_201_CREATED)
def add_coupon(
    body: CouponWrite,
    repo: CouponRepository = Depends(get_coupon_repository),
    admin: User = Depends(require_admin),
):
    coupon = create_coupon(repo, body)
    return {"success": True, "message": "Coupon created successfully", "couponId": coupon.id}


@router.get("/{code}")
def coupon_by_code(code: str, repo: CouponRepository = Depends(get_coupon_repository)):
    return {"success": True, "coupon": CouponRead.model_validate(get_coupon_by_code(repo, code))}


@router.put("/{coupon_id}")
def edit_coupon(
    coupon_id: int,
    body: CouponWrite,
    repo: CouponRepository = Depends(get_coupon_repository),
    admin: User = Depends(require_admin),
):
    coupon = update_coupon(repo, coupon_id, body)
    return {
        "success": True,
        "message": "Coupon updated successfully",
        "coupon": CouponRead.model_validate(coupon),
    }


@router.delete("/{coupon_id}")
def remove_coupon(
    coupon_id: int,
    repo: CouponRepository = Depends(get_coupon_repository),
    admin: User = Depends(require_admin),
):
    delete_coupon(repo, coupon_id)
    return {"success": True, "message": "Coupon deleted successfully"}
