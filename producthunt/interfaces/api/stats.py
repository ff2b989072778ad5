"""Statistics API — public counters and the admin dashboard."""

from fastapi import APIRouter, Depends

from producthunt.application.services.product_service import get_product_stats
from producthunt.application.services.stats_service import get_admin_statistics
from producthunt.domain.models.user import User
from producthunt.domain.repositories.coupon_repository import CouponRepository
from producthunt.domain.repositories.membership_repository import MembershipRepository
from producthunt.domain.repositories.product_repository import ProductRepository
from producthunt.domain.repositories.report_repository import ReportRepository
from producthunt.domain.repositories.review_repository import ReviewRepository
from producthunt.domain.repositories.user_repository import UserRepository
from producthunt.domain.schemas.product import AdminStatistics, ProductStats
from producthunt.interfaces.api.deps import require_admin
from producthunt.interfaces.deps import (
    get_coupon_repository,
    get_membership_repository,
    get_product_repository,
    get_report_repository,
    get_review_repository,
    get_user_repository,
)

router = APIRouter(tags=["Statistics"])


@router.get("/stats", response_model=ProductStats)
def stats(repo: ProductRepository = Depends(get_product_repository)):
    return get_product_stats(repo)


@router.get("/admin/statistics", response_model=AdminStatistics)
def admin_statistics(
    products: ProductRepository = Depends(get_product_repository),
    reviews: ReviewRepository = Depends(get_review_repository),
    users: UserRepository = Depends(get_user_repository),
    reports: ReportRepository = Depends(get_report_repository),
    coupons: CouponRepository = Depends(get_coupon_repository),
    memberships: MembershipRepository = Depends(get_membership_repository),
    admin: User = Depends(require_admin),
):
    return get_admin_statistics(products, reviews, users, reports, coupons, memberships)
