"""Statistics service — admin dashboard counters."""

from producthunt.domain.repositories.coupon_repository import CouponRepository
from producthunt.domain.repositories.membership_repository import MembershipRepository
from producthunt.domain.repositories.product_repository import ProductRepository
from producthunt.domain.repositories.report_repository import ReportRepository
from producthunt.domain.repositories.review_repository import ReviewRepository
from producthunt.domain.repositories.user_repository import UserRepository
from producthunt.domain.schemas.product import AdminStatistics


def get_admin_statistics(
    products: ProductRepository,
    reviews: ReviewRepository,
    users: UserRepository,
    reports: ReportRepository,
    coupons: CouponRepository,
    memberships: MembershipRepository,
) -> AdminStatistics:
    return AdminStatistics(
        total_products=products.count(),
        total_accepted_products=products.count_by_status("accepted"),
        total_pending_products=products.count_by_status("pending"),
        total_rejected_products=products.count_by_status("rejected"),
        total_reviews=reviews.count(),
        total_users=users.count(),
        total_reports=reports.count(),
        total_coupons=coupons.count(),
        active_memberships=memberships.count_active(),
    )
