"""
API Dependencies.
"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from producthunt.config import Settings
from producthunt.infrastructure.database import get_db
from producthunt.domain.models.coupon import Coupon
from producthunt.domain.models.membership import Membership
from producthunt.domain.models.product import Product
from producthunt.domain.models.report import Report
from producthunt.domain.models.review import Review
from producthunt.domain.models.user import User
from producthunt.domain.repositories.coupon_repository import CouponRepository
from producthunt.domain.repositories.membership_repository import MembershipRepository
from producthunt.domain.repositories.product_repository import ProductRepository
from producthunt.domain.repositories.report_repository import ReportRepository
from producthunt.domain.repositories.review_repository import ReviewRepository
from producthunt.domain.repositories.user_repository import UserRepository
from producthunt.infrastructure.repositories.coupon_repository import SQLAlchemyCouponRepository
from producthunt.infrastructure.repositories.membership_repository import SQLAlchemyMembershipRepository
from producthunt.infrastructure.repositories.product_repository import SQLAlchemyProductRepository
from producthunt.infrastructure.repositories.report_repository import SQLAlchemyReportRepository
from producthunt.infrastructure.repositories.review_repository import SQLAlchemyReviewRepository
from producthunt.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was built with."""
    return request.app.state.settings


def get_product_repository(db: Session = Depends(get_db)) -> ProductRepository:
    return SQLAlchemyProductRepository(db, Product)


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return SQLAlchemyUserRepository(db, User)


def get_coupon_repository(db: Session = Depends(get_db)) -> CouponRepository:
    return SQLAlchemyCouponRepository(db, Coupon)


def get_membership_repository(db: Session = Depends(get_db)) -> MembershipRepository:
    return SQLAlchemyMembershipRepository(db, Membership)


def get_review_repository(db: Session = Depends(get_db)) -> ReviewRepository:
    return SQLAlchemyReviewRepository(db, Review)


def get_report_repository(db: Session = Depends(get_db)) -> ReportRepository:
    return SQLAlchemyReportRepository(db, Report)
