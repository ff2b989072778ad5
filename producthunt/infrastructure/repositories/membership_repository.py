"""SQLAlchemy Implementation of Membership Repository."""

from typing import Optional

from sqlalchemy import func, select

from producthunt.domain.models.membership import Membership
from producthunt.domain.repositories.membership_repository import MembershipRepository
from producthunt.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyMembershipRepository(SQLAlchemyRepository[Membership], MembershipRepository):

    def get_latest_for_email(self, email: str) -> Optional[Membership]:
        stmt = (
            select(Membership)
            .where(Membership.user_email == email)
            .order_by(Membership.purchased_at.desc(), Membership.id.desc())
        )
        return self.db.scalars(stmt).first()

    def get_active_for_email(self, email: str) -> Optional[Membership]:
        stmt = (
            select(Membership)
            .where(Membership.user_email == email, Membership.is_active.is_(True))
            .order_by(Membership.purchased_at.desc(), Membership.id.desc())
        )
        return self.db.scalars(stmt).first()

    def count_active(self) -> int:
        stmt = select(func.count(Membership.id)).where(Membership.is_active.is_(True))
        return self.db.scalar(stmt) or 0
