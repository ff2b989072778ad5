"""Membership Repository Interface."""

from typing import Optional

from producthunt.domain.repositories.base import BaseRepository
from producthunt.domain.models.membership import Membership


class MembershipRepository(BaseRepository[Membership]):

    def get_latest_for_email(self, email: str) -> Optional[Membership]:
        """Most recently purchased membership for an email."""
        ...

    def get_active_for_email(self, email: str) -> Optional[Membership]:
        """An active membership for an email, if any."""
        ...

    def count_active(self) -> int:
        ...
