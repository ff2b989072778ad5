"""User Repository Interface."""

from typing import Optional

from producthunt.domain.repositories.base import BaseRepository
from producthunt.domain.models.user import User


class UserRepository(BaseRepository[User]):

    def get_by_email(self, email: str) -> Optional[User]:
        ...

    def set_role(self, user: User, role: str) -> User:
        ...

    def insert_if_absent(self, obj_in: dict) -> Optional[User]:
        """Create the user, or return None when the email is already taken."""
        ...
