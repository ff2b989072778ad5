"""SQLAlchemy Implementation of User Repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from producthunt.domain.models.user import User
from producthunt.domain.repositories.user_repository import UserRepository
from producthunt.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepository):

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.scalars(select(User).where(User.email == email)).first()

    def set_role(self, user: User, role: str) -> User:
        return self.update(user, {"role": role})

    def insert_if_absent(self, obj_in: dict) -> Optional[User]:
        # The unique email index decides between concurrent signups
        try:
            return self.create(obj_in)
        except IntegrityError:
            self.db.rollback()
            return None
