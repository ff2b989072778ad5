"""User service — listing and role promotion."""

from typing import List

import structlog

from producthunt.core.exceptions import EntityNotFoundException, ValidationException
from producthunt.domain.models.user import USER_ROLES, User
from producthunt.domain.repositories.user_repository import UserRepository

logger = structlog.get_logger(__name__)


def list_users(repo: UserRepository) -> List[User]:
    return repo.list_all()


def promote_user(repo: UserRepository, user_id: int, role: str) -> User:
    if role not in USER_ROLES:
        raise ValidationException(f"Unknown role '{role}'", {"allowed": list(USER_ROLES)})

    user = repo.get_by_id(user_id)
    if user is None:
        raise EntityNotFoundException("User not found", {"id": user_id})

    user = repo.set_role(user, role)
    logger.info("User role changed", user_id=user_id, role=role)
    return user
