"""FastAPI dependency — JWT auth and role checks."""

from typing import Callable, Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from producthunt.config import Settings
from producthunt.application.services.auth_service import decode_access_token
from producthunt.core.exceptions import ForbiddenException, UnauthorizedException
from producthunt.domain.models.user import User
from producthunt.domain.repositories.user_repository import UserRepository
from producthunt.interfaces.deps import get_app_settings, get_user_repository

security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    settings: Settings = Depends(get_app_settings),
    repo: UserRepository = Depends(get_user_repository),
) -> User:
    """Extract and validate the current user from JWT token."""
    if credentials is None:
        raise UnauthorizedException("Not authenticated")

    payload = decode_access_token(settings, credentials.credentials)
    if payload is None:
        raise UnauthorizedException("Invalid or expired token")

    email: Optional[str] = payload.get("sub")
    if email is None:
        raise UnauthorizedException("Invalid token")

    user = repo.get_by_email(email)
    if user is None:
        raise UnauthorizedException("User not found")

    return user


def require_roles(*roles: str) -> Callable[..., User]:
    """Build a dependency that only lets the given roles through."""

    def checker(user: User = Depends(get_current_user)) -> User:
        if user.role not in roles:
            raise ForbiddenException(
                "You do not have permission to access this resource",
                {"required": list(roles), "role": user.role},
            )
        return user

    return checker


require_admin = require_roles("admin")
require_staff = require_roles("admin", "moderator")
