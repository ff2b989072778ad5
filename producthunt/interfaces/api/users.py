"""User API routes — profile and role management."""

from fastapi import APIRouter, Depends

from producthunt.application.services.user_service import list_users, promote_user
from producthunt.domain.models.user import User
from producthunt.domain.repositories.user_repository import UserRepository
from producthunt.domain.schemas.auth import UserRead
from producthunt.interfaces.api.deps import get_current_user, require_admin
from producthunt.interfaces.deps import get_user_repository

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("/me", response_model=UserRead)
def get_me(user: User = Depends(get_current_user)):
    return UserRead.model_validate(user)


@router.get("", response_model=list[UserRead])
def all_users(
    repo: UserRepository = Depends(get_user_repository),
    admin: User = Depends(require_admin),
):
    return [UserRead.model_validate(u) for u in list_users(repo)]


@router.patch("/admin/{user_id}")
def make_admin(
    user_id: int,
    repo: UserRepository = Depends(get_user_repository),
    admin: User = Depends(require_admin),
):
    user = promote_user(repo, user_id, "admin")
    return {"message": "User promoted to admin", "user": UserRead.model_validate(user)}


@router.patch("/moderator/{user_id}")
def make_moderator(
    user_id: int,
    repo: UserRepository = Depends(get_user_repository),
    admin: User = Depends(require_admin),
):
    user = promote_user(repo, user_id, "moderator")
    return {"message": "User promoted to moderator", "user": UserRead.model_validate(user)}
