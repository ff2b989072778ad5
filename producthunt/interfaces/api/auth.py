"""Auth API routes — signup, login, token verification."""

from fastapi import APIRouter, Depends, status

from producthunt.config import Settings
from producthunt.application.services.auth_service import (
    authenticate_user,
    create_user,
    token_for,
    verify_token,
)
from producthunt.domain.repositories.user_repository import UserRepository
from producthunt.domain.schemas.auth import (
    LoginRequest,
    SignupRequest,
    TokenResponse,
    UserRead,
    VerifyTokenRequest,
)
from producthunt.interfaces.deps import get_app_settings, get_user_repository

router = APIRouter(tags=["Auth"])


def _signup(body: SignupRequest, repo: UserRepository, settings: Settings) -> dict:
    user = create_user(
        repo,
        email=body.email,
        password=body.password,
        name=body.name,
        photo_url=body.photo_url,
    )
    return {
        "message": "User registered successfully",
        "token": token_for(settings, user),
        "user": UserRead.model_validate(user),
    }


@router.post("/signup", status_code=status.HTTP_201_CREATED)
def signup(
    body: SignupRequest,
    repo: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_app_settings),
):
    return _signup(body, repo, settings)


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(
    body: SignupRequest,
    repo: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_app_settings),
):
    return _signup(body, repo, settings)


@router.post("/login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    repo: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_app_settings),
):
    user = authenticate_user(repo, body.email, body.password)
    return TokenResponse(
        access_token=token_for(settings, user),
        user=UserRead.model_validate(user),
    )


@router.post("/verify-token")
def verify(body: VerifyTokenRequest, settings: Settings = Depends(get_app_settings)):
    decoded = verify_token(settings, body.token)
    return {"message": "Token verified", "decoded": decoded}
