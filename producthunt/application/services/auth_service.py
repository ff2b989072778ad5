"""Auth service — JWT token management and password hashing."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import structlog
from jose import JWTError, jwt
from passlib.context import CryptContext

from producthunt.config import Settings
from producthunt.core.exceptions import ConflictException, UnauthorizedException, ValidationException
from producthunt.domain.models.user import User
from producthunt.domain.repositories.user_repository import UserRepository

logger = structlog.get_logger(__name__)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(settings: Settings, data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.JWT_EXPIRATION_MINUTES)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(settings: Settings, token: str) -> Optional[dict]:
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        return None


def token_for(settings: Settings, user: User) -> str:
    return create_access_token(settings, data={"sub": user.email, "role": user.role})


def authenticate_user(repo: UserRepository, email: str, password: str) -> User:
    user = repo.get_by_email(email)
    if not user or not verify_password(password, user.password_hash):
        logger.info("Login rejected", email=email)
        raise UnauthorizedException("Invalid email or password")
    return user


def create_user(
    repo: UserRepository,
    email: str,
    password: str,
    name: Optional[str] = None,
    photo_url: Optional[str] = None,
    role: str = "user",
) -> User:
    if repo.get_by_email(email):
        raise ConflictException("User already exists", {"email": email})

    user = repo.insert_if_absent(
        {
            "name": name,
            "email": email,
            "photo_url": photo_url,
            "password_hash": hash_password(password),
            "role": role,
        }
    )
    if user is None:
        logger.info("Duplicate signup rejected", email=email)
        raise ConflictException("User already exists", {"email": email})
    logger.info("User registered", email=email, role=role)
    return user


def verify_token(settings: Settings, token: Optional[str]) -> dict:
    """Decode a token supplied in a request body."""
    if not token:
        raise ValidationException("No token provided")
    payload = decode_access_token(settings, token)
    if payload is None:
        raise UnauthorizedException("Invalid token")
    return payload


def ensure_default_admin(repo: UserRepository, settings: Settings) -> None:
    """Create the configured admin account on first start."""
    if repo.get_by_email(settings.DEFAULT_ADMIN_EMAIL):
        return
    create_user(
        repo,
        email=settings.DEFAULT_ADMIN_EMAIL,
        password=settings.DEFAULT_ADMIN_PASSWORD,
        name="Admin",
        role="admin",
    )
    logger.info("Default admin user created", email=settings.DEFAULT_ADMIN_EMAIL)
