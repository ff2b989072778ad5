"""Pydantic schemas for User and Auth."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from producthunt.domain.schemas.common import RequestModel, ResponseModel


class SignupRequest(RequestModel):
    email: str = Field(min_length=3)
    password: str = Field(min_length=6)
    name: Optional[str] = None
    photo_url: Optional[str] = Field(default=None, alias="photoURL")


class LoginRequest(RequestModel):
    email: str
    password: str


class VerifyTokenRequest(RequestModel):
    token: Optional[str] = None


class UserRead(ResponseModel):
    id: int = Field(alias="_id")
    name: Optional[str] = None
    email: str
    photo_url: Optional[str] = Field(default=None, alias="photoURL")
    role: str
    created_at: Optional[datetime] = None


class TokenResponse(ResponseModel):
    access_token: str = Field(alias="access_token")
    token_type: str = Field(default="bearer", alias="token_type")
    user: UserRead
