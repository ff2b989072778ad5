"""Pydantic schemas for memberships."""

from datetime import datetime

from pydantic import Field

from producthunt.domain.schemas.common import RequestModel, ResponseModel


class MembershipCreate(RequestModel):
    user_email: str = Field(min_length=3)
    is_active: bool = True


class MembershipRead(ResponseModel):
    id: int = Field(alias="_id")
    user_email: str
    is_active: bool
    purchased_at: datetime
    expires_at: datetime
