"""Pydantic schemas for reviews."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from producthunt.domain.schemas.common import RequestModel, ResponseModel


class ReviewCreate(RequestModel):
    product_id: Optional[int] = None
    reviewer_name: Optional[str] = None
    reviewer_image: Optional[str] = None
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    body: str = Field(min_length=1)


class ReviewRead(ResponseModel):
    id: int = Field(alias="_id")
    product_id: Optional[int] = None
    reviewer_name: Optional[str] = None
    reviewer_image: Optional[str] = None
    rating: Optional[int] = None
    body: str
    created_at: Optional[datetime] = Field(default=None, alias="timestamp")
