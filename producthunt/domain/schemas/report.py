"""Pydantic schemas for product reports."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from producthunt.domain.schemas.common import RequestModel, ResponseModel


class ReportCreate(RequestModel):
    product_id: int
    reporter: str = Field(min_length=1)
    reason: Optional[str] = None


class ReportRead(ResponseModel):
    id: int = Field(alias="_id")
    product_id: int
    reporter: str
    reason: Optional[str] = None
    created_at: Optional[datetime] = Field(default=None, alias="timestamp")
