"""Pydantic schemas for coupons."""

from datetime import date

from pydantic import Field

from producthunt.domain.schemas.common import RequestModel, ResponseModel


class CouponWrite(RequestModel):
    code: str = Field(min_length=1, max_length=100)
    expiry_date: date
    description: str = Field(min_length=1)
    discount: int = Field(gt=0, le=100)


class CouponRead(ResponseModel):
    id: int = Field(alias="_id")
    code: str
    expiry_date: date
    description: str
    discount: int
