"""Pydantic schemas for Product domain."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

from producthunt.domain.schemas.common import RequestModel, ResponseModel

ProductStatus = Literal["pending", "accepted", "rejected"]


class ProductCreate(BaseModel):
    name: str
    description: Optional[str] = None
    image: Optional[str] = None
    tags: list[str] = []
    external_links: Optional[str] = None
    owner_name: Optional[str] = None
    owner_email: str
    owner_image: Optional[str] = None


class ProductRead(ResponseModel):
    id: int = Field(alias="_id")
    name: str = Field(alias="productName")
    description: Optional[str] = None
    image: Optional[str] = Field(default=None, alias="productImage")
    tags: list[str] = []
    external_links: Optional[str] = None
    owner_name: Optional[str] = None
    owner_email: str
    owner_image: Optional[str] = None
    status: str
    featured: bool = False
    votes: int = 0
    voted_by: list[str] = []
    report_count: int = 0
    reported_by: list[str] = []
    created_at: Optional[datetime] = Field(default=None, alias="timestamp")


class ProductFilter(BaseModel):
    search: Optional[str] = None
    tag: Optional[str] = None
    status: Optional[ProductStatus] = None
    owner_email: Optional[str] = None
    page: int = 1
    limit: int = 20


class VoteRequest(RequestModel):
    user_id: str = Field(min_length=1)


class StatusUpdate(RequestModel):
    status: ProductStatus


class FeaturedUpdate(RequestModel):
    featured: bool = True


class ProductStats(ResponseModel):
    total_products: int
    total_votes: int
    accepted_products: int
    rejected_products: int
    pending_products: int
    most_voted_product: Optional[ProductRead] = None


class AdminStatistics(ResponseModel):
    total_products: int
    total_accepted_products: int
    total_pending_products: int
    total_rejected_products: int
    total_reviews: int
    total_users: int
    total_reports: int
    total_coupons: int
    active_memberships: int
