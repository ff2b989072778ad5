"""Report API routes — flag products for moderation."""

from fastapi import APIRouter, Depends, status

from producthunt.application.services.report_service import (
    list_product_reports,
    list_reports,
    report_product,
)
from producthunt.domain.models.user import User
from producthunt.domain.repositories.product_repository import ProductRepository
from producthunt.domain.repositories.report_repository import ReportRepository
from producthunt.domain.schemas.report import ReportCreate, ReportRead
from producthunt.interfaces.api.deps import require_staff
from producthunt.interfaces.deps import get_product_repository, get_report_repository

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_report(body: ReportCreate, products: ProductRepository = Depends(get_product_repository)):
    report, report_count = report_product(products, body.product_id, body.reporter, body.reason)
    return {
        "success": True,
        "message": "Product reported successfully",
        "reportCount": report_count,
        "report": ReportRead.model_validate(report),
    }


@router.get("/all", response_model=list[ReportRead])
def all_reports(
    reports: ReportRepository = Depends(get_report_repository),
    staff: User = Depends(require_staff),
):
    return [ReportRead.model_validate(r) for r in list_reports(reports)]


@router.get("/product/{product_id}", response_model=list[ReportRead])
def product_reports(
    product_id: int,
    products: ProductRepository = Depends(get_product_repository),
    reports: ReportRepository = Depends(get_report_repository),
):
    return [ReportRead.model_validate(r) for r in list_product_reports(products, reports, product_id)]
