"""Report service — one report per (product, reporter)."""

from typing import List, Optional, Tuple

import structlog

from producthunt.application.services.product_service import get_product
from producthunt.core.exceptions import ConflictException
from producthunt.domain.models.report import Report
from producthunt.domain.repositories.product_repository import ProductRepository
from producthunt.domain.repositories.report_repository import ReportRepository

logger = structlog.get_logger(__name__)


def report_product(
    products: ProductRepository,
    product_id: int,
    reporter: str,
    reason: Optional[str] = None,
) -> Tuple[Report, int]:
    """Record a report and return it with the product's new report count."""
    get_product(products, product_id)

    report = products.add_report(product_id, reporter, reason)
    if report is None:
        logger.info("Duplicate report rejected", product_id=product_id, reporter=reporter)
        raise ConflictException("You have already reported this product", {"id": product_id})

    report_count = get_product(products, product_id).report_count
    logger.info("Product reported", product_id=product_id, reporter=reporter, report_count=report_count)
    return report, report_count


def list_reports(repo: ReportRepository) -> List[Report]:
    return repo.list_recent()


def list_product_reports(products: ProductRepository, reports: ReportRepository, product_id: int) -> List[Report]:
    get_product(products, product_id)
    return reports.list_by_product(product_id)
