"""Product service — submission, voting, moderation and product stats."""

import base64
import json
from typing import Any, Dict, List, Optional

import structlog

from producthunt.config import Settings
from producthunt.core.exceptions import (
    ConflictException,
    EntityNotFoundException,
    ForbiddenException,
    ValidationException,
)
from producthunt.domain.models.product import PRODUCT_STATUSES, Product
from producthunt.domain.repositories.membership_repository import MembershipRepository
from producthunt.domain.repositories.product_repository import ProductRepository
from producthunt.domain.schemas.product import ProductCreate, ProductFilter, ProductRead, ProductStats

logger = structlog.get_logger(__name__)


def encode_image(content: bytes) -> str:
    """Images are stored inline as base64 text."""
    return base64.b64encode(content).decode("ascii")


def parse_tags(raw: Optional[str]) -> List[str]:
    """Accept a JSON list (``'["ai", "tools"]'``) or a comma separated string."""
    if not raw:
        return []
    raw = raw.strip()
    if raw.startswith("["):
        try:
            values = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ValidationException("tags must be a JSON list of strings") from e
        if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
            raise ValidationException("tags must be a JSON list of strings")
    else:
        values = raw.split(",")

    tags: List[str] = []
    for value in values:
        tag = str(value).strip()
        if tag and tag not in tags:
            tags.append(tag)
    return tags


def get_product(repo: ProductRepository, product_id: int) -> Product:
    product = repo.get_by_id(product_id)
    if product is None:
        raise EntityNotFoundException("Product not found", {"id": product_id})
    return product


def submit_product(
    products: ProductRepository,
    memberships: MembershipRepository,
    settings: Settings,
    data: ProductCreate,
) -> Product:
    """Create a product, enforcing the free-tier product limit.

    Owners without an active membership may own at most
    ``FREE_PRODUCT_LIMIT`` products.
    """
    membership = memberships.get_active_for_email(data.owner_email)
    if membership is None:
        owned = products.count_by_owner(data.owner_email)
        if owned >= settings.FREE_PRODUCT_LIMIT:
            logger.info(
                "Product submission blocked by membership gate",
                owner_email=data.owner_email,
                owned=owned,
            )
            raise ForbiddenException(
                f"Only {settings.FREE_PRODUCT_LIMIT} product allowed. Buy membership to add more.",
                {"owned": owned, "limit": settings.FREE_PRODUCT_LIMIT},
            )

    product = products.create(
        {
            **data.model_dump(),
            "status": "pending",
            "votes": 0,
            "report_count": 0,
        }
    )
    logger.info("Product submitted", product_id=product.id, owner_email=product.owner_email)
    return product


def list_products(repo: ProductRepository, settings: Settings, filters: ProductFilter) -> Dict[str, Any]:
    filters = filters.model_copy(
        update={"limit": max(1, min(filters.limit, settings.MAX_PAGE_SIZE)), "page": max(1, filters.page)}
    )
    return repo.get_with_filters(filters)


def list_rising(repo: ProductRepository, settings: Settings) -> List[Product]:
    return repo.list_rising(settings.RISING_VOTE_THRESHOLD)


def list_featured(repo: ProductRepository) -> List[Product]:
    return repo.list_featured()


def list_owned(repo: ProductRepository, owner_email: str) -> List[Product]:
    return repo.list_by_owner(owner_email)


def list_reported(repo: ProductRepository) -> List[Product]:
    return repo.list_reported()


def upvote_product(repo: ProductRepository, product_id: int, voter: str) -> int:
    """Count one vote per voter. Returns the updated vote total."""
    get_product(repo, product_id)

    votes = repo.add_vote(product_id, voter)
    if votes is None:
        logger.info("Duplicate vote rejected", product_id=product_id, voter=voter)
        raise ConflictException("Already voted", {"id": product_id, "userId": voter})

    logger.info("Vote recorded", product_id=product_id, voter=voter, votes=votes)
    return votes


def set_status(repo: ProductRepository, product_id: int, status: str) -> Product:
    if status not in PRODUCT_STATUSES:
        raise ValidationException(f"Unknown status '{status}'", {"allowed": list(PRODUCT_STATUSES)})
    product = get_product(repo, product_id)
    product = repo.update(product, {"status": status})
    logger.info("Product status changed", product_id=product_id, status=status)
    return product


def set_featured(repo: ProductRepository, product_id: int, featured: bool) -> Product:
    product = get_product(repo, product_id)
    return repo.update(product, {"featured": featured})


def delete_product(repo: ProductRepository, product_id: int) -> None:
    if repo.delete(product_id) is None:
        raise EntityNotFoundException("Product not found to delete", {"id": product_id})
    logger.info("Product deleted", product_id=product_id)


def get_product_stats(repo: ProductRepository) -> ProductStats:
    """Public statistics shown on the home page."""
    most_voted = repo.most_voted()
    return ProductStats(
        total_products=repo.count(),
        total_votes=repo.total_votes(),
        accepted_products=repo.count_by_status("accepted"),
        rejected_products=repo.count_by_status("rejected"),
        pending_products=repo.count_by_status("pending"),
        most_voted_product=ProductRead.model_validate(most_voted) if most_voted else None,
    )
