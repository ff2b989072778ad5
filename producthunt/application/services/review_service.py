"""Review service."""

from typing import List

from producthunt.domain.models.review import Review
from producthunt.domain.repositories.review_repository import ReviewRepository
from producthunt.domain.schemas.review import ReviewCreate


def create_review(repo: ReviewRepository, data: ReviewCreate) -> Review:
    return repo.create(data.model_dump())


def list_reviews(repo: ReviewRepository) -> List[Review]:
    return repo.list_all()


def list_product_reviews(repo: ReviewRepository, product_id: int) -> List[Review]:
    return repo.list_by_product(product_id)
