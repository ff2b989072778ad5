"""Review API routes."""

from fastapi import APIRouter, Depends, status

from producthunt.application.services.review_service import (
    create_review,
    list_product_reviews,
    list_reviews,
)
from producthunt.domain.repositories.review_repository import ReviewRepository
from producthunt.domain.schemas.review import ReviewCreate, ReviewRead
from producthunt.interfaces.deps import get_review_repository

router = APIRouter(prefix="/reviews", tags=["Reviews"])


@router.post("", status_code=status.HTTP_201_CREATED)
def add_review(body: ReviewCreate, repo: ReviewRepository = Depends(get_review_repository)):
    review = create_review(repo, body)
    return {"message": "Review added successfully", "review": ReviewRead.model_validate(review)}


@router.get("", response_model=list[ReviewRead])
def all_reviews(repo: ReviewRepository = Depends(get_review_repository)):
    return [ReviewRead.model_validate(r) for r in list_reviews(repo)]


@router.get("/product/{product_id}", response_model=list[ReviewRead])
def product_reviews(product_id: int, repo: ReviewRepository = Depends(get_review_repository)):
    return [ReviewRead.model_validate(r) for r in list_product_reviews(repo, product_id)]
