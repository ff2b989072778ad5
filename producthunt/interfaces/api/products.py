"""Products API routes — submission, listing, voting and moderation."""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status

from producthunt.config import Settings
from producthunt.application.services.product_service import (
    delete_product,
    encode_image,
    get_product,
    list_featured,
    list_owned,
    list_products,
    list_reported,
    list_rising,
    parse_tags,
    set_featured,
    set_status,
    submit_product,
    upvote_product,
)
from producthunt.domain.models.user import User
from producthunt.domain.repositories.membership_repository import MembershipRepository
from producthunt.domain.repositories.product_repository import ProductRepository
from producthunt.domain.schemas.product import (
    FeaturedUpdate,
    ProductCreate,
    ProductFilter,
    ProductRead,
    ProductStatus,
    StatusUpdate,
    VoteRequest,
)
from producthunt.interfaces.api.deps import require_admin, require_staff
from producthunt.interfaces.deps import (
    get_app_settings,
    get_membership_repository,
    get_product_repository,
)

router = APIRouter(tags=["Products"])


@router.post("/products", status_code=status.HTTP_201_CREATED)
async def create_product(
    product_name: str = Form(..., alias="productName", min_length=1),
    owner_email: str = Form(..., alias="ownerEmail", min_length=3),
    description: Optional[str] = Form(None),
    tags: Optional[str] = Form(None),
    external_links: Optional[str] = Form(None, alias="externalLinks"),
    owner_name: Optional[str] = Form(None, alias="ownerName"),
    owner_image: Optional[str] = Form(None, alias="ownerImage"),
    product_image: Optional[UploadFile] = File(None, alias="productImage"),
    repo: ProductRepository = Depends(get_product_repository),
    memberships: MembershipRepository = Depends(get_membership_repository),
    settings: Settings = Depends(get_app_settings),
):
    image = None
    if product_image is not None:
        image = encode_image(await product_image.read())

    data = ProductCreate(
        name=product_name,
        description=description,
        image=image,
        tags=parse_tags(tags),
        external_links=external_links,
        owner_name=owner_name,
        owner_email=owner_email,
        owner_image=owner_image,
    )
    product = submit_product(repo, memberships, settings, data)
    return {"message": "Product added successfully", "product": ProductRead.model_validate(product)}


@router.get("/products")
def all_products(
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    search: Optional[str] = None,
    tag: Optional[str] = None,
    status: Optional[ProductStatus] = None,
    repo: ProductRepository = Depends(get_product_repository),
    settings: Settings = Depends(get_app_settings),
):
    filters = ProductFilter(
        search=search,
        tag=tag,
        status=status,
        page=page,
        limit=limit or settings.DEFAULT_PAGE_SIZE,
    )
    result = list_products(repo, settings, filters)
    return {
        "total": result["total"],
        "page": result["page"],
        "limit": result["limit"],
        "products": [ProductRead.model_validate(p) for p in result["items"]],
    }


@router.get("/products/rising")
def rising_products(
    repo: ProductRepository = Depends(get_product_repository),
    settings: Settings = Depends(get_app_settings),
):
    products = list_rising(repo, settings)
    return {"success": True, "risingProducts": [ProductRead.model_validate(p) for p in products]}


@router.get("/products/featured")
def featured_products(repo: ProductRepository = Depends(get_product_repository)):
    return {"success": True, "featuredProducts": [ProductRead.model_validate(p) for p in list_featured(repo)]}


@router.get("/myproducts", response_model=list[ProductRead])
def my_products(
    email: str = Query(..., min_length=3),
    repo: ProductRepository = Depends(get_product_repository),
):
    return [ProductRead.model_validate(p) for p in list_owned(repo, email)]


@router.get("/reported-products", response_model=list[ProductRead])
def reported_products(
    repo: ProductRepository = Depends(get_product_repository),
    staff: User = Depends(require_staff),
):
    return [ProductRead.model_validate(p) for p in list_reported(repo)]


@router.get("/products/{product_id}", response_model=ProductRead)
def product_detail(product_id: int, repo: ProductRepository = Depends(get_product_repository)):
    return ProductRead.model_validate(get_product(repo, product_id))


@router.patch("/products/{product_id}/upvote")
def upvote(
    product_id: int,
    body: VoteRequest,
    repo: ProductRepository = Depends(get_product_repository),
):
    votes = upvote_product(repo, product_id, body.user_id)
    return {"success": True, "updatedVotes": votes}


def _change_status(product_id: int, body: StatusUpdate, repo: ProductRepository) -> dict:
    product = set_status(repo, product_id, body.status)
    return {
        "success": True,
        "message": f"Product marked {product.status}",
        "product": ProductRead.model_validate(product),
    }


@router.patch("/products/{product_id}/status")
def update_status(
    product_id: int,
    body: StatusUpdate,
    repo: ProductRepository = Depends(get_product_repository),
    admin: User = Depends(require_admin),
):
    return _change_status(product_id, body, repo)


@router.patch("/products/approve/{product_id}")
def approve(
    product_id: int,
    body: StatusUpdate,
    repo: ProductRepository = Depends(get_product_repository),
    admin: User = Depends(require_admin),
):
    return _change_status(product_id, body, repo)


@router.patch("/products/{product_id}/featured")
def feature(
    product_id: int,
    body: FeaturedUpdate,
    repo: ProductRepository = Depends(get_product_repository),
    staff: User = Depends(require_staff),
):
    product = set_featured(repo, product_id, body.featured)
    return {"success": True, "product": ProductRead.model_validate(product)}


@router.delete("/products/{product_id}")
def remove_product(product_id: int, repo: ProductRepository = Depends(get_product_repository)):
    delete_product(repo, product_id)
    return {"message": "Product deleted successfully"}
