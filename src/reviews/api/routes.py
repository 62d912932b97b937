"""FastAPI routes for the Reviews bounded context.

Writes go through Protean commands so every change to a review is followed
by a recompute of the product's ratings. Reads load aggregates straight
from their repositories.
"""

from fastapi import APIRouter, Query
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from reviews.api.schemas import (
    CreateReviewRequest,
    ProductRatingsResponse,
    ReviewIdResponse,
    ReviewResponse,
    StatusResponse,
    UpdateReviewRequest,
)
from reviews.product.product import Product
from reviews.review.creation import CreateReview
from reviews.review.deletion import DeleteReview
from reviews.review.review import Review
from reviews.review.updating import UpdateReview
from reviews.user.user import User

review_router = APIRouter(prefix="/reviews", tags=["reviews"])
product_router = APIRouter(prefix="/products", tags=["products"])


def _author_of(review):
    try:
        return current_domain.repository_for(User).get(str(review.user_id))
    except ObjectNotFoundError:
        return None


def _present(review, include_created_at, include_user):
    user = _author_of(review) if include_user else None
    return ReviewResponse.from_review(review, include_created_at=include_created_at, user=user)


@review_router.post("", status_code=201, response_model=ReviewIdResponse)
async def create_review(body: CreateReviewRequest) -> ReviewIdResponse:
    """Write a new review for a product."""
    command = CreateReview(
        product_id=body.product_id,
        user_id=body.user_id,
        rating=body.rating,
        review_text=body.review_text,
    )
    review_id = current_domain.process(command, asynchronous=False)
    return ReviewIdResponse(review_id=review_id)


@review_router.get("", response_model=list[ReviewResponse], response_model_exclude_none=True)
async def list_reviews(
    product_id: str,
    include_created_at: bool = False,
    include_user: bool = False,
    offset: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
) -> list[ReviewResponse]:
    """List the reviews of a product."""
    results = (
        current_domain.repository_for(Review)
        ._dao.query.filter(product_id=product_id)
        .order_by("-created_at")
        .offset(offset)
        .limit(limit)
        .all()
    )
    return [_present(review, include_created_at, include_user) for review in results.items]


@review_router.get("/{review_id}", response_model=ReviewResponse, response_model_exclude_none=True)
async def get_review(
    review_id: str,
    include_created_at: bool = False,
    include_user: bool = False,
) -> ReviewResponse:
    """Fetch a single review."""
    review = current_domain.repository_for(Review).get(review_id)
    return _present(review, include_created_at, include_user)


@review_router.patch("/{review_id}", response_model=StatusResponse)
async def update_review(review_id: str, body: UpdateReviewRequest) -> StatusResponse:
    """Change the text or rating of a review."""
    command = UpdateReview(
        review_id=review_id,
        review_text=body.review_text,
        rating=body.rating,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@review_router.delete("/{review_id}", response_model=StatusResponse)
async def delete_review(review_id: str) -> StatusResponse:
    """Delete a review."""
    current_domain.process(DeleteReview(review_id=review_id), asynchronous=False)
    return StatusResponse()


@product_router.get("/{product_id}/ratings", response_model=ProductRatingsResponse)
async def get_product_ratings(product_id: str) -> ProductRatingsResponse:
    """Current rating counters of a product."""
    product = current_domain.repository_for(Product).get(product_id)
    return ProductRatingsResponse(
        product_id=str(product.id),
        ratings_average=product.ratings_average,
        ratings_quantity=product.ratings_quantity,
    )
