"""Pydantic request/response schemas for the Reviews API.

These are separate from Protean commands (anti-corruption pattern).
The API layer is the external contract; commands are internal domain concepts.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class CreateReviewRequest(BaseModel):
    product_id: str
    user_id: str
    rating: float = Field(ge=1, le=5)
    review_text: str = Field(min_length=1)


class UpdateReviewRequest(BaseModel):
    review_text: str | None = Field(default=None, min_length=1)
    rating: float | None = Field(default=None, ge=1, le=5)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class ReviewIdResponse(BaseModel):
    review_id: str


class StatusResponse(BaseModel):
    status: str = "ok"


class ReviewerResponse(BaseModel):
    id: str
    name: str
    photo: str | None = None


class ReviewResponse(BaseModel):
    """External representation of a review.

    ``created_at`` and ``user`` are left out unless the caller asks for them.
    """

    id: str
    review_text: str
    rating: float
    product_id: str
    user_id: str
    created_at: datetime | None = None
    user: ReviewerResponse | None = None

    @classmethod
    def from_review(cls, review, include_created_at=False, user=None) -> ReviewResponse:
        return cls(
            id=str(review.id),
            review_text=review.review_text,
            rating=review.rating,
            product_id=str(review.product_id),
            user_id=str(review.user_id),
            created_at=review.created_at if include_created_at else None,
            user=ReviewerResponse(id=str(user.id), name=user.name, photo=user.photo) if user else None,
        )


class ProductRatingsResponse(BaseModel):
    product_id: str
    ratings_average: float
    ratings_quantity: int
