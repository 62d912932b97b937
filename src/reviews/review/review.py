"""Review aggregate — a user's rating and written feedback on a product.

A review belongs to exactly one Product and one User. Both references are
fixed when the review is written; afterwards only the text and the rating
can be revised. Whether the referenced Product and User actually exist is
not checked here.

Every write to a review changes the rating statistics of its product, so
reviews are only persisted through the command handlers in
``reviews.review.creation``, ``reviews.review.updating`` and
``reviews.review.deletion``, which recompute those statistics afterwards.
"""

from datetime import UTC, datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, Text

from reviews.domain import reviews
from reviews.review.events import ReviewRevised, ReviewWritten

MIN_RATING = 1
MAX_RATING = 5

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET = object()


def _utc_now():
    return datetime.now(UTC)


@reviews.aggregate
class Review:
    """A rating from 1 to 5 with accompanying text, written by a user about a product."""

    review_text = Text(required=True)
    rating = Float(required=True)
    created_at = DateTime(default=_utc_now)

    product_id = Identifier(required=True)
    user_id = Identifier(required=True)

    # -------------------------------------------------------------------
    # Invariants
    # -------------------------------------------------------------------
    @invariant.post
    def review_text_must_not_be_blank(self):
        if self.review_text is not None and len(self.review_text.strip()) == 0:
            raise ValidationError({"review_text": ["A review must have text"]})

    @invariant.post
    def rating_must_be_in_range(self):
        if self.rating is not None and not (MIN_RATING <= self.rating <= MAX_RATING):
            raise ValidationError({"rating": [f"Rating must be between {MIN_RATING} and {MAX_RATING}"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def write(cls, product_id, user_id, rating, review_text):
        """Write a new review. The review is not persisted yet."""
        now = _utc_now()

        review = cls(
            product_id=product_id,
            user_id=user_id,
            rating=rating,
            review_text=review_text,
            created_at=now,
        )

        review.raise_(
            ReviewWritten(
                review_id=str(review.id),
                product_id=str(review.product_id),
                user_id=str(review.user_id),
                rating=review.rating,
                written_at=now,
            )
        )

        return review

    # -------------------------------------------------------------------
    # Revision
    # -------------------------------------------------------------------
    def revise(self, review_text=_UNSET, rating=_UNSET):
        """Change the text and/or the rating in place."""
        with atomic_change(self):
            if review_text is not _UNSET:
                self.review_text = review_text
            if rating is not _UNSET:
                self.rating = rating

        self.raise_(
            ReviewRevised(
                review_id=str(self.id),
                product_id=str(self.product_id),
                review_text=self.review_text,
                rating=self.rating,
                revised_at=_utc_now(),
            )
        )
