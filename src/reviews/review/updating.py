"""UpdateReview — revise the text or rating of an existing review.

The review is loaded first so its product is known, then revised and
saved, and only then are the product's ratings recomputed.
"""

from protean.fields import Float, Identifier, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from reviews.domain import reviews
from reviews.review.review import Review
from reviews.review.stats import RatingStats
from reviews.utils.logging import get_logger

logger = get_logger(__name__)


@reviews.command(part_of="Review")
class UpdateReview:
    review_id = Identifier(required=True)
    review_text = Text()
    rating = Float()


@reviews.command_handler(part_of=Review)
class UpdateReviewHandler:
    @handle(UpdateReview)
    def update_review(self, command):
        repo = current_domain.repository_for(Review)
        review = repo.get(command.review_id)
        product_id = review.product_id

        kwargs = {}
        if command.review_text is not None:
            kwargs["review_text"] = command.review_text
        if command.rating is not None:
            kwargs["rating"] = command.rating

        review.revise(**kwargs)
        repo.add(review)
        logger.info(
            "Review updated",
            review_id=str(review.id),
            product_id=str(product_id),
            fields=sorted(kwargs),
        )

        RatingStats.for_domain(current_domain).recompute(product_id)
