"""CreateReview — write a new review and refresh its product's ratings."""

from protean.fields import Float, Identifier, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from reviews.domain import reviews
from reviews.review.review import Review
from reviews.review.stats import RatingStats
from reviews.utils.logging import get_logger

logger = get_logger(__name__)


@reviews.command(part_of="Review")
class CreateReview:
    product_id = Identifier(required=True)
    user_id = Identifier(required=True)
    rating = Float(required=True)
    review_text = Text(required=True)


@reviews.command_handler(part_of=Review)
class CreateReviewHandler:
    @handle(CreateReview)
    def create_review(self, command):
        review = Review.write(
            product_id=command.product_id,
            user_id=command.user_id,
            rating=command.rating,
            review_text=command.review_text,
        )
        current_domain.repository_for(Review).add(review)
        logger.info(
            "Review created",
            review_id=str(review.id),
            product_id=str(review.product_id),
            user_id=str(review.user_id),
        )

        # The new review must be stored before it can be counted
        RatingStats.for_domain(current_domain).recompute(review.product_id)
        return str(review.id)
