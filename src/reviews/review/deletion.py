"""DeleteReview — delete a review and refresh its product's ratings."""

from protean.fields import Identifier
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from reviews.domain import reviews
from reviews.review.review import Review
from reviews.review.stats import RatingStats
from reviews.utils.logging import get_logger

logger = get_logger(__name__)


@reviews.command(part_of="Review")
class DeleteReview:
    review_id = Identifier(required=True)


@reviews.command_handler(part_of=Review)
class DeleteReviewHandler:
    @handle(DeleteReview)
    def delete_review(self, command):
        repo = current_domain.repository_for(Review)
        review = repo.get(command.review_id)

        # Nothing is left to read the product from once the review is gone
        product_id = review.product_id

        repo._dao.delete(review)
        logger.info(
            "Review deleted",
            review_id=str(command.review_id),
            product_id=str(product_id),
        )

        RatingStats.for_domain(current_domain).recompute(product_id)
