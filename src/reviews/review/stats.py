"""RatingStats — derives a product's rating counters from its reviews.

Counts the reviews stored for a product and averages their ratings, then
writes both numbers onto the Product. A product without reviews is reset
to the empty-product defaults.

The repositories are passed in by the caller, so the same aggregation runs
against whatever provider the domain is configured with.
"""

from protean.exceptions import ObjectNotFoundError

from reviews.product.product import (
    DEFAULT_RATINGS_AVERAGE,
    DEFAULT_RATINGS_QUANTITY,
    Product,
)
from reviews.review.review import Review
from reviews.utils.logging import get_logger

logger = get_logger(__name__)

PAGE_SIZE = 100


class RatingStats:
    def __init__(self, review_repo, product_repo, empty_average=DEFAULT_RATINGS_AVERAGE):
        self._review_repo = review_repo
        self._product_repo = product_repo
        self._empty_average = empty_average

    @classmethod
    def for_domain(cls, domain):
        """Build a RatingStats wired to the domain's Review and Product repositories."""
        return cls(domain.repository_for(Review), domain.repository_for(Product))

    def _ratings_for(self, product_id):
        offset = 0
        while True:
            page = (
                self._review_repo._dao.query.filter(product_id=product_id)
                .order_by("id")
                .offset(offset)
                .limit(PAGE_SIZE)
                .all()
            )
            for review in page.items:
                yield review.rating

            if len(page.items) < PAGE_SIZE:
                return
            offset += PAGE_SIZE

    def summarize(self, product_id):
        """Return ``(average, quantity)`` over the reviews stored for a product."""
        quantity = 0
        total = 0.0
        for rating in self._ratings_for(str(product_id)):
            quantity += 1
            total += rating

        if quantity == 0:
            return self._empty_average, DEFAULT_RATINGS_QUANTITY

        return total / quantity, quantity

    def recompute(self, product_id):
        """Write the current average and count onto the product.

        An id with no stored product is a no-op, like an update-by-id
        that matches nothing. Returns the ``(average, quantity)`` computed.
        """
        product_id = str(product_id)
        average, quantity = self.summarize(product_id)

        try:
            product = self._product_repo.get(product_id)
        except ObjectNotFoundError:
            logger.warning(
                "Skipping rating update for unknown product",
                product_id=product_id,
                ratings_average=average,
                ratings_quantity=quantity,
            )
            return average, quantity

        product.update_ratings(average, quantity)
        self._product_repo.add(product)

        logger.info(
            "Product ratings recomputed",
            product_id=product_id,
            ratings_average=average,
            ratings_quantity=quantity,
        )
        return average, quantity
