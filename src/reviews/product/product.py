"""Product aggregate — the rating counters a product carries for its reviews.

Products are owned by the catalogue. This context keeps only the fields it
reads and writes: a display name and the denormalized ``ratings_average``
and ``ratings_quantity`` counters, which are overwritten every time a review
of the product is written, revised or deleted.
"""

from protean import atomic_change
from protean.fields import Float, Integer, String

from reviews.domain import reviews
from reviews.product.events import ProductRatingsRecalculated

# Counters a product carries while it has no reviews.
# TODO: 4.5 reads like a development placeholder; confirm with catalogue
# whether an unrated product should advertise an average at all.
DEFAULT_RATINGS_AVERAGE = 4.5
DEFAULT_RATINGS_QUANTITY = 0


@reviews.aggregate
class Product:
    name = String(required=True, max_length=200)
    ratings_average = Float(default=DEFAULT_RATINGS_AVERAGE, min_value=1.0, max_value=5.0)
    ratings_quantity = Integer(default=DEFAULT_RATINGS_QUANTITY, min_value=0)

    def update_ratings(self, average, quantity):
        """Overwrite both rating counters."""
        with atomic_change(self):
            self.ratings_average = average
            self.ratings_quantity = quantity

        self.raise_(
            ProductRatingsRecalculated(
                product_id=str(self.id),
                ratings_average=self.ratings_average,
                ratings_quantity=self.ratings_quantity,
            )
        )
