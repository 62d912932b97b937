"""Domain events for the Product aggregate."""

from protean.fields import Float, Identifier, Integer

from reviews.domain import reviews


@reviews.event(part_of="Product")
class ProductRatingsRecalculated:
    """The rating counters of a product were recomputed from its reviews."""

    __version__ = "v1"

    product_id = Identifier(required=True)
    ratings_average = Float(required=True)
    ratings_quantity = Integer(required=True)
