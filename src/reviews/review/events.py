"""Domain events for the Review aggregate."""

from protean.fields import DateTime, Float, Identifier, Text

from reviews.domain import reviews


@reviews.event(part_of="Review")
class ReviewWritten:
    """A user wrote a new review for a product."""

    __version__ = "v1"

    review_id = Identifier(required=True)
    product_id = Identifier(required=True)
    user_id = Identifier(required=True)
    rating = Float(required=True)
    written_at = DateTime(required=True)


@reviews.event(part_of="Review")
class ReviewRevised:
    """The text or rating of an existing review changed."""

    __version__ = "v1"

    review_id = Identifier(required=True)
    product_id = Identifier(required=True)
    review_text = Text()
    rating = Float()
    revised_at = DateTime(required=True)
