"""User aggregate — the author of a review.

Users are owned by the identity service; reviews only hold their id and
the API shows their name and photo next to a review.
"""

from protean.fields import String

from reviews.domain import reviews

DEFAULT_PHOTO = "default.jpg"


@reviews.aggregate
class User:
    name = String(required=True, max_length=100)
    email = String(max_length=254)
    photo = String(max_length=500, default=DEFAULT_PHOTO)
