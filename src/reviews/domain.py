"""Reviews bounded context — product reviews and rating statistics.

Validates review records, links each review to one Product and one User,
and keeps the denormalized rating counters on the Product in sync with
the reviews stored for it.
"""

from protean.domain import Domain

from reviews.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
reviews = Domain(name="reviews")
