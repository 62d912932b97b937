"""Reviews domain API package."""

from reviews.api.routes import product_router, review_router

__all__ = ["review_router", "product_router"]
