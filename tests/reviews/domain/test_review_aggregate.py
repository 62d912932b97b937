"""Tests for the Review aggregate: construction, revision and events."""

from datetime import datetime

from protean.utils import DomainObjects
from reviews.review.events import ReviewRevised, ReviewWritten
from reviews.review.review import Review


def _write_review(**overrides):
    defaults = {
        "product_id": "prod-001",
        "user_id": "user-001",
        "rating": 4,
        "review_text": "Sturdy, quiet and easy to assemble.",
    }
    defaults.update(overrides)
    return Review.write(**defaults)


class TestReviewConstruction:
    def test_element_type(self):
        assert Review.element_type == DomainObjects.AGGREGATE

    def test_write_sets_fields(self):
        review = _write_review()
        assert review.product_id == "prod-001"
        assert review.user_id == "user-001"
        assert review.rating == 4.0
        assert review.review_text == "Sturdy, quiet and easy to assemble."

    def test_write_generates_identity(self):
        review = _write_review()
        assert review.id is not None

    def test_created_at_defaults_to_now(self):
        review = Review(
            product_id="prod-001",
            user_id="user-001",
            rating=5,
            review_text="Exactly as described.",
        )
        assert isinstance(review.created_at, datetime)


class TestReviewWrittenEvent:
    def test_write_raises_event(self):
        review = _write_review()
        assert len(review._events) == 1
        assert isinstance(review._events[0], ReviewWritten)

    def test_event_carries_references(self):
        review = _write_review(rating=2)
        event = review._events[0]
        assert event.review_id == str(review.id)
        assert event.product_id == "prod-001"
        assert event.user_id == "user-001"
        assert event.rating == 2.0

    def test_event_version(self):
        review = _write_review()
        assert review._events[0].__version__ == "v1"


class TestReviewRevision:
    def test_revise_rating_only(self):
        review = _write_review(rating=2)
        review.revise(rating=4)
        assert review.rating == 4.0
        assert review.review_text == "Sturdy, quiet and easy to assemble."

    def test_revise_text_only(self):
        review = _write_review(rating=2)
        review.revise(review_text="Wobbles after a month.")
        assert review.review_text == "Wobbles after a month."
        assert review.rating == 2.0

    def test_revise_keeps_references(self):
        review = _write_review()
        review.revise(rating=1, review_text="Broke on day one.")
        assert review.product_id == "prod-001"
        assert review.user_id == "user-001"

    def test_revise_raises_event(self):
        review = _write_review(rating=2)
        review._events.clear()

        review.revise(rating=4)

        assert len(review._events) == 1
        event = review._events[0]
        assert isinstance(event, ReviewRevised)
        assert event.product_id == "prod-001"
        assert event.rating == 4.0
