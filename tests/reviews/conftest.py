import os

import pytest


@pytest.fixture(scope="session")
def _reviews_domain(request):
    """Initialize the reviews domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from reviews.domain import reviews

    reviews.init()
    return reviews


@pytest.fixture(scope="session", autouse=True)
def setup_db(_reviews_domain):
    from reviews.utils.db import drop_db, setup_db

    setup_db(_reviews_domain)

    yield

    drop_db(_reviews_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_reviews_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _reviews_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


@pytest.fixture()
def add_product():
    """Store a product the way the catalogue would have created it."""
    from protean import current_domain
    from reviews.product.product import Product

    def _add(product_id, name="Standing desk"):
        product = Product(id=product_id, name=name)
        current_domain.repository_for(Product).add(product)
        return product

    return _add


@pytest.fixture()
def add_user():
    from protean import current_domain
    from reviews.user.user import User

    def _add(user_id, name="Ada Lovelace", photo="ada.jpg"):
        user = User(id=user_id, name=name, photo=photo)
        current_domain.repository_for(User).add(user)
        return user

    return _add
