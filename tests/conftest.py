import os
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Selects the protean config overlay and keeps log files out of the test run
    (both must be set before ``storefront.domain`` is first imported), then
    initializes the domain and pushes its context. The activated domain can
    then be referred to elsewhere as `current_domain`.
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env
    os.environ.setdefault("LOG_DIR", "")

    from storefront.bootstrap import init_storefront

    storefront = init_storefront()
    storefront.domain_context().push()


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session", autouse=True)
def setup_db():
    from storefront.domain import storefront
    from storefront.utils.db import drop_db, setup_db

    setup_db(storefront)

    yield

    drop_db(storefront)


@pytest.fixture(autouse=True)
def run_around_tests():
    """Fixture to automatically cleanup infrastructure after every test"""
    yield

    from protean import current_domain

    # Clear all databases
    for _, provider in current_domain.providers.items():
        provider._data_reset()

    # Drain event stores
    current_domain.event_store.store._data_reset()


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------
@pytest.fixture()
def make_product():
    """Store a product directly; ``age`` pushes created_at into the past."""
    from protean import current_domain
    from storefront.catalogue.product.product import Product

    base = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)

    def _make(name="Test Product", price=10.0, age=0, **kwargs):
        product = Product.create(
            name=name,
            price=price,
            created_at=base - timedelta(minutes=age),
            **kwargs,
        )
        current_domain.repository_for(Product).add(product)
        return product

    return _make


@pytest.fixture()
def make_user():
    from storefront.identity.registration import register_user

    def _make(email="shopper@example.com", password="secret123", **kwargs):
        return register_user(email=email, password=password, **kwargs)

    return _make


@pytest.fixture()
def user_id():
    return "user-001"


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------
@pytest.fixture()
def client():
    """TestClient over the application module served in production."""
    from app import app
    from fastapi.testclient import TestClient

    return TestClient(app)


@pytest.fixture()
def auth_headers(client):
    """Register a shopper through the API and return their bearer header."""
    response = client.post(
        "/auth/register",
        json={"email": "shopper@example.com", "password": "secret123", "firstName": "Sam", "lastName": "Shopper"},
    )
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['token']}"}
