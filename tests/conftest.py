"""Pytest configuration for catalog tests."""

import logging

import pytest
from fastapi.testclient import TestClient

from catalog.api.server import create_app
from catalog.core.config import CatalogConfig
from catalog.data.product_store import ProductStore

TEST_API_KEY = "test-api-key"


@pytest.fixture
def config():
    return CatalogConfig(api_key=TEST_API_KEY, log_level="DEBUG")


@pytest.fixture
def store():
    """Fresh store with the three seed products for every test."""
    return ProductStore.with_seed_data()


@pytest.fixture
def app(config, store):
    return create_app(config=config, store=store)


@pytest.fixture
def client(app):
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def auth_headers():
    return {"x-api-key": TEST_API_KEY}


@pytest.fixture
def valid_product():
    return {
        "name": "Standing Desk",
        "description": "Height adjustable desk",
        "price": 399.5,
        "category": "Furniture",
        "inStock": True,
    }


# ---------------------------------------------------------------------------
# The "catalog" logger does not propagate to the root logger, so attach
# caplog's handler to it directly.
# ---------------------------------------------------------------------------

@pytest.fixture
def catalog_logs(caplog):
    catalog_logger = logging.getLogger("catalog")
    catalog_logger.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG, logger="catalog")
    yield caplog
    catalog_logger.removeHandler(caplog.handler)
