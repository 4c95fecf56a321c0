import pytest
from fastapi.testclient import TestClient

from product_api.config import Settings
from product_api.database import ProductStore
from product_api.main import create_app


@pytest.fixture()
def store():
    return ProductStore(seed=True)


@pytest.fixture()
def client(store):
    """A client on a fresh app with the three seed products and no API key."""
    return TestClient(create_app(Settings(), store))
