# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from bootique.config import DEFAULT_CATALOG
from bootique.database import BasketStore, ProductStore
from bootique.main import create_app


@pytest.fixture
def products():
    return ProductStore(DEFAULT_CATALOG)


@pytest.fixture
def baskets():
    return BasketStore()


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    return TestClient(app)
