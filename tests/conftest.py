import pytest
from fastapi.testclient import TestClient

from app.api import create_app
from app.data.json_store import close_stores, open_store
from app.repos.cart_repo import CartRepo
from app.repos.product_repo import ProductRepo


@pytest.fixture(autouse=True)
def reset_store_registry():
    yield
    close_stores()


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / "data"


@pytest.fixture
def product_repo(data_dir):
    return ProductRepo(open_store(data_dir / "products.json"))


@pytest.fixture
def cart_repo(data_dir):
    return CartRepo(open_store(data_dir / "carts.json"))


@pytest.fixture
def product_input():
    return {
        "title": "T",
        "description": "D",
        "code": "C1",
        "price": 10,
        "stock": 2,
        "category": "X",
    }


@pytest.fixture
def app(data_dir):
    return create_app(data_dir)


@pytest.fixture
def test_client(app):
    with TestClient(app) as client:
        yield client
