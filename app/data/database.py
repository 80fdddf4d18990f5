# app/data/database.py
from pathlib import Path

from fastapi import Request

from app.data.json_store import JsonDocumentStore, open_store
from app.repos.cart_repo import CartRepo
from app.repos.product_repo import ProductRepo
from app.utils.settings import CARTS_FILE, DATA_DIR, PRODUCTS_FILE
from app.utils.logging import get_logger

logger = get_logger(__name__)


class Storage:
    """The two documents backing the service, opened once at startup."""

    def __init__(self, products: JsonDocumentStore, carts: JsonDocumentStore):
        self.products = products
        self.carts = carts


def init_storage(data_dir: str | Path | None = None) -> Storage:
    root = Path(data_dir or DATA_DIR)
    storage = Storage(
        products=open_store(root / PRODUCTS_FILE),
        carts=open_store(root / CARTS_FILE),
    )
    logger.info(f"Storage ready in {root.resolve()}")
    return storage


def get_product_repo(request: Request) -> ProductRepo:
    return ProductRepo(request.app.state.storage.products)


def get_cart_repo(request: Request) -> CartRepo:
    return CartRepo(request.app.state.storage.carts)
