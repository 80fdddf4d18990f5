# app/repos/cart_repo.py
from typing import Any, Dict

from app.data.ids import index_of, next_id
from app.data.json_store import JsonDocumentStore
from app.domain.errors import NotFoundError
from app.utils.logging import get_logger

logger = get_logger(__name__)


class CartRepo:
    """
    Carts in carts.json. Knows nothing about products:
    callers check that a product exists before add_line.
    """

    def __init__(self, store: JsonDocumentStore):
        self.store = store

    def create_cart(self) -> Dict[str, Any]:
        def insert(carts):
            cart = {"id": next_id(carts), "products": []}
            carts.append(cart)
            return carts, cart

        created = self.store.mutate(insert)
        logger.info(f"Created cart {created['id']}")
        return created

    def get_cart(self, cart_id) -> Dict[str, Any] | None:
        carts = self.store.load()
        index = index_of(carts, str(cart_id))
        return carts[index] if index is not None else None

    def add_line(self, cart_id, product_id) -> Dict[str, Any]:
        cid, pid = str(cart_id), str(product_id)

        def merge(carts):
            index = index_of(carts, cid)
            if index is None:
                raise NotFoundError(f"Cart with id {cart_id} not found")

            cart = carts[index]
            lines = cart.setdefault("products", [])
            line = next((item for item in lines if item.get("product") == pid), None)
            if line:
                line["quantity"] += 1
                logger.info(f"Cart {cid}: product {pid} quantity -> {line['quantity']}")
            else:
                lines.append({"product": pid, "quantity": 1})
                logger.info(f"Cart {cid}: added product {pid}")
            return carts, cart

        return self.store.mutate(merge)
