# app/services/cart_service.py
from typing import Any, Dict

from app.domain.errors import NotFoundError
from app.repos.cart_repo import CartRepo
from app.repos.product_repo import ProductRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Use cases for carts.
    add_product checks products.json before touching carts.json, so a cart
    never records a product id that did not exist at the moment of the call.
    There is no cross-file lock: a product deleted right after the check
    can still end up referenced.
    """

    def __init__(self, repo: CartRepo, product_repo: ProductRepo):
        self.repo = repo
        self.product_repo = product_repo

    #query
    def get_cart(self, cart_id: str) -> Dict[str, Any] | None:
        cart = self.repo.get_cart(cart_id)
        if cart is None:
            logger.warning(f"Cart {cart_id} not found")
        return cart

    #commands
    def create_cart(self) -> Dict[str, Any]:
        return self.repo.create_cart()

    def add_product(self, cart_id: str, product_id: str) -> Dict[str, Any]:
        if self.product_repo.get_product(product_id) is None:
            logger.warning(f"Refusing to add unknown product {product_id} to cart {cart_id}")
            raise NotFoundError(f"Product with id {product_id} not found")

        return self.repo.add_line(cart_id, product_id)
