# app/services/product_service.py
import math
from typing import Any, Dict, List

from app.repos.product_repo import ProductRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


def parse_limit(raw: str | None) -> int | None:
    """
    Listing cap from the query string.
    Missing, non-numeric or negative -> None (no cap). Blank counts as 0.
    Fractions round down.
    """
    if raw is None:
        return None
    if not raw.strip():
        return 0
    try:
        value = float(raw)
    except ValueError:
        return None
    if math.isnan(value) or math.isinf(value) or value < 0:
        return None
    return int(value)


class ProductService:
    def __init__(self, repo: ProductRepo):
        self.repo = repo

    #query
    def list_products(self, limit: int | None = None) -> List[Dict[str, Any]]:
        products = self.repo.list_products()
        return products if limit is None else products[:limit]

    def get_product(self, product_id: str) -> Dict[str, Any] | None:
        product = self.repo.get_product(product_id)
        if product is None:
            logger.warning(f"Product {product_id} not found")
        return product

    #commands
    def create_product(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.repo.create_product(data)

    def update_product(self, product_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        return self.repo.update_product(product_id, updates)

    def delete_product(self, product_id: str) -> Dict[str, Any]:
        return self.repo.delete_product(product_id)
