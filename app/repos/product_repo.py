# app/repos/product_repo.py
from typing import Any, Dict, List

from pydantic import ValidationError as PydanticValidationError

from app.data.ids import index_of, next_id
from app.data.json_store import JsonDocumentStore
from app.domain.errors import ConflictError, NotFoundError, ValidationError
from app.domain.schemas import ProductCreate, ProductUpdate, describe_validation_error
from app.utils.logging import get_logger

logger = get_logger(__name__)


class ProductRepo:
    """
    CRUD over products.json.
    Validation happens before the store guard is taken,
    `code` uniqueness and id allocation happen inside it.
    """

    def __init__(self, store: JsonDocumentStore):
        self.store = store

    def list_products(self) -> List[Dict[str, Any]]:
        return self.store.load()

    def get_product(self, product_id) -> Dict[str, Any] | None:
        products = self.store.load()
        index = index_of(products, str(product_id))
        return products[index] if index is not None else None

    def create_product(self, data: Dict[str, Any]) -> Dict[str, Any]:
        payload = dict(data)
        if payload.get("status") is None:
            payload["status"] = True
        if not isinstance(payload.get("thumbnails"), list):
            payload["thumbnails"] = []

        try:
            fields = ProductCreate.model_validate(payload).model_dump()
        except PydanticValidationError as e:
            message = describe_validation_error(e)
            logger.warning(f"Rejected product input: {message}")
            raise ValidationError(message) from e

        def insert(products):
            if any(p.get("code") == fields["code"] for p in products):
                raise ConflictError(f"Product with code {fields['code']} already exists")

            product = {"id": next_id(products), **fields}
            products.append(product)
            return products, product

        created = self.store.mutate(insert)
        logger.info(f"Created product {created['id']} (code {created['code']})")
        return created

    def update_product(self, product_id, updates: Dict[str, Any]) -> Dict[str, Any]:
        patch = dict(updates)
        patch.pop("id", None)

        try:
            changes = ProductUpdate.model_validate(patch).model_dump(exclude_unset=True)
        except PydanticValidationError as e:
            message = describe_validation_error(e)
            logger.warning(f"Rejected patch for product {product_id}: {message}")
            raise ValidationError(message) from e

        pid = str(product_id)

        def apply(products):
            index = index_of(products, pid)
            if index is None:
                raise NotFoundError(f"Product with id {product_id} not found")

            if "code" in changes and any(
                p.get("code") == changes["code"] and str(p.get("id")) != pid for p in products
            ):
                raise ConflictError(f"Product with code {changes['code']} already exists")

            # shallow overlay, thumbnails replaced wholesale
            updated = {**products[index], **changes}
            products[index] = updated
            return products, updated

        updated = self.store.mutate(apply)
        logger.info(f"Updated product {pid}: {sorted(changes)}")
        return updated

    def delete_product(self, product_id) -> Dict[str, Any]:
        pid = str(product_id)

        def remove(products):
            index = index_of(products, pid)
            if index is None:
                raise NotFoundError(f"Product with id {product_id} not found")
            removed = products.pop(index)
            return products, removed

        removed = self.store.mutate(remove)
        logger.info(f"Deleted product {pid}")
        return removed
