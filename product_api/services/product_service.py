"""Product use cases: list, filter, create, partial update, delete."""

from __future__ import annotations

import logging
import threading
from contextlib import nullcontext
from typing import Any, ContextManager

from pydantic import ValidationError

from product_api.core.errors import (
    INVALID_BODY_MESSAGE,
    PersistenceError,
    ProductNotFoundError,
    ProductValidationError,
)
from product_api.domain.products import (
    Product,
    ProductCreate,
    ProductUpdate,
    find_index,
    is_in_stock,
    missing_fields,
    next_id,
    parse_product_id,
)
from product_api.repositories.base import ProductRepository

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Missing required fields. Please provide name, price, and inStock."
INVALID_TYPES_MESSAGE = (
    "Invalid data types. Name should be string, price should be number, inStock should be boolean."
)
INVALID_ID_MESSAGE = "Invalid product ID"
DELETED_MESSAGE = "Product deleted successfully"
UPDATE_TYPE_MESSAGES = {
    "name": "Name must be a string",
    "price": "Price must be a number",
    "inStock": "inStock must be a boolean",
}


def _as_object(payload: Any) -> dict:
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ProductValidationError(INVALID_BODY_MESSAGE)
    return payload


def _require_id(raw_id: str) -> int:
    product_id = parse_product_id(raw_id)
    if product_id is None:
        raise ProductValidationError(INVALID_ID_MESSAGE)
    return product_id


class ProductService:
    """Read-modify-write operations over the whole product collection."""

    def __init__(self, repository: ProductRepository, *, serialize_writes: bool = False) -> None:
        self.repository = repository
        self._write_lock = threading.Lock() if serialize_writes else None

    def _writing(self) -> ContextManager:
        return self._write_lock if self._write_lock is not None else nullcontext()

    def list_all(self) -> list[dict]:
        return self.repository.load_all()

    def list_in_stock(self) -> list[dict]:
        return [product for product in self.repository.load_all() if is_in_stock(product)]

    def create(self, payload: Any) -> dict:
        data = _as_object(payload)
        if missing_fields(data):
            raise ProductValidationError(MISSING_FIELDS_MESSAGE)
        try:
            fields = ProductCreate.model_validate(data)
        except ValidationError:
            raise ProductValidationError(INVALID_TYPES_MESSAGE) from None

        with self._writing():
            products = self.repository.load_all()
            product = Product(id=next_id(products), **fields.model_dump()).to_record()
            products.append(product)
            if not self.repository.save_all(products):
                raise PersistenceError("Failed to save product")
        logger.info("Created product %s", product["id"])
        return product

    def update(self, raw_id: str, payload: Any) -> dict:
        product_id = _require_id(raw_id)
        data = _as_object(payload)
        try:
            changes = ProductUpdate.model_validate(data).changes()
        except ValidationError as exc:
            field = exc.errors()[0]["loc"][0]
            raise ProductValidationError(UPDATE_TYPE_MESSAGES.get(field, INVALID_TYPES_MESSAGE)) from None

        with self._writing():
            products = self.repository.load_all()
            idx = find_index(products, product_id)
            if idx is None:
                raise ProductNotFoundError()
            products[idx].update(changes)
            if not self.repository.save_all(products):
                raise PersistenceError("Failed to update product")
        logger.info("Updated product %s (%s)", product_id, ", ".join(sorted(changes)) or "no changes")
        return products[idx]

    def delete(self, raw_id: str) -> str:
        product_id = _require_id(raw_id)
        with self._writing():
            products = self.repository.load_all()
            idx = find_index(products, product_id)
            if idx is None:
                raise ProductNotFoundError()
            del products[idx]
            if not self.repository.save_all(products):
                raise PersistenceError("Failed to delete product")
        logger.info("Deleted product %s", product_id)
        return DELETED_MESSAGE
