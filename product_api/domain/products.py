"""Domain helpers for product records: input schemas, id parsing and allocation."""
from __future__ import annotations

import re
from typing import Annotated, Any, Mapping, Optional, Sequence, Union

from pydantic import AllowInfNan, BaseModel, ConfigDict, StrictBool, StrictInt, StrictStr, Strict, field_validator

PRODUCT_ID_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
# int() refuses longer decimal strings by default
MAX_ID_DIGITS = 4300

Price = Union[StrictInt, Annotated[float, Strict(), AllowInfNan(False)]]


class Product(BaseModel):
    """A persisted product record."""

    id: int
    name: str
    price: Union[int, float]
    inStock: bool

    def to_record(self) -> dict:
        return self.model_dump()


class ProductCreate(BaseModel):
    """Body accepted by POST /products; every field is required."""

    model_config = ConfigDict(extra="ignore")

    name: StrictStr
    price: Price
    inStock: StrictBool


class ProductUpdate(BaseModel):
    """Body accepted by PUT /products/{id}; fields are optional but never null."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[StrictStr] = None
    price: Optional[Price] = None
    inStock: Optional[StrictBool] = None

    @field_validator("name", "price", "inStock", mode="before")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        # defaults are not validated, so this only fires on explicit nulls
        if value is None:
            raise ValueError("null is not allowed")
        return value

    @field_validator("name")
    @classmethod
    def _reject_empty_name(cls, value: str) -> str:
        if not value:
            raise ValueError("name must not be empty")
        return value

    def changes(self) -> dict:
        return self.model_dump(include=self.model_fields_set)


def _blank_name(value: Any) -> bool:
    if value is None or value == "":
        return True
    return isinstance(value, (int, float)) and value == 0


def missing_fields(payload: Mapping[str, Any]) -> list[str]:
    """Return the required fields that are absent; a blank name (null, "", 0, false) counts as absent."""
    missing = [field for field in ("price", "inStock") if field not in payload]
    if _blank_name(payload.get("name")):
        missing.insert(0, "name")
    return missing


def parse_product_id(raw: str | None) -> int | None:
    """Parse the leading integer of a path segment ("12abc" is 12), or None if there is none."""
    match = PRODUCT_ID_PATTERN.match((raw or "").strip())
    if not match:
        return None
    digits = match.group()
    if len(digits.lstrip("+-")) > MAX_ID_DIGITS:
        return None
    return int(digits)


def next_id(products: Sequence[Mapping[str, Any]]) -> int:
    """1 for an empty collection, otherwise one past the highest id."""
    if not products:
        return 1
    return max(int(product["id"]) for product in products) + 1


def find_index(products: Sequence[Mapping[str, Any]], product_id: int) -> int | None:
    for idx, product in enumerate(products):
        if product.get("id") == product_id:
            return idx
    return None


def is_in_stock(product: Mapping[str, Any]) -> bool:
    return product.get("inStock") is True
