"""
Pydantic models for creating, updating and reading Products.

Prices arrive as JSON numbers or numeric strings and must be finite.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import model_validator

from storefront.core.validation import clean_text, parse_id, parse_price
from storefront.schemas.common import CamelModel, ORMBase, require_object

__all__ = ["ProductCreate", "ProductUpdate", "ProductOut"]


class ProductCreate(CamelModel):
    name: str
    price: float
    store_id: int

    @model_validator(mode="before")
    @classmethod
    def _validate_raw(cls, data: Any) -> Dict[str, Any]:
        data = require_object(data)
        name = clean_text(data.get("name"))
        price = parse_price(data.get("price"))
        store_id = parse_id(data.get("storeId"))
        if name is None or price is None or store_id is None:
            raise ValueError("Required fields: name (string), price (number), storeId (number > 0).")
        return {"name": name, "price": price, "store_id": store_id}


class ProductUpdate(CamelModel):
    name: Optional[str] = None
    price: Optional[float] = None

    @model_validator(mode="before")
    @classmethod
    def _validate_raw(cls, data: Any) -> Dict[str, Any]:
        data = require_object(data)
        changes: Dict[str, Any] = {}
        name = clean_text(data.get("name"))
        if name is not None:
            changes["name"] = name
        if "price" in data:
            price = parse_price(data["price"])
            if price is None:
                raise ValueError("Invalid price.")
            changes["price"] = price
        if not changes:
            raise ValueError("Provide at least one field to update (name, price).")
        return changes

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class ProductOut(ORMBase):
    id: int
    name: str
    price: float
    store_id: int
    created_at: datetime
    updated_at: datetime
