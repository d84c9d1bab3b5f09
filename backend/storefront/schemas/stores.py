"""
Pydantic models for creating, updating and reading Stores.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict

from pydantic import model_validator

from storefront.core.validation import clean_text, parse_id
from storefront.schemas.common import CamelModel, ORMBase, require_object

__all__ = ["StoreCreate", "StoreUpdate", "StoreOut"]


class StoreCreate(CamelModel):
    name: str
    user_id: int

    @model_validator(mode="before")
    @classmethod
    def _validate_raw(cls, data: Any) -> Dict[str, Any]:
        data = require_object(data)
        name = clean_text(data.get("name"))
        user_id = parse_id(data.get("userId"))
        if name is None or user_id is None:
            raise ValueError("Required fields: name (string), userId (number > 0).")
        return {"name": name, "user_id": user_id}


class StoreUpdate(CamelModel):
    name: str

    @model_validator(mode="before")
    @classmethod
    def _validate_raw(cls, data: Any) -> Dict[str, Any]:
        data = require_object(data)
        name = clean_text(data.get("name"))
        if name is None:
            raise ValueError("Field name is required for update.")
        return {"name": name}


class StoreOut(ORMBase):
    id: int
    name: str
    user_id: int
    created_at: datetime
    updated_at: datetime
