"""
Pydantic models for creating, updating and reading Users.

Request models validate the raw JSON body in a "before" hook so that every
rejection carries a single readable message.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import model_validator

from storefront.core.validation import clean_text
from storefront.schemas.common import CamelModel, ORMBase, require_object

__all__ = ["UserCreate", "UserUpdate", "UserOut"]


class UserCreate(CamelModel):
    """
    New user. email is stored trimmed, so " a@x.com" and "a@x.com" are the same
    address and the second one is rejected by the unique index.
    """

    email: str
    name: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _validate_raw(cls, data: Any) -> Dict[str, Any]:
        data = require_object(data)
        email = clean_text(data.get("email"))
        if email is None:
            raise ValueError("Required field: email (string).")
        name = data.get("name")
        if name is not None and not isinstance(name, str):
            raise ValueError("Field name must be a string.")
        return {"email": email, "name": name}


class UserUpdate(CamelModel):
    """
    Partial update. Only recognized fields with usable values are kept:
    email when it is a non-empty string, name when it is a string.
    """

    email: Optional[str] = None
    name: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _validate_raw(cls, data: Any) -> Dict[str, Any]:
        data = require_object(data)
        changes: Dict[str, Any] = {}
        email = clean_text(data.get("email"))
        if email is not None:
            changes["email"] = email
        if isinstance(data.get("name"), str):
            changes["name"] = data["name"]
        if not changes:
            raise ValueError("Provide at least one field (email, name).")
        return changes

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class UserOut(ORMBase):
    id: int
    email: str
    name: Optional[str] = None
    created_at: datetime
    updated_at: datetime
