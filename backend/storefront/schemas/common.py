"""
Shared Pydantic base classes and small response models.

ORMBase reads attributes from SQLAlchemy objects and serializes field names in
camelCase (user_id -> userId, created_at -> createdAt).
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

__all__ = ["ORMBase", "CamelModel", "ErrorResponse", "HealthOut", "require_object"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ORMBase(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Human-readable error message")


class HealthOut(BaseModel):
    ok: bool = True
    uptime: float = Field(..., ge=0, description="Seconds since the process started")


def require_object(data: Any) -> Dict[str, Any]:
    """Reject request bodies that are not JSON objects."""
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object.")
    return data
