"""
Helpers shared by the entity handlers.
"""

from __future__ import annotations

from typing import Any

from storefront.core.errors import BadRequestError
from storefront.core.validation import parse_id

__all__ = ["require_id"]


def require_id(raw: Any) -> int:
    """Parse a path identifier or raise a 400 before any storage access."""
    ident = parse_id(raw)
    if ident is None:
        raise BadRequestError("Invalid id parameter.")
    return ident
