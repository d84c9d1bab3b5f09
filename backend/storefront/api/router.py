"""
Shared API router.

- Aggregates sub-routers from storefront.api.routes.* modules.
- Uses no top-level prefix; each sub-router defines its own (/users, /stores, /products).

Sub-routers included:
- storefront.api.routes.health    -> /health
- storefront.api.routes.users     -> /users
- storefront.api.routes.stores    -> /stores
- storefront.api.routes.products  -> /products
"""

from __future__ import annotations

import importlib
from typing import List

from fastapi import APIRouter

__all__ = ["router", "INCLUDED_MODULES", "ROUTE_MODULES"]

ROUTE_MODULES = [
    "storefront.api.routes.health",
    "storefront.api.routes.users",
    "storefront.api.routes.stores",
    "storefront.api.routes.products",
]

router = APIRouter()


def _include_subrouter(parent: APIRouter, module_path: str) -> APIRouter:
    """
    Import a route module and include its 'router'.
    """
    module = importlib.import_module(module_path)
    sub = getattr(module, "router", None)
    if not isinstance(sub, APIRouter):
        raise TypeError(f"{module_path} does not define an APIRouter named 'router'")
    parent.include_router(sub)
    return sub


def _include_known_subrouters(parent: APIRouter) -> List[str]:
    included: List[str] = []
    for mod in ROUTE_MODULES:
        _include_subrouter(parent, mod)
        included.append(mod)
    return included


INCLUDED_MODULES = _include_known_subrouters(router)
