"""
Read models with eagerly included relations.

- UserWithStore:  user + store (no products)          GET /users
- UserDetail:     user + store + store.products        GET /users/{id}
- StoreDetail:    store + owner + products             GET /stores/{id}
- ProductDetail:  product + store + store.user         GET /products, /products/{id}
"""

from __future__ import annotations

from typing import List, Optional

from storefront.schemas.products import ProductOut
from storefront.schemas.stores import StoreOut
from storefront.schemas.users import UserOut

__all__ = [
    "UserWithStore",
    "StoreWithProducts",
    "UserDetail",
    "StoreWithUser",
    "StoreDetail",
    "ProductDetail",
]


class UserWithStore(UserOut):
    store: Optional[StoreOut] = None


class StoreWithProducts(StoreOut):
    products: List[ProductOut] = []


class UserDetail(UserOut):
    store: Optional[StoreWithProducts] = None


class StoreWithUser(StoreOut):
    user: UserOut


class StoreDetail(StoreOut):
    user: UserOut
    products: List[ProductOut] = []


class ProductDetail(ProductOut):
    store: StoreWithUser
