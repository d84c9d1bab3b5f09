"""
SQLAlchemy-based Product repository.
"""

from __future__ import annotations

import math
from typing import Any, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from storefront.db.errors import NotFound
from storefront.models.product import Product
from storefront.models.store import Store
from storefront.repos.base import SqlAlchemyRepo

__all__ = ["SqlAlchemyProductRepo"]

_UPDATABLE_FIELDS = frozenset({"name", "price"})


def _check_price(price: Any) -> float:
    if isinstance(price, bool) or not isinstance(price, (int, float)) or not math.isfinite(price):
        raise ValueError("price must be a finite number")
    return float(price)


class SqlAlchemyProductRepo(SqlAlchemyRepo):
    """
    Concrete Product repository using SQLAlchemy ORM.
    """

    def create(self, *, name: str, price: float, store_id: int) -> Product:
        if not isinstance(name, str) or not name.strip():
            raise ValueError("name must be a non-empty string")
        product = Product(name=name.strip(), price=_check_price(price), store_id=int(store_id))
        self.session.add(product)
        self._commit(product)
        return product

    def list_with_store(self) -> Sequence[Product]:
        stmt = (
            select(Product)
            .options(selectinload(Product.store).selectinload(Store.user))
            .order_by(Product.id.desc())
        )
        return self._all(stmt)

    def get_by_id(self, product_id: int) -> Optional[Product]:
        return self._get(Product, product_id)

    def get_detail(self, product_id: int) -> Optional[Product]:
        stmt = (
            select(Product)
            .where(Product.id == int(product_id))
            .options(selectinload(Product.store).selectinload(Store.user))
        )
        return self._first(stmt)

    def update(self, product_id: int, **fields: Any) -> Product:
        unknown = set(fields) - _UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Unsupported product field(s): {', '.join(sorted(unknown))}")
        if "price" in fields:
            fields["price"] = _check_price(fields["price"])

        product = self.get_by_id(product_id)
        if product is None:
            raise NotFound("Product", product_id)
        for key, value in fields.items():
            setattr(product, key, value)
        self._commit(product)
        return product

    def delete(self, product_id: int) -> None:
        product = self.get_by_id(product_id)
        if product is None:
            raise NotFound("Product", product_id)
        self.session.delete(product)
        self._commit()
