"""
SQLAlchemy-based Store repository.

A user owns at most one store: the unique index on store.user_id rejects a
second store with UniqueViolation, and a missing owner fails the foreign key
with ForeignKeyViolation.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from storefront.db.errors import NotFound
from storefront.models.store import Store
from storefront.repos.base import SqlAlchemyRepo

__all__ = ["SqlAlchemyStoreRepo"]


class SqlAlchemyStoreRepo(SqlAlchemyRepo):
    """
    Concrete Store repository using SQLAlchemy ORM.
    """

    def create(self, *, name: str, user_id: int) -> Store:
        if not isinstance(name, str) or not name.strip():
            raise ValueError("name must be a non-empty string")
        store = Store(name=name.strip(), user_id=int(user_id))
        self.session.add(store)
        self._commit(store)
        return store

    def get_by_id(self, store_id: int) -> Optional[Store]:
        return self._get(Store, store_id)

    def get_detail(self, store_id: int) -> Optional[Store]:
        stmt = (
            select(Store)
            .where(Store.id == int(store_id))
            .options(selectinload(Store.user), selectinload(Store.products))
        )
        return self._first(stmt)

    def update(self, store_id: int, *, name: str) -> Store:
        if not isinstance(name, str) or not name.strip():
            raise ValueError("name must be a non-empty string")
        store = self.get_by_id(store_id)
        if store is None:
            raise NotFound("Store", store_id)
        store.name = name.strip()
        self._commit(store)
        return store

    def delete(self, store_id: int) -> None:
        store = self.get_by_id(store_id)
        if store is None:
            raise NotFound("Store", store_id)
        self.session.delete(store)
        self._commit()
