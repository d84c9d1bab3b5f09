"""
SQLAlchemy-based User repository.

Operations:
- create(email, name): insert a user (UniqueViolation on duplicate email)
- list_with_store(): users by id ascending with their store
- get_by_id(user_id) / get_detail(user_id): single user, detail loads store + products
- update(user_id, email=..., name=...): whitelisted partial update
- delete(user_id): delete user; the database cascades to store and products
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from storefront.db.errors import NotFound
from storefront.models.store import Store
from storefront.models.user import User
from storefront.repos.base import SqlAlchemyRepo

__all__ = ["SqlAlchemyUserRepo"]

_UPDATABLE_FIELDS = frozenset({"email", "name"})


class SqlAlchemyUserRepo(SqlAlchemyRepo):
    """
    Concrete User repository using SQLAlchemy ORM.
    """

    def create(self, *, email: str, name: Optional[str] = None) -> User:
        if not isinstance(email, str) or not email.strip():
            raise ValueError("email must be a non-empty string")
        user = User(email=email.strip(), name=name)
        self.session.add(user)
        self._commit(user)
        return user

    def list_with_store(self) -> Sequence[User]:
        stmt = select(User).options(selectinload(User.store)).order_by(User.id.asc())
        return self._all(stmt)

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._get(User, user_id)

    def get_detail(self, user_id: int) -> Optional[User]:
        stmt = (
            select(User)
            .where(User.id == int(user_id))
            .options(selectinload(User.store).selectinload(Store.products))
        )
        return self._first(stmt)

    def update(self, user_id: int, **fields: Any) -> User:
        unknown = set(fields) - _UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Unsupported user field(s): {', '.join(sorted(unknown))}")

        user = self.get_by_id(user_id)
        if user is None:
            raise NotFound("User", user_id)
        for key, value in fields.items():
            setattr(user, key, value)
        self._commit(user)
        return user

    def delete(self, user_id: int) -> None:
        user = self.get_by_id(user_id)
        if user is None:
            raise NotFound("User", user_id)
        self.session.delete(user)
        self._commit()
