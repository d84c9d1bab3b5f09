"""
In-memory fake repositories for testing handlers without a real database.

Implements Protocol-compatible classes sharing one FakeStorage:
- FakeUserRepo
- FakeStoreRepo
- FakeProductRepo
- VanishingUserRepo / VanishingStoreRepo: rows deleted right after being read

FakeStorage reproduces the storage rules the handlers rely on: unique email,
one store per user, foreign keys and cascading deletes. Failures are raised
as the storage error variants from storefront.db.errors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

from storefront.db.errors import ForeignKeyViolation, NotFound, Other, UniqueViolation


def _now() -> datetime:
    return datetime.now(timezone.utc)


# ----------------------------------------
# Internal lightweight entity classes
# ----------------------------------------

@dataclass
class _User:
    id: int
    email: str
    name: Optional[str] = None
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)
    store: Optional["_Store"] = field(default=None, repr=False)


@dataclass
class _Store:
    id: int
    name: str
    user_id: int
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)
    user: Optional[_User] = field(default=None, repr=False)
    products: List["_Product"] = field(default_factory=list, repr=False)


@dataclass
class _Product:
    id: int
    name: str
    price: float
    store_id: int
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)
    store: Optional[_Store] = field(default=None, repr=False)


class FakeStorage:
    """Shared in-memory tables with sequence counters."""

    def __init__(self) -> None:
        self.users: Dict[int, _User] = {}
        self.stores: Dict[int, _Store] = {}
        self.products: Dict[int, _Product] = {}
        self._seq = {"user": 1, "store": 1, "product": 1}
        # Set to a message to make every call fail with Other(message)
        self.fail_with: Optional[str] = None

    def next_id(self, table: str) -> int:
        value = self._seq[table]
        self._seq[table] += 1
        return value

    def check(self) -> None:
        if self.fail_with:
            raise Other(self.fail_with)


# ----------------------------------------
# Fake repos
# ----------------------------------------

class FakeUserRepo:
    def __init__(self, storage: FakeStorage) -> None:
        self.storage = storage

    def create(self, *, email: str, name: Optional[str] = None) -> _User:
        self.storage.check()
        if any(u.email == email for u in self.storage.users.values()):
            raise UniqueViolation(constraint="uq_user_email")
        user = _User(id=self.storage.next_id("user"), email=email, name=name)
        self.storage.users[user.id] = user
        return user

    def list_with_store(self) -> Sequence[_User]:
        self.storage.check()
        return sorted(self.storage.users.values(), key=lambda u: u.id)

    def get_by_id(self, user_id: int) -> Optional[_User]:
        self.storage.check()
        return self.storage.users.get(user_id)

    def get_detail(self, user_id: int) -> Optional[_User]:
        return self.get_by_id(user_id)

    def update(self, user_id: int, **fields: Any) -> _User:
        self.storage.check()
        user = self.storage.users.get(user_id)
        if user is None:
            raise NotFound("User", user_id)
        email = fields.get("email")
        if email is not None and any(u.email == email and u.id != user_id for u in self.storage.users.values()):
            raise UniqueViolation(constraint="uq_user_email")
        for k, v in fields.items():
            setattr(user, k, v)
        user.updated_at = _now()
        return user

    def delete(self, user_id: int) -> None:
        self.storage.check()
        user = self.storage.users.pop(user_id, None)
        if user is None:
            raise NotFound("User", user_id)
        if user.store is not None:
            FakeStoreRepo(self.storage).delete(user.store.id)


class FakeStoreRepo:
    def __init__(self, storage: FakeStorage) -> None:
        self.storage = storage

    def create(self, *, name: str, user_id: int) -> _Store:
        self.storage.check()
        owner = self.storage.users.get(user_id)
        if owner is None:
            raise ForeignKeyViolation()
        if owner.store is not None:
            raise UniqueViolation(constraint="uq_store_user_id")
        store = _Store(id=self.storage.next_id("store"), name=name, user_id=user_id, user=owner)
        owner.store = store
        self.storage.stores[store.id] = store
        return store

    def get_by_id(self, store_id: int) -> Optional[_Store]:
        self.storage.check()
        return self.storage.stores.get(store_id)

    def get_detail(self, store_id: int) -> Optional[_Store]:
        return self.get_by_id(store_id)

    def update(self, store_id: int, *, name: str) -> _Store:
        self.storage.check()
        store = self.storage.stores.get(store_id)
        if store is None:
            raise NotFound("Store", store_id)
        store.name = name
        store.updated_at = _now()
        return store

    def delete(self, store_id: int) -> None:
        self.storage.check()
        store = self.storage.stores.pop(store_id, None)
        if store is None:
            raise NotFound("Store", store_id)
        for product in list(store.products):
            self.storage.products.pop(product.id, None)
        if store.user is not None:
            store.user.store = None


class FakeProductRepo:
    def __init__(self, storage: FakeStorage) -> None:
        self.storage = storage

    def create(self, *, name: str, price: float, store_id: int) -> _Product:
        self.storage.check()
        store = self.storage.stores.get(store_id)
        if store is None:
            raise ForeignKeyViolation()
        product = _Product(id=self.storage.next_id("product"), name=name, price=price, store_id=store_id, store=store)
        store.products.append(product)
        self.storage.products[product.id] = product
        return product

    def list_with_store(self) -> Sequence[_Product]:
        self.storage.check()
        return sorted(self.storage.products.values(), key=lambda p: p.id, reverse=True)

    def get_detail(self, product_id: int) -> Optional[_Product]:
        self.storage.check()
        return self.storage.products.get(product_id)

    def update(self, product_id: int, **fields: Any) -> _Product:
        self.storage.check()
        product = self.storage.products.get(product_id)
        if product is None:
            raise NotFound("Product", product_id)
        for k, v in fields.items():
            setattr(product, k, v)
        product.updated_at = _now()
        return product

    def delete(self, product_id: int) -> None:
        self.storage.check()
        product = self.storage.products.pop(product_id, None)
        if product is None:
            raise NotFound("Product", product_id)
        if product.store is not None:
            product.store.products = [p for p in product.store.products if p.id != product_id]


class VanishingUserRepo(FakeUserRepo):
    """Returns the user, then deletes it as a concurrent request would."""

    def get_by_id(self, user_id: int) -> Optional[_User]:
        user = super().get_by_id(user_id)
        if user is not None:
            self.delete(user_id)
        return user


class VanishingStoreRepo(FakeStoreRepo):
    def get_by_id(self, store_id: int) -> Optional[_Store]:
        store = super().get_by_id(store_id)
        if store is not None:
            self.delete(store_id)
        return store
