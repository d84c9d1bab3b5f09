"""
Store handlers.

A store is created only for an existing user that does not own one yet. The
owner lookup runs first so the common failure gets a precise message; the
foreign key and the unique index on store.user_id still decide concurrent
requests (ForeignKeyViolation -> 404, UniqueViolation -> 409).
"""

from __future__ import annotations

from typing import Any

from storefront.core.contracts import StoreRepo, UserRepo
from storefront.core.errors import NotFoundError, translate_storage_error
from storefront.db.errors import StorageError
from storefront.schemas.nested import StoreDetail
from storefront.schemas.stores import StoreCreate, StoreOut, StoreUpdate
from storefront.services.common import require_id
from storefront.services.user_service import USER_NOT_FOUND

__all__ = ["create_store", "get_store", "update_store", "delete_store"]

STORE_NOT_FOUND = "Store not found."
USER_HAS_STORE = "User already owns a store."


def create_store(payload: StoreCreate, users: UserRepo, stores: StoreRepo) -> StoreOut:
    try:
        owner = users.get_by_id(payload.user_id)
        if owner is None:
            raise NotFoundError(USER_NOT_FOUND)
        store = stores.create(name=payload.name, user_id=payload.user_id)
    except StorageError as exc:
        raise translate_storage_error(exc, not_found=USER_NOT_FOUND, conflict=USER_HAS_STORE) from exc
    return StoreOut.model_validate(store)


def get_store(raw_id: Any, stores: StoreRepo) -> StoreDetail:
    store_id = require_id(raw_id)
    try:
        store = stores.get_detail(store_id)
    except StorageError as exc:
        raise translate_storage_error(exc, read_only=True, fallback="Failed to fetch store.") from exc
    if store is None:
        raise NotFoundError(STORE_NOT_FOUND)
    return StoreDetail.model_validate(store)


def update_store(raw_id: Any, payload: StoreUpdate, stores: StoreRepo) -> StoreOut:
    store_id = require_id(raw_id)
    try:
        store = stores.update(store_id, name=payload.name)
    except StorageError as exc:
        raise translate_storage_error(exc, not_found=STORE_NOT_FOUND) from exc
    return StoreOut.model_validate(store)


def delete_store(raw_id: Any, stores: StoreRepo) -> None:
    store_id = require_id(raw_id)
    try:
        stores.delete(store_id)
    except StorageError as exc:
        raise translate_storage_error(exc, not_found=STORE_NOT_FOUND) from exc
