"""
User handlers.

Each handler takes the raw path identifier and/or a validated request model
plus the repositories it needs, and returns response models. Storage error
variants are translated into ApiErrors here.

- create_user(payload, users)          -> UserOut          (409 on duplicate email)
- list_users(users)                    -> [UserWithStore]  (id ascending)
- get_user(raw_id, users)              -> UserDetail       (404 when absent)
- update_user(raw_id, payload, users)  -> UserOut          (404 / 409)
- delete_user(raw_id, users)           -> None             (404; store and products cascade)
"""

from __future__ import annotations

from typing import Any, List

from storefront.core.contracts import UserRepo
from storefront.core.errors import NotFoundError, translate_storage_error
from storefront.db.errors import StorageError
from storefront.schemas.nested import UserDetail, UserWithStore
from storefront.schemas.users import UserCreate, UserOut, UserUpdate
from storefront.services.common import require_id

__all__ = ["create_user", "list_users", "get_user", "update_user", "delete_user"]

USER_NOT_FOUND = "User not found."
EMAIL_TAKEN = "Email already registered."


def create_user(payload: UserCreate, users: UserRepo) -> UserOut:
    try:
        user = users.create(email=payload.email, name=payload.name)
    except StorageError as exc:
        raise translate_storage_error(exc, conflict=EMAIL_TAKEN) from exc
    return UserOut.model_validate(user)


def list_users(users: UserRepo) -> List[UserWithStore]:
    try:
        items = users.list_with_store()
    except StorageError as exc:
        raise translate_storage_error(exc, read_only=True, fallback="Failed to list users.") from exc
    return [UserWithStore.model_validate(u) for u in items]


def get_user(raw_id: Any, users: UserRepo) -> UserDetail:
    user_id = require_id(raw_id)
    try:
        user = users.get_detail(user_id)
    except StorageError as exc:
        raise translate_storage_error(exc, read_only=True, fallback="Failed to fetch user.") from exc
    if user is None:
        raise NotFoundError(USER_NOT_FOUND)
    return UserDetail.model_validate(user)


def update_user(raw_id: Any, payload: UserUpdate, users: UserRepo) -> UserOut:
    user_id = require_id(raw_id)
    try:
        user = users.update(user_id, **payload.changes())
    except StorageError as exc:
        raise translate_storage_error(exc, not_found=USER_NOT_FOUND, conflict=EMAIL_TAKEN) from exc
    return UserOut.model_validate(user)


def delete_user(raw_id: Any, users: UserRepo) -> None:
    user_id = require_id(raw_id)
    try:
        users.delete(user_id)
    except StorageError as exc:
        raise translate_storage_error(exc, not_found=USER_NOT_FOUND) from exc
