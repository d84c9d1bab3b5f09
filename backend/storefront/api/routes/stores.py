"""
Store API routes.

Endpoints:
- POST   /stores        -> create a store for an existing user (one per user)
- GET    /stores/{id}   -> store with owner and products
- PUT    /stores/{id}   -> rename a store
- DELETE /stores/{id}   -> delete store (products cascade)
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Response, status

from storefront.core.contracts import StoreRepo, UserRepo
from storefront.core.deps import get_store_repo, get_user_repo
from storefront.schemas.common import ErrorResponse
from storefront.schemas.nested import StoreDetail
from storefront.schemas.stores import StoreCreate, StoreOut, StoreUpdate
from storefront.services import store_service

router = APIRouter(prefix="/stores", tags=["stores"])

_ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
}


@router.post("", response_model=StoreOut, status_code=status.HTTP_201_CREATED, responses=_ERRORS)
def create_store(
    payload: StoreCreate,
    users: UserRepo = Depends(get_user_repo),
    stores: StoreRepo = Depends(get_store_repo),
) -> StoreOut:
    return store_service.create_store(payload, users, stores)


@router.get("/{store_id}", response_model=StoreDetail, responses=_ERRORS)
def get_store(
    store_id: str = Path(..., description="Store identifier"),
    stores: StoreRepo = Depends(get_store_repo),
) -> StoreDetail:
    return store_service.get_store(store_id, stores)


@router.put("/{store_id}", response_model=StoreOut, responses=_ERRORS)
def update_store(
    payload: StoreUpdate,
    store_id: str = Path(..., description="Store identifier"),
    stores: StoreRepo = Depends(get_store_repo),
) -> StoreOut:
    return store_service.update_store(store_id, payload, stores)


@router.delete("/{store_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response, responses=_ERRORS)
def delete_store(
    store_id: str = Path(..., description="Store identifier"),
    stores: StoreRepo = Depends(get_store_repo),
) -> Response:
    store_service.delete_store(store_id, stores)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
