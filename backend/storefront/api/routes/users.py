"""
User API routes.

Endpoints:
- POST   /users        -> create a user
- GET    /users        -> list users with their store
- GET    /users/{id}   -> user with store and store products
- PUT    /users/{id}   -> update email and/or name
- DELETE /users/{id}   -> delete user (store and products cascade)

Routes are thin: they delegate to storefront.services.user_service.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from storefront.core.contracts import UserRepo
from storefront.core.deps import get_user_repo
from storefront.schemas.common import ErrorResponse
from storefront.schemas.nested import UserDetail, UserWithStore
from storefront.schemas.users import UserCreate, UserOut, UserUpdate
from storefront.services import user_service

router = APIRouter(prefix="/users", tags=["users"])

_ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
}


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED, responses=_ERRORS)
def create_user(payload: UserCreate, repo: UserRepo = Depends(get_user_repo)) -> UserOut:
    return user_service.create_user(payload, repo)


@router.get("", response_model=List[UserWithStore])
def list_users(repo: UserRepo = Depends(get_user_repo)) -> List[UserWithStore]:
    return user_service.list_users(repo)


@router.get("/{user_id}", response_model=UserDetail, responses=_ERRORS)
def get_user(
    user_id: str = Path(..., description="User identifier"),
    repo: UserRepo = Depends(get_user_repo),
) -> UserDetail:
    return user_service.get_user(user_id, repo)


@router.put("/{user_id}", response_model=UserOut, responses=_ERRORS)
def update_user(
    payload: UserUpdate,
    user_id: str = Path(..., description="User identifier"),
    repo: UserRepo = Depends(get_user_repo),
) -> UserOut:
    return user_service.update_user(user_id, payload, repo)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response, responses=_ERRORS)
def delete_user(
    user_id: str = Path(..., description="User identifier"),
    repo: UserRepo = Depends(get_user_repo),
) -> Response:
    user_service.delete_user(user_id, repo)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
