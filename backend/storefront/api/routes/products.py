"""
Product API routes.

Endpoints:
- POST   /products        -> create a product in an existing store
- GET    /products        -> list products (newest first) with store and owner
- GET    /products/{id}   -> product with store and owner
- PUT    /products/{id}   -> update name and/or price
- DELETE /products/{id}   -> delete a product
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from storefront.core.contracts import ProductRepo, StoreRepo
from storefront.core.deps import get_product_repo, get_store_repo
from storefront.schemas.common import ErrorResponse
from storefront.schemas.nested import ProductDetail
from storefront.schemas.products import ProductCreate, ProductOut, ProductUpdate
from storefront.services import product_service

router = APIRouter(prefix="/products", tags=["products"])

_ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


@router.post("", response_model=ProductOut, status_code=status.HTTP_201_CREATED, responses=_ERRORS)
def create_product(
    payload: ProductCreate,
    stores: StoreRepo = Depends(get_store_repo),
    products: ProductRepo = Depends(get_product_repo),
) -> ProductOut:
    return product_service.create_product(payload, stores, products)


@router.get("", response_model=List[ProductDetail])
def list_products(products: ProductRepo = Depends(get_product_repo)) -> List[ProductDetail]:
    return product_service.list_products(products)


@router.get("/{product_id}", response_model=ProductDetail, responses=_ERRORS)
def get_product(
    product_id: str = Path(..., description="Product identifier"),
    products: ProductRepo = Depends(get_product_repo),
) -> ProductDetail:
    return product_service.get_product(product_id, products)


@router.put("/{product_id}", response_model=ProductOut, responses=_ERRORS)
def update_product(
    payload: ProductUpdate,
    product_id: str = Path(..., description="Product identifier"),
    products: ProductRepo = Depends(get_product_repo),
) -> ProductOut:
    return product_service.update_product(product_id, payload, products)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response, responses=_ERRORS)
def delete_product(
    product_id: str = Path(..., description="Product identifier"),
    products: ProductRepo = Depends(get_product_repo),
) -> Response:
    product_service.delete_product(product_id, products)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
