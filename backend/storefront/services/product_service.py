"""
Product handlers.

Products are created only in an existing store; a missing store yields 404 and
no row is written. Listing returns newest first with store and owner included.
"""

from __future__ import annotations

from typing import Any, List

from storefront.core.contracts import ProductRepo, StoreRepo
from storefront.core.errors import NotFoundError, translate_storage_error
from storefront.db.errors import StorageError
from storefront.schemas.nested import ProductDetail
from storefront.schemas.products import ProductCreate, ProductOut, ProductUpdate
from storefront.services.common import require_id
from storefront.services.store_service import STORE_NOT_FOUND

__all__ = ["create_product", "list_products", "get_product", "update_product", "delete_product"]

PRODUCT_NOT_FOUND = "Product not found."


def create_product(payload: ProductCreate, stores: StoreRepo, products: ProductRepo) -> ProductOut:
    try:
        if stores.get_by_id(payload.store_id) is None:
            raise NotFoundError(STORE_NOT_FOUND)
        product = products.create(name=payload.name, price=payload.price, store_id=payload.store_id)
    except StorageError as exc:
        raise translate_storage_error(exc, not_found=STORE_NOT_FOUND) from exc
    return ProductOut.model_validate(product)


def list_products(products: ProductRepo) -> List[ProductDetail]:
    try:
        items = products.list_with_store()
    except StorageError as exc:
        raise translate_storage_error(exc, read_only=True, fallback="Failed to list products.") from exc
    return [ProductDetail.model_validate(p) for p in items]


def get_product(raw_id: Any, products: ProductRepo) -> ProductDetail:
    product_id = require_id(raw_id)
    try:
        product = products.get_detail(product_id)
    except StorageError as exc:
        raise translate_storage_error(exc, read_only=True, fallback="Failed to fetch product.") from exc
    if product is None:
        raise NotFoundError(PRODUCT_NOT_FOUND)
    return ProductDetail.model_validate(product)


def update_product(raw_id: Any, payload: ProductUpdate, products: ProductRepo) -> ProductOut:
    product_id = require_id(raw_id)
    try:
        product = products.update(product_id, **payload.changes())
    except StorageError as exc:
        raise translate_storage_error(exc, not_found=PRODUCT_NOT_FOUND) from exc
    return ProductOut.model_validate(product)


def delete_product(raw_id: Any, products: ProductRepo) -> None:
    product_id = require_id(raw_id)
    try:
        products.delete(product_id)
    except StorageError as exc:
        raise translate_storage_error(exc, not_found=PRODUCT_NOT_FOUND) from exc
