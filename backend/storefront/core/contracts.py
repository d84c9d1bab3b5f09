"""
Repository contracts (Protocols) for data access layers.

These Protocols define the minimal operations required by the services layer.
Concrete implementations use SQLAlchemy (storefront.repos.*); tests use in-memory fakes.

Failures are reported with the variants in storefront.db.errors:
- create/update raise UniqueViolation or ForeignKeyViolation on constraint failures
- update/delete raise NotFound when the addressed row does not exist
- any other storage failure raises Other

Protocols:
- UserRepo
- StoreRepo
- ProductRepo
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    # Imported only for type checking to avoid runtime import cycles
    from storefront.models.product import Product
    from storefront.models.store import Store
    from storefront.models.user import User

__all__ = ["UserRepo", "StoreRepo", "ProductRepo"]


# -------------------------------
# User Repository
# -------------------------------

@runtime_checkable
class UserRepo(Protocol):
    """
    Contract for user data access.
    """

    def create(self, *, email: str, name: Optional[str] = None) -> "User":
        """Create and return a user."""
        raise NotImplementedError()

    def list_with_store(self) -> Sequence["User"]:
        """All users ordered by id ascending, store loaded."""
        raise NotImplementedError()

    def get_by_id(self, user_id: int) -> Optional["User"]:
        """Fetch a user by id (no relations required)."""
        raise NotImplementedError()

    def get_detail(self, user_id: int) -> Optional["User"]:
        """Fetch a user with store and store products loaded."""
        raise NotImplementedError()

    def update(self, user_id: int, **fields: Any) -> "User":
        """Apply whitelisted field changes and return the user."""
        raise NotImplementedError()

    def delete(self, user_id: int) -> None:
        """Delete the user (store and products cascade)."""
        raise NotImplementedError()


# -------------------------------
# Store Repository
# -------------------------------

@runtime_checkable
class StoreRepo(Protocol):
    """
    Contract for store data access.
    """

    def create(self, *, name: str, user_id: int) -> "Store":
        """Create and return a store owned by user_id."""
        raise NotImplementedError()

    def get_by_id(self, store_id: int) -> Optional["Store"]:
        """Fetch a store by id (no relations required)."""
        raise NotImplementedError()

    def get_detail(self, store_id: int) -> Optional["Store"]:
        """Fetch a store with owner and products loaded."""
        raise NotImplementedError()

    def update(self, store_id: int, *, name: str) -> "Store":
        """Rename a store."""
        raise NotImplementedError()

    def delete(self, store_id: int) -> None:
        """Delete the store (products cascade)."""
        raise NotImplementedError()


# -------------------------------
# Product Repository
# -------------------------------

@runtime_checkable
class ProductRepo(Protocol):
    """
    Contract for product data access.
    """

    def create(self, *, name: str, price: float, store_id: int) -> "Product":
        """Create and return a product in store_id."""
        raise NotImplementedError()

    def list_with_store(self) -> Sequence["Product"]:
        """All products ordered by id descending, store and store owner loaded."""
        raise NotImplementedError()

    def get_detail(self, product_id: int) -> Optional["Product"]:
        """Fetch a product with store and store owner loaded."""
        raise NotImplementedError()

    def update(self, product_id: int, **fields: Any) -> "Product":
        """Apply whitelisted field changes and return the product."""
        raise NotImplementedError()

    def delete(self, product_id: int) -> None:
        """Delete the product."""
        raise NotImplementedError()
