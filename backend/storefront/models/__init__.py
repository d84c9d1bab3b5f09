"""ORM models: User 1-1 Store 1-N Product."""

from storefront.models.user import User
from storefront.models.store import Store
from storefront.models.product import Product

__all__ = ["User", "Store", "Product"]
