"""Collection of API route modules (health, users, stores, products)."""

__all__ = [
    "health",
    "users",
    "stores",
    "products",
]
