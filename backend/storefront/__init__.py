"""Storefront backend: users, stores and products over FastAPI + SQLAlchemy."""

__all__ = [
    "api",
    "core",
    "db",
    "models",
    "repos",
    "schemas",
    "services",
    "tools",
]
