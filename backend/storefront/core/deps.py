"""
Dependency wiring for the storage client and repositories.

The Database instance is created by the application factory and stored on
app.state.database; everything below is resolved per request from it. This
module must not contain business logic.

Provided factories:
- get_database: the application's storage client
- get_db: a request-scoped Session, closed after the request
- get_user_repo / get_store_repo / get_product_repo
"""
from __future__ import annotations

from typing import Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from storefront.core.contracts import ProductRepo, StoreRepo, UserRepo
from storefront.db.session import Database

__all__ = [
    "get_database",
    "get_db",
    "get_user_repo",
    "get_store_repo",
    "get_product_repo",
]


def get_database(request: Request) -> Database:
    """Return the storage client attached to the running application."""
    database = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("No database configured on app.state")
    return database


def get_db(database: Database = Depends(get_database)) -> Generator[Session, None, None]:
    """
    Yield a database session and ensure it's closed afterwards.
    """
    db = database.session()
    try:
        yield db
    finally:
        db.close()


# -------------------------------
# Repository Providers
# -------------------------------

def get_user_repo(db: Session = Depends(get_db)) -> UserRepo:
    """Provide a UserRepo bound to the current DB session."""
    from storefront.repos.user_repo import SqlAlchemyUserRepo
    return SqlAlchemyUserRepo(db)


def get_store_repo(db: Session = Depends(get_db)) -> StoreRepo:
    """Provide a StoreRepo bound to the current DB session."""
    from storefront.repos.store_repo import SqlAlchemyStoreRepo
    return SqlAlchemyStoreRepo(db)


def get_product_repo(db: Session = Depends(get_db)) -> ProductRepo:
    """Provide a ProductRepo bound to the current DB session."""
    from storefront.repos.product_repo import SqlAlchemyProductRepo
    return SqlAlchemyProductRepo(db)
