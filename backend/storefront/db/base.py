"""
SQLAlchemy declarative base and model import hook.

- Base: Declarative base class for all ORM models.
- import_all_models(): Imports all modules under storefront.models to register mappers.

SQLAlchemy needs model classes to be imported at least once so their tables are
registered on the metadata before create_all() runs.
"""

from __future__ import annotations

import importlib
import pkgutil
from typing import List

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

__all__ = ["Base", "import_all_models"]


# Naming conventions for constraints & indexes (helpful for migrations)
_NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=_NAMING_CONVENTION)


def import_all_models() -> List[str]:
    """
    Import all modules under storefront.models so SQLAlchemy registers all model tables.

    Returns:
        A list of fully-qualified module names that were imported.
    """
    models_pkg = importlib.import_module("storefront.models")
    imported: list[str] = []
    prefix = models_pkg.__name__ + "."
    for _finder, name, _ispkg in pkgutil.walk_packages(models_pkg.__path__, prefix):
        importlib.import_module(name)
        imported.append(name)
    return imported
