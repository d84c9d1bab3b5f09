"""
Shared plumbing for the SQLAlchemy repositories.

Every SQLAlchemy exception is rolled back and re-raised as a storage error
variant (storefront.db.errors), chained to the original for diagnostics.
Identifiers beyond the 64-bit INTEGER range cannot match any row; lookups by
such ids return None instead of reaching the driver error.
"""

from __future__ import annotations

from typing import Any, List, Optional

from sqlalchemy import Select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.db.errors import from_sqlalchemy_error

__all__ = ["SqlAlchemyRepo"]


class SqlAlchemyRepo:
    """
    Base class holding the request-scoped Session.
    """

    def __init__(self, session: Session) -> None:
        if not isinstance(session, Session):
            raise TypeError("session must be an instance of sqlalchemy.orm.Session")
        self.session = session

    def _commit(self, *refresh: Any) -> None:
        """Commit the unit of work, then reload the given instances."""
        try:
            self.session.commit()
            for obj in refresh:
                self.session.refresh(obj)
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise from_sqlalchemy_error(exc) from exc

    def _first(self, stmt: Select) -> Optional[Any]:
        try:
            return self.session.execute(stmt).scalars().first()
        except OverflowError:
            self.session.rollback()
            return None
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise from_sqlalchemy_error(exc) from exc

    def _all(self, stmt: Select) -> List[Any]:
        try:
            return list(self.session.execute(stmt).scalars().all())
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise from_sqlalchemy_error(exc) from exc

    def _get(self, model: type, ident: int) -> Optional[Any]:
        try:
            return self.session.get(model, int(ident))
        except OverflowError:
            self.session.rollback()
            return None
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise from_sqlalchemy_error(exc) from exc
