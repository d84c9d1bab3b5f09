"""
User model.

A store owner. Owns at most one Store (enforced by the unique index on store.user_id).
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storefront.db.base import Base

if TYPE_CHECKING:
    from storefront.models.store import Store


class User(Base):
    __tablename__ = "user"

    # Primary key
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    # Login identifier (unique index)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)

    # Optional display name
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now()
    )

    # Relationships (1-1); the database deletes the store on user delete
    store: Mapped[Optional["Store"]] = relationship(
        "Store",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<User id={self.id!r} email={self.email!r}>"
