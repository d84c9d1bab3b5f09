"""
Store model.

Belongs to exactly one User (1-1) and owns zero or more Products (1-N).
Deleting the owning user, or the store itself, cascades in the database.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storefront.db.base import Base

if TYPE_CHECKING:
    from storefront.models.product import Product
    from storefront.models.user import User


class Store(Base):
    __tablename__ = "store"

    # Primary key
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Ownership; unique makes the relation 1-1
    user_id: Mapped[int] = mapped_column(
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="store")
    products: Mapped[list["Product"]] = relationship(
        "Product",
        back_populates="store",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Product.id",
    )

    def __repr__(self) -> str:
        return f"<Store id={self.id!r} user_id={self.user_id!r} name={self.name!r}>"
