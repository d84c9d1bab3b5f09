"""
Product model.

Every product belongs to one store; rows are removed when their store is deleted.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Float, ForeignKey, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storefront.db.base import Base

if TYPE_CHECKING:
    from storefront.models.store import Store


class Product(Base):
    __tablename__ = "product"

    # Primary key
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)

    # Ownership
    store_id: Mapped[int] = mapped_column(
        ForeignKey("store.id", ondelete="CASCADE"),
        nullable=False,
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
    store: Mapped["Store"] = relationship("Store", back_populates="products")

    def __repr__(self) -> str:
        return f"<Product id={self.id!r} store_id={self.store_id!r} name={self.name!r} price={self.price!r}>"
