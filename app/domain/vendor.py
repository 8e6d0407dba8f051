"""SQLAlchemy ORM model for Vendors.

A vendor's categories are not a mapped relationship: they are read through
``vendor_categories`` on every fetch (see :mod:`app.services.vendor`).
"""

from __future__ import annotations

from sqlalchemy import Index, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.domain.mixins import CreatedAtMixin, IdMixin

NAME_MAX_LENGTH = 100
CITY_MAX_LENGTH = 100


class Vendor(Base, IdMixin, CreatedAtMixin):
    __tablename__ = "vendors"

    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False, index=True)
    city: Mapped[str] = mapped_column(String(CITY_MAX_LENGTH), nullable=False)

    def __repr__(self) -> str:
        return f"<Vendor {self.name!r} ({self.city})>"


# Backs the case-insensitive city filter
Index("ix_vendors_city_lower", func.lower(Vendor.city))
