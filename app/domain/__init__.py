"""Domain package — all ORM models are imported here so Alembic autogenerate detects them.

Folder intent:
  category.py         — Categories (unique name)
  vendor.py           — Vendors (name, city)
  vendor_category.py  — Junction table, cascades from both sides
  mixins.py           — Shared IdMixin, CreatedAtMixin
"""

from app.domain.category import Category
from app.domain.vendor import Vendor
from app.domain.vendor_category import VendorCategory

__all__ = [
    "Category",
    "Vendor",
    "VendorCategory",
]
