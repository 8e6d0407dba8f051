"""Pydantic schemas package.

Folder intent:
  common.py    — CamelModel base + HealthResponse (all schemas inherit CamelModel)
  category.py  — Category request DTOs and CategoryOut
  vendor.py    — Vendor request DTOs, VendorFilters, VendorOut (with categories)
  auth.py      — Verified caller returned by /auth/me
"""
