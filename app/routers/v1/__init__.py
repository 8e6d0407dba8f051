"""v1 router package — all /api/v1/* endpoints live here.

Files:
  auth.py        — /auth/me (token verification only)
  categories.py  — Category CRUD
  vendors.py     — Vendor CRUD + city/category filtering

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to app/services/.
"""
