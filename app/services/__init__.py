"""Services package — all business logic lives here, never in routers.

Files:
  category.py  — Category CRUD
  vendor.py    — Vendor CRUD, category association upkeep, filtered listing

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
