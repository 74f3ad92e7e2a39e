"""
Model package: imports all models so Alembic and SQLAlchemy can
discover them automatically when ``flask db`` commands are run.

  - organization.py -> organizations table (read-only in the UI)
"""

from app.models.organization import Organization  # noqa: F401
