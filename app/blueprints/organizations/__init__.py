"""
Organizations blueprint: paginated, read-only directory page.

Page changes are served by the resources blueprint; this blueprint only
renders the first page.
"""

from flask import Blueprint

bp = Blueprint(
    "organizations",
    __name__,
    template_folder="templates",
)

from app.blueprints.organizations import routes  # noqa: E402, F401
