"""
Resources blueprint: JSON endpoints for follow-up data requests.

These endpoints are called from page scripts, never navigated to.
"""

from flask import Blueprint

bp = Blueprint("resources", __name__)

from app.blueprints.resources import routes  # noqa: E402, F401
