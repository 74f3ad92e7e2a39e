"""
Routes for the main blueprint: index page and health check.
"""

from sqlalchemy import text

from app.blueprints.main import bp
from app.blueprints.organizations.routes import render_organizations_page
from app.extensions import db


@bp.route("/")
def index():
    """
    Landing page: the organizations directory.

    Runs the same loader as ``/organizations``; a loader failure is
    shown with the error component instead of the table.
    """
    return render_organizations_page()


@bp.route("/health")
def health_check():
    """
    Health check endpoint for monitoring and load balancers.

    Returns 200 if the app is running and can reach the database.
    """
    try:
        db.session.execute(text("SELECT 1"))
        return {"status": "healthy", "database": "connected"}, 200
    except Exception as exc:  # pylint: disable=broad-except
        db.session.rollback()
        return {"status": "unhealthy", "database": str(exc)}, 503
