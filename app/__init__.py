"""
Application factory for the Organizations Directory.

Usage::

    from app import create_app
    app = create_app()           # Uses FLASK_ENV to pick config.
    app = create_app("testing")  # Explicit config for tests.
"""

import logging
import os

from flask import Flask, jsonify, render_template, request

from .config import config_by_name
from .extensions import csrf, db, migrate


def create_app(config_name: str | None = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config_name: One of 'development', 'testing', or 'production'.
                     Defaults to the FLASK_ENV environment variable,
                     falling back to 'development'.

    Returns:
        A fully configured Flask application instance.
    """
    # Resolve the configuration class.
    if config_name is None:
        config_name = os.environ.get("FLASK_ENV", "development")
    config_class = config_by_name.get(config_name)
    if config_class is None:
        raise ValueError(
            f"Unknown config '{config_name}'. "
            f"Valid options: {list(config_by_name.keys())}"
        )

    app = Flask(__name__)
    app.config.from_object(config_class)

    # Refuse to start production with insecure or missing settings.
    # Must run before the extensions try to build an engine.
    if config_name == "production":
        config_class.validate_production_secrets(app.config)

    # -- Initialize extensions ---------------------------------------------
    _register_extensions(app)

    # -- Register blueprints -----------------------------------------------
    _register_blueprints(app)

    # -- Register error handlers -------------------------------------------
    _register_error_handlers(app)

    # -- Register template filters -----------------------------------------
    _register_template_filters(app)

    # -- Register custom CLI commands --------------------------------------
    _register_cli_commands(app)

    # -- Configure logging -------------------------------------------------
    _configure_logging(app)

    return app


def _register_extensions(app: Flask) -> None:
    """Bind all Flask extensions to the application instance."""
    db.init_app(app)
    migrate.init_app(app, db)
    csrf.init_app(app)

    # Make sure the models are registered on db.metadata so that
    # ``flask db`` and ``db.create_all()`` can see them.
    from . import models  # noqa: F401  pylint: disable=import-outside-toplevel


def _register_blueprints(app: Flask) -> None:
    """
    Import and register each blueprint with its URL prefix.

    Blueprints are imported inside this function to avoid circular
    imports, since models and services import ``db`` from
    extensions at module level.
    """
    # pylint: disable=import-outside-toplevel

    # Main blueprint: index page and health check.
    from .blueprints.main import bp as main_bp

    app.register_blueprint(main_bp)

    # Organizations: paginated directory page.
    from .blueprints.organizations import bp as organizations_bp

    app.register_blueprint(organizations_bp, url_prefix="/organizations")

    # Resources: JSON endpoints used for follow-up page requests.
    from .blueprints.resources import bp as resources_bp

    app.register_blueprint(resources_bp, url_prefix="/resources")


def _register_error_handlers(app: Flask) -> None:
    """Register custom error pages for common HTTP error codes."""

    @app.errorhandler(404)
    def not_found(error):  # pylint: disable=unused-argument
        """Handle 404 Not Found errors."""
        return render_template("errors/404.html"), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        """
        Handle 405 Method Not Allowed errors.

        Routing rejects unlisted methods before any blueprint is
        matched, so JSON resource endpoints are recognised by path.
        """
        if request.path.startswith("/resources/"):
            return jsonify({"error": "Method not allowed"}), 405
        return error

    @app.errorhandler(500)
    def internal_error(error):  # pylint: disable=unused-argument
        """Handle 500 Internal Server Error."""
        db.session.rollback()
        return render_template("errors/500.html"), 500


def _register_template_filters(app: Flask) -> None:
    """Register Jinja filters shared by the page templates."""
    from .services.pagination import (  # pylint: disable=import-outside-toplevel
        format_locale_date,
    )

    app.add_template_filter(format_locale_date, "locale_date")


def _register_cli_commands(app: Flask) -> None:
    """Register custom Flask CLI commands (e.g., flask db-check)."""
    # pylint: disable=import-outside-toplevel
    from .cli import register_commands
    from .seed_dev_organizations import register_seed_commands

    register_commands(app)
    register_seed_commands(app)


def _configure_logging(app: Flask) -> None:
    """
    Set up application logging.

    The level comes from ``LOG_LEVEL``.  In debug mode the SQLAlchemy
    engine logger is turned down so request logs stay readable.
    """
    log_level = app.config.get("LOG_LEVEL", "INFO")
    logging.basicConfig(level=getattr(logging, log_level, logging.INFO))

    # Quiet down noisy libraries in development.
    if app.debug:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
