"""
Custom Flask CLI commands.

These commands are registered with the app via ``register_commands()``
in the application factory. Run them with ``flask <command_name>``.

Usage::

    flask db-check      # Verify database connectivity and schema
"""

import click
from flask import current_app
from flask.cli import with_appcontext
from sqlalchemy import inspect

from app.extensions import db
from app.services import organization_service


@click.command("db-check")
@with_appcontext
def db_check_command():
    """
    Verify database connectivity and confirm the organizations table exists.

    Tests the connection string from the app config, runs a simple
    query against the database, and reports how many organizations
    the directory will show.  Useful for confirming ``DATABASE_URL``
    is correct and migrations have been applied.
    """
    click.echo("=" * 60)
    click.echo("  Organizations Directory — Database Connectivity Check")
    click.echo("=" * 60)

    # Show the connection string with any password masked.
    db_uri = db.engine.url.render_as_string(hide_password=True)
    click.echo(f"\n  Connection string: {db_uri}\n")

    # -- Step 1: Basic connectivity ----------------------------------------
    click.echo("[1/3] Testing connection...")
    try:
        result = db.session.execute(db.text("SELECT 1 AS connected"))
        row = result.fetchone()
        if row and row[0] == 1:
            click.secho("      ✓ Connected successfully.", fg="green")
        else:
            click.secho("      ✗ Unexpected result from test query.", fg="red")
            return
    except Exception as exc:  # pylint: disable=broad-exception-caught
        click.secho(f"      ✗ Connection failed: {exc}", fg="red")
        click.echo("\n  Troubleshooting tips:")
        click.echo("    - Is the database server running?")
        click.echo("    - Does DATABASE_URL match your server config?")
        click.echo("    - Is the driver for the URL's dialect installed?")
        return

    # -- Step 2: Confirm the table exists ----------------------------------
    click.echo("[2/3] Checking organizations table...")
    if not inspect(db.engine).has_table("organizations"):
        click.secho("      ✗ Table 'organizations' not found.", fg="red")
        click.echo("        Have you run 'flask db upgrade'?")
        return
    click.secho("      ✓ Table 'organizations' exists.", fg="green")

    # -- Step 3: Row count -------------------------------------------------
    click.echo("[3/3] Counting organizations...")
    count_data = organization_service.get_organizations_count()
    if count_data.is_error:
        click.secho(f"      ✗ Count query failed: {count_data.error}", fg="red")
        return

    total = count_data.data[0]["total"] if count_data.data else 0
    page_size = current_app.config["ORGANIZATIONS_PAGE_SIZE"]
    click.echo(f"      {total} organization(s), {page_size} per page")

    click.echo("\n" + "=" * 60)
    click.secho("  All checks passed. Database is ready.", fg="green", bold=True)
    click.echo("=" * 60)


def register_commands(app):
    """Register all custom CLI commands with the Flask application."""
    app.cli.add_command(db_check_command)
