"""
Seed script: fill the organizations table with sample rows.

Registers a ``flask seed-dev-organizations`` CLI command that inserts
generated organizations so the directory has something to page
through during local development.

Usage::

    flask seed-dev-organizations              # 25 rows (three pages)
    flask seed-dev-organizations --count 100  # Custom row count
    flask seed-dev-organizations --reset      # Delete existing rows first

Prerequisites:
    - The ``organizations`` table must exist (``flask db upgrade``).
"""

import click
from flask.cli import with_appcontext

from app.extensions import db
from app.models.organization import Organization


# -- Sample value pools ----------------------------------------------------
_DEFAULT_COUNT = 25
_INDUSTRIES = ("Healthcare", "Finance", "Retail", "Manufacturing", "Education")
_TIERS = ("free", "basic", "premium", "enterprise")
_NAME_WORDS = (
    "Acme", "Blue", "Cedar", "Delta", "Evergreen", "Falcon", "Granite",
    "Harbor", "Iris", "Juniper", "Keystone", "Lumen", "Meridian",
)


def build_sample_organizations(count: int, start: int = 1) -> list[Organization]:
    """Return ``count`` unsaved Organization rows with predictable values."""
    organizations = []
    for number in range(start, start + count):
        word = _NAME_WORDS[number % len(_NAME_WORDS)]
        slug = f"{word.lower()}{number}"
        organizations.append(
            Organization(
                organization_name=f"{word} Holdings {number:03d}",
                industry=_INDUSTRIES[number % len(_INDUSTRIES)],
                address=f"{100 + number} Main Street",
                phone=f"555-01{number % 100:02d}",
                email=f"contact@{slug}.example.com",
                subscription_tier=_TIERS[number % len(_TIERS)],
            )
        )
    return organizations


@click.command("seed-dev-organizations")
@click.option(
    "--count",
    default=_DEFAULT_COUNT,
    show_default=True,
    type=click.IntRange(min=1),
    help="Number of organizations to insert.",
)
@click.option(
    "--reset",
    is_flag=True,
    help="Delete all existing organizations before seeding.",
)
@with_appcontext
def seed_dev_organizations_command(count: int, reset: bool):
    """Insert sample organizations for local development."""
    click.echo("=" * 60)
    click.echo("  Organizations Directory — Seed Dev Organizations")
    click.echo("=" * 60)

    # -- Step 1: Optional reset --------------------------------------------
    if reset:
        click.echo("\n[1/2] Removing existing organizations...")
        deleted = db.session.query(Organization).delete()
        click.secho(f"      ✓ Deleted {deleted} row(s).", fg="green")
    else:
        click.echo("\n[1/2] Keeping existing organizations.")

    # -- Step 2: Insert ----------------------------------------------------
    click.echo(f"\n[2/2] Inserting {count} organization(s)...")
    existing = db.session.query(Organization).count()
    db.session.add_all(build_sample_organizations(count, start=existing + 1))
    db.session.commit()

    total = db.session.query(Organization).count()
    click.secho(f"      ✓ Table now holds {total} organization(s).", fg="green")
    click.echo("=" * 60)


def register_seed_commands(app):
    """Register seed-related CLI commands with the Flask application."""
    app.cli.add_command(seed_dev_organizations_command)
