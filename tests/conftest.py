"""
Pytest configuration and shared fixtures.

Provides a test application, database session, and test client that
all test modules can use. Uses the ``testing`` configuration, which
points at an in-memory SQLite database created once per session.
"""

from datetime import datetime

import pytest

from app import create_app
from app.extensions import db as _db
from app.models.organization import Organization


@pytest.fixture(scope="session")
def app():
    """
    Create a Flask application configured for testing.

    The app is created once per test session, and the schema is built
    from the models since the in-memory database starts empty.
    """
    app = create_app("testing")

    # Establish an application context for the entire test session.
    with app.app_context():
        _db.create_all()
        yield app
        _db.drop_all()


@pytest.fixture(scope="function")
def db_session(app):  # pylint: disable=redefined-outer-name
    """
    Provide the database session for a single test.

    Rows committed during the test are deleted afterwards so every
    test starts with an empty organizations table.
    """
    yield _db.session

    _db.session.rollback()
    _db.session.query(Organization).delete()
    _db.session.commit()


@pytest.fixture(scope="function")
def make_organizations(db_session):  # pylint: disable=redefined-outer-name
    """
    Factory fixture that inserts ``count`` organizations and returns them.

    Names are zero-padded (``Org 001``) so that ordering by name matches
    insertion order.  Every row shares the same creation timestamp.
    """

    def _make(count: int) -> list[Organization]:
        rows = [
            Organization(
                organization_name=f"Org {number:03d}",
                industry="Retail",
                address=f"{number} Market Street",
                phone=f"555-{number:04d}",
                email=f"org{number}@example.com",
                subscription_tier="premium",
                created_at=datetime(2024, 3, 15, 9, 30),
            )
            for number in range(1, count + 1)
        ]
        db_session.add_all(rows)
        db_session.commit()
        return rows

    return _make


@pytest.fixture(scope="function")
def client(app):  # pylint: disable=redefined-outer-name
    """
    Provide a Flask test client for making HTTP requests.

    Usage in tests::

        def test_index(client):
            response = client.get("/")
            assert response.status_code == 200
    """
    with app.test_client() as test_client:
        yield test_client
