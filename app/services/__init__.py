"""
Service layer package.

Each service module encapsulates one domain of business logic.
Services are the only layer that talks to the database; routes
never access it directly.

Import services in route modules as needed::

    from app.services import organization_service
"""
