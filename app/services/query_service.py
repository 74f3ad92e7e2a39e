"""
Query service: run read-only SQL statements and report the outcome.

``execute_query`` is the single place raw SQL is sent to the database.
Statements are always executed through SQLAlchemy ``text()`` with bound
parameters, so user-supplied values never end up in the SQL string.

Database errors, and bound values the driver rejects, are captured into
a ``QueryData`` result rather than raised: callers decide how to show
them.  Anything that is not a database error (programming mistakes,
a missing app context) still propagates.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Callable, Mapping

from flask import current_app
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.extensions import db

logger = logging.getLogger(__name__)


# =========================================================================
# Data classes for structured query results
# =========================================================================


@dataclass
class QueryData:
    """Rows returned by a query, or the error that prevented them."""

    data: list[dict[str, Any]] = field(default_factory=list)
    is_error: bool = False
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body sent to the browser."""
        body: dict[str, Any] = {"data": self.data, "isError": self.is_error}
        if self.error is not None:
            body["error"] = self.error
        return body


def _serialize_value(value: Any) -> Any:
    """Render date/time values as ISO-8601 strings; pass the rest through."""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


def execute_query(sql: str, params: Mapping[str, Any] | None = None) -> QueryData:
    """
    Execute a single read-only statement and collect its rows.

    Args:
        sql:    SQL text using named bind parameters (``:limit``).
        params: Values for the bind parameters.

    Returns:
        QueryData with one dict per row, or ``is_error=True`` and the
        database error message if the statement failed.
    """
    try:
        result = db.session.execute(text(sql), dict(params or {}))
        rows = [
            {key: _serialize_value(value) for key, value in row.items()}
            for row in result.mappings().all()
        ]
    except (SQLAlchemyError, OverflowError) as exc:
        # OverflowError: a bound integer the driver cannot represent.
        db.session.rollback()
        logger.error("Query failed: %s", exc)
        message = str(getattr(exc, "orig", None) or exc)
        return QueryData(data=[], is_error=True, error=message)

    logger.debug("Query returned %d row(s)", len(rows))
    return QueryData(data=rows)


# =========================================================================
# Concurrent execution
# =========================================================================


def run_concurrently(
    *calls: Callable[[], Any],
    max_workers: int | None = None,
) -> list[Any]:
    """
    Run independent zero-argument callables in parallel and join them.

    Each call runs inside its own application context (and therefore
    its own database session).  Results come back in the order the
    calls were given.  Every call is allowed to finish; if any raised,
    the first exception in call order is re-raised afterwards.

    Args:
        calls:       Callables to run.
        max_workers: Thread pool size.  Defaults to one thread per call.

    Returns:
        List of return values, one per call.
    """
    if not calls:
        return []

    app = current_app._get_current_object()  # pylint: disable=protected-access

    def _in_app_context(call: Callable[[], Any]) -> Any:
        with app.app_context():
            return call()

    with ThreadPoolExecutor(max_workers=max_workers or len(calls)) as executor:
        futures = [executor.submit(_in_app_context, call) for call in calls]

    # The executor has joined every worker by now.
    for future in futures:
        exc = future.exception()
        if exc is not None:
            raise exc

    return [future.result() for future in futures]
