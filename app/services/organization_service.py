"""
Organization service: load and page through the organizations table.

Two fixed statements back the directory: one page of organizations
ordered by name, and the total row count.  The initial page load runs
both side by side; follow-up page requests from the browser only re-run
the page query.  The count is not refreshed on page changes.
"""

import logging
import re
from typing import Any, Mapping

from flask import current_app

from app.services import query_service
from app.services.pagination import ITEMS_PER_PAGE

logger = logging.getLogger(__name__)

# One page of organizations, ordered by name.
ORGANIZATIONS_QUERY = """
    SELECT organization_id, organization_name, industry, address, phone,
           email, subscription_tier, created_at
    FROM organizations
    ORDER BY organization_name
    LIMIT :limit OFFSET :offset
"""

# Total number of organizations, for the page count.
ORGANIZATIONS_COUNT_QUERY = """
    SELECT COUNT(*) AS total FROM organizations
"""

# Leading integer of a form value, the way browsers parse "12abc" as 12.
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

METHOD_NOT_ALLOWED = "Method not allowed"
LOAD_FAILED = "Failed to load organizations data"
FETCH_FAILED = "Failed to fetch organizations"


# -- Queries ---------------------------------------------------------------


def get_organizations_page(
    limit: int = ITEMS_PER_PAGE, offset: int = 0
) -> query_service.QueryData:
    """Return one page of organizations ordered by name."""
    return query_service.execute_query(
        ORGANIZATIONS_QUERY, {"limit": limit, "offset": offset}
    )


def get_organizations_count() -> query_service.QueryData:
    """Return the ``COUNT(*) AS total`` result for the organizations table."""
    return query_service.execute_query(ORGANIZATIONS_COUNT_QUERY)


# -- Initial loader --------------------------------------------------------


def load_organizations(page_size: int = ITEMS_PER_PAGE) -> dict[str, Any]:
    """
    Fetch the first page and the total count for the initial render.

    Both queries run concurrently and are joined before returning.

    Returns:
        ``{"organizations": QueryData, "organizations_count": QueryData}``
        on success, or ``{"error": message}`` if either query raised.
        Database errors reported by the query service (``is_error``)
        are not failures here; they are passed through for the page
        to display.
    """
    try:
        organizations, organizations_count = query_service.run_concurrently(
            lambda: get_organizations_page(page_size, 0),
            get_organizations_count,
            max_workers=current_app.config.get("ORGANIZATIONS_LOADER_WORKERS"),
        )
    except Exception as exc:  # pylint: disable=broad-exception-caught
        logger.exception("Error in organizations loader: %s", exc)
        return {"error": str(exc) or LOAD_FAILED}

    return {
        "organizations": organizations,
        "organizations_count": organizations_count,
    }


# -- Pagination resource action --------------------------------------------


def parse_int(value: Any, default: int) -> int:
    """
    Parse the leading integer of a form value.

    Missing, non-numeric and zero values fall back to ``default``
    instead of being rejected.
    """
    if value is None:
        return default
    match = _LEADING_INT.match(str(value))
    if match is None:
        return default
    return int(match.group(1)) or default


def handle_organizations_action(
    method: str,
    form: Mapping[str, Any],
    page_size: int = ITEMS_PER_PAGE,
) -> tuple[dict[str, Any], int]:
    """
    Serve a page-change request from the organizations table.

    Independent of the web framework: takes the request method and its
    form fields, returns the JSON body and HTTP status.

    Args:
        method:    HTTP method of the request.
        form:      Submitted form fields (``limit``, ``offset``).
        page_size: Fallback ``limit`` when the submitted one is unusable.

    Returns:
        ``(body, status)``:
          - 405 ``{"error": "Method not allowed"}`` for anything but POST.
          - 200 with the query result passed through if the query failed.
          - 500 ``{"error": "Failed to fetch organizations"}`` if an
            unexpected exception was raised.
          - 200 ``{"data": rows, "isError": False}`` otherwise.
    """
    if method.upper() != "POST":
        return {"error": METHOD_NOT_ALLOWED}, 405

    try:
        limit = parse_int(form.get("limit"), page_size)
        offset = parse_int(form.get("offset"), 0)

        organizations = get_organizations_page(limit, offset)
        if organizations.is_error:
            return organizations.to_dict(), 200

        return {"data": organizations.data, "isError": False}, 200
    except Exception as exc:  # pylint: disable=broad-exception-caught
        logger.exception("Error fetching organizations: %s", exc)
        return {"error": FETCH_FAILED}, 500
