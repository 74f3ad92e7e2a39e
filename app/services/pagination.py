"""
Pagination service: page arithmetic and the directory's page state.

The organizations page keeps a small amount of state between requests
in the browser: the page number being shown, the total record count
from the initial load, and the rows currently in the table.
``PageState`` models that state explicitly so the view is a pure
function of it:

    resolved --change_page()--> pending --resolve()--> resolved | error

The total count is only ever set from the initial load.  Page changes
swap rows but keep the count they started with, even if the table has
grown or shrunk in the meantime.
"""

import logging
import math
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from app.services.query_service import QueryData

logger = logging.getLogger(__name__)

# Rows per page in the organizations table.
ITEMS_PER_PAGE = 10

# Page state values.
STATUS_PENDING = "pending"
STATUS_RESOLVED = "resolved"
STATUS_ERROR = "error"


# -- Page arithmetic -------------------------------------------------------


def total_pages(count: int, page_size: int = ITEMS_PER_PAGE) -> int:
    """Return the number of pages needed for ``count`` rows (0 if none)."""
    if count <= 0:
        return 0
    return math.ceil(count / page_size)


def page_offset(page: int, page_size: int = ITEMS_PER_PAGE) -> int:
    """Return how many rows precede the first row of ``page``."""
    return (page - 1) * page_size


def get_total_count(count_data: QueryData) -> int:
    """
    Return the total from a ``COUNT(*) AS total`` result.

    Missing rows, a failed query, or a zero total all give 0.
    """
    if count_data.is_error or not count_data.data:
        return 0
    return int(count_data.data[0].get("total") or 0)


# -- Page state ------------------------------------------------------------


@dataclass
class PageState:
    """
    Everything the organizations table is rendered from.

    Attributes:
        current_page:        1-based page number being displayed.
        organizations_count: Total rows, as of the initial load.
        organizations:       Rows of the current page.
        status:              'pending', 'resolved' or 'error'.
        error:               Message shown in the error state.
        page_size:           Rows per page.
    """

    current_page: int = 1
    organizations_count: int = 0
    organizations: list[dict[str, Any]] = field(default_factory=list)
    status: str = STATUS_RESOLVED
    error: str | None = None
    page_size: int = ITEMS_PER_PAGE

    @classmethod
    def from_loader(
        cls,
        result: dict[str, Any],
        page_size: int = ITEMS_PER_PAGE,
    ) -> "PageState":
        """
        Build the first page's state from the initial loader's result.

        A loader failure (``{"error": ...}``) or a failed page query
        yields the error state.  A failed count query is tolerated and
        shows as a count of zero.
        """
        if "error" in result:
            return cls(status=STATUS_ERROR, error=result["error"], page_size=page_size)

        organizations: QueryData = result["organizations"]
        count = get_total_count(result["organizations_count"])
        if organizations.is_error:
            return cls(
                organizations_count=count,
                status=STATUS_ERROR,
                error=organizations.error or "Failed to load organizations data",
                page_size=page_size,
            )
        return cls(
            organizations_count=count,
            organizations=list(organizations.data),
            page_size=page_size,
        )

    # -- Derived values ----------------------------------------------------

    @property
    def is_loading(self) -> bool:
        return self.status == STATUS_PENDING

    @property
    def total_pages(self) -> int:
        return total_pages(self.organizations_count, self.page_size)

    @property
    def previous_disabled(self) -> bool:
        return self.current_page == 1 or self.is_loading

    @property
    def next_disabled(self) -> bool:
        return self.current_page == self.total_pages or self.is_loading

    # -- Transitions -------------------------------------------------------

    def change_page(self, page: int) -> dict[str, str]:
        """
        Move to ``page`` and return the form fields to submit for it.

        The displayed page number changes immediately, before any rows
        arrive.  The page is not range-checked; the disabled state of
        the Previous/Next buttons is the only guard.
        """
        self.current_page = page
        self.status = STATUS_PENDING
        self.error = None
        offset = page_offset(page, self.page_size)
        logger.debug("Requesting page %d (offset %d)", page, offset)
        return {"limit": str(self.page_size), "offset": str(offset)}

    def resolve(self, body: dict[str, Any]) -> None:
        """
        Apply a resource endpoint response body.

        ``organizations_count`` is left untouched.
        """
        if body.get("isError") or "error" in body:
            self.status = STATUS_ERROR
            self.error = body.get("error") or "Failed to fetch organizations"
            return
        self.organizations = list(body.get("data") or [])
        self.status = STATUS_RESOLVED
        self.error = None


# -- Table formatting ------------------------------------------------------


def format_locale_date(value: Any) -> str:
    """
    Format a creation timestamp as a date in the server's locale.

    Accepts ``datetime``/``date`` objects or ISO-8601 strings (the form
    rows take after ``execute_query``).  Values that cannot be parsed
    are shown as-is.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return value
    if isinstance(value, (datetime, date)):
        return value.strftime("%x")
    return str(value)
