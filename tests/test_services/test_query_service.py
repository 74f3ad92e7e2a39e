"""
Tests for query_service.execute_query() and run_concurrently().

Uses the in-memory test database; ``make_organizations`` seeds rows
that are removed again after each test.
"""

import pytest

from app.services import query_service


class TestExecuteQuery:
    """Tests for running a single statement."""

    def test_rows_come_back_as_dicts(self, make_organizations):
        make_organizations(2)

        result = query_service.execute_query(
            "SELECT organization_name FROM organizations ORDER BY organization_name"
        )

        assert result.is_error is False
        assert result.data == [
            {"organization_name": "Org 001"},
            {"organization_name": "Org 002"},
        ]

    def test_bound_parameters_are_not_interpolated(self, make_organizations):
        """A hostile value is compared as data, not executed as SQL."""
        make_organizations(3)

        result = query_service.execute_query(
            "SELECT COUNT(*) AS total FROM organizations WHERE organization_name = :name",
            {"name": "x' OR '1'='1"},
        )

        assert result.data == [{"total": 0}]

    def test_database_error_is_reported_not_raised(self, db_session):
        result = query_service.execute_query("SELECT * FROM no_such_table")

        assert result.is_error is True
        assert result.data == []
        assert "no_such_table" in result.error

    def test_out_of_range_integer_is_reported_not_raised(self, db_session):
        """A bound value the driver cannot store is a query error too."""
        result = query_service.execute_query(
            "SELECT :offset AS value", {"offset": 99999999999999999999}
        )

        assert result.is_error is True
        assert result.data == []
        assert result.error

    def test_wire_format(self):
        ok = query_service.QueryData(data=[{"total": 1}])
        failed = query_service.QueryData(is_error=True, error="boom")

        assert ok.to_dict() == {"data": [{"total": 1}], "isError": False}
        assert failed.to_dict() == {"data": [], "isError": True, "error": "boom"}


class TestRunConcurrently:
    """Tests for the parallel fan-out used by the initial loader."""

    def test_results_keep_call_order(self, app):
        results = query_service.run_concurrently(lambda: "first", lambda: "second")

        assert results == ["first", "second"]

    def test_exception_is_raised_after_join(self, app):
        finished = []

        def _fails():
            raise RuntimeError("query exploded")

        def _succeeds():
            finished.append(True)
            return "ok"

        with pytest.raises(RuntimeError, match="query exploded"):
            query_service.run_concurrently(_fails, _succeeds)

        assert finished == [True]

    def test_no_calls(self, app):
        assert query_service.run_concurrently() == []
