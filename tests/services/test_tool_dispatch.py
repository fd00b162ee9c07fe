"""Tool Dispatch — tests for explicit tool routing.

Tests cover:
    - All 5 tools are registered and match the tool schemas
    - Unknown tools return UNKNOWN_TOOL error
    - Invalid input returns VALIDATION_ERROR with the offending field
    - Missing input_data treated as empty input
    - Data store failures propagate (not swallowed into a payload)
"""

import pytest

from sales_ledger.core.errors import DatabaseError
from sales_ledger.services.define_sales_tools import TOOLS_SALES
from sales_ledger.services.sales_queries import SalesQueryEngine
from sales_ledger.services.tool_dispatch import ToolDispatch
from tests.ledger_fixtures import NOW


@pytest.fixture
def dispatch(engine):
    return ToolDispatch(engine)


async def test_dispatch_has_all_5_tools(dispatch):
    expected_tools = [
        "search_customers", "get_sales_for_customer", "get_top_customers",
        "get_sales_summary", "get_recent_sales",
    ]
    assert dispatch.tool_names == expected_tools


def test_every_schema_has_a_handler(engine):
    dispatch = ToolDispatch(engine)
    assert sorted(t["name"] for t in TOOLS_SALES) == sorted(dispatch.tool_names)


async def test_dispatch_returns_error_for_unknown_tool(dispatch):
    result = await dispatch.execute("delete_customer", {})
    assert result["status"] == "error"
    assert result["error_code"] == "UNKNOWN_TOOL"


async def test_dispatch_routes_to_search_customers(dispatch):
    result = await dispatch.execute("search_customers", {"name_query": "acme"})
    assert result["status"] == "ok"
    assert result["customer_ids"] == [1]


async def test_dispatch_accepts_missing_input(dispatch):
    result = await dispatch.execute("get_sales_summary")
    assert result["status"] == "ok"
    assert result["count"] == 8


async def test_dispatch_returns_validation_error_for_bad_date(dispatch):
    result = await dispatch.execute(
        "get_sales_for_customer", {"customer_id": 1, "date_from": "last tuesday"},
    )
    assert result["status"] == "error"
    assert result["error_code"] == "VALIDATION_ERROR"
    assert result["field"] == "date_from"
    assert result["tool_name"] == "get_sales_for_customer"


async def test_dispatch_returns_validation_error_for_missing_customer_id(dispatch):
    result = await dispatch.execute("get_sales_for_customer", {})
    assert result["error_code"] == "VALIDATION_ERROR"
    assert result["field"] == "customer_id"


class _FailingStore:
    async def find_sales_by_date_range(self, start, end):
        raise DatabaseError("Connection or operational error", "execute")


async def test_dispatch_propagates_data_store_failures():
    dispatch = ToolDispatch(SalesQueryEngine(_FailingStore(), clock=lambda: NOW))
    with pytest.raises(DatabaseError):
        await dispatch.execute("get_sales_summary", {})
