"""Sales Handlers — tool implementations for the five ledger queries (5 methods).

Invariants:
    - Every handler: validate input -> one engine call -> format report
    - Handlers never touch the data store directly (engine is the only caller)
    - Success payload always has status="ok" and a non-empty "report" string
    - Malformed input raises ToolValidationError (dispatch turns it into an
      error payload); empty/not-found results are "ok" with an explanatory report

Design Decisions:
    - Structured counts returned next to the report: agents and tests can
      branch on "found"/"count" without parsing text
    - Amounts in payloads are strings: Decimal survives JSON without float drift
"""

from pydantic import BaseModel, ValidationError

from sales_ledger.core.errors import ErrorContext, ToolValidationError
from sales_ledger.core import format_report as fmt
from sales_ledger.schemas.tool_inputs import (
    RecentSalesInput,
    SalesForCustomerInput,
    SalesSummaryInput,
    SearchCustomersInput,
    TopCustomersInput,
)
from sales_ledger.services.sales_queries import SalesQueryEngine


def _parse(model: type[BaseModel], input_data: dict, tool_name: str):
    """Validate tool input or raise ToolValidationError naming the first bad field."""
    try:
        return model.model_validate(input_data)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(loc) for loc in first["loc"]) or "input"
        raise ToolValidationError(
            f"Invalid value for '{field}': {first['msg']}",
            field,
            ErrorContext(tool_name=tool_name),
        ) from e


class SalesHandlers:
    """Read-only ledger tools — search, per-customer, ranking, summary, recent."""

    def __init__(self, engine: SalesQueryEngine):
        self.engine = engine

    async def search_customers(self, input_data: dict) -> dict:
        """Resolve a (partial) name to customer ids."""
        params = _parse(SearchCustomersInput, input_data, "search_customers")
        result = await self.engine.search_customers(params.name_query)
        return {
            "status": "ok",
            "count": len(result.customers),
            "customer_ids": [c.id for c in result.customers],
            "report": fmt.format_customer_search(result),
        }

    async def get_sales_for_customer(self, input_data: dict) -> dict:
        params = _parse(SalesForCustomerInput, input_data, "get_sales_for_customer")
        result = await self.engine.get_sales_for_customer(
            params.customer_id, params.date_from, params.date_to,
        )
        return {
            "status": "ok",
            "found": result.found,
            "count": len(result.sales),
            "total": str(result.total),
            "report": fmt.format_customer_sales(result),
        }

    async def get_top_customers(self, input_data: dict) -> dict:
        params = _parse(TopCustomersInput, input_data, "get_top_customers")
        result = await self.engine.get_top_customers(
            params.date_from, params.date_to, params.top_n,
        )
        return {
            "status": "ok",
            "count": len(result.rows),
            "customer_ids": [r.customer_id for r in result.rows],
            "report": fmt.format_top_customers(result),
        }

    async def get_sales_summary(self, input_data: dict) -> dict:
        params = _parse(SalesSummaryInput, input_data, "get_sales_summary")
        result = await self.engine.get_sales_summary(params.date_from, params.date_to)
        summary = result.summary
        return {
            "status": "ok",
            "count": summary.total_transactions if summary else 0,
            "total_revenue": str(summary.total_revenue) if summary else "0",
            "report": fmt.format_sales_summary(result),
        }

    async def get_recent_sales(self, input_data: dict) -> dict:
        """Latest sales, optionally for one customer."""
        params = _parse(RecentSalesInput, input_data, "get_recent_sales")
        result = await self.engine.get_recent_sales(params.customer_id, params.limit)
        return {
            "status": "ok",
            "count": len(result.rows),
            "report": fmt.format_recent_sales(result),
        }
