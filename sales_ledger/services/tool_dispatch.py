"""Tool Dispatch — explicit routing from tool_name to handler function.

Invariants:
    - Every tool->handler mapping is visible — no getattr magic, no auto-discovery
    - Unknown tools return UNKNOWN_TOOL error (never raises)
    - Invalid tool input returns VALIDATION_ERROR payload (never raises)
    - Data store failures (DatabaseError) propagate to the caller unchanged
    - Every call logged with tool_name and duration

Design Decisions:
    - Explicit dict over getattr: every mapping visible in one place
    - One handler class: five read-only tools share a single engine
    - Dispatch holds no per-call state: one instance serves concurrent calls
"""

import logging
import time

from sales_ledger.core.errors import ToolValidationError
from sales_ledger.services.handle_sales import SalesHandlers
from sales_ledger.services.sales_queries import SalesQueryEngine

logger = logging.getLogger(__name__)


class ToolDispatch:
    """Routes tool_name -> handler. Explicit registration, no auto-discovery."""

    def __init__(self, engine: SalesQueryEngine):
        sales = SalesHandlers(engine)

        # every mapping explicit: adding a tool requires editing this dict
        self._handlers = {
            "search_customers": sales.search_customers,
            "get_sales_for_customer": sales.get_sales_for_customer,
            "get_top_customers": sales.get_top_customers,
            "get_sales_summary": sales.get_sales_summary,
            "get_recent_sales": sales.get_recent_sales,
        }

    @property
    def tool_names(self) -> list[str]:
        return list(self._handlers)

    async def execute(self, tool_name: str, input_data: dict | None = None) -> dict:
        """Route tool_name to handler. Returns result dict. Logs every call."""
        input_data = input_data or {}
        handler = self._handlers.get(tool_name)
        if not handler:
            logger.warning(
                f"Unknown tool '{tool_name}'",
                extra={"tool_name": tool_name, "error_code": "UNKNOWN_TOOL"},
            )
            return {
                "status": "error",
                "error_code": "UNKNOWN_TOOL",
                "message": f"Tool '{tool_name}' does not exist.",
            }

        started = time.perf_counter()
        try:
            result = await handler(input_data)
        except ToolValidationError as e:
            logger.warning(
                f"Tool input rejected: {e.message}",
                extra={"tool_name": tool_name, "error_code": e.code},
            )
            return e.to_response()
        logger.info(
            f"Tool '{tool_name}' returned {result.get('count', 0)} row(s)",
            extra={
                "tool_name": tool_name,
                "row_count": result.get("count"),
                "duration_ms": round((time.perf_counter() - started) * 1000, 2),
            },
        )
        return result
