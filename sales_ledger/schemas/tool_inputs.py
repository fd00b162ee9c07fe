"""Tool Input Schemas — Pydantic models validating agent tool arguments.

Invariants:
    - One model per tool; field names match the tool's input_schema properties
    - Dates accept ISO datetimes or ISO dates (a date is taken as 00:00);
      offsets are dropped later by DateWindow.resolve
    - top_n / limit are NOT bounded here: values <= 0 are legal and yield an
      empty report downstream
    - name_query is passed through verbatim: surrounding spaces are part of
      the substring

Design Decisions:
    - extra="ignore": agents occasionally send unknown keys; they are dropped
      rather than failing the call
    - Defaults (top_n=5, limit=10) live here and in the engine signature alike
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from sales_ledger.services.sales_queries import DEFAULT_RECENT_LIMIT, DEFAULT_TOP_N


class _ToolInput(BaseModel):
    model_config = ConfigDict(extra="ignore")


class SearchCustomersInput(_ToolInput):
    name_query: str = ""


class DateRangeInput(_ToolInput):
    date_from: datetime | None = None
    date_to: datetime | None = None


class SalesForCustomerInput(DateRangeInput):
    customer_id: int


class TopCustomersInput(DateRangeInput):
    top_n: int = DEFAULT_TOP_N


class SalesSummaryInput(DateRangeInput):
    pass


class RecentSalesInput(_ToolInput):
    customer_id: int | None = None
    limit: int = DEFAULT_RECENT_LIMIT
