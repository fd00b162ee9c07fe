"""Report Formatting — pure functions from query results to agent-facing text.

Invariants:
    - All functions are pure (no IO, no async, no DB) and deterministic
    - Empty and not-found results always produce a distinct, non-empty message
      naming what yielded nothing
    - An explicit window renders " from {start} to {end}"; a defaulted window
      renders " (all time)" instead of echoing datetime.min/now
    - Ranked lists are 1-indexed

Design Decisions:
    - One fixed locale (en-US), no locale lookup: currency "$1,234.56",
      negatives "-$12.50", short date "M/D/YYYY" (year padded to 4 digits)
    - Currency rounds half-up to cents — averages are the only values that
      carry more than two decimal places
    - Lines joined with "\\n", no trailing newline
"""

from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP

from sales_ledger.core.date_window import DateWindow
from sales_ledger.core.query_results import (
    CustomerSalesResult,
    CustomerSearchResult,
    RecentSalesResult,
    SalesSummaryResult,
    TopCustomersResult,
)

_CENT = Decimal("0.01")


# -- Value formatting ----------------------------------------------------------

def format_currency(amount: Decimal) -> str:
    """en-US currency: $1,234.56 / -$12.50."""
    cents = amount.quantize(_CENT, rounding=ROUND_HALF_UP)
    sign = "-" if cents < 0 else ""
    return f"{sign}${abs(cents):,.2f}"


def format_date(moment: datetime) -> str:
    """en-US short date: 3/7/2025, 1/1/0001."""
    return f"{moment.month}/{moment.day}/{moment.year:04d}"


def describe_window(window: DateWindow) -> str:
    """Header suffix for a window."""
    if not window.explicit:
        return " (all time)"
    return f" from {format_date(window.start)} to {format_date(window.end)}"


def _join(lines: list[str]) -> str:
    return "\n".join(lines)


# -- Per-result formatters -----------------------------------------------------

def format_customer_search(result: CustomerSearchResult) -> str:
    if not result.customers:
        return f"No customers found matching '{result.query}'."
    lines = [
        f"Found {len(result.customers)} customer(s) matching '{result.query}':",
    ]
    lines.extend(
        f"  - Id: {c.id} | Name: {c.name} | Email: {c.email}"
        for c in result.customers
    )
    return _join(lines)


def format_customer_sales(result: CustomerSalesResult) -> str:
    if result.customer is None:
        return f"No customer found with ID {result.customer_id}."
    name = result.customer.name
    window = result.window
    if not result.sales:
        if window.explicit:
            return (
                f"No sales found for {name} in the specified date range "
                f"({format_date(window.start)} to {format_date(window.end)})."
            )
        return f"No sales found for {name}."

    lines = [f"Sales for {name}{describe_window(window)}:"]
    lines.extend(
        f"  - {format_date(s.sale_date)}: {format_currency(s.amount)}"
        for s in result.sales
    )
    lines.append(
        f"  Total: {format_currency(result.total)} "
        f"across {len(result.sales)} sale(s).",
    )
    return _join(lines)


def format_top_customers(result: TopCustomersResult) -> str:
    if not result.rows:
        return "No sales data found for the specified period."
    lines = [
        f"Top {len(result.rows)} customer(s) by revenue"
        f"{describe_window(result.window)}:",
    ]
    lines.extend(
        f"  {rank}. {row.name}: {format_currency(row.total)} "
        f"across {row.count} sale(s)"
        for rank, row in enumerate(result.rows, start=1)
    )
    return _join(lines)


def format_sales_summary(result: SalesSummaryResult) -> str:
    summary = result.summary
    if summary is None:
        return "No sales found for the specified period."
    return _join([
        f"Sales summary{describe_window(result.window)}:",
        f"  Total revenue:       {format_currency(summary.total_revenue)}",
        f"  Total transactions:  {summary.total_transactions}",
        f"  Unique customers:    {summary.unique_customers}",
        f"  Average sale value:  {format_currency(summary.avg_sale_value)}",
        f"  Largest sale:        {format_currency(summary.largest_sale)}",
        f"  Smallest sale:       {format_currency(summary.smallest_sale)}",
    ])


def format_recent_sales(result: RecentSalesResult) -> str:
    if not result.rows:
        if result.customer_id is not None:
            return f"No recent sales found for customer ID {result.customer_id}."
        return "No sales found."
    scope = (
        f" for {result.customer_name}"
        if result.customer_id is not None
        else " across all customers"
    )
    lines = [f"Most recent {len(result.rows)} sale(s){scope}:"]
    lines.extend(
        f"  - {format_date(row.sale_date)}: {row.customer_name} - "
        f"{format_currency(row.amount)}"
        for row in result.rows
    )
    return _join(lines)
