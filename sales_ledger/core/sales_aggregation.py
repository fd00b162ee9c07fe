"""Sales Aggregation — pure filtering, ordering, ranking and summary math.

Invariants:
    - Pure functions: no IO, no async, no DB
    - Newest-first order is (sale_date desc, sale id asc): deterministic on ties
    - Top-N ranking is (total desc, customer_id asc): explicit tie-break, never
      relies on sort stability
    - Sums are exact Decimal arithmetic; min/max report literal amounts
    - summarize_sales returns None for an empty input (no division by zero)

Design Decisions:
    - Case-insensitive matching uses casefold(), not lower()
    - Ranking groups in Python over one windowed query: one round trip, and the
      tie-break is the same whatever the backing store
"""

from collections import defaultdict
from decimal import Decimal
from typing import Iterable, Mapping

from sales_ledger.core.domain_types import Customer, CustomerId, Sale, placeholder_name
from sales_ledger.core.date_window import DateWindow
from sales_ledger.core.query_results import RankedCustomer, RecentSaleRow, SalesSummary

_ZERO = Decimal("0")


def name_matches(customer: Customer, query: str) -> bool:
    """Case-insensitive substring match. Empty query matches everyone."""
    return query.casefold() in customer.name.casefold()


def order_customers(customers: Iterable[Customer]) -> tuple[Customer, ...]:
    return tuple(sorted(customers, key=lambda c: c.id))


def newest_first(sales: Iterable[Sale]) -> tuple[Sale, ...]:
    """Order by sale_date descending, ties by ascending sale id."""
    by_id = sorted(sales, key=lambda s: s.id)
    return tuple(sorted(by_id, key=lambda s: s.sale_date, reverse=True))


def within_window(sales: Iterable[Sale], window: DateWindow) -> list[Sale]:
    return [s for s in sales if window.contains(s.sale_date)]


def total_amount(sales: Iterable[Sale]) -> Decimal:
    return sum((s.amount for s in sales), _ZERO)


def resolve_name(customers: Mapping[CustomerId, Customer], customer_id: CustomerId) -> str:
    """Customer name, or the placeholder label for a dangling reference."""
    customer = customers.get(customer_id)
    return customer.name if customer else placeholder_name(customer_id)


def group_by_customer(sales: Iterable[Sale]) -> dict[CustomerId, tuple[Decimal, int]]:
    """customer_id -> (sum of amount, row count)."""
    totals: dict[CustomerId, Decimal] = defaultdict(lambda: _ZERO)
    counts: dict[CustomerId, int] = defaultdict(int)
    for sale in sales:
        totals[sale.customer_id] += sale.amount
        counts[sale.customer_id] += 1
    return {cid: (totals[cid], counts[cid]) for cid in totals}


def rank_customer_ids(
    groups: Mapping[CustomerId, tuple[Decimal, int]], top_n: int,
) -> list[CustomerId]:
    """Ids of the top_n groups by total desc, customer_id asc."""
    if top_n <= 0:
        return []
    ranked = sorted(groups, key=lambda cid: (-groups[cid][0], cid))
    return ranked[:top_n]


def build_ranking(
    groups: Mapping[CustomerId, tuple[Decimal, int]],
    ranked_ids: Iterable[CustomerId],
    customers: Mapping[CustomerId, Customer],
) -> tuple[RankedCustomer, ...]:
    return tuple(
        RankedCustomer(
            customer_id=cid,
            name=resolve_name(customers, cid),
            total=groups[cid][0],
            count=groups[cid][1],
        )
        for cid in ranked_ids
    )


def summarize_sales(sales: list[Sale]) -> SalesSummary | None:
    """Revenue, counts and extremes. None when there is nothing to summarize."""
    if not sales:
        return None
    revenue = total_amount(sales)
    amounts = [s.amount for s in sales]
    return SalesSummary(
        total_revenue=revenue,
        total_transactions=len(sales),
        unique_customers=len({s.customer_id for s in sales}),
        avg_sale_value=revenue / len(sales),
        largest_sale=max(amounts),
        smallest_sale=min(amounts),
    )


def build_recent_rows(
    sales: Iterable[Sale], customers: Mapping[CustomerId, Customer],
) -> tuple[RecentSaleRow, ...]:
    return tuple(
        RecentSaleRow(
            sale_date=s.sale_date,
            customer_id=s.customer_id,
            customer_name=resolve_name(customers, s.customer_id),
            amount=s.amount,
        )
        for s in sales
    )
