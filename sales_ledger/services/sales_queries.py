"""Sales Query Engine — the five read-only ledger operations over a SalesDataStore.

Invariants:
    - Stateless apart from the injected store and clock: safe to share across
      concurrent callers
    - Each operation makes at most one sales query plus one batch customer lookup —
      never one query per row
    - Optional date bounds resolved once into a DateWindow before any filtering
    - NotFound, empty windows, dangling customer ids and top_n/limit <= 0 all
      return normal results; nothing in that list raises
    - Data store failures propagate unchanged

Design Decisions:
    - Imperative shell around pure core: IO here, every ordering/grouping/summary
      rule lives in core/sales_aggregation.py
    - Results re-ordered and re-filtered in the engine even though stores already
      order/filter: the determinism contract holds for any store implementation
    - clock injectable: tests pin "now" for the default upper bound
"""

import logging
from datetime import datetime
from typing import Callable

from sales_ledger.core.date_window import DateWindow
from sales_ledger.core.domain_types import Customer, CustomerId
from sales_ledger.core.repository_protocols import SalesDataStore
from sales_ledger.core.query_results import (
    CustomerSalesResult,
    CustomerSearchResult,
    RecentSalesResult,
    SalesSummaryResult,
    TopCustomersResult,
)
from sales_ledger.core import sales_aggregation as agg

logger = logging.getLogger(__name__)

DEFAULT_TOP_N = 5
DEFAULT_RECENT_LIMIT = 10


class SalesQueryEngine:
    """Search, per-customer sales, top customers, period summary, recent sales."""

    def __init__(
        self,
        store: SalesDataStore,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._store = store
        self._clock = clock

    def _window(
        self, date_from: datetime | None, date_to: datetime | None,
    ) -> DateWindow:
        return DateWindow.resolve(date_from, date_to, now=self._clock())

    async def _lookup(
        self, customer_ids: set[CustomerId],
    ) -> dict[CustomerId, Customer]:
        """One batch query -> id-keyed lookup table for this call only."""
        if not customer_ids:
            return {}
        customers = await self._store.find_customers_by_ids(customer_ids)
        return {c.id: c for c in customers}

    async def search_customers(self, name_query: str) -> CustomerSearchResult:
        """Customers whose name contains name_query, case-insensitive, by id."""
        candidates = await self._store.find_customers_by_name_substring(name_query)
        matches = agg.order_customers(
            c for c in candidates if agg.name_matches(c, name_query)
        )
        logger.debug(
            f"search_customers '{name_query}' matched {len(matches)}",
            extra={"row_count": len(matches)},
        )
        return CustomerSearchResult(query=name_query, customers=matches)

    async def get_sales_for_customer(
        self,
        customer_id: int,
        date_from: datetime | None = None,
        date_to: datetime | None = None,
    ) -> CustomerSalesResult:
        """Sales of one customer in the window, newest first, with exact total."""
        cid = CustomerId(customer_id)
        window = self._window(date_from, date_to)
        customer = await self._store.find_customer_by_id(cid)
        if customer is None:
            logger.info(
                f"Customer {customer_id} not found",
                extra={"customer_id": customer_id},
            )
            return CustomerSalesResult(customer_id=cid, window=window)

        fetched = await self._store.find_sales_by_customer_and_date_range(
            cid, window.start, window.end,
        )
        sales = agg.newest_first(agg.within_window(fetched, window))
        return CustomerSalesResult(
            customer_id=cid,
            window=window,
            customer=customer,
            sales=sales,
            total=agg.total_amount(sales),
        )

    async def get_top_customers(
        self,
        date_from: datetime | None = None,
        date_to: datetime | None = None,
        top_n: int = DEFAULT_TOP_N,
    ) -> TopCustomersResult:
        """Customers ranked by revenue in the window (total desc, id asc)."""
        window = self._window(date_from, date_to)
        if top_n <= 0:
            return TopCustomersResult(window=window)

        fetched = await self._store.find_sales_by_date_range(window.start, window.end)
        groups = agg.group_by_customer(agg.within_window(fetched, window))
        ranked_ids = agg.rank_customer_ids(groups, top_n)
        customers = await self._lookup(set(ranked_ids))
        _warn_unresolved(ranked_ids, customers)
        return TopCustomersResult(
            window=window,
            rows=agg.build_ranking(groups, ranked_ids, customers),
        )

    async def get_sales_summary(
        self,
        date_from: datetime | None = None,
        date_to: datetime | None = None,
    ) -> SalesSummaryResult:
        """Revenue, transaction count, distinct customers, avg/max/min sale."""
        window = self._window(date_from, date_to)
        fetched = await self._store.find_sales_by_date_range(window.start, window.end)
        return SalesSummaryResult(
            window=window,
            summary=agg.summarize_sales(agg.within_window(fetched, window)),
        )

    async def get_recent_sales(
        self,
        customer_id: int | None = None,
        limit: int = DEFAULT_RECENT_LIMIT,
    ) -> RecentSalesResult:
        """Latest sales, optionally for one customer, truncated to limit."""
        cid = CustomerId(customer_id) if customer_id is not None else None
        if limit <= 0:
            return RecentSalesResult(customer_id=cid)

        fetched = await self._store.find_recent_sales(cid, limit)
        if cid is not None:
            fetched = [s for s in fetched if s.customer_id == cid]
        sales = agg.newest_first(fetched)[:limit]
        if not sales:
            return RecentSalesResult(customer_id=cid)

        customers = await self._lookup({s.customer_id for s in sales})
        _warn_unresolved([s.customer_id for s in sales], customers)
        return RecentSalesResult(
            customer_id=cid,
            customer_name=agg.resolve_name(customers, cid) if cid is not None else None,
            rows=agg.build_recent_rows(sales, customers),
        )


def _warn_unresolved(
    customer_ids: list[CustomerId], customers: dict[CustomerId, Customer],
) -> None:
    missing = sorted({cid for cid in customer_ids if cid not in customers})
    if missing:
        logger.warning(
            f"Sales reference unknown customer id(s) {missing}; using placeholder labels",
        )
