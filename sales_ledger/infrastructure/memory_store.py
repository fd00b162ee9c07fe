"""In-Memory Sales Store — SalesDataStore implementation over fixture lists.

Invariants:
    - Snapshot semantics: records copied into tuples at construction, never mutated
    - Same ordering contract as SqlSalesStore: sales (sale_date desc, id asc),
      customers by id asc
    - Duplicate ids rejected at construction (ids are unique in the ledger)

Design Decisions:
    - Used for fixture-driven tests and for embedding the engine without a
      database; sales may reference missing customers to model dangling ids
"""

from datetime import datetime
from typing import Iterable

from sales_ledger.core.domain_types import Customer, CustomerId, Sale
from sales_ledger.core.sales_aggregation import name_matches, newest_first, order_customers


class InMemorySalesStore:
    """Read-only store backed by in-process tuples."""

    def __init__(self, customers: Iterable[Customer] = (), sales: Iterable[Sale] = ()):
        self._customers = order_customers(customers)
        self._sales = newest_first(sales)
        self._by_id = {c.id: c for c in self._customers}
        if len(self._by_id) != len(self._customers):
            raise ValueError("Duplicate customer id in fixture data")
        if len({s.id for s in self._sales}) != len(self._sales):
            raise ValueError("Duplicate sale id in fixture data")

    async def find_customers_by_name_substring(self, query: str) -> list[Customer]:
        return [c for c in self._customers if name_matches(c, query)]

    async def find_customer_by_id(self, customer_id: CustomerId) -> Customer | None:
        return self._by_id.get(customer_id)

    async def find_customers_by_ids(
        self, customer_ids: Iterable[CustomerId],
    ) -> list[Customer]:
        wanted = set(customer_ids)
        return [c for c in self._customers if c.id in wanted]

    async def find_sales_by_customer_and_date_range(
        self, customer_id: CustomerId, start: datetime, end: datetime,
    ) -> list[Sale]:
        return [
            s for s in self._sales
            if s.customer_id == customer_id and start <= s.sale_date <= end
        ]

    async def find_sales_by_date_range(
        self, start: datetime, end: datetime,
    ) -> list[Sale]:
        return [s for s in self._sales if start <= s.sale_date <= end]

    async def find_recent_sales(
        self, customer_id: CustomerId | None, limit: int,
    ) -> list[Sale]:
        if limit <= 0:
            return []
        sales = [
            s for s in self._sales
            if customer_id is None or s.customer_id == customer_id
        ]
        return sales[:limit]
