"""Boundary Protocols — contract between the query engine and the data store.

Invariants:
    - Core NEVER imports from infrastructure — dependency arrows point inward only
    - The store is read-only: no method mutates Customer or Sale data
    - Date-range methods treat both bounds as inclusive
    - find_recent_sales returns sales newest first, at most `limit` rows

Design Decisions:
    - Protocol over ABC: structural subtyping, the SQL store and the in-memory
      store share no base class
    - Async in Protocol: boundary methods are async because implementations do IO,
      but core pure functions that USE these results are never async themselves —
      the engine orchestrates the async calls around the pure logic
    - find_customers_by_ids: one batch lookup per operation, never per-row queries
"""

from datetime import datetime
from typing import Iterable, Protocol

from sales_ledger.core.domain_types import Customer, CustomerId, Sale


class SalesDataStore(Protocol):
    """Contract for read access to customers and sales — implemented by shell."""
    async def find_customers_by_name_substring(
        self, query: str,
    ) -> list[Customer]: ...
    async def find_customer_by_id(
        self, customer_id: CustomerId,
    ) -> Customer | None: ...
    async def find_customers_by_ids(
        self, customer_ids: Iterable[CustomerId],
    ) -> list[Customer]: ...
    async def find_sales_by_customer_and_date_range(
        self, customer_id: CustomerId, start: datetime, end: datetime,
    ) -> list[Sale]: ...
    async def find_sales_by_date_range(
        self, start: datetime, end: datetime,
    ) -> list[Sale]: ...
    async def find_recent_sales(
        self, customer_id: CustomerId | None, limit: int,
    ) -> list[Sale]: ...
