"""SQL Sales Store — SalesDataStore implementation over async SQLAlchemy.

Invariants:
    - Read-only: SELECT statements only, nothing is added, flushed or committed
    - One AsyncSession per method call — concurrent engine operations never
      share a session
    - Sales ordered by (sale_date desc, id asc); customers by id asc
    - Name search matches with the same casefold rule as the in-memory store,
      so "%" and "_" in a query match literally
    - ORM rows converted to core records before leaving this module

Design Decisions:
    - Session manager injected by the caller: tests pass a manager
      bound to an in-memory SQLite engine
    - Name matching done in Python over the customers table: SQLite lower()
      only folds ASCII, and the table is small
"""

from datetime import datetime
from typing import Iterable

from sqlalchemy import select

from sales_ledger.core.domain_types import Customer, CustomerId, Sale
from sales_ledger.core.sales_aggregation import name_matches
from sales_ledger.infrastructure.database import DatabaseSessionManager
from sales_ledger.models.customer import Customer as CustomerRow
from sales_ledger.models.sale import Sale as SaleRow

_NEWEST_FIRST = (SaleRow.sale_date.desc(), SaleRow.id.asc())


class SqlSalesStore:
    """Reads customers and sales through a DatabaseSessionManager."""

    def __init__(self, sessions: DatabaseSessionManager):
        self._sessions = sessions

    async def _customers(self, query) -> list[Customer]:
        async with self._sessions.session() as db:
            result = await db.execute(query.order_by(CustomerRow.id))
            return [row.to_record() for row in result.scalars().all()]

    async def _sales(self, query) -> list[Sale]:
        async with self._sessions.session() as db:
            result = await db.execute(query)
            return [row.to_record() for row in result.scalars().all()]

    async def find_customers_by_name_substring(self, query: str) -> list[Customer]:
        customers = await self._customers(select(CustomerRow))
        return [c for c in customers if name_matches(c, query)]

    async def find_customer_by_id(self, customer_id: CustomerId) -> Customer | None:
        async with self._sessions.session() as db:
            row = await db.get(CustomerRow, customer_id)
            return row.to_record() if row else None

    async def find_customers_by_ids(
        self, customer_ids: Iterable[CustomerId],
    ) -> list[Customer]:
        ids = list(customer_ids)
        if not ids:
            return []
        return await self._customers(
            select(CustomerRow).where(CustomerRow.id.in_(ids)),
        )

    async def find_sales_by_customer_and_date_range(
        self, customer_id: CustomerId, start: datetime, end: datetime,
    ) -> list[Sale]:
        return await self._sales(
            select(SaleRow)
            .where(SaleRow.customer_id == customer_id)
            .where(SaleRow.sale_date >= start)
            .where(SaleRow.sale_date <= end)
            .order_by(*_NEWEST_FIRST),
        )

    async def find_sales_by_date_range(
        self, start: datetime, end: datetime,
    ) -> list[Sale]:
        return await self._sales(
            select(SaleRow)
            .where(SaleRow.sale_date >= start)
            .where(SaleRow.sale_date <= end)
            .order_by(*_NEWEST_FIRST),
        )

    async def find_recent_sales(
        self, customer_id: CustomerId | None, limit: int,
    ) -> list[Sale]:
        if limit <= 0:
            return []
        query = select(SaleRow)
        if customer_id is not None:
            query = query.where(SaleRow.customer_id == customer_id)
        return await self._sales(query.order_by(*_NEWEST_FIRST).limit(limit))
