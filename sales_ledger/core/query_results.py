"""Query Results — immutable outputs of the five ledger operations.

Invariants:
    - Every result carries enough context (query, window, customer id) for the
      formatter to phrase empty and not-found cases without re-querying
    - Empty results are normal values: empty tuples, customer=None, summary=None
    - Rows are already ordered; formatters never re-sort

Design Decisions:
    - Tuples instead of lists: results are hashable and safely shared across
      concurrent callers
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from sales_ledger.core.date_window import DateWindow
from sales_ledger.core.domain_types import Customer, CustomerId, Sale


@dataclass(frozen=True)
class CustomerSearchResult:
    query: str
    customers: tuple[Customer, ...] = ()


@dataclass(frozen=True)
class CustomerSalesResult:
    """Sales for one customer. customer=None means the id did not resolve."""
    customer_id: CustomerId
    window: DateWindow
    customer: Customer | None = None
    sales: tuple[Sale, ...] = ()
    total: Decimal = Decimal("0")

    @property
    def found(self) -> bool:
        return self.customer is not None


@dataclass(frozen=True)
class RankedCustomer:
    customer_id: CustomerId
    name: str
    total: Decimal
    count: int


@dataclass(frozen=True)
class TopCustomersResult:
    window: DateWindow
    rows: tuple[RankedCustomer, ...] = ()


@dataclass(frozen=True)
class SalesSummary:
    total_revenue: Decimal
    total_transactions: int
    unique_customers: int
    avg_sale_value: Decimal
    largest_sale: Decimal
    smallest_sale: Decimal


@dataclass(frozen=True)
class SalesSummaryResult:
    """summary=None when the window holds no sales."""
    window: DateWindow
    summary: SalesSummary | None = None


@dataclass(frozen=True)
class RecentSaleRow:
    sale_date: datetime
    customer_id: CustomerId
    customer_name: str
    amount: Decimal


@dataclass(frozen=True)
class RecentSalesResult:
    """customer_id is the optional filter; customer_name its resolved label."""
    customer_id: CustomerId | None = None
    customer_name: str | None = None
    rows: tuple[RecentSaleRow, ...] = ()
