"""Domain Types — identity types and immutable ledger records.

Invariants:
    - CustomerId, SaleId wrap ints — the only link from Sale to Customer is the id
    - Customer and Sale are frozen: the core never mutates ledger data
    - Sale.amount is a Decimal at currency scale, never a float

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Plain dataclasses instead of ORM rows in core: core stays free of SQLAlchemy,
      stores convert rows at the boundary
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

CustomerId = NewType("CustomerId", int)
SaleId = NewType("SaleId", int)


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class Customer:
    """A customer of the ledger."""
    id: CustomerId
    name: str
    email: str


@dataclass(frozen=True)
class Sale:
    """One sale transaction, referencing its customer by id only."""
    id: SaleId
    customer_id: CustomerId
    amount: Decimal
    sale_date: datetime


def placeholder_name(customer_id: int) -> str:
    """Display label for a customer id that does not resolve to a Customer."""
    return f"Customer {customer_id}"
