"""Sale ORM — persists sale transactions.

Invariants:
    - customer_id FK -> customers.id (no relationship(): the core resolves
      customers by id, never by navigating an object graph)
    - amount is NUMERIC(18, 2) and maps to Decimal
    - sale_date and customer_id indexed: every query filters on one of them

Design Decisions:
    - Naive DateTime: sale dates are wall-clock timestamps, compared against
      naive window bounds
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric
from sqlalchemy.orm import Mapped, mapped_column

from sales_ledger.db.base import Base
from sales_ledger.core.domain_types import CustomerId, Sale as SaleRecord, SaleId


class Sale(Base):
    """Sale entity — one transaction for one customer."""
    __tablename__ = "sales"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    customer_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("customers.id"), nullable=False, index=True,
    )
    amount: Mapped[Decimal] = mapped_column(
        Numeric(18, 2, asdecimal=True), nullable=False,
    )
    sale_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=False), nullable=False, index=True,
    )

    def to_record(self) -> SaleRecord:
        return SaleRecord(
            id=SaleId(self.id),
            customer_id=CustomerId(self.customer_id),
            amount=Decimal(self.amount),
            sale_date=self.sale_date,
        )
