"""Customer ORM — persists ledger customers.

Invariants:
    - id is an integer primary key, stable for the life of the ledger
    - name and email are non-nullable
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from sales_ledger.db.base import Base
from sales_ledger.core.domain_types import Customer as CustomerRecord, CustomerId


class Customer(Base):
    """Customer entity — referenced by sales through customer_id."""
    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)

    def to_record(self) -> CustomerRecord:
        return CustomerRecord(id=CustomerId(self.id), name=self.name, email=self.email)
