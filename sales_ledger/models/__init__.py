"""ORM Models — SQLAlchemy declarative models for the ledger tables.

Invariants:
    - All models inherit from Base (db/base.py)
    - ORM rows never cross into core: stores convert them with to_record()

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata knows every table before
      create_all runs
"""

from sales_ledger.models.customer import Customer  # noqa: F401
from sales_ledger.models.sale import Sale  # noqa: F401
