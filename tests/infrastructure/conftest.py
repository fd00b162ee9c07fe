"""Infrastructure test fixtures — in-memory SQLite behind the real session manager.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - The fixture ledger (tests/ledger_fixtures.py) is loaded through the ORM,
      including a sale whose customer row is missing

Design Decisions:
    - SQLite in-memory via aiosqlite: fast, no external dependency
    - Foreign keys are not enforced by SQLite by default, which lets the
      dangling-reference sale be inserted as-is
"""

import pytest

from sales_ledger.db.seed import create_schema
from sales_ledger.infrastructure.database import DatabaseSessionManager
from sales_ledger.infrastructure.sql_store import SqlSalesStore
from sales_ledger.models.customer import Customer as CustomerRow
from sales_ledger.models.sale import Sale as SaleRow
from tests.ledger_fixtures import CUSTOMERS, SALES


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await create_schema(manager)
    yield manager
    await manager.dispose()


@pytest.fixture
async def seeded_manager(db_manager):
    async with db_manager.session() as db:
        db.add_all(
            CustomerRow(id=c.id, name=c.name, email=c.email) for c in CUSTOMERS
        )
        await db.flush()
        db.add_all(
            SaleRow(
                id=s.id, customer_id=s.customer_id,
                amount=s.amount, sale_date=s.sale_date,
            )
            for s in SALES
        )
        await db.commit()
    return db_manager


@pytest.fixture
def sql_store(seeded_manager):
    return SqlSalesStore(seeded_manager)
