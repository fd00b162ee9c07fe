"""Demo Seed — schema creation and development data for a fresh ledger.

Invariants:
    - ensure_seeded() is idempotent: tables created if missing, data inserted
      only when the customers table is empty
    - Sale dates are relative to `now` (months/days ago), so "recent" and
      "this year" questions always have data
    - 6 customers, 67 sales; every sale references an existing customer

Design Decisions:
    - create_all instead of migrations: the ledger schema is two tables and
      the seed only targets development databases
    - Month offsets clamp to the last day of the target month (Jan 31 - 1 month
      = Dec 31, Mar 31 - 1 month = Feb 28/29)
"""

import calendar
import logging
from datetime import datetime, timedelta
from decimal import Decimal

from sqlalchemy import func, select

from sales_ledger.db.base import Base
from sales_ledger.infrastructure.database import DatabaseSessionManager
from sales_ledger.models.customer import Customer
from sales_ledger.models.sale import Sale

logger = logging.getLogger(__name__)

DEMO_CUSTOMERS = [
    (1, "Acme Corp", "contact@acme.com"),
    (2, "Globex Industries", "sales@globex.com"),
    (3, "Initech Solutions", "info@initech.com"),
    (4, "Umbrella Ltd", "accounts@umbrella.com"),
    (5, "Stark Enterprises", "billing@stark.com"),
    (6, "Wayne Technologies", "finance@wayne.com"),
]

# (sale_id, customer_id, amount, (unit, offset)) with unit "m" = months ago, "d" = days ago
DEMO_SALES = [
    # Acme Corp: steady mid-range buyer
    (1, 1, "1200.00", ("m", 11)), (2, 1, "850.50", ("m", 10)),
    (3, 1, "3200.00", ("m", 9)), (4, 1, "450.00", ("m", 7)),
    (5, 1, "1750.75", ("m", 6)), (6, 1, "990.00", ("m", 5)),
    (7, 1, "2100.00", ("m", 4)), (8, 1, "375.00", ("m", 3)),
    (9, 1, "1540.00", ("m", 2)), (10, 1, "620.00", ("d", 15)),
    (11, 1, "2850.00", ("d", 3)),
    # Globex Industries: high-value, infrequent
    (12, 2, "12500.00", ("m", 11)), (13, 2, "8750.00", ("m", 9)),
    (14, 2, "15000.00", ("m", 8)), (15, 2, "4200.00", ("m", 7)),
    (16, 2, "11300.00", ("m", 5)), (17, 2, "9800.00", ("m", 4)),
    (18, 2, "6600.00", ("m", 3)), (19, 2, "13400.00", ("m", 2)),
    (20, 2, "7250.00", ("m", 1)), (21, 2, "18000.00", ("d", 10)),
    # Initech Solutions: frequent small purchases
    (22, 3, "199.99", ("m", 11)), (23, 3, "250.00", ("m", 10)),
    (24, 3, "175.50", ("m", 9)), (25, 3, "320.00", ("m", 8)),
    (26, 3, "210.00", ("m", 7)), (27, 3, "289.99", ("m", 6)),
    (28, 3, "145.00", ("m", 5)), (29, 3, "399.00", ("m", 4)),
    (30, 3, "220.00", ("m", 3)), (31, 3, "310.00", ("m", 2)),
    (32, 3, "265.00", ("d", 20)), (33, 3, "189.00", ("d", 5)),
    # Umbrella Ltd: inconsistent, trailing off
    (34, 4, "5500.00", ("m", 11)), (35, 4, "4800.00", ("m", 10)),
    (36, 4, "6200.00", ("m", 9)), (37, 4, "3100.00", ("m", 8)),
    (38, 4, "2200.00", ("m", 7)), (39, 4, "4100.00", ("m", 5)),
    (40, 4, "1800.00", ("m", 4)), (41, 4, "950.00", ("m", 3)),
    (42, 4, "400.00", ("m", 2)), (43, 4, "200.00", ("m", 1)),
    # Stark Enterprises: growing rapidly recently
    (44, 5, "500.00", ("m", 11)), (45, 5, "750.00", ("m", 10)),
    (46, 5, "1100.00", ("m", 9)), (47, 5, "1400.00", ("m", 8)),
    (48, 5, "2000.00", ("m", 7)), (49, 5, "2800.00", ("m", 6)),
    (50, 5, "3500.00", ("m", 5)), (51, 5, "4200.00", ("m", 4)),
    (52, 5, "5100.00", ("m", 3)), (53, 5, "6800.00", ("m", 2)),
    (54, 5, "8500.00", ("m", 1)), (55, 5, "11000.00", ("d", 7)),
    # Wayne Technologies: large quarterly spikes
    (56, 6, "3000.00", ("m", 11)), (57, 6, "22000.00", ("m", 10)),
    (58, 6, "2500.00", ("m", 9)), (59, 6, "2800.00", ("m", 8)),
    (60, 6, "19500.00", ("m", 7)), (61, 6, "3100.00", ("m", 6)),
    (62, 6, "2700.00", ("m", 5)), (63, 6, "24000.00", ("m", 4)),
    (64, 6, "3300.00", ("m", 3)), (65, 6, "2900.00", ("m", 2)),
    (66, 6, "21000.00", ("m", 1)), (67, 6, "3400.00", ("d", 8)),
]


def months_ago(now: datetime, months: int) -> datetime:
    """Shift back by calendar months, clamping the day to the target month."""
    total = now.year * 12 + (now.month - 1) - months
    year, month = divmod(total, 12)
    month += 1
    day = min(now.day, calendar.monthrange(year, month)[1])
    return now.replace(year=year, month=month, day=day)


def _sale_date(now: datetime, offset: tuple[str, int]) -> datetime:
    unit, amount = offset
    if unit == "m":
        return months_ago(now, amount)
    return now - timedelta(days=amount)


def build_demo_rows(now: datetime) -> tuple[list[Customer], list[Sale]]:
    customers = [
        Customer(id=cid, name=name, email=email)
        for cid, name, email in DEMO_CUSTOMERS
    ]
    sales = [
        Sale(
            id=sid, customer_id=cid, amount=Decimal(amount),
            sale_date=_sale_date(now, offset),
        )
        for sid, cid, amount, offset in DEMO_SALES
    ]
    return customers, sales


async def create_schema(manager: DatabaseSessionManager) -> None:
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def ensure_seeded(
    manager: DatabaseSessionManager, now: datetime | None = None,
) -> bool:
    """Create tables and insert demo data into an empty ledger. True if seeded."""
    await create_schema(manager)
    async with manager.session() as db:
        existing = await db.scalar(select(func.count()).select_from(Customer))
        if existing:
            logger.info(f"Ledger already holds {existing} customer(s); skipping seed")
            return False
        customers, sales = build_demo_rows(now or datetime.now())
        db.add_all(customers)
        await db.flush()
        db.add_all(sales)
        await db.commit()
    logger.info(
        f"Seeded demo ledger: {len(customers)} customers, {len(sales)} sales",
        extra={"row_count": len(sales)},
    )
    return True
