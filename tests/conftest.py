"""Root conftest — shared test configuration and the fixture ledger."""

import os

import pytest

# Ensure tests never touch a developer's ledger file
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "development")

from sales_ledger.infrastructure.memory_store import InMemorySalesStore  # noqa: E402
from sales_ledger.services.sales_queries import SalesQueryEngine  # noqa: E402
from tests.ledger_fixtures import CUSTOMERS, NOW, SALES, CountingStore  # noqa: E402


@pytest.fixture
def store():
    return InMemorySalesStore(CUSTOMERS, SALES)


@pytest.fixture
def counting_store(store):
    return CountingStore(store)


@pytest.fixture
def engine(store):
    return SalesQueryEngine(store, clock=lambda: NOW)
