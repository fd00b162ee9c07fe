"""Bootstrap — composition root wiring settings, database, engine and dispatch.

Invariants:
    - Logging configured before anything else logs
    - Database reachability checked before seeding; failure raises DatabaseError
    - Data store injected into the engine exactly once; the engine is never rebuilt
      while the context is open
    - Engine disposed on exit, including when the caller raises

Design Decisions:
    - Async context manager instead of import-time globals: hosting layers
      (agent loops, servers, scripts) own the lifecycle
    - Seeding mirrors "ensure created" in development only; production databases
      are expected to exist and be populated
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sales_ledger.config import Settings, get_settings
from sales_ledger.core.errors import DatabaseError
from sales_ledger.db.seed import ensure_seeded
from sales_ledger.infrastructure.database import DatabaseSessionManager
from sales_ledger.infrastructure.observability import setup_logging
from sales_ledger.infrastructure.sql_store import SqlSalesStore
from sales_ledger.services.sales_queries import SalesQueryEngine
from sales_ledger.services.tool_dispatch import ToolDispatch

logger = logging.getLogger(__name__)


@asynccontextmanager
async def open_tool_dispatch(
    settings: Settings | None = None,
) -> AsyncGenerator[ToolDispatch, None]:
    """Startup/shutdown lifecycle around a ready ToolDispatch."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    try:
        if not await manager.health_check():
            raise DatabaseError("Database unreachable at startup", "connect")
        if settings.should_seed:
            await ensure_seeded(manager)
        dispatch = ToolDispatch(SalesQueryEngine(SqlSalesStore(manager)))
        logger.info(f"Sales ledger tools ready ({settings.environment})")
        yield dispatch
    finally:
        await manager.dispose()
        logger.info("Sales ledger tools shut down")
