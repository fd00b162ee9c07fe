"""Database Infrastructure — declarative Base and development seeding.

Invariants:
    - Single async engine per process (owned by DatabaseSessionManager)
    - All sessions are async (AsyncSession)

Design Decisions:
    - aiosqlite for development/tests, asyncpg for PostgreSQL
"""
