"""Database Infrastructure — declarative Base, portable SQL expressions, session factory.

Invariants:
    - All sessions are async (AsyncSession)
    - asyncpg driver for PostgreSQL, aiosqlite for tests
"""
