"""Database Infrastructure — SQLAlchemy declarative Base shared by models and migrations.

Invariants:
    - All sessions are async (AsyncSession)

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for local and test databases
"""
