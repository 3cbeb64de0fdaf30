"""Dialect-aware INSERT constructs supporting ON CONFLICT clauses"""

from sqlalchemy import Table
from sqlalchemy.dialects import postgresql, sqlite
from sqlmodel.ext.asyncio.session import AsyncSession


def insert_for(session: AsyncSession, table: Table):
    """
    Build an INSERT for the session's dialect

    Both PostgreSQL and SQLite provide on_conflict_do_update /
    on_conflict_do_nothing on their insert constructs.
    """
    dialect_name = session.get_bind().dialect.name

    if dialect_name == "postgresql":
        return postgresql.insert(table)
    if dialect_name == "sqlite":
        return sqlite.insert(table)

    raise NotImplementedError(f"Upserts are not supported on dialect '{dialect_name}'")
