"""
Dialect-specific INSERT constructs.

Likes and rating upserts rely on INSERT ... ON CONFLICT, which SQLAlchemy
exposes per dialect. SQLite and PostgreSQL share the same API.
"""

from sqlalchemy.dialects import postgresql, sqlite
from sqlmodel.ext.asyncio.session import AsyncSession

_INSERTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


def conflict_insert(session: AsyncSession, model):
    """Return an INSERT for model that supports on_conflict_do_nothing/do_update"""
    dialect_name = session.bind.dialect.name
    try:
        insert = _INSERTS[dialect_name]
    except KeyError:
        raise NotImplementedError(
            f"ON CONFLICT inserts are not supported for dialect {dialect_name!r}"
        )
    return insert(model)
