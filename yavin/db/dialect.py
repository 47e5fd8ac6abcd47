"""
Dialect-aware INSERT constructs supporting ON CONFLICT.
"""
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session


def conflict_insert(db: Session, table):
    """
    Build an INSERT for ``table`` that exposes ``on_conflict_do_update`` and
    ``on_conflict_do_nothing`` for the dialect bound to ``db``.
    """
    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        return postgresql.insert(table)
    if dialect == "sqlite":
        return sqlite.insert(table)
    raise RuntimeError(f"Upserts are not supported on '{dialect}'")
