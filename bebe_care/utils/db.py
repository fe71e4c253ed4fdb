"""
Database helpers shared by the services.

Upserts are expressed with the dialect's ``INSERT ... ON CONFLICT`` clause so
the uniqueness constraints of the store decide between insert and update.
"""

from typing import Any, Dict, Iterable

from sqlalchemy import event
from sqlalchemy.dialects import postgresql, sqlite

from bebe_care.extensions import db

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def upsert(model, values: Dict[str, Any], conflict_columns: Iterable[str], update_columns: Iterable[str]):
    """
    Insert a row or, when ``conflict_columns`` already exist, overwrite
    ``update_columns`` on the existing row.

    Returns the persisted ORM instance. Runs inside the current session
    transaction; the caller commits.
    """
    dialect = db.session.get_bind().dialect.name
    insert = _DIALECT_INSERTS.get(dialect)
    if insert is None:
        raise RuntimeError(f"Upsert is not supported on dialect '{dialect}'")

    stmt = insert(model).values(**values)
    stmt = stmt.on_conflict_do_update(
        index_elements=list(conflict_columns),
        set_={column: stmt.excluded[column] for column in update_columns},
    )
    stmt = stmt.returning(model)
    return db.session.scalars(stmt, execution_options={"populate_existing": True}).one()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def enforce_sqlite_foreign_keys(engine) -> None:
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
