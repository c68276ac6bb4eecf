"""Utilities for building column metadata from external sources.

SQLAlchemy converter
--------------------
:func:`table_from_sqlalchemy` turns a :class:`sqlalchemy.Table` into a
:class:`~bindql.schema.column.SqlTable` plus one
:class:`~bindql.schema.column.SqlColumn` per column, with ``jdbc_type``
derived from the SQLAlchemy column type.  :func:`tables_from_sqlalchemy`
does the same for every table reflected from a live engine.

Install the optional dependency before using this module::

    pip install "bindql[sqlalchemy]"

Example::

    from sqlalchemy import create_engine
    from bindql.schema.converters import tables_from_sqlalchemy

    engine = create_engine("sqlite:///mydb.db")
    foo = tables_from_sqlalchemy(engine)["foo"]
    foo["id1"].jdbc_type  # 'INTEGER'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from bindql.schema.column import SqlColumn, SqlTable

if TYPE_CHECKING:
    from sqlalchemy import Engine, Table


@dataclass(frozen=True)
class TableColumns:
    """A table and its columns, keyed by column name.

    Attributes:
        table: The converted table.
        columns: Columns in declaration order.
    """

    table: SqlTable
    columns: dict[str, SqlColumn] = field(default_factory=dict)

    def __getitem__(self, name: str) -> SqlColumn:
        return self.columns[name]


def table_from_sqlalchemy(table: Table) -> TableColumns:
    """Convert a SQLAlchemy :class:`~sqlalchemy.schema.Table`.

    Args:
        table: A declared or reflected SQLAlchemy table.

    Returns:
        :class:`TableColumns` for ``table``.
    """
    sql_table = SqlTable(name=table.name)
    columns = {
        col.name: sql_table.column(col.name, jdbc_type=jdbc_type_for(col.type))
        for col in table.columns
    }
    return TableColumns(table=sql_table, columns=columns)


def tables_from_sqlalchemy(
    engine: Engine,
    *,
    include_tables: list[str] | None = None,
    schema: str | None = None,
) -> dict[str, TableColumns]:
    """Reflect ``engine`` and convert every table.

    Args:
        engine: A :class:`sqlalchemy.engine.Engine` instance.
        include_tables: Optional allowlist of table names to reflect.
        schema: Optional database schema name, passed to
            :meth:`sqlalchemy.schema.MetaData.reflect`.

    Returns:
        Converted tables keyed by table name.

    Raises:
        ImportError: If ``sqlalchemy`` is not installed.
    """
    try:
        from sqlalchemy import MetaData as _MetaData
    except ImportError as exc:
        raise ImportError(
            "SQLAlchemy is required for tables_from_sqlalchemy(). "
            'Install it with: pip install "bindql[sqlalchemy]"'
        ) from exc

    metadata = _MetaData()
    with engine.connect() as conn:
        metadata.reflect(bind=conn, only=include_tables, schema=schema)
    return {t.name: table_from_sqlalchemy(t) for t in metadata.sorted_tables}


def jdbc_type_for(sa_type: Any) -> str | None:
    """Return the JDBC type name for a SQLAlchemy type instance, or ``None``
    when there is no obvious match.

    Subclasses are checked before their bases (``Text`` before ``String``,
    ``Float`` before ``Numeric``).
    """
    from sqlalchemy import types as sa

    ordered: list[tuple[type, str]] = [
        (sa.BigInteger, "BIGINT"),
        (sa.SmallInteger, "SMALLINT"),
        (sa.Integer, "INTEGER"),
        (sa.Float, "DOUBLE"),
        (sa.Numeric, "NUMERIC"),
        (sa.Boolean, "BOOLEAN"),
        (sa.Text, "LONGVARCHAR"),
        (sa.String, "VARCHAR"),
        (sa.DateTime, "TIMESTAMP"),
        (sa.Date, "DATE"),
        (sa.Time, "TIME"),
        (sa.LargeBinary, "BLOB"),
    ]
    for sa_cls, jdbc_name in ordered:
        if isinstance(sa_type, sa_cls):
            return jdbc_name
    return None
