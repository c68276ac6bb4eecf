"""Unit tests for bindql.schema.converters."""

from __future__ import annotations

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    DateTime,
    Float,
    Integer,
    LargeBinary,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    create_engine,
    text,
)

from bindql import render_update
from bindql.schema.converters import jdbc_type_for, table_from_sqlalchemy, tables_from_sqlalchemy
from bindql.schema.mappings import PropertyMapping
from bindql.schema.statements import UpdateModel


def _declared_table() -> Table:
    return Table(
        "accounts",
        MetaData(),
        Column("id", BigInteger, primary_key=True),
        Column("name", String(50)),
        Column("notes", Text),
        Column("balance", Numeric(10, 2)),
        Column("active", Boolean),
        Column("opened_at", DateTime),
    )


def test_declared_table_types():
    converted = table_from_sqlalchemy(_declared_table())
    assert converted.table.name == "accounts"
    assert list(converted.columns) == ["id", "name", "notes", "balance", "active", "opened_at"]
    assert {name: c.jdbc_type for name, c in converted.columns.items()} == {
        "id": "BIGINT",
        "name": "VARCHAR",
        "notes": "LONGVARCHAR",
        "balance": "NUMERIC",
        "active": "BOOLEAN",
        "opened_at": "TIMESTAMP",
    }
    assert converted["name"].qualified_name == "accounts.name"


def test_subclasses_win_over_bases():
    assert jdbc_type_for(Float()) == "DOUBLE"
    assert jdbc_type_for(Integer()) == "INTEGER"
    assert jdbc_type_for(LargeBinary()) == "BLOB"


def test_unknown_type_has_no_jdbc_type():
    class Opaque:
        pass

    assert jdbc_type_for(Opaque()) is None


def test_reflected_tables_render_typed_placeholders():
    engine = create_engine("sqlite:///:memory:")
    with engine.begin() as conn:
        conn.execute(text("CREATE TABLE foo (id1 INTEGER NOT NULL, description VARCHAR(20))"))
        conn.execute(text("CREATE TABLE ignored (x INTEGER)"))

    tables = tables_from_sqlalchemy(engine, include_tables=["foo"])
    assert list(tables) == ["foo"]
    foo = tables["foo"]

    model = UpdateModel(
        table=foo.table,
        mappings=[PropertyMapping(column=foo["description"], property="d")],
        row={"d": "x"},
    )
    assert render_update(model, "mybatis3").sql == (
        "update foo set description = #{parameters.p1,jdbcType=VARCHAR}"
    )
