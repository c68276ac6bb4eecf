"""Integration tests: render → execute against a real SQLite in-memory DB.

SQLite accepts ``:name`` placeholders with a parameter dict, so statements
rendered with the named-parameter strategy run unchanged.
"""
from __future__ import annotations

import sqlite3

import pytest

from bindql import render_update
from bindql.schema.mappings import (
    ConditionalPropertyMapping,
    ConstantMapping,
    PropertyMapping,
    SubSelectMapping,
)
from bindql.schema.select import SelectModel
from bindql.schema.statements import UpdateModel
from bindql.schema.where import WhereCondition, WhereModel
from tests.fixtures import BAR, BAR_ID, BAR_LABEL, DESCRIPTION, FOO, ID1, ID2, load_ddl


@pytest.fixture()
def db() -> sqlite3.Connection:
    conn = sqlite3.connect(":memory:")
    conn.row_factory = sqlite3.Row
    conn.executescript(load_ddl())
    conn.executemany(
        "INSERT INTO foo VALUES (?,?,?)",
        [(1, 10, "one"), (2, 20, "two"), (3, 30, None)],
    )
    conn.executemany(
        "INSERT INTO bar VALUES (?,?)",
        [(1, "alpha"), (2, "beta")],
    )
    return conn


def _rows(conn: sqlite3.Connection) -> list[tuple]:
    return [tuple(r) for r in conn.execute("SELECT id1, id2, description FROM foo ORDER BY id1")]


def test_update_with_where(db):
    model = UpdateModel(
        table=FOO,
        mappings=[
            PropertyMapping(column=ID2, property="id2"),
            ConstantMapping(column=DESCRIPTION, constant="'changed'"),
        ],
        row={"id2": 99},
        where=WhereModel.of(WhereCondition(column=ID1, operator="=", value=2)),
    )
    stmt = render_update(model, "spring")
    cur = db.execute(stmt.sql, dict(stmt.parameters))
    assert cur.rowcount == 1
    assert _rows(db) == [(1, 10, "one"), (2, 99, "changed"), (3, 30, None)]


def test_update_skips_absent_conditional_values(db):
    model = UpdateModel(
        table=FOO,
        mappings=[
            ConditionalPropertyMapping(column=ID2, property="id2"),
            ConditionalPropertyMapping(column=DESCRIPTION, property="description"),
        ],
        row={"id2": None, "description": "patched"},
        where=WhereModel.of(WhereCondition(column=DESCRIPTION, operator="is null")),
    )
    stmt = render_update(model, "spring")
    assert stmt.sql == "update foo set description = :p1 where description is null"
    db.execute(stmt.sql, dict(stmt.parameters))
    assert _rows(db)[2] == (3, 30, "patched")


def test_update_from_sub_select(db):
    model = UpdateModel(
        table=FOO,
        mappings=[
            SubSelectMapping(
                column=DESCRIPTION,
                select=SelectModel(
                    columns=[BAR_LABEL],
                    table=BAR,
                    where=WhereModel.of(WhereCondition(column=BAR_ID, value=2)),
                    limit=1,
                ),
            ),
        ],
        where=WhereModel.of(WhereCondition(column=ID1, operator=">=", value=2)),
    )
    stmt = render_update(model, "spring")
    assert stmt.parameters == {"p1": 2, "p2": 1, "p3": 2}
    cur = db.execute(stmt.sql, dict(stmt.parameters))
    assert cur.rowcount == 2
    assert [r[2] for r in _rows(db)] == ["one", "beta", "beta"]
