"""Test fixtures: sample tables, row classes and SQLite DDL."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from bindql.schema.column import SqlTable

_FIXTURES_DIR = Path(__file__).parent

FOO = SqlTable(name="foo")
ID1 = FOO.column("id1", jdbc_type="INTEGER")
ID2 = FOO.column("id2", jdbc_type="INTEGER")
DESCRIPTION = FOO.column("description", jdbc_type="VARCHAR")

BAR = SqlTable(name="bar")
BAR_ID = BAR.column("id", jdbc_type="INTEGER")
BAR_LABEL = BAR.column("label", jdbc_type="VARCHAR")


@dataclass
class Record:
    id1: int | None
    id2: int | None


def three_records() -> list[Record]:
    return [Record(33, 1), Record(33, 2), Record(33, 3)]


def load_ddl() -> str:
    """Return the SQLite DDL for the ``foo`` and ``bar`` tables."""
    return (_FIXTURES_DIR / "ddl_sqlite.sql").read_text()
