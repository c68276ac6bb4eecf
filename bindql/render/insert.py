"""INSERT statement renderers: single record, batch and multi-row.

Insert values bind through the row object rather than generated parameters:
a property mapping for ``id2`` becomes ``#{row.id2}`` (single and batch) or
``#{records[<i>].id2}`` (multi-row), and the rendered statement's parameter
map holds the row or the record list under that locator.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from bindql.errors import ConfigurationError
from bindql.render.registry import RenderingStrategies
from bindql.render.strategy import RenderingStrategy
from bindql.render.visitors import (
    FieldAndValue,
    InsertMappingVisitor,
    MultiRowValuePhraseVisitor,
)
from bindql.schema.statements import BatchInsertModel, InsertModel, MultiRowInsertModel

logger = logging.getLogger(__name__)


def _render_row(visitor: InsertMappingVisitor, mappings: Sequence[Any]) -> list[FieldAndValue]:
    return [visitor.visit(m) for m in mappings]


def _columns_phrase(fields: list[FieldAndValue]) -> str:
    return "(" + ", ".join(fv.field for fv in fields) + ")"


def _values_phrase(fields: list[FieldAndValue]) -> str:
    return "(" + ", ".join(fv.value for fv in fields) + ")"


def _require_model(model: Any) -> None:
    if model is None:
        raise ConfigurationError("An insert model is required.", missing=["model"])


# ---------------------------------------------------------------------------
# Rendered statements
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class InsertStatement:
    """A rendered single-row insert.

    Attributes:
        table_name: Target table.
        columns_phrase: ``(a, b)``.
        values_phrase: ``(<value a>, <value b>)``.
        parameters: ``{"row": row}``, read-only.
    """

    table_name: str
    columns_phrase: str
    values_phrase: str
    parameters: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    @property
    def sql(self) -> str:
        return f"insert into {self.table_name} {self.columns_phrase} values {self.values_phrase}"

    @property
    def row(self) -> Any:
        return self.parameters.get("row")


@dataclass(frozen=True)
class BatchInsert:
    """One insert template executed once per record.

    Attributes:
        sql: Insert text with ``row``-relative placeholders.
        records: The records, in execution order.
    """

    sql: str
    records: tuple[Any, ...] = ()

    def parameter_sets(self) -> list[dict[str, Any]]:
        """``{"row": record}`` for each record, suitable for ``executemany``."""
        return [{"row": record} for record in self.records]

    def __len__(self) -> int:
        return len(self.records)


@dataclass(frozen=True)
class MultiRowInsertStatement:
    """A single insert carrying one values phrase per record.

    Attributes:
        sql: ``insert into t (...) values (...), (...)``.
        parameters: ``{"records": (...)}``, read-only.
    """

    sql: str
    parameters: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    @property
    def records(self) -> tuple[Any, ...]:
        return self.parameters.get("records", ())


# ---------------------------------------------------------------------------
# Renderers
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class InsertRenderer:
    """Renders an :class:`InsertModel`.

    Raises:
        ConfigurationError: If ``model`` or ``strategy`` is missing.
    """

    model: InsertModel
    strategy: RenderingStrategy | str

    def __post_init__(self) -> None:
        _require_model(self.model)
        object.__setattr__(self, "strategy", RenderingStrategies.resolve(self.strategy))

    def render(self) -> InsertStatement:
        visitor = InsertMappingVisitor(self.strategy, "row")
        fields = _render_row(visitor, self.model.mappings)
        statement = InsertStatement(
            table_name=self.model.table.name,
            columns_phrase=_columns_phrase(fields),
            values_phrase=_values_phrase(fields),
            parameters={"row": self.model.row},
        )
        logger.debug(
            "Rendered insert into %s with %s: %d columns",
            statement.table_name,
            self.strategy.name,
            len(fields),
        )
        return statement


@dataclass(frozen=True)
class BatchInsertRenderer:
    """Renders a :class:`BatchInsertModel` to one reusable insert template."""

    model: BatchInsertModel
    strategy: RenderingStrategy | str

    def __post_init__(self) -> None:
        _require_model(self.model)
        object.__setattr__(self, "strategy", RenderingStrategies.resolve(self.strategy))

    def render(self) -> BatchInsert:
        visitor = MultiRowValuePhraseVisitor(self.strategy, "row", "batch insert")
        fields = _render_row(visitor, self.model.mappings)
        sql = (
            f"insert into {self.model.table.name} "
            f"{_columns_phrase(fields)} values {_values_phrase(fields)}"
        )
        logger.debug(
            "Rendered batch insert into %s with %s: %d records",
            self.model.table.name,
            self.strategy.name,
            len(self.model.records),
        )
        return BatchInsert(sql=sql, records=tuple(self.model.records))


@dataclass(frozen=True)
class MultiRowInsertRenderer:
    """Renders a :class:`MultiRowInsertModel`; row ``i`` binds through
    ``records[i]``."""

    model: MultiRowInsertModel
    strategy: RenderingStrategy | str

    def __post_init__(self) -> None:
        _require_model(self.model)
        object.__setattr__(self, "strategy", RenderingStrategies.resolve(self.strategy))

    def render(self) -> MultiRowInsertStatement:
        rows: list[list[FieldAndValue]] = []
        for index in range(len(self.model.records)):
            visitor = MultiRowValuePhraseVisitor(self.strategy, f"records[{index}]")
            rows.append(_render_row(visitor, self.model.mappings))

        values = ", ".join(_values_phrase(fields) for fields in rows)
        sql = f"insert into {self.model.table.name} {_columns_phrase(rows[0])} values {values}"
        logger.debug(
            "Rendered multi-row insert into %s with %s: %d rows",
            self.model.table.name,
            self.strategy.name,
            len(rows),
        )
        return MultiRowInsertStatement(
            sql=sql, parameters={"records": tuple(self.model.records)}
        )
