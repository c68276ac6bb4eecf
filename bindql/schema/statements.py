"""Statement models: the immutable input to the renderers.

Each model is built once and may be rendered any number of times, with any
strategy, from any thread.  Rendering never mutates the model.

Usage::

    foo = SqlTable(name="foo")
    id1 = foo.column("id1", jdbc_type="INTEGER")

    model = UpdateModel(
        table=foo,
        mappings=[PropertyMapping(column=id1, property="id1")],
        row={"id1": 3},
    )
    statement = model.render("mybatis3")
    statement.sql         # 'update foo set id1 = #{parameters.p1,jdbcType=INTEGER}'
    statement.parameters  # {'p1': 3}
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from bindql.errors import ConfigurationError
from bindql.schema.column import SqlTable
from bindql.schema.mappings import ColumnMapping
from bindql.schema.where import WhereModel

if TYPE_CHECKING:
    from bindql.render.insert import (
        BatchInsert,
        InsertStatement,
        MultiRowInsertStatement,
    )
    from bindql.render.strategy import RenderingStrategy
    from bindql.render.update import UpdateStatement

_FROZEN = ConfigDict(frozen=True, extra="forbid")


def _check_unique_columns(mappings: tuple[Any, ...]) -> None:
    seen: set[str] = set()
    for mapping in mappings:
        name = mapping.column.name
        if name in seen:
            raise ConfigurationError(
                f"Column '{name}' is mapped more than once.",
                details={"column": name},
            )
        seen.add(name)


class _MappedStatement(BaseModel):
    model_config = _FROZEN

    table: SqlTable
    mappings: tuple[ColumnMapping, ...] = Field(min_length=1)

    @model_validator(mode="after")
    def _unique_columns(self) -> _MappedStatement:
        _check_unique_columns(self.mappings)
        return self


class UpdateModel(_MappedStatement):
    """``update <table> set ... [where ...] [limit ...]``.

    Attributes:
        table: Target table.
        mappings: Ordered set-clause mappings, one per column.
        row: Object that property and row mappings resolve against.
        where: Optional WHERE clause.
        limit: Optional row limit, bound as a parameter.
    """

    row: Any = None
    where: WhereModel | None = None
    limit: int | None = Field(None, gt=0)

    def render(self, strategy: RenderingStrategy | str) -> UpdateStatement:
        """Render this model with ``strategy`` (an instance or registered name)."""
        from bindql.render.update import UpdateRenderer

        return UpdateRenderer(model=self, strategy=strategy).render()


class InsertModel(_MappedStatement):
    """Single-record ``insert into <table> (...) values (...)``."""

    row: Any

    def render(self, strategy: RenderingStrategy | str) -> InsertStatement:
        from bindql.render.insert import InsertRenderer

        return InsertRenderer(model=self, strategy=strategy).render()


class BatchInsertModel(_MappedStatement):
    """One insert statement executed once per record (JDBC-style batch)."""

    records: tuple[Any, ...]

    def render(self, strategy: RenderingStrategy | str) -> BatchInsert:
        from bindql.render.insert import BatchInsertRenderer

        return BatchInsertRenderer(model=self, strategy=strategy).render()


class MultiRowInsertModel(_MappedStatement):
    """``insert into <table> (...) values (...), (...), ...``."""

    records: tuple[Any, ...]

    @model_validator(mode="after")
    def _has_records(self) -> MultiRowInsertModel:
        if not self.records:
            raise ConfigurationError(
                "A multi-row insert needs at least one record.",
                missing=["records"],
            )
        return self

    def render(self, strategy: RenderingStrategy | str) -> MultiRowInsertStatement:
        from bindql.render.insert import MultiRowInsertRenderer

        return MultiRowInsertRenderer(model=self, strategy=strategy).render()
