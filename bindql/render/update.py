"""UPDATE statement renderer.

Render order fixes parameter numbering: set-clause mappings in declaration
order, then the WHERE clause, then the limit.  All three draw names from the
same :class:`~bindql.render.sequence.ParameterSequence`.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from bindql.errors import ConfigurationError, InvalidStatementError
from bindql.render.context import RenderingContext
from bindql.render.fragments import FragmentAndParameters, FragmentCollector
from bindql.render.registry import RenderingStrategies
from bindql.render.sequence import ParameterSequence
from bindql.render.strategy import RenderingStrategy
from bindql.render.visitors import SetPhraseVisitor
from bindql.render.where import WhereRenderer
from bindql.schema.statements import UpdateModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateStatement:
    """The output of a successful update render.

    Attributes:
        table_name: Target table.
        set_clause: ``set a = ..., b = ...``.
        where_clause: ``where ...`` or ``None``.
        limit_clause: ``limit ...`` or ``None``.
        parameters: Set-clause, where-clause and limit parameters, in
            allocation order. Read-only.
    """

    table_name: str
    set_clause: str
    where_clause: str | None = None
    limit_clause: str | None = None
    parameters: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    @property
    def sql(self) -> str:
        parts = [f"update {self.table_name}", self.set_clause]
        if self.where_clause:
            parts.append(self.where_clause)
        if self.limit_clause:
            parts.append(self.limit_clause)
        return " ".join(parts)


@dataclass(frozen=True)
class UpdateRenderer:
    """Renders an :class:`UpdateModel`.

    Args:
        model: The statement to render.
        strategy: A :class:`RenderingStrategy` or a registered strategy name.

    Raises:
        ConfigurationError: If ``model`` or ``strategy`` is missing, or the
            strategy name is not registered.
    """

    model: UpdateModel
    strategy: RenderingStrategy | str

    def __post_init__(self) -> None:
        if self.model is None:
            raise ConfigurationError("An update model is required.", missing=["model"])
        object.__setattr__(self, "strategy", RenderingStrategies.resolve(self.strategy))

    def render(self) -> UpdateStatement:
        """Render the statement with a fresh parameter sequence."""
        ctx = RenderingContext(strategy=self.strategy, sequence=ParameterSequence())
        visitor = SetPhraseVisitor(ctx, self.model.row)

        collector = FragmentCollector.collect(visitor.visit(m) for m in self.model.mappings)
        if collector.is_empty():
            # Every mapping was conditional and every predicate failed.
            raise InvalidStatementError(
                f"Update of table '{self.model.table.name}' has no columns to set.",
                details={"table": self.model.table.name},
            )
        set_clause = "set " + ", ".join(collector.fragments)

        where_clause = None
        if self.model.where is not None:
            where = WhereRenderer(ctx).render(self.model.where)
            collector.add_parameters(where.parameters, where.fragment)
            where_clause = where.fragment

        limit_clause = None
        if self.model.limit is not None:
            limit = self._render_limit(ctx, self.model.limit)
            collector.add_parameters(limit.parameters, limit.fragment)
            limit_clause = limit.fragment

        statement = UpdateStatement(
            table_name=self.model.table.name,
            set_clause=set_clause,
            where_clause=where_clause,
            limit_clause=limit_clause,
            parameters=collector.parameters,
        )
        logger.debug(
            "Rendered update of %s with %s: %d set fragments, %d parameters",
            statement.table_name,
            self.strategy.name,
            len(collector),
            len(statement.parameters),
        )
        return statement

    @staticmethod
    def _render_limit(ctx: RenderingContext, limit: int) -> FragmentAndParameters:
        name, placeholder = ctx.bind_value()
        return FragmentAndParameters(f"limit {placeholder}", {name: limit})
