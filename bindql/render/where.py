"""WHERE clause renderer.

Conditions are rendered with the caller's :class:`RenderingContext`, so
their parameter names continue the statement's sequence.
"""
from __future__ import annotations

from bindql.render.context import RenderingContext
from bindql.render.fragments import FragmentAndParameters, FragmentCollector
from bindql.schema.where import NULLARY_OPERATORS, WhereCondition, WhereModel


class WhereRenderer:
    """Renders a :class:`WhereModel` to ``where <cond> and <cond> ...``."""

    def __init__(self, ctx: RenderingContext) -> None:
        self._ctx = ctx

    def render(self, where: WhereModel) -> FragmentAndParameters:
        collector = FragmentCollector.collect(
            self._render_condition(c) for c in where.conditions
        )
        return FragmentAndParameters(
            fragment="where " + " and ".join(collector.fragments),
            parameters=collector.parameters,
        )

    def _render_condition(self, condition: WhereCondition) -> FragmentAndParameters:
        column = condition.column.name
        if condition.operator in NULLARY_OPERATORS:
            return FragmentAndParameters(f"{column} {condition.operator}")
        name, placeholder = self._ctx.bind_column(condition.column)
        return FragmentAndParameters(
            fragment=f"{column} {condition.operator} {placeholder}",
            parameters={name: condition.value},
        )
