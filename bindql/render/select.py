"""SELECT renderer used for sub-select mappings."""
from __future__ import annotations

from bindql.render.context import RenderingContext
from bindql.render.fragments import FragmentAndParameters, FragmentCollector
from bindql.render.where import WhereRenderer
from bindql.schema.select import SelectModel


class SelectRenderer:
    """Renders a :class:`SelectModel` with a shared rendering context."""

    def __init__(self, ctx: RenderingContext) -> None:
        self._ctx = ctx

    def render(self, select: SelectModel) -> FragmentAndParameters:
        columns = ", ".join(c.name for c in select.columns)
        collector = FragmentCollector()
        collector.add(FragmentAndParameters(f"select {columns} from {select.table.name}"))
        if select.where is not None:
            collector.add(WhereRenderer(self._ctx).render(select.where))
        if select.limit is not None:
            name, placeholder = self._ctx.bind_value()
            collector.add(
                FragmentAndParameters(f"limit {placeholder}", {name: select.limit})
            )
        return FragmentAndParameters(
            fragment=" ".join(collector.fragments),
            parameters=collector.parameters,
        )
