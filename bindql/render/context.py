"""Rendering context value object.

Packages the ``(strategy, sequence)`` pair that every visitor and every
nested render needs into a single object.  The context itself is frozen;
the sequence inside it is the one piece of per-render mutable state.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from bindql.render.sequence import ParameterSequence
from bindql.render.strategy import DEFAULT_PARAMETER_PREFIX, RenderingStrategy
from bindql.schema.column import SqlColumn


@dataclass(frozen=True)
class RenderingContext:
    """Immutable context for a single render.

    Attributes:
        strategy: Placeholder syntax for the target framework.
        sequence: Parameter sequence owned by this render.
        prefix: Path under which generated parameters are found.
    """

    strategy: RenderingStrategy
    sequence: ParameterSequence = field(default_factory=ParameterSequence)
    prefix: str = DEFAULT_PARAMETER_PREFIX

    def next_parameter_name(self) -> str:
        return self.strategy.next_parameter_name(self.sequence)

    def bind_column(self, column: SqlColumn) -> tuple[str, str]:
        """Allocate a parameter name bound to ``column``.

        Returns:
            ``(parameter_name, placeholder)``.
        """
        name = self.next_parameter_name()
        return name, self.strategy.placeholder_for_column(column, self.prefix, name)

    def bind_value(self) -> tuple[str, str]:
        """Allocate a name for a value with no column context."""
        name = self.next_parameter_name()
        return name, self.strategy.placeholder_for_value(self.prefix, name)
