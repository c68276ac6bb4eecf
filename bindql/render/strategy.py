"""Rendering strategies: target-specific placeholder syntax.

The Strategy pattern (GoF) is used:
- ``RenderingStrategy`` defines the binding contract the renderers call.
- ``MyBatis3RenderingStrategy`` and ``SpringNamedParameterRenderingStrategy``
  supply the placeholder syntax of each execution framework.

Every generated statement comes with a map of parameters bound at execution
time.  A select rendered for MyBatis looks like::

    select foo from bar where id = #{parameters.p1,jdbcType=INTEGER}

MyBatis resolves ``parameters.p1`` against the parameter object passed to the
mapper.  The same statement rendered for Spring's
``NamedParameterJdbcTemplate`` (or Python's ``sqlite3``) looks like::

    select foo from bar where id = :p1

Strategies hold no state; the only mutable input is the externally supplied
:class:`~bindql.render.sequence.ParameterSequence`, so one instance may be
shared by any number of concurrent renders.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from bindql.render.sequence import ParameterSequence
from bindql.schema.column import SqlColumn

#: Prefix under which generated parameters are found by the executing layer.
DEFAULT_PARAMETER_PREFIX = "parameters"


class RenderingStrategy(ABC):
    """Abstract base for target-specific placeholder rendering."""

    def next_parameter_name(self, sequence: ParameterSequence) -> str:
        """Return ``p<n>`` and advance ``sequence`` exactly once."""
        return f"p{sequence.next_value()}"

    @abstractmethod
    def placeholder_for_column(
        self, column: SqlColumn, prefix: str, parameter_name: str
    ) -> str:
        """Return the placeholder for a parameter bound to a known column.

        Type-aware strategies may encode the column's type metadata.

        Args:
            column: Target column.
            prefix: Path under which the parameter is found, typically
                :data:`DEFAULT_PARAMETER_PREFIX`.
            parameter_name: Usually produced by :meth:`next_parameter_name`.
        """

    @abstractmethod
    def placeholder_for_value(self, prefix: str, parameter_name: str) -> str:
        """Return the placeholder for a parameter with no column context,
        such as a limit or offset."""

    def placeholder_for_row_insert(
        self, column: SqlColumn, prefix: str, parameter_name: str
    ) -> str:
        """Return the placeholder for a property of an insert row.

        ``prefix`` locates the row (``row`` or ``records[i]``) and
        ``parameter_name`` is the property inside it.  Defaults to
        :meth:`placeholder_for_column`.
        """
        return self.placeholder_for_column(column, prefix, parameter_name)

    @abstractmethod
    def placeholder_for_whole_row(self, column: SqlColumn, locator: str) -> str:
        """Return the placeholder binding an entire insert row.

        Args:
            column: Target column.
            locator: ``row`` or ``records[i]``; no property segment follows.
        """

    @property
    @abstractmethod
    def name(self) -> str:
        """Canonical registry name of the strategy."""


class MyBatis3RenderingStrategy(RenderingStrategy):
    """``#{prefix.name,jdbcType=...,typeHandler=...,javaType=...}`` bindings."""

    @property
    def name(self) -> str:
        return "mybatis3"

    def placeholder_for_column(
        self, column: SqlColumn, prefix: str, parameter_name: str
    ) -> str:
        return f"#{{{prefix}.{parameter_name}{self._type_hints(column)}}}"

    def placeholder_for_value(self, prefix: str, parameter_name: str) -> str:
        return f"#{{{prefix}.{parameter_name}}}"

    def placeholder_for_whole_row(self, column: SqlColumn, locator: str) -> str:
        return f"#{{{locator}{self._type_hints(column)}}}"

    @staticmethod
    def _type_hints(column: SqlColumn) -> str:
        hints = ""
        if column.jdbc_type:
            hints += f",jdbcType={column.jdbc_type}"
        if column.type_handler:
            hints += f",typeHandler={column.type_handler}"
        if column.java_type:
            hints += f",javaType={column.java_type}"
        return hints


class SpringNamedParameterRenderingStrategy(RenderingStrategy):
    """``:name`` bindings.

    Prefix and type metadata are ignored for generated parameters.  Row
    inserts keep the row locator (``:row.id``) because the executing layer
    resolves those paths against a bean, not a flat map.
    """

    @property
    def name(self) -> str:
        return "spring"

    def placeholder_for_column(
        self, column: SqlColumn, prefix: str, parameter_name: str
    ) -> str:
        return f":{parameter_name}"

    def placeholder_for_value(self, prefix: str, parameter_name: str) -> str:
        return f":{parameter_name}"

    def placeholder_for_row_insert(
        self, column: SqlColumn, prefix: str, parameter_name: str
    ) -> str:
        return f":{prefix}.{parameter_name}"

    def placeholder_for_whole_row(self, column: SqlColumn, locator: str) -> str:
        return f":{locator}"
