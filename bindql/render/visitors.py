"""Mapping visitors: one rendered value per column mapping.

``ColumnMappingVisitor.visit`` dispatches over the closed set of mapping
kinds defined in :mod:`bindql.schema.mappings`.  Each statement kind has its
own visitor, and each visitor decides which kinds are legal for it:

=================================  ==========================================
visitor                            rejects
=================================  ==========================================
``SetPhraseVisitor`` (update)      nothing
``InsertMappingVisitor`` (insert)  sub-select, column-to-column, conditional
``MultiRowValuePhraseVisitor``     sub-select, column-to-column, conditional
(batch / multi-row insert)
=================================  ==========================================

A rejected kind raises :class:`~bindql.errors.DisallowedMappingError`.
Reaching one means the statement model was built wrong upstream.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar

from bindql.errors import DisallowedMappingError, InternalConsistencyError
from bindql.render.context import RenderingContext
from bindql.render.fragments import FragmentAndParameters
from bindql.render.select import SelectRenderer
from bindql.render.strategy import RenderingStrategy
from bindql.schema.mappings import (
    ColumnToColumnMapping,
    ConditionalPropertyMapping,
    ConstantMapping,
    PropertyMapping,
    RowMapping,
    SubSelectMapping,
)
from bindql.schema.properties import resolve_property

logger = logging.getLogger(__name__)

R = TypeVar("R")


class ColumnMappingVisitor(ABC, Generic[R]):
    """Dispatches a mapping to the ``visit_*`` method for its kind.

    A ``visit_*`` method returns ``None`` when the mapping contributes
    nothing to the statement (a conditional mapping whose predicate failed).
    """

    #: Statement kind named in error messages.
    context_name: str = "any"

    def visit(self, mapping: Any) -> R | None:
        if isinstance(mapping, ConstantMapping):
            return self.visit_constant(mapping)
        if isinstance(mapping, PropertyMapping):
            return self.visit_property(mapping)
        if isinstance(mapping, ConditionalPropertyMapping):
            return self.visit_conditional_property(mapping)
        if isinstance(mapping, SubSelectMapping):
            return self.visit_sub_select(mapping)
        if isinstance(mapping, ColumnToColumnMapping):
            return self.visit_column_to_column(mapping)
        if isinstance(mapping, RowMapping):
            return self.visit_row(mapping)
        raise InternalConsistencyError(
            f"Unknown mapping type: {type(mapping).__name__}",
            details={"type": type(mapping).__name__, "context": self.context_name},
        )

    @abstractmethod
    def visit_constant(self, mapping: ConstantMapping) -> R: ...

    @abstractmethod
    def visit_property(self, mapping: PropertyMapping) -> R: ...

    @abstractmethod
    def visit_conditional_property(self, mapping: ConditionalPropertyMapping) -> R | None: ...

    @abstractmethod
    def visit_sub_select(self, mapping: SubSelectMapping) -> R: ...

    @abstractmethod
    def visit_column_to_column(self, mapping: ColumnToColumnMapping) -> R: ...

    @abstractmethod
    def visit_row(self, mapping: RowMapping) -> R: ...

    def _disallowed(self, mapping: Any) -> NoReturn:
        raise DisallowedMappingError(mapping.kind, mapping.column.name, self.context_name)


# ---------------------------------------------------------------------------
# UPDATE: set phrase
# ---------------------------------------------------------------------------


class SetPhraseVisitor(ColumnMappingVisitor[FragmentAndParameters]):
    """Renders ``<column> = <value>`` fragments for an update's set clause.

    Args:
        ctx: Rendering context shared with the rest of the statement.
        row: Object that property and row mappings resolve against.
    """

    context_name = "update"

    def __init__(self, ctx: RenderingContext, row: Any = None) -> None:
        self._ctx = ctx
        self._row = row

    def visit_constant(self, mapping: ConstantMapping) -> FragmentAndParameters:
        return FragmentAndParameters(f"{mapping.column.name} = {mapping.constant}")

    def visit_property(self, mapping: PropertyMapping) -> FragmentAndParameters:
        return self._bind(mapping, resolve_property(self._row, mapping.property))

    def visit_conditional_property(
        self, mapping: ConditionalPropertyMapping
    ) -> FragmentAndParameters | None:
        value = resolve_property(self._row, mapping.property)
        if not mapping.predicate(value):
            logger.debug("Omitting conditional mapping for column %s", mapping.column.name)
            return None
        return self._bind(mapping, value)

    def visit_sub_select(self, mapping: SubSelectMapping) -> FragmentAndParameters:
        nested = SelectRenderer(self._ctx).render(mapping.select)
        return nested.with_fragment(f"{mapping.column.name} = ({nested.fragment})")

    def visit_column_to_column(self, mapping: ColumnToColumnMapping) -> FragmentAndParameters:
        return FragmentAndParameters(f"{mapping.column.name} = {mapping.source.qualified_name}")

    def visit_row(self, mapping: RowMapping) -> FragmentAndParameters:
        return self._bind(mapping, self._row)

    def _bind(self, mapping: Any, value: Any) -> FragmentAndParameters:
        name, placeholder = self._ctx.bind_column(mapping.column)
        return FragmentAndParameters(
            fragment=f"{mapping.column.name} = {placeholder}",
            parameters={name: value},
        )


# ---------------------------------------------------------------------------
# INSERT: column list + value phrase
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FieldAndValue:
    """One insert column and the value phrase rendered for it."""

    field: str
    value: str


class InsertMappingVisitor(ColumnMappingVisitor[FieldAndValue]):
    """Visitor for every insert form.

    Insert rows bind through the row object, never through generated
    parameters, so sub-selects and column references are rejected.  An
    insert always writes the full column list, so conditional mappings are
    rejected too.

    Args:
        strategy: Placeholder syntax for the target framework.
        locator: Path of the row inside the parameter object (``row`` or
            ``records[i]``).
    """

    context_name = "insert"

    def __init__(self, strategy: RenderingStrategy, locator: str = "row") -> None:
        self._strategy = strategy
        self._locator = locator

    def visit_constant(self, mapping: ConstantMapping) -> FieldAndValue:
        return FieldAndValue(mapping.column.name, mapping.constant)

    def visit_property(self, mapping: PropertyMapping) -> FieldAndValue:
        return FieldAndValue(
            mapping.column.name,
            self._strategy.placeholder_for_row_insert(
                mapping.column, self._locator, mapping.property
            ),
        )

    def visit_row(self, mapping: RowMapping) -> FieldAndValue:
        return FieldAndValue(
            mapping.column.name,
            self._strategy.placeholder_for_whole_row(mapping.column, self._locator),
        )

    def visit_conditional_property(self, mapping: ConditionalPropertyMapping) -> NoReturn:
        self._disallowed(mapping)

    def visit_sub_select(self, mapping: SubSelectMapping) -> NoReturn:
        self._disallowed(mapping)

    def visit_column_to_column(self, mapping: ColumnToColumnMapping) -> NoReturn:
        self._disallowed(mapping)


class MultiRowValuePhraseVisitor(InsertMappingVisitor):
    """Batch and multi-row inserts.  Same rules as a single insert; only the
    context name reported in errors differs."""

    def __init__(
        self,
        strategy: RenderingStrategy,
        locator: str,
        context_name: str = "multi-row insert",
    ) -> None:
        super().__init__(strategy, locator)
        self.context_name = context_name
