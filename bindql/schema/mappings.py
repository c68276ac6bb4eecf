"""Column mapping variants.

A statement model is an ordered sequence of mappings, one per target
column.  The variant set is closed: every renderer dispatches over exactly
these six kinds and each statement kind decides which of them it accepts.

=========================  ===============================================
kind                       rendered as
=========================  ===============================================
``constant``               the constant text, inlined verbatim
``property``               a placeholder bound to ``row.<property>``
``conditional_property``   like ``property``, omitted when the predicate
                           rejects the resolved value
``sub_select``             ``(<nested select>)``
``column_to_column``       the source column's qualified name
``row``                    a placeholder bound to the whole row
=========================  ===============================================

Constants are inlined without escaping.  Only use them for trusted text.
"""
from __future__ import annotations

from collections.abc import Callable
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from bindql.schema.column import SqlColumn
from bindql.schema.select import SelectModel

_FROZEN = ConfigDict(frozen=True, extra="forbid")


def is_present(value: Any) -> bool:
    """Default predicate for conditional mappings."""
    return value is not None


class ConstantMapping(BaseModel):
    """Map a column to a trusted SQL literal: ``{"constant": "22"}``."""

    model_config = _FROZEN

    kind: Literal["constant"] = "constant"
    column: SqlColumn
    constant: str


class PropertyMapping(BaseModel):
    """Map a column to a property of the statement's row."""

    model_config = _FROZEN

    kind: Literal["property"] = "property"
    column: SqlColumn
    property: str


class ConditionalPropertyMapping(BaseModel):
    """Map a column to a row property only when ``predicate`` accepts it.

    The predicate receives the resolved property value and is evaluated
    exactly once per render.  It defaults to :func:`is_present`.
    """

    model_config = _FROZEN

    kind: Literal["conditional_property"] = "conditional_property"
    column: SqlColumn
    property: str
    predicate: Callable[[Any], bool] = is_present


class SubSelectMapping(BaseModel):
    """Map a column to the result of a nested select."""

    model_config = _FROZEN

    kind: Literal["sub_select"] = "sub_select"
    column: SqlColumn
    select: SelectModel


class ColumnToColumnMapping(BaseModel):
    """Map a column to another column: ``set a = foo.b``."""

    model_config = _FROZEN

    kind: Literal["column_to_column"] = "column_to_column"
    column: SqlColumn
    source: SqlColumn


class RowMapping(BaseModel):
    """Map a column to the entire row value (e.g. a list of integers)."""

    model_config = _FROZEN

    kind: Literal["row"] = "row"
    column: SqlColumn


ColumnMapping = Annotated[
    Union[
        ConstantMapping,
        PropertyMapping,
        ConditionalPropertyMapping,
        SubSelectMapping,
        ColumnToColumnMapping,
        RowMapping,
    ],
    Field(discriminator="kind"),
]
