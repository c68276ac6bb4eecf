"""WHERE clause model.

Conditions compare one column with one bound value and are joined with
``and``.  Rendering lives in :mod:`bindql.render.where`.
"""
from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from bindql.schema.column import SqlColumn

#: Operators that take no value.
NULLARY_OPERATORS: frozenset[str] = frozenset({"is null", "is not null"})

ConditionOperator = Literal[
    "=", "<>", "<", "<=", ">", ">=", "like", "not like", "is null", "is not null"
]


class WhereCondition(BaseModel):
    """``<column> <operator> <value>``.

    Attributes:
        column: Column on the left-hand side.
        operator: Comparison operator.
        value: Value bound to the right-hand side.  Must be omitted for
            ``is null`` / ``is not null``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    column: SqlColumn
    operator: ConditionOperator = "="
    value: Any = None

    @model_validator(mode="after")
    def _check_value(self) -> WhereCondition:
        if self.operator in NULLARY_OPERATORS and self.value is not None:
            raise ValueError(f"Operator '{self.operator}' does not take a value.")
        return self


class WhereModel(BaseModel):
    """A conjunction of :class:`WhereCondition` entries."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    conditions: tuple[WhereCondition, ...] = Field(min_length=1)

    @classmethod
    def of(cls, *conditions: WhereCondition) -> WhereModel:
        return cls(conditions=conditions)
