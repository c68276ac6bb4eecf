"""SELECT model used as the body of sub-select mappings."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from bindql.schema.column import SqlColumn, SqlTable
from bindql.schema.where import WhereModel


class SelectModel(BaseModel):
    """``select <columns> from <table> [where ...] [limit ...]``.

    Attributes:
        columns: Selected columns, rendered by name.
        table: Source table.
        where: Optional WHERE clause.
        limit: Optional row limit; bound as a parameter, not inlined.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    columns: tuple[SqlColumn, ...] = Field(min_length=1)
    table: SqlTable
    where: WhereModel | None = None
    limit: int | None = Field(None, gt=0)
