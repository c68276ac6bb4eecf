"""bindQL schema models: tables, columns, mappings, statement models."""
from bindql.schema.column import SqlColumn, SqlTable
from bindql.schema.mappings import (
    ColumnMapping,
    ColumnToColumnMapping,
    ConditionalPropertyMapping,
    ConstantMapping,
    PropertyMapping,
    RowMapping,
    SubSelectMapping,
)
from bindql.schema.select import SelectModel
from bindql.schema.statements import (
    BatchInsertModel,
    InsertModel,
    MultiRowInsertModel,
    UpdateModel,
)
from bindql.schema.where import WhereCondition, WhereModel

__all__ = [
    "SqlColumn",
    "SqlTable",
    "ColumnMapping",
    "ColumnToColumnMapping",
    "ConditionalPropertyMapping",
    "ConstantMapping",
    "PropertyMapping",
    "RowMapping",
    "SubSelectMapping",
    "SelectModel",
    "BatchInsertModel",
    "InsertModel",
    "MultiRowInsertModel",
    "UpdateModel",
    "WhereCondition",
    "WhereModel",
]
