"""bindQL – statement rendering for prepared-statement style execution.

Turns an immutable statement model (ordered column mappings plus optional
clauses) into SQL text and an ordered map of bound parameters.

Public API
----------
``render_update``
    Render an :class:`UpdateModel` to an :class:`UpdateStatement`.

``render_insert`` / ``render_batch_insert`` / ``render_multi_row_insert``
    Render the three insert flavours.

Every function accepts either a :class:`RenderingStrategy` instance or a
registered strategy name (``"mybatis3"``, ``"spring"``).

Example::

    import bindql
    from bindql.schema import ConstantMapping, PropertyMapping, SqlTable, UpdateModel

    foo = SqlTable(name="foo")
    model = UpdateModel(
        table=foo,
        mappings=[
            ConstantMapping(column=foo.column("id1"), constant="22"),
            PropertyMapping(column=foo.column("id2", "INTEGER"), property="id2"),
        ],
        row={"id2": 7},
    )
    stmt = bindql.render_update(model, "spring")
    stmt.sql         # 'update foo set id1 = 22, id2 = :p1'
    stmt.parameters  # {'p1': 7}

Extensibility
-------------
New strategies can be registered via::

    from bindql.render.registry import RenderingStrategies

    @RenderingStrategies.register("qmark")
    class QmarkRenderingStrategy(RenderingStrategy):
        ...
"""

from __future__ import annotations

from bindql.errors import (
    BindQLError,
    ConfigurationError,
    DisallowedMappingError,
    DuplicateParameterError,
    InternalConsistencyError,
    InvalidStatementError,
    PropertyAccessError,
)
from bindql.render import (
    MYBATIS3,
    SPRING_NAMED_PARAMETER,
    BatchInsert,
    BatchInsertRenderer,
    FragmentAndParameters,
    FragmentCollector,
    InsertRenderer,
    InsertStatement,
    MultiRowInsertRenderer,
    MultiRowInsertStatement,
    MyBatis3RenderingStrategy,
    ParameterSequence,
    RenderingStrategies,
    RenderingStrategy,
    SpringNamedParameterRenderingStrategy,
    UpdateRenderer,
    UpdateStatement,
)
from bindql.schema import (
    BatchInsertModel,
    ColumnToColumnMapping,
    ConditionalPropertyMapping,
    ConstantMapping,
    InsertModel,
    MultiRowInsertModel,
    PropertyMapping,
    RowMapping,
    SelectModel,
    SqlColumn,
    SqlTable,
    SubSelectMapping,
    UpdateModel,
    WhereCondition,
    WhereModel,
)
from bindql.schema.converters import table_from_sqlalchemy, tables_from_sqlalchemy

__all__ = [
    # Core functions
    "render_update",
    "render_insert",
    "render_batch_insert",
    "render_multi_row_insert",
    # Strategies
    "MYBATIS3",
    "SPRING_NAMED_PARAMETER",
    "MyBatis3RenderingStrategy",
    "SpringNamedParameterRenderingStrategy",
    "RenderingStrategy",
    "RenderingStrategies",
    "ParameterSequence",
    # Rendering values
    "FragmentAndParameters",
    "FragmentCollector",
    "UpdateRenderer",
    "UpdateStatement",
    "InsertRenderer",
    "InsertStatement",
    "BatchInsertRenderer",
    "BatchInsert",
    "MultiRowInsertRenderer",
    "MultiRowInsertStatement",
    # Models
    "SqlTable",
    "SqlColumn",
    "ConstantMapping",
    "PropertyMapping",
    "ConditionalPropertyMapping",
    "SubSelectMapping",
    "ColumnToColumnMapping",
    "RowMapping",
    "SelectModel",
    "WhereCondition",
    "WhereModel",
    "UpdateModel",
    "InsertModel",
    "BatchInsertModel",
    "MultiRowInsertModel",
    # Converters
    "table_from_sqlalchemy",
    "tables_from_sqlalchemy",
    # Errors
    "BindQLError",
    "ConfigurationError",
    "InternalConsistencyError",
    "DisallowedMappingError",
    "DuplicateParameterError",
    "InvalidStatementError",
    "PropertyAccessError",
]


def render_update(model: UpdateModel, strategy: RenderingStrategy | str) -> UpdateStatement:
    """Render an update statement.

    Args:
        model: The update to render.
        strategy: Strategy instance or registered name.

    Returns:
        :class:`UpdateStatement` with ``sql`` and ``parameters``.

    Raises:
        ConfigurationError: Missing model or unknown strategy.
        InternalConsistencyError: Disallowed mapping or parameter collision.
        PropertyAccessError: A mapped property is missing from ``model.row``.
    """
    return UpdateRenderer(model=model, strategy=strategy).render()


def render_insert(model: InsertModel, strategy: RenderingStrategy | str) -> InsertStatement:
    """Render a single-record insert."""
    return InsertRenderer(model=model, strategy=strategy).render()


def render_batch_insert(
    model: BatchInsertModel, strategy: RenderingStrategy | str
) -> BatchInsert:
    """Render a batch insert template plus its per-record parameter sets."""
    return BatchInsertRenderer(model=model, strategy=strategy).render()


def render_multi_row_insert(
    model: MultiRowInsertModel, strategy: RenderingStrategy | str
) -> MultiRowInsertStatement:
    """Render a multi-row ``insert ... values (...), (...)`` statement."""
    return MultiRowInsertRenderer(model=model, strategy=strategy).render()
