"""bindQL rendering layer: statement model → SQL text + parameters."""
from bindql.render.context import RenderingContext
from bindql.render.fragments import FragmentAndParameters, FragmentCollector
from bindql.render.insert import (
    BatchInsert,
    BatchInsertRenderer,
    InsertRenderer,
    InsertStatement,
    MultiRowInsertRenderer,
    MultiRowInsertStatement,
)
from bindql.render.registry import MYBATIS3, SPRING_NAMED_PARAMETER, RenderingStrategies
from bindql.render.sequence import ParameterSequence
from bindql.render.strategy import (
    DEFAULT_PARAMETER_PREFIX,
    MyBatis3RenderingStrategy,
    RenderingStrategy,
    SpringNamedParameterRenderingStrategy,
)
from bindql.render.update import UpdateRenderer, UpdateStatement

__all__ = [
    "RenderingContext",
    "FragmentAndParameters",
    "FragmentCollector",
    "BatchInsert",
    "BatchInsertRenderer",
    "InsertRenderer",
    "InsertStatement",
    "MultiRowInsertRenderer",
    "MultiRowInsertStatement",
    "MYBATIS3",
    "SPRING_NAMED_PARAMETER",
    "RenderingStrategies",
    "ParameterSequence",
    "DEFAULT_PARAMETER_PREFIX",
    "MyBatis3RenderingStrategy",
    "RenderingStrategy",
    "SpringNamedParameterRenderingStrategy",
    "UpdateRenderer",
    "UpdateStatement",
]
