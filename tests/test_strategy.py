"""Unit tests for rendering strategies, the parameter sequence and the registry."""
from __future__ import annotations

import pytest

from bindql.errors import ConfigurationError
from bindql.render.registry import (
    MYBATIS3,
    SPRING_NAMED_PARAMETER,
    RenderingStrategies,
)
from bindql.render.sequence import ParameterSequence
from bindql.render.strategy import (
    DEFAULT_PARAMETER_PREFIX,
    RenderingStrategy,
    SpringNamedParameterRenderingStrategy,
)
from bindql.schema.column import SqlColumn, SqlTable

FOO = SqlTable(name="foo")
TYPED = FOO.column(
    "amount",
    jdbc_type="decimal",
    type_handler="com.example.MoneyTypeHandler",
    java_type="java.math.BigDecimal",
)
UNTYPED = SqlColumn(name="note")


def test_sequence_starts_at_one_and_advances_once_per_name():
    seq = ParameterSequence()
    assert MYBATIS3.next_parameter_name(seq) == "p1"
    assert MYBATIS3.next_parameter_name(seq) == "p2"
    assert SPRING_NAMED_PARAMETER.next_parameter_name(seq) == "p3"
    assert seq.peek() == 4


def test_fresh_sequences_are_independent():
    a, b = ParameterSequence(), ParameterSequence()
    a.next_value()
    a.next_value()
    assert b.next_value() == 1


def test_mybatis_column_placeholder_includes_type_hints_in_order():
    placeholder = MYBATIS3.placeholder_for_column(TYPED, DEFAULT_PARAMETER_PREFIX, "p1")
    assert placeholder == (
        "#{parameters.p1,jdbcType=DECIMAL,"
        "typeHandler=com.example.MoneyTypeHandler,"
        "javaType=java.math.BigDecimal}"
    )


def test_mybatis_column_placeholder_without_type_hints():
    assert MYBATIS3.placeholder_for_column(UNTYPED, "parameters", "p7") == "#{parameters.p7}"


def test_mybatis_value_placeholder_has_no_type_hints():
    assert MYBATIS3.placeholder_for_value("parameters", "p2") == "#{parameters.p2}"


def test_mybatis_row_insert_matches_column_placeholder():
    id2 = FOO.column("id2", jdbc_type="INTEGER")
    assert MYBATIS3.placeholder_for_row_insert(id2, "row", "id2") == "#{row.id2,jdbcType=INTEGER}"
    assert (
        MYBATIS3.placeholder_for_row_insert(id2, "records[2]", "id2")
        == "#{records[2].id2,jdbcType=INTEGER}"
    )


def test_mybatis_whole_row_omits_property_segment():
    id2 = FOO.column("id2", jdbc_type="INTEGER")
    assert MYBATIS3.placeholder_for_whole_row(id2, "records[0]") == "#{records[0],jdbcType=INTEGER}"


def test_spring_ignores_prefix_and_type():
    assert SPRING_NAMED_PARAMETER.placeholder_for_column(TYPED, "parameters", "p1") == ":p1"
    assert SPRING_NAMED_PARAMETER.placeholder_for_value("parameters", "p2") == ":p2"


def test_spring_row_insert_keeps_row_locator():
    assert SPRING_NAMED_PARAMETER.placeholder_for_row_insert(TYPED, "row", "amount") == ":row.amount"
    assert SPRING_NAMED_PARAMETER.placeholder_for_whole_row(TYPED, "records[1]") == ":records[1]"


def test_registry_returns_shared_instances():
    assert RenderingStrategies.get("mybatis3") is MYBATIS3
    assert RenderingStrategies.get("spring") is SPRING_NAMED_PARAMETER
    assert {"mybatis3", "spring"} <= set(RenderingStrategies.registered_names())


def test_registry_unknown_name():
    with pytest.raises(ConfigurationError) as exc_info:
        RenderingStrategies.get("jdbc")
    assert "jdbc" in str(exc_info.value)
    assert "mybatis3" in exc_info.value.details["registered"]


def test_registry_resolve_rejects_none():
    with pytest.raises(ConfigurationError) as exc_info:
        RenderingStrategies.resolve(None)
    assert exc_info.value.missing == ["strategy"]


def test_registry_resolve_passes_instances_through():
    strategy = SpringNamedParameterRenderingStrategy()
    assert RenderingStrategies.resolve(strategy) is strategy


def test_register_custom_strategy():
    @RenderingStrategies.register("test-qmark")
    class QmarkStrategy(RenderingStrategy):
        @property
        def name(self) -> str:
            return "test-qmark"

        def placeholder_for_column(self, column, prefix, parameter_name):
            return "?"

        def placeholder_for_value(self, prefix, parameter_name):
            return "?"

        def placeholder_for_whole_row(self, column, locator):
            return "?"

    strategy = RenderingStrategies.get("test-qmark")
    assert isinstance(strategy, QmarkStrategy)
    assert strategy.placeholder_for_row_insert(UNTYPED, "row", "note") == "?"


def test_register_instance_makes_it_resolvable_by_name():
    strategy = SpringNamedParameterRenderingStrategy()
    RenderingStrategies.register_instance("test-named", strategy)

    assert RenderingStrategies.get("test-named") is strategy
    assert RenderingStrategies.resolve("test-named") is strategy
    assert "test-named" in RenderingStrategies.registered_names()
