"""Unit tests for mapping visitor dispatch."""
from __future__ import annotations

import pytest

from bindql.errors import DisallowedMappingError, InternalConsistencyError
from bindql.render.context import RenderingContext
from bindql.render.registry import MYBATIS3, SPRING_NAMED_PARAMETER
from bindql.render.visitors import (
    FieldAndValue,
    InsertMappingVisitor,
    MultiRowValuePhraseVisitor,
    SetPhraseVisitor,
)
from bindql.schema.mappings import (
    ColumnToColumnMapping,
    ConditionalPropertyMapping,
    ConstantMapping,
    PropertyMapping,
    RowMapping,
)
from tests.fixtures import ID1, ID2


def test_unknown_mapping_type_is_internal_error():
    visitor = SetPhraseVisitor(RenderingContext(strategy=MYBATIS3))
    with pytest.raises(InternalConsistencyError) as exc_info:
        visitor.visit(object())
    assert exc_info.value.details["type"] == "object"


def test_set_phrase_visitor_allocates_from_context_sequence():
    ctx = RenderingContext(strategy=SPRING_NAMED_PARAMETER)
    visitor = SetPhraseVisitor(ctx, {"id1": 1, "id2": 2})
    first = visitor.visit(PropertyMapping(column=ID1, property="id1"))
    second = visitor.visit(PropertyMapping(column=ID2, property="id2"))
    assert (first.fragment, dict(first.parameters)) == ("id1 = :p1", {"p1": 1})
    assert (second.fragment, dict(second.parameters)) == ("id2 = :p2", {"p2": 2})
    assert ctx.sequence.peek() == 3


def test_constant_does_not_consume_sequence():
    ctx = RenderingContext(strategy=MYBATIS3)
    SetPhraseVisitor(ctx).visit(ConstantMapping(column=ID1, constant="22"))
    assert ctx.sequence.peek() == 1


def test_insert_visitor_uses_row_locator():
    visitor = InsertMappingVisitor(MYBATIS3)
    assert visitor.visit(RowMapping(column=ID2)) == FieldAndValue("id2", "#{row,jdbcType=INTEGER}")
    assert visitor.visit(ConstantMapping(column=ID1, constant="22")) == FieldAndValue("id1", "22")


def test_insert_visitor_rejects_conditional_mapping():
    visitor = InsertMappingVisitor(SPRING_NAMED_PARAMETER)
    with pytest.raises(DisallowedMappingError) as exc_info:
        visitor.visit(ConditionalPropertyMapping(column=ID2, property="id2"))
    assert exc_info.value.details == {
        "kind": "conditional_property",
        "column": "id2",
        "context": "insert",
    }


def test_multi_row_visitor_uses_record_locator():
    visitor = MultiRowValuePhraseVisitor(SPRING_NAMED_PARAMETER, "records[4]")
    assert visitor.visit(PropertyMapping(column=ID2, property="id2")) == FieldAndValue(
        "id2", ":records[4].id2"
    )


def test_disallowed_error_message_names_column_and_context():
    visitor = MultiRowValuePhraseVisitor(MYBATIS3, "row", "batch insert")
    with pytest.raises(DisallowedMappingError) as exc_info:
        visitor.visit(ColumnToColumnMapping(column=ID1, source=ID2))
    message = str(exc_info.value)
    assert "column_to_column" in message
    assert "batch insert" in message
    assert "'id1'" in message
