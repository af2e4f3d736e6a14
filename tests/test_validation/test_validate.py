# -*- coding: utf-8 -*-

import pytest
from graphql import GraphQLError, parse, specified_rules
from graphql.validation import FieldsOnCorrectTypeRule, ScalarLeafsRule

from gql_pipeline import execute_query
from gql_pipeline.validation import (
    SPECIFIED_RULES,
    QueryComplexity,
    QueryDepth,
    add_rule,
    all_rules,
    bind_variable_values,
    get_rule,
    rule_name,
    validate_document,
)


def test_registry_contains_all_known_rules():
    names = [rule_name(rule) for rule in all_rules()]
    assert names == [
        *(rule.__name__ for rule in specified_rules),
        "QueryDepth",
        "QueryComplexity",
    ]


def test_all_rules_returns_a_copy():
    rules = all_rules()
    rules.clear()
    assert SPECIFIED_RULES


def test_get_rule():
    assert get_rule("FieldsOnCorrectTypeRule") is FieldsOnCorrectTypeRule
    complexity = get_rule("QueryComplexity")
    assert isinstance(complexity, QueryComplexity)
    assert not complexity.enabled
    assert get_rule("Foo") is None


def test_add_rule_replaces_rule_with_the_same_name():
    count = len(SPECIFIED_RULES)
    rule = QueryComplexity(10)
    add_rule(rule)
    assert get_rule("QueryComplexity") is rule
    assert len(SPECIFIED_RULES) == count


def test_add_rule_appends_new_rules():
    def custom(schema, document):
        return []

    add_rule(custom)
    assert get_rule("custom") is custom
    assert all_rules()[-1] is custom


def test_add_rule_rejects_invalid_values():
    with pytest.raises(TypeError):
        add_rule(42)

    with pytest.raises(TypeError):
        add_rule(int)


def test_registered_complexity_rule_applies_by_default(starwars_schema):
    add_rule(QueryComplexity(10))
    result = execute_query(
        starwars_schema, '{ human(id: "1000") { friends { name } } }'
    )
    assert result.data is None
    assert [e.message for e in result.errors] == [
        "Max query complexity should be 10 but got 11."
    ]


def test_registered_depth_rule_applies_by_default(starwars_schema):
    add_rule(QueryDepth(2))
    result = execute_query(starwars_schema, "{ hero { friends { name } } }")
    assert result.data is None
    assert [e.message for e in result.errors] == [
        'Operation "<ANONYMOUS>" depth (3) exceeds maximum depth (2)'
    ]


def test_bind_variable_values_binds_operation_rules_only():
    complexity = QueryComplexity(10)
    depth = QueryDepth(10)
    variables = {"a": 1}
    bound = bind_variable_values(
        [FieldsOnCorrectTypeRule, depth, complexity], variables, "Foo"
    )

    assert bound[0] is FieldsOnCorrectTypeRule

    for original, copy in zip([depth, complexity], bound[1:]):
        assert type(copy) is type(original)
        assert copy is not original
        assert copy.raw_variable_values is variables
        assert copy.operation_name == "Foo"
        assert original.raw_variable_values is None
        assert original.operation_name is None


def test_bind_variable_values_without_complexity_rule_is_a_noop():
    rules = [FieldsOnCorrectTypeRule, ScalarLeafsRule]
    assert bind_variable_values(rules, {"a": 1}) == rules


def test_validate_document_with_no_rules_returns_no_errors(starwars_schema):
    doc = parse("{ foo { bar } }")
    assert validate_document(starwars_schema, doc, []) == []


def test_validate_document_defaults_to_all_rules(starwars_schema):
    doc = parse("{ foo }")
    assert [e.message for e in validate_document(starwars_schema, doc)] == [
        "Cannot query field 'foo' on type 'Query'."
    ]


def test_validate_document_orders_errors_by_rule_execution(starwars_schema):
    def first(schema, document):
        return [GraphQLError("first")]

    def second(schema, document):
        return [GraphQLError("second")]

    doc = parse("{ hero foo }")
    errors = validate_document(
        starwars_schema,
        doc,
        [second, FieldsOnCorrectTypeRule, first, ScalarLeafsRule],
    )
    assert [e.message for e in errors] == [
        "Field 'hero' of type 'Character' must have a selection of subfields."
        " Did you mean 'hero { ... }'?",
        "Cannot query field 'foo' on type 'Query'.",
        "second",
        "first",
    ]


def test_validate_document_rejects_invalid_rules(starwars_schema):
    with pytest.raises(TypeError):
        validate_document(starwars_schema, parse("{ hero { name } }"), [42])
