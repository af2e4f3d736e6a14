# -*- coding: utf-8 -*-
""" Process-wide and explicit defaults. """

import asyncio
from inspect import isawaitable

import pytest

from gql_pipeline import (
    Defaults,
    default_resolver,
    execute_query,
    get_defaults,
    reset_defaults,
    set_default_field_resolver,
    set_default_runtime,
)
from gql_pipeline.runtime import AsyncIORuntime, BlockingRuntime


def _constant_resolver(root, info, **args):
    return "constant"


def test_initial_defaults():
    defaults = get_defaults()
    assert defaults.field_resolver is default_resolver
    assert defaults.runtime is None


def test_set_default_field_resolver_is_used_for_fields_without_resolver(
    starwars_schema,
):
    set_default_field_resolver(_constant_resolver)
    result = execute_query(starwars_schema, '{ human(id: "1000") { name } }')
    assert result.data == {"human": {"name": "constant"}}


def test_explicit_field_resolver_wins_over_default(starwars_schema):
    set_default_field_resolver(_constant_resolver)
    result = execute_query(
        starwars_schema,
        '{ human(id: "1000") { name } }',
        field_resolver=default_resolver,
    )
    assert result.data == {"human": {"name": "Luke Skywalker"}}


def test_set_default_field_resolver_rejects_non_callable():
    with pytest.raises(TypeError):
        set_default_field_resolver("foo")


def test_set_default_runtime(starwars_schema):
    set_default_runtime(AsyncIORuntime())
    result = execute_query(starwars_schema, "{ hero { name } }")
    assert isawaitable(result)
    assert asyncio.run(result).data == {"hero": {"name": "R2-D2"}}


def test_set_default_runtime_to_none_reverts_to_blocking(starwars_schema):
    set_default_runtime(AsyncIORuntime())
    set_default_runtime(None)
    result = execute_query(starwars_schema, "{ hero { name } }")
    assert result.data == {"hero": {"name": "R2-D2"}}


def test_explicit_runtime_wins_over_default(starwars_schema):
    set_default_runtime(AsyncIORuntime())
    result = execute_query(
        starwars_schema, "{ hero { name } }", runtime=BlockingRuntime()
    )
    assert result.data == {"hero": {"name": "R2-D2"}}


def test_set_default_runtime_rejects_invalid_values():
    with pytest.raises(TypeError):
        set_default_runtime(object())


def test_reset_defaults():
    set_default_field_resolver(_constant_resolver)
    set_default_runtime(AsyncIORuntime())
    reset_defaults()
    assert get_defaults().field_resolver is default_resolver
    assert get_defaults().runtime is None


def test_explicit_defaults_are_used_instead_of_process_wide_ones(
    starwars_schema,
):
    set_default_runtime(AsyncIORuntime())
    defaults = Defaults(field_resolver=_constant_resolver)
    result = execute_query(
        starwars_schema, '{ human(id: "1000") { name } }', defaults=defaults
    )
    assert result.data == {"human": {"name": "constant"}}


def test_defaults_validation():
    with pytest.raises(TypeError):
        Defaults(field_resolver=42)

    with pytest.raises(TypeError):
        Defaults(runtime="asyncio")
