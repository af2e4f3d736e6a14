# -*- coding: utf-8 -*-
"""
gql_pipeline
~~~~~~~~~~~~

gql_pipeline processes GraphQL queries from start to finish: it parses the
request, validates it (including cost and depth limits) and executes it
against a `graphql-core <https://github.com/graphql-python/graphql-core>`_
schema, always reducing the outcome to a single
:class:`~gql_pipeline.GraphQLResult`.
"""

# flake8: noqa

from ._pkg import __version__  # isort:skip

from . import exc, runtime, validation
from ._graphql import (
    execute,
    execute_and_return_result,
    execute_query,
    get_internal_directives,
    get_internal_types,
    graphql,
    graphql_blocking,
)
from .config import (
    Defaults,
    get_defaults,
    reset_defaults,
    set_default_field_resolver,
    set_default_runtime,
)
from .default_resolver import default_resolver
from .instrumentation import Instrumentation, MultiInstrumentation
from .result import GraphQLResult

__all__ = (
    "__version__",
    "execute_query",
    "execute",
    "execute_and_return_result",
    "graphql",
    "graphql_blocking",
    "get_internal_directives",
    "get_internal_types",
    "GraphQLResult",
    "Defaults",
    "get_defaults",
    "reset_defaults",
    "set_default_field_resolver",
    "set_default_runtime",
    "default_resolver",
    "Instrumentation",
    "MultiInstrumentation",
)
