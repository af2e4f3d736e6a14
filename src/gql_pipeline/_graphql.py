# -*- coding: utf-8 -*-

import logging
from typing import (
    Any,
    Callable,
    Dict,
    List,
    Mapping,
    Optional,
    Sequence,
    Union,
    cast,
)

from graphql import (
    ExecutionResult,
    GraphQLDirective,
    GraphQLError,
    GraphQLNamedType,
    GraphQLSchema,
    Source,
    introspection_types,
    parse,
    specified_directives,
    specified_scalar_types,
)
from graphql import execute as execute_document
from graphql.language import DocumentNode

from ._utils import deprecated
from .config import Defaults, get_defaults
from .exc import InvariantViolation
from .instrumentation import Instrumentation
from .result import GraphQLResult
from .runtime import AsyncIORuntime, BlockingRuntime, Runtime
from .validation import Rule, all_rules, bind_variable_values, validate_document

logger = logging.getLogger(__name__)

#: Logical name of the source used to report error locations.
SOURCE_NAME = "GraphQL"


def execute_query(
    schema: GraphQLSchema,
    source: Union[str, DocumentNode],
    root_value: Any = None,
    context_value: Any = None,
    variable_values: Optional[Mapping[str, Any]] = None,
    operation_name: Optional[str] = None,
    field_resolver: Optional[Callable[..., Any]] = None,
    validation_rules: Optional[Sequence[Rule]] = None,
    runtime: Optional[Runtime] = None,
    *,
    middlewares: Optional[Sequence[Any]] = None,
    instrumentation: Optional[Instrumentation] = None,
    defaults: Optional[Defaults] = None
) -> Any:
    """
    Main GraphQL entrypoint encapsulating query processing from start to
    finish including parsing, validation and execution.

    Servers which persist queries may prefer running validation ahead of time
    and skip it at runtime by passing ``validation_rules=[]``.

    Warning:
        The returned value will depend on the ``runtime`` argument. Blocking
        execution returns a :class:`~gql_pipeline.GraphQLResult` while
        :class:`~gql_pipeline.runtime.AsyncIORuntime` always returns an
        awaitable resolving to one.

    Args:
        schema: Schema to execute the query against.

        source: The query document, either as a string or already parsed.

        root_value: Root resolution value passed to the top-level resolvers.

        context_value: Custom application-specific execution context.
            Use this to pass in anything your resolvers require like database
            connection, user information, etc.

        variable_values: Raw, JSON decoded variables parsed from the request.
            These are given as is to complexity rules before validation and
            to the executor.

        operation_name: Operation to execute.
            If specified, the operation with the given name will be executed.
            If not, this executes the single operation without disambiguation.

        field_resolver: Resolver used for fields which do not define one.
            Falls back to the default field resolver.

        validation_rules: Validation rules. If not set, all registered rules
            are used (see :func:`~gql_pipeline.validation.add_rule`); an empty
            sequence skips validation entirely.

        runtime: Runtime against which to execute field resolvers. Falls back
            to the default runtime and then to blocking execution.

        middlewares: graphql-core middlewares wrapping the resolution of all
            fields.

        instrumentation: Instrumentation instance.
            Use :class:`~gql_pipeline.instrumentation.MultiInstrumentation`
            to compose mutiple instances together.

        defaults: Explicit fallbacks for ``field_resolver`` and ``runtime``.
            Defaults to the process-wide instance, see
            :mod:`gql_pipeline.config`.

    Returns:
        Query result, potentially wrapped by the runtime.
    """
    defaults = defaults or get_defaults()
    runtime = _resolve_runtime(runtime, defaults)
    instrumentation = instrumentation or Instrumentation()
    field_resolver = field_resolver or defaults.field_resolver

    instrumentation.on_query_start()

    def _on_end(result: GraphQLResult) -> GraphQLResult:
        cast(Instrumentation, instrumentation).on_query_end()
        return result

    def _abort(errors: List[GraphQLError]) -> Any:
        # Make sure the value is wrapped similarly to the execution result to
        # make it easier for consumers.
        return runtime.ensure_wrapped(_on_end(GraphQLResult(None, errors)))

    try:
        document = _acquire_document(source, instrumentation)
        rules = bind_variable_values(
            all_rules() if validation_rules is None else validation_rules,
            variable_values,
            operation_name,
        )

        instrumentation.on_validation_start()
        try:
            validation_errors = validate_document(schema, document, rules)
        finally:
            instrumentation.on_validation_end()
    except GraphQLError as err:
        logger.debug("Query processing aborted: %s", err.message)
        return _abort([err])
    except Exception:
        instrumentation.on_query_end()
        raise

    if validation_errors:
        return _abort(validation_errors)

    instrumentation.on_execution_start()

    def _on_execution_end(value: Any) -> GraphQLResult:
        instrumentation_ = cast(Instrumentation, instrumentation)
        instrumentation_.on_execution_end()
        try:
            if not isinstance(value, ExecutionResult):
                raise InvariantViolation(
                    "Unexpected execution result %r" % type(value).__name__
                )
            return GraphQLResult.from_execution_result(value)
        finally:
            instrumentation_.on_query_end()

    def _on_execution_error(err: Exception) -> Any:
        instrumentation_ = cast(Instrumentation, instrumentation)
        instrumentation_.on_execution_end()
        instrumentation_.on_query_end()
        raise err

    try:
        result = execute_document(
            schema,
            document,
            root_value=root_value,
            context_value=context_value,
            variable_values=variable_values,
            operation_name=operation_name,
            field_resolver=field_resolver,
            middleware=[runtime, *(middlewares or ())],
        )
    except GraphQLError as err:
        instrumentation.on_execution_end()
        logger.debug("Execution aborted: %s", err.message)
        return _abort([err])
    except Exception:
        instrumentation.on_execution_end()
        instrumentation.on_query_end()
        raise

    return runtime.ensure_wrapped(
        runtime.map_value(
            result, _on_execution_end, else_=(Exception, _on_execution_error)
        )
    )


def _resolve_runtime(runtime: Optional[Runtime], defaults: Defaults) -> Runtime:
    if runtime is not None:
        return runtime
    if defaults.runtime is not None:
        return defaults.runtime
    return BlockingRuntime()


def _acquire_document(
    source: Union[str, DocumentNode], instrumentation: Instrumentation
) -> DocumentNode:
    if isinstance(source, DocumentNode):
        return source

    instrumentation.on_parsing_start()
    try:
        return parse(Source(source or "", SOURCE_NAME))
    finally:
        instrumentation.on_parsing_end()


@deprecated("execute() is deprecated, use execute_query(...).to_dict().")
def execute(
    schema: GraphQLSchema,
    source: Union[str, DocumentNode],
    root_value: Any = None,
    context_value: Any = None,
    variable_values: Optional[Mapping[str, Any]] = None,
    operation_name: Optional[str] = None,
    field_resolver: Optional[Callable[..., Any]] = None,
    validation_rules: Optional[Sequence[Rule]] = None,
    runtime: Optional[Runtime] = None,
    **kwargs: Any
) -> Any:
    """
    Same as :func:`execute_query` but converts the result to a plain
    response dictionary (see :meth:`GraphQLResult.to_dict`).

    If the runtime returns deferred values, this returns a deferred value
    resolving to the response dictionary.

    Raises:
        InvariantViolation: if the result is neither a ``GraphQLResult`` nor
            a deferred value.
    """
    runtime = _resolve_runtime(
        runtime, kwargs.get("defaults") or get_defaults()
    )
    result = execute_query(
        schema,
        source,
        root_value,
        context_value,
        variable_values,
        operation_name,
        field_resolver,
        validation_rules,
        runtime,
        **kwargs
    )

    if isinstance(result, GraphQLResult):
        return result.to_dict()
    if runtime.is_deferred(result):
        return runtime.map_value(result, _to_dict)
    raise InvariantViolation("Unexpected execution result")


def _to_dict(result: Any) -> Dict[str, Any]:
    if not isinstance(result, GraphQLResult):
        raise InvariantViolation("Unexpected execution result")
    return result.to_dict()


@deprecated("execute_and_return_result() was renamed to execute_query().")
def execute_and_return_result(*args: Any, **kwargs: Any) -> Any:
    """ Alias of :func:`execute_query`. """
    return execute_query(*args, **kwargs)


async def graphql(
    schema: GraphQLSchema, source: Union[str, DocumentNode], **kwargs: Any
) -> GraphQLResult:
    """
    Wrapper around :func:`execute_query` enforcing usage of
    :class:`~gql_pipeline.runtime.AsyncIORuntime`.

    Warning:
        Blocking (non async) resolvers will block the current thread.
    """
    return cast(
        GraphQLResult,
        await execute_query(schema, source, runtime=AsyncIORuntime(), **kwargs),
    )


def graphql_blocking(
    schema: GraphQLSchema, source: Union[str, DocumentNode], **kwargs: Any
) -> GraphQLResult:
    """
    Wrapper around :func:`execute_query` enforcing blocking execution.
    """
    return cast(
        GraphQLResult,
        execute_query(schema, source, runtime=BlockingRuntime(), **kwargs),
    )


def get_internal_directives() -> List[GraphQLDirective]:
    """ Directives defined in the GraphQL specification. """
    return list(specified_directives)


def get_internal_types() -> Dict[str, GraphQLNamedType]:
    """ Types defined in the GraphQL specification (scalars and
    introspection types), keyed by name. """
    types = {
        type_.name: type_ for type_ in specified_scalar_types
    }  # type: Dict[str, GraphQLNamedType]
    types.update(introspection_types)
    return types
