# -*- coding: utf-8 -*-

import logging
from typing import (
    AbstractSet,
    Any,
    Callable,
    Dict,
    List,
    Mapping,
    Optional,
)

from graphql import GraphQLError
from graphql.execution.values import get_argument_values
from graphql.language import (
    DocumentNode,
    FieldNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    InlineFragmentNode,
    OperationDefinitionNode,
    SelectionSetNode,
)
from graphql.type import GraphQLNamedType, GraphQLSchema, get_named_type
from graphql.utilities import type_from_ast

from ..exc import ComplexityError
from ._utils import (
    OperationRule,
    document_fragments,
    field_definition,
    should_include,
)

logger = logging.getLogger(__name__)

#: Signature of field level complexity functions. They receive the
#: complexity of the field's selection set and the field's coerced arguments.
ComplexityFn = Callable[[int, Dict[str, Any]], int]


class QueryComplexity(OperationRule):
    """Validate that a document's estimated cost doesn't exceed a maximum.

    Every selected field costs ``default_complexity`` plus the complexity of
    its own selection set. Fields can customise this by defining a
    ``complexity`` function in their ``extensions``, which is called with the
    complexity of the selection set and the field's arguments. For example,
    in order to charge paginated fields for each requested item:

    .. code-block:: python

        GraphQLField(
            GraphQLList(Character),
            args={"first": GraphQLArgument(GraphQLInt)},
            extensions={
                "complexity": lambda children, args: (
                    children * args.get("first", 10)
                ),
            },
        )

    Arguments are coerced using the raw variable values provided by the
    client so this rule must be given those before running, see
    :meth:`with_raw_variable_values`. Fields excluded through ``@skip`` or
    ``@include`` are not counted.

    Operations whose variables or arguments cannot be coerced are not
    checked: these problems are reported by the other rules or by the
    executor.

    Args:
        max_query_complexity: Complexity limit (inclusive). The rule is
            disabled when this is ``0``.
        default_complexity: Cost of a field without custom complexity
            function.
        operation_name: If set this will only consider the operation matching
            the provided name, if not this will check all operation
            definitions.
    """

    name = "QueryComplexity"

    def __init__(
        self,
        max_query_complexity: int,
        *,
        default_complexity: int = 1,
        operation_name: Optional[str] = None
    ):
        if max_query_complexity < 0:
            raise ValueError(
                "max_query_complexity must be >= 0 (got %d)"
                % max_query_complexity
            )
        self.max_query_complexity = max_query_complexity
        self.default_complexity = default_complexity
        self.operation_name = operation_name
        self.raw_variable_values = None  # type: Optional[Mapping[str, Any]]

    def __repr__(self) -> str:
        return "<%s max_query_complexity=%d>" % (
            self.__class__.__name__,
            self.max_query_complexity,
        )

    @property
    def enabled(self) -> bool:
        return self.max_query_complexity > 0

    def __call__(
        self, schema: GraphQLSchema, document: DocumentNode
    ) -> List[GraphQLError]:
        if not self.enabled:
            return []

        fragments = document_fragments(document)
        errors = []  # type: List[GraphQLError]

        for op in self.operations(document):
            try:
                complexity = self.operation_complexity(schema, op, fragments)
            except GraphQLError as err:
                logger.debug("Skipping complexity check: %s", err.message)
                continue

            if complexity > self.max_query_complexity:
                errors.append(
                    ComplexityError(self.max_query_complexity, complexity, [op])
                )

        return errors

    def operation_complexity(
        self,
        schema: GraphQLSchema,
        operation: OperationDefinitionNode,
        fragments: Mapping[str, FragmentDefinitionNode],
    ) -> int:
        """ Compute the complexity of a single operation.

        Raises:
            GraphQLError: if the raw variables or the field arguments cannot
                be coerced
        """
        variables = self.operation_variables(schema, operation)
        root_type = getattr(
            schema, "%s_type" % operation.operation.value, None
        )  # type: Optional[GraphQLNamedType]
        return self._selection_set_complexity(
            schema,
            root_type,
            operation.selection_set,
            variables,
            fragments,
            frozenset(),
        )

    def _selection_set_complexity(
        self,
        schema: GraphQLSchema,
        parent_type: Optional[GraphQLNamedType],
        selection_set: SelectionSetNode,
        variables: Dict[str, Any],
        fragments: Mapping[str, FragmentDefinitionNode],
        visited_fragments: AbstractSet[str],
    ) -> int:
        complexity = 0

        for selection in selection_set.selections:
            if not should_include(selection, variables):
                continue

            if isinstance(selection, FieldNode):
                complexity += self._field_complexity(
                    schema,
                    parent_type,
                    selection,
                    variables,
                    fragments,
                    visited_fragments,
                )
            elif isinstance(selection, InlineFragmentNode):
                type_condition = (
                    type_from_ast(schema, selection.type_condition)
                    if selection.type_condition
                    else parent_type
                )
                complexity += self._selection_set_complexity(
                    schema,
                    type_condition,  # type: ignore
                    selection.selection_set,
                    variables,
                    fragments,
                    visited_fragments,
                )
            elif isinstance(selection, FragmentSpreadNode):
                name = selection.name.value
                fragment = fragments.get(name)
                if fragment is None or name in visited_fragments:
                    continue
                fragment_type = type_from_ast(schema, fragment.type_condition)
                complexity += self._selection_set_complexity(
                    schema,
                    fragment_type,  # type: ignore
                    fragment.selection_set,
                    variables,
                    fragments,
                    visited_fragments | {name},
                )

        return complexity

    def _field_complexity(
        self,
        schema: GraphQLSchema,
        parent_type: Optional[GraphQLNamedType],
        node: FieldNode,
        variables: Dict[str, Any],
        fragments: Mapping[str, FragmentDefinitionNode],
        visited_fragments: AbstractSet[str],
    ) -> int:
        field_def = field_definition(schema, parent_type, node.name.value)

        if node.selection_set is not None:
            children = self._selection_set_complexity(
                schema,
                get_named_type(field_def.type) if field_def else None,
                node.selection_set,
                variables,
                fragments,
                visited_fragments,
            )
        else:
            children = 0

        complexity_fn = (
            (field_def.extensions or {}).get("complexity")
            if field_def is not None
            else None
        )  # type: Optional[ComplexityFn]

        if complexity_fn is None:
            return children + self.default_complexity

        args = get_argument_values(field_def, node, variables)  # type: ignore
        return complexity_fn(children, args)


def query_complexity(
    schema: GraphQLSchema,
    document: DocumentNode,
    variable_values: Optional[Mapping[str, Any]] = None,
    operation_name: Optional[str] = None,
    *,
    default_complexity: int = 1
) -> int:
    """ Compute the complexity of a document.

    This is the maximum complexity across operations, or the complexity of
    the operation matching ``operation_name`` if provided (``0`` if there is
    no such operation).

    Raises:
        GraphQLError: if the raw variables or the field arguments cannot
            be coerced
    """
    rule = QueryComplexity(
        0,
        default_complexity=default_complexity,
        operation_name=operation_name,
    ).with_raw_variable_values(variable_values)
    fragments = document_fragments(document)

    return max(
        (
            rule.operation_complexity(schema, op, fragments)
            for op in rule.operations(document)
        ),
        default=0,
    )
