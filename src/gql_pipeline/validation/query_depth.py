# -*- coding: utf-8 -*-

import logging
from typing import AbstractSet, Any, List, Mapping, Optional

from graphql import GraphQLError
from graphql.language import (
    DocumentNode,
    FieldNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    InlineFragmentNode,
    SelectionSetNode,
)
from graphql.type import GraphQLSchema

from ..exc import DepthError
from ._utils import OperationRule, document_fragments, should_include

logger = logging.getLogger(__name__)


class QueryDepth(OperationRule):
    """Validate that a given document doesn't exceed a given query depth.

    Query depth is calculated as nesting levels of fields, traversing
    fragments. For example, given the following document:

    .. code-block:: graphql

        {
            hero {
                name
                friends {
                    ... friendsData
                }
            }
        }

        fragment friendsData on Character {
            friends {
                name
            }
        }

    the depth of the query would be 4 (``hero > friends > friends > name``).

    Fields excluded through ``@skip`` or ``@include`` are not counted, which
    requires the raw variables, see :meth:`with_raw_variable_values`.
    Operations whose variables cannot be coerced are not checked.

    Args:
        max_depth: Depth limit (inclusive). The rule is disabled when this is
            ``0``.
        operation_name: If set this will only consider the operation matching
            the provided name, if not this will collect errors for all
            operation definitions.
    """

    name = "QueryDepth"

    def __init__(self, max_depth: int, *, operation_name: Optional[str] = None):
        if max_depth < 0:
            raise ValueError("max_depth must be >= 0 (got %d)" % max_depth)
        self.max_depth = max_depth
        self.operation_name = operation_name
        self.raw_variable_values = None  # type: Optional[Mapping[str, Any]]

    def __repr__(self) -> str:
        return "<%s max_depth=%d>" % (self.__class__.__name__, self.max_depth)

    def __call__(
        self, schema: GraphQLSchema, document: DocumentNode
    ) -> List[GraphQLError]:
        if self.max_depth == 0:
            return []

        fragments = document_fragments(document)
        errors = []  # type: List[GraphQLError]

        for op in self.operations(document):
            try:
                variables = self.operation_variables(schema, op)
                depth = selection_depth(op.selection_set, fragments, variables)
            except GraphQLError as err:
                logger.debug("Skipping depth check: %s", err.message)
                continue

            if depth > self.max_depth:
                errors.append(
                    DepthError(
                        op.name.value if op.name else None,
                        depth,
                        self.max_depth,
                        [op],
                    )
                )

        return errors


def selection_depth(
    selection_set: Optional[SelectionSetNode],
    fragments: Mapping[str, FragmentDefinitionNode],
    variables: Optional[Mapping[str, Any]] = None,
    _visited: AbstractSet[str] = frozenset(),
) -> int:
    """ Depth of the deepest field path in a selection set.

    Raises:
        GraphQLError: if a ``@skip`` or ``@include`` condition cannot be
            evaluated with the provided (coerced) variables
    """
    if selection_set is None:
        return 0

    depth = 0
    for selection in selection_set.selections:
        if not should_include(selection, variables):
            continue

        if isinstance(selection, FieldNode):
            depth = max(
                depth,
                1
                + selection_depth(
                    selection.selection_set, fragments, variables, _visited
                ),
            )
        elif isinstance(selection, InlineFragmentNode):
            depth = max(
                depth,
                selection_depth(
                    selection.selection_set, fragments, variables, _visited
                ),
            )
        elif isinstance(selection, FragmentSpreadNode):
            name = selection.name.value
            fragment = fragments.get(name)
            if fragment is None or name in _visited:
                continue
            depth = max(
                depth,
                selection_depth(
                    fragment.selection_set,
                    fragments,
                    variables,
                    _visited | {name},
                ),
            )

    return depth
