# -*- coding: utf-8 -*-

import copy
from typing import Any, Dict, Iterator, Mapping, Optional, Union

from graphql import (
    GraphQLError,
    GraphQLIncludeDirective,
    GraphQLSkipDirective,
    SchemaMetaFieldDef,
    TypeMetaFieldDef,
    TypeNameMetaFieldDef,
)
from graphql.execution.values import get_directive_values, get_variable_values
from graphql.language import (
    DocumentNode,
    FieldNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    InlineFragmentNode,
    OperationDefinitionNode,
)
from graphql.type import (
    GraphQLField,
    GraphQLNamedType,
    GraphQLSchema,
    is_interface_type,
    is_object_type,
)

SelectionNode = Union[FieldNode, FragmentSpreadNode, InlineFragmentNode]


def document_fragments(
    document: DocumentNode,
) -> Dict[str, FragmentDefinitionNode]:
    return {
        definition.name.value: definition
        for definition in document.definitions
        if isinstance(definition, FragmentDefinitionNode)
    }


def should_include(
    node: SelectionNode, variables: Optional[Mapping[str, Any]] = None
) -> bool:
    """ Evaluate ``@skip`` and ``@include`` on a selection node. """
    if not node.directives:
        return True

    skip = get_directive_values(GraphQLSkipDirective, node, variables)
    if skip is not None and skip["if"]:
        return False

    include = get_directive_values(GraphQLIncludeDirective, node, variables)
    if include is not None and not include["if"]:
        return False

    return True


def field_definition(
    schema: GraphQLSchema,
    parent_type: Optional[GraphQLNamedType],
    name: str,
) -> Optional[GraphQLField]:
    """ Find a field definition, including introspection meta fields.

    This is lenient on purpose: unknown parent types or fields return ``None``
    as they are reported by other rules.
    """
    if name == "__typename":
        return TypeNameMetaFieldDef

    if parent_type is None:
        return None

    if parent_type is schema.query_type:
        if name == "__schema":
            return SchemaMetaFieldDef
        elif name == "__type":
            return TypeMetaFieldDef

    if is_object_type(parent_type) or is_interface_type(parent_type):
        return parent_type.fields.get(name)  # type: ignore

    return None


def coerce_operation_variables(
    schema: GraphQLSchema,
    operation: OperationDefinitionNode,
    raw_variable_values: Optional[Mapping[str, Any]],
) -> Dict[str, Any]:
    """ Coerce raw variables against an operation's variable definitions.

    Raises:
        GraphQLError: if the raw variables cannot be coerced, listing all
            coercion errors
    """
    coerced = get_variable_values(
        schema,
        operation.variable_definitions or [],
        dict(raw_variable_values or {}),
    )
    if isinstance(coerced, list):
        raise GraphQLError(
            "\n\n".join(error.message for error in coerced), [operation]
        )
    return coerced


class OperationRule:
    """ Base class for document validators which depend on the request and
    not only on the document: the raw variables and the operation to run.

    Shared instances, such as registered rules, are never bound directly;
    use :meth:`with_raw_variable_values` to get a bound copy.
    """

    raw_variable_values = None  # type: Optional[Mapping[str, Any]]
    operation_name = None  # type: Optional[str]

    def set_raw_variable_values(
        self, values: Optional[Mapping[str, Any]]
    ) -> None:
        self.raw_variable_values = values

    def with_raw_variable_values(
        self,
        values: Optional[Mapping[str, Any]],
        operation_name: Optional[str] = None,
    ) -> "OperationRule":
        """ Copy of this rule bound to a specific set of raw variables.

        The mapping is stored as is, ``None`` included. If ``operation_name``
        is set, the copy only considers the matching operation.
        """
        rule = copy.copy(self)
        rule.raw_variable_values = values
        if operation_name is not None:
            rule.operation_name = operation_name
        return rule

    def operations(
        self, document: DocumentNode
    ) -> Iterator[OperationDefinitionNode]:
        for definition in document.definitions:
            if not isinstance(definition, OperationDefinitionNode):
                continue
            if self.operation_name and not (
                definition.name and definition.name.value == self.operation_name
            ):
                continue
            yield definition

    def operation_variables(
        self, schema: GraphQLSchema, operation: OperationDefinitionNode
    ) -> Dict[str, Any]:
        return coerce_operation_variables(
            schema, operation, self.raw_variable_values
        )
