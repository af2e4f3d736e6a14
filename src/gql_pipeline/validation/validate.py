# -*- coding: utf-8 -*-
"""
Validation entry point and registry of known validation rules.
"""

import logging
from typing import (
    Any,
    Callable,
    List,
    Mapping,
    Optional,
    Sequence,
    Type,
    Union,
)

from graphql import GraphQLError, specified_rules, validate
from graphql.language import DocumentNode
from graphql.type import GraphQLSchema
from graphql.validation import ASTValidationRule

from ._utils import OperationRule
from .query_complexity import QueryComplexity
from .query_depth import QueryDepth

logger = logging.getLogger(__name__)

#: Document validators are callables taking a schema and a document and
#: returning a list of errors.
Validator = Callable[[GraphQLSchema, DocumentNode], List[GraphQLError]]

#: A rule is either a graphql-core ``ASTValidationRule`` subclass, run as part
#: of a single graphql-core validation pass, or a document validator.
Rule = Union[Type[ASTValidationRule], Validator]

#: All known rules, in execution order. Custom rules such as
#: :class:`QueryComplexity` are registered with a limit of 0 which disables
#: them; use :func:`add_rule` to configure them.
SPECIFIED_RULES = [
    *specified_rules,
    QueryDepth(0),
    QueryComplexity(0),
]  # type: List[Rule]


def rule_name(rule: Rule) -> str:
    """ Name used to look up rules in the registry.

    This is the class name for rule classes and the ``name`` attribute (or
    function name) for document validators.
    """
    if isinstance(rule, type):
        return rule.__name__
    return (
        getattr(rule, "name", None)
        or getattr(rule, "__name__", None)
        or type(rule).__name__
    )


def all_rules() -> List[Rule]:
    """ Copy of the registered rules. """
    return list(SPECIFIED_RULES)


def get_rule(name: str) -> Optional[Rule]:
    """ Find a registered rule by name. """
    for rule in SPECIFIED_RULES:
        if rule_name(rule) == name:
            return rule
    return None


def add_rule(rule: Rule) -> None:
    """ Register a rule, replacing any registered rule with the same name.

    For example, to limit the complexity of all queries processed without
    explicit rules:

    >>> add_rule(QueryComplexity(100))  # doctest: +SKIP
    """
    if not _is_rule(rule):
        raise TypeError("Invalid validation rule %r" % (rule,))

    name = rule_name(rule)
    for index, registered in enumerate(SPECIFIED_RULES):
        if rule_name(registered) == name:
            SPECIFIED_RULES[index] = rule
            return
    SPECIFIED_RULES.append(rule)


def bind_variable_values(
    rules: Sequence[Rule],
    variable_values: Optional[Mapping[str, Any]],
    operation_name: Optional[str] = None,
) -> List[Rule]:
    """ Give the raw variable values and the name of the operation to run to
    all rules depending on them (such as :class:`QueryComplexity` and
    :class:`QueryDepth`).

    These rules are replaced by bound copies in the returned list so that
    shared rule instances (such as the registered ones) are never mutated.
    """
    return [
        rule.with_raw_variable_values(variable_values, operation_name)
        if isinstance(rule, OperationRule)
        else rule
        for rule in rules
    ]


def validate_document(
    schema: GraphQLSchema,
    document: DocumentNode,
    rules: Optional[Sequence[Rule]] = None,
) -> List[GraphQLError]:
    """ Validate a document against a schema.

    Rule classes are run together in a single traversal of the document,
    document validators are then called in order. The resulting errors are
    ordered by rule execution order.

    Args:
        schema: Schema to validate against.
        document: Parsed document.
        rules: Rules to run. If ``None`` all registered rules are used; an
            empty sequence disables validation.

    Returns:
        Validation errors.
    """
    if rules is None:
        rules = all_rules()

    if not rules:
        return []

    ast_rules = []  # type: List[Type[ASTValidationRule]]
    validators = []  # type: List[Validator]

    for rule in rules:
        if isinstance(rule, type) and issubclass(rule, ASTValidationRule):
            ast_rules.append(rule)
        elif _is_rule(rule):
            validators.append(rule)  # type: ignore
        else:
            raise TypeError("Invalid validation rule %r" % (rule,))

    errors = (
        list(validate(schema, document, ast_rules)) if ast_rules else []
    )  # type: List[GraphQLError]

    for validator in validators:
        errors.extend(validator(schema, document))

    if errors:
        logger.debug("Document validation produced %d error(s)", len(errors))

    return errors


def _is_rule(value: Any) -> bool:
    if isinstance(value, type):
        return issubclass(value, ASTValidationRule)
    return callable(value)
