# -*- coding: utf-8 -*-
"""
Validation of GraphQL (query) documents.

Validation itself is delegated to graphql-core, this package adds a registry
of known rules, rules limiting the cost of queries and the plumbing required
to give complexity rules access to the query variables.
"""

# flake8: noqa

from ._utils import OperationRule
from .query_complexity import ComplexityFn, QueryComplexity, query_complexity
from .query_depth import QueryDepth, selection_depth
from .validate import (
    SPECIFIED_RULES,
    Rule,
    Validator,
    add_rule,
    all_rules,
    bind_variable_values,
    get_rule,
    rule_name,
    validate_document,
)

__all__ = (
    "validate_document",
    "bind_variable_values",
    "add_rule",
    "all_rules",
    "get_rule",
    "rule_name",
    "Rule",
    "OperationRule",
    "Validator",
    "SPECIFIED_RULES",
    "QueryComplexity",
    "QueryDepth",
    "ComplexityFn",
    "query_complexity",
    "selection_depth",
)
