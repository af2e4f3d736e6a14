# -*- coding: utf-8 -*-
"""This module implements all the exceptions exposed by this library.

User facing errors (syntax errors, validation errors and field errors) are all
instances of :class:`graphql.GraphQLError` and end up in the ``errors`` part
of a :class:`~gql_pipeline.GraphQLResult`. Everything deriving from
:class:`PipelineError` signals a programming error and is never converted into
a result.
"""

from typing import Any, Optional, Sequence

from graphql import GraphQLError, GraphQLSyntaxError
from graphql.language import Node

__all__ = (
    "GraphQLError",
    "GraphQLSyntaxError",
    "PipelineError",
    "InvariantViolation",
    "ComplexityError",
    "DepthError",
)


class PipelineError(Exception):
    """
    Base exception for errors which are not meant to be exposed to end users.
    """

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvariantViolation(PipelineError):
    """
    Raised when a collaborator breaks its contract, e.g. the executor returned
    something that is neither an execution result nor an awaitable of one.

    This is never caught by the query pipeline.
    """


class ComplexityError(GraphQLError):
    """
    Validation error reported when an operation's estimated cost exceeds the
    configured maximum.

    Args:
        max_complexity: Configured maximum
        complexity: Computed complexity
        nodes: Nodes relevant to the exception

    Attributes:
        max_complexity (int): Configured maximum
        complexity (int): Computed complexity
    """

    def __init__(
        self,
        max_complexity: int,
        complexity: int,
        nodes: Optional[Sequence[Node]] = None,
        **kwargs: Any
    ):
        super().__init__(
            "Max query complexity should be %d but got %d."
            % (max_complexity, complexity),
            nodes,
            **kwargs
        )
        self.max_complexity = max_complexity
        self.complexity = complexity


class DepthError(GraphQLError):
    """
    Validation error reported when an operation is nested deeper than the
    configured maximum.
    """

    def __init__(
        self,
        operation_name: Optional[str],
        depth: int,
        max_depth: int,
        nodes: Optional[Sequence[Node]] = None,
        **kwargs: Any
    ):
        super().__init__(
            'Operation "%s" depth (%d) exceeds maximum depth (%d)'
            % (operation_name or "<ANONYMOUS>", depth, max_depth),
            nodes,
            **kwargs
        )
        self.depth = depth
        self.max_depth = max_depth
