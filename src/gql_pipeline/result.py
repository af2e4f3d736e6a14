# -*- coding: utf-8 -*-

import json
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from graphql import ExecutionResult, GraphQLError


class GraphQLResult:
    """
    Wrapper encoding the behaviour described in the `Response
    <http://facebook.github.io/graphql/June2018/#sec-Response>`_ part of the
    specification.

    Whatever happens during query processing (syntax error, validation
    errors, field errors), the outcome is always represented by an instance
    of this class.

    Args:
        data (Optional[Any]): The data part of the response. This is always
            ``None`` when the query could not be executed.

        errors (Optional[Sequence[GraphQLError]]): The errors part of the
            response.

        extensions (Optional[Dict[str, Any]]): The extensions part of the
            response.
    """

    __slots__ = ("data", "errors", "extensions")

    def __init__(
        self,
        data: Optional[Any] = None,
        errors: Optional[Sequence[GraphQLError]] = None,
        extensions: Optional[Dict[str, Any]] = None,
    ):
        self.data = data  # type: Any
        self.errors = (
            list(errors) if errors is not None else []
        )  # type: List[GraphQLError]
        self.extensions = extensions  # type: Optional[Dict[str, Any]]

    @classmethod
    def from_execution_result(cls, result: ExecutionResult) -> "GraphQLResult":
        """ Convert an execution result as returned by :func:`graphql.execute`.

        Raises:
            TypeError: if ``result`` is not an ``ExecutionResult``
        """
        if not isinstance(result, ExecutionResult):
            raise TypeError(
                "Expected ExecutionResult but got %s" % type(result).__name__
            )
        return cls(result.data, result.errors, result.extensions)

    def __bool__(self) -> bool:
        return not self.errors

    def __iter__(self) -> Iterator[Any]:
        return iter((self.data, self.errors))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, GraphQLResult):
            return NotImplemented
        return self._key() == other._key()

    def __repr__(self) -> str:
        return "<%s data=%r errors=%r%s>" % (
            self.__class__.__name__,
            self.data,
            self.errors,
            (" extensions=%r" % self.extensions) if self.extensions else "",
        )

    def _key(self) -> Tuple[Any, List[Any], Any]:
        return (
            self.data,
            [error.formatted for error in self.errors],
            self.extensions,
        )

    def to_dict(self) -> Dict[str, Any]:
        """ Generate an ordered response dict.

        The ``data`` entry is always present, ``errors`` and ``extensions``
        only when relevant.
        """
        d = {}  # type: Dict[str, Any]
        if self.errors:
            d["errors"] = [error.formatted for error in self.errors]
        d["data"] = self.data
        if self.extensions:
            d["extensions"] = dict(self.extensions)
        return d

    def json(self, **kw: Any) -> str:
        """ Encode response as JSON using the standard lib ``json`` module.

        Args:
            **kw: Keyword args passed to to ``json.dumps``
        """
        return json.dumps(self.to_dict(), **kw)
