# -*- coding: utf-8 -*-
"""
Process-wide defaults consulted when a call to
:func:`~gql_pipeline.execute_query` does not specify a field resolver or a
runtime.

Warning:
    The process-wide defaults are plain global state and access to them is
    not synchronised. Mutating them while queries are being processed (e.g.
    from another thread or between two ``await`` points of a running query)
    is undefined behaviour. Prefer passing ``field_resolver`` and ``runtime``
    (or a :class:`Defaults` instance) explicitly on every call, and only use
    the setters once at application startup.
"""

import logging
from typing import Any, Callable, Optional

from .default_resolver import default_resolver
from .runtime import Runtime

logger = logging.getLogger(__name__)

Resolver = Callable[..., Any]


class Defaults:
    """
    Configuration value holding the fallbacks used during query processing.

    Args:
        field_resolver: Resolver used for fields which do not define one.
            Defaults to :func:`~gql_pipeline.default_resolver.default_resolver`.

        runtime: Runtime used when the caller does not specify one.
            ``None`` means blocking execution.
    """

    __slots__ = ("field_resolver", "runtime")

    def __init__(
        self,
        field_resolver: Optional[Resolver] = None,
        runtime: Optional[Runtime] = None,
    ):
        if field_resolver is not None and not callable(field_resolver):
            raise TypeError("Field resolver must be callable")

        if runtime is not None and not isinstance(runtime, Runtime):
            raise TypeError(
                "Expected Runtime or None but got %s" % type(runtime).__name__
            )

        self.field_resolver = (
            field_resolver if field_resolver is not None else default_resolver
        )  # type: Resolver
        self.runtime = runtime  # type: Optional[Runtime]

    def __repr__(self) -> str:
        return "<Defaults field_resolver=%r runtime=%r>" % (
            self.field_resolver,
            self.runtime,
        )


_DEFAULTS = Defaults()


def get_defaults() -> Defaults:
    """ Process-wide :class:`Defaults` instance. """
    return _DEFAULTS


def set_default_field_resolver(fn: Resolver) -> None:
    """ Replace the default field resolver for all subsequent queries.

    Raises:
        TypeError: if ``fn`` is not callable
    """
    if not callable(fn):
        raise TypeError("Field resolver must be callable")
    logger.debug("Setting default field resolver to %r", fn)
    _DEFAULTS.field_resolver = fn


def set_default_runtime(runtime: Optional[Runtime]) -> None:
    """ Replace the default runtime for all subsequent queries.

    Passing ``None`` reverts to blocking execution.

    Raises:
        TypeError: if ``runtime`` is neither ``None`` nor a ``Runtime``
    """
    if runtime is not None and not isinstance(runtime, Runtime):
        raise TypeError(
            "Expected Runtime or None but got %s" % type(runtime).__name__
        )
    logger.debug("Setting default runtime to %r", runtime)
    _DEFAULTS.runtime = runtime


def reset_defaults() -> None:
    """ Restore the process-wide defaults to their initial values. """
    _DEFAULTS.field_resolver = default_resolver
    _DEFAULTS.runtime = None
