# -*- coding: utf-8 -*-

from typing import Any, Callable, Optional, TypeVar

from ..exc import InvariantViolation
from .._utils import is_awaitable_fast
from .base import AnyFn, ErrorHandler, Runtime

T = TypeVar("T")


class BlockingRuntime(Runtime):
    """Default runtime implementation which blocks the current thread.

    Resolvers returning awaitables are not supported: the executor would hand
    back an awaitable result which this runtime refuses with an
    :class:`~gql_pipeline.exc.InvariantViolation`.
    """

    def submit(self, fn: AnyFn, *args: Any, **kwargs: Any) -> Any:
        return fn(*args, **kwargs)

    def is_deferred(self, value: Any) -> bool:
        return False

    def ensure_wrapped(self, value: Any) -> Any:
        return value

    def map_value(
        self,
        value: Any,
        then: Callable[[Any], T],
        else_: Optional[ErrorHandler] = None,
    ) -> Any:
        if is_awaitable_fast(value):
            _discard(value)
            err = InvariantViolation(
                "Execution failed to complete synchronously, use an "
                "asynchronous runtime when resolvers return awaitables."
            )
            if else_ and isinstance(err, else_[0]):
                return else_[1](err)
            raise err
        return then(value)


def _discard(value: Any) -> None:
    # Avoid "coroutine was never awaited" warnings.
    close = getattr(value, "close", None)
    if callable(close):
        close()
