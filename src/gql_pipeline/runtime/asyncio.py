# -*- coding: utf-8 -*-

import asyncio
import functools as ft
from inspect import iscoroutinefunction
from typing import Any, Awaitable, Callable, Optional, TypeVar, Union, cast

from .._utils import is_awaitable_fast
from .base import ErrorHandler, Runtime

T = TypeVar("T")
G = TypeVar("G")
AnyFnGen = Callable[..., T]
MaybeAwaitable = Union[Awaitable[T], T]


class AsyncIORuntime(Runtime):
    """
    Runtime implementation to work with Python's asyncio module.

    The final result of query processing is always an awaitable, even when
    it is known before any resolver runs (e.g. on validation errors).

    Args:
        execute_blocking_functions_in_thread: If set, non coroutine resolvers
            are run in the running loop's default executor instead of
            blocking the event loop.
    """

    def __init__(self, execute_blocking_functions_in_thread: bool = False):
        self._execute_blocking_functions_in_thread = (
            execute_blocking_functions_in_thread
        )

    def submit(
        self, fn: AnyFnGen[T], *args: Any, **kwargs: Any
    ) -> MaybeAwaitable[T]:
        if (
            self._execute_blocking_functions_in_thread
            and not iscoroutinefunction(fn)
        ):
            return asyncio.get_running_loop().run_in_executor(
                None, ft.partial(fn, *args, **kwargs)
            )

        return fn(*args, **kwargs)

    def is_deferred(self, value: Any) -> bool:
        return is_awaitable_fast(value)

    def ensure_wrapped(self, value: MaybeAwaitable[T]) -> Awaitable[T]:
        if is_awaitable_fast(value):
            return cast(Awaitable[T], value)

        async def _make_awaitable() -> T:
            return cast(T, value)

        return _make_awaitable()

    def map_value(
        self,
        value: MaybeAwaitable[T],
        then: Callable[[T], G],
        else_: Optional[ErrorHandler] = None,
    ) -> MaybeAwaitable[G]:
        if is_awaitable_fast(value):

            async def _await_value() -> G:
                try:
                    resolved = await cast(Awaitable[T], value)
                except Exception as err:
                    if else_ and isinstance(err, else_[0]):
                        return else_[1](err)
                    raise
                return then(resolved)

            return _await_value()

        return then(cast(T, value))
