# -*- coding: utf-8 -*-
""" Some generic laguage level utilities for internal use. """

import functools
import warnings
from inspect import isawaitable
from typing import Any, Callable, Dict, Type, TypeVar, cast

FuncType = Callable[..., Any]
Fn = TypeVar("Fn", bound=FuncType)


def deprecated(reason: str) -> Callable[[Fn], Fn]:
    """ Mark a function as deprecated.

    Calling the decorated function always emits a :class:`DeprecationWarning`
    pointing at the caller.

    >>> import warnings
    >>> @deprecated("Use bar() instead")
    ... def foo():
    ...     return 42
    >>> with warnings.catch_warnings(record=True) as w:
    ...     foo()
    42
    """

    def decorator(fn: Fn) -> Fn:
        @functools.wraps(fn)
        def deprecated_fn(*args, **kwargs):
            with warnings.catch_warnings():
                warnings.simplefilter("always", DeprecationWarning)
                warnings.warn(reason, category=DeprecationWarning, stacklevel=2)
            return fn(*args, **kwargs)

        return cast(Fn, deprecated_fn)

    return decorator


def is_awaitable_fast(
    value: Any,
    cache: Dict[Type[Any], bool] = {},
    __isawaitable: Callable[[Any], bool] = isawaitable,
) -> bool:
    """ Cached version of :func:`inspect.isawaitable`.

    This is faster than the default isawaitable which is benefitial for the
    hot loops required when resolving large objects.

    >>> async def f(): pass
    >>> is_awaitable_fast(42)
    False
    >>> coro = f()
    >>> is_awaitable_fast(coro)
    True
    >>> coro.close()
    """
    t = type(value)
    try:
        return cache[t]
    except KeyError:
        res = cache[t] = __isawaitable(value)
        return res
