# -*- coding: utf-8 -*-

import abc
from typing import Any, Callable, Optional, Tuple, Type

AnyFn = Callable[..., Any]
ErrorHandler = Tuple[Type[Exception], Callable[[Exception], Any]]


class Runtime(abc.ABC):
    """Runtime base class.

    A runtime is the async adapter used during query processing: it decides
    how resolvers are called and which container type wraps the final result
    (e.g. nothing for blocking execution, an awaitable for asyncio).

    Runtimes are also graphql-core middlewares: every field resolution goes
    through :meth:`resolve` and from there through :meth:`submit`.
    """

    @abc.abstractmethod
    def submit(self, fn: AnyFn, *args: Any, **kwargs: Any) -> Any:
        """Execute a function through the runtime."""
        raise NotImplementedError()

    @abc.abstractmethod
    def is_deferred(self, value: Any) -> bool:
        """Whether ``value`` is wrapped in this runtime's container type."""
        raise NotImplementedError()

    @abc.abstractmethod
    def ensure_wrapped(self, value: Any) -> Any:
        """Ensure values are wrapped in the necessary container type.

        This is essentially used after processing has finished to make sure
        the final value conforms to the expected types (e.g. coroutines) and
        avoid consumers having to typecheck them needlessly.
        """
        raise NotImplementedError()

    @abc.abstractmethod
    def map_value(
        self,
        value: Any,
        then: Callable[[Any], Any],
        else_: Optional[ErrorHandler] = None,
    ) -> Any:
        """Execute a callback on a potentially wrapped value.

        This should be treated similarly to `await` semantics or `map` in
        Future combinators.

        The ``else_`` argument can be used to handle exceptions raised while
        resolving ``value`` (limited to a single exception type). Exceptions
        raised by ``then`` are not handled.
        """
        raise NotImplementedError()

    def resolve(self, next_: AnyFn, root: Any, info: Any, **args: Any) -> Any:
        """graphql-core middleware hook."""
        return self.submit(next_, root, info, **args)
