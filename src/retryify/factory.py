r"""Factory of retrying wrappers.

``retryify(defaults)`` builds a ``Retryify`` wrap operation bound to
the given defaults. Calling it with a callable, and optionally a
per-call configuration, returns a ``RetryifiedCallable`` that retries
the callable on failure.

Example:
    ```pycon
    >>> import asyncio
    >>> from retryify import retryify
    >>> wrap = retryify(retries=2, timeout=5, factor=1.5)
    >>> add = wrap(lambda a, b, c: a + b + c, {"retries": 0})
    >>> asyncio.run(add(1, 2, 3))
    6

    ```
"""

from __future__ import annotations

__all__ = ["Retryify", "RetryifiedCallable", "resolve_call_shape", "retryify"]

import copy
import functools
from typing import TYPE_CHECKING, Any

from retryify.config import RetryConfig, resolve_config
from retryify.retry import AsyncRetryExecutor, RetryExecutor
from retryify.retry.executor_core import UNBOUND

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping


def resolve_call_shape(first: Any = None, second: Any = None) -> tuple[Any, Callable | None]:
    """Normalize the arguments of a wrap call into ``(config, fn)``.

    The accepted shapes are ``(fn)``, ``(fn, config)``, ``(config, fn)``
    and ``(config)``. The shape is decided by whether ``first`` is
    callable. ``staticmethod`` and ``classmethod`` objects count as
    callables.

    Args:
        first: The callable or the configuration.
        second: The configuration, the callable, or ``None``.

    Returns:
        The configuration (possibly ``None``) and the callable (``None``
        when the call only carries a configuration).

    Raises:
        TypeError: If both arguments are callables, or neither is and
            ``second`` is given.

    Example:
        ```pycon
        >>> from retryify.factory import resolve_call_shape
        >>> resolve_call_shape(len)
        (None, <built-in function len>)
        >>> resolve_call_shape(len, {"retries": 1})
        ({'retries': 1}, <built-in function len>)
        >>> resolve_call_shape({"retries": 1}, len)
        ({'retries': 1}, <built-in function len>)
        >>> resolve_call_shape({"retries": 1})
        ({'retries': 1}, None)

        ```
    """
    if _is_target(first):
        if _is_target(second):
            msg = "expected one callable and one configuration, got two callables"
            raise TypeError(msg)
        return second, first
    if second is None or _is_target(second):
        return first, second
    msg = (
        "expected a callable as first or second argument, "
        f"got {type(first).__qualname__} and {type(second).__qualname__}"
    )
    raise TypeError(msg)


def _is_target(obj: Any) -> bool:
    return callable(obj) or isinstance(obj, (staticmethod, classmethod))


class RetryifiedCallable:
    """A callable that retries the wrapped callable on failure.

    The asynchronous variant returns a coroutine resolving to the value
    of the first successful attempt; the blocking variant returns the
    value directly. Either way the terminal error is the one raised by
    the wrapped callable.

    Used as a class attribute it behaves like a method: accessing it
    through an instance binds the instance as receiver, which is passed
    as first positional argument on every attempt. A wrapped
    ``staticmethod`` never binds a receiver and a wrapped
    ``classmethod`` binds the class.

    Args:
        fn: The callable to retry, or a ``staticmethod`` or
            ``classmethod`` object.
        config: The resolved retry configuration.
        blocking: Whether to use the blocking executor.

    Attributes:
        config: The resolved retry configuration.
        receiver: The bound receiver, or ``UNBOUND``.
        binding: How attribute access binds a receiver: ``"instance"``,
            ``"class"`` or ``"static"``.

    Example:
        ```pycon
        >>> from retryify import retryify
        >>> class Foo:
        ...     def __init__(self):
        ...         self.foo = "this is a foo"
        ...
        ...     @retryify().sync
        ...     def fooer(self, a, b, c):
        ...         return " ".join([self.foo, str(a), str(b), str(c)])
        ...
        >>> Foo().fooer(1, 2, 3)
        'this is a foo 1 2 3'

        ```
    """

    def __init__(self, fn: Callable[..., Any], config: RetryConfig, blocking: bool = False) -> None:
        self.binding = "instance"
        if isinstance(fn, staticmethod):
            self.binding = "static"
            fn = fn.__func__
        elif isinstance(fn, classmethod):
            self.binding = "class"
            fn = fn.__func__
        functools.update_wrapper(self, fn)
        self.config = config
        self.blocking = blocking
        self.receiver: Any = UNBOUND
        self._executor: RetryExecutor | AsyncRetryExecutor = (
            RetryExecutor(config) if blocking else AsyncRetryExecutor(config)
        )

    def __repr__(self) -> str:
        kind = "sync" if self.blocking else "async"
        name = getattr(self.__wrapped__, "__qualname__", repr(self.__wrapped__))
        return f"<{self.__class__.__qualname__} {kind} {name} {self.config}>"

    def __get__(self, instance: Any, owner: type | None = None) -> RetryifiedCallable:
        if self.binding == "static":
            return self
        if self.binding == "class":
            return self.bind(owner if owner is not None else type(instance))
        if instance is None:
            return self
        return self.bind(instance)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self._executor.execute(self.__wrapped__, args, kwargs, self.receiver)

    def bind(self, receiver: Any) -> RetryifiedCallable:
        """Return a copy bound to ``receiver``.

        The copy shares the configuration and the executor, which hold
        no per-call state.

        Args:
            receiver: The receiver passed as first positional argument
                on every attempt.

        Returns:
            The bound callable.
        """
        bound = copy.copy(self)
        bound.receiver = receiver
        return bound

    def call_with(self, receiver: Any, *args: Any, **kwargs: Any) -> Any:
        """Call with an explicit receiver.

        Args:
            receiver: The receiver passed as first positional argument
                on every attempt.
            *args: The positional arguments.
            **kwargs: The keyword arguments.

        Returns:
            Same as calling the wrapped callable.
        """
        return self._executor.execute(self.__wrapped__, args, kwargs, receiver)


class Retryify:
    """Wrap operation bound to factory-level defaults.

    Instances are created by ``retryify``. The defaults are an
    immutable ``RetryConfig``; every wrap resolves its own
    configuration on top of them.

    Args:
        defaults: The factory-level configuration.

    Example:
        ```pycon
        >>> import asyncio
        >>> from retryify import retryify
        >>> wrap = retryify(retries=2, timeout=0)
        >>> calls = []
        >>> @wrap({"errors": [ConnectionError]})
        ... async def fetch(key):
        ...     calls.append(key)
        ...     raise KeyError(key)
        ...
        >>> asyncio.run(fetch("a"))
        Traceback (most recent call last):
        ...
        KeyError: 'a'
        >>> calls
        ['a']

        ```
    """

    def __init__(self, defaults: RetryConfig | None = None) -> None:
        self.defaults = defaults if defaults is not None else RetryConfig()

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(defaults={self.defaults})"

    def __call__(self, first: Any = None, second: Any = None, /, **options: Any) -> Any:
        """Wrap a callable so its calls are retried on asyncio.

        Accepts ``wrap(fn)``, ``wrap(fn, config)``, ``wrap(config, fn)``;
        ``wrap(config)`` and ``wrap(**options)`` return a decorator.
        ``config`` is a mapping of options or a ``RetryConfig``; keyword
        options are applied on top of it.

        Args:
            first: The callable or the configuration.
            second: The configuration or the callable.
            **options: Extra options, see ``RetryConfig``.

        Returns:
            A ``RetryifiedCallable`` returning coroutines, or a decorator
            producing one.

        Raises:
            ConfigError: If the resolved configuration is invalid.
            TypeError: If the call shape cannot be resolved.
        """
        return self._wrap(first, second, options, blocking=False)

    def sync(self, first: Any = None, second: Any = None, /, **options: Any) -> Any:
        """Wrap a synchronous callable with blocking retries.

        Accepts the same call shapes as calling the instance. The
        wrapped callable sleeps in the calling thread between attempts
        and returns the value directly.

        Args:
            first: The callable or the configuration.
            second: The configuration or the callable.
            **options: Extra options, see ``RetryConfig``.

        Returns:
            A blocking ``RetryifiedCallable``, or a decorator producing
            one.

        Raises:
            ConfigError: If the resolved configuration is invalid.
            TypeError: If the call shape cannot be resolved.
        """
        return self._wrap(first, second, options, blocking=True)

    def _wrap(
        self, first: Any, second: Any, options: Mapping[str, Any], blocking: bool
    ) -> RetryifiedCallable | Callable[[Callable[..., Any]], RetryifiedCallable]:
        config, fn = resolve_call_shape(first, second)
        resolved = resolve_config(self.defaults, config, **options)
        if fn is None:
            return functools.partial(RetryifiedCallable, config=resolved, blocking=blocking)
        return RetryifiedCallable(fn, resolved, blocking=blocking)


def retryify(defaults: Mapping[str, Any] | RetryConfig | None = None, **options: Any) -> Retryify:
    """Create a wrap operation bound to default retry options.

    ``retryify()`` and ``retryify({})`` are equivalent and use the
    built-in defaults (``retries=3``, ``timeout=300`` ms, ``factor=2``).

    Args:
        defaults: Optional mapping of options or ``RetryConfig``.
        **options: Options applied on top of ``defaults``: ``retries``,
            ``timeout`` (milliseconds), ``factor``, ``errors``, ``log``.

    Returns:
        The wrap operation.

    Raises:
        ConfigError: If the defaults are invalid.

    Example:
        ```pycon
        >>> from retryify import retryify
        >>> wrap = retryify({"retries": 2, "timeout": 5, "factor": 1.5})
        >>> wrap.defaults.retries
        2
        >>> retryify().defaults == retryify({}).defaults
        True

        ```
    """
    return Retryify(resolve_config(RetryConfig(), defaults, **options))
