from __future__ import annotations

import functools
import inspect
import itertools
from collections.abc import Callable
from typing import Any

_ASSIGNED = ("__module__", "__name__", "__qualname__", "__doc__")


def dual(
    arity: int, *, expects: type | None = None
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Make a data-first function callable in its curried form as well.

    The decorated function must take its container as first positional argument, followed by `arity - 1` configuration arguments.

    Dispatch only looks at the number of positional arguments:

    - `arity` arguments: the function is evaluated immediately.
    - `arity - 1` arguments: a unary function awaiting the container is returned.

    Extra keyword-only arguments are forwarded as is in both forms.
    The container and the configuration arguments must be passed positionally: naming one of them by keyword raises `TypeError`.

    Args:
        arity (int): Number of positional arguments of the data-first form, container included.
        expects (type | None): If given, the container must be an instance of this type.

    Returns:
        Callable[[Callable[..., Any]], Callable[..., Any]]: The decorator.

    Example:
    ```python
    >>> from fpkit._core import dual
    >>> @dual(2)
    ... def add(x: int, y: int) -> int:
    ...     return x + y
    >>> add(1, 2)
    3
    >>> add(2)(1)
    3
    >>> add(2).__name__
    'add'
    >>> add()
    Traceback (most recent call last):
        ...
    TypeError: add() takes 1 or 2 positional arguments (curried or data-first), got 0
    >>> add(1, y=2)
    Traceback (most recent call last):
        ...
    TypeError: add() takes its argument(s) 'y' positionally, not by keyword

    ```
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        positional = frozenset(
            itertools.islice(inspect.signature(func).parameters, arity)
        )

        def _check(data: object) -> None:
            if expects is not None and not isinstance(data, expects):
                msg = f"{func.__name__}() expected {expects.__name__}, got {type(data).__name__}"
                raise TypeError(msg)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:  # noqa: ANN401
            named = positional.intersection(kwargs)
            if named:
                msg = (
                    f"{func.__name__}() takes its argument(s) "
                    f"{', '.join(repr(name) for name in sorted(named))} positionally, not by keyword"
                )
                raise TypeError(msg)
            match len(args):
                case n if n == arity:
                    _check(args[0])
                    return func(*args, **kwargs)
                case n if n == arity - 1:

                    def curried(data: Any) -> Any:  # noqa: ANN401
                        _check(data)
                        return func(data, *args, **kwargs)

                    return functools.update_wrapper(
                        curried, func, assigned=_ASSIGNED, updated=()
                    )
                case n:
                    msg = (
                        f"{func.__name__}() takes {arity - 1} or {arity} positional arguments "
                        f"(curried or data-first), got {n}"
                    )
                    raise TypeError(msg)

        return wrapper

    return decorator
