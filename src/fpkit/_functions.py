from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

import cytoolz as cz


@overload
def pipe[A](value: A, /) -> A: ...
@overload
def pipe[A, B](value: A, fn1: Callable[[A], B], /) -> B: ...
@overload
def pipe[A, B, C](value: A, fn1: Callable[[A], B], fn2: Callable[[B], C], /) -> C: ...
@overload
def pipe[A, B, C, D](
    value: A, fn1: Callable[[A], B], fn2: Callable[[B], C], fn3: Callable[[C], D], /
) -> D: ...
@overload
def pipe[A, B, C, D, E](
    value: A,
    fn1: Callable[[A], B],
    fn2: Callable[[B], C],
    fn3: Callable[[C], D],
    fn4: Callable[[D], E],
    /,
) -> E: ...
@overload
def pipe[A, B, C, D, E, F](
    value: A,
    fn1: Callable[[A], B],
    fn2: Callable[[B], C],
    fn3: Callable[[C], D],
    fn4: Callable[[D], E],
    fn5: Callable[[E], F],
    /,
) -> F: ...
@overload
def pipe(value: Any, /, *fns: Callable[[Any], Any]) -> Any: ...  # noqa: ANN401
def pipe(value: Any, /, *fns: Callable[[Any], Any]) -> Any:
    """Thread `value` through `fns`, from left to right.

    `pipe(x, f, g, h)` is `h(g(f(x)))`. Without any function, `value` is returned as is.

    Args:
        value (Any): The initial value.
        *fns (Callable[[Any], Any]): Unary functions, each accepting the output of the previous one.

    Returns:
        Any: The output of the last function.

    Example:
    ```python
    >>> import fpkit as fp
    >>> fp.pipe(5, lambda x: x + 1, lambda x: x * 2)
    12
    >>> fp.pipe("hello")
    'hello'

    ```
    """
    return cz.functoolz.pipe(value, *fns)


@overload
def compose[**P, B](fn1: Callable[P, B], /) -> Callable[P, B]: ...
@overload
def compose[**P, B, C](fn1: Callable[P, B], fn2: Callable[[B], C], /) -> Callable[P, C]: ...
@overload
def compose[**P, B, C, D](
    fn1: Callable[P, B], fn2: Callable[[B], C], fn3: Callable[[C], D], /
) -> Callable[P, D]: ...
@overload
def compose[**P, B, C, D, E](
    fn1: Callable[P, B],
    fn2: Callable[[B], C],
    fn3: Callable[[C], D],
    fn4: Callable[[D], E],
    /,
) -> Callable[P, E]: ...
@overload
def compose(*fns: Callable[..., Any]) -> Callable[..., Any]: ...
def compose(*fns: Callable[..., Any]) -> Callable[..., Any]:
    """Compose `fns` into one function, applied from left to right.

    `compose(f, g)(*args)` is `g(f(*args))`: only the first function may take several arguments.

    Unlike `pipe`, the initial value is deferred, so the result can be reused.

    Args:
        *fns (Callable[..., Any]): Functions to chain. Without any, the identity function is returned.

    Returns:
        Callable[..., Any]: The composed function.

    Example:
    ```python
    >>> import fpkit as fp
    >>> fn = fp.compose(lambda n: n + 1, lambda n: n + 2, lambda n: n * 10)
    >>> fn(1)
    40
    >>> fp.compose(str.upper, lambda s: f"{s}!")("hello")
    'HELLO!'
    >>> fp.compose(max, str)(3, 1, 2)
    '3'

    ```
    """
    return cz.functoolz.compose_left(*fns)
