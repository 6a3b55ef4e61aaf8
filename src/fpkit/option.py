"""Data-first or curried functions over `Option`.

Every function taking configuration arguments can be called in two shapes:

- data-first, with the option as first argument, evaluated immediately;
- curried, without the option, returning a function awaiting it.

The curried shape is meant for `fpkit.pipe`:
```python
>>> import fpkit as fp
>>> from fpkit import option as O
>>> O.map(O.some(3), lambda n: n + 1)
Some(value=4)
>>> fp.pipe(O.from_nullable("hello"), O.map(str.upper), O.unwrap_or("?"))
'HELLO'

```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from typing import TYPE_CHECKING, Any, overload

from . import guards
from ._core import deprecated, dual
from ._results import NONE, Option, Some

if TYPE_CHECKING:
    from ._results import Result

none: Option[Any] = NONE
"""Alias of `NONE`."""


def is_option(value: object) -> bool:
    """Check if a value is an `Option`, or a mapping with the structural shape of one.

    Accepted shapes are `{"type": "some", "value": v}` and `{"type": "none"}`.

    Example:
    ```python
    >>> from fpkit import option as O
    >>> O.is_option(O.some(1)), O.is_option(O.none)
    (True, True)
    >>> O.is_option({"type": "some", "value": 1})
    True
    >>> O.is_option(1), O.is_option("1"), O.is_option(None), O.is_option({"type": "ok"})
    (False, False, False, False)

    ```
    """
    if isinstance(value, Option):
        return True
    if not guards.is_mapping(value):
        return False
    match value.get("type"):
        case "some":
            return "value" in value
        case "none":
            return True
        case _:
            return False


def is_some[T](opt: Option[T]) -> bool:
    """Check if the option is `Some`.

    Example:
    ```python
    >>> from fpkit import option as O
    >>> O.is_some(O.some(1)), O.is_some(O.none)
    (True, False)

    ```
    """
    return opt.is_some()


def is_none[T](opt: Option[T]) -> bool:
    """Check if the option is `NONE`.

    Example:
    ```python
    >>> from fpkit import option as O
    >>> O.is_none(O.some(1)), O.is_none(O.none)
    (False, True)

    ```
    """
    return opt.is_none()


def some[T](value: T) -> Option[T]:
    """Wrap any value in `Some`, including `None`.

    Example:
    ```python
    >>> from fpkit import option as O
    >>> O.some(1), O.some(None)
    (Some(value=1), Some(value=None))

    ```
    """
    return Some(value)


def from_nullable[T](value: T | None) -> Option[T]:
    """Wrap a value in `Some`, unless it is `None`.

    Only `None` produces `NONE`: falsy values such as `0`, `""` or `False` are kept.

    Example:
    ```python
    >>> from fpkit import option as O
    >>> O.from_nullable(1), O.from_nullable(None)
    (Some(value=1), NONE)
    >>> O.from_nullable(0), O.from_nullable(""), O.from_nullable(False)
    (Some(value=0), Some(value=''), Some(value=False))

    ```
    """
    return NONE if value is None else Some(value)


def from_falsy[T](value: T) -> Option[T]:
    """Wrap a value in `Some` if it is truthy, otherwise return `NONE`.

    NaN is considered falsy.

    Example:
    ```python
    >>> from fpkit import option as O
    >>> O.from_falsy(1), O.from_falsy("a")
    (Some(value=1), Some(value='a'))
    >>> O.from_falsy(0), O.from_falsy(""), O.from_falsy(False), O.from_falsy(float("nan"))
    (NONE, NONE, NONE, NONE)

    ```
    """
    return NONE if guards.is_falsy(value) else Some(value)


def from_exception[T](fn: Callable[[], T]) -> Option[T]:
    """Call `fn`, returning `Some` of its result, or `NONE` if it raised an `Exception`.

    The raised exception is discarded.

    Use `fpkit.result.from_exception` to keep it.

    Example:
    ```python
    >>> from fpkit import option as O
    >>> O.from_exception(lambda: int("12"))
    Some(value=12)
    >>> O.from_exception(lambda: int("twelve"))
    NONE

    ```
    """
    try:
        return Some(fn())
    except Exception:  # noqa: BLE001
        return NONE


@deprecated("use `from_exception` instead")
def from_function[T](fn: Callable[[], T]) -> Option[T]:
    """Deprecated alias of `from_exception`."""
    return from_exception(fn)


async def from_awaitable[T](aw: Awaitable[T]) -> Option[T]:
    """Await `aw`, returning `Some` of its result, or `NONE` if it raised an `Exception`.

    Example:
    ```python
    >>> import asyncio
    >>> from fpkit import option as O
    >>> async def fetch() -> int:
    ...     return 1
    >>> asyncio.run(O.from_awaitable(fetch()))
    Some(value=1)

    ```
    """
    try:
        return Some(await aw)
    except Exception:  # noqa: BLE001
        return NONE


def from_dict(data: Mapping[str, Any]) -> Option[Any]:
    """Build an `Option` from its structural shape.

    Raises:
        ValueError: If `data` does not match `{"type": "some", "value": v}` or `{"type": "none"}`.

    Example:
    ```python
    >>> from fpkit import option as O
    >>> O.from_dict({"type": "some", "value": 1})
    Some(value=1)
    >>> O.from_dict({"type": "none"})
    NONE
    >>> O.from_dict({"type": "ok", "value": 1})
    Traceback (most recent call last):
        ...
    ValueError: not an Option shape: {'type': 'ok', 'value': 1}

    ```
    """
    if isinstance(data, Option) or not is_option(data):
        msg = f"not an Option shape: {data!r}"
        raise ValueError(msg)
    match data["type"]:
        case "some":
            return Some(data["value"])
        case _:
            return NONE


@overload
def to_dict[T](opt: Option[T], /) -> dict[str, Any]: ...
@overload
def to_dict[T]() -> Callable[[Option[T]], dict[str, Any]]: ...
@dual(1, expects=Option)
def to_dict[T](opt: Option[T]) -> dict[str, Any]:
    """Return the structural shape of the option.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import option as O
    >>> fp.pipe(O.some(1), O.to_dict())
    {'type': 'some', 'value': 1}

    ```
    """
    return opt.to_dict()


@overload
def expect[T](opt: Option[T], msg: str, /) -> T: ...
@overload
def expect[T](msg: str, /) -> Callable[[Option[T]], T]: ...
@dual(2, expects=Option)
def expect[T](opt: Option[T], msg: str) -> T:
    """Return the contained value, or raise `OptionUnwrapError` carrying `msg`.

    Example:
    ```python
    >>> from fpkit import option as O
    >>> O.expect(O.some(1), "error")
    1
    >>> O.expect("error")(O.some(1))
    1
    >>> O.expect(O.none, "no user id")
    Traceback (most recent call last):
        ...
    fpkit._results._option.OptionUnwrapError: no user id (called `expect` on a `None`)

    ```
    """
    return opt.expect(msg)


@overload
def unwrap[T](opt: Option[T], /) -> T: ...
@overload
def unwrap[T]() -> Callable[[Option[T]], T]: ...
@dual(1, expects=Option)
def unwrap[T](opt: Option[T]) -> T:
    """Return the contained value, or raise `OptionUnwrapError`.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import option as O
    >>> O.unwrap(O.some(1))
    1
    >>> fp.pipe(O.some(1), O.unwrap())
    1

    ```
    """
    return opt.unwrap()


@overload
def unwrap_or[T](opt: Option[T], default: T, /) -> T: ...
@overload
def unwrap_or[T](default: T, /) -> Callable[[Option[T]], T]: ...
@dual(2, expects=Option)
def unwrap_or[T](opt: Option[T], default: T) -> T:
    """Return the contained value, or `default`. Never raises.

    Example:
    ```python
    >>> from fpkit import option as O
    >>> O.unwrap_or(O.some(1), 2), O.unwrap_or(O.none, 2)
    (1, 2)
    >>> O.unwrap_or(O.some(2))(O.none)
    Some(value=2)

    ```
    """
    return opt.unwrap_or(default)


@overload
def unwrap_or_else[T](opt: Option[T], f: Callable[[], T], /) -> T: ...
@overload
def unwrap_or_else[T](f: Callable[[], T], /) -> Callable[[Option[T]], T]: ...
@dual(2, expects=Option)
def unwrap_or_else[T](opt: Option[T], f: Callable[[], T]) -> T:
    """Return the contained value, or compute a fallback lazily.

    Example:
    ```python
    >>> from fpkit import option as O
    >>> O.unwrap_or_else(O.some(1), lambda: 2), O.unwrap_or_else(O.none, lambda: 2)
    (1, 2)

    ```
    """
    return opt.unwrap_or_else(f)


@overload
def map[T, U](opt: Option[T], f: Callable[[T], U], /) -> Option[U]: ...
@overload
def map[T, U](f: Callable[[T], U], /) -> Callable[[Option[T]], Option[U]]: ...
@dual(2, expects=Option)
def map[T, U](opt: Option[T], f: Callable[[T], U]) -> Option[U]:
    """Apply `f` to the contained value, if any.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import option as O
    >>> fp.pipe(O.some(1), O.map(lambda x: x + 1))
    Some(value=2)
    >>> fp.pipe(O.none, O.map(lambda x: x + 1))
    NONE

    ```
    """
    return opt.map(f)


@overload
def flat_map[T, U](opt: Option[T], f: Callable[[T], Option[U]], /) -> Option[U]: ...
@overload
def flat_map[T, U](
    f: Callable[[T], Option[U]], /
) -> Callable[[Option[T]], Option[U]]: ...
@dual(2, expects=Option)
def flat_map[T, U](opt: Option[T], f: Callable[[T], Option[U]]) -> Option[U]:
    """Chain a function returning an `Option`. `NONE` short-circuits without calling `f`.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import option as O
    >>> fp.pipe(O.some(1), O.flat_map(lambda x: O.some(x + 1)))
    Some(value=2)
    >>> fp.pipe(O.none, O.flat_map(lambda x: O.some(x + 1)))
    NONE

    ```
    """
    return opt.flat_map(f)


@overload
def match[T, U](
    opt: Option[T], some: Callable[[T], U], none: Callable[[], U], /
) -> U: ...
@overload
def match[T, U](
    some: Callable[[T], U], none: Callable[[], U], /
) -> Callable[[Option[T]], U]: ...
@dual(3, expects=Option)
def match[T, U](opt: Option[T], some: Callable[[T], U], none: Callable[[], U]) -> U:
    """Call `some` with the contained value, or `none` if there is no value.

    Exactly one of the handlers is called.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import option as O
    >>> describe = O.match(lambda n: f"yes {n} is there", lambda: "nope not there")
    >>> describe(O.some(6)), describe(O.none)
    ('yes 6 is there', 'nope not there')

    ```
    """
    return opt.match(some, none)


@overload
def tap[T](opt: Option[T], f: Callable[[T], object], /) -> Option[T]: ...
@overload
def tap[T](f: Callable[[T], object], /) -> Callable[[Option[T]], Option[T]]: ...
@dual(2, expects=Option)
def tap[T](opt: Option[T], f: Callable[[T], object]) -> Option[T]:
    """Call `f` with the contained value for its side effects, returning the option unchanged.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import option as O
    >>> fp.pipe(O.some(1), O.tap(print), O.map(lambda x: x + 1))
    1
    Some(value=2)

    ```
    """
    return opt.tap(f)


@overload
def zip[T, U](opt: Option[T], other: Option[U], /) -> Option[tuple[T, U]]: ...
@overload
def zip[T, U](other: Option[U], /) -> Callable[[Option[T]], Option[tuple[T, U]]]: ...
@dual(2, expects=Option)
def zip[T, U](opt: Option[T], other: Option[U]) -> Option[tuple[T, U]]:
    """Combine two options into an option of a pair, if both are `Some`.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import option as O
    >>> O.zip(O.some(1), O.some(2))
    Some(value=(1, 2))
    >>> fp.pipe(O.some(1), O.zip(O.none))
    NONE
    >>> fp.pipe(O.none, O.zip(O.some(1)))
    NONE

    ```
    """
    return opt.zip(other)


@overload
def or_else[T](opt: Option[T], f: Callable[[], Option[T]], /) -> Option[T]: ...
@overload
def or_else[T](f: Callable[[], Option[T]], /) -> Callable[[Option[T]], Option[T]]: ...
@dual(2, expects=Option)
def or_else[T](opt: Option[T], f: Callable[[], Option[T]]) -> Option[T]:
    """Return the option if it is `Some`, otherwise the option computed by `f`.

    Example:
    ```python
    >>> from fpkit import option as O
    >>> O.or_else(O.none, lambda: O.some("fallback"))
    Some(value='fallback')

    ```
    """
    return opt.or_else(f)


@overload
def filter[T](opt: Option[T], predicate: Callable[[T], bool], /) -> Option[T]: ...
@overload
def filter[T](
    predicate: Callable[[T], bool], /
) -> Callable[[Option[T]], Option[T]]: ...
@dual(2, expects=Option)
def filter[T](opt: Option[T], predicate: Callable[[T], bool]) -> Option[T]:
    """Keep the contained value only if `predicate` holds for it.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import option as O
    >>> fp.pipe(O.some(3), O.filter(lambda n: n > 2))
    Some(value=3)
    >>> fp.pipe(O.some(1), O.filter(lambda n: n > 2))
    NONE

    ```
    """
    return opt.filter(predicate)


@overload
def ok_or[T, E](opt: Option[T], error: E, /) -> Result[T, E]: ...
@overload
def ok_or[T, E](error: E, /) -> Callable[[Option[T]], Result[T, E]]: ...
@dual(2, expects=Option)
def ok_or[T, E](opt: Option[T], error: E) -> Result[T, E]:
    """Convert the option into a `Result`, using `error` for `NONE`.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import option as O
    >>> fp.pipe(O.none, O.ok_or("missing"))
    Err(error='missing')

    ```
    """
    return opt.ok_or(error)


__all__ = [
    "expect",
    "filter",
    "flat_map",
    "from_awaitable",
    "from_dict",
    "from_exception",
    "from_falsy",
    "from_function",
    "from_nullable",
    "is_none",
    "is_option",
    "is_some",
    "map",
    "match",
    "none",
    "ok_or",
    "or_else",
    "some",
    "tap",
    "to_dict",
    "unwrap",
    "unwrap_or",
    "unwrap_or_else",
    "zip",
]
