"""Data-first or curried functions over `Result`.

The calling convention is the same as `fpkit.option`:
```python
>>> import fpkit as fp
>>> from fpkit import result as R
>>> fp.pipe(R.from_nullable(3, "error"), R.map(lambda x: x + 1), R.unwrap_or(0))
4
>>> fp.pipe(R.from_nullable(None, "error"), R.map(lambda x: x + 1), R.unwrap_or(0))
0

```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from typing import Any, Final, overload

from . import guards
from ._core import dual
from ._results import Err, Ok, Option, Result

_MISSING: Final = object()


def is_result(value: object) -> bool:
    """Check if a value is a `Result`, or a mapping with the structural shape of one.

    Accepted shapes are `{"type": "ok", "value": v}` and `{"type": "err", "value": e}`.

    Example:
    ```python
    >>> from fpkit import result as R
    >>> R.is_result(R.ok(1)), R.is_result(R.err("error"))
    (True, True)
    >>> R.is_result({"type": "err", "value": "error"})
    True
    >>> R.is_result(1), R.is_result("1"), R.is_result(True), R.is_result(None)
    (False, False, False, False)

    ```
    """
    if isinstance(value, Result):
        return True
    if not guards.is_mapping(value):
        return False
    return value.get("type") in ("ok", "err") and "value" in value


def is_ok[T, E](res: Result[T, E]) -> bool:
    """Check if the result is `Ok`.

    Example:
    ```python
    >>> from fpkit import result as R
    >>> R.is_ok(R.ok(1)), R.is_ok(R.err("error"))
    (True, False)

    ```
    """
    return res.is_ok()


def is_err[T, E](res: Result[T, E]) -> bool:
    """Check if the result is `Err`.

    Example:
    ```python
    >>> from fpkit import result as R
    >>> R.is_err(R.ok(1)), R.is_err(R.err("error"))
    (False, True)

    ```
    """
    return res.is_err()


def ok[T](value: T) -> Result[T, Any]:
    """Wrap a value in `Ok`.

    Example:
    ```python
    >>> from fpkit import result as R
    >>> R.ok(1)
    Ok(value=1)

    ```
    """
    return Ok(value)


def err[E](error: E) -> Result[Any, E]:
    """Wrap an error in `Err`.

    Example:
    ```python
    >>> from fpkit import result as R
    >>> R.err("error")
    Err(error='error')

    ```
    """
    return Err(error)


@overload
def from_nullable[T, E](value: T | None, error: E, /) -> Result[T, E]: ...
@overload
def from_nullable[T, E](error: E, /) -> Callable[[T | None], Result[T, E]]: ...
@dual(2)
def from_nullable[T, E](value: T | None, error: E) -> Result[T, E]:
    """Wrap a value in `Ok`, or return `Err(error)` if it is `None`.

    Falsy values other than `None` are kept.

    Example:
    ```python
    >>> from fpkit import result as R
    >>> R.from_nullable(1, "error"), R.from_nullable(None, "error")
    (Ok(value=1), Err(error='error'))
    >>> R.from_nullable(False, "error"), R.from_nullable("", "error")
    (Ok(value=False), Ok(value=''))
    >>> R.from_nullable("missing")(None)
    Err(error='missing')

    ```
    """
    return Err(error) if value is None else Ok(value)


@overload
def from_falsy[T, E](value: T, error: E, /) -> Result[T, E]: ...
@overload
def from_falsy[T, E](error: E, /) -> Callable[[T], Result[T, E]]: ...
@dual(2)
def from_falsy[T, E](value: T, error: E) -> Result[T, E]:
    """Wrap a value in `Ok` if it is truthy, otherwise return `Err(error)`.

    NaN is considered falsy.

    Example:
    ```python
    >>> from fpkit import result as R
    >>> R.from_falsy("hiii", "error"), R.from_falsy("", "error")
    (Ok(value='hiii'), Err(error='error'))
    >>> R.from_falsy(0, "error"), R.from_falsy(None, "error"), R.from_falsy(False, "error")
    (Err(error='error'), Err(error='error'), Err(error='error'))

    ```
    """
    return Err(error) if guards.is_falsy(value) else Ok(value)


@overload
def from_exception[T](fn: Callable[[], T]) -> Result[T, Exception]: ...
@overload
def from_exception[T, E](fn: Callable[[], T], error: E) -> Result[T, E]: ...
def from_exception(fn: Callable[[], Any], error: Any = _MISSING) -> Result[Any, Any]:  # noqa: ANN401
    """Call `fn`, returning `Ok` of its result, or `Err` if it raised an `Exception`.

    The `Err` payload is `error` when given, otherwise the raised exception itself.

    Pass `error` to discard the exception and get a fixed, caller-chosen error value.

    Example:
    ```python
    >>> from fpkit import result as R
    >>> R.from_exception(lambda: int("12"))
    Ok(value=12)
    >>> R.from_exception(lambda: int("twelve"), "not a number")
    Err(error='not a number')
    >>> R.from_exception(lambda: int("twelve")).map_err(type)
    Err(error=<class 'ValueError'>)

    ```
    """
    try:
        return Ok(fn())
    except Exception as e:  # noqa: BLE001
        return Err(e if error is _MISSING else error)


async def from_awaitable(aw: Awaitable[Any], error: Any = _MISSING) -> Result[Any, Any]:  # noqa: ANN401
    """Await `aw`, returning `Ok` of its result, or `Err` if it raised an `Exception`.

    The `Err` payload is `error` when given, otherwise the raised exception itself.

    Example:
    ```python
    >>> import asyncio
    >>> from fpkit import result as R
    >>> async def fail() -> int:
    ...     raise TimeoutError
    >>> asyncio.run(R.from_awaitable(fail(), "timed out"))
    Err(error='timed out')

    ```
    """
    try:
        return Ok(await aw)
    except Exception as e:  # noqa: BLE001
        return Err(e if error is _MISSING else error)


def from_dict(data: Mapping[str, Any]) -> Result[Any, Any]:
    """Build a `Result` from its structural shape.

    Raises:
        ValueError: If `data` does not match `{"type": "ok" | "err", "value": v}`.

    Example:
    ```python
    >>> from fpkit import result as R
    >>> R.from_dict({"type": "err", "value": "boom"})
    Err(error='boom')

    ```
    """
    if isinstance(data, Result) or not is_result(data):
        msg = f"not a Result shape: {data!r}"
        raise ValueError(msg)
    match data["type"]:
        case "ok":
            return Ok(data["value"])
        case _:
            return Err(data["value"])


@overload
def to_dict[T, E](res: Result[T, E], /) -> dict[str, Any]: ...
@overload
def to_dict[T, E]() -> Callable[[Result[T, E]], dict[str, Any]]: ...
@dual(1, expects=Result)
def to_dict[T, E](res: Result[T, E]) -> dict[str, Any]:
    """Return the structural shape of the result.

    Example:
    ```python
    >>> from fpkit import result as R
    >>> R.to_dict(R.ok(1))
    {'type': 'ok', 'value': 1}

    ```
    """
    return res.to_dict()


@overload
def expect[T, E](res: Result[T, E], msg: str, /) -> T: ...
@overload
def expect[T, E](msg: str, /) -> Callable[[Result[T, E]], T]: ...
@dual(2, expects=Result)
def expect[T, E](res: Result[T, E], msg: str) -> T:
    """Return the `Ok` value, or raise `ResultUnwrapError` with `msg` and the error.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import result as R
    >>> fp.pipe(R.from_nullable(1, "error"), R.expect("error"))
    1
    >>> R.expect(R.err("boom"), "failed")
    Traceback (most recent call last):
        ...
    fpkit._results._result.ResultUnwrapError: failed: 'boom'

    ```
    """
    return res.expect(msg)


@overload
def unwrap[T, E](res: Result[T, E], /) -> T: ...
@overload
def unwrap[T, E]() -> Callable[[Result[T, E]], T]: ...
@dual(1, expects=Result)
def unwrap[T, E](res: Result[T, E]) -> T:
    """Return the `Ok` value, or raise `ResultUnwrapError` embedding the error.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import result as R
    >>> fp.pipe(R.from_nullable(1, "error"), R.unwrap())
    1
    >>> R.unwrap(R.err("boom"))
    Traceback (most recent call last):
        ...
    fpkit._results._result.ResultUnwrapError: called `unwrap` on Err: 'boom'

    ```
    """
    return res.unwrap()


@overload
def unwrap_err[T, E](res: Result[T, E], /) -> E: ...
@overload
def unwrap_err[T, E]() -> Callable[[Result[T, E]], E]: ...
@dual(1, expects=Result)
def unwrap_err[T, E](res: Result[T, E]) -> E:
    """Return the `Err` value, or raise `ResultUnwrapError`.

    Example:
    ```python
    >>> from fpkit import result as R
    >>> R.unwrap_err(R.err("boom"))
    'boom'

    ```
    """
    return res.unwrap_err()


@overload
def unwrap_or[T, E](res: Result[T, E], default: T, /) -> T: ...
@overload
def unwrap_or[T, E](default: T, /) -> Callable[[Result[T, E]], T]: ...
@dual(2, expects=Result)
def unwrap_or[T, E](res: Result[T, E], default: T) -> T:
    """Return the `Ok` value, or `default`. Never raises.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import result as R
    >>> fp.pipe(R.from_nullable(1, "error"), R.unwrap_or(2))
    1
    >>> fp.pipe(R.from_nullable(None, "error"), R.unwrap_or(2))
    2

    ```
    """
    return res.unwrap_or(default)


@overload
def unwrap_or_else[T, E](res: Result[T, E], f: Callable[[], T], /) -> T: ...
@overload
def unwrap_or_else[T, E](f: Callable[[], T], /) -> Callable[[Result[T, E]], T]: ...
@dual(2, expects=Result)
def unwrap_or_else[T, E](res: Result[T, E], f: Callable[[], T]) -> T:
    """Return the `Ok` value, or compute a fallback with the niladic `f`.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import result as R
    >>> fp.pipe(R.from_nullable(None, "error"), R.unwrap_or_else(lambda: 0))
    0
    >>> R.unwrap_or_else(R.ok(1), lambda: 0)
    1

    ```
    """
    return res.unwrap_or_else(f)


@overload
def map[T, E, U](res: Result[T, E], f: Callable[[T], U], /) -> Result[U, E]: ...
@overload
def map[T, E, U](f: Callable[[T], U], /) -> Callable[[Result[T, E]], Result[U, E]]: ...
@dual(2, expects=Result)
def map[T, E, U](res: Result[T, E], f: Callable[[T], U]) -> Result[U, E]:
    """Apply `f` to the `Ok` value. `Err` is passed through with its original error.

    Example:
    ```python
    >>> from fpkit import result as R
    >>> R.map(R.ok(1), lambda x: x + 1), R.map(R.err("e"), lambda x: x + 1)
    (Ok(value=2), Err(error='e'))

    ```
    """
    return res.map(f)


@overload
def map_err[T, E, F](res: Result[T, E], f: Callable[[E], F], /) -> Result[T, F]: ...
@overload
def map_err[T, E, F](
    f: Callable[[E], F], /
) -> Callable[[Result[T, E]], Result[T, F]]: ...
@dual(2, expects=Result)
def map_err[T, E, F](res: Result[T, E], f: Callable[[E], F]) -> Result[T, F]:
    """Apply `f` to the `Err` value. `Ok` is passed through.

    Example:
    ```python
    >>> from fpkit import result as R
    >>> R.map_err(R.err("e"), str.upper)
    Err(error='E')

    ```
    """
    return res.map_err(f)


@overload
def flat_map[T, E, U](
    res: Result[T, E], f: Callable[[T], Result[U, E]], /
) -> Result[U, E]: ...
@overload
def flat_map[T, E, U](
    f: Callable[[T], Result[U, E]], /
) -> Callable[[Result[T, E]], Result[U, E]]: ...
@dual(2, expects=Result)
def flat_map[T, E, U](
    res: Result[T, E], f: Callable[[T], Result[U, E]]
) -> Result[U, E]:
    """Chain a function returning a `Result`. `Err` short-circuits without calling `f`.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import result as R
    >>> positive = lambda n: R.ok(n) if n > 0 else R.err(f"{n} <= 0")
    >>> fp.pipe(R.ok(1), R.flat_map(positive)), fp.pipe(R.ok(-1), R.flat_map(positive))
    (Ok(value=1), Err(error='-1 <= 0'))

    ```
    """
    return res.flat_map(f)


@overload
def or_else[T, E, F](
    res: Result[T, E], f: Callable[[E], Result[T, F]], /
) -> Result[T, F]: ...
@overload
def or_else[T, E, F](
    f: Callable[[E], Result[T, F]], /
) -> Callable[[Result[T, E]], Result[T, F]]: ...
@dual(2, expects=Result)
def or_else[T, E, F](
    res: Result[T, E], f: Callable[[E], Result[T, F]]
) -> Result[T, F]:
    """Recover from an `Err` with a function returning a `Result`.

    Example:
    ```python
    >>> from fpkit import result as R
    >>> R.or_else(R.err("e"), lambda e: R.ok(0))
    Ok(value=0)

    ```
    """
    return res.or_else(f)


@overload
def match[T, E, U](
    res: Result[T, E], ok: Callable[[T], U], err: Callable[[E], U], /
) -> U: ...
@overload
def match[T, E, U](
    ok: Callable[[T], U], err: Callable[[E], U], /
) -> Callable[[Result[T, E]], U]: ...
@dual(3, expects=Result)
def match[T, E, U](
    res: Result[T, E], ok: Callable[[T], U], err: Callable[[E], U]
) -> U:
    """Call `ok` with the `Ok` value, or `err` with the `Err` value.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import result as R
    >>> fp.pipe(R.err("boom"), R.match(lambda v: f"value {v}", lambda e: f"error {e}"))
    'error boom'

    ```
    """
    return res.match(ok, err)


@overload
def tap[T, E](res: Result[T, E], f: Callable[[T], object], /) -> Result[T, E]: ...
@overload
def tap[T, E](f: Callable[[T], object], /) -> Callable[[Result[T, E]], Result[T, E]]: ...
@dual(2, expects=Result)
def tap[T, E](res: Result[T, E], f: Callable[[T], object]) -> Result[T, E]:
    """Call `f` with the `Ok` value for its side effects, returning the result unchanged.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import result as R
    >>> fp.pipe(R.err("e"), R.tap(print))
    Err(error='e')

    ```
    """
    return res.tap(f)


@overload
def zip[T, E, U](
    res: Result[T, E], other: Result[U, E], /
) -> Result[tuple[T, U], E]: ...
@overload
def zip[T, E, U](
    other: Result[U, E], /
) -> Callable[[Result[T, E]], Result[tuple[T, U], E]]: ...
@dual(2, expects=Result)
def zip[T, E, U](res: Result[T, E], other: Result[U, E]) -> Result[tuple[T, U], E]:
    """Combine two results into a result of a pair, or the first `Err`.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import result as R
    >>> fp.pipe(R.ok(1), R.zip(R.ok(2)))
    Ok(value=(1, 2))

    ```
    """
    return res.zip(other)


@overload
def to_option[T, E](res: Result[T, E], /) -> Option[T]: ...
@overload
def to_option[T, E]() -> Callable[[Result[T, E]], Option[T]]: ...
@dual(1, expects=Result)
def to_option[T, E](res: Result[T, E]) -> Option[T]:
    """Convert `Ok(v)` to `Some(v)` and `Err` to `NONE`.

    Example:
    ```python
    >>> from fpkit import result as R
    >>> R.to_option(R.ok(1)), R.to_option(R.err("e"))
    (Some(value=1), NONE)

    ```
    """
    return res.ok()


@overload
def err_option[T, E](res: Result[T, E], /) -> Option[E]: ...
@overload
def err_option[T, E]() -> Callable[[Result[T, E]], Option[E]]: ...
@dual(1, expects=Result)
def err_option[T, E](res: Result[T, E]) -> Option[E]:
    """Convert `Err(e)` to `Some(e)` and `Ok` to `NONE`.

    Example:
    ```python
    >>> from fpkit import result as R
    >>> R.err_option(R.ok(1)), R.err_option(R.err("e"))
    (NONE, Some(value='e'))

    ```
    """
    return res.err()


__all__ = [
    "err",
    "err_option",
    "expect",
    "flat_map",
    "from_awaitable",
    "from_dict",
    "from_exception",
    "from_falsy",
    "from_nullable",
    "is_err",
    "is_ok",
    "is_result",
    "map",
    "map_err",
    "match",
    "ok",
    "or_else",
    "tap",
    "to_dict",
    "to_option",
    "unwrap",
    "unwrap_err",
    "unwrap_or",
    "unwrap_or_else",
    "zip",
]
