from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never, TypeIs, cast

from .._core import Pipeable, get_config
from ._option import NONE, Option, Some


class ResultUnwrapError(RuntimeError): ...


class Result[T, E](ABC, Pipeable):
    """Either `Ok(value)` or `Err(error)`.

    Unlike `Option`, the failure variant carries a payload explaining why the computation failed.

    Example:
    ```python
    >>> import fpkit as fp
    >>> def parse(s: str) -> fp.Result[int, str]:
    ...     return fp.Ok(int(s)) if s.isdigit() else fp.Err(f"not a number: {s!r}")
    >>> match parse("x"):
    ...     case fp.Ok(value):
    ...         print(value)
    ...     case fp.Err(error):
    ...         print(error)
    not a number: 'x'

    ```
    """

    __slots__ = ()

    @abstractmethod
    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """Returns `True` if the result is `Ok`.

        Example:
        ```python
        >>> import fpkit as fp
        >>> fp.Ok(1).is_ok(), fp.Err("error").is_ok()
        (True, False)

        ```
        """
        ...

    @abstractmethod
    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        """Returns `True` if the result is `Err`.

        Example:
        ```python
        >>> import fpkit as fp
        >>> fp.Ok(1).is_err(), fp.Err("error").is_err()
        (False, True)

        ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained `Ok` value, or raises `ResultUnwrapError` if the result is `Err`.

        The message of the exception embeds the error payload.

        Example:
        ```python
        >>> import fpkit as fp
        >>> fp.Ok(2).unwrap()
        2
        >>> fp.Err("boom").unwrap()
        Traceback (most recent call last):
            ...
        fpkit._results._result.ResultUnwrapError: called `unwrap` on Err: 'boom'

        ```
        """
        ...

    @abstractmethod
    def unwrap_err(self) -> E:
        """Returns the contained `Err` value, or raises `ResultUnwrapError` if the result is `Ok`.

        Example:
        ```python
        >>> import fpkit as fp
        >>> fp.Err("boom").unwrap_err()
        'boom'

        ```
        """
        ...

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Returns the structural shape of the result.

        Both variants store their payload under the `"value"` key.

        Example:
        ```python
        >>> import fpkit as fp
        >>> fp.Ok(1).to_dict()
        {'type': 'ok', 'value': 1}
        >>> fp.Err("boom").to_dict()
        {'type': 'err', 'value': 'boom'}

        ```
        """
        ...

    def expect(self, msg: str) -> T:
        """Returns the contained `Ok` value, or raises `ResultUnwrapError` with a custom message if the result is `Err`.

        Args:
            msg (str): The message to display if the result is `Err`.

        Returns:
            T: The contained `Ok` value.

        Raises:
            ResultUnwrapError: If the result is `Err`, with the provided message and error.

        Example:
        ```python
        >>> import fpkit as fp
        >>> fp.Ok(1).expect("no value")
        1
        >>> fp.Err("boom").expect("no value")
        Traceback (most recent call last):
            ...
        fpkit._results._result.ResultUnwrapError: no value: 'boom'

        ```
        """
        if self.is_ok():
            return self.value
        raise ResultUnwrapError(f"{msg}: {self.unwrap_err()!r}")

    def unwrap_or(self, default: T) -> T:
        """Returns the contained `Ok` value or a provided default.

        Args:
            default (T): The value to return if the result is `Err`.

        Returns:
            T: The contained `Ok` value or the default.

        Example:
        ```python
        >>> import fpkit as fp
        >>> fp.Ok(1).unwrap_or(2), fp.Err("boom").unwrap_or(2)
        (1, 2)

        ```
        """
        return self.value if self.is_ok() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Returns the contained `Ok` value or computes it from a closure.

        The closure takes no argument and is only called on `Err`.

        Args:
            f (Callable[[], T]): Callable returning the fallback value.

        Returns:
            T: The contained `Ok` value or the result of `f()`.

        Example:
        ```python
        >>> import fpkit as fp
        >>> fp.Ok(2).unwrap_or_else(lambda: 0)
        2
        >>> fp.Err("boom").unwrap_or_else(lambda: 0)
        0

        ```
        """
        return self.value if self.is_ok() else f()

    def map[U](self, f: Callable[[T], U]) -> Result[U, E]:
        """Maps a `Result[T, E]` to `Result[U, E]` by applying a function to a contained `Ok` value.

        `Err` is returned untouched, with its original error.

        Args:
            f (Callable[[T], U]): Callable to apply to the `Ok` value.

        Returns:
            Result[U, E]: `Ok(f(value))` if `Ok`, otherwise the same `Err`.

        Example:
        ```python
        >>> import fpkit as fp
        >>> fp.Ok(2).map(lambda x: x * 10)
        Ok(value=20)
        >>> fp.Err("boom").map(lambda x: x * 10)
        Err(error='boom')

        ```
        """
        if self.is_ok():
            return Ok(f(self.value))
        return cast(Result[U, E], self)

    def map_err[F](self, f: Callable[[E], F]) -> Result[T, F]:
        """Maps a `Result[T, E]` to `Result[T, F]` by applying a function to a contained `Err` value.

        Args:
            f (Callable[[E], F]): Callable to apply to the `Err` value.

        Returns:
            Result[T, F]: `Err(f(error))` if `Err`, otherwise the same `Ok`.

        Example:
        ```python
        >>> import fpkit as fp
        >>> fp.Err("boom").map_err(str.upper)
        Err(error='BOOM')

        ```
        """
        if self.is_err():
            return Err(f(self.error))
        return cast(Result[T, F], self)

    def flat_map[U](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Calls `f` if the result is `Ok`, otherwise returns the `Err`.

        Rust calls this operation `and_then`.

        Args:
            f (Callable[[T], Result[U, E]]): Callable that takes the `Ok` value and returns a `Result`.

        Returns:
            Result[U, E]: The result of `f(value)` if `Ok`, otherwise the same `Err`.

        Example:
        ```python
        >>> import fpkit as fp
        >>> def half(x: int) -> fp.Result[int, str]:
        ...     return fp.Ok(x // 2) if x % 2 == 0 else fp.Err(f"{x} is odd")
        >>> fp.Ok(8).flat_map(half).flat_map(half)
        Ok(value=2)
        >>> fp.Ok(6).flat_map(half).flat_map(half)
        Err(error='3 is odd')

        ```
        """
        if self.is_ok():
            return f(self.value)
        return cast(Result[U, E], self)

    def or_else[F](self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Calls `f` if the result is `Err`, otherwise returns the `Ok`.

        Args:
            f (Callable[[E], Result[T, F]]): Callable that takes the `Err` value and returns a `Result`.

        Returns:
            Result[T, F]: The receiver if `Ok`, otherwise the result of `f(error)`.

        Example:
        ```python
        >>> import fpkit as fp
        >>> fp.Err("boom").or_else(lambda e: fp.Ok(len(e)))
        Ok(value=4)

        ```
        """
        if self.is_ok():
            return cast(Result[T, F], self)
        return f(self.unwrap_err())

    def match[U](self, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Pattern matches on the result, calling `ok` if `Ok`, or `err` if `Err`.

        Args:
            ok (Callable[[T], U]): Callable to handle the `Ok` value.
            err (Callable[[E], U]): Callable to handle the `Err` value.

        Returns:
            U: The result of the called function.

        Example:
        ```python
        >>> import fpkit as fp
        >>> fp.Ok(2).match(lambda x: x * 2, len)
        4
        >>> fp.Err("boom").match(lambda x: x * 2, len)
        4

        ```
        """
        if self.is_ok():
            return ok(self.value)
        return err(self.unwrap_err())

    def tap(self, f: Callable[[T], object]) -> Result[T, E]:
        """Calls `f` with the `Ok` value for its side effects and returns the receiver unchanged.

        Example:
        ```python
        >>> import fpkit as fp
        >>> fp.Ok(2).tap(print)
        2
        Ok(value=2)

        ```
        """
        if self.is_ok():
            f(self.value)
        return self

    def zip[U](self, other: Result[U, E]) -> Result[tuple[T, U], E]:
        """Zips the result with another one.

        Args:
            other (Result[U, E]): The other result.

        Returns:
            Result[tuple[T, U], E]: `Ok((a, b))` if both are `Ok`, otherwise the first `Err` found.

        Example:
        ```python
        >>> import fpkit as fp
        >>> fp.Ok(1).zip(fp.Ok(2))
        Ok(value=(1, 2))
        >>> fp.Ok(1).zip(fp.Err("second"))
        Err(error='second')
        >>> fp.Err("first").zip(fp.Err("second"))
        Err(error='first')

        ```
        """
        if self.is_err():
            return cast(Result[tuple[T, U], E], self)
        if other.is_err():
            return cast(Result[tuple[T, U], E], other)
        return Ok((self.unwrap(), other.unwrap()))

    def ok(self) -> Option[T]:
        """Converts the `Result` into an `Option`, mapping `Ok(v)` to `Some(v)` and `Err(e)` to `NONE`.

        Example:
        ```python
        >>> import fpkit as fp
        >>> fp.Ok(1).ok(), fp.Err("boom").ok()
        (Some(value=1), NONE)

        ```
        """
        if self.is_ok():
            return Some(self.value)
        return NONE

    def err(self) -> Option[E]:
        """Converts the `Result` into an `Option`, mapping `Err(e)` to `Some(e)` and `Ok(v)` to `NONE`.

        Example:
        ```python
        >>> import fpkit as fp
        >>> fp.Ok(1).err(), fp.Err("boom").err()
        (NONE, Some(value='boom'))

        ```
        """
        if self.is_err():
            return Some(self.error)
        return NONE


@dataclass(slots=True, frozen=True, repr=False)
class Ok[T, E](Result[T, E]):
    """Represents a successful value."""

    value: T

    def __repr__(self) -> str:
        return f"Ok(value={get_config().value_repr(self.value)})"

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return True

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> Never:
        raise ResultUnwrapError(f"called `unwrap_err` on Ok: {self.value!r}")

    def to_dict(self) -> dict[str, Any]:
        return {"type": "ok", "value": self.value}


@dataclass(slots=True, frozen=True, repr=False)
class Err[T, E](Result[T, E]):
    """Represents an error value."""

    error: E

    def __repr__(self) -> str:
        return f"Err(error={get_config().value_repr(self.error)})"

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return False

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise ResultUnwrapError(f"called `unwrap` on Err: {self.error!r}")

    def unwrap_err(self) -> E:
        return self.error

    def to_dict(self) -> dict[str, Any]:
        return {"type": "err", "value": self.error}
