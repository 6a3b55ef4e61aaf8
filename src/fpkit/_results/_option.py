from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Never, TypeIs

from .._core import Pipeable, get_config

if TYPE_CHECKING:
    from ._result import Result


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC, Pipeable):
    """Either `Some(value)` or `NONE`.

    `Option` replaces `None` checks with a closed set of two variants, and a uniform set of combinators.

    Instances are immutable: every method returns a new `Option`, or the receiver itself.

    Both variants support structural pattern matching:
    ```python
    >>> import fpkit as fp
    >>> def describe(opt: fp.Option[int]) -> str:
    ...     match opt:
    ...         case fp.Some(value):
    ...             return f"got {value}"
    ...         case _:
    ...             return "nothing"
    >>> describe(fp.Some(1)), describe(fp.NONE)
    ('got 1', 'nothing')

    ```
    """

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """Returns `True` if the option is a `Some` value.

        Returns:
            bool: `True` if the option is a `Some` variant, `False` otherwise.

        Example:
        ```python
        >>> import fpkit as fp
        >>> fp.Some(2).is_some()
        True
        >>> fp.NONE.is_some()
        False

        ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """Returns `True` if the option is the `NONE` value.

        Returns:
            bool: `True` if the option is a `NoneOption` variant, `False` otherwise.

        Example:
        ```python
        >>> import fpkit as fp
        >>> fp.Some(2).is_none()
        False
        >>> fp.NONE.is_none()
        True

        ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained `Some` value.

        Returns:
            T: The contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
        ```python
        >>> import fpkit as fp
        >>> fp.Some("car").unwrap()
        'car'
        >>> fp.NONE.unwrap()
        Traceback (most recent call last):
            ...
        fpkit._results._option.OptionUnwrapError: called `unwrap` on a `None`

        ```
        """
        ...

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Returns the structural shape of the option.

        `Some(v)` becomes `{"type": "some", "value": v}` and `NONE` becomes `{"type": "none"}`.

        See `fpkit.option.from_dict` for the reverse conversion.

        Returns:
            dict[str, Any]: The tagged representation.

        Example:
        ```python
        >>> import fpkit as fp
        >>> fp.Some(1).to_dict()
        {'type': 'some', 'value': 1}
        >>> fp.NONE.to_dict()
        {'type': 'none'}

        ```
        """
        ...

    def expect(self, msg: str) -> T:
        """Returns the contained `Some` value.

        Raises an exception with a provided message if the value is `NONE`.

        Args:
            msg (str): The message to include in the exception if the option is `NONE`.

        Returns:
            T: The contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
        ```python
        >>> import fpkit as fp
        >>> fp.Some("value").expect("fruits are healthy")
        'value'
        >>> fp.NONE.expect("fruits are healthy")
        Traceback (most recent call last):
            ...
        fpkit._results._option.OptionUnwrapError: fruits are healthy (called `expect` on a `None`)

        ```
        """
        if self.is_some():
            return self.value
        msg = f"{msg} (called `expect` on a `None`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """Returns the contained `Some` value or a provided default.

        Args:
            default (T): The value to return if the option is `NONE`.

        Returns:
            T: The contained `Some` value or the provided default.

        Example:
        ```python
        >>> import fpkit as fp
        >>> fp.Some("car").unwrap_or("bike")
        'car'
        >>> fp.NONE.unwrap_or("bike")
        'bike'

        ```
        """
        return self.value if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Returns the contained `Some` value or computes it from a function.

        The function is only called if the option is `NONE`.

        Args:
            f (Callable[[], T]): A function that returns a default value.

        Returns:
            T: The contained `Some` value or the result of the function.

        Example:
        ```python
        >>> import fpkit as fp
        >>> k = 10
        >>> fp.Some(4).unwrap_or_else(lambda: 2 * k)
        4
        >>> fp.NONE.unwrap_or_else(lambda: 2 * k)
        20

        ```
        """
        return self.value if self.is_some() else f()

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """Maps an `Option[T]` to `Option[U]` by applying a function to a contained `Some` value.

        A `NONE` value is returned untouched, and the function is not called.

        Args:
            f (Callable[[T], U]): The function to apply to the `Some` value.

        Returns:
            Option[U]: A new `Option` with the mapped value if `Some`, otherwise `NONE`.

        Example:
        ```python
        >>> import fpkit as fp
        >>> fp.Some("Hello, World!").map(len)
        Some(value=13)
        >>> fp.NONE.map(len)
        NONE

        ```
        """
        if self.is_some():
            return Some(f(self.value))
        return NONE

    def flat_map[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Calls a function returning an `Option` if the option is `Some`, otherwise returns `NONE`.

        Rust calls this operation `and_then`.

        Args:
            f (Callable[[T], Option[U]]): The function to call with the `Some` value.

        Returns:
            Option[U]: The result of the function if `Some`, otherwise `NONE`.

        Example:
        ```python
        >>> import fpkit as fp
        >>> def sq(x: int) -> fp.Option[int]:
        ...     return fp.Some(x * x)
        >>> def nope(x: int) -> fp.Option[int]:
        ...     return fp.NONE
        >>> fp.Some(2).flat_map(sq).flat_map(sq)
        Some(value=16)
        >>> fp.Some(2).flat_map(sq).flat_map(nope)
        NONE
        >>> fp.Some(2).flat_map(nope).flat_map(sq)
        NONE
        >>> fp.NONE.flat_map(sq).flat_map(sq)
        NONE

        ```
        """
        if self.is_some():
            return f(self.value)
        return NONE

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """Returns the option if it contains a value, otherwise calls a function and returns the result.

        Args:
            f (Callable[[], Option[T]]): The function to call if the option is `NONE`.

        Returns:
            Option[T]: The original `Option` if it is `Some`, otherwise the result of the function.

        Example:
        ```python
        >>> import fpkit as fp
        >>> def nobody() -> fp.Option[str]:
        ...     return fp.NONE
        >>> def vikings() -> fp.Option[str]:
        ...     return fp.Some("vikings")
        >>> fp.Some("barbarians").or_else(vikings)
        Some(value='barbarians')
        >>> fp.NONE.or_else(vikings)
        Some(value='vikings')
        >>> fp.NONE.or_else(nobody)
        NONE

        ```
        """
        return self if self.is_some() else f()

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Returns `NONE` if the option is `NONE` or if the predicate returns `False` for the contained value.

        Args:
            predicate (Callable[[T], bool]): The check to apply to the `Some` value.

        Returns:
            Option[T]: The receiver if it is `Some` and the predicate holds, otherwise `NONE`.

        Example:
        ```python
        >>> import fpkit as fp
        >>> fp.Some(4).filter(lambda x: x % 2 == 0)
        Some(value=4)
        >>> fp.Some(3).filter(lambda x: x % 2 == 0)
        NONE

        ```
        """
        if self.is_some() and predicate(self.value):
            return self
        return NONE

    def match[U](self, some: Callable[[T], U], none: Callable[[], U]) -> U:
        """Pattern matches on the option, calling exactly one of the two handlers.

        Args:
            some (Callable[[T], U]): Handler called with the `Some` value.
            none (Callable[[], U]): Handler called if the option is `NONE`.

        Returns:
            U: The result of the called handler.

        Example:
        ```python
        >>> import fpkit as fp
        >>> fp.Some(1).match(lambda x: x + 1, lambda: 0)
        2
        >>> fp.NONE.match(lambda x: x + 1, lambda: 0)
        0

        ```
        """
        if self.is_some():
            return some(self.value)
        return none()

    def tap(self, f: Callable[[T], object]) -> Option[T]:
        """Calls a function with the contained value for its side effects, if the option is `Some`.

        The return value of the function is ignored and the receiver is returned unchanged.

        Args:
            f (Callable[[T], object]): The side effect.

        Returns:
            Option[T]: The receiver.

        Example:
        ```python
        >>> import fpkit as fp
        >>> fp.Some(3).tap(print).map(lambda x: x * 2)
        3
        Some(value=6)
        >>> fp.NONE.tap(print)
        NONE

        ```
        """
        if self.is_some():
            f(self.value)
        return self

    def zip[U](self, other: Option[U]) -> Option[tuple[T, U]]:
        """Zips the option with another one.

        Args:
            other (Option[U]): The other option.

        Returns:
            Option[tuple[T, U]]: `Some((a, b))` if both options are `Some`, otherwise `NONE`.

        Example:
        ```python
        >>> import fpkit as fp
        >>> fp.Some(1).zip(fp.Some("hi"))
        Some(value=(1, 'hi'))
        >>> fp.Some(1).zip(fp.NONE)
        NONE

        ```
        """
        if self.is_some() and other.is_some():
            return Some((self.value, other.value))
        return NONE

    def ok_or[E](self, error: E) -> Result[T, E]:
        """Transforms the `Option[T]` into a `Result[T, E]`.

        `Some(v)` becomes `Ok(v)` and `NONE` becomes `Err(error)`.

        Args:
            error (E): The error payload to use if the option is `NONE`.

        Returns:
            Result[T, E]: The converted result.

        Example:
        ```python
        >>> import fpkit as fp
        >>> fp.Some(1).ok_or("missing")
        Ok(value=1)
        >>> fp.NONE.ok_or("missing")
        Err(error='missing')

        ```
        """
        from ._result import Err, Ok

        if self.is_some():
            return Ok(self.value)
        return Err(error)


@dataclass(slots=True, frozen=True, repr=False)
class Some[T](Option[T]):
    """Option variant representing the presence of a value.

    Args:
        value (T): The contained value.

    Example:
    ```python
    >>> import fpkit as fp
    >>> fp.Some(42)
    Some(value=42)
    >>> fp.Some(None).is_some()
    True

    ```
    """

    value: T

    def __repr__(self) -> str:
        return f"Some(value={get_config().value_repr(self.value)})"

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value

    def to_dict(self) -> dict[str, Any]:
        return {"type": "some", "value": self.value}


@dataclass(slots=True, frozen=True, repr=False)
class NoneOption(Option[Any]):
    """Option variant representing the absence of a value.

    Use the `NONE` singleton rather than instantiating this class.
    """

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("called `unwrap` on a `None`")

    def to_dict(self) -> dict[str, Any]:
        return {"type": "none"}


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""
