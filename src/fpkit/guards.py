"""Primitive type predicates, usable as `filter`/`partition` predicates."""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from typing import Any, TypeIs


def is_callable(value: object) -> TypeIs[Callable[..., Any]]:
    """Check if a value can be called.

    Example:
    ```python
    >>> import fpkit as fp
    >>> fp.guards.is_callable(len), fp.guards.is_callable("len")
    (True, False)

    ```
    """
    return callable(value)


def is_str(value: object) -> TypeIs[str]:
    """Check if a value is a `str`.

    Example:
    ```python
    >>> import fpkit as fp
    >>> fp.guards.is_str("a"), fp.guards.is_str(b"a")
    (True, False)

    ```
    """
    return isinstance(value, str)


def is_number(value: object) -> TypeIs[int | float]:
    """Check if a value is an `int` or a `float`.

    `bool` is excluded even though it subclasses `int`.

    Example:
    ```python
    >>> import fpkit as fp
    >>> fp.guards.is_number(1), fp.guards.is_number(1.5), fp.guards.is_number(True)
    (True, True, False)

    ```
    """
    return isinstance(value, int | float) and not isinstance(value, bool)


def is_nan(value: object) -> bool:
    """Check if a value is a float NaN.

    Example:
    ```python
    >>> import fpkit as fp
    >>> fp.guards.is_nan(float("nan")), fp.guards.is_nan(0.0), fp.guards.is_nan("nan")
    (True, False, False)

    ```
    """
    return isinstance(value, float) and math.isnan(value)


def is_mapping(value: object) -> TypeIs[Mapping[Any, Any]]:
    """Check if a value is a `Mapping`.

    Example:
    ```python
    >>> import fpkit as fp
    >>> fp.guards.is_mapping({"type": "none"}), fp.guards.is_mapping([("type", "none")])
    (True, False)

    ```
    """
    return isinstance(value, Mapping)


def is_none(value: object) -> TypeIs[None]:
    """Check if a value is `None`.

    Example:
    ```python
    >>> import fpkit as fp
    >>> fp.guards.is_none(None), fp.guards.is_none(0)
    (True, False)

    ```
    """
    return value is None


def is_falsy(value: object) -> bool:
    """Check if a value is falsy, treating NaN as falsy too.

    Example:
    ```python
    >>> import fpkit as fp
    >>> [fp.guards.is_falsy(v) for v in (0, "", [], None, float("nan"), "a")]
    [True, True, True, True, True, False]

    ```
    """
    return not value or is_nan(value)
