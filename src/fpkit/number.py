"""Helpers over integers."""

from __future__ import annotations

import math

from ._core import dual


def even(n: int) -> bool:
    """Check if a number is even.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import number as N
    >>> fp.pipe(2, N.even), fp.pipe(3, N.even)
    (True, False)

    ```
    """
    return n % 2 == 0


def odd(n: int) -> bool:
    """Check if a number is odd.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import number as N
    >>> fp.pipe(2, N.odd), fp.pipe(3, N.odd)
    (False, True)

    ```
    """
    return n % 2 != 0


@dual(2)
def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of two integers, always non-negative.

    Example:
    ```python
    >>> from fpkit import number as N
    >>> N.gcd(2, 3), N.gcd(8)(12), N.gcd(8)(-12)
    (1, 4, 4)

    ```
    """
    return math.gcd(a, b)
