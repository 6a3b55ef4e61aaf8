"""Data-first or curried helpers over sequences.

Inputs are never mutated: functions returning a sequence always build a new `list`.

Lookups that may fail return an `Option`.
```python
>>> import fpkit as fp
>>> from fpkit import array as A, option as O
>>> fp.pipe([1, 2, 3, 4, 5], A.filter(lambda n: n % 2 == 1), A.at(1), O.unwrap_or(0))
3

```
"""

from __future__ import annotations

import builtins
import functools
import math
import random
from collections.abc import Callable, Iterable, Sequence
from typing import Any

import cytoolz as cz
import more_itertools as mit

from ._core import dual
from ._results import NONE, Option, Some


@dual(2)
def all[T](array: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Check if every element matches `predicate`. `True` for an empty input.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import array as A
    >>> fp.pipe([1, 2, 3, 4, 5], A.all(lambda n: n > 0))
    True
    >>> A.all(["hi", "hello", "bye"], lambda s: s.startswith("h"))
    False

    ```
    """
    return builtins.all(predicate(x) for x in array)


@dual(2)
def any[T](array: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Check if at least one element matches `predicate`.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import array as A
    >>> fp.pipe([1, 2, 3, 4, 5], A.any(lambda n: n < 0))
    False
    >>> A.any([1, 2, 3, 4, 5], lambda n: n > 4)
    True

    ```
    """
    return builtins.any(predicate(x) for x in array)


@dual(2)
def append[T](array: Iterable[T], element: T) -> list[T]:
    """Return a new list with `element` added at the end.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import array as A
    >>> fp.pipe([1, 2, 3], A.append(4))
    [1, 2, 3, 4]

    ```
    """
    return [*array, element]


@dual(2)
def prepend[T](array: Iterable[T], element: T) -> list[T]:
    """Return a new list with `element` added at the start.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import array as A
    >>> fp.pipe([1, 2, 3], A.prepend(0), A.prepend(-1))
    [-1, 0, 1, 2, 3]

    ```
    """
    return [element, *array]


@dual(2)
def at[T](array: Sequence[T], index: int) -> Option[T]:
    """Get the element at `index`, negative indices counting from the end.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import array as A
    >>> fp.pipe([1, 2, 3, 4, 5], A.at(2))
    Some(value=3)
    >>> fp.pipe([1, 2, 3, 4, 5], A.at(-1))
    Some(value=5)
    >>> fp.pipe([1, 2, 3, 4, 5], A.at(6))
    NONE

    ```
    """
    try:
        return Some(array[index])
    except IndexError:
        return NONE


def clone[T](array: Iterable[T]) -> list[T]:
    """Return a shallow copy of the input as a list.

    Example:
    ```python
    >>> from fpkit import array as A
    >>> data = [1, 2, 3]
    >>> A.clone(data) == data, A.clone(data) is data
    (True, False)

    ```
    """
    return list(array)


@dual(2)
def concat[T](array: Iterable[T], other: Iterable[T]) -> list[T]:
    """Return the elements of `array` followed by the ones of `other`.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import array as A
    >>> fp.pipe([6, 7], A.concat([1, 2]))
    [6, 7, 1, 2]

    ```
    """
    return list(cz.itertoolz.concat((array, other)))


@dual(2)
def diff[T](array: Iterable[T], other: Iterable[T]) -> list[T]:
    """Return the elements of `array` not present in `other`, in their original order.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import array as A
    >>> fp.pipe([1, 2, 3, 4, 5], A.diff([1, 3, 5]))
    [2, 4]
    >>> fp.pipe([1, 2, 3, 4, 5], A.diff([1, 3, 5]), A.diff([2, 4]))
    []

    ```
    """
    excluded = list(other)
    return [x for x in array if x not in excluded]


@dual(2)
def intersection[T](array: Iterable[T], other: Iterable[T]) -> list[T]:
    """Return the unique elements of `array` also present in `other`, in their original order.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import array as A
    >>> fp.pipe([1, 2, 3, 4, 5], A.intersection([5, 3, 1]))
    [1, 3, 5]
    >>> A.intersection([1, 2, 1, 1, 3], [1])
    [1]

    ```
    """
    kept = list(other)
    return list(cz.itertoolz.unique(x for x in array if x in kept))


@dual(2)
def union[T](array: Iterable[T], other: Iterable[T]) -> list[T]:
    """Return the unique elements of both inputs, in order of first appearance.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import array as A
    >>> fp.pipe([2, 4, 6], A.union([1, 3, 5]))
    [2, 4, 6, 1, 3, 5]
    >>> A.union([1, 2, 1, 1, 3], [1])
    [1, 2, 3]

    ```
    """
    return list(cz.itertoolz.unique(cz.itertoolz.concat((array, other))))


def uniq[T](array: Iterable[T]) -> list[T]:
    """Remove duplicates, keeping the first occurrence of each element.

    Example:
    ```python
    >>> from fpkit import array as A
    >>> A.uniq([1, 2, 1, 1, 3])
    [1, 2, 3]

    ```
    """
    return list(cz.itertoolz.unique(array))


@dual(2)
def drop[T](array: Sequence[T], n: int) -> Option[list[T]]:
    """Drop the first `n` elements. `NONE` if `n` is negative.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import array as A
    >>> fp.pipe([1, 2, 3, 4, 5], A.drop(2))
    Some(value=[3, 4, 5])
    >>> fp.pipe([1, 2, 3, 4, 5], A.drop(6))
    Some(value=[])
    >>> fp.pipe([1, 2, 3, 4, 5], A.drop(-1))
    NONE

    ```
    """
    if n < 0:
        return NONE
    return Some(list(array[n:]))


@dual(2)
def take[T](array: Sequence[T], n: int) -> Option[list[T]]:
    """Keep the first `n` elements. `NONE` if `n` is negative.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import array as A
    >>> fp.pipe([1, 2, 3, 4, 5], A.take(3))
    Some(value=[1, 2, 3])
    >>> fp.pipe([1, 2, 3, 4, 5], A.take(10))
    Some(value=[1, 2, 3, 4, 5])
    >>> fp.pipe([1, 2, 3, 4, 5], A.take(-1))
    NONE

    ```
    """
    if n < 0:
        return NONE
    return Some(list(array[:n]))


@dual(2)
def filter[T](array: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    """Keep the elements matching `predicate`.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import array as A
    >>> fp.pipe([1, 2, 3, 4, 5], A.filter(lambda n: n % 2 == 0))
    [2, 4]

    ```
    """
    return [x for x in array if predicate(x)]


@dual(2)
def reject[T](array: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    """Remove the elements matching `predicate`.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import array as A
    >>> fp.pipe([1, 2, 3, 4, 5], A.reject(lambda n: n > 3))
    [1, 2, 3]

    ```
    """
    return list(cz.itertoolz.remove(predicate, array))


@dual(2)
def find[T](array: Iterable[T], predicate: Callable[[T], bool]) -> Option[T]:
    """Return the first element matching `predicate`.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import array as A
    >>> fp.pipe([1, 2, 3, 4, 5], A.find(lambda n: n > 3))
    Some(value=4)
    >>> fp.pipe([1, 2, 3, 4, 5], A.find(lambda n: n < 0))
    NONE

    ```
    """
    return next((Some(x) for x in array if predicate(x)), NONE)


@dual(2)
def find_index[T](array: Iterable[T], predicate: Callable[[T], bool]) -> Option[int]:
    """Return the index of the first element matching `predicate`.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import array as A
    >>> fp.pipe([1, 2, 3, 4, 5], A.find_index(lambda n: n > 3))
    Some(value=3)
    >>> fp.pipe([1, 2, 3, 4, 5], A.find_index(lambda n: n < 0))
    NONE

    ```
    """
    return next((Some(i) for i in mit.locate(array, predicate)), NONE)


def flatten(array: Iterable[Any]) -> list[Any]:
    """Flatten arbitrarily nested iterables. Strings and bytes are kept whole.

    Example:
    ```python
    >>> from fpkit import array as A
    >>> A.flatten([1, 2, [3, 4, [5, 6]], 7, 8])
    [1, 2, 3, 4, 5, 6, 7, 8]
    >>> A.flatten([["ab", "cd"], ["ef"]])
    ['ab', 'cd', 'ef']

    ```
    """
    return list(mit.collapse(array))


def head[T](array: Sequence[T]) -> Option[T]:
    """Return the first element.

    Example:
    ```python
    >>> from fpkit import array as A
    >>> A.head([1, 2, 3]), A.head([])
    (Some(value=1), NONE)

    ```
    """
    return Some(array[0]) if array else NONE


def last[T](array: Sequence[T]) -> Option[T]:
    """Return the last element.

    Example:
    ```python
    >>> from fpkit import array as A
    >>> A.last([1, 2, 3]), A.last([])
    (Some(value=3), NONE)

    ```
    """
    return Some(array[-1]) if array else NONE


def tail[T](array: Sequence[T]) -> Option[list[T]]:
    """Return every element but the first. `NONE` for an empty input.

    Example:
    ```python
    >>> from fpkit import array as A
    >>> A.tail([1, 2, 3]), A.tail([1]), A.tail([])
    (Some(value=[2, 3]), Some(value=[]), NONE)

    ```
    """
    return Some(list(array[1:])) if array else NONE


@dual(2)
def intersperse[T](array: Iterable[T], element: T) -> list[T]:
    """Insert `element` between each pair of elements.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import array as A
    >>> fp.pipe([1, 2, 3], A.intersperse(0))
    [1, 0, 2, 0, 3]

    ```
    """
    return list(cz.itertoolz.interpose(element, array))


@dual(2)
def map[T, U](array: Iterable[T], f: Callable[[T], U]) -> list[U]:
    """Apply `f` to each element.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import array as A
    >>> fp.pipe([1, 2, 3], A.map(lambda n: n * 2))
    [2, 4, 6]

    ```
    """
    return [f(x) for x in array]


def length(array: Sequence[Any]) -> int:
    """Return the number of elements.

    Example:
    ```python
    >>> from fpkit import array as A
    >>> A.length([1, 2, 3])
    3

    ```
    """
    return len(array)


def max[T](array: Iterable[T]) -> Option[T]:
    """Return the largest element, or `NONE` for an empty input.

    Example:
    ```python
    >>> from fpkit import array as A
    >>> A.max([1, 5, 3]), A.max([])
    (Some(value=5), NONE)

    ```
    """
    return _extremum(builtins.max, array)  # type: ignore[arg-type]


def min[T](array: Iterable[T]) -> Option[T]:
    """Return the smallest element, or `NONE` for an empty input.

    Example:
    ```python
    >>> from fpkit import array as A
    >>> A.min([4, 1, 3]), A.min([])
    (Some(value=1), NONE)

    ```
    """
    return _extremum(builtins.min, array)  # type: ignore[arg-type]


def _extremum[T](func: Callable[[list[T]], T], array: Iterable[T]) -> Option[T]:
    data = list(array)
    return Some(func(data)) if data else NONE


def sum(array: Iterable[float]) -> float:
    """Return the sum of the elements. `0` for an empty input.

    Example:
    ```python
    >>> from fpkit import array as A
    >>> A.sum([1, 2, 3, 4, 5])
    15

    ```
    """
    return builtins.sum(array)


def product(array: Iterable[float]) -> float:
    """Return the product of the elements. `1` for an empty input.

    Example:
    ```python
    >>> from fpkit import array as A
    >>> A.product([1, 2, 3, 4, 5])
    120

    ```
    """
    return math.prod(array)


@dual(2)
def partition[T](
    array: Iterable[T], predicate: Callable[[T], bool]
) -> tuple[list[T], list[T]]:
    """Split the elements into those matching `predicate` and the others.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import array as A, guards
    >>> fp.pipe([1, 2, 3, 4, 5], A.partition(lambda n: n % 2 == 0))
    ([2, 4], [1, 3, 5])
    >>> A.partition(["a", 1, "b", 2, "c"], guards.is_number)
    ([1, 2], ['a', 'b', 'c'])

    ```
    """
    rest, matching = mit.partition(predicate, array)
    return list(matching), list(rest)


@dual(3)
def reduce[T, U](array: Iterable[T], f: Callable[[U, T], U], initial: U) -> U:
    """Fold the elements from the left, starting from `initial`.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import array as A
    >>> fp.pipe([1, 2, 3, 4, 5], A.reduce(lambda acc, n: acc + n, 0))
    15

    ```
    """
    return functools.reduce(f, array, initial)


def reverse[T](array: Iterable[T]) -> list[T]:
    """Return the elements in reverse order.

    Example:
    ```python
    >>> from fpkit import array as A
    >>> A.reverse([1, 2, 3])
    [3, 2, 1]

    ```
    """
    return list(reversed(list(array)))


def shuffle[T](array: Iterable[T]) -> list[T]:
    """Return the elements in a random order.

    Example:
    ```python
    >>> from fpkit import array as A
    >>> sorted(A.shuffle([3, 1, 2]))
    [1, 2, 3]

    ```
    """
    data = list(array)
    return random.sample(data, k=len(data))


def sort[T](array: Iterable[T]) -> list[T]:
    """Return the elements in ascending order.

    Example:
    ```python
    >>> from fpkit import array as A
    >>> A.sort(["d", "a", "c", "b"])
    ['a', 'b', 'c', 'd']

    ```
    """
    return sorted(array)  # type: ignore[type-var]


@dual(2)
def sort_by[T](array: Iterable[T], key: Callable[[T], Any]) -> list[T]:
    """Return the elements ordered by `key`.

    Example:
    ```python
    >>> import fpkit as fp
    >>> from fpkit import array as A
    >>> fp.pipe([1, 2, 3, 4, 5], A.sort_by(lambda n: -n))
    [5, 4, 3, 2, 1]

    ```
    """
    return sorted(array, key=key)
