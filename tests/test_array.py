"""Tests for the `fpkit.array` helpers."""

import pytest

import fpkit as fp
from fpkit import array as A
from fpkit import option as O


class TestLookups:
    """Test the helpers returning an Option."""

    def test_at(self) -> None:
        """Indices out of range give `NONE`."""
        data = [1, 2, 3]
        assert A.at(data, 0) == fp.Some(1)
        assert A.at(data, -1) == fp.Some(3)
        assert A.at(data, 3) is fp.NONE
        assert A.at(data, -4) is fp.NONE

    def test_head_last_tail(self) -> None:
        """Empty inputs give `NONE`."""
        assert A.head([]) is fp.NONE
        assert A.last([]) is fp.NONE
        assert A.tail([]) is fp.NONE
        assert A.tail([1]) == fp.Some([])

    def test_find(self) -> None:
        """The first match wins, even when it is falsy."""
        assert A.find([0, 1, 0], lambda n: n == 0) == fp.Some(0)
        assert A.find_index([5, 6, 7], lambda n: n > 5) == fp.Some(1)

    def test_take_drop(self) -> None:
        """Negative counts give `NONE`."""
        assert A.take([1, 2, 3], 0) == fp.Some([])
        assert A.drop([1, 2, 3], 0) == fp.Some([1, 2, 3])
        assert A.take([1, 2, 3], -2) is fp.NONE
        assert A.drop([1, 2, 3], -2) is fp.NONE

    def test_max_min(self) -> None:
        """Extremes are options."""
        assert A.max([3, 9, 1]) == fp.Some(9)
        assert A.min(iter([3, 9, 1])) == fp.Some(1)
        assert A.max([]) is fp.NONE


class TestSetLike:
    """Test the order-preserving set operations."""

    def test_diff(self) -> None:
        """Order of the first input is kept."""
        assert A.diff([5, 1, 4, 2], [1]) == [5, 4, 2]

    def test_intersection_union(self) -> None:
        """Duplicates are removed."""
        assert A.intersection([3, 1, 3, 2], [2, 3]) == [3, 2]
        assert A.union([3, 1, 3], [1, 4, 4]) == [3, 1, 4]

    def test_unhashable_elements(self) -> None:
        """Unhashable elements are supported by `diff`."""
        assert A.diff([[1], [2]], [[1]]) == [[2]]


class TestTransforms:
    """Test the list-producing helpers."""

    def test_inputs_are_not_mutated(self) -> None:
        """Every helper returns a new list."""
        data = [3, 1, 2]
        A.append(data, 4)
        A.prepend(data, 0)
        A.sort(data)
        A.reverse(data)
        A.shuffle(data)
        assert data == [3, 1, 2]

    def test_clone(self) -> None:
        """Clones are equal but distinct."""
        data = [1, 2]
        copy = A.clone(data)
        assert copy == data
        assert copy is not data

    def test_flatten(self) -> None:
        """Nesting is removed at any depth, strings are atoms."""
        assert A.flatten([1, [2, [3, ["ab"]]], (4,)]) == [1, 2, 3, "ab", 4]

    def test_partition(self) -> None:
        """Matching elements come first."""
        assert A.partition([1, 2, 3, 4], lambda n: n > 2) == ([3, 4], [1, 2])

    def test_reduce(self) -> None:
        """Folding starts from the initial value."""
        assert A.reduce([], lambda acc, n: acc + n, 10) == 10
        assert fp.pipe(["a", "b"], A.reduce(lambda acc, s: acc + s, "")) == "ab"

    def test_sort_by(self) -> None:
        """Sorting is stable."""
        words = ["bb", "a", "cc", "d"]
        assert A.sort_by(words, len) == ["a", "d", "bb", "cc"]

    def test_shuffle_keeps_elements(self) -> None:
        """Shuffling is a permutation."""
        assert sorted(A.shuffle(range(10))) == list(range(10))

    def test_reject_and_filter_are_complements(self) -> None:
        """Together they cover the input."""
        data = list(range(10))
        even = A.filter(data, lambda n: n % 2 == 0)
        odd = A.reject(data, lambda n: n % 2 == 0)
        assert sorted(even + odd) == data

    def test_aggregates(self) -> None:
        """Empty aggregates use the neutral element."""
        assert A.sum([]) == 0
        assert A.product([]) == 1
        assert A.length([1, 2]) == 2
        assert A.all([], bool)
        assert not A.any([], bool)


class TestCallShapes:
    """Test that every configured helper has both call shapes."""

    @pytest.mark.parametrize(
        ("func", "args"),
        [
            (A.append, (4,)),
            (A.concat, ([9],)),
            (A.map, (str,)),
            (A.intersperse, (0,)),
            (A.sort_by, (lambda n: -n,)),
        ],
    )
    def test_curried_equals_data_first(self, func, args) -> None:  # noqa: ANN001
        """Both forms give the same output."""
        data = [1, 2, 3]
        assert func(*args)(data) == func(data, *args)

    def test_pipeline(self) -> None:
        """Helpers compose with Option functions."""
        total = fp.pipe(
            [1, 2, 3, 4, 5],
            A.filter(lambda n: n % 2 == 1),
            A.map(lambda n: n * 10),
            A.find(lambda n: n > 20),
            O.unwrap_or(0),
        )
        assert total == 30

    def test_wrong_arity(self) -> None:
        """Too many positional arguments is a `TypeError`."""
        with pytest.raises(TypeError, match="append"):
            A.append([1], 2, 3)
