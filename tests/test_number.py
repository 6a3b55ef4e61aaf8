"""Tests for the `fpkit.number` helpers and `fpkit.guards`."""

import pytest

import fpkit as fp
from fpkit import array as A
from fpkit import guards
from fpkit import number as N


class TestNumber:
    """Test parity and gcd."""

    @pytest.mark.parametrize(("n", "is_even"), [(0, True), (1, False), (-2, True), (-3, False)])
    def test_parity(self, n: int, *, is_even: bool) -> None:
        """`even` and `odd` are complements, negatives included."""
        assert N.even(n) is is_even
        assert N.odd(n) is not is_even

    def test_gcd(self) -> None:
        """The result is never negative."""
        assert N.gcd(-12, -8) == 4
        assert N.gcd(0, 5) == 5
        assert fp.pipe(12, N.gcd(18)) == 6

    def test_as_predicate(self) -> None:
        """Parity checks plug into array helpers."""
        assert A.filter(range(6), N.even) == [0, 2, 4]


class TestGuards:
    """Test the primitive type predicates."""

    def test_is_number_excludes_bool(self) -> None:
        """`bool` is not considered a number."""
        assert guards.is_number(0)
        assert guards.is_number(float("inf"))
        assert not guards.is_number(False)
        assert not guards.is_number("1")

    def test_is_nan(self) -> None:
        """Only float NaN is NaN."""
        assert guards.is_nan(float("nan"))
        assert not guards.is_nan(None)

    def test_is_falsy(self) -> None:
        """NaN counts as falsy."""
        assert guards.is_falsy(float("nan"))
        assert guards.is_falsy({})
        assert not guards.is_falsy(0.1)

    def test_misc(self) -> None:
        """Simple type checks."""
        assert guards.is_callable(print)
        assert guards.is_str("")
        assert guards.is_mapping({})
        assert not guards.is_mapping([])
        assert guards.is_none(None)
        assert not guards.is_none(fp.NONE)
