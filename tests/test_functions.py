"""Tests for `pipe` and `compose`."""

import fpkit as fp
from fpkit import option as O


class TestPipe:
    """Test left-to-right application."""

    def test_order(self) -> None:
        """Functions run left to right."""
        assert fp.pipe(5, lambda x: x + 1, lambda x: x * 2) == 12

    def test_identity(self) -> None:
        """Without functions the value comes back untouched."""
        data = [1, 2]
        assert fp.pipe(data) is data

    def test_many_steps(self) -> None:
        """Long pipelines go past the typed overloads."""
        assert fp.pipe(0, *[lambda x: x + 1] * 10) == 10

    def test_with_curried_helpers(self) -> None:
        """Curried helpers are the intended pipeline steps."""
        assert fp.pipe(O.from_nullable(3), O.map(lambda x: x + 1), O.unwrap_or(0)) == 4


class TestCompose:
    """Test deferred composition."""

    def test_order(self) -> None:
        """`compose(f, g)(x)` is `g(f(x))`."""
        fn = fp.compose(lambda n: n + 1, lambda n: n * 10)
        assert fn(1) == 20
        assert fn(2) == 30

    def test_first_function_takes_many_arguments(self) -> None:
        """Positional and keyword arguments go to the first function."""
        fn = fp.compose(lambda a, b=0: a + b, str)
        assert fn(1, b=2) == "3"

    def test_identity(self) -> None:
        """An empty composition is the identity."""
        assert fp.compose()(7) == 7

    def test_matches_pipe(self) -> None:
        """`compose(*fns)(x)` equals `pipe(x, *fns)`."""
        fns = (lambda x: x - 1, abs, str)
        assert fp.compose(*fns)(-4) == fp.pipe(-4, *fns)
