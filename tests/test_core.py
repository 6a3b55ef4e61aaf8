"""Tests for the call-shape decorator, deprecation helper and global config."""

from collections.abc import Iterator

import pytest

import fpkit as fp
from fpkit import option as O
from fpkit import result as R
from fpkit._core import deprecated, dual


@dual(3)
def _clamp(n: int, low: int, high: int) -> int:
    """Clamp `n` between `low` and `high`."""
    return max(low, min(n, high))


class TestDual:
    """Test count-based dispatch."""

    def test_data_first(self) -> None:
        """A full call evaluates immediately."""
        assert _clamp(15, 0, 10) == 10

    def test_curried(self) -> None:
        """A call missing the container returns a unary function."""
        clamp = _clamp(0, 10)
        assert clamp(-5) == 0
        assert clamp(5) == 5

    def test_curried_keeps_metadata(self) -> None:
        """The curried closure keeps the name and the docstring."""
        clamp = _clamp(0, 10)
        assert clamp.__name__ == "_clamp"
        assert clamp.__doc__ == "Clamp `n` between `low` and `high`."

    @pytest.mark.parametrize("args", [(), (1,), (1, 2, 3, 4)])
    def test_wrong_count(self, args: tuple[int, ...]) -> None:
        """Other counts raise a `TypeError` naming both shapes."""
        with pytest.raises(TypeError, match="takes 2 or 3 positional arguments"):
            _clamp(*args)

    def test_expects_container(self) -> None:
        """A container of the wrong type is rejected in both forms."""
        with pytest.raises(TypeError, match="expected Option, got int"):
            O.unwrap_or(1, 2)
        with pytest.raises(TypeError, match="expected Option, got Ok"):
            O.unwrap_or(0)(fp.Ok(1))
        with pytest.raises(TypeError, match="expected Result, got Some"):
            R.unwrap(fp.Some(1))

    def test_keywords_are_forwarded(self) -> None:
        """Keyword arguments do not count as positional."""

        @dual(2)
        def scale(n: int, factor: int, *, offset: int = 0) -> int:
            return n * factor + offset

        assert scale(2, 3, offset=1) == 7
        assert scale(3, offset=1)(2) == 7

    def test_configuration_by_keyword_is_rejected(self) -> None:
        """Naming a positional argument never yields a silent curried closure."""
        with pytest.raises(TypeError, match="'default' positionally"):
            O.unwrap_or(O.none, default=3)
        with pytest.raises(TypeError, match="'high', 'low' positionally"):
            _clamp(5, low=0, high=10)
        with pytest.raises(TypeError, match="'res' positionally"):
            R.unwrap(res=fp.Ok(1))


class TestDeprecated:
    """Test the deprecation decorator."""

    def test_warns_and_forwards(self) -> None:
        """The wrapped function still runs."""

        @deprecated("Use `new` instead.")
        def old(x: int) -> int:
            return x + 1

        with pytest.warns(DeprecationWarning, match="`old` is deprecated: Use `new`"):
            assert old(1) == 2


@pytest.fixture
def config() -> Iterator[fp.Config]:
    """Restore the default configuration after each test."""
    yield fp.get_config()
    fp.set_config(max_items=20, depth=3, width=80)


class TestConfig:
    """Test the global repr configuration."""

    def test_defaults(self, config: fp.Config) -> None:
        """Defaults are exposed through `get_config`."""
        assert (config.max_items, config.depth, config.width) == (20, 3, 80)

    def test_set_config_updates_in_place(self, config: fp.Config) -> None:
        """`set_config` mutates the shared instance."""
        assert fp.set_config(max_items=3) is config
        assert fp.get_config().max_items == 3

    def test_unknown_field(self, config: fp.Config) -> None:
        """Unknown fields are rejected and nothing is changed."""
        with pytest.raises(TypeError, match="unknown config field"):
            fp.set_config(max_items=1, colour="red")
        assert config.max_items == 20

    def test_truncation(self, config: fp.Config) -> None:  # noqa: ARG002
        """Long payloads are cut with a trailing ellipsis."""
        fp.set_config(max_items=3)
        assert repr(fp.Some(list(range(10)))) == "Some(value=[0, 1, 2]...)"
        assert repr(fp.Ok((1, 2, 3))) == "Ok(value=(1, 2, 3))"
        assert repr(fp.Err({"a": 1, "b": 2, "c": 3, "d": 4})) == (
            "Err(error={'a': 1, 'b': 2, 'c': 3}...)"
        )

    def test_scalars(self, config: fp.Config) -> None:  # noqa: ARG002
        """Scalars render as their plain repr."""
        assert repr(fp.Err("boom")) == "Err(error='boom')"
        assert repr(fp.Some(None)) == "Some(value=None)"


class TestPipeable:
    """Test `into` and `inspect`."""

    def test_into(self) -> None:
        """`into` forwards extra arguments."""
        assert fp.Ok(2).into(R.map, lambda x: x + 1) == fp.Ok(3)

    def test_inspect(self) -> None:
        """`inspect` returns the receiver."""
        seen: list[fp.Option[int]] = []
        opt = fp.Some(1)
        assert opt.inspect(seen.append) is opt
        assert seen == [opt]
