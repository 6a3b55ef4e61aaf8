"""Tests for the Option type and the `fpkit.option` functions."""

import asyncio

import pytest

import fpkit as fp
from fpkit import option as O


class TestConstructors:
    """Test the ways of building an Option."""

    def test_some_wraps_none(self) -> None:
        """`some` always produces `Some`, even for `None`."""
        assert O.some(None) == fp.Some(None)
        assert O.some(None).is_some()

    def test_none_is_shared(self) -> None:
        """`none` is the `NONE` singleton."""
        assert O.none is fp.NONE

    def test_from_nullable(self) -> None:
        """Only `None` produces `NONE`."""
        assert O.from_nullable(1) == O.some(1)
        assert O.from_nullable(None) is O.none
        assert O.from_nullable(False) == O.some(False)
        assert O.from_nullable(0) == O.some(0)
        assert O.from_nullable("") == O.some("")

    def test_from_falsy(self) -> None:
        """Any falsy value, NaN included, produces `NONE`."""
        assert O.from_falsy(1) == O.some(1)
        for value in (0, "", False, None, [], float("nan")):
            assert O.from_falsy(value) is O.none

    def test_from_exception(self) -> None:
        """Raised exceptions are turned into `NONE`."""

        def throw_if_not_one(x: int) -> int:
            if x != 1:
                msg = "x is not 1"
                raise ValueError(msg)
            return x

        assert O.from_exception(lambda: throw_if_not_one(1)) == O.some(1)
        assert O.from_exception(lambda: throw_if_not_one(2)) is O.none

    def test_from_exception_lets_base_exceptions_through(self) -> None:
        """Only `Exception` subclasses are captured."""

        def interrupt() -> int:
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            O.from_exception(interrupt)

    def test_from_function_is_deprecated(self) -> None:
        """The old name still works but warns."""
        with pytest.warns(DeprecationWarning, match="from_exception"):
            assert O.from_function(lambda: 1) == O.some(1)

    def test_from_awaitable(self) -> None:
        """Awaitables are awaited then wrapped."""

        async def value() -> int:
            return 1

        async def failure() -> int:
            msg = "boom"
            raise RuntimeError(msg)

        assert asyncio.run(O.from_awaitable(value())) == O.some(1)
        assert asyncio.run(O.from_awaitable(failure())) is O.none


class TestPredicates:
    """Test `is_option`, `is_some` and `is_none`."""

    def test_is_option(self) -> None:
        """Instances and well-shaped mappings are options."""
        assert O.is_option(O.some(1))
        assert O.is_option(O.none)
        assert O.is_option({"type": "none"})
        assert O.is_option({"type": "some", "value": None})
        for value in (1, "1", True, None, {"type": "some"}, {"type": ["some"]}):
            assert not O.is_option(value)

    def test_is_some_is_none(self) -> None:
        """Tag tests."""
        assert O.is_some(O.some(1))
        assert not O.is_some(O.none)
        assert O.is_none(O.none)
        assert not O.is_none(O.some(1))


class TestDestructors:
    """Test the unwrap family."""

    def test_expect(self) -> None:
        """`expect` returns the value or raises with the message."""
        assert O.expect(O.some(1), "error") == 1
        assert O.expect("error")(O.some(1)) == 1
        with pytest.raises(fp.OptionUnwrapError, match="no user id"):
            O.expect(O.none, "no user id")

    def test_unwrap(self) -> None:
        """`unwrap` works in both call shapes."""
        assert fp.pipe(O.some(1), O.unwrap()) == 1
        assert O.unwrap(O.some(1)) == 1
        with pytest.raises(fp.OptionUnwrapError):
            O.unwrap(O.none)

    def test_unwrap_error_is_runtime_error(self) -> None:
        """Unwrap failures are `RuntimeError`s."""
        assert issubclass(fp.OptionUnwrapError, RuntimeError)

    def test_unwrap_or(self) -> None:
        """`unwrap_or` never raises."""
        assert O.unwrap_or(O.some(1), 2) == 1
        assert O.unwrap_or(O.none, 2) == 2
        assert fp.pipe(O.none, O.unwrap_or("Not Found")) == "Not Found"

    def test_unwrap_or_with_option_default(self) -> None:
        """A default that is itself an Option is never mistaken for the container."""
        assert O.unwrap_or(O.some(9))(O.none) == O.some(9)
        assert O.unwrap_or(O.none, O.some(9)) == O.some(9)

    def test_unwrap_or_else(self) -> None:
        """The fallback is computed lazily."""
        calls: list[int] = []

        def fallback() -> int:
            calls.append(1)
            return 2

        assert O.unwrap_or_else(O.some(1), fallback) == 1
        assert calls == []
        assert O.unwrap_or_else(O.none, fallback) == 2
        assert calls == [1]

    @pytest.mark.parametrize("value", [0, "", None, "x", [1]])
    def test_from_nullable_round_trip(self, value: object) -> None:
        """`unwrap_or(from_nullable(v), fb)` is `v` unless `v` is `None`."""
        fallback = object()
        expected = fallback if value is None else value
        assert O.unwrap_or(O.from_nullable(value), fallback) is expected


class TestTransformers:
    """Test map, flat_map, match, tap and zip."""

    def test_map(self) -> None:
        """`map` only touches `Some`."""
        assert O.map(O.some(3), lambda n: n + 1) == O.some(4)
        assert O.map(O.none, lambda n: n + 1) is O.none
        assert fp.pipe(O.some(1), O.map(lambda x: x + 1)) == O.some(2)

    def test_map_identity(self) -> None:
        """Mapping the identity gives an equal option."""
        for opt in (O.some(1), O.none):
            assert O.map(opt, lambda x: x) == opt

    def test_map_does_not_mutate(self) -> None:
        """The receiver is left untouched."""
        opt = O.some(1)
        O.map(opt, lambda x: x + 1)
        assert opt == O.some(1)

    def test_flat_map(self) -> None:
        """`flat_map` chains and short-circuits on `NONE`."""
        assert fp.pipe(O.some(1), O.flat_map(lambda x: O.some(x + 1))) == O.some(2)
        assert O.flat_map(O.some(1), lambda _: O.none) is O.none

    def test_flat_map_does_not_call_on_none(self) -> None:
        """The function is never called for `NONE`."""

        def boom(_: object) -> fp.Option[int]:
            raise AssertionError

        assert O.flat_map(O.none, boom) is O.none

    def test_match(self) -> None:
        """Exactly one handler is called."""
        calls: list[str] = []

        def on_some(x: int) -> int:
            calls.append("some")
            return x + 1

        def on_none() -> int:
            calls.append("none")
            return 0

        assert fp.pipe(O.some(1), O.match(on_some, on_none)) == 2
        assert O.match(O.none, on_some, on_none) == 0
        assert calls == ["some", "none"]

    def test_tap(self) -> None:
        """`tap` runs its side effect on `Some` only and returns the receiver."""
        seen: list[int] = []
        opt = O.some(1)
        assert fp.pipe(opt, O.tap(seen.append)) is opt
        assert fp.pipe(O.none, O.tap(seen.append)) is O.none
        assert seen == [1]

    def test_zip(self) -> None:
        """`zip` is a conjunction."""
        assert O.zip(O.some(1), O.some(2)) == O.some((1, 2))
        assert O.zip(O.some(1), O.none) is O.none
        assert O.zip(O.none, O.some(2)) is O.none
        assert O.zip(O.none, O.none) is O.none
        x = fp.pipe(
            O.from_nullable("hello"),
            O.zip(O.from_nullable("world")),
            O.expect("error"),
        )
        assert x == ("hello", "world")

    def test_or_else_and_filter(self) -> None:
        """Fallbacks and filtering."""
        assert O.or_else(O.none, lambda: O.some(2)) == O.some(2)
        assert O.or_else(O.some(1), lambda: O.some(2)) == O.some(1)
        assert fp.pipe(O.some(4), O.filter(lambda n: n > 3)) == O.some(4)
        assert fp.pipe(O.some(1), O.filter(lambda n: n > 3)) is O.none

    def test_ok_or(self) -> None:
        """Options convert into results."""
        assert O.ok_or(O.some(1), "missing") == fp.Ok(1)
        assert O.ok_or(O.none, "missing") == fp.Err("missing")


class TestShape:
    """Test the structural shape conversions."""

    def test_to_dict(self) -> None:
        """Both variants expose their tagged shape."""
        assert O.to_dict(O.some(1)) == {"type": "some", "value": 1}
        assert fp.pipe(O.none, O.to_dict()) == {"type": "none"}

    def test_from_dict(self) -> None:
        """Shapes are parsed back."""
        assert O.from_dict({"type": "some", "value": 1}) == O.some(1)
        assert O.from_dict({"type": "none"}) is O.none

    @pytest.mark.parametrize(
        "data", [{}, {"type": "some"}, {"type": "ok", "value": 1}, {"value": 1}]
    )
    def test_from_dict_rejects_bad_shapes(self, data: dict[str, object]) -> None:
        """Anything else is a `ValueError`."""
        with pytest.raises(ValueError, match="not an Option shape"):
            O.from_dict(data)


class TestMethods:
    """Test the method API used in chains."""

    def test_chain(self) -> None:
        """Methods mirror the functions."""
        result = (
            fp.Some("  Hello ")
            .map(str.strip)
            .filter(bool)
            .flat_map(lambda s: fp.Some(len(s)))
            .unwrap_or(0)
        )
        assert result == 5

    def test_into(self) -> None:
        """Curried functions plug into `into`."""
        assert fp.Some(2).into(O.map(lambda x: x * 2)) == fp.Some(4)
        assert fp.NONE.into(O.unwrap_or, 3) == 3

    def test_equality_and_hash(self) -> None:
        """Options compare structurally."""
        assert fp.Some(1) == fp.Some(1)
        assert fp.Some(1) != fp.Some(2)
        assert fp.Some(1) != fp.Ok(1)
        assert fp.NoneOption() == fp.NONE
        assert len({fp.Some(1), fp.Some(1), fp.NONE}) == 2

    def test_immutable(self) -> None:
        """Fields cannot be reassigned."""
        opt = fp.Some(1)
        with pytest.raises(AttributeError):
            opt.value = 2  # type: ignore[misc]

    def test_repr(self) -> None:
        """Reprs show the variant."""
        assert repr(fp.Some(42)) == "Some(value=42)"
        assert repr(fp.NONE) == "NONE"
