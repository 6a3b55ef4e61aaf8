"""Tests for slot usage in fpkit classes."""

import fpkit as fp


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(fp.Some(42))
    assert _check_slots(fp.NoneOption())
    assert _check_slots(fp.NONE)
    assert _check_slots(fp.Err[int, object](42))
    assert _check_slots(fp.Ok[int, object](42))
    assert _check_slots(fp.get_config())
