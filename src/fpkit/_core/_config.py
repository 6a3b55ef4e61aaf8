from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from pprint import pformat
from typing import Any

import cytoolz as cz


@dataclass(slots=True)
class Config:
    """Global formatting settings used by the `Some`, `Ok` and `Err` reprs.

    Args:
        max_items (int): Number of items of a collection payload shown before truncation.
        depth (int): Maximum nesting depth rendered.
        width (int): Line width passed to `pprint.pformat`.
    """

    max_items: int = 20
    depth: int = 3
    width: int = 80

    def value_repr(self, v: object) -> str:
        match v:
            case Mapping() if len(v) > self.max_items:  # pyright: ignore[reportUnknownArgumentType]
                return self._truncated(
                    dict(cz.itertoolz.take(self.max_items, v.items()))  # pyright: ignore[reportUnknownArgumentType, reportUnknownMemberType]
                )
            case list() | tuple() if len(v) > self.max_items:  # pyright: ignore[reportUnknownArgumentType]
                return self._truncated(v[: self.max_items])  # pyright: ignore[reportUnknownArgumentType]
            case _:
                return self._format(v)

    def _format(self, v: object) -> str:
        return pformat(
            v, depth=self.depth, width=self.width, compact=True, sort_dicts=False
        )

    def _truncated(self, v: object) -> str:
        return f"{self._format(v)}..."


_CONFIG = Config()


def get_config() -> Config:
    """Return the process-wide `Config` instance.

    Example:
    ```python
    >>> import fpkit as fp
    >>> fp.get_config().max_items
    20

    ```
    """
    return _CONFIG


def set_config(**kwargs: Any) -> Config:  # noqa: ANN401
    """Update the process-wide `Config` in place.

    Args:
        **kwargs (Any): Fields of `Config` to override.

    Returns:
        Config: The updated configuration.

    Raises:
        TypeError: If a keyword is not a `Config` field.

    Example:
    ```python
    >>> import fpkit as fp
    >>> fp.set_config(max_items=2)
    Config(max_items=2, depth=3, width=80)
    >>> fp.Some([1, 2, 3])
    Some(value=[1, 2]...)
    >>> fp.set_config(max_items=20).max_items
    20

    ```
    """
    known = {f.name for f in fields(Config)}
    unknown = kwargs.keys() - known
    if unknown:
        msg = f"unknown config field(s): {', '.join(sorted(unknown))}"
        raise TypeError(msg)
    for name, value in kwargs.items():
        setattr(_CONFIG, name, value)
    return _CONFIG
