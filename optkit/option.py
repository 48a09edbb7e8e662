"""Option maps and typed lookups of the values stored in them."""

from __future__ import annotations

import types
import typing
from collections.abc import Callable, Sequence
from typing import Any

Options = dict[str, Any]
"""A mapping from option ids to stored values."""

Option = Callable[[Options], None]
"""A callable that modifies an options map in place."""


def _is_union(kind: Any) -> bool:
    origin = typing.get_origin(kind)
    return origin is typing.Union or origin is types.UnionType


def _base(kind: Any) -> Any:
    """Return the runtime class to check against, or None to accept anything."""
    if kind is Any or kind is object or kind is None:
        return None
    origin = typing.get_origin(kind)
    return origin if origin is not None else kind


def _matches(value: Any, kind: Any) -> bool:
    """Tell whether ``value`` is acceptable as an instance of ``kind``."""
    if _is_union(kind):
        return any(_matches(value, arg) for arg in typing.get_args(kind))
    base = _base(kind)
    if base is None or not isinstance(base, type):
        return True
    if isinstance(value, bool) and base in (int, float):
        return False
    if base is float and isinstance(value, int):
        return True
    return isinstance(value, base)


def _zero(kind: Any) -> Any:
    """Return the zero value of ``kind``: what calling it with no arguments gives."""
    if _is_union(kind):
        return None
    base = _base(kind)
    if base is None or not callable(base):
        return None
    try:
        return base()
    except Exception:
        return None


def get_with_default(opts: Options, key: str, default: Any, kind: Any = None) -> Any:
    """Return the value stored under ``key`` if it is a ``kind``, else ``default``.

    When ``kind`` is omitted it is taken from the type of ``default``.
    """
    if kind is None:
        kind = object if default is None else type(default)
    if key in opts:
        value = opts[key]
        if _matches(value, kind):
            return value
    return default


def get(opts: Options, key: str, kind: Any) -> Any:
    """Return the value stored under ``key``, or the zero value of ``kind``."""
    return get_with_default(opts, key, _zero(kind), kind)


def get_many_with_default(
    opts: Options,
    key: str,
    defaults: Sequence[Any],
    kinds: Sequence[Any] | None = None,
) -> tuple[Any, ...]:
    """Return the several values stored under ``key`` as a tuple.

    If nothing usable is stored there, ``defaults`` is returned instead. A stored
    sequence with an element of the wrong type raises TypeError.
    """
    defaults = tuple(defaults)
    if kinds is None:
        kinds = tuple(object if d is None else type(d) for d in defaults)
    kinds = tuple(kinds)
    if not kinds:
        raise ValueError("at least one value type is required")
    if len(kinds) != len(defaults):
        raise ValueError(
            f"got {len(defaults)} default(s) for {len(kinds)} value type(s)"
        )

    stored = opts.get(key)
    if isinstance(stored, (list, tuple)) and len(stored) >= len(kinds):
        values = tuple(stored[: len(kinds)])
        for index, (value, kind) in enumerate(zip(values, kinds)):
            if not _matches(value, kind):
                raise TypeError(
                    f"option {key!r}: element {index} is {type(value).__name__}, "
                    f"expected {kind!r}"
                )
        return values
    return defaults


def get_many(opts: Options, key: str, kinds: Sequence[Any]) -> tuple[Any, ...]:
    """Return the several values stored under ``key``, or their zero values."""
    kinds = tuple(kinds)
    return get_many_with_default(opts, key, tuple(_zero(k) for k in kinds), kinds)