"""Typed keys naming one or more values in an options map."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from optkit.option import Option, Options, _matches, get, get_many


class Var:
    """A key under which one value, or a fixed number of values, is stored.

    A single value is stored as is; several values are stored as a list.
    """

    def __init__(self, key: str, *args: Any) -> None:
        if not isinstance(key, str):
            raise TypeError(f"key must be a string, not {type(key).__name__}")
        if not args:
            raise TypeError("at least one value type is required")
        self.key = key
        self.kinds = tuple(args)

    def __repr__(self) -> str:
        kinds = ", ".join(getattr(k, "__name__", repr(k)) for k in self.kinds)
        return f"{type(self).__name__}({self.key!r}, {kinds})"

    def _storage_key(self) -> str:
        return self.key

    def _check(self, values: tuple[Any, ...]) -> None:
        if len(values) != len(self.kinds):
            raise TypeError(
                f"{self!r} takes {len(self.kinds)} value(s), got {len(values)}"
            )
        for index, (value, kind) in enumerate(zip(values, self.kinds)):
            if not _matches(value, kind):
                raise TypeError(
                    f"{self!r}: value {index} is {type(value).__name__}, "
                    f"expected {kind!r}"
                )

    def set(self, *args: Any) -> Option:
        """Return an option that stores ``args`` under this key."""
        self._check(args)
        key = self._storage_key()
        single = len(self.kinds) == 1

        def apply(opts: Options) -> None:
            opts[key] = args[0] if single else list(args)

        return apply

    def replace(self, fn: Callable[..., Any]) -> Option:
        """Return an option that replaces the stored values with ``fn`` of them.

        ``fn`` receives the current values (zero values if none are stored) and
        returns the new value, or a tuple of new values when there are several.
        """
        key = self._storage_key()
        kinds = self.kinds

        def apply(opts: Options) -> None:
            if len(kinds) == 1:
                new = fn(get(opts, key, kinds[0]))
                self._check((new,))
                opts[key] = new
                return
            new = fn(*get_many(opts, key, kinds))
            if not isinstance(new, (tuple, list)):
                raise TypeError(
                    f"{self!r}: replacement must return {len(kinds)} values"
                )
            new = tuple(new)
            self._check(new)
            opts[key] = list(new)

        return apply