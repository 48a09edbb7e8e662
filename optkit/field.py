"""Option fields declared as attributes of an options class."""

from __future__ import annotations

from typing import Any, Callable

from optkit.var import Var


class Field(Var):
    """A typed option key named by the class attribute it is assigned to.

    An explicit ``id`` takes the place of the attribute name.
    """

    def __init__(self, *args: Any, id: str | None = None) -> None:
        super().__init__("" if id is None else id, *args)
        self._named = id is not None

    def __set_name__(self, owner: type, name: str) -> None:
        if not self._named:
            self.key = name
            self._named = True

    def set(self, *args: Any) -> Callable[[dict[str, Any]], None]:
        """Return an option that stores the given values under this field."""
        return super().set(*args)

    def replace(self, fn: Callable[..., Any]) -> Callable[[dict[str, Any]], None]:
        """Return an option that rewrites this field's values through ``fn``."""
        return super().replace(fn)

    def _storage_key(self) -> str:
        if not self._named:
            raise RuntimeError(
                f"{self!r} has no id; give it one or declare it in a class"
            )
        return self.key