"""Building options maps from options classes and option callables."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from optkit.field import Field
from optkit.option import Option, Options

_T = TypeVar("_T")


def init_options(cls: type[_T]) -> _T:
    """Name every Field of ``cls`` and return a bare instance of it."""
    if not isinstance(cls, type):
        raise TypeError("init_options requires a class")
    for klass in reversed(cls.__mro__):
        for name, attr in vars(klass).items():
            if isinstance(attr, Field):
                attr.__set_name__(cls, name)
    return cls.__new__(cls)


def build_with_defaults(defaults: Mapping[str, Any] | None, *args: Option) -> Options:
    """Apply ``args`` in order to a copy of ``defaults`` and return the result."""
    opts: Options = dict(defaults) if defaults else {}
    for option in args:
        option(opts)
    return opts


def build(*args: Option) -> Options:
    """Apply ``args`` in order to an empty options map and return it."""
    return build_with_defaults(None, *args)