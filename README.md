# optkit

Small building blocks for the "functional options" pattern. Declare the
options a component accepts, let callers pass any number of option
callables, and collect the results into a plain `dict`.

An option is any callable that takes the options `dict` and modifies it in
place. `Field` and `Var` produce such callables from their `set` and
`replace` methods; `build` and `build_with_defaults` apply them in order.

## Installing

```
pip install optkit
```

## Fields on an options class

Declare a class whose attributes are `Field` objects. Each field takes its
key from the attribute name unless an explicit `id` is given. The positional
arguments to `Field` are the types of the values it holds.

```python
from optkit.field import Field
from optkit.build import init_options, build, build_with_defaults
from optkit.option import get

class ServerOptions:
    port = Field(int)
    host = Field(str, id="hostname")

options = init_options(ServerOptions)

opts = build(
    options.port.set(8080),
    options.host.set("localhost"),
    options.port.replace(lambda port: port + 1),
)

get(opts, "port", int)        # 8081
get(opts, "hostname", str)    # "localhost"
```

`init_options(cls)` names every `Field` found on the class and its bases and
returns a bare instance of the class without calling its `__init__`. A field
created outside a class and without an `id` has no key; calling its `set` or
`replace` raises `RuntimeError`.

`replace` receives the current value (or the zero value of the field's type
when nothing usable is stored yet) and returns the new one.

`build_with_defaults` starts from a copy of the defaults, which are never
modified:

```python
defaults = {"hostname": "0.0.0.0"}
opts = build_with_defaults(defaults, options.port.set(80))
# {"hostname": "0.0.0.0", "port": 80}
```

## Standalone keys with `Var`

When there is no options class, a `Var` names a key directly:

```python
from optkit.var import Var
from optkit.build import build
from optkit.option import get_many

size = Var("size", int, int)

opts = build(
    size.set(640, 480),
    size.replace(lambda w, h: (w * 2, h * 2)),
)

get_many(opts, "size", (int, int))   # (1280, 960)
```

A field or var with one type stores its value as is. One with several types
stores its values together as a list under one key; `replace` passes them as
separate arguments and expects a tuple or list of the same length back.

Values are checked against the declared types: `set` raises `TypeError`
straight away when given the wrong number of values or a value of the wrong
type, and the option returned by `replace` raises `TypeError` when applied if
the function returns such values. `bool` is not accepted where `int` or
`float` is declared; an `int` is accepted where `float` is. `typing.Any` and
`object` accept anything, and a union accepts any of its members.

## Reading values

- `get(opts, key, kind)` returns the stored value, or the zero value of
  `kind` (what `kind()` returns, such as `0` or `""`; `None` for `Any` and
  unions) when the key is missing or holds another type.
- `get_with_default(opts, key, default, kind=None)` does the same with your
  default; when `kind` is left out it is the type of `default`.
- `get_many(opts, key, kinds)` and
  `get_many_with_default(opts, key, defaults, kinds=None)` read a group of
  values stored by a multi-valued field or var, as a tuple. If the key is
  missing or does not hold a long enough list or tuple, the defaults (or zero
  values) come back. If it does but an element has the wrong type,
  `TypeError` is raised. A `kinds` of a different length from `defaults`, or
  an empty one, raises `ValueError`.

## Running the tests

```
pip install -e ".[test]"
pytest
```