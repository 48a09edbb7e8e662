import pytest

from optkit.build import build
from optkit.option import get, get_many
from optkit.var import Var


def test_var_set():
    v0 = Var("v0", int)
    v1 = Var("v1", str)
    opts = build(v0.set(42), v1.set("Hello"), v1.replace(lambda s: s + " World"))
    assert get(opts, "v0", int) == 42
    assert get(opts, "v1", str) == "Hello World"


def test_var2_set():
    v = Var("v2", str, int)
    opts = build(v.set("foo", 10), v.replace(lambda s, i: (s + "-bar", i * 2)))
    assert get_many(opts, "v2", (str, int)) == ("foo-bar", 20)


def test_var3_set():
    v = Var("v3", int, int, int)
    opts = build(v.set(1, 2, 3), v.replace(lambda a, b, c: (a + 10, b + 20, c + 30)))
    assert get_many(opts, "v3", (int, int, int)) == (11, 22, 33)


def test_var4_set():
    v = Var("v4", str, str, int, bool)
    opts = build(
        v.set("a", "b", 5, False),
        v.replace(lambda a, b, i, flag: (a + "x", b + "y", i + 3, True)),
    )
    assert get_many(opts, "v4", (str, str, int, bool)) == ("ax", "by", 8, True)


def test_var5_set():
    v = Var("v5", int, int, int, int, int)
    opts = build(
        v.set(1, 2, 3, 4, 5),
        v.replace(lambda a, b, c, d, e: (a * 1, b * 2, c * 3, d * 4, e * 5)),
    )
    assert get_many(opts, "v5", (int,) * 5) == (1, 4, 9, 16, 25)


def test_var6_set():
    v = Var("v6", int, int, int, int, int, int)
    opts = build(
        v.set(1, 2, 3, 4, 5, 6),
        v.replace(lambda *values: tuple(x + 1 for x in values)),
    )
    assert get_many(opts, "v6", (int,) * 6) == (2, 3, 4, 5, 6, 7)


def test_storage_layout():
    opts = build(Var("one", int).set(3), Var("two", str, int).set("foo", 10))
    assert opts == {"one": 3, "two": ["foo", 10]}


def test_replace_missing_starts_from_zero_values():
    counter = Var("count", int)
    opts = build(counter.replace(lambda n: n + 1))
    assert opts == {"count": 1}


def test_set_wrong_arity_raises():
    with pytest.raises(TypeError):
        Var("v2", str, int).set("foo")


def test_set_wrong_type_raises():
    with pytest.raises(TypeError):
        Var("v0", int).set("not a number")


def test_replace_wrong_shape_raises():
    v = Var("v2", str, int)
    option = v.replace(lambda s, i: s)
    with pytest.raises(TypeError):
        build(v.set("foo", 10), option)


def test_var_requires_a_type():
    with pytest.raises(TypeError):
        Var("empty")


def test_var_requires_string_key():
    with pytest.raises(TypeError):
        Var(5, int)