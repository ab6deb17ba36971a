import pytest

from heuropt.foundation.registry import Registry


def test_registry_basic():
    reg = Registry[int]("TestReg")
    reg.register("foo", 1)
    assert "foo" in reg
    assert reg.get("foo") == 1
    assert reg["foo"] == 1
    assert reg.list() == ["foo"]
    with pytest.raises(KeyError, match="registry 'TestReg'"):
        reg.get("bar")


def test_registry_keys_are_case_insensitive():
    reg = Registry[int]()
    reg.register("Nelder_Mead", 1)
    assert "nelder_mead" in reg
    assert reg["NELDER_MEAD"] == 1


def test_registry_decorator():
    reg = Registry[type]("Classes")

    @reg.register("my_class")
    class MyClass:
        pass

    assert reg.get("my_class") is MyClass


def test_registry_duplicate_error():
    reg = Registry[int]()
    reg.register("a", 1)
    with pytest.raises(ValueError, match="already exists"):
        reg.register("a", 2)


def test_registry_override():
    reg = Registry[int]()
    reg.register("a", 1)
    reg.register("a", 2, override=True)
    assert reg["a"] == 2


def test_registry_missing_key():
    reg = Registry[int]("Things")
    with pytest.raises(KeyError, match="not found"):
        reg.get("missing")
    assert reg.get("missing", None) is None


def test_registry_suggest_close_names():
    reg = Registry[int]()
    for key in ("rastrigin", "rosenbrock", "sphere"):
        reg.register(key, 0)
    assert reg.suggest("spher") == ["sphere"]
    assert reg.suggest("zzz") == []
    assert len(reg) == 3
    assert reg.list() == ["rastrigin", "rosenbrock", "sphere"]
