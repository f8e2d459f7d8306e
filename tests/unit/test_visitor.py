"""Unit tests for the Visitor (single dispatch on the exact class of a value)."""

import pytest

from dispatchkit.errors import ConfigError, DispatchError
from dispatchkit.visitors.visitor import Visitor


class Animal:
    pass


class Dog(Animal):
    pass


class Puppy(Dog):
    pass


def test_registered_specialization_is_called():
    """Test that accept invokes exactly the specialization of the value's class."""
    calls = []
    visitor = (
        Visitor()
        .register(int, lambda v: calls.append(("int", v)))
        .register(str, lambda v: calls.append(("str", v)))
        .register_fallback(lambda v: calls.append(("fallback", v)))
    )

    visitor.accept(3)
    visitor.accept("a")

    assert calls == [("int", 3), ("str", "a")]


def test_fallback_only_visitor_records_every_value():
    """Test a visitor with only a fallback receives all values in call order."""
    seen = []
    visitor = Visitor().register_fallback(seen.append)

    visitor.accept(42)
    visitor.accept("x")

    assert seen == [42, "x"]


def test_missing_specialization_without_fallback_raises():
    """Test that dispatching an unregistered class with no fallback fails."""
    visitor = Visitor().register(int, lambda v: None)

    with pytest.raises(DispatchError) as exc_info:
        visitor.accept("not an int")

    assert exc_info.value.value == "not an int"
    assert exc_info.value.phase is None
    assert "str" in str(exc_info.value)


def test_subclass_does_not_inherit_specialization():
    """Test that a specialization for a base class does not apply to subclasses."""
    calls = []
    visitor = Visitor().register(Dog, lambda v: calls.append("dog"))

    with pytest.raises(DispatchError):
        visitor.accept(Puppy())

    visitor.register_fallback(lambda v: calls.append("fallback"))
    visitor.accept(Puppy())
    visitor.accept(Dog())

    assert calls == ["fallback", "dog"]


def test_base_class_does_not_use_subclass_specialization():
    """Test that a specialization for a subclass does not apply to its base class."""
    visitor = Visitor().register(Dog, lambda v: None)

    with pytest.raises(DispatchError):
        visitor.accept(Animal())


def test_bool_is_dispatched_separately_from_int():
    """Test exact-class dispatch distinguishes bool from int."""
    calls = []
    visitor = Visitor().register(int, lambda v: calls.append("int"))

    visitor.accept(1)
    with pytest.raises(DispatchError):
        visitor.accept(True)

    assert calls == ["int"]


def test_register_replaces_previous_specialization():
    """Test that registering twice for the same class keeps the last one."""
    calls = []
    visitor = (
        Visitor()
        .register(int, lambda v: calls.append("first"))
        .register(int, lambda v: calls.append("second"))
    )

    visitor.accept(1)

    assert calls == ["second"]


def test_register_fallback_replaces_previous_fallback():
    """Test that only the last registered fallback is used."""
    calls = []
    visitor = (
        Visitor()
        .register_fallback(lambda v: calls.append("first"))
        .register_fallback(lambda v: calls.append("second"))
    )

    visitor.accept(object())

    assert calls == ["second"]


def test_registration_returns_same_visitor():
    """Test that registration methods chain on the same instance."""
    visitor = Visitor()

    assert visitor.register(int, print) is visitor
    assert visitor.register_fallback(print) is visitor


def test_specialization_called_exactly_once():
    """Test each accept call invokes the specialization exactly once."""
    calls = []
    visitor = Visitor().register(float, calls.append)

    visitor.accept(1.5)

    assert calls == [1.5]


def test_visitor_is_callable():
    """Test that calling the visitor is the same as accept."""
    seen = []
    visitor = Visitor().register(int, seen.append)

    visitor(7)

    assert seen == [7]


def test_specialization_return_value_is_ignored():
    """Test accept returns None whatever the specialization returns."""
    visitor = Visitor().register(int, lambda v: v * 2)

    assert visitor.accept(2) is None


@pytest.mark.parametrize("klass", [None, "int", 3])
def test_register_non_class_raises_config_error(klass):
    """Test that registering for something that is not a class fails."""
    with pytest.raises(ConfigError):
        Visitor().register(klass, print)


def test_register_non_callable_raises_config_error():
    """Test that registering a non-callable specialization fails."""
    with pytest.raises(ConfigError):
        Visitor().register(int, None)

    with pytest.raises(ConfigError):
        Visitor().register_fallback("not callable")


def test_specialization_errors_propagate():
    """Test that exceptions raised by a specialization are not swallowed."""

    def boom(value):
        raise RuntimeError("boom")

    visitor = Visitor().register(int, boom)

    with pytest.raises(RuntimeError, match="boom"):
        visitor.accept(1)
