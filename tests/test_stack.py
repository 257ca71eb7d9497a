import pytest

from ouroboros.stack import (
    MAX_NAME_LENGTH,
    MAX_VALUE_LENGTH,
    MAX_VARIABLES,
    StackFrame,
    VariableLimitError,
)


def test_set_and_get_variable():
    frame = StackFrame("global")
    frame.set_variable("x", "10")
    assert frame.get_variable("x") == "10"
    assert len(frame) == 1


def test_update_keeps_count():
    frame = StackFrame("global")
    frame.set_variable("x", "1")
    frame.set_variable("x", "2")
    assert frame.get_variable("x") == "2"
    assert len(frame) == 1


def test_missing_variable_is_none():
    frame = StackFrame("global")
    assert frame.get_variable("nothing") is None
    assert frame.get_variable(None) is None


def test_lookup_walks_parents():
    root = StackFrame("global")
    root.set_variable("a", "outer")
    child = StackFrame("f", root)
    assert child.get_variable("a") == "outer"


def test_child_shadows_parent_without_changing_it():
    root = StackFrame("global")
    root.set_variable("a", "outer")
    child = StackFrame("f", root)
    child.set_variable("a", "inner")
    assert child.get_variable("a") == "inner"
    assert root.get_variable("a") == "outer"
    assert len(root) == 1


def test_parent_does_not_see_child():
    root = StackFrame("global")
    child = StackFrame("f", root)
    child.set_variable("local", "v")
    assert root.get_variable("local") is None


def test_none_arguments_are_ignored():
    frame = StackFrame("global")
    frame.set_variable(None, "v")
    frame.set_variable("k", None)
    assert len(frame) == 0


def test_variable_limit():
    frame = StackFrame("busy")
    for i in range(MAX_VARIABLES):
        frame.set_variable(f"v{i}", str(i))
    assert len(frame) == MAX_VARIABLES
    frame.set_variable("v0", "updated")
    assert frame.get_variable("v0") == "updated"
    with pytest.raises(VariableLimitError):
        frame.set_variable("overflow", "x")


def test_names_and_values_truncated():
    long_name = "n" * (MAX_NAME_LENGTH + 20)
    frame = StackFrame(long_name)
    assert frame.name == "n" * MAX_NAME_LENGTH
    assert frame.function_name == frame.name
    frame.set_variable("big", "v" * (MAX_VALUE_LENGTH + 50))
    assert frame.get_variable("big") == "v" * MAX_VALUE_LENGTH


def test_frame_names_and_parent():
    root = StackFrame("global")
    child = StackFrame("Foo.bar", root)
    assert child.parent is root
    assert root.parent is None
    assert child.function_name == "Foo.bar"