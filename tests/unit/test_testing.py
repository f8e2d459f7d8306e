"""Unit tests for the assertion fixture and traceback trimming."""

import pytest

from dispatchkit.utils.testing import TestFixture, assertion_helper, trim_traceback

fixture = TestFixture()


def _frame_names(exc: BaseException) -> list:
    names = []
    tb = exc.__traceback__
    while tb is not None:
        names.append(tb.tb_frame.f_code.co_name)
        tb = tb.tb_next
    return names


def _innermost():
    raise RuntimeError("deep")


def _middle():
    _innermost()


def _outer():
    _middle()


def _raise_through_helpers() -> RuntimeError:
    try:
        _outer()
    except RuntimeError as e:
        return e
    raise AssertionError("unreachable")


class TestAssertions:
    """Tests for the TestFixture assertion methods."""

    def test_passing_assertions(self) -> None:
        fixture.assert_true(True)
        fixture.assert_equals([1, 2], [1, 2])
        fixture.assert_not_equals(1, 2)
        value = object()
        fixture.assert_same(value, value)
        fixture.assert_not_same(object(), object())

    def test_assert_true_message(self) -> None:
        with pytest.raises(AssertionError, match="^condition failed$"):
            fixture.assert_true(False, "condition failed")

    def test_assert_equals_message(self) -> None:
        with pytest.raises(AssertionError) as exc_info:
            fixture.assert_equals(1, 2, "numbers differ")

        assert str(exc_info.value) == "numbers differ\nexpected [2] but found [1]"

    def test_assert_not_equals_message(self) -> None:
        with pytest.raises(AssertionError) as exc_info:
            fixture.assert_not_equals("a", "a")

        assert str(exc_info.value) == "\nexpected not equal [a] but found [a]"

    def test_assert_same_and_not_same(self) -> None:
        with pytest.raises(AssertionError, match="expected"):
            fixture.assert_same([1], [1])

        value = [1]
        with pytest.raises(AssertionError, match="expected not same"):
            fixture.assert_not_same(value, value)

    def test_lazy_message_called_only_on_failure_and_once(self) -> None:
        calls = []

        def message() -> str:
            calls.append(1)
            return "lazy"

        fixture.assert_equals(1, 1, message)
        assert calls == []

        with pytest.raises(AssertionError, match="^lazy"):
            fixture.assert_equals(1, 2, message)
        assert calls == [1]

    def test_trace_separator(self) -> None:
        separated = TestFixture()
        separated.trace_separator = "\n----"

        with pytest.raises(AssertionError) as exc_info:
            separated.throw_assertion("failure")

        assert str(exc_info.value) == "failure\n----"


def test_trim_traceback_peels_innermost_frames():
    """Test that peel removes the most recently called frames."""
    error = _raise_through_helpers()
    assert _frame_names(error)[-3:] == ["_outer", "_middle", "_innermost"]

    trim_traceback(error, peel=2)

    assert _frame_names(error)[-1] == "_outer"


def test_trim_traceback_peel_everything():
    """Test that peeling more frames than exist leaves no traceback."""
    error = _raise_through_helpers()

    trim_traceback(error, peel=100)

    assert error.__traceback__ is None


def test_trim_traceback_bottom_module():
    """Test that frames outside the bottom module are removed."""
    error = _raise_through_helpers()

    returned = trim_traceback(error, bottom_module=__name__)

    assert returned is error
    assert _frame_names(error) == [
        "_raise_through_helpers",
        "_outer",
        "_middle",
        "_innermost",
    ]


def test_trim_traceback_unknown_bottom_module_keeps_frames():
    """Test that an absent bottom module does not remove frames."""
    error = _raise_through_helpers()
    before = _frame_names(error)

    trim_traceback(error, bottom_module="no.such.module")

    assert _frame_names(error) == before


@assertion_helper
def check_positive(value: int) -> None:
    fixture.assert_true(value > 0, f"{value} is not positive")


def test_assertion_helper_peels_helper_frames():
    """Test failures inside a decorated helper point at the helper's caller."""
    check_positive(1)

    with pytest.raises(AssertionError, match="-1 is not positive") as exc_info:
        check_positive(-1)

    names = _frame_names(exc_info.value)
    assert "check_positive" not in names
    assert "assert_true" not in names
    assert "test_assertion_helper_peels_helper_frames" in names


def test_assertion_helper_keeps_metadata():
    """Test that the decorator preserves the helper's name."""
    assert check_positive.__name__ == "check_positive"
