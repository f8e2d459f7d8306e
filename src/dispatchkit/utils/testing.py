"""Assertion helpers for tests, with traceback trimming.

``TestFixture`` offers assertion methods whose frames are hidden from pytest
tracebacks, so failures point at the assertion call site. Test helpers that
wrap those assertions can be decorated with ``assertion_helper`` so their own
frames are peeled off as well.
"""

import functools
from types import TracebackType
from typing import Any, Callable, List, NoReturn, Optional, TypeVar, Union

F = TypeVar("F", bound=Callable[..., Any])

Message = Union[str, Callable[[], str]]


def trim_traceback(
    exc: BaseException, peel: int = 0, bottom_module: Optional[str] = None
) -> BaseException:
    """Trim the traceback of ``exc`` in place.

    Removes the ``peel`` innermost entries (the most recently called
    functions). If ``bottom_module`` is given, also removes every entry outside
    the outermost frame executing code of that module.

    Returns:
        ``exc``, for use in a ``raise`` statement
    """
    entries: List[TracebackType] = []
    tb = exc.__traceback__
    while tb is not None:
        entries.append(tb)
        tb = tb.tb_next

    start = 0
    if bottom_module is not None:
        for i, entry in enumerate(entries):
            if entry.tb_frame.f_globals.get("__name__") == bottom_module:
                start = i
                break

    kept = entries[start : max(start, len(entries) - peel)]
    for entry, following in zip(kept, kept[1:] + [None]):
        entry.tb_next = following
    return exc.with_traceback(kept[0] if kept else None)


def assertion_helper(function: F) -> F:
    """Peel the decorated test helper off the traceback of assertion failures.

    Failures raised inside the helper are reported at the helper's call site.
    """

    @functools.wraps(function)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        __tracebackhide__ = True
        try:
            return function(*args, **kwargs)
        except AssertionError as e:
            e.with_traceback(None)
            raise

    return wrapper  # type: ignore[return-value]


class TestFixture:
    """Base class (or standalone object) offering assertion methods.

    Messages may be given as strings or as callables returning a string; a
    callable is only called when the assertion fails, and only once.

    Equality assertions append the compared values to the message, on a new
    line, as ``expected [<expected>] but found [<actual>]``. "Equals" refers
    to ``==`` and "same" to ``is``.

    Attributes:
        trace_separator: Appended to every assertion message, to separate it
            from the traceback when the message ends with indented lines
    """

    trace_separator: str = ""

    def throw_assertion(self, msg: Message = "") -> NoReturn:
        """Raise an ``AssertionError`` with the given message."""
        __tracebackhide__ = True
        raise AssertionError(_message(msg) + self.trace_separator)

    def assert_true(self, condition: bool, msg: Message = "") -> None:
        __tracebackhide__ = True
        if not condition:
            self.throw_assertion(msg)

    def assert_equals(self, actual: Any, expected: Any, msg: Message = "") -> None:
        __tracebackhide__ = True
        if not actual == expected:
            self.throw_assertion(
                f"{_message(msg)}\nexpected [{expected}] but found [{actual}]"
            )

    def assert_not_equals(self, actual: Any, expected: Any, msg: Message = "") -> None:
        __tracebackhide__ = True
        if actual == expected:
            self.throw_assertion(
                f"{_message(msg)}\nexpected not equal [{expected}] but found [{actual}]"
            )

    def assert_same(self, actual: Any, expected: Any, msg: Message = "") -> None:
        __tracebackhide__ = True
        if actual is not expected:
            self.throw_assertion(
                f"{_message(msg)}\nexpected [{expected}] but found [{actual}]"
            )

    def assert_not_same(self, actual: Any, expected: Any, msg: Message = "") -> None:
        __tracebackhide__ = True
        if actual is expected:
            self.throw_assertion(
                f"{_message(msg)}\nexpected not same [{expected}] but found [{actual}]"
            )


def _message(msg: Message) -> str:
    return msg() if callable(msg) else msg
