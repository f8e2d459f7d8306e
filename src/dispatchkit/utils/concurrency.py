"""Utilities dealing with concurrency and futures."""

import threading
from concurrent.futures import Future
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Exceptional(BaseModel, Generic[T]):
    """Either a value or the exception raised while computing it.

    Attributes:
        value: The computed value (None when an exception is held)
        exception: The exception, if the computation failed
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    value: Optional[T] = Field(default=None, description="The computed value")
    exception: Optional[BaseException] = Field(
        default=None, description="The exception raised by the computation"
    )

    @classmethod
    def of_value(cls, value: T) -> "Exceptional[T]":
        return cls(value=value)

    @classmethod
    def of_exception(cls, exception: BaseException) -> "Exceptional[T]":
        return cls(exception=exception)

    @property
    def is_value(self) -> bool:
        return self.exception is None

    def get(self) -> Optional[T]:
        """Return the value, or raise the held exception."""
        if self.exception is not None:
            raise self.exception
        return self.value


def await_future(future: "Future[T]", timeout_ms: float) -> Exceptional[T]:
    """Wait for ``future`` to complete within ``timeout_ms`` milliseconds.

    Returns:
        An Exceptional holding the result of the future, the exception it
        completed with, or the ``TimeoutError`` if the deadline passed
    """
    try:
        return Exceptional.of_value(future.result(timeout=timeout_ms / 1000.0))
    except Exception as e:
        return Exceptional.of_exception(e)


def wait_forever() -> None:
    """Block the current thread forever (until the process is terminated)."""
    event = threading.Event()
    while True:
        event.wait()
