"""Helpers for sequences used as arrays."""

from typing import Callable, List, Optional, Sequence, TypeVar

T = TypeVar("T")
R = TypeVar("R")

MAX_BINARY_POWER_SIZE = 1 << 30


def map_array(array: Sequence[T], f: Callable[[T], R]) -> List[R]:
    """Return a list obtained by applying ``f`` to each item of ``array``."""
    return [f(item) for item in array]


def resize_binary_power(
    array: Sequence[T], min_size: int, fill: Optional[T] = None
) -> List[Optional[T]]:
    """Return a copy of ``array`` resized to the least power of two >= ``min_size``.

    The copy is truncated or padded with ``fill`` as needed.

    Raises:
        ValueError: If ``min_size`` exceeds 2**30
    """
    if min_size > MAX_BINARY_POWER_SIZE:
        raise ValueError(f"min_size {min_size} exceeds the maximum of {MAX_BINARY_POWER_SIZE}")
    size = 1
    while size < min_size:
        size <<= 1
    out: List[Optional[T]] = list(array[:size])
    out.extend([fill] * (size - len(out)))
    return out
