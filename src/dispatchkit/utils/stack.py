"""A list-backed stack with indexed access."""

from typing import Iterable, List, Optional, TypeVar

T = TypeVar("T")


class ArrayStack(list[T]):
    """A stack implemented on top of ``list``.

    Elements are pushed and popped at the end of the list, which is the top of
    the stack. Unlike ``collections.deque`` this supports slicing and indexing.

    Operations taking an amount ``n`` or an ``index`` require it to lie in
    ``[0, len(stack)]`` and raise ``IndexError`` otherwise, in which case the
    stack is left unchanged.
    """

    def push(self, *items: T) -> None:
        """Push the items on the stack, the last one ending on top."""
        self.extend(items)

    def push_all(self, items: Iterable[T]) -> None:
        """Push every item of ``items`` on the stack."""
        self.extend(items)

    def _check_amount(self, n: int) -> None:
        if n < 0 or len(self) < n:
            raise IndexError(f"Amount [{n}] invalid for stack size [{len(self)}]")

    def _check_index(self, index: int) -> None:
        if index < 0 or len(self) < index:
            raise IndexError(f"Index [{index}] invalid for stack size [{len(self)}]")

    def top(self, n: int) -> List[T]:
        """Return (a copy of) the ``n`` elements at the top of the stack, bottom first."""
        self._check_amount(n)
        return self[len(self) - n :]

    def from_index(self, index: int) -> List[T]:
        """Return (a copy of) the elements between ``index`` and the top of the stack."""
        self._check_index(index)
        return self[index:]

    def remove_top(self, n: int) -> None:
        """Remove the ``n`` elements at the top of the stack."""
        self._check_amount(n)
        del self[len(self) - n :]

    def truncate(self, index: int) -> None:
        """Remove the elements between ``index`` and the top of the stack."""
        self._check_index(index)
        del self[index:]

    def pop_n(self, n: int) -> List[T]:
        """Remove and return the ``n`` elements at the top of the stack, bottom first."""
        out = self.top(n)
        del self[len(self) - n :]
        return out

    def pop_from(self, index: int) -> List[T]:
        """Remove and return the elements between ``index`` and the top of the stack."""
        self._check_index(index)
        return self.pop_n(len(self) - index)

    def poll(self) -> Optional[T]:
        """Remove and return the top of the stack, or None if the stack is empty."""
        return self.pop() if self else None

    def peek(self) -> T:
        """Return the top of the stack.

        Raises:
            IndexError: If the stack is empty
        """
        if not self:
            raise IndexError("peek from empty stack")
        return self[-1]

    def peek_n(self, n: int) -> List[T]:
        return self.top(n)

    def peek_from(self, index: int) -> List[T]:
        return self.from_index(index)

    def snoop(self) -> Optional[T]:
        """Return the top of the stack, or None if the stack is empty."""
        return self[-1] if self else None

    def peek_back(self, n: int) -> T:
        """Return the item ``n`` elements below the top of the stack (0 is the top).

        Raises:
            IndexError: If ``n`` is outside ``[0, len(stack) - 1]``
        """
        if n < 0 or len(self) <= n:
            raise IndexError(f"Index [{n}] invalid for stack size [{len(self)}]")
        return self[len(self) - 1 - n]

    def snoop_back(self, n: int) -> Optional[T]:
        """Like ``peek_back`` but returns None instead of raising."""
        return None if n < 0 or len(self) <= n else self[len(self) - 1 - n]

    def copy(self) -> "ArrayStack[T]":
        return ArrayStack(self)

    def __repr__(self) -> str:
        return f"ArrayStack({list.__repr__(self)})"
