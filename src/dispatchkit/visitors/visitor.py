"""Single dispatch on the exact runtime class of a value.

This module provides ``Visitor``, an operation whose behaviour is defined
outside of the classes it operates on. Behaviours (specializations) are
registered per class and selected from the class of the visited value.
"""

from typing import Any, Callable, Dict, Generic, Optional, TypeVar

from dispatchkit.errors import ConfigError, DispatchError

T = TypeVar("T")

Specialization = Callable[[Any], Any]


class Visitor(Generic[T]):
    """An operation with a distinct specialization per exact class.

    Specializations are registered with ``register`` and are only applicable
    to values whose class is exactly the registered class: inheritance is not
    taken into account. When no specialization matches, the fallback (see
    ``register_fallback``) is used, or a ``DispatchError`` is raised.

    Specializations are side-effecting callbacks and their return values are
    ignored. To compute a result, let the specializations write to a context
    object (often the object owning the visitor) and read it after ``accept``.

    Example:
        >>> seen = []
        >>> visitor = Visitor().register(int, seen.append).register_fallback(print)
        >>> visitor.accept(42)
        >>> seen
        [42]
    """

    def __init__(self) -> None:
        """Initialize an empty visitor with no specializations and no fallback."""
        self._dispatch: Dict[type, Specialization] = {}
        self._fallback: Optional[Specialization] = None

    def register(self, klass: type, specialization: Specialization) -> "Visitor[T]":
        """Register the specialization for values of exactly ``klass``.

        Replaces any specialization previously registered for ``klass``.

        Args:
            klass: The exact class the specialization applies to
            specialization: Callable invoked with the value

        Returns:
            This visitor, for chaining

        Raises:
            ConfigError: If ``klass`` is not a class or the specialization is not callable
        """
        if not isinstance(klass, type):
            raise ConfigError(f"cannot register a specialization for non-class {klass!r}")
        if not callable(specialization):
            raise ConfigError(f"specialization for {klass.__name__} is not callable")
        self._dispatch[klass] = specialization
        return self

    def register_fallback(self, fallback: Specialization) -> "Visitor[T]":
        """Register the fallback used for classes without a specialization.

        Replaces any previously registered fallback.
        """
        if not callable(fallback):
            raise ConfigError("fallback specialization is not callable")
        self._fallback = fallback
        return self

    def accept(self, value: T) -> None:
        """Run the operation on ``value`` using the matching specialization.

        Args:
            value: The value to dispatch on

        Raises:
            DispatchError: If there is no specialization for the class of
                ``value`` and no fallback
        """
        specialization = self._dispatch.get(type(value))
        if specialization is None:
            if self._fallback is None:
                raise DispatchError(
                    f"no specialization for {type(value).__name__} and no fallback specified",
                    value=value,
                )
            specialization = self._fallback
        specialization(value)

    __call__ = accept

    def __repr__(self) -> str:
        names = ", ".join(klass.__name__ for klass in self._dispatch)
        return f"Visitor([{names}], fallback={self._fallback is not None})"
