"""Tree walker dispatching phase-specific operations on the exact class of nodes.

``Walker`` is the tree-shaped analog of ``Visitor``: it walks a tree depth
first and, at each configured visit phase, calls the specialization
registered for the class of the current node and the current phase.
"""

from abc import ABC, abstractmethod
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Iterable,
    Optional,
    TypeVar,
    Union,
    overload,
)

from dispatchkit.errors import ConfigError, DispatchError
from dispatchkit.visitors.phase import VisitPhase

T = TypeVar("T")

Specialization = Callable[[Any], Any]
PhaseSpecialization = Callable[[VisitPhase, Any], Any]


class _Specializations:
    """The specializations registered for one class (or for the fallback slot).

    Holds either up to one specialization per phase, or a single
    phase-agnostic specialization that receives the phase as first argument.
    Never both.
    """

    __slots__ = ("per_phase", "any_phase")

    def __init__(self) -> None:
        self.per_phase: Dict[VisitPhase, Specialization] = {}
        self.any_phase: Optional[PhaseSpecialization] = None

    def set_phase(self, phase: VisitPhase, specialization: Specialization, what: str) -> None:
        if self.any_phase is not None:
            raise ConfigError(f"trying to mix per-phase and phase-agnostic {what}")
        self.per_phase[phase] = specialization

    def set_any_phase(self, specialization: PhaseSpecialization, what: str) -> None:
        if self.per_phase:
            raise ConfigError(f"trying to mix per-phase and phase-agnostic {what}")
        self.any_phase = specialization

    def call(self, phase: VisitPhase, node: Any) -> bool:
        """Invoke the applicable specialization, returning False if there is none."""
        specialization = self.per_phase.get(phase)
        if specialization is not None:
            specialization(node)
            return True
        if self.any_phase is not None:
            self.any_phase(phase, node)
            return True
        return False


def _check_phase(phase: Any) -> VisitPhase:
    try:
        return VisitPhase(phase)
    except ValueError:
        raise ConfigError(f"invalid visit phase: {phase!r}") from None


class Walker(ABC, Generic[T]):
    """Walks a tree, calling a class- and phase-specific operation on every node.

    The walker can call operations on each node before visiting its children
    (``VisitPhase.PRE``), after visiting its children (``VisitPhase.POST``) or
    in-between every pair of successive children (``VisitPhase.IN``). The
    phases the walker performs are fixed at construction.

    Specializations apply to nodes of exactly the registered class; inheritance
    is not taken into account. For a given class, specializations are either
    registered per phase with ``register(klass, phase, specialization)``, or
    once for all phases with ``register(klass, specialization)``, in which case
    the phase is passed as first argument. Mixing both for the same class is a
    ``ConfigError``. The same holds for ``register_fallback``.

    Dispatch for a node and a phase tries, in order: the per-phase
    specialization of the node's class, its phase-agnostic specialization, the
    per-phase fallback, the phase-agnostic fallback. If none exists, a
    ``DispatchError`` aborts the walk.

    Subclasses define ``children`` to tell the walker how to find the children
    of a node. The phase is passed explicitly through the traversal, so a
    specialization may start a nested walk on the same walker.

    Recursion depth equals the depth of the tree; very deep trees may need a
    higher ``sys.setrecursionlimit``.
    """

    def __init__(self, *phases: VisitPhase):
        """Initialize the walker.

        Args:
            *phases: The visit phases this walker performs (at least one)

        Raises:
            ConfigError: If no phase is given or a phase is invalid
        """
        if not phases:
            raise ConfigError("no visit phases specified")
        active = {_check_phase(phase) for phase in phases}
        self._does_pre = VisitPhase.PRE in active
        self._does_in = VisitPhase.IN in active
        self._does_post = VisitPhase.POST in active
        self._dispatch: Dict[type, _Specializations] = {}
        self._fallback = _Specializations()

    @property
    def does_pre(self) -> bool:
        """Whether this walker performs pre-visits."""
        return self._does_pre

    @property
    def does_in(self) -> bool:
        """Whether this walker performs in-visits."""
        return self._does_in

    @property
    def does_post(self) -> bool:
        """Whether this walker performs post-visits."""
        return self._does_post

    @abstractmethod
    def children(self, node: T) -> Iterable[T]:
        """Return the children of ``node``, in visiting order."""
        pass

    @overload
    def register(
        self, klass: type, phase: VisitPhase, specialization: Specialization
    ) -> "Walker[T]": ...

    @overload
    def register(self, klass: type, specialization: PhaseSpecialization) -> "Walker[T]": ...

    def register(
        self,
        klass: type,
        phase: Union[VisitPhase, PhaseSpecialization],
        specialization: Optional[Specialization] = None,
    ) -> "Walker[T]":
        """Register a specialization for nodes of exactly ``klass``.

        Called as ``register(klass, phase, specialization)`` the specialization
        is called with the node for that phase only. Called as
        ``register(klass, specialization)`` it is called with ``(phase, node)``
        for every phase.

        Returns:
            This walker, for chaining

        Raises:
            ConfigError: On invalid arguments, or when mixing per-phase and
                phase-agnostic specializations for ``klass``
        """
        if not isinstance(klass, type):
            raise ConfigError(f"cannot register a specialization for non-class {klass!r}")
        what = f"specializations for {klass.__name__}"
        if specialization is None:
            self._check_callable(phase, what)
            self._dispatch.setdefault(klass, _Specializations()).set_any_phase(phase, what)
        else:
            visit_phase = _check_phase(phase)
            self._check_callable(specialization, what)
            self._dispatch.setdefault(klass, _Specializations()).set_phase(
                visit_phase, specialization, what
            )
        return self

    @overload
    def register_fallback(
        self, phase: VisitPhase, specialization: Specialization
    ) -> "Walker[T]": ...

    @overload
    def register_fallback(self, specialization: PhaseSpecialization) -> "Walker[T]": ...

    def register_fallback(
        self,
        phase: Union[VisitPhase, PhaseSpecialization],
        specialization: Optional[Specialization] = None,
    ) -> "Walker[T]":
        """Register a fallback, used for nodes without an applicable specialization.

        Called as ``register_fallback(phase, specialization)`` the fallback
        applies to that phase only. Called as ``register_fallback(specialization)``
        it applies to every phase and receives ``(phase, node)``.

        Returns:
            This walker, for chaining

        Raises:
            ConfigError: On invalid arguments, or when mixing per-phase and
                phase-agnostic fallbacks
        """
        if specialization is None:
            self._check_callable(phase, "fallbacks")
            self._fallback.set_any_phase(phase, "fallbacks")
        else:
            visit_phase = _check_phase(phase)
            self._check_callable(specialization, "fallbacks")
            self._fallback.set_phase(visit_phase, specialization, "fallbacks")
        return self

    def walk(self, node: T) -> None:
        """Walk the tree rooted at ``node``, see ``Walker``.

        Raises:
            DispatchError: If a node has no applicable specialization for a
                performed phase. The walk is aborted.
        """
        if self._does_pre:
            self._visit(node, VisitPhase.PRE)

        first = True
        for child in self.children(node):
            if first:
                first = False
            elif self._does_in:
                self._visit(node, VisitPhase.IN)
            self.walk(child)

        if self._does_post:
            self._visit(node, VisitPhase.POST)

    def _visit(self, node: T, phase: VisitPhase) -> None:
        specializations = self._dispatch.get(type(node))
        if specializations is not None and specializations.call(phase, node):
            return
        if not self._fallback.call(phase, node):
            raise DispatchError(
                f"no valid specialization found for node: {node!r} (visit phase: {phase})",
                value=node,
                phase=phase,
            )

    @staticmethod
    def _check_callable(specialization: Any, what: str) -> None:
        if isinstance(specialization, VisitPhase) or not callable(specialization):
            raise ConfigError(f"{what}: expected a callable specialization, got {specialization!r}")


class CallbackWalker(Walker[T]):
    """A walker whose children are given by a function rather than by subclassing.

    Example:
        >>> tree = {"a": ["b", "c"], "b": [], "c": []}
        >>> walker = CallbackWalker(tree.__getitem__, VisitPhase.PRE)
        >>> _ = walker.register_fallback(VisitPhase.PRE, print)
        >>> walker.walk("a")
        a
        b
        c
    """

    def __init__(self, children: Callable[[T], Iterable[T]], *phases: VisitPhase):
        """Initialize the walker.

        Args:
            children: Function returning the children of a node
            *phases: The visit phases this walker performs (at least one)
        """
        super().__init__(*phases)
        self._children = children

    def children(self, node: T) -> Iterable[T]:
        return self._children(node)
