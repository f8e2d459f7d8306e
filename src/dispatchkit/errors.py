"""Error taxonomy for dispatchkit.

Configuration mistakes are reported eagerly as ``ConfigError`` while the
dispatcher or walker is being set up. A missing specialization is only
discovered when a value is dispatched and is reported as ``DispatchError``.
"""

from typing import Any, Optional


class DispatchKitError(Exception):
    """Base class for all errors raised by dispatchkit."""


class ConfigError(DispatchKitError):
    """Raised when a visitor or walker is configured inconsistently.

    Examples: constructing a walker without any visit phase, or mixing
    per-phase and phase-agnostic specializations for the same class.
    """


class DispatchError(DispatchKitError):
    """Raised when no specialization (and no fallback) applies to a value.

    Attributes:
        value: The value (or node) that could not be dispatched
        phase: The visit phase being dispatched, or None for a plain visitor
    """

    def __init__(self, message: str, value: Any = None, phase: Optional[Any] = None):
        super().__init__(message)
        self.value = value
        self.phase = phase
