"""dispatchkit - Open class-based dispatch: visitors and tree walkers."""

from dispatchkit.config import Config, load_config
from dispatchkit.errors import ConfigError, DispatchError, DispatchKitError
from dispatchkit.visitors import CallbackWalker, VisitPhase, Visitor, Walker

__version__ = "0.1.0"

__all__ = [
    "Config",
    "load_config",
    "DispatchKitError",
    "ConfigError",
    "DispatchError",
    "VisitPhase",
    "Visitor",
    "Walker",
    "CallbackWalker",
]
