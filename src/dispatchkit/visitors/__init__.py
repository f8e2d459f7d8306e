"""Open, class-based dispatch: single-value visitors and tree walkers.

This module provides ``Visitor`` for dispatching an operation on the exact
class of a value, and ``Walker`` for walking a tree while dispatching
phase-specific operations on the exact class of every node.
"""

from dispatchkit.visitors.phase import VisitPhase
from dispatchkit.visitors.visitor import Visitor
from dispatchkit.visitors.walker import CallbackWalker, Walker

__all__ = [
    "VisitPhase",
    "Visitor",
    "Walker",
    "CallbackWalker",
]
