"""Operations over JSON trees built on visitors and walkers.

This module provides a JSON renderer, a node describer, an outline printer
and a phase tracer. Each defines its behaviour per node class with a
``Visitor`` or a ``JsonTreeWalker`` rather than with methods on the nodes.
"""

import json
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from dispatchkit.json_tree.nodes import (
    ArrayNode,
    JsonNode,
    MemberNode,
    ObjectNode,
    ScalarNode,
)
from dispatchkit.json_tree.walker import JsonTreeWalker
from dispatchkit.visitors.phase import VisitPhase
from dispatchkit.visitors.visitor import Visitor


class JsonRenderer:
    """Renders a JSON tree back to JSON text.

    Brackets are written on the pre- and post-visits of arrays and objects,
    separators on their in-visits. Scalars are formatted by a visitor keyed on
    the exact class of the Python value (so ``bool`` is not mistaken for
    ``int``).

    The output matches ``json.dumps``: compact (``separators=(",", ":")``)
    when ``indent`` is None, ``json.dumps(value, indent=indent)`` otherwise.
    """

    def __init__(self, indent: Optional[int] = None):
        """Initialize the renderer.

        Args:
            indent: Number of spaces per nesting level, or None for compact output
        """
        self.indent = indent
        self.key_separator = ":" if indent is None else ": "
        self._parts: List[str] = []
        self._depth = 0

        self._scalars: Visitor[Any] = (
            Visitor()
            .register(str, self._write_json)
            .register(int, lambda value: self._write(str(value)))
            .register(float, self._write_json)
            .register(bool, lambda value: self._write("true" if value else "false"))
            .register(type(None), lambda value: self._write("null"))
        )

        self._walker = (
            JsonTreeWalker(VisitPhase.PRE, VisitPhase.IN, VisitPhase.POST)
            .register(ObjectNode, VisitPhase.PRE, lambda node: self._open("{", node.members))
            .register(ObjectNode, VisitPhase.IN, self._separate)
            .register(ObjectNode, VisitPhase.POST, lambda node: self._close("}", node.members))
            .register(ArrayNode, VisitPhase.PRE, lambda node: self._open("[", node.items))
            .register(ArrayNode, VisitPhase.IN, self._separate)
            .register(ArrayNode, VisitPhase.POST, lambda node: self._close("]", node.items))
            .register(MemberNode, VisitPhase.PRE, self._write_key)
            .register(MemberNode, VisitPhase.POST, lambda node: None)
            .register(ScalarNode, self._write_scalar)
        )

    def render(self, node: JsonNode) -> str:
        """Render the tree rooted at ``node`` to JSON text."""
        self._parts = []
        self._depth = 0
        self._walker.walk(node)
        return "".join(self._parts)

    def _write(self, text: str) -> None:
        self._parts.append(text)

    def _write_json(self, value: Any) -> None:
        self._write(json.dumps(value))

    def _newline(self) -> None:
        if self.indent is not None:
            self._write("\n" + " " * (self.indent * self._depth))

    def _open(self, bracket: str, children: List[Any]) -> None:
        self._write(bracket)
        if children:
            self._depth += 1
            self._newline()

    def _separate(self, node: JsonNode) -> None:
        self._write(",")
        self._newline()

    def _close(self, bracket: str, children: List[Any]) -> None:
        if children:
            self._depth -= 1
            self._newline()
        self._write(bracket)

    def _write_key(self, node: MemberNode) -> None:
        self._write(json.dumps(node.key) + self.key_separator)

    def _write_scalar(self, phase: VisitPhase, node: ScalarNode) -> None:
        if phase is VisitPhase.PRE:
            self._scalars.accept(node.value)


class NodeDescriber:
    """Produces a one-line label for a JSON tree node."""

    def __init__(self) -> None:
        self._label = ""
        self._visitor: Visitor[JsonNode] = (
            Visitor()
            .register(ObjectNode, self._describe_object)
            .register(ArrayNode, self._describe_array)
            .register(MemberNode, self._describe_member)
            .register(ScalarNode, self._describe_scalar)
        )

    def describe(self, node: JsonNode) -> str:
        """Return the label of ``node``.

        Raises:
            DispatchError: If ``node`` is not one of the JSON tree node classes
        """
        self._label = ""
        self._visitor.accept(node)
        return self._label

    def _describe_object(self, node: ObjectNode) -> None:
        self._label = f"object ({len(node.members)} members)"

    def _describe_array(self, node: ArrayNode) -> None:
        self._label = f"array ({len(node.items)} items)"

    def _describe_member(self, node: MemberNode) -> None:
        self._label = f"member {json.dumps(node.key)}"

    def _describe_scalar(self, node: ScalarNode) -> None:
        self._label = f"scalar {json.dumps(node.value)}"


class TraceEvent(BaseModel):
    """A single dispatch performed during a walk."""

    phase: VisitPhase = Field(..., description="The visit phase that was dispatched")
    label: str = Field(..., description="Label of the node the phase was dispatched on")


class PhaseTracer:
    """Records every dispatch of a walk over a JSON tree.

    The tracer registers a single phase-agnostic fallback, so it sees each
    phase the walker performs on each node, in order.
    """

    def __init__(self, *phases: VisitPhase):
        """Initialize the tracer.

        Args:
            *phases: The visit phases to trace (at least one)

        Raises:
            ConfigError: If no phase is given
        """
        self.events: List[TraceEvent] = []
        self._describer = NodeDescriber()
        self._walker = JsonTreeWalker(*phases).register_fallback(self._record)

    def trace(self, node: JsonNode) -> List[TraceEvent]:
        """Walk the tree rooted at ``node`` and return the recorded events."""
        self.events = []
        self._walker.walk(node)
        return self.events

    def _record(self, phase: VisitPhase, node: JsonNode) -> None:
        self.events.append(TraceEvent(phase=phase, label=self._describer.describe(node)))


class OutlinePrinter:
    """Formats a JSON tree as an indented outline, one node per line."""

    def __init__(self, indent: int = 2):
        self.indent = indent
        self._lines: List[str] = []
        self._depth = 0
        self._describer = NodeDescriber()
        self._walker = (
            JsonTreeWalker(VisitPhase.PRE, VisitPhase.POST)
            .register_fallback(VisitPhase.PRE, self._enter)
            .register_fallback(VisitPhase.POST, self._leave)
        )

    def outline(self, node: JsonNode) -> List[str]:
        """Return the outline lines of the tree rooted at ``node``."""
        self._lines = []
        self._depth = 0
        self._walker.walk(node)
        return self._lines

    def _enter(self, node: JsonNode) -> None:
        self._lines.append(" " * (self.indent * self._depth) + self._describer.describe(node))
        self._depth += 1

    def _leave(self, node: JsonNode) -> None:
        self._depth -= 1


def render_json(node: JsonNode, indent: Optional[int] = None) -> str:
    """Convenience function to render a JSON tree to JSON text.

    Args:
        node: The root of the tree
        indent: Number of spaces per nesting level, or None for compact output

    Returns:
        The JSON text
    """
    return JsonRenderer(indent=indent).render(node)
