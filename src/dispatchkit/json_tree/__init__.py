"""JSON tree module: a concrete tree for visitors and walkers.

This module represents decoded JSON documents as trees of pydantic nodes and
provides walker-based operations over them (rendering, tracing, outlines).
"""

from dispatchkit.json_tree.builder import JsonTreeBuilder
from dispatchkit.json_tree.nodes import (
    ArrayNode,
    JsonNode,
    MemberNode,
    ObjectNode,
    ScalarNode,
)
from dispatchkit.json_tree.render import (
    JsonRenderer,
    NodeDescriber,
    OutlinePrinter,
    PhaseTracer,
    TraceEvent,
    render_json,
)
from dispatchkit.json_tree.walker import JsonTreeWalker

__all__ = [
    "JsonNode",
    "ScalarNode",
    "ArrayNode",
    "MemberNode",
    "ObjectNode",
    "JsonTreeBuilder",
    "JsonTreeWalker",
    "JsonRenderer",
    "NodeDescriber",
    "OutlinePrinter",
    "PhaseTracer",
    "TraceEvent",
    "render_json",
]
