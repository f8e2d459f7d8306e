#!/usr/bin/env python3
"""Example demonstrating walker-based operations over a JSON document tree."""

from dispatchkit.json_tree import (
    JsonTreeBuilder,
    OutlinePrinter,
    PhaseTracer,
    render_json,
)
from dispatchkit.visitors import VisitPhase


def main():
    document = {
        "id": 1,
        "name": "widget",
        "tags": ["blue", "small"],
        "dimensions": {"width": 2.5, "height": 4},
        "discontinued": False,
    }
    tree = JsonTreeBuilder.build(document)

    print("Compact:")
    print(render_json(tree))
    print()
    print("Indented:")
    print(render_json(tree, indent=2))
    print()
    print("Outline:")
    for line in OutlinePrinter().outline(tree):
        print(line)
    print()
    print("In-visits:")
    for event in PhaseTracer(VisitPhase.IN).trace(tree):
        print(f"  {event.phase.value:4} {event.label}")


if __name__ == "__main__":
    main()
