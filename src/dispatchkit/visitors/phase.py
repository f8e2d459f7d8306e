"""Visit phases of a tree walk."""

from enum import Enum


class VisitPhase(str, Enum):
    """When a walker operation fires relative to the children of a node.

    - PRE: before visiting any child.
    - IN: between each pair of successive children.
    - POST: after visiting all children.
    """

    PRE = "pre"
    IN = "in"
    POST = "post"

    def __str__(self) -> str:
        return self.value
