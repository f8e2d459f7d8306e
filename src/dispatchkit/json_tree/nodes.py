"""JSON tree node definitions.

This module defines the nodes of a JSON document tree. Nodes carry data only:
operations over the tree are defined externally, with visitors and walkers
dispatching on the exact node class.
"""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field


class JsonNode(BaseModel):
    """Base class for all JSON tree nodes.

    Only the concrete node classes can be instantiated.
    """

    model_config = ConfigDict(frozen=False)

    def __init__(self, **data: Any):
        if type(self) is JsonNode:
            raise TypeError("JsonNode is abstract, instantiate one of its subclasses")
        super().__init__(**data)


class ScalarNode(JsonNode):
    """A JSON scalar: string, number, boolean or null.

    Attributes:
        value: The Python value (str, int, float, bool or None)
    """

    value: Any = Field(default=None, description="The scalar value")


class ArrayNode(JsonNode):
    """A JSON array.

    Attributes:
        items: The array elements, in order
    """

    items: List[JsonNode] = Field(default_factory=list, description="The array elements")


class MemberNode(JsonNode):
    """A key/value member of a JSON object.

    Attributes:
        key: The member key
        value: The node holding the member value
    """

    key: str = Field(..., description="The member key")
    value: JsonNode = Field(..., description="The member value")


class ObjectNode(JsonNode):
    """A JSON object.

    Attributes:
        members: The object members, in document order
    """

    members: List[MemberNode] = Field(default_factory=list, description="The object members")

    def get(self, key: str) -> JsonNode:
        """Return the value of the member named ``key``.

        Raises:
            KeyError: If the object has no such member
        """
        for member in self.members:
            if member.key == key:
                return member.value
        raise KeyError(key)
