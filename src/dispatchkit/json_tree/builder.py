"""Builder for converting plain Python values (decoded JSON) to JSON tree nodes."""

import json
from typing import Any

from dispatchkit.json_tree.nodes import (
    ArrayNode,
    JsonNode,
    MemberNode,
    ObjectNode,
    ScalarNode,
)

SCALAR_TYPES = (str, int, float, bool, type(None))

# Subclasses (IntEnum, str enums, ...) are stored as their exact base type,
# since scalar formatting dispatches on the exact class. bool cannot be
# subclassed, so it never reaches these conversions.
SCALAR_CONVERSIONS = (
    (int, int.__int__),
    (float, float.__float__),
    (str, str.__str__),
)


class JsonTreeBuilder:
    """Builds JSON tree nodes from decoded JSON values.

    Dicts become ``ObjectNode``, lists and tuples become ``ArrayNode`` and
    str/int/float/bool/None become ``ScalarNode``. Instances of subclasses of
    those scalar types are converted to the base type first.
    """

    @staticmethod
    def build_from_text(text: str) -> JsonNode:
        """Parse JSON text and convert it to a JSON tree.

        Raises:
            ValueError: If the text is not valid JSON
        """
        return JsonTreeBuilder.build(json.loads(text))

    @staticmethod
    def build(value: Any) -> JsonNode:
        """Convert a decoded JSON value to a JSON tree.

        Args:
            value: The value to convert

        Returns:
            The root node of the tree

        Raises:
            ValueError: If the value contains a type JSON cannot represent,
                or an object key that is not a string
        """
        if isinstance(value, dict):
            members = []
            for key, item in value.items():
                if not isinstance(key, str):
                    raise ValueError(f"JSON object keys must be strings, got {key!r}")
                members.append(MemberNode(key=key, value=JsonTreeBuilder.build(item)))
            return ObjectNode(members=members)

        if isinstance(value, (list, tuple)):
            return ArrayNode(items=[JsonTreeBuilder.build(item) for item in value])

        if type(value) in SCALAR_TYPES:
            return ScalarNode(value=value)

        for scalar_type, convert in SCALAR_CONVERSIONS:
            if isinstance(value, scalar_type):
                return ScalarNode(value=convert(value))

        raise ValueError(f"cannot represent {type(value).__name__} as JSON")
