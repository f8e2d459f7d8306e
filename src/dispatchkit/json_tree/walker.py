"""Walker over JSON trees."""

from typing import List

from dispatchkit.json_tree.nodes import ArrayNode, JsonNode, MemberNode, ObjectNode
from dispatchkit.visitors.walker import Walker


class JsonTreeWalker(Walker[JsonNode]):
    """A walker whose children are those of the JSON document structure.

    Objects have their members as children, a member has its value as only
    child, arrays have their items and scalars are leaves.
    """

    def children(self, node: JsonNode) -> List[JsonNode]:
        if isinstance(node, ObjectNode):
            return list(node.members)
        if isinstance(node, MemberNode):
            return [node.value]
        if isinstance(node, ArrayNode):
            return list(node.items)
        return []
