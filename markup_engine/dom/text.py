"""
Text node implementation for the parsed tree.
"""

from typing import Any, Dict

from .node import Node, NodeType


class TextNode(Node):
    """
    A run of character data between tags.

    The value is kept exactly as it appeared in the source, surrounding
    whitespace included.
    """

    node_type = NodeType.TEXT_NODE

    def __init__(self, value: str):
        if not isinstance(value, str):
            raise TypeError(f"Text value must be a string, got {type(value).__name__}")
        self._value = value

    @property
    def value(self) -> str:
        return self._value

    @property
    def text_content(self) -> str:
        return self._value

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "text", "value": self._value}

    _shallow_dict = to_dict

    def _shallow_hash(self) -> int:
        return hash((NodeType.TEXT_NODE, self._value))

    def _same_shallow(self, other: Node) -> bool:
        return self._value == other.value

    def __eq__(self, other) -> bool:
        if not isinstance(other, TextNode):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return self._shallow_hash()

    def __repr__(self) -> str:
        return f"TextNode({self._value!r})"
