"""
Document implementation for the parsed tree.
"""

from typing import Any, Dict, Iterable

from .node import Node, NodeType, ParentNode


class Document(ParentNode):
    """Root of a parsed tree. Has children but no tag or attributes."""

    node_type = NodeType.DOCUMENT_NODE

    def __init__(self, children: Iterable[Node] = ()):
        super().__init__(children)

    def _shallow_dict(self) -> Dict[str, Any]:
        return {"type": "document", "children": []}

    def _shallow_hash(self) -> int:
        return hash((NodeType.DOCUMENT_NODE, tuple(child._hash for child in self._children)))

    def _same_shallow(self, other: Node) -> bool:
        return True

    def __repr__(self) -> str:
        return f"Document(children={len(self._children)})"
