"""
Node base classes for the parsed tree.

The tree is a tagged union: every node carries a NodeType and consumers
switch on it. Nodes are immutable once built and a parent exclusively owns
its children; there are no parent or sibling back-references.

Every walk over the tree is iterative, so any tree the parser accepts can
be compared, hashed and exported regardless of its depth.
"""

from enum import IntEnum
from typing import Any, Dict, Iterator, List, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .element import ElementNode


class NodeType(IntEnum):
    """Node types, numbered as in the DOM."""
    ELEMENT_NODE = 1
    TEXT_NODE = 3
    DOCUMENT_NODE = 9


class Node:
    """Base class of every node in the parsed tree."""

    node_type: NodeType

    # Filled in on first hash; safe to cache because nodes never change
    _hash: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        raise NotImplementedError("Subclasses must implement to_dict")

    @property
    def text_content(self) -> str:
        raise NotImplementedError("Subclasses must implement text_content")

    def _shallow_dict(self) -> Dict[str, Any]:
        """to_dict() of this node alone, with an empty children list."""
        raise NotImplementedError("Subclasses must implement _shallow_dict")

    def _shallow_hash(self) -> int:
        """Hash of this node, reading children from their cached hashes."""
        raise NotImplementedError("Subclasses must implement _shallow_hash")

    def _same_shallow(self, other: 'Node') -> bool:
        """Compare this node with another of the same type, children excluded."""
        raise NotImplementedError("Subclasses must implement _same_shallow")


def iter_nodes(node: Node) -> Iterator[Node]:
    """
    Walk a node and all its descendants in document order.

    The node itself comes first; text nodes yield only themselves.
    """
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        if current.node_type != NodeType.TEXT_NODE:
            stack.extend(reversed(current.children))


def same_tree(left: Node, right: Node) -> bool:
    """Structural equality of two trees."""
    stack = [(left, right)]
    while stack:
        a, b = stack.pop()
        if a is b:
            continue
        if a.node_type != b.node_type or not a._same_shallow(b):
            return False
        if a.node_type != NodeType.TEXT_NODE:
            if len(a.children) != len(b.children):
                return False
            stack.extend(zip(a.children, b.children))
    return True


class ParentNode(Node):
    """
    A node that owns an ordered tuple of children.

    Provides the read-only query helpers shared by documents and elements.
    """

    def __init__(self, children=()):
        children = tuple(children)
        for child in children:
            if not isinstance(child, Node) or child.node_type == NodeType.DOCUMENT_NODE:
                raise TypeError(f"Children must be ElementNode or TextNode, got {type(child).__name__}")
        self._children: Tuple[Node, ...] = children

    @property
    def children(self) -> Tuple[Node, ...]:
        return self._children

    @property
    def child_elements(self) -> List['ElementNode']:
        """Child nodes that are elements, text skipped."""
        return [child for child in self._children if child.node_type == NodeType.ELEMENT_NODE]

    @property
    def text_content(self) -> str:
        """All descendant text, concatenated in document order."""
        return "".join(node.value for node in iter_nodes(self)
                       if node.node_type == NodeType.TEXT_NODE)

    def to_dict(self) -> Dict[str, Any]:
        root = self._shallow_dict()
        stack = [(self, root)]
        while stack:
            node, data = stack.pop()
            for child in node.children:
                child_data = child._shallow_dict()
                data["children"].append(child_data)
                if child.node_type != NodeType.TEXT_NODE:
                    stack.append((child, child_data))
        return root

    def iter_elements(self) -> Iterator['ElementNode']:
        """
        Walk descendant elements depth-first in document order.

        An element does not yield itself, only what it contains.
        """
        nodes = iter_nodes(self)
        next(nodes)
        for node in nodes:
            if node.node_type == NodeType.ELEMENT_NODE:
                yield node

    def find_all(self, tag: str) -> List['ElementNode']:
        """
        Get all descendant elements with a tag name.

        Args:
            tag: Tag name, matched case-sensitively

        Returns:
            Matching elements in document order
        """
        return [element for element in self.iter_elements() if element.tag == tag]

    def find(self, tag: str) -> Optional['ElementNode']:
        """Return the first descendant element with a tag name, or None."""
        for element in self.iter_elements():
            if element.tag == tag:
                return element
        return None

    def get_element_by_id(self, element_id: str) -> Optional['ElementNode']:
        """
        Get the first descendant whose ``id`` attribute equals element_id.

        Args:
            element_id: Element ID to find

        Returns:
            Matching element or None
        """
        for element in self.iter_elements():
            if element.get_attribute('id') == element_id:
                return element
        return None

    def get_elements_by_class(self, class_name: str) -> List['ElementNode']:
        """
        Get descendants listing class_name in their whitespace-separated ``class``.

        Args:
            class_name: A single class name

        Returns:
            Matching elements in document order
        """
        matches = []
        for element in self.iter_elements():
            value = element.get_attribute('class')
            if isinstance(value, str) and class_name in value.split():
                matches.append(element)
        return matches

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return same_tree(self, other)

    def __hash__(self) -> int:
        if self._hash is None:
            # Descendants come after their ancestors, so reversed order
            # hashes every child before its parent needs it
            for node in reversed(list(iter_nodes(self))):
                if node._hash is None:
                    node._hash = node._shallow_hash()
        return self._hash
