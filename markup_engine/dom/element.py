"""
Element node implementation for the parsed tree.
"""

import re
from typing import Any, Dict, Iterable, List, Optional

from .attr import Attr, AttrValue
from .node import Node, NodeType, ParentNode
from .void_elements import is_void_element


class ElementNode(ParentNode):
    """
    An element with a tag name, ordered attributes and ordered children.

    Attributes keep source order and duplicates are not merged, so lookups
    by name return the first occurrence unless stated otherwise.
    """

    node_type = NodeType.ELEMENT_NODE

    def __init__(self, tag: str, attrs: Iterable[Attr] = (), children: Iterable[Node] = ()):
        """
        Initialize an element.

        Args:
            tag: The tag name, non-empty
            attrs: Attributes in source order
            children: Child nodes in source order

        Raises:
            ValueError: If the tag is empty, or a void element is given children
        """
        if not tag:
            raise ValueError("Tag name must not be empty")
        super().__init__(children)
        if self._children and is_void_element(tag):
            raise ValueError(f"Void element <{tag}> cannot have children")
        self._tag = tag
        self._attrs = tuple(attrs)
        for attr in self._attrs:
            if not isinstance(attr, Attr):
                raise TypeError(f"Attributes must be Attr instances, got {type(attr).__name__}")

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def attrs(self):
        return self._attrs

    @property
    def is_void(self) -> bool:
        return is_void_element(self._tag)

    def has_attribute(self, name: str) -> bool:
        return any(attr.name == name for attr in self._attrs)

    def get_attribute(self, name: str, default: Optional[AttrValue] = None) -> Optional[AttrValue]:
        """
        Get the value of the first attribute called name.

        Args:
            name: Attribute name, matched case-sensitively
            default: Returned when the attribute is absent

        Returns:
            The string value, True for a valueless attribute, or default
        """
        for attr in self._attrs:
            if attr.name == name:
                return attr.value
        return default

    def get_attributes(self, name: str) -> List[AttrValue]:
        """Get every value of a repeated attribute, in source order."""
        return [attr.value for attr in self._attrs if attr.name == name]

    @property
    def dataset(self) -> Dict[str, AttrValue]:
        """data-* attributes keyed by camelCase name (data-foo-bar -> fooBar)."""
        dataset = {}
        for attr in self._attrs:
            if attr.name.startswith('data-'):
                key = re.sub(r'-([a-z])', lambda m: m.group(1).upper(), attr.name[5:])
                dataset.setdefault(key, attr.value)
        return dataset

    def _shallow_dict(self) -> Dict[str, Any]:
        return {
            "type": "element",
            "tag": self._tag,
            "attrs": [attr.to_dict() for attr in self._attrs],
            "children": [],
        }

    def _shallow_hash(self) -> int:
        return hash((NodeType.ELEMENT_NODE, self._tag, self._attrs,
                     tuple(child._hash for child in self._children)))

    def _same_shallow(self, other: Node) -> bool:
        return self._tag == other.tag and self._attrs == other.attrs

    def __repr__(self) -> str:
        return f"ElementNode({self._tag!r}, attrs={list(self._attrs)!r}, children={len(self._children)})"
