"""
Parsed tree for the markup engine.
This package provides the immutable node types produced by the parser.
"""

from .node import Node, NodeType, ParentNode
from .attr import Attr, BOOLEAN_TRUE
from .text import TextNode
from .element import ElementNode
from .document import Document
from .void_elements import VOID_ELEMENTS, is_void_element
from .serializer import to_markup, to_json, dump_tree

__all__ = [
    'Node', 'NodeType', 'ParentNode', 'Attr', 'BOOLEAN_TRUE', 'TextNode', 'ElementNode',
    'Document', 'VOID_ELEMENTS', 'is_void_element', 'to_markup', 'to_json', 'dump_tree'
]
