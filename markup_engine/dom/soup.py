"""
Export of parsed trees to BeautifulSoup.
"""

import logging
from typing import Dict, List, Tuple, Union

from bs4 import BeautifulSoup, NavigableString, Tag

from .document import Document
from .element import ElementNode
from .node import Node, NodeType

logger = logging.getLogger(__name__)


def to_soup(node: Union[Document, ElementNode]) -> BeautifulSoup:
    """
    Convert a parsed document or element into a BeautifulSoup tree.

    Boolean attributes become empty strings. bs4 keeps attributes in a
    dict, so only the first of several same-named attributes survives.

    Args:
        node: Document or element to convert

    Returns:
        BeautifulSoup: A new soup holding the converted nodes
    """
    soup = BeautifulSoup('', 'html.parser')
    if node.node_type == NodeType.DOCUMENT_NODE:
        roots = node.children
    elif node.node_type == NodeType.ELEMENT_NODE:
        roots = (node,)
    else:
        raise TypeError(f"Expected a Document or ElementNode, got {type(node).__name__}")

    stack: List[Tuple[Node, Union[BeautifulSoup, Tag]]] = [(root, soup) for root in reversed(roots)]
    while stack:
        current, parent = stack.pop()
        if current.node_type == NodeType.TEXT_NODE:
            parent.append(NavigableString(current.value))
            continue
        tag = soup.new_tag(current.tag, attrs=_soup_attrs(current))
        parent.append(tag)
        stack.extend((child, tag) for child in reversed(current.children))
    return soup


def _soup_attrs(element: ElementNode) -> Dict[str, str]:
    attrs = {}
    for attr in element.attrs:
        if attr.name in attrs:
            logger.debug(f"Dropping duplicate attribute {attr.name!r} on <{element.tag}>")
            continue
        attrs[attr.name] = '' if attr.is_boolean else attr.value
    return attrs
