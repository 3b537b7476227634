"""
Serialization of parsed trees: minimal markup, JSON and an indented outline.
"""

import json
from typing import List, Optional, Union

from .attr import Attr
from .node import Node, NodeType


def to_markup(node: Node) -> str:
    """
    Write a node back as minimal markup.

    Parsing the result gives back an equal tree. Void elements are written
    as ``<tag/>``, boolean attributes bare.

    Args:
        node: Document, element or text node

    Returns:
        str: The markup

    Raises:
        ValueError: Text contains ``<``, or an attribute value contains both
            quote characters; neither can be written without entities
    """
    parts: List[str] = []
    # Pending nodes, plus the close tags to write once their children are done
    stack: List[Union[Node, str]] = [node]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif item.node_type == NodeType.TEXT_NODE:
            if '<' in item.value:
                raise ValueError(f"Text {item.value!r} contains '<' and cannot be serialized")
            parts.append(item.value)
        elif item.node_type == NodeType.ELEMENT_NODE:
            parts.append('<' + item.tag)
            for attr in item.attrs:
                parts.append(' ' + _format_attr(attr))
            if item.is_void:
                parts.append('/>')
                continue
            parts.append('>')
            stack.append(f'</{item.tag}>')
            stack.extend(reversed(item.children))
        elif item.node_type == NodeType.DOCUMENT_NODE:
            stack.extend(reversed(item.children))
        else:
            raise TypeError(f"Cannot serialize {item!r}")
    return "".join(parts)


def _format_attr(attr: Attr) -> str:
    if attr.is_boolean:
        return attr.name
    value = attr.value
    if '"' not in value:
        return f'{attr.name}="{value}"'
    if "'" not in value:
        return f"{attr.name}='{value}'"
    raise ValueError(f"Value of attribute {attr.name!r} contains both quote characters")


def to_json(node: Node, indent: Optional[int] = None) -> str:
    """
    Dump ``node.to_dict()`` as JSON.

    Raises:
        ValueError: The tree is nested deeper than the json encoder can recurse
    """
    data = node.to_dict()
    try:
        return json.dumps(data, indent=indent, ensure_ascii=False)
    except RecursionError:
        raise ValueError("Tree is nested too deeply to encode as JSON") from None


def dump_tree(node: Node, indent: int = 2) -> str:
    """
    Render an outline of the tree, one node per line.

    Elements appear as their open tag, text as a JSON string literal.
    """
    lines: List[str] = []
    stack = [(node, 0)]
    while stack:
        current, level = stack.pop()
        prefix = ' ' * (level * indent)
        if current.node_type == NodeType.TEXT_NODE:
            lines.append(prefix + json.dumps(current.value, ensure_ascii=False))
            continue
        if current.node_type == NodeType.DOCUMENT_NODE:
            lines.append(prefix + '#document')
        else:
            attrs = ''.join(
                f' {attr.name}' if attr.is_boolean
                else f' {attr.name}={json.dumps(attr.value, ensure_ascii=False)}'
                for attr in current.attrs)
            lines.append(f'{prefix}<{current.tag}{attrs}>')
        stack.extend((child, level + 1) for child in reversed(current.children))
    return "\n".join(lines)
