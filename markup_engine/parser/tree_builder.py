"""
Recursive-descent tree construction.

Each call of ``_parse_nodes`` is one frame waiting for a specific close tag;
the top-level frame waits for end of input instead. Frames never repair
markup: a wrong close tag, a stray close tag or a missing one fails the
whole parse.
"""

import sys
from typing import List, Optional, Tuple

from markup_engine.dom.element import ElementNode
from markup_engine.dom.node import Node
from markup_engine.dom.text import TextNode
from markup_engine.utils.config import DEFAULT_MAX_DEPTH, validate_max_depth
from .errors import (MismatchedCloseTagError, NestingTooDeepError,
                     UnclosedElementError, UnexpectedCloseTagError)
from .scanner import Scanner, trim
from .tags import OpenTag, parse_close_tag, parse_open_tag

TEXT_STOP = frozenset('<')


class TreeBuilder:
    """Builds the node list for a run of markup."""

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH):
        """
        Args:
            max_depth: Deepest allowed element nesting; top-level elements are depth 1

        Raises:
            ValueError: max_depth is not a positive integer, or is too deep
                for the interpreter stack
        """
        max_depth = validate_max_depth(max_depth)
        # One Python frame per open element
        if max_depth > sys.getrecursionlimit() // 2:
            raise ValueError(f"max_depth {max_depth} exceeds half the recursion limit "
                             f"({sys.getrecursionlimit()})")
        self.max_depth = max_depth

    def build(self, scanner: Scanner) -> List[Node]:
        """
        Parse everything from the scanner to end of input.

        Returns:
            Top-level nodes in source order
        """
        nodes, _ = self._parse_nodes(scanner, None, 0)
        return nodes

    def _parse_nodes(self, scanner: Scanner, parent: Optional[OpenTag],
                     depth: int) -> Tuple[List[Node], Scanner]:
        nodes: List[Node] = []

        while True:
            # Whitespace is skipped only to decide what comes next; text keeps it
            head = scanner.trim_left()

            if head.at_end:
                if parent is not None:
                    raise UnclosedElementError(parent.tag, head.pos, parent.offset, head.text)
                return nodes, head

            if head.startswith('</'):
                found, rest = parse_close_tag(head)
                if parent is None:
                    raise UnexpectedCloseTagError(found, head.pos, head.text)
                if found != parent.tag:
                    raise MismatchedCloseTagError(parent.tag, found, head.pos, head.text)
                return nodes, rest

            if head.startswith('<'):
                open_tag, rest = parse_open_tag(head)
                if open_tag.self_closing:
                    nodes.append(ElementNode(open_tag.tag, open_tag.attrs))
                    scanner = rest
                    continue

                if depth >= self.max_depth:
                    raise NestingTooDeepError(self.max_depth, open_tag.offset, head.text)
                children, scanner = self._parse_nodes(rest, open_tag, depth + 1)
                nodes.append(ElementNode(open_tag.tag, open_tag.attrs, children))
                continue

            raw, scanner = scanner.read_until(TEXT_STOP)
            # Indentation and newlines between tags never become text nodes
            if trim(raw):
                nodes.append(TextNode(raw))
