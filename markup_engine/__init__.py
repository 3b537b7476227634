"""
Markup Engine - a small, strict parser for a subset of HTML.
"""

import logging

from markup_engine.dom import Attr, Document, ElementNode, NodeType, TextNode
from markup_engine.parser import HTMLParser, ParseError, ErrorKind, parse_html

# Package information
__version__ = "1.0.0"
__author__ = "Markup Engine Team"
__description__ = "A small, strict parser for a subset of HTML"

# Handlers are installed by the command line, never on import
logger = logging.getLogger(__name__)

__all__ = [
    'Attr', 'Document', 'ElementNode', 'NodeType', 'TextNode',
    'HTMLParser', 'ParseError', 'ErrorKind', 'parse_html',
]
