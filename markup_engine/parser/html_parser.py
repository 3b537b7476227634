"""
HTML parser implementation.
This module is the entry point that turns a markup fragment into a Document.
"""

import logging
import time
from typing import Optional, Union

from markup_engine.dom.document import Document
from markup_engine.utils.config import Config, DEFAULT_MAX_DEPTH, validate_max_depth
from markup_engine.utils.logging import PerformanceLogger
from .errors import ParseError
from .scanner import Scanner
from .tree_builder import TreeBuilder

logger = logging.getLogger(__name__)


class HTMLParser:
    """Parser for the supported HTML subset."""

    def __init__(self, config: Optional[Config] = None, max_depth: Optional[int] = None):
        """
        Initialize the HTML parser.

        Args:
            config: Configuration to read ``parser.max_depth`` from
            max_depth: Nesting limit, overrides the configuration

        Raises:
            ValueError: The nesting limit is not a positive integer
        """
        if max_depth is not None:
            self.max_depth = validate_max_depth(max_depth)
        elif config is not None:
            self.max_depth = config.get_max_depth()
        else:
            self.max_depth = DEFAULT_MAX_DEPTH

        self._builder = TreeBuilder(self.max_depth)
        self._perf = PerformanceLogger(logger, "HTMLParser")
        logger.debug(f"HTML parser initialized (max_depth: {self.max_depth})")

    def parse(self, html_content: Union[str, bytes]) -> Document:
        """
        Parse markup into a Document.

        Leading whitespace of the input is skipped. Any failure aborts the
        parse; no partial document is ever returned.

        Args:
            html_content: Markup text, or UTF-8 encoded bytes

        Returns:
            Document: The parsed tree

        Raises:
            ParseError: The markup is malformed (see ErrorKind)
            TypeError: The input is neither str nor bytes
            UnicodeDecodeError: Bytes input is not valid UTF-8
        """
        text = self._decode(html_content)
        logger.debug(f"Parsing {len(text)} characters")

        # Timed per call; one parser may serve several threads
        started = time.perf_counter()
        try:
            nodes = self._builder.build(Scanner(text).trim_left())
        except ParseError as e:
            logger.debug(f"Parse failed: {e}")
            raise
        finally:
            self._perf.log("parse", time.perf_counter() - started)

        document = Document(nodes)
        logger.debug(f"Parsed document with {len(document.children)} top-level nodes")
        return document

    def _decode(self, html_content: Union[str, bytes]) -> str:
        if isinstance(html_content, str):
            return html_content
        if isinstance(html_content, (bytes, bytearray)):
            # utf-8-sig drops a leading byte order mark
            return bytes(html_content).decode('utf-8-sig')
        raise TypeError(f"Expected str or bytes, got {type(html_content).__name__}")


def parse_html(html_content: Union[str, bytes], max_depth: int = DEFAULT_MAX_DEPTH) -> Document:
    """
    Parse markup with a one-off parser.

    Args:
        html_content: Markup text, or UTF-8 encoded bytes
        max_depth: Nesting limit

    Returns:
        Document: The parsed tree
    """
    return HTMLParser(max_depth=max_depth).parse(html_content)
