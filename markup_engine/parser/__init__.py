"""
Parser for the supported HTML subset.
"""

from .errors import (ErrorKind, ParseError, EmptyTagNameError, EmptyAttributeNameError,
                     UnterminatedQuoteError, UnterminatedTagError, MalformedCloseTagError,
                     MismatchedCloseTagError, UnexpectedCloseTagError, UnclosedElementError,
                     NestingTooDeepError)
from .scanner import Scanner
from .attributes import parse_one_attribute
from .tags import OpenTag, parse_open_tag, parse_close_tag
from .tree_builder import TreeBuilder
from .html_parser import HTMLParser, parse_html

__all__ = [
    'ErrorKind', 'ParseError', 'EmptyTagNameError', 'EmptyAttributeNameError',
    'UnterminatedQuoteError', 'UnterminatedTagError', 'MalformedCloseTagError',
    'MismatchedCloseTagError', 'UnexpectedCloseTagError', 'UnclosedElementError',
    'NestingTooDeepError', 'Scanner', 'parse_one_attribute', 'OpenTag', 'parse_open_tag',
    'parse_close_tag', 'TreeBuilder', 'HTMLParser', 'parse_html',
]
