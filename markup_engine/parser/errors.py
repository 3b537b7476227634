"""
Parse failures.

Every failure aborts the whole parse and reaches the caller as one of the
ParseError subclasses below. Each carries its ErrorKind and the 0-based
character offset where it was detected; line, column and a short snippet are
derived from the source text when it is known.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Failure taxonomy."""
    EMPTY_TAG_NAME = "EmptyTagName"
    EMPTY_ATTRIBUTE_NAME = "EmptyAttributeName"
    UNTERMINATED_QUOTE = "UnterminatedQuote"
    UNTERMINATED_TAG = "UnterminatedTag"
    MALFORMED_CLOSE_TAG = "MalformedCloseTag"
    MISMATCHED_CLOSE_TAG = "MismatchedCloseTag"
    UNEXPECTED_CLOSE_TAG = "UnexpectedCloseTag"
    UNCLOSED_ELEMENT = "UnclosedElement"
    NESTING_TOO_DEEP = "NestingTooDeep"


SNIPPET_LENGTH = 20


def find_line_and_column(source: str, offset: int):
    """Return the 1-based (line, column) of a character offset."""
    line = source.count('\n', 0, offset) + 1
    line_start = source.rfind('\n', 0, offset) + 1
    return line, offset - line_start + 1


class ParseError(ValueError):
    """Base class of all parse failures."""

    kind: ErrorKind

    def __init__(self, message: str, offset: int, source: Optional[str] = None):
        """
        Args:
            message: Human readable description
            offset: Character offset where the failure was detected
            source: The text being parsed, used for line/column and snippet
        """
        super().__init__(message)
        self.message = message
        self.offset = offset
        self.source = source

    @property
    def line(self) -> Optional[int]:
        if self.source is None:
            return None
        return find_line_and_column(self.source, self.offset)[0]

    @property
    def column(self) -> Optional[int]:
        if self.source is None:
            return None
        return find_line_and_column(self.source, self.offset)[1]

    @property
    def snippet(self) -> str:
        if self.source is None:
            return ''
        return self.source[self.offset:self.offset + SNIPPET_LENGTH]

    def __str__(self) -> str:
        if self.source is None:
            return f"{self.kind.value} at offset {self.offset}: {self.message}"
        return (f"{self.kind.value} at line {self.line}, column {self.column}: "
                f"{self.message} near {self.snippet!r}")


class EmptyTagNameError(ParseError):
    kind = ErrorKind.EMPTY_TAG_NAME


class EmptyAttributeNameError(ParseError):
    kind = ErrorKind.EMPTY_ATTRIBUTE_NAME


class UnterminatedQuoteError(ParseError):
    kind = ErrorKind.UNTERMINATED_QUOTE


class UnterminatedTagError(ParseError):
    """End of input inside an open tag, before its ``>`` or ``/>``."""
    kind = ErrorKind.UNTERMINATED_TAG

    def __init__(self, tag: str, offset: int, source: Optional[str] = None):
        super().__init__(f"end of input inside <{tag}>", offset, source)
        self.tag = tag


class MalformedCloseTagError(ParseError):
    kind = ErrorKind.MALFORMED_CLOSE_TAG


class MismatchedCloseTagError(ParseError):
    """The close tag does not match the innermost open element."""
    kind = ErrorKind.MISMATCHED_CLOSE_TAG

    def __init__(self, expected: str, found: str, offset: int, source: Optional[str] = None):
        super().__init__(f"expected </{expected}>, found </{found}>", offset, source)
        self.expected = expected
        self.found = found


class UnexpectedCloseTagError(ParseError):
    """A close tag where no element is open."""
    kind = ErrorKind.UNEXPECTED_CLOSE_TAG

    def __init__(self, found: str, offset: int, source: Optional[str] = None):
        super().__init__(f"</{found}> does not close any open element", offset, source)
        self.found = found


class UnclosedElementError(ParseError):
    kind = ErrorKind.UNCLOSED_ELEMENT

    def __init__(self, tag: str, offset: int, opened_at: int, source: Optional[str] = None):
        super().__init__(f"<{tag}> is never closed", offset, source)
        self.tag = tag
        self.opened_at = opened_at


class NestingTooDeepError(ParseError):
    kind = ErrorKind.NESTING_TOO_DEEP

    def __init__(self, max_depth: int, offset: int, source: Optional[str] = None):
        super().__init__(f"elements nested deeper than {max_depth}", offset, source)
        self.max_depth = max_depth
