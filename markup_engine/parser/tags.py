"""
Tag parsing: ``<name attr*>``, ``<name attr*/>`` and ``</name>``.
"""

from typing import Tuple

from markup_engine.dom.attr import Attr
from markup_engine.dom.void_elements import is_void_element
from .attributes import parse_one_attribute
from .errors import EmptyTagNameError, MalformedCloseTagError, UnterminatedTagError
from .scanner import Scanner, WHITESPACE

TAG_NAME_STOP = WHITESPACE | {'/', '>'}
CLOSE_TAG_NAME_STOP = WHITESPACE | {'>'}


class OpenTag:
    """The result of parsing one open tag."""

    def __init__(self, tag: str, attrs: Tuple[Attr, ...], self_closing: bool, offset: int):
        """
        Args:
            tag: Tag name
            attrs: Attributes in source order
            self_closing: Written with ``/>`` or a void element
            offset: Offset of the tag's ``<``
        """
        self.tag = tag
        self.attrs = attrs
        self.self_closing = self_closing
        self.offset = offset

    def __repr__(self) -> str:
        return (f"OpenTag({self.tag!r}, attrs={list(self.attrs)!r}, "
                f"self_closing={self.self_closing}, offset={self.offset})")


def parse_open_tag(scanner: Scanner) -> Tuple[OpenTag, Scanner]:
    """
    Parse an open tag starting at ``<``.

    Attributes are read until the tag's own terminator. The element is
    self-closing when that terminator is ``/>`` or when the tag name is a
    void element; the void check depends on the name only.

    Args:
        scanner: Position of the ``<``

    Returns:
        Tuple of the parsed tag and the scanner after its terminator

    Raises:
        ValueError: The scanner is not at ``<``
        EmptyTagNameError: ``<`` is not followed by a name
        UnterminatedTagError: Input ends before ``>`` or ``/>``
    """
    if not scanner.startswith('<'):
        raise ValueError(f"Open tag must start with '<', got {scanner.peek()!r}")
    offset = scanner.pos

    tag, rest = scanner.advance(1).trim_left().read_until(TAG_NAME_STOP)
    if not tag:
        raise EmptyTagNameError("tag has no name", offset, scanner.text)

    self_closing = is_void_element(tag)
    attrs = []
    while True:
        rest = rest.trim_left()
        if rest.at_end:
            raise UnterminatedTagError(tag, offset, scanner.text)
        if rest.startswith('/>'):
            self_closing = True
            rest = rest.advance(2)
            break
        if rest.startswith('>'):
            rest = rest.advance(1)
            break
        attr, rest = parse_one_attribute(rest)
        attrs.append(attr)

    return OpenTag(tag, tuple(attrs), self_closing, offset), rest


def parse_close_tag(scanner: Scanner) -> Tuple[str, Scanner]:
    """
    Parse a close tag ``</name>``.

    Whitespace is allowed after ``</`` and before ``>``.

    Args:
        scanner: Position of the ``</``

    Returns:
        Tuple of the tag name and the scanner after ``>``

    Raises:
        EmptyTagNameError: ``</`` is not followed by a name
        MalformedCloseTagError: Not a ``</``, or the name is not followed by ``>``
    """
    offset = scanner.pos
    if not scanner.startswith('</'):
        raise MalformedCloseTagError("expected '</'", offset, scanner.text)

    tag, rest = scanner.advance(2).trim_left().read_until(CLOSE_TAG_NAME_STOP)
    if not tag:
        raise EmptyTagNameError("close tag has no name", offset, scanner.text)

    rest = rest.trim_left()
    if not rest.startswith('>'):
        raise MalformedCloseTagError(f"</{tag} is not closed with '>'", offset, scanner.text)

    return tag, rest.advance(1)
