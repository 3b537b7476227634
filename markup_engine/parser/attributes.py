"""
Attribute parsing: one ``name[=value]`` pair at a time.
"""

from typing import Tuple

from markup_engine.dom.attr import Attr, BOOLEAN_TRUE
from .errors import EmptyAttributeNameError, UnterminatedQuoteError
from .scanner import Scanner, WHITESPACE

ATTR_NAME_STOP = WHITESPACE | {'=', '/', '>'}
UNQUOTED_VALUE_STOP = WHITESPACE | {'/', '>'}
QUOTES = ('"', "'")


def parse_one_attribute(scanner: Scanner) -> Tuple[Attr, Scanner]:
    """
    Parse one attribute.

    Leading whitespace is skipped. ``name`` alone yields a boolean attribute
    and consumes only the name; ``name = value`` takes a double-quoted,
    single-quoted or unquoted value. Values are returned exactly as written.

    Args:
        scanner: Position at or before the attribute name

    Returns:
        Tuple of the attribute and the scanner after it

    Raises:
        EmptyAttributeNameError: No name where one was expected
        UnterminatedQuoteError: A quoted value runs to end of input
    """
    start = scanner.trim_left()
    if start.peek() in QUOTES:
        raise EmptyAttributeNameError(
            f"quoted value {start.peek()} where an attribute name was expected",
            start.pos, start.text)

    name, after_name = start.read_until(ATTR_NAME_STOP)
    if not name:
        found = start.peek() or 'end of input'
        raise EmptyAttributeNameError(
            f"expected an attribute name, found {found!r}", start.pos, start.text)

    rest = after_name.trim_left()
    if not rest.startswith('='):
        return Attr(name, BOOLEAN_TRUE), after_name

    value, after_value = _parse_value(rest.advance(1).trim_left())
    return Attr(name, value), after_value


def _parse_value(scanner: Scanner) -> Tuple[str, Scanner]:
    quote = scanner.peek()
    if quote in QUOTES:
        end = scanner.text.find(quote, scanner.pos + 1)
        if end == -1:
            raise UnterminatedQuoteError(
                f"attribute value opened with {quote} is never closed",
                scanner.pos, scanner.text)
        return scanner.text[scanner.pos + 1:end], Scanner(scanner.text, end + 1)

    return scanner.read_until(UNQUOTED_VALUE_STOP)
