"""
Tests for the input scanner.
"""

from markup_engine.parser.scanner import (WHITESPACE, WHITESPACE_CHARS, Scanner, trim,
                                          trim_left, trim_right)


def test_read_until_stops_before_stop_character():
    consumed, rest = Scanner("abc=def").read_until({'='})
    assert consumed == "abc"
    assert rest.pos == 3
    assert rest.peek() == '='


def test_read_until_without_stop_consumes_everything():
    consumed, rest = Scanner("abc").read_until({'>'})
    assert consumed == "abc"
    assert rest.at_end
    assert rest.remainder == ""


def test_read_until_at_stop_consumes_nothing():
    consumed, rest = Scanner(">x").read_until({'>'})
    assert consumed == ""
    assert rest.pos == 0


def test_scanner_is_not_changed_by_reads():
    scanner = Scanner("  name=value")
    scanner.trim_left().read_until({'='})
    assert scanner.pos == 0
    assert scanner.remainder == "  name=value"


def test_trim_left_skips_whitespace_class_only():
    scanner = Scanner(" \t\r\n\x0cx").trim_left()
    assert scanner.peek() == '\x0c'
    assert scanner.trim_left() == scanner


def test_string_trims_are_idempotent():
    text = "\n\t hello \r\n"
    assert trim_left(text) == "hello \r\n"
    assert trim_right(text) == "\n\t hello"
    assert trim(text) == "hello"
    assert trim(trim(text)) == trim(text)
    assert trim_left(trim_left(text)) == trim_left(text)
    assert trim_right(trim_right(text)) == trim_right(text)


def test_startswith_and_advance():
    scanner = Scanner("</div>")
    assert scanner.startswith('</')
    assert scanner.advance(2).remainder == "div>"
    assert Scanner("ab").advance(10).at_end


def test_whitespace_set_matches_trim_characters():
    assert WHITESPACE == frozenset(' \t\n\r')
    assert WHITESPACE == frozenset(WHITESPACE_CHARS)
