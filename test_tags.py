"""
Tests for open and close tag parsing and the void-element table.
"""

import pytest

from markup_engine.dom.attr import Attr
from markup_engine.dom.void_elements import VOID_ELEMENTS, is_void_element
from markup_engine.parser.errors import (EmptyTagNameError, MalformedCloseTagError,
                                         UnterminatedTagError)
from markup_engine.parser.scanner import Scanner
from markup_engine.parser.tags import parse_close_tag, parse_open_tag


def test_open_tag_with_attributes():
    tag, rest = parse_open_tag(Scanner('<div id="app" hidden>rest'))
    assert tag.tag == 'div'
    assert tag.attrs == (Attr('id', 'app'), Attr('hidden', True))
    assert not tag.self_closing
    assert tag.offset == 0
    assert rest.remainder == 'rest'


@pytest.mark.parametrize("markup", ['<br>', '<br/>', '<br >', '<br />'])
def test_void_tags_are_self_closing_however_written(markup):
    tag, rest = parse_open_tag(Scanner(markup))
    assert tag.tag == 'br'
    assert tag.self_closing
    assert rest.at_end


def test_explicit_self_closing_syntax():
    tag, rest = parse_open_tag(Scanner('<widget size=3/>after'))
    assert tag.self_closing
    assert tag.attrs == (Attr('size', '3'),)
    assert rest.remainder == 'after'


def test_slash_inside_quoted_value_does_not_self_close():
    tag, rest = parse_open_tag(Scanner('<a href="/x/>">'))
    assert not tag.self_closing
    assert tag.attrs == (Attr('href', '/x/>'),)
    assert rest.at_end


def test_whitespace_after_lt_is_allowed():
    tag, _ = parse_open_tag(Scanner('< div>'))
    assert tag.tag == 'div'


def test_empty_tag_name():
    with pytest.raises(EmptyTagNameError) as excinfo:
        parse_open_tag(Scanner('<>'))
    assert excinfo.value.offset == 0


def test_input_ending_inside_tag():
    with pytest.raises(UnterminatedTagError) as excinfo:
        parse_open_tag(Scanner('<div id="a"'))
    assert excinfo.value.tag == 'div'
    assert excinfo.value.offset == 0


def test_open_tag_requires_lt():
    with pytest.raises(ValueError):
        parse_open_tag(Scanner('div>'))


def test_close_tag():
    name, rest = parse_close_tag(Scanner('</div>x'))
    assert name == 'div'
    assert rest.remainder == 'x'


def test_close_tag_allows_inner_whitespace():
    name, rest = parse_close_tag(Scanner('</ div\n>'))
    assert name == 'div'
    assert rest.at_end


@pytest.mark.parametrize("markup", ['</div', '</div x>', '<div>'])
def test_malformed_close_tags(markup):
    with pytest.raises(MalformedCloseTagError):
        parse_close_tag(Scanner(markup))


def test_close_tag_without_name():
    with pytest.raises(EmptyTagNameError):
        parse_close_tag(Scanner('</ >'))


def test_void_table():
    assert len(VOID_ELEMENTS) == 14
    assert is_void_element('img')
    assert not is_void_element('IMG')
    assert not is_void_element('div')
