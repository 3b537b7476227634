"""
Tests for the BeautifulSoup export.
"""

import sys

import pytest
from bs4 import BeautifulSoup

from markup_engine import parse_html
from markup_engine.dom import TextNode
from markup_engine.dom.soup import to_soup
from markup_engine.parser import HTMLParser

APP_MARKUP = ('<div id="app"><h1 class="title">Hi</h1>'
              '<p>Hello <em>world</em>!</p><br/></div>')


def test_document_structure_is_preserved():
    soup = to_soup(parse_html(APP_MARKUP))
    assert isinstance(soup, BeautifulSoup)
    assert soup.div['id'] == 'app'
    assert [tag.name for tag in soup.div.find_all(recursive=False)] == ['h1', 'p', 'br']
    assert soup.find('em').get_text() == 'world'
    assert soup.p.get_text() == 'Hello world!'
    assert soup.br.contents == []


def test_boolean_attribute_becomes_empty_string():
    soup = to_soup(parse_html('<input disabled type="text">'))
    assert soup.input['disabled'] == ''
    assert soup.input['type'] == 'text'


def test_duplicate_attribute_keeps_first():
    soup = to_soup(parse_html('<x a="1" a="2"></x>'))
    assert soup.x['a'] == '1'


def test_single_element():
    element = parse_html(APP_MARKUP).find('p')
    soup = to_soup(element)
    assert [tag.name for tag in soup.find_all(True)] == ['p', 'em']


def test_text_node_is_rejected():
    with pytest.raises(TypeError):
        to_soup(TextNode('x'))


def test_deepest_accepted_nesting_converts():
    depth = sys.getrecursionlimit() // 2
    markup = '<a>' * depth + 'x' + '</a>' * depth
    soup = to_soup(HTMLParser(max_depth=depth).parse(markup))
    tags = soup.find_all('a')
    assert len(tags) == depth
    assert tags[-1].contents == ['x']
