"""
Tests for the parsed tree types and their query helpers.
"""

import pytest

from markup_engine import parse_html
from markup_engine.dom import Attr, Document, ElementNode, NodeType, TextNode

PAGE = ('<div id="app" class="shell dark">'
        '<h1 class="title">Hi</h1>'
        '<ul><li class="item">one</li><li class="item first-ish">two <b>2</b></li></ul>'
        '<p id="footer" data-user-id="7" data-x="1">bye</p>'
        '</div>')


@pytest.fixture
def document():
    return parse_html(PAGE)


def test_iter_elements_is_document_order(document):
    assert [element.tag for element in document.iter_elements()] == [
        'div', 'h1', 'ul', 'li', 'li', 'b', 'p']


def test_find_and_find_all(document):
    assert [li.text_content for li in document.find_all('li')] == ['one', 'two 2']
    assert document.find('b').text_content == '2'
    assert document.find('table') is None
    ul = document.find('ul')
    assert len(ul.find_all('li')) == 2
    assert ul.find_all('ul') == []


def test_get_element_by_id(document):
    assert document.get_element_by_id('footer').tag == 'p'
    assert document.get_element_by_id('app').tag == 'div'
    assert document.get_element_by_id('missing') is None


def test_get_elements_by_class_uses_class_list(document):
    assert [e.tag for e in document.get_elements_by_class('item')] == ['li', 'li']
    assert [e.tag for e in document.get_elements_by_class('dark')] == ['div']
    assert document.get_elements_by_class('first') == []


def test_text_content_concatenates_descendants(document):
    assert document.find('ul').text_content == 'onetwo 2'
    assert document.text_content == 'Hionetwo 2bye'


def test_child_elements_skip_text():
    li = parse_html('<li>two <b>2</b> more</li>').children[0]
    assert [child.tag for child in li.child_elements] == ['b']
    assert len(li.children) == 3


def test_dataset(document):
    assert document.get_element_by_id('footer').dataset == {'userId': '7', 'x': '1'}


def test_has_attribute_and_default():
    element = ElementNode('input', [Attr('disabled')])
    assert element.has_attribute('disabled')
    assert not element.has_attribute('Disabled')
    assert element.get_attribute('value', '') == ''
    assert element.is_void


def test_to_dict_shapes():
    document = parse_html('<input disabled><p>x</p>')
    assert document.to_dict() == {
        "type": "document",
        "children": [
            {"type": "element", "tag": "input",
             "attrs": [{"name": "disabled", "value": True}], "children": []},
            {"type": "element", "tag": "p", "attrs": [],
             "children": [{"type": "text", "value": "x"}]},
        ],
    }


def test_node_types():
    assert TextNode('x').node_type == NodeType.TEXT_NODE
    assert ElementNode('p').node_type == NodeType.ELEMENT_NODE
    assert Document().node_type == NodeType.DOCUMENT_NODE


def test_void_element_cannot_have_children():
    with pytest.raises(ValueError):
        ElementNode('br', children=[TextNode('x')])


def test_invalid_construction():
    with pytest.raises(ValueError):
        Attr('')
    with pytest.raises(ValueError):
        Attr('a', 1)
    with pytest.raises(ValueError):
        ElementNode('')
    with pytest.raises(TypeError):
        ElementNode('p', attrs=[('a', '1')])
    with pytest.raises(TypeError):
        Document([Document()])
    with pytest.raises(TypeError):
        TextNode(None)


def test_attr_equality_distinguishes_true_from_strings():
    assert Attr('a', True) == Attr('a')
    assert Attr('a', True) != Attr('a', 'true')
    assert Attr('a', 'x') != Attr('b', 'x')
