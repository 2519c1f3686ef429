import html
import re

import pytest

from heroblocks.markup import Element, element, render


def test_text_is_escaped_inside_element():
    assert render(element("p", {"class": "x"}, "a < b")) == '<p class="x">a &lt; b</p>'


def test_void_element_has_no_closing_tag():
    assert element("img", {"src": "a.png"}).render() == '<img src="a.png">'


def test_boolean_and_missing_attributes():
    out = element("button", {"disabled": True, "hidden": False, "title": None}).render()
    assert out == "<button disabled></button>"


def test_attribute_value_round_trips_through_escaping():
    value = 'say "hi" & <bye>'
    out = element("a", {"title": value}).render()
    match = re.search(r'title="([^"]*)"', out)
    assert match is not None
    assert html.unescape(match.group(1)) == value


def test_attribute_order_is_preserved():
    out = element("div", {"style": "s", "class": "c", "id": "i"}).render()
    assert out.index("style=") < out.index("class=") < out.index("id=")


def test_children_are_flattened_and_none_dropped():
    child = element("span")
    el = element("div", None, [child, None, ["x", ("y",)]], None)
    assert el.children == [child, "x", "y"]


def test_numbers_become_text():
    el = element("span", None, 7)
    assert el.children == ["7"]


def test_render_of_list_is_concatenation():
    a = element("b", None, "one")
    b = element("i", None, "two")
    assert render([a, b]) == a.render() + b.render()


def test_render_none_is_empty():
    assert render(None) == ""


def test_element_render_matches_module_render():
    el = element("section", {"id": "main"}, element("p", None, "hi"))
    assert el.render() == render(el)


def test_invalid_tag_is_rejected():
    with pytest.raises(ValueError):
        element("not a tag")


def test_invalid_attribute_name_is_rejected():
    with pytest.raises(ValueError):
        Element("div", {"bad name": "x"})


def test_void_element_rejects_children():
    with pytest.raises(ValueError):
        element("img", None, "text")


def test_unsupported_child_type_is_rejected():
    with pytest.raises(TypeError):
        element("div", None, object())


def test_boolean_child_is_rejected():
    with pytest.raises(TypeError):
        element("div", None, True)