"""Tests for the virtual element helpers."""

import pytest

from jokoui import Component, Document, mount
from jokoui.ui import Button, Div, Img, Input, Label, Span, VElement, create_element, render_to_string


def test_create_element_flattens_children():
    element = create_element("ul", {"className": "list"}, [create_element("li", None, "a"), ["b"]], 3)

    assert element.tag == "ul"
    assert element.children[1:] == ("b", 3)
    assert render_to_string(element) == '<ul class="list"><li>a</li>b3</ul>'


def test_virtual_elements_are_immutable():
    element = create_element("p")

    with pytest.raises(Exception):
        element.tag = "div"


def test_render_primitives_and_empty_values():
    assert render_to_string("text") == "text"
    assert render_to_string(42) == "42"
    assert render_to_string(None) == ""
    assert render_to_string(VElement("")) == ""


def test_boolean_attributes():
    assert render_to_string(create_element("button", {"disabled": True}, "Go")) == "<button disabled>Go</button>"
    assert render_to_string(create_element("button", {"disabled": False}, "Go")) == "<button>Go</button>"


def test_self_closing_tags():
    assert render_to_string(create_element("br")) == "<br />"
    assert render_to_string(Input(type="text", name="q")) == '<input type="text" name="q" />'
    assert render_to_string(Img({"src": "a.png"})) == '<img src="a.png" />'


def test_self_closing_builders_reject_children():
    with pytest.raises(RuntimeError, match="cannot have child elements"):
        Img("child")


def test_builder_attribute_names():
    element = Label("Name", _for="name", cls="field", data_joko_click="focus")

    assert render_to_string(element) == '<label for="name" class="field" data-joko-click="focus">Name</label>'


def test_builders_render_mountable_markup():
    class Greeter(Component):
        def greet(self, event):
            self.state.greeting = "hello"

        def render(self):
            return str(Div(Span(self.state.greeting or "..."), Button("Greet", data_joko_click="greet")))

    document = Document('<div id="app"></div>')
    greeter = mount(Greeter(), "app", document)

    document.click(document.select_one("button"))

    assert document.select_one("span").get_text() == "hello"
    assert greeter.state.greeting == "hello"
