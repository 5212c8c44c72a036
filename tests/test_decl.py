import pytest

from railwind.decl import Decl, Literal


def test_single_renders_as_is():
    assert Decl("display: flex").render() == "display: flex"


def test_multiple_lines_joined_with_indent():
    decl = Decl("a: 1", "b: 2")
    assert decl.render() == "a: 1;\n    b: 2"


def test_render_round_trips_lines():
    lines = ("x: 1", "y: 2", "z: 3", "w: 4", "v: 5")
    assert tuple(Decl(*lines).render().split(";\n    ")) == lines


def test_full_class_renders_verbatim():
    text = ".container {\n    width: 100%;\n}"
    decl = Decl.full(text)
    assert decl.is_full_class
    assert decl.render() == text


def test_full_and_plain_differ():
    assert Decl("a") == Decl("a")
    assert (Decl.full("a") == Decl("a")) is False
    assert hash(Decl("a", "b")) == hash(Decl("a", "b"))


def test_empty_decl_rejected():
    with pytest.raises(ValueError):
        Decl()


def test_literal_to_decl():
    literal = Literal("overflow: hidden", "white-space: nowrap")
    assert literal.to_decl() == Decl("overflow: hidden", "white-space: nowrap")
    assert literal == Literal("overflow: hidden", "white-space: nowrap")


def test_empty_literal_rejected():
    with pytest.raises(ValueError):
        Literal()