import pytest

from railwind.values import (
    get_arbitrary_value,
    get_tuple_value,
    get_value,
    get_value_neg,
    hex_to_rgb_color,
    value_is_hex,
    value_is_size,
)

TABLE = {"4": "1rem", "neg": "-2px"}


def test_value_is_size():
    assert value_is_size("5rem")
    assert value_is_size("50%")
    assert value_is_size("[25px]")
    assert not value_is_size("red-500")


def test_hex_to_rgb_color():
    assert hex_to_rgb_color("#000") is not None
    assert hex_to_rgb_color("#000") == (0, 0, 0)
    assert hex_to_rgb_color("#64748b") == (100, 116, 139)
    assert hex_to_rgb_color("#color") is None


def test_hex_to_rgb_color_short_form_only_doubles_f():
    assert hex_to_rgb_color("#fff") == (255, 255, 255)
    assert hex_to_rgb_color("abc") == (10, 11, 12)


@pytest.mark.parametrize("value", ["#ab", "#+1+2+3", "#a_b_c_", ""])
def test_hex_to_rgb_color_rejects_malformed(value):
    assert hex_to_rgb_color(value) is None


def test_get_arbitrary_value():
    assert get_arbitrary_value("[25px]") == "25px"
    assert get_arbitrary_value("[.5rem]") == "0.5rem"
    assert get_arbitrary_value("[1px_solid]") == "1px solid"
    assert get_arbitrary_value("['a']") == '"a"'
    assert get_arbitrary_value("25px") is None


def test_get_value_prefers_arbitrary_then_table():
    assert get_value("[3px]", TABLE) == "3px"
    assert get_value("4", TABLE) == "1rem"
    assert get_value("5", TABLE) is None


def test_get_value_neg():
    assert get_value_neg(False, "4", TABLE) == "1rem"
    assert get_value_neg(True, "4", TABLE) == "-1rem"
    assert get_value_neg(True, "neg", TABLE) == "2px"
    assert get_value_neg(True, "[-3px]", TABLE) == "3px"
    assert get_value_neg(True, "[3px]", TABLE) == "-3px"
    assert get_value_neg(True, "missing", TABLE) is None


def test_get_tuple_value():
    pairs = {"sm": ("0.875rem", "1.25rem")}
    assert get_tuple_value("sm", pairs) == ("0.875rem", "1.25rem")
    assert get_tuple_value("[9px]", pairs) == ("9px", "9px")
    assert get_tuple_value("xl", pairs) is None


def test_value_is_hex():
    assert value_is_hex("#fff")
    assert value_is_hex("[#fff]")
    assert not value_is_hex("[#fff")
    assert not value_is_hex("red-500")