import pytest

from railwind.transforms import TRANSFORM_STYLE, parse_transform


def decl_of(value):
    parsed = parse_transform(value)
    assert parsed is not None
    return parsed.to_decl()


def test_transform_style_pins_source_text():
    assert TRANSFORM_STYLE.startswith("transform: translate(var(--tw-translate-x)")
    assert TRANSFORM_STYLE.endswith("scaleY(var(--tw-scale-y))")


def test_rotate_arbitrary():
    decl = decl_of("rotate-[45deg]")
    assert decl.lines == ("--tw-rotate: 45deg", TRANSFORM_STYLE)


def test_negative_rotate_flips_sign():
    positive = decl_of("rotate-[45deg]").lines[0]
    negative = decl_of("-rotate-[45deg]").lines[0]
    assert negative == positive.replace(": ", ": -")


def test_negative_of_negative_arbitrary_is_positive():
    assert decl_of("-rotate-[-45deg]").lines[0] == decl_of("rotate-[45deg]").lines[0]


@pytest.mark.parametrize("axis", ["x", "y"])
def test_translate_axes(axis):
    decl = decl_of(f"translate-{axis}-[10px]")
    assert decl.lines == (f"--tw-translate-{axis}: 10px", TRANSFORM_STYLE)


def test_negative_translate():
    assert decl_of("-translate-x-[10px]").lines[0].endswith(": -10px")


@pytest.mark.parametrize("axis", ["x", "y"])
def test_skew_axes(axis):
    decl = decl_of(f"skew-{axis}-[3deg]")
    assert decl.lines[0].startswith(f"--tw-skew-{axis}: ")
    assert decl.lines[-1] == TRANSFORM_STYLE


def test_scale_all_sets_both_axes():
    decl = decl_of("scale-[.5]")
    assert decl.lines == ("--tw-scale-x: 0.5", "--tw-scale-y: 0.5", TRANSFORM_STYLE)


def test_scale_single_axis():
    decl = decl_of("scale-y-[2]")
    assert len(decl.lines) == 2
    assert decl.lines[0].startswith("--tw-scale-y: ")


def test_origin():
    assert decl_of("origin-[top_left]").lines == ("transform-origin: top left",)


def test_unknown_named_value_has_no_declaration():
    assert decl_of("rotate-45") is None
    assert decl_of("origin-center") is None


@pytest.mark.parametrize(
    "value", ["translate-z-[1px]", "translate-x", "skew-[3deg]", "rotate", "blur-[2px]"]
)
def test_unrecognised(value):
    assert parse_transform(value) is None