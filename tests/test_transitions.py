import pytest

from railwind.transitions import parse_transition_animation


def test_transition_none():
    parsed = parse_transition_animation("transition-none")
    assert parsed.to_decl().render() == "transition-property: none"


def test_transition_all_has_three_lines():
    decl = parse_transition_animation("transition-all").to_decl()
    assert decl.lines[0] == "transition-property: all"
    assert len(decl.lines) == 3
    assert "transition-duration: 150ms" in decl.lines


def test_bare_transition_has_five_lines():
    decl = parse_transition_animation("transition").to_decl()
    assert len(decl.lines) == 5
    assert decl.lines[-1] == "transition-duration: 150ms"


@pytest.mark.parametrize("value", ["transition-foo", "transition-", "animate-foo", "animate"])
def test_unknown_values_are_rejected(value):
    assert parse_transition_animation(value) is None


@pytest.mark.parametrize(
    "value, prop, arg",
    [
        ("duration-[200ms]", "transition-duration", "200ms"),
        ("ease-[linear]", "transition-timing-function", "linear"),
        ("delay-[75ms]", "transition-delay", "75ms"),
    ],
)
def test_arbitrary_lookup_values(value, prop, arg):
    rendered = parse_transition_animation(value).to_decl().render()
    assert rendered.startswith(prop + ": ")
    assert rendered.endswith(arg)


def test_unknown_named_lookup_has_no_declaration():
    parsed = parse_transition_animation("duration-100")
    assert parsed.to_decl() is None


@pytest.mark.parametrize("name", ["spin", "ping", "pulse", "bounce"])
def test_animations_are_full_classes(name):
    decl = parse_transition_animation(f"animate-{name}").to_decl()
    assert decl.is_full_class
    assert f"@keyframes {name} {{" in decl.render()
    assert f".animate-{name} {{" in decl.render()


def test_animate_none():
    decl = parse_transition_animation("animate-none").to_decl()
    assert decl.render() == "animation: none"
    assert not decl.is_full_class


def test_other_classes_are_not_transitions():
    assert parse_transition_animation("px-5") is None