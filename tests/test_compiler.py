from railwind.compiler import (
    ParsedClass,
    collect_classes_from_html,
    collect_classes_from_str,
    parse_html_to_file,
    parse_html_to_string,
    parse_raw_classes,
    parse_string,
)
from railwind.layout import Container
from railwind.modifiers import MediaQuery, PseudoClass
from railwind.warning import Position


def test_collect_classes_from_str():
    classes = collect_classes_from_str("px-5 justify-start container")
    assert classes
    assert list(classes.items()) == [
        ("px-5", Position(1, 1)),
        ("justify-start", Position(1, 6)),
        ("container", Position(1, 20)),
    ]


def test_collect_classes_from_html():
    classes = collect_classes_from_html('class="px-5 justify-start container"')
    assert classes
    assert list(classes.items()) == [
        ("px-5", Position(1, 8)),
        ("justify-start", Position(1, 13)),
        ("container", Position(1, 27)),
    ]


def test_collect_html_skips_group_and_peer_and_tracks_lines():
    html = '<div class="group peer">\n<p class="px-5">x</p>'
    classes = collect_classes_from_html(html)
    assert classes == {"px-5": Position(2, 11)}


def test_parse_raw_classes():
    raw = collect_classes_from_str("px-5 hover:lg:justify-start sm:container")
    classes, warnings = parse_raw_classes(raw)
    names = [c.raw_class_name for c in classes]
    assert "sm:container" in names
    assert [str(w) for w in warnings] == [
        "Warning on Line: 1, Col: 6; Could not match class 'hover:lg:justify-start'"
    ]
    container = classes[names.index("sm:container")]
    assert container.states == (MediaQuery.SM,)
    css = container.to_css()
    assert css.startswith("@media (min-width: 640px) {\n    .sm\\:container {\n")
    assert css.endswith("    }\n}")


def test_plain_class_css():
    css, warnings = parse_string("px-[5px]")
    assert warnings == []
    assert css == (
        ".px-\\[5px\\] {\n    padding-left: 5px;\n    padding-right: 5px;\n}\n"
    )


def test_pseudo_class_selector():
    css, _ = parse_string("hover:px-[5px]")
    assert css.startswith(".hover\\:px-\\[5px\\]:hover {\n")


def test_group_selector():
    css, _ = parse_string("group-hover:px-[1px]")
    assert css.startswith(".group:hover .group-hover\\:px-\\[1px\\] {\n")


def test_space_between_appends_child_selector():
    css, _ = parse_string("space-x-[4px]")
    assert css.startswith(".space-x-\\[4px\\] > :not([hidden]) ~ :not([hidden]) {\n")
    assert "--tw-space-x-reverse: 0;" in css


def test_unknown_class_warns():
    css, warnings = parse_string("unknown-thing")
    assert css == "\n"
    assert [str(w) for w in warnings] == [
        "Warning on Line: 1, Col: 1; Could not match class 'unknown-thing'"
    ]


def test_classes_are_joined_by_blank_line():
    css, _ = parse_string("float-left\nitalic")
    assert css == (
        ".float-left {\n    float: left;\n}\n\n.italic {\n    font-style: italic;\n}\n"
    )


def test_parsed_class_without_declaration():
    classes, _ = parse_raw_classes(collect_classes_from_str("px-5"))
    assert len(classes) == 1
    assert classes[0].to_css() is None


def test_parsed_class_with_print_state_is_not_wrapped():
    parsed = ParsedClass("print:container", Container(), (MediaQuery.PRINT,))
    assert parsed.to_css().startswith(".print\\:container {\n")


def test_parsed_class_with_pseudo_class():
    parsed = ParsedClass("focus:container", Container(), (PseudoClass.FOCUS,))
    assert parsed.to_css().startswith(".focus\\:container:focus {\n")


def test_html_to_string_and_file(tmp_path):
    source = tmp_path / "index.html"
    source.write_text('<div class="float-left nothing-here"></div>', encoding="utf-8")
    css, warnings = parse_html_to_string(source)
    assert css == ".float-left {\n    float: left;\n}\n"
    assert len(warnings) == 1

    output = tmp_path / "out.css"
    file_warnings = parse_html_to_file(source, output)
    assert output.read_text(encoding="utf-8") == css
    assert file_warnings == warnings