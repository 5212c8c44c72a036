"""Collect utility classes from text or HTML and turn them into CSS."""

from __future__ import annotations

import re
from bisect import bisect_right
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Any

from .classes import parse_class
from .modifiers import (
    Group,
    MediaQuery,
    Peer,
    PseudoClass,
    PseudoElement,
    State,
    generate_state_selector,
    parse_state,
)
from .spacing import SpaceBetween
from .utils import indent_string, replace_invalid_chars
from .warning import Position, Warning

_CLASS_RE = re.compile(r"""(?:class|className)=(?:["]\W+\s*(?:\w+)\()?["]([^"]+)["]""")
_SEPARATOR_RE = re.compile(r"[ \n]")
_CHILD_SELECTOR = "> :not([hidden]) ~ :not([hidden])"
_HTML_MARKERS = frozenset({"group", "peer"})


class _LineIndex:
    """Maps offsets in a text to one-based line and column numbers."""

    def __init__(self, text: str) -> None:
        self._starts = [0, *(match.end() for match in re.finditer("\n", text))]

    def position(self, index: int) -> Position:
        line = bisect_right(self._starts, index)
        return Position(line, index - self._starts[line - 1] + 1)


def _tokens(text: str, offset: int) -> Iterator[tuple[int, str]]:
    index = offset
    for token in _SEPARATOR_RE.split(text):
        yield index, token
        index += len(token) + 1


@dataclass(frozen=True)
class ParsedClass:
    """A recognised utility together with its raw name and its variants."""

    raw_class_name: str
    utility: Any
    states: tuple[State, ...] = field(default_factory=tuple)

    def to_css(self) -> str | None:
        """Render the class as CSS, or ``None`` if it has no declarations."""
        decl = self.utility.to_decl()
        if decl is None:
            return None

        selector = replace_invalid_chars(self.raw_class_name)
        if any(isinstance(s, (PseudoClass, PseudoElement)) for s in self.states):
            selector = f"{selector}:{generate_state_selector(self.states)}"
        for state in self.states:
            if isinstance(state, (Group, Peer)):
                selector = state.selector + selector
        if isinstance(self.utility, SpaceBetween):
            selector = f"{selector} {_CHILD_SELECTOR}"

        if decl.is_full_class:
            css = decl.render().replace("container", selector)
        else:
            css = f".{selector} {{\n    {decl.render()};\n}}"

        for state in self.states:
            if isinstance(state, MediaQuery) and state.wraps():
                css = f"@media ({state.value}) {{\n{indent_string(css)}}}"
        return css


def collect_classes_from_html(html: str) -> dict[str, Position]:
    """Collect the classes named in ``class``/``className`` attributes, in order."""
    lines = _LineIndex(html)
    classes: dict[str, Position] = {}
    for match in _CLASS_RE.finditer(html):
        for index, token in _tokens(match.group(1), match.start(1)):
            if token and token not in _HTML_MARKERS:
                classes[token] = lines.position(index)
    return classes


def collect_classes_from_str(text: str) -> dict[str, Position]:
    """Collect every space- or newline-separated word of ``text``, in order."""
    lines = _LineIndex(text)
    return {
        token: lines.position(index) for index, token in _tokens(text, 0) if token
    }


def parse_raw_classes(
    raw_classes: Mapping[str, Position],
) -> tuple[list[ParsedClass], list[Warning]]:
    """Parse collected classes, returning the recognised ones and the warnings."""
    parsed: list[ParsedClass] = []
    warnings: list[Warning] = []

    for raw_class, position in raw_classes.items():
        colon = raw_class.rfind(":")
        if colon == -1:
            utility = parse_class(raw_class)
            if utility is None:
                warnings.append(Warning.class_not_found(raw_class, position))
            else:
                parsed.append(ParsedClass(raw_class, utility))
            continue

        bracket = raw_class.rfind("[")
        if bracket != -1 and bracket < colon:
            whole = parse_class(raw_class)
            if whole is not None:
                parsed.append(ParsedClass(raw_class, whole))

        states = tuple(
            state
            for state in map(parse_state, raw_class[:colon].split(":"))
            if state is not None
        )
        utility = parse_class(raw_class[colon + 1:])
        if utility is None:
            warnings.append(Warning.class_not_found(raw_class, position))
        else:
            parsed.append(ParsedClass(raw_class, utility, states))

    return parsed, warnings


def _render(classes: Sequence[ParsedClass]) -> str:
    generated = (css for css in (c.to_css() for c in classes) if css is not None)
    return "\n\n".join(generated) + "\n"


def parse_string(text: str) -> tuple[str, list[Warning]]:
    """Turn whitespace-separated classes into CSS, with warnings for unknown ones."""
    classes, warnings = parse_raw_classes(collect_classes_from_str(text))
    return _render(classes), warnings


def parse_html_to_string(path: str | PathLike[str]) -> tuple[str, list[Warning]]:
    """Read an HTML file and turn the classes it uses into CSS."""
    html = Path(path).read_text(encoding="utf-8")
    classes, warnings = parse_raw_classes(collect_classes_from_html(html))
    return _render(classes), warnings


def parse_html_to_file(
    input_path: str | PathLike[str], output_path: str | PathLike[str]
) -> list[Warning]:
    """Read an HTML file, write the CSS for its classes and return the warnings."""
    css, warnings = parse_html_to_string(input_path)
    Path(output_path).write_text(css, encoding="utf-8")
    return warnings