"""Helpers for splitting utility class names and building CSS selectors."""

from __future__ import annotations

_INVALID_SELECTOR_CHARS = frozenset("[]%:./()'#")


def indent_string(text: str) -> str:
    """Indent every line of ``text`` by four spaces, ending each with a newline."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return "".join(f"    {line.removesuffix(chr(13))}\n" for line in lines)


def replace_invalid_chars(selector: str) -> str:
    """Escape characters that are not allowed verbatim in a CSS class selector."""
    escaped = "".join(
        f"\\{char}" if char in _INVALID_SELECTOR_CHARS else char for char in selector
    )
    return escaped.replace(",", "\\2c ")


def _split(value: str) -> tuple[str, str | None]:
    """Split a class into its name and the arguments after the first dash.

    A leading dash marks a negative class and stays part of the name.
    """
    prefix, body = ("-", value[1:]) if value.startswith("-") else ("", value)
    head, sep, tail = body.partition("-")
    if not sep:
        return value, None
    return prefix + head, tail


def get_class_name(value: str) -> str:
    """Return the part of a class before its arguments, e.g. ``-mx`` for ``-mx-5``."""
    return _split(value)[0]


def get_args(value: str) -> str | None:
    """Return the arguments of a class, or ``None`` if it has none."""
    return _split(value)[1]


def get_opt_args(value: str) -> str:
    """Return the arguments of a class, or an empty string if it has none."""
    args = _split(value)[1]
    return "" if args is None else args