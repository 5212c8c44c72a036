"""Typography utilities: fonts, text colour and size, decoration, spacing and more."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .decl import Decl, Literal
from .typography_keywords import keyword_decl
from .utils import get_args, get_class_name
from .values import get_tuple_value, get_value_neg, hex_to_rgb_color, value_is_size

# No named theme values are bundled; arbitrary ``[...]`` values always resolve.
_FONT_SIZE: Mapping[str, tuple[str, str]] = MappingProxyType({})
_FONT_FAMILY: Mapping[str, str] = MappingProxyType({})
_TEXT_COLOR: Mapping[str, str] = MappingProxyType({})
_TEXT_DECORATION_THICKNESS: Mapping[str, str] = MappingProxyType({})

_TABLES: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "font-family": _FONT_FAMILY,
        "font-weight": MappingProxyType({}),
        "letter-spacing": MappingProxyType({}),
        "line-height": MappingProxyType({}),
        "list-style-type": MappingProxyType({}),
        "text-decoration-color": _TEXT_COLOR,
        "text-decoration-thickness": _TEXT_DECORATION_THICKNESS,
        "text-underline-offset": MappingProxyType({}),
        "text-indent": MappingProxyType({}),
        "content": MappingProxyType({}),
    }
)


def _single(prop: str) -> Callable[[str], tuple[str, ...]]:
    return lambda value: (f"{prop}: {value}",)


_FORMATTERS: Mapping[str, Callable[[str], tuple[str, ...]]] = MappingProxyType(
    {
        **{
            prop: _single(prop)
            for prop in (
                "font-family",
                "font-weight",
                "letter-spacing",
                "line-height",
                "list-style-type",
                "text-decoration-thickness",
                "text-underline-offset",
                "text-indent",
            )
        },
        "text-decoration-color": lambda value: (
            f"-webkit-text-decoration-color: {value}",
            f"text-decoration-color: {value}",
        ),
        "content": lambda value: (
            f"--tw-content: {value}",
            "content: var(--tw-content)",
        ),
    }
)


@dataclass(frozen=True)
class _Value:
    """A class whose argument is looked up and written into its declarations."""

    prop: str
    arg: str
    negative: bool = False

    def to_decl(self) -> Decl | None:
        value = get_value_neg(self.negative, self.arg, _TABLES[self.prop])
        if value is None:
            return None
        return Decl(*_FORMATTERS[self.prop](value))


@dataclass(frozen=True)
class _FontSize:
    arg: str

    def to_decl(self) -> Decl | None:
        pair = get_tuple_value(self.arg, _FONT_SIZE)
        if pair is None:
            return None
        size, line_height = pair
        if self.arg in _FONT_SIZE:
            return Decl(f"font-size: {size}", f"line-height: {line_height}")
        return Decl(f"font-size: {size}")


@dataclass(frozen=True)
class _TextColor:
    arg: str

    def to_decl(self) -> Decl | None:
        value = get_value_neg(False, self.arg, _TEXT_COLOR)
        if value is None:
            return None
        rgb = hex_to_rgb_color(value)
        if rgb is None:
            return Decl(f"color: {value}")
        red, green, blue = rgb
        return Decl(
            "--tw-text-opacity: 1",
            f"color: rgb({red} {green} {blue} / var(--tw-text-opacity))",
        )


TypographyClass = _Value | _FontSize | _TextColor | Literal


def _keyword(kind: str, arg: str) -> Literal | None:
    decl = keyword_decl(kind, arg)
    return None if decl is None else Literal(*decl.lines)


def _parse_text(args: str) -> TypographyClass | None:
    for kind in ("text-align", "text-overflow"):
        parsed = _keyword(kind, args)
        if parsed is not None:
            return parsed
    if args in _FONT_SIZE or value_is_size(args):
        return _FontSize(args)
    return _TextColor(args)


def _parse_decoration(args: str) -> TypographyClass | None:
    for kind in ("text-decoration", "text-decoration-style"):
        parsed = _keyword(kind, args)
        if parsed is not None:
            return parsed
    if args in _TEXT_DECORATION_THICKNESS or value_is_size(args):
        return _Value("text-decoration-thickness", args)
    return _Value("text-decoration-color", args)


def _parse_underline(value: str, args: str | None) -> TypographyClass | None:
    if args is None:
        return _keyword("text-decoration", value)
    if get_class_name(args) != "offset":
        return None
    inner = get_args(args)
    return None if inner is None else _Value("text-underline-offset", inner)


_BARE_KINDS = (
    "font-smoothing",
    "font-style",
    "font-variant-numeric",
    "text-decoration",
    "text-transform",
    "text-overflow",
)

_SIMPLE_LOOKUPS = {
    "leading": "line-height",
    "content": "content",
}

_KEYWORD_CLASSES = {
    "align": "vertical-align",
    "whitespace": "whitespace",
    "break": "word-break",
}


def parse_typography(value: str) -> TypographyClass | None:
    """Recognise a typography class, or return ``None``."""
    name = get_class_name(value)
    args = get_args(value)

    if name == "underline":
        return _parse_underline(value, args)

    if name in ("font", "text", "tracking", "leading", "list", "decoration",
                "indent", "align", "whitespace", "break", "content"):
        if args is None:
            return None
        if name == "font":
            if args in _FONT_FAMILY or (args.startswith("['") and args.endswith("']")):
                return _Value("font-family", args)
            return _Value("font-weight", args)
        if name == "text":
            return _parse_text(args)
        if name == "decoration":
            return _parse_decoration(args)
        if name == "list":
            position = _keyword("list-style-position", args)
            return position if position is not None else _Value("list-style-type", args)
        if name == "tracking":
            return _Value("letter-spacing", args, name.startswith("-"))
        if name == "indent":
            return _Value("text-indent", args, name.startswith("-"))
        if name in _SIMPLE_LOOKUPS:
            return _Value(_SIMPLE_LOOKUPS[name], args)
        return _keyword(_KEYWORD_CLASSES[name], args)

    for kind in _BARE_KINDS:
        parsed = _keyword(kind, value)
        if parsed is not None:
            return parsed
    return None