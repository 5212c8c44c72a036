"""Typography classes that take one keyword from a fixed set, such as ``italic``."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from .decl import Decl
from .values import get_arbitrary_value

_Lines = tuple[str, ...]

_FONT_VARIANT_SHORTHAND = """font-variant-numeric: var(--tw-ordinal) var(--tw-slashed-zero)
        var(--tw-numeric-figure) var(--tw-numeric-spacing)
        var(--tw-numeric-fraction)"""


def _plain(prop: str, args: Iterable[str]) -> dict[str, _Lines]:
    return {arg: (f"{prop}: {arg}",) for arg in args}


def _renamed(prop: str, mapping: Mapping[str, str]) -> dict[str, _Lines]:
    return {arg: (f"{prop}: {value}",) for arg, value in mapping.items()}


def _webkit(prop: str, mapping: Mapping[str, str]) -> dict[str, _Lines]:
    return {
        arg: (f"-webkit-{prop}: {value}", f"{prop}: {value}")
        for arg, value in mapping.items()
    }


def _font_variant_numeric() -> dict[str, _Lines]:
    settings = {
        "ordinal": "--tw-ordinal: ordinal",
        "slashed-zero": "--tw-slashed-zero: slashed-zero",
        "lining-nums": "--tw-numeric-figure: lining-nums",
        "oldstyle-nums": "--tw-numeric-figure: oldstyle-nums",
        "proportional-nums": "--tw-numeric-spacing: proportional-nums",
        "tabular-nums": "--tw-numeric-spacing: tabular-nums",
        "diagonal-fractions": "--tw-numeric-fraction: diagonal-fractions",
        "stacked-fractions": "--tw-numeric-fraction: stacked-fractions",
    }
    table: dict[str, _Lines] = {"normal-nums": ("font-variant-numeric: normal",)}
    table.update(
        {arg: (line, _FONT_VARIANT_SHORTHAND) for arg, line in settings.items()}
    )
    return table


_KEYWORDS: Mapping[str, Mapping[str, _Lines]] = MappingProxyType(
    {
        "font-smoothing": {
            "antialiased": (
                "-webkit-font-smoothing: antialiased",
                "-moz-osx-font-smoothing: grayscale",
            ),
            "subpixel-antialiased": (
                "-webkit-font-smoothing: auto",
                "-moz-osx-font-smoothing: auto",
            ),
        },
        "font-style": _renamed(
            "font-style", {"italic": "italic", "not-italic": "normal"}
        ),
        "font-variant-numeric": _font_variant_numeric(),
        "list-style-position": _plain("list-style-position", ("inside", "outside")),
        "text-align": _plain(
            "text-align", ("left", "center", "right", "justify", "start", "end")
        ),
        "text-decoration": _webkit(
            "text-decoration-line",
            {
                "underline": "underline",
                "overline": "overline",
                "line-through": "line-through",
                "no-underline": "none",
            },
        ),
        "text-decoration-style": _webkit(
            "text-decoration-style",
            {s: s for s in ("solid", "double", "dotted", "dashed", "wavy")},
        ),
        "text-transform": _renamed(
            "text-transform",
            {
                "uppercase": "uppercase",
                "lowercase": "lowercase",
                "capitalize": "capitalize",
                "normal-case": "none",
            },
        ),
        "text-overflow": {
            "truncate": (
                "overflow: hidden",
                "text-overflow: ellipsis",
                "white-space: nowrap",
            ),
            **_plain("text-overflow", ("ellipsis", "clip")),
        },
        "vertical-align": _plain(
            "vertical-align",
            (
                "baseline",
                "top",
                "middle",
                "bottom",
                "text-top",
                "text-bottom",
                "sub",
                "super",
            ),
        ),
        "whitespace": _plain(
            "white-space", ("normal", "nowrap", "pre", "pre-line", "pre-wrap")
        ),
        "word-break": {
            "normal": ("overflow-wrap: normal", "word-break: normal"),
            "words": ("overflow-wrap: break-word",),
            "all": ("word-break: break-all",),
            "keep": ("word-break: keep-all",),
        },
    }
)

KINDS = frozenset(_KEYWORDS)


def keyword_decl(kind: str, arg: str) -> Decl | None:
    """Return the declaration for keyword ``arg`` of typography ``kind``.

    ``vertical-align`` also accepts an arbitrary ``[...]`` value. Returns
    ``None`` when ``arg`` is not accepted and raises ``ValueError`` when
    ``kind`` is not a known typography keyword kind.
    """
    table = _KEYWORDS.get(kind)
    if table is None:
        raise ValueError(f"unknown typography keyword kind {kind!r}")
    lines = table.get(arg)
    if lines is not None:
        return Decl(*lines)
    if kind == "vertical-align":
        arbitrary = get_arbitrary_value(arg)
        if arbitrary is not None:
            return Decl(f"vertical-align: {arbitrary}")
    return None