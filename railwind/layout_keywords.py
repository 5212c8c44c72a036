"""Layout classes that take one keyword from a fixed set, such as ``float-left``."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from .decl import Decl

_BREAK = ("auto", "avoid", "all", "avoid-page", "page", "left", "right", "column")
_BREAK_INSIDE = ("auto", "avoid", "avoid-page", "avoid-column")

_DISPLAY = (
    "block",
    "inline-block",
    "inline",
    "flex",
    "inline-flex",
    "table",
    "inline-table",
    "table-caption",
    "table-cell",
    "table-column",
    "table-column-group",
    "table-footer-group",
    "table-header-group",
    "table-row-group",
    "table-row",
    "flow-root",
    "grid",
    "inline-grid",
    "contents",
    "list-item",
)

_Lines = tuple[str, ...]


def _plain(prop: str, args: Iterable[str]) -> dict[str, _Lines]:
    return {arg: (f"{prop}: {arg}",) for arg in args}


def _renamed(prop: str, mapping: Mapping[str, str]) -> dict[str, _Lines]:
    return {arg: (f"{prop}: {value}",) for arg, value in mapping.items()}


def _with_axes(prop: str, values: Iterable[str]) -> dict[str, _Lines]:
    table: dict[str, _Lines] = {}
    values = tuple(values)
    for value in values:
        table[value] = (f"{prop}: {value}",)
    for axis in ("x", "y"):
        for value in values:
            table[f"{axis}-{value}"] = (f"{prop}-{axis}: {value}",)
    return table


def _box_decoration() -> dict[str, _Lines]:
    return {
        arg: (
            f"-webkit-box-decoration-break: {arg}",
            f"box-decoration-break: {arg}",
        )
        for arg in ("clone", "slice")
    }


_KEYWORDS: Mapping[str, Mapping[str, _Lines]] = MappingProxyType(
    {
        "break-after": _plain("break-after", _BREAK),
        "break-before": _plain("break-before", _BREAK),
        "break-inside": _plain("break-inside", _BREAK_INSIDE),
        "box-decoration": _box_decoration(),
        "box-sizing": _renamed(
            "box-sizing", {"border": "border-box", "content": "content-box"}
        ),
        "display": {**_plain("display", _DISPLAY), "hidden": ("display: none",)},
        "float": _plain("float", ("right", "left", "none")),
        "clear": _plain("clear", ("left", "right", "both", "none")),
        "isolation": _renamed(
            "isolation", {"isolate": "isolate", "isolation-auto": "auto"}
        ),
        "object-fit": _plain(
            "object-fit", ("contain", "cover", "fill", "none", "scale-down")
        ),
        "overflow": _with_axes(
            "overflow", ("auto", "hidden", "clip", "visible", "scroll")
        ),
        "overscroll": _with_axes("overscroll-behavior", ("auto", "contain", "none")),
        "position": _plain(
            "position", ("static", "fixed", "absolute", "relative", "sticky")
        ),
        "visibility": _renamed(
            "visibility",
            {"visible": "visible", "invisible": "hidden", "collapse": "collapse"},
        ),
    }
)

KINDS = frozenset(_KEYWORDS)


def keyword_decl(kind: str, arg: str) -> Decl | None:
    """Return the declaration for keyword ``arg`` of layout ``kind``.

    Returns ``None`` when ``arg`` is not one of the kind's keywords and raises
    ``ValueError`` when ``kind`` is not a known layout keyword kind.
    """
    table = _KEYWORDS.get(kind)
    if table is None:
        raise ValueError(f"unknown layout keyword kind {kind!r}")
    lines = table.get(arg)
    if lines is None:
        return None
    return Decl(*lines)