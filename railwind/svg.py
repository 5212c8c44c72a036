"""SVG utilities: ``fill-``, ``stroke-`` and stroke widths."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .decl import Decl, Literal
from .utils import get_args, get_class_name
from .values import get_value

# No named colours are bundled; arbitrary ``[...]`` values always resolve.
_COLORS: Mapping[str, str] = MappingProxyType({})

_STROKE_WIDTHS = frozenset({"0", "1", "2"})


@dataclass(frozen=True)
class _Paint:
    prop: str
    arg: str

    def to_decl(self) -> Decl | None:
        value = get_value(self.arg, _COLORS)
        if value is None:
            return None
        return Decl(f"{self.prop}: {value}")


def parse_svg(value: str) -> _Paint | Literal | None:
    """Recognise an SVG class, or return ``None``."""
    args = get_args(value)
    if args is None:
        return None
    name = get_class_name(value)
    if name == "fill":
        return _Paint("fill", args)
    if name == "stroke":
        if args in _STROKE_WIDTHS:
            return Literal(f"stroke-width: {args}")
        return _Paint("stroke", args)
    return None