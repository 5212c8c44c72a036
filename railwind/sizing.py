"""Width and height utilities: ``w-``, ``h-``, ``min-w-``, ``max-h-`` and so on."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .decl import Decl
from .utils import get_args, get_class_name
from .values import get_value

# No named theme values are bundled; arbitrary ``[...]`` values always resolve.
_TABLES: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        prop: MappingProxyType({})
        for prop in (
            "width",
            "min-width",
            "max-width",
            "height",
            "min-height",
            "max-height",
        )
    }
)

_AXES = {"w": "width", "h": "height"}


@dataclass(frozen=True)
class Sizing:
    """A sizing class: the CSS property it sets and the raw argument."""

    prop: str
    arg: str

    def to_decl(self) -> Decl | None:
        value = get_value(self.arg, _TABLES[self.prop])
        if value is None:
            return None
        if value == "fit-content":
            return Decl(f"{self.prop}: -moz-fit-content", f"{self.prop}: {value}")
        return Decl(f"{self.prop}: {value}")


def parse_sizing(value: str) -> Sizing | None:
    """Recognise a sizing class, or return ``None``."""
    args = get_args(value)
    if args is None:
        return None
    name = get_class_name(value)
    if name in _AXES:
        return Sizing(_AXES[name], args)
    if name in ("min", "max"):
        axis = get_class_name(args)
        inner = get_args(args)
        if axis not in _AXES or inner is None:
            return None
        return Sizing(f"{name}-{_AXES[axis]}", inner)
    return None