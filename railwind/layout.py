"""Layout utilities: container, display, positioning, overflow, z-index and more."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .decl import Decl, Literal
from .layout_keywords import keyword_decl
from .utils import get_args, get_class_name, get_opt_args
from .values import get_value, get_value_neg

# No named theme values are bundled; arbitrary ``[...]`` values always resolve.
_LOOKUP_TABLES: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "aspect-ratio": MappingProxyType({}),
        "columns": MappingProxyType({}),
        "object-position": MappingProxyType({}),
    }
)
_OFFSETS: Mapping[str, str] = MappingProxyType({})
_Z_INDEX: Mapping[str, str] = MappingProxyType({})

_LOOKUP_CLASSES = {"aspect": "aspect-ratio", "columns": "columns"}

_SIDES = ("inset", "top", "right", "bottom", "left")

_CONTAINER = """.container {
    width: 100%;
}

@media (min-width: 640px) {
    .container {
        max-width: 640px;
    }
}

@media (min-width: 768px) {
    .container {
        max-width: 768px;
    }
}

@media (min-width: 1024px) {
    .container {
        max-width: 1024px;
    }
}

@media (min-width: 1280px) {
    .container {
        max-width: 1280px;
    }
}

@media (min-width: 1536px) {
    .container {
        max-width: 1536px;
    }
}"""


@dataclass(frozen=True)
class _Lookup:
    prop: str
    arg: str

    def to_decl(self) -> Decl | None:
        value = get_value(self.arg, _LOOKUP_TABLES[self.prop])
        if value is None:
            return None
        return Decl(f"{self.prop}: {value}")


@dataclass(frozen=True)
class Container:
    """The responsive ``container`` class."""

    def to_decl(self) -> Decl:
        return Decl.full(_CONTAINER)


@dataclass(frozen=True)
class TopRightBottomLeft:
    """An ``inset``, ``top``, ``right``, ``bottom`` or ``left`` class."""

    side: str
    arg: str
    negative: bool = False

    @classmethod
    def parse(cls, name: str, arg: str) -> TopRightBottomLeft | None:
        negative = name.startswith("-")
        side = name[1:] if negative else name
        if side not in _SIDES:
            return None
        return cls(side, arg, negative)

    def _value(self, arg: str | None) -> str | None:
        if arg is None:
            return None
        return get_value_neg(self.negative, arg, _OFFSETS)

    def to_decl(self) -> Decl | None:
        if self.side != "inset":
            value = self._value(self.arg)
            return None if value is None else Decl(f"{self.side}: {value}")
        axis = get_class_name(self.arg)
        if axis == "x":
            value = self._value(get_args(self.arg))
            return None if value is None else Decl(f"left: {value}", f"right: {value}")
        if axis == "y":
            value = self._value(get_args(self.arg))
            return None if value is None else Decl(f"top: {value}", f"bottom: {value}")
        value = self._value(self.arg)
        if value is None:
            return None
        return Decl(*(f"{side}: {value}" for side in ("top", "right", "bottom", "left")))


@dataclass(frozen=True)
class ZIndex:
    """A ``z-`` class, possibly negative."""

    arg: str
    negative: bool = False

    def to_decl(self) -> Decl | None:
        value = get_value_neg(self.negative, self.arg, _Z_INDEX)
        if value is None:
            return None
        return Decl(f"z-index: {value}")


def _keyword(kind: str, arg: str | None) -> Literal | None:
    if arg is None:
        return None
    decl = keyword_decl(kind, arg)
    return None if decl is None else Literal(*decl.lines)


LayoutClass = Container | TopRightBottomLeft | ZIndex | _Lookup | Literal


def parse_layout(value: str) -> LayoutClass | None:
    """Recognise a layout class, or return ``None``."""
    name = get_class_name(value)
    args = get_args(value)

    if name in _LOOKUP_CLASSES:
        return None if args is None else _Lookup(_LOOKUP_CLASSES[name], args)
    if name == "container":
        return Container()
    if name == "break":
        if args is None:
            return None
        sub = get_class_name(args)
        if sub not in ("after", "before", "inside"):
            return None
        return _keyword(f"break-{sub}", get_args(args))
    if name == "box":
        if args is None:
            return None
        if get_class_name(args) == "decoration":
            return _keyword("box-decoration", get_args(args))
        return _keyword("box-sizing", args)
    if name in ("float", "clear", "overflow", "overscroll"):
        return _keyword(name, args)
    if name == "object":
        if args is None:
            return None
        fit = _keyword("object-fit", args)
        return fit if fit is not None else _Lookup("object-position", args)
    if name in ("z", "-z"):
        return None if args is None else ZIndex(args, name.startswith("-"))

    for kind in ("display", "isolation", "position"):
        parsed = _keyword(kind, value)
        if parsed is not None:
            return parsed
    offset = TopRightBottomLeft.parse(name, get_opt_args(value))
    if offset is not None:
        return offset
    return _keyword("visibility", value)