"""Spacing utilities: padding, margin and ``space-x``/``space-y``."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .decl import Decl
from .utils import get_args, get_class_name
from .values import get_value, get_value_neg

# No named theme values are bundled; arbitrary ``[...]`` values always resolve.
_MARGIN: Mapping[str, str] = MappingProxyType({})
_PADDING: Mapping[str, str] = MappingProxyType({})

_PADDING_SIDES: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "p": ("padding",),
        "pt": ("padding-top",),
        "pr": ("padding-right",),
        "pb": ("padding-bottom",),
        "pl": ("padding-left",),
        "px": ("padding-left", "padding-right"),
        "py": ("padding-top", "padding-bottom"),
    }
)

_MARGIN_SIDES: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "m": ("margin",),
        "mt": ("margin-top",),
        "mr": ("margin-right",),
        "mb": ("margin-bottom",),
        "ml": ("margin-left",),
        "mx": ("margin-left", "margin-right"),
        "my": ("margin-top", "margin-bottom"),
    }
)


@dataclass(frozen=True)
class Padding:
    """A padding class: the properties it sets and its raw argument."""

    props: tuple[str, ...]
    arg: str

    @classmethod
    def parse(cls, name: str, arg: str) -> Padding | None:
        props = _PADDING_SIDES.get(name)
        return None if props is None else cls(props, arg)

    def to_decl(self) -> Decl | None:
        value = get_value(self.arg, _PADDING)
        if value is None:
            return None
        return Decl(*(f"{prop}: {value}" for prop in self.props))


@dataclass(frozen=True)
class Margin:
    """A margin class, possibly negative."""

    props: tuple[str, ...]
    arg: str
    negative: bool = False

    @classmethod
    def parse(cls, name: str, arg: str) -> Margin | None:
        negative = name.startswith("-")
        props = _MARGIN_SIDES.get(name[1:] if negative else name)
        return None if props is None else cls(props, arg, negative)

    def to_decl(self) -> Decl | None:
        value = get_value_neg(self.negative, self.arg, _MARGIN)
        if value is None:
            return None
        return Decl(*(f"{prop}: {value}" for prop in self.props))


@dataclass(frozen=True)
class SpaceBetween:
    """A ``space-x``/``space-y`` class, applied between an element's children."""

    axis: str
    arg: str
    negative: bool = False

    @classmethod
    def parse(cls, name: str, arg: str) -> SpaceBetween | None:
        if not name.endswith("space"):
            return None
        axis = get_class_name(arg)
        if axis not in ("x", "y"):
            return None
        inner = get_args(arg)
        if inner is None:
            return None
        return cls(axis, inner, name.startswith("-"))

    def to_decl(self) -> Decl | None:
        reverse = f"--tw-space-{self.axis}-reverse"
        if self.arg == "reverse":
            return Decl(f"{reverse}: 1")
        value = get_value_neg(self.negative, self.arg, _MARGIN)
        if value is None:
            return None
        if self.axis == "x":
            return Decl(
                f"{reverse}: 0",
                f"margin-right: calc({value} * var({reverse}))",
                f"margin-left: calc({value} * calc(1 - var({reverse})))",
            )
        return Decl(
            f"{reverse}: 0",
            f"margin-top: calc({value} * calc(1 - var({reverse})))",
            f"margin-bottom: calc({value} * var({reverse}))",
        )


def parse_spacing(value: str) -> Padding | Margin | SpaceBetween | None:
    """Recognise a spacing class, or return ``None``."""
    args = get_args(value)
    if args is None:
        return None
    name = get_class_name(value)
    for kind in (Padding, Margin, SpaceBetween):
        parsed = kind.parse(name, args)
        if parsed is not None:
            return parsed
    return None