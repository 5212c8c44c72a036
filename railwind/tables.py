"""Table utilities: border collapse, border spacing and table layout."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .decl import Decl, Literal
from .utils import get_args, get_class_name, get_opt_args
from .values import get_value

# No named spacing values are bundled; arbitrary ``[...]`` values always resolve.
_BORDER_SPACING: Mapping[str, str] = MappingProxyType({})

_SHORTHAND = "border-spacing: var(--tw-border-spacing-x) var(--tw-border-spacing-y)"


@dataclass(frozen=True)
class _BorderSpacing:
    axis: str | None
    arg: str

    def to_decl(self) -> Decl | None:
        value = get_value(self.arg, _BORDER_SPACING)
        if value is None:
            return None
        if self.axis is None:
            return Decl(
                f"--tw-border-spacing-x: {value}",
                f"--tw-border-spacing-y: {value}",
                _SHORTHAND,
            )
        return Decl(f"--tw-border-spacing-{self.axis}: {value}", _SHORTHAND)


def _parse_border_spacing(args: str) -> _BorderSpacing | None:
    axis = get_class_name(args)
    if axis in ("x", "y"):
        return _BorderSpacing(axis, get_opt_args(args))
    if get_opt_args(args) in _BORDER_SPACING:
        return _BorderSpacing(None, args)
    return None


def parse_table(value: str) -> Literal | _BorderSpacing | None:
    """Recognise a table class, or return ``None``."""
    args = get_args(value)
    if args is None:
        return None
    name = get_class_name(value)
    if name == "border":
        sub = get_class_name(args)
        if sub in ("collapse", "separate"):
            return Literal(f"border-collapse: {sub}")
        if sub == "spacing":
            inner = get_args(args)
            return None if inner is None else _parse_border_spacing(inner)
        return None
    if name == "table" and args in ("auto", "fixed"):
        return Literal(f"table-layout: {args}")
    return None