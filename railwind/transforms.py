"""Transform utilities: translate, rotate, skew, scale and transform origin."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .decl import Decl
from .utils import get_args, get_class_name, get_opt_args
from .values import get_value, get_value_neg

TRANSFORM_STYLE = (
    "transform: translate(var(--tw-translate-x), var(--tw-translate-y)) "
    "rotate(var(--tw-rotate)) skewX(var(--tw-skew-x)) skewY(var(--tw-skew-y)) "
    "scaleX(var(--tw-scale-x)) scaleY(var(--tw-scale-y))"
)

# No named theme values are bundled; arbitrary ``[...]`` values always resolve.
_TABLES: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "translate": MappingProxyType({}),
        "rotate": MappingProxyType({}),
        "skew": MappingProxyType({}),
        "scale": MappingProxyType({}),
    }
)
_ORIGIN: Mapping[str, str] = MappingProxyType({})


@dataclass(frozen=True)
class _Transform:
    """A transform class setting one or more ``--tw-*`` variables."""

    table: str
    variables: tuple[str, ...]
    arg: str
    negative: bool = False

    def to_decl(self) -> Decl | None:
        value = get_value_neg(self.negative, self.arg, _TABLES[self.table])
        if value is None:
            return None
        return Decl(*(f"{var}: {value}" for var in self.variables), TRANSFORM_STYLE)


@dataclass(frozen=True)
class _Origin:
    arg: str

    def to_decl(self) -> Decl | None:
        value = get_value(self.arg, _ORIGIN)
        if value is None:
            return None
        return Decl(f"transform-origin: {value}")


def _axis_transform(table: str, args: str, negative: bool) -> _Transform | None:
    axis = get_class_name(args)
    if axis not in ("x", "y"):
        return None
    inner = get_args(args)
    if inner is None:
        return None
    return _Transform(table, (f"--tw-{table}-{axis}",), inner, negative)


def _scale(value: str, args: str) -> _Transform:
    negative = value.startswith("-")
    axis = get_class_name(args)
    if axis in ("x", "y"):
        return _Transform("scale", (f"--tw-scale-{axis}",), get_opt_args(args), negative)
    return _Transform("scale", ("--tw-scale-x", "--tw-scale-y"), args, negative)


def parse_transform(value: str) -> _Transform | _Origin | None:
    """Recognise a transform class, or return ``None``."""
    args = get_args(value)
    if args is None:
        return None
    name = get_class_name(value)
    negative = name.startswith("-")
    base = name[1:] if negative else name

    if base in ("translate", "skew"):
        return _axis_transform(base, args, negative)
    if base == "rotate":
        return _Transform("rotate", ("--tw-rotate",), args, negative)
    if base == "scale":
        return _scale(value, args)
    if name == "origin":
        return _Origin(args)
    return None