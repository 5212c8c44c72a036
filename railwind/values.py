"""Resolution of class arguments to CSS values."""

from __future__ import annotations

import string
from collections.abc import Mapping

UNITS = (
    "cm", "mm", "Q", "in", "pc", "pt", "px", "em", "ex", "ch", "rem", "lh", "rlh",
    "vw", "vh", "vmin", "vmax", "vb", "vi", "svw", "svh", "lvw", "lvh", "dvw", "dvh",
    "%",
)


def _is_bracketed(arg: str) -> bool:
    return arg.startswith("[") and arg.endswith("]")


def get_arbitrary_value(arg: str) -> str | None:
    """Return the value inside ``[...]``, with ``_`` as space and ``'`` as ``"``."""
    if not _is_bracketed(arg):
        return None
    value = arg[1:-1]
    if value.startswith("."):
        value = f"0{value}"
    return value.replace("_", " ").replace("'", '"')


def get_value(arg: str, table: Mapping[str, str]) -> str | None:
    """Resolve ``arg`` as an arbitrary value or a named entry of ``table``."""
    arbitrary = get_arbitrary_value(arg)
    if arbitrary is not None:
        return arbitrary
    return table.get(arg)


def get_value_neg(negative: bool, arg: str, table: Mapping[str, str]) -> str | None:
    """Resolve ``arg`` like :func:`get_value`, flipping its sign when ``negative``."""
    value = get_value(arg, table)
    if value is None or not negative:
        return value
    return value[1:] if value.startswith("-") else f"-{value}"


def get_tuple_value(
    arg: str, table: Mapping[str, tuple[str, str]]
) -> tuple[str, str] | None:
    """Resolve ``arg`` to a pair; an arbitrary value fills both slots."""
    arbitrary = get_arbitrary_value(arg)
    if arbitrary is not None:
        return arbitrary, arbitrary
    pair = table.get(arg)
    if pair is None:
        return None
    return pair[0], pair[1]


def value_is_size(arg: str) -> bool:
    """Tell whether ``arg``, bracketed or not, ends with a CSS length unit."""
    value = arg[1:-1] if _is_bracketed(arg) else arg
    return value.endswith(UNITS)


def value_is_hex(arg: str) -> bool:
    """Tell whether ``arg`` looks like a hex colour, bare or bracketed."""
    return (arg.startswith("[#") and arg.endswith("]")) or arg.startswith("#")


def hex_to_rgb_color(value: str) -> tuple[int, int, int] | None:
    """Convert a ``#rrggbb`` or three-digit colour to its red, green and blue parts."""
    digits = value[1:] if value.startswith("#") else value
    if len(digits) == 3:
        parts = ["ff" if char == "f" else char for char in digits]
    else:
        parts = [digits[start:start + 2] for start in (0, 2, 4)]
    if any(not part or any(c not in string.hexdigits for c in part) for part in parts):
        return None
    red, green, blue = (int(part, 16) for part in parts)
    return red, green, blue