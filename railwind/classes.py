"""Dispatch of a utility class name to the family that recognises it."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .layout import parse_layout
from .sizing import parse_sizing
from .spacing import parse_spacing
from .svg import parse_svg
from .tables import parse_table
from .transforms import parse_transform
from .transitions import parse_transition_animation
from .typography import parse_typography

_PARSERS: tuple[Callable[[str], Any], ...] = (
    parse_layout,
    parse_spacing,
    parse_sizing,
    parse_svg,
    parse_table,
    parse_transition_animation,
    parse_transform,
    parse_typography,
)


def parse_class(value: str) -> Any:
    """Return the first utility that recognises ``value``, or ``None``.

    The result has a ``to_decl()`` method giving its declarations, or ``None``
    when its argument cannot be resolved.
    """
    for parser in _PARSERS:
        parsed = parser(value)
        if parsed is not None:
            return parsed
    return None