"""Transition and animation utilities: ``transition``, ``duration-``, ``ease-``,
``delay-`` and ``animate-``."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .decl import Decl, Literal
from .utils import get_args, get_class_name
from .values import get_value

# No named theme values are bundled; arbitrary ``[...]`` values always resolve.
_TABLES: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "transition-duration": MappingProxyType({}),
        "transition-timing-function": MappingProxyType({}),
        "transition-delay": MappingProxyType({}),
    }
)

_LOOKUP_CLASSES = {
    "duration": "transition-duration",
    "ease": "transition-timing-function",
    "delay": "transition-delay",
}

_TIMING = (
    "transition-timing-function: cubic-bezier(0.4, 0, 0.2, 1)",
    "transition-duration: 150ms",
)

_DEFAULT_TRANSITION = (
    "transition-property: color, background-color, border-color, fill, stroke, "
    "opacity, box-shadow, transform, filter, -webkit-text-decoration-color, "
    "-webkit-backdrop-filter",
    "transition-property: color, background-color, border-color, "
    "text-decoration-color, fill, stroke, opacity, box-shadow, transform, filter, "
    "backdrop-filter",
    "transition-property: color, background-color, border-color, "
    "text-decoration-color, fill, stroke, opacity, box-shadow, transform, filter, "
    "backdrop-filter, -webkit-text-decoration-color, -webkit-backdrop-filter",
    *_TIMING,
)

_TRANSITIONS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "none": ("transition-property: none",),
        "all": ("transition-property: all", *_TIMING),
        "colors": (
            "transition-property: color, background-color, border-color, fill, "
            "stroke, -webkit-text-decoration-color",
            "transition-property: color, background-color, border-color, "
            "text-decoration-color, fill, stroke",
            "transition-property: color, background-color, border-color, "
            "text-decoration-color, fill, stroke, -webkit-text-decoration-color",
            *_TIMING,
        ),
        "opacity": ("transition-property: opacity", *_TIMING),
        "shadow": ("transition-property: box-shadow", *_TIMING),
        "transform": ("transition-property: transform", *_TIMING),
    }
)

_KEYFRAMES: Mapping[str, str] = MappingProxyType(
    {
        "spin": """@keyframes spin {
  to {
    transform: rotate(360deg);
  }
}

.animate-spin {
  animation: spin 1s linear infinite;
}""",
        "ping": """@keyframes ping {
  75%, 100% {
    transform: scale(2);
    opacity: 0;
  }
}

.animate-ping {
  animation: ping 1s cubic-bezier(0, 0, 0.2, 1) infinite;
}""",
        "pulse": """@keyframes pulse {
  50% {
    opacity: .5;
  }
}

.animate-pulse {
  animation: pulse 2s cubic-bezier(0.4, 0, 0.6, 1) infinite;
}""",
        "bounce": """@keyframes bounce {
  0%, 100% {
    transform: translateY(-25%);
    animation-timing-function: cubic-bezier(0.8,0,1,1);
  }

  50% {
    transform: none;
    animation-timing-function: cubic-bezier(0,0,0.2,1);
  }
}

.animate-bounce {
  animation: bounce 1s infinite;
}""",
    }
)


@dataclass(frozen=True)
class _Lookup:
    prop: str
    arg: str

    def to_decl(self) -> Decl | None:
        value = get_value(self.arg, _TABLES[self.prop])
        if value is None:
            return None
        return Decl(f"{self.prop}: {value}")


@dataclass(frozen=True)
class _Animation:
    name: str

    def to_decl(self) -> Decl:
        return Decl.full(_KEYFRAMES[self.name])


def _parse_transition(value: str, args: str | None) -> Literal | None:
    if args is not None and args in _TRANSITIONS:
        return Literal(*_TRANSITIONS[args])
    if value == "transition":
        return Literal(*_DEFAULT_TRANSITION)
    return None


def _parse_animation(args: str | None) -> Literal | _Animation | None:
    if args == "none":
        return Literal("animation: none")
    if args in _KEYFRAMES:
        return _Animation(args)
    return None


def parse_transition_animation(value: str) -> Literal | _Lookup | _Animation | None:
    """Recognise a transition or animation class, or return ``None``."""
    name = get_class_name(value)
    args = get_args(value)
    if name == "transition":
        return _parse_transition(value, args)
    if name in _LOOKUP_CLASSES:
        return None if args is None else _Lookup(_LOOKUP_CLASSES[name], args)
    if name == "animate":
        return _parse_animation(args)
    return None