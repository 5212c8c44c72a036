"""Variant prefixes such as ``hover:``, ``md:`` or ``group-focus:`` and their CSS."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Union


class MediaQuery(Enum):
    """A responsive, preference or direction variant."""

    SM = "min-width: 640px"
    MD = "min-width: 768px"
    LG = "min-width: 1024px"
    XL = "min-width: 1280px"
    XXL = "min-width: 1536px"
    DARK = "prefers-color-scheme: dark"
    MOTION_REDUCE = "prefers-reduced-motion: reduce"
    MOTION_SAFE = "prefers-reduced-motion: no-preference"
    CONTRAST_MORE = "prefers-contrast: more"
    CONTRAST_LESS = "prefers-contrast: less"
    PORTRAIT = "orientation: portrait"
    LANDSCAPE = "orientation: landscape"
    PRINT = "print"
    LTR = '[dir="ltr"]'
    RTL = '[dir="rtl"]'

    @classmethod
    def parse(cls, value: str) -> MediaQuery | None:
        """Return the variant named by ``value``, or ``None``."""
        return _MEDIA_QUERY_TOKENS.get(value)

    def wraps(self) -> bool:
        """Tell whether classes under this variant are wrapped in ``@media``."""
        return self not in (MediaQuery.PRINT, MediaQuery.LTR, MediaQuery.RTL)


_MEDIA_QUERY_TOKENS = {
    "sm": MediaQuery.SM,
    "md": MediaQuery.MD,
    "lg": MediaQuery.LG,
    "xl": MediaQuery.XL,
    "2xl": MediaQuery.XXL,
    "dark": MediaQuery.DARK,
    "motion-reduce": MediaQuery.MOTION_REDUCE,
    "motion-safe": MediaQuery.MOTION_SAFE,
    "contrast-more": MediaQuery.CONTRAST_MORE,
    "contrast-less": MediaQuery.CONTRAST_LESS,
    "portrait": MediaQuery.PORTRAIT,
    "landscape": MediaQuery.LANDSCAPE,
    "print": MediaQuery.PRINT,
    "ltr": MediaQuery.LTR,
    "rtl": MediaQuery.RTL,
}


class PseudoClass(Enum):
    """A pseudo-class variant; the value is its CSS name."""

    HOVER = "hover"
    FOCUS = "focus"
    FOCUS_WITHIN = "focus-within"
    FOCUS_VISIBLE = "focus-visible"
    ACTIVE = "active"
    VISITED = "visited"
    TARGET = "target"
    FIRST = "first-child"
    LAST = "last-child"
    ONLY = "only-child"
    ODD = "nth-child(odd)"
    EVEN = "nth-child(even)"
    FIRST_OF_TYPE = "first-of-type"
    LAST_OF_TYPE = "last-of-type"
    ONLY_OF_TYPE = "only-of-type"
    EMPTY = "empty"
    DISABLED = "disabled"
    ENABLED = "enabled"
    CHECKED = "checked"
    INDETERMINATE = "indeterminate"
    DEFAULT = "default"
    REQUIRED = "required"
    VALID = "valid"
    INVALID = "invalid"
    IN_RANGE = "in-range"
    OUT_OF_RANGE = "out-of-range"
    PLACEHOLDER_SHOWN = "placeholder-shown"
    AUTOFILL = "autofill"
    READ_ONLY = "readonly"
    OPEN = "open"

    @classmethod
    def parse(cls, value: str) -> PseudoClass | None:
        """Return the variant named by ``value``, or ``None``."""
        return _PSEUDO_CLASS_TOKENS.get(value)


_PSEUDO_CLASS_TOKENS = {
    **{
        member.value: member
        for member in PseudoClass
        if member
        not in (
            PseudoClass.FIRST,
            PseudoClass.LAST,
            PseudoClass.ONLY,
            PseudoClass.ODD,
            PseudoClass.EVEN,
        )
    },
    "first": PseudoClass.FIRST,
    "last": PseudoClass.LAST,
    "only": PseudoClass.ONLY,
    "odd": PseudoClass.ODD,
    "even": PseudoClass.EVEN,
}


class PseudoElement(Enum):
    """A pseudo-element variant; the value is its CSS name."""

    BEFORE = "before"
    AFTER = "after"
    PLACEHOLDER = "placeholder"
    FILE = "file-selector-button"
    MARKER = "marker"
    SELECTION = "selection"
    FIRST_LINE = "first-line"
    FIRST_LETTER = "first-letter"
    LAST_LINE = "last-line"
    BACKDROP = "backdrop"

    @classmethod
    def parse(cls, value: str) -> PseudoElement | None:
        """Return the variant named by ``value``, or ``None``."""
        if value == "file":
            return cls.FILE
        if value == cls.FILE.value:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


class Group(Enum):
    """A ``group-*`` variant: styles an element by the state of a ``group`` parent."""

    HOVER = "hover"
    FOCUS = "focus"
    FOCUS_WITHIN = "focus-within"
    FOCUS_VISIBLE = "focus-visible"
    ACTIVE = "active"
    VISITED = "visited"
    TARGET = "target"
    FIRST = "first-child"
    LAST = "last-child"
    ONLY = "only-child"
    ODD = "nth-child(odd)"
    EVEN = "nth-child(even)"
    FIRST_OF_TYPE = "first-of-type"
    LAST_OF_TYPE = "last-of-type"
    ONLY_OF_TYPE = "only-of-type"
    EMPTY = "empty"
    DISABLED = "disabled"
    ENABLED = "enabled"
    CHECKED = "checked"
    INDETERMINATE = "indeterminate"
    DEFAULT = "default"
    REQUIRED = "required"
    VALID = "valid"
    INVALID = "invalid"
    IN_RANGE = "in-range"
    OUT_OF_RANGE = "out-of-range"
    PLACEHOLDER_SHOWN = "placeholder-shown"
    AUTOFILL = "autofill"
    READ_ONLY = "readonly"
    OPEN = "open"

    @classmethod
    def parse(cls, value: str) -> Group | None:
        """Return the variant named by ``value`` (e.g. ``group-hover``), or ``None``."""
        prefix, sep, state = value.partition("-")
        if prefix != "group" or not sep:
            return None
        try:
            return cls(state)
        except ValueError:
            return None

    @property
    def selector(self) -> str:
        """The selector text placed before the class name."""
        return f"group:{self.value} ."


class Peer(Enum):
    """A ``peer-*`` variant: styles an element by the state of a preceding ``peer``."""

    HOVER = "hover"
    FOCUS = "focus"
    FOCUS_WITHIN = "focus-within"
    FOCUS_VISIBLE = "focus-visible"
    ACTIVE = "active"
    VISITED = "visited"
    TARGET = "target"
    FIRST = "first-child"
    LAST = "last-child"
    ONLY = "only-child"
    ODD = "nth-child(odd)"
    EVEN = "nth-child(even)"
    FIRST_OF_TYPE = "first-of-type"
    LAST_OF_TYPE = "last-of-type"
    ONLY_OF_TYPE = "only-of-type"
    EMPTY = "empty"
    DISABLED = "disabled"
    ENABLED = "enabled"
    CHECKED = "checked"
    INDETERMINATE = "indeterminate"
    DEFAULT = "default"
    REQUIRED = "required"
    VALID = "valid"
    INVALID = "invalid"
    IN_RANGE = "in-range"
    OUT_OF_RANGE = "out-of-range"
    PLACEHOLDER_SHOWN = "placeholder-shown"
    AUTOFILL = "autofill"
    READ_ONLY = "readonly"
    OPEN = "open"

    @classmethod
    def parse(cls, value: str) -> Peer | None:
        """Return the variant named by ``value`` (e.g. ``peer-checked``), or ``None``."""
        prefix, sep, state = value.partition("-")
        if prefix != "peer" or not sep:
            return None
        try:
            return cls(state)
        except ValueError:
            return None

    @property
    def selector(self) -> str:
        """The selector text placed before the class name."""
        return f"peer:{self.value} ~ ."


State = Union[MediaQuery, PseudoClass, PseudoElement, Group, Peer]

_STATE_KINDS = (MediaQuery, PseudoClass, PseudoElement, Group, Peer)


def parse_state(value: str) -> State | None:
    """Recognise one variant prefix, trying each kind in turn."""
    for kind in _STATE_KINDS:
        state = kind.parse(value)
        if state is not None:
            return state
    return None


def generate_state_selector(states: Iterable[State]) -> str:
    """Join the pseudo-classes and pseudo-elements among ``states`` into a selector."""
    states = list(states)
    pseudo_classes = ":".join(s.value for s in states if isinstance(s, PseudoClass))
    pseudo_elements = "::".join(s.value for s in states if isinstance(s, PseudoElement))
    if not pseudo_elements:
        return pseudo_classes
    if not pseudo_classes:
        return f":{pseudo_elements}"
    return f"{pseudo_classes}::{pseudo_elements}"