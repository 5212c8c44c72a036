"""CSS declarations produced by utility classes."""

from __future__ import annotations

_SEPARATOR = ";\n    "


class Decl:
    """One or more CSS declarations, or a complete block of CSS rules."""

    __slots__ = ("lines", "is_full_class")

    def __init__(self, *lines: str) -> None:
        if not lines:
            raise ValueError("a declaration needs at least one line")
        self.lines: tuple[str, ...] = lines
        self.is_full_class = False

    @classmethod
    def full(cls, text: str) -> Decl:
        """Build a declaration that is a whole stylesheet fragment."""
        decl = cls(text)
        decl.is_full_class = True
        return decl

    def render(self) -> str:
        """Return the text that goes inside a rule, or the full fragment."""
        if self.is_full_class:
            return self.lines[0]
        return _SEPARATOR.join(self.lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Decl):
            return NotImplemented
        return (self.lines, self.is_full_class) == (other.lines, other.is_full_class)

    def __hash__(self) -> int:
        return hash((self.lines, self.is_full_class))

    def __repr__(self) -> str:
        if self.is_full_class:
            return f"Decl.full({self.lines[0]!r})"
        return f"Decl({', '.join(map(repr, self.lines))})"


class Literal:
    """A class whose declarations do not depend on any lookup."""

    __slots__ = ("declarations",)

    def __init__(self, *declarations: str) -> None:
        if not declarations:
            raise ValueError("a literal needs at least one declaration")
        self.declarations: tuple[str, ...] = declarations

    def to_decl(self) -> Decl:
        return Decl(*self.declarations)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Literal):
            return NotImplemented
        return self.declarations == other.declarations

    def __hash__(self) -> int:
        return hash(self.declarations)

    def __repr__(self) -> str:
        return f"Literal({', '.join(map(repr, self.declarations))})"