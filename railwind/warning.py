"""Warnings about classes that could not be turned into CSS."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A one-based line and column in the scanned text."""

    line: int
    column: int


@dataclass(frozen=True)
class Warning:  # noqa: A001 - the library's own warning record
    """A message about a class, tied to where it was found."""

    message: str
    position: Position

    @classmethod
    def class_not_found(cls, class_name: str, position: Position) -> Warning:
        return cls(f"Could not match class '{class_name}'", position)

    @classmethod
    def state_not_found(
        cls, class_name: str, position: Position, received: str
    ) -> Warning:
        return cls(
            f"Could not match state at class '{class_name}', "
            f"'{received}' is not a valid state",
            position,
        )

    @classmethod
    def invalid_arg(
        cls,
        class_name: str,
        position: Position,
        received: str,
        required: Iterable[str],
    ) -> Warning:
        return cls(
            f"Could not match class '{class_name}', invalid argument '{received}', "
            f"possible arguments: '{', '.join(required)}'",
            position,
        )

    @classmethod
    def value_not_found(cls, class_name: str, position: Position, value: str) -> Warning:
        return cls(
            f"Could not match class '{class_name}','{value}' could not be found",
            position,
        )

    def __str__(self) -> str:
        return (
            f"Warning on Line: {self.position.line}, "
            f"Col: {self.position.column}; {self.message}"
        )