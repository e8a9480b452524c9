"""Root-relative paths used to address nodes in a Tree."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from ._common import bracketed, check_index
from .errors import OutOfRangeError


class Direction(Enum):
    """One step from a tree node to one of its children."""

    LEFT = "L"
    RIGHT = "R"

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Position:
    """
    An immutable sequence of Directions, read from the root downwards.
    The empty Position denotes the root itself.

    Positions compare and hash by their directions.
    """

    directions: tuple[Direction, ...] = ()

    def __post_init__(self) -> None:
        directions = tuple(self.directions)
        for d in directions:
            if not isinstance(d, Direction):
                raise TypeError(f"Expected a Direction, found: {d!r}")
        # frozen dataclass, so bypass the generated __setattr__
        object.__setattr__(self, "directions", directions)

    @classmethod
    def parse(cls, text: str) -> Position:
        """
        Builds a Position from a string of 'L'/'R' characters,
        e.g. "RL" is [RIGHT, LEFT] and "" is the root.
        """
        directions = []
        for ch in text.strip().upper():
            try:
                directions.append(Direction(ch))
            except ValueError:
                raise ValueError(
                    f"Invalid direction {ch!r} in {text!r}, expected 'L' or 'R'"
                ) from None
        return cls(tuple(directions))

    def __len__(self) -> int:
        return len(self.directions)

    def __str__(self) -> str:
        return bracketed(self.directions)

    def size(self) -> int:
        return len(self.directions)

    def get(self, index: int) -> Direction:
        check_index(index)
        if index >= len(self.directions):
            raise OutOfRangeError(f"Index exceeds position length, found: {index}")
        return self.directions[index]
