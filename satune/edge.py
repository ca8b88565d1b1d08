"""Possibly negated reference to a boolean node."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, eq=False)
class BooleanEdge:
    """An edge to a boolean node, carrying a negation flag.

    Two edges are equal when they point at the very same node with the same
    polarity.
    """

    boolean: Any = None
    negated: bool = False

    def negate(self) -> "BooleanEdge":
        return BooleanEdge(self.boolean, not self.negated)

    def __bool__(self) -> bool:
        return self.boolean is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BooleanEdge):
            return NotImplemented
        return self.boolean is other.boolean and self.negated == other.negated

    def __hash__(self) -> int:
        return hash((id(self.boolean), self.negated))

    def __str__(self) -> str:
        return ("!" if self.negated else "") + str(self.boolean)