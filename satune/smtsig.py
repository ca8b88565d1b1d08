"""Signatures written in the SMT-LIB language."""

from __future__ import annotations

from itertools import pairwise
from typing import Iterable

from satune.signature import Signature, ValuedSignature

_PLACEHOLDER = "$"


class SMTBoolSig(ValuedSignature):
    """A boolean constant."""

    def __str__(self) -> str:
        return f"b{self.sig_id}"

    def abs_signature(self) -> str:
        return ""

    def declaration(self) -> str:
        return f"(declare-const b{self.sig_id} Bool)"


class SMTSetSig(Signature):
    """A set of integers, kept as a template of range constraints.

    The values are expected in ascending order; the first is the lower bound,
    the last the upper bound, and every gap between neighbours is excluded.
    """

    def __init__(self, sig_id: int, values: Iterable[int]) -> None:
        super().__init__(sig_id)
        members = list(values)
        if not members:
            raise ValueError("a set signature needs at least one value")
        holes = [
            hole
            for prev, curr in pairwise(members)
            for hole in range(prev + 1, curr)
        ]
        lines = [
            f"(assert (<= e$ {members[-1]}))\n",
            f"(assert (>= e$ {members[0]}))\n",
        ]
        lines.extend(f"(assert (not (= e$ {hole})))\n" for hole in holes)
        self.constraint = "".join(lines)

    def __str__(self) -> str:
        return ""

    def abs_signature(self) -> str:
        return self.constraint

    def declaration(self) -> str:
        return ""


class SMTElementSig(ValuedSignature):
    """An integer constant restricted to the values of a set signature."""

    def __init__(self, sig_id: int, set_sig: SMTSetSig) -> None:
        super().__init__(sig_id)
        self.set_sig = set_sig

    def __str__(self) -> str:
        return f"e{self.sig_id}"

    def abs_signature(self) -> str:
        return ""

    def declaration(self) -> str:
        constraint = self.set_sig.abs_signature().replace(_PLACEHOLDER, str(self.sig_id))
        return f"(declare-const e{self.sig_id} Int)\n" + constraint