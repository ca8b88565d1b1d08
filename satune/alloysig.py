"""Signatures written in the Alloy modelling language."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from satune.signature import Signature, ValuedSignature

_ABS_SET = "abstract sig AbsSet {\n\t\tdomain: set Int\n\t\t}\n"
_ABS_BOOL = (
    "one sig BooleanSet extends AbsSet {}{\n"
    "\tdomain = 0 + 1 \n"
    "\t}\n"
    "\tabstract sig AbsBool {\tvalue: Int\t}{\n"
    "\tvalue in BooleanSet.domain\n"
    "\t}\n"
)
_ABS_ELEMENT = "abstract sig AbsElement {\n\t\tvalue: Int\n\t\t}\n"


@dataclass
class AlloyAbstracts:
    """Which shared abstract signatures still have to be declared."""

    set_pending: bool = True
    bool_pending: bool = True
    element_pending: bool = True


class AlloyBoolSig(ValuedSignature):
    """A boolean variable, modelled as a one-value signature over {0, 1}."""

    def __init__(self, sig_id: int, abstracts: Optional[AlloyAbstracts] = None) -> None:
        super().__init__(sig_id)
        self.abstracts = abstracts if abstracts is not None else AlloyAbstracts()

    def __str__(self) -> str:
        return f"Boolean{self.sig_id}.value"

    def abs_signature(self) -> str:
        text = ""
        if self.abstracts.set_pending:
            self.abstracts.set_pending = False
            text += _ABS_SET
        return text + _ABS_BOOL

    def declaration(self) -> str:
        text = ""
        if self.abstracts.bool_pending:
            self.abstracts.bool_pending = False
            text += self.abs_signature()
        return text + f"one sig Boolean{self.sig_id} extends AbsBool {{}}"


class AlloySetSig(Signature):
    """A finite set of integers."""

    def __init__(
        self,
        sig_id: int,
        values: Iterable[int],
        abstracts: Optional[AlloyAbstracts] = None,
    ) -> None:
        super().__init__(sig_id)
        members = list(values)
        if not members:
            raise ValueError("a set signature needs at least one value")
        self.abstracts = abstracts if abstracts is not None else AlloyAbstracts()
        self.domain = " + ".join(str(v) for v in members)

    def __str__(self) -> str:
        return f"Set{self.sig_id}.domain"

    def abs_signature(self) -> str:
        return _ABS_SET

    def declaration(self) -> str:
        text = ""
        if self.abstracts.set_pending:
            self.abstracts.set_pending = False
            text += self.abs_signature()
        return text + (
            f"one sig Set{self.sig_id} extends AbsSet {{}}{{\n"
            f"\t\tdomain = {self.domain}\n"
            "\t\t}"
        )


class AlloyElementSig(ValuedSignature):
    """An integer variable whose value lies in a set signature."""

    def __init__(
        self,
        sig_id: int,
        set_sig: Signature,
        abstracts: Optional[AlloyAbstracts] = None,
    ) -> None:
        super().__init__(sig_id)
        self.set_sig = set_sig
        self.abstracts = abstracts if abstracts is not None else AlloyAbstracts()

    def __str__(self) -> str:
        return f"Element{self.sig_id}.value"

    def abs_signature(self) -> str:
        return _ABS_ELEMENT

    def declaration(self) -> str:
        text = ""
        if self.abstracts.element_pending:
            self.abstracts.element_pending = False
            text += self.abs_signature()
        return text + (
            f"one sig Element{self.sig_id} extends AbsElement {{}}{{\n"
            f"\t\tvalue in {self.set_sig}\n"
            "\t\t}"
        )