"""Named declarations that stand for nodes in an external solver's input."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class Signature(ABC):
    """A declaration in the solver language, identified by a numeric id."""

    def __init__(self, sig_id: int) -> None:
        self.sig_id = sig_id

    @abstractmethod
    def __str__(self) -> str:
        """Text that refers to this signature inside a formula."""

    def __add__(self, other: object) -> str:
        if isinstance(other, str):
            return str(self) + other
        return NotImplemented

    def __radd__(self, other: object) -> str:
        if isinstance(other, str):
            return other + str(self)
        return NotImplemented

    @abstractmethod
    def abs_signature(self) -> str:
        """Shared text that the declaration of this signature relies on."""

    @abstractmethod
    def declaration(self) -> str:
        """Text that declares this signature."""


class ValuedSignature(Signature):
    """A signature that receives a value from the solver's model."""

    def __init__(self, sig_id: int) -> None:
        super().__init__(sig_id)
        self._value: Optional[int] = None

    @property
    def value(self) -> int:
        if self._value is None:
            raise ValueError(f"signature {self.sig_id} has no value yet")
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        self._value = int(value)