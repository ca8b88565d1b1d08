"""Encoding choices for functions, predicates and orders."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any, Optional


class FunctionEncodingType(IntEnum):
    UNASSIGNED = 0
    ENUMERATEIMPLICATIONS = 1
    ENUMERATEIMPLICATIONSNEGATE = 2
    CIRCUIT = 3


class FunctionEncoding:
    """Encoding chosen for a function application or a predicate."""

    def __init__(self, operation: Any, is_function: bool = True) -> None:
        self.type = FunctionEncodingType.UNASSIGNED
        self.is_function = is_function
        self.op = operation

    @property
    def function(self) -> Optional[Any]:
        return self.op if self.is_function else None

    @property
    def predicate(self) -> Optional[Any]:
        return None if self.is_function else self.op


class OrderEncodingType(IntEnum):
    UNASSIGNED = 0
    PAIRWISE = 1
    INTEGERENCODING = 2


class OrderResolver(ABC):
    """Decides, after solving, whether one item precedes another."""

    @abstractmethod
    def resolve_order(self, first: int, second: int) -> bool:
        """Return True when ``first`` is ordered before ``second``."""


class OrderEncoding:
    """Encoding chosen for an order, with the resolver that reads it back."""

    def __init__(self, order: Any) -> None:
        self.resolver: Optional[OrderResolver] = None
        self.type = OrderEncodingType.UNASSIGNED
        self.order = order