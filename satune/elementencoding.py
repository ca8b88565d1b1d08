"""How an element's value is represented with boolean variables."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Iterable


class ElementEncodingType(IntEnum):
    UNASSIGNED = 0
    ONEHOT = 1
    UNARY = 2
    BINARYINDEX = 3
    BINARYVAL = 4


class ElemEnc(IntEnum):
    UNKNOWN = 0
    NONE = 1
    BOTH = 2


_WORD_BITS = 64


def next_pow2(n: int) -> int:
    """Return the smallest power of two that is at least ``n``."""
    if n < 1:
        raise ValueError("n must be positive")
    return 1 << (n - 1).bit_length()


class ElementEncoding:
    """Encoding state of one element whose range is ``range_values``."""

    def __init__(self, range_values: Iterable[int]) -> None:
        self.range_values: tuple[int, ...] = tuple(range_values)
        self.type = ElementEncodingType.UNASSIGNED
        self.variables: list[Any] = []
        self.num_vars = 0
        self.encoding_array: list[int] = []
        self.enc_array_size = 0
        self.edge_array: Any = None
        self.polarity_array: Any = None
        self.encoding = ElemEnc.UNKNOWN
        # Fields used by the binary value encoding.
        self.offset = 0
        self.low = 0
        self.high = 0
        self.num_bits = 0
        self.is_binary_val_signed = False
        self._in_use = 0
        self._in_use_bits = 0

    def encoding_array_size(self, set_size: int) -> int:
        """Number of slots the encoding array needs for ``set_size`` values."""
        if self.type == ElementEncodingType.BINARYINDEX:
            return next_pow2(set_size)
        if self.type in (ElementEncodingType.ONEHOT, ElementEncodingType.UNARY):
            return set_size
        raise ValueError(f"no encoding array for encoding type {self.type.name}")

    def alloc_encoding_array(self, size: int) -> None:
        self.encoding_array = [0] * size
        self.enc_array_size = size

    def alloc_in_use_array(self, size: int) -> None:
        """Allocate a cleared in-use bitmap covering at least ``size`` slots."""
        words = (size + _WORD_BITS - 1) // _WORD_BITS
        self._in_use = 0
        self._in_use_bits = words * _WORD_BITS

    def _check_offset(self, offset: int) -> None:
        if not 0 <= offset < self._in_use_bits:
            raise IndexError("offset outside the in-use bitmap")

    def is_in_use(self, offset: int) -> bool:
        self._check_offset(offset)
        return bool((self._in_use >> offset) & 1)

    def set_in_use(self, offset: int) -> None:
        self._check_offset(offset)
        self._in_use |= 1 << offset

    def initialize_encoding_array(self) -> None:
        """Lay out the range values in the encoding array and mark them used."""
        size = len(self.range_values)
        enc_size = self.encoding_array_size(size)
        self.alloc_encoding_array(enc_size)
        self.alloc_in_use_array(enc_size)
        for index, value in enumerate(self.range_values):
            self.encoding_array[index] = value
            self.set_in_use(index)

    def describe(self) -> str:
        text = f"{self.type.name} "
        if self.type == ElementEncodingType.BINARYINDEX:
            text += ", ".join(
                str(value) if self.is_in_use(index) else "_"
                for index, value in enumerate(self.encoding_array)
            )
        text += f"numVars= {self.num_vars} "
        text += f"encArraySize= {self.enc_array_size}"
        return text

    def __str__(self) -> str:
        return self.describe()