"""Read element values back from a satisfying assignment."""

from __future__ import annotations

import warnings
from typing import Any, Callable

from satune.elementencoding import ElementEncoding, ElementEncodingType

_MASK64 = 0xFFFFFFFFFFFFFFFF

TruthFunction = Callable[[Any], bool]


class UndefinedValueWarning(UserWarning):
    """The assignment does not pick out a valid value for an element."""


def _variables(encoding: ElementEncoding) -> list[Any]:
    return list(encoding.variables[: encoding.num_vars])


def _bits_to_int(encoding: ElementEncoding, is_true: TruthFunction) -> int:
    # Variable i carries bit i of the number.
    value = 0
    for var in reversed(_variables(encoding)):
        value = (value << 1) | (1 if is_true(var) else 0)
    return value


def element_value_binary_index(encoding: ElementEncoding, is_true: TruthFunction) -> int:
    index = _bits_to_int(encoding, is_true)
    if encoding.enc_array_size <= index or not encoding.is_in_use(index):
        warnings.warn("Element has undefined value!", UndefinedValueWarning, stacklevel=2)
    if index >= len(encoding.encoding_array):
        raise IndexError(f"index {index} outside the encoding array")
    return encoding.encoding_array[index]


def element_value_binary_value(encoding: ElementEncoding, is_true: TruthFunction) -> int:
    value = _bits_to_int(encoding, is_true)
    variables = _variables(encoding)
    if encoding.is_binary_val_signed and variables and is_true(variables[-1]):
        high_bits = _MASK64 - ((1 << encoding.num_vars) - 1)
        value = (value + high_bits) & _MASK64
    return (value + encoding.offset) & _MASK64


def element_value_one_hot(encoding: ElementEncoding, is_true: TruthFunction) -> int:
    index = 0
    overflow = True
    for position, var in enumerate(_variables(encoding)):
        if is_true(var):
            index = position
            overflow = False
    if overflow:
        warnings.warn("Element has undefined value!", UndefinedValueWarning, stacklevel=2)
    if encoding.enc_array_size <= index or not encoding.is_in_use(index):
        raise ValueError(f"one-hot index {index} does not name a value")
    return encoding.encoding_array[index]


def element_value_unary(encoding: ElementEncoding, is_true: TruthFunction) -> int:
    variables = _variables(encoding)
    index = next(
        (position for position, var in enumerate(variables) if not is_true(var)),
        len(variables),
    )
    if index >= len(encoding.encoding_array):
        raise IndexError(f"index {index} outside the encoding array")
    return encoding.encoding_array[index]


def element_value(encoding: ElementEncoding, is_true: TruthFunction) -> int:
    """Return the value the assignment gives the encoded element."""
    if encoding.num_vars == 0:
        return encoding.range_values[0]
    if encoding.type == ElementEncodingType.ONEHOT:
        return element_value_one_hot(encoding, is_true)
    if encoding.type == ElementEncodingType.UNARY:
        return element_value_unary(encoding, is_true)
    if encoding.type == ElementEncodingType.BINARYINDEX:
        return element_value_binary_index(encoding, is_true)
    raise ValueError(f"cannot read values of encoding type {encoding.type.name}")