import warnings

import pytest

from satune.elementencoding import ElementEncoding, ElementEncodingType
from satune.sattranslator import (
    UndefinedValueWarning,
    element_value,
    element_value_binary_index,
    element_value_binary_value,
    element_value_one_hot,
    element_value_unary,
)


def _encoding(values, kind, variables):
    enc = ElementEncoding(values)
    enc.type = kind
    enc.initialize_encoding_array()
    enc.variables = list(variables)
    enc.num_vars = len(variables)
    return enc


def _truth(*true_vars):
    chosen = set(true_vars)
    return lambda var: var in chosen


def test_binary_index_low_bit_is_first_variable():
    enc = _encoding([10, 20, 30], ElementEncodingType.BINARYINDEX, ["a", "b"])
    assert element_value_binary_index(enc, _truth()) == 10
    assert element_value_binary_index(enc, _truth("a")) == 20
    assert element_value_binary_index(enc, _truth("b")) == 30


def test_binary_index_unused_slot_warns():
    enc = _encoding([10, 20, 30], ElementEncodingType.BINARYINDEX, ["a", "b"])
    with pytest.warns(UndefinedValueWarning):
        result = element_value_binary_index(enc, _truth("a", "b"))
    assert result == enc.encoding_array[3]


def test_binary_index_beyond_array_raises():
    enc = _encoding([10, 20], ElementEncodingType.BINARYINDEX, ["a", "b"])
    with pytest.warns(UndefinedValueWarning):
        with pytest.raises(IndexError):
            element_value_binary_index(enc, _truth("b"))


def test_one_hot_picks_true_variable():
    enc = _encoding([4, 8, 9], ElementEncodingType.ONEHOT, ["x0", "x1", "x2"])
    assert element_value_one_hot(enc, _truth("x1")) == 8


def test_one_hot_last_true_variable_wins():
    enc = _encoding([4, 8, 9], ElementEncodingType.ONEHOT, ["x0", "x1", "x2"])
    assert element_value_one_hot(enc, _truth("x0", "x2")) == 9


def test_one_hot_without_true_variable_warns():
    enc = _encoding([4, 8, 9], ElementEncodingType.ONEHOT, ["x0", "x1", "x2"])
    with pytest.warns(UndefinedValueWarning):
        assert element_value_one_hot(enc, _truth()) == 4


def test_one_hot_index_outside_range_raises():
    enc = _encoding([4, 8, 9], ElementEncodingType.ONEHOT, ["x0", "x1", "x2"])
    enc.variables.append("x3")
    enc.num_vars = 4
    with pytest.raises(ValueError):
        element_value_one_hot(enc, _truth("x3"))


def test_unary_stops_at_first_false():
    enc = _encoding([1, 2, 3], ElementEncodingType.UNARY, ["u0", "u1"])
    assert element_value_unary(enc, _truth()) == 1
    assert element_value_unary(enc, _truth("u0")) == 2
    assert element_value_unary(enc, _truth("u0", "u1")) == 3
    assert element_value_unary(enc, _truth("u1")) == 1


def test_binary_value_unsigned_adds_offset():
    enc = ElementEncoding([])
    enc.type = ElementEncodingType.BINARYVAL
    enc.variables = ["v0", "v1", "v2"]
    enc.num_vars = 3
    enc.offset = 100
    assert element_value_binary_value(enc, _truth("v0", "v2")) == 105
    assert element_value_binary_value(enc, _truth()) == enc.offset


def test_binary_value_signed_sign_extends():
    enc = ElementEncoding([])
    enc.type = ElementEncodingType.BINARYVAL
    enc.variables = ["v0", "v1", "v2"]
    enc.num_vars = 3
    enc.offset = 100
    enc.is_binary_val_signed = True
    assert element_value_binary_value(enc, _truth("v2")) == 96
    assert element_value_binary_value(enc, _truth("v0")) == 101


def test_element_value_single_value_range():
    enc = ElementEncoding([42])
    enc.type = ElementEncodingType.ONEHOT
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert element_value(enc, _truth()) == 42


def test_element_value_dispatches_by_type():
    onehot = _encoding([4, 8, 9], ElementEncodingType.ONEHOT, ["x0", "x1", "x2"])
    unary = _encoding([1, 2, 3], ElementEncodingType.UNARY, ["u0", "u1"])
    binary = _encoding([10, 20, 30], ElementEncodingType.BINARYINDEX, ["a", "b"])
    assert element_value(onehot, _truth("x2")) == 9
    assert element_value(unary, _truth("u0")) == 2
    assert element_value(binary, _truth("b")) == 30


def test_element_value_rejects_binary_value():
    enc = ElementEncoding([1, 2])
    enc.type = ElementEncodingType.BINARYVAL
    enc.variables = ["v0"]
    enc.num_vars = 1
    with pytest.raises(ValueError):
        element_value(enc, _truth())