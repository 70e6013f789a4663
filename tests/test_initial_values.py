import sys

import pytest

from AnalyzerComponents.InitialValues import is_compound_initializer, parse_initial_value
from AnalyzerComponents.Types import PrimitiveType


@pytest.mark.parametrize("text", ["a+b", "-5", "x*2", "10/2", "f()", '"a-b"'])
def test_compound_initializers(text):
    assert is_compound_initializer(text)


@pytest.mark.parametrize("text", ["5", "3.14", '"hello"', "x", "1e5"])
def test_bare_literals(text):
    assert not is_compound_initializer(text)


def test_int_literal():
    assert parse_initial_value(PrimitiveType.INT, "42") == 42


def test_int_rejects_float_text():
    assert parse_initial_value(PrimitiveType.INT, "4.2") is None


@pytest.mark.parametrize("variable_type", [PrimitiveType.INT, PrimitiveType.FLOAT, PrimitiveType.DOUBLE])
@pytest.mark.parametrize("text", ["٣", "５", "١.٥"])
def test_non_ascii_digits_are_unset(variable_type, text):
    assert parse_initial_value(variable_type, text) is None


def test_int_out_of_range_is_unset():
    assert parse_initial_value(PrimitiveType.INT, "2147483648") is None
    assert parse_initial_value(PrimitiveType.INT, "2147483647") == 2147483647


@pytest.mark.parametrize("variable_type", [PrimitiveType.FLOAT, PrimitiveType.DOUBLE])
def test_floating_literals(variable_type):
    assert parse_initial_value(variable_type, "2.5") == 2.5
    assert parse_initial_value(variable_type, "7") == 7.0
    assert parse_initial_value(variable_type, "1e3") == 1000.0


def test_float_rejects_string_literal():
    assert parse_initial_value(PrimitiveType.FLOAT, '"2.5"') is None


def test_string_literal_strips_quotes():
    assert parse_initial_value(PrimitiveType.STRING, '"hello world"') == "hello world"


def test_string_without_quotes_is_unset():
    assert parse_initial_value(PrimitiveType.STRING, "hello") is None


def test_void_never_has_a_value():
    assert parse_initial_value(PrimitiveType.VOID, "1") is None


@pytest.mark.skipif(
    not hasattr(sys, "get_int_max_str_digits") or sys.get_int_max_str_digits() == 0,
    reason="interpreter has no integer string conversion limit",
)
def test_unconvertible_int_raises_value_error():
    with pytest.raises(ValueError):
        parse_initial_value(PrimitiveType.INT, "9" * 5000)
