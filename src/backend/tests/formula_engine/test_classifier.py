import pytest

from common.formula_engine.catalog import INT_VARIABLES, STRING_VARIABLES, TypeCatalog
from common.formula_engine.classifier import classify_operand, is_int_literal, is_string_literal
from common.formula_engine.models import OperandType, Variable


@pytest.mark.parametrize("raw", ["0", "25", "007", "123456789012345678901234567890"])
def test_digit_strings_are_int(raw):
    assert classify_operand(raw) == OperandType.INT


@pytest.mark.parametrize("raw", ['""', '"abc"', '"a b c"', '"""', '"25"', '"transaction.amount"'])
def test_quoted_strings_are_string(raw):
    assert classify_operand(raw) == OperandType.STRING


def test_declared_variables_classify_as_their_type(catalog):
    for name in INT_VARIABLES:
        assert classify_operand(name, catalog) == OperandType.INT
    for name in STRING_VARIABLES:
        assert classify_operand(name, catalog) == OperandType.STRING


@pytest.mark.parametrize(
    "raw",
    [
        "",
        None,
        '"',
        "-5",
        "+5",
        " 25",
        "25 ",
        "2.5",
        "²",
        "abc",
        '"abc',
        'abc"',
        "transaction",
        "transaction.amount ",
        "Transaction.Amount",
    ],
)
def test_everything_else_is_invalid(raw):
    assert classify_operand(raw) == OperandType.INVALID


def test_literal_scans_boundaries():
    assert not is_int_literal("")
    assert is_int_literal("9")
    assert not is_string_literal('"')
    assert is_string_literal('""')


def test_classification_uses_given_catalog(catalog_yaml):
    other = TypeCatalog.from_yaml_text(catalog_yaml)
    assert classify_operand("order.quantity", other) == OperandType.INT
    assert classify_operand("transaction.amount", other) == OperandType.INVALID


def test_int_variable_wins_over_string_literal_syntax():
    overlapping = TypeCatalog(variables=[Variable(name='"x"', type=OperandType.INT)], operators=[])
    assert classify_operand('"x"', overlapping) == OperandType.INT


def test_digit_literal_wins_over_string_variable():
    overlapping = TypeCatalog(variables=[Variable(name="123", type=OperandType.STRING)], operators=[])
    assert classify_operand("123", overlapping) == OperandType.INT
