import math

import pytest

from infixcalc.expression import (
    Action,
    Token,
    compare_operators,
    evaluate,
    format_result,
    to_postfix,
)


def op(symbol):
    return Token(operator=symbol)


@pytest.mark.parametrize(
    "stacked, incoming, expected",
    [
        ("+", ")", Action.CLOSE),
        ("+", "-", Action.POP),
        ("+", "+", Action.POP),
        ("+", "*", Action.PUSH),
        ("+", "(", Action.PUSH),
        ("-", ")", Action.CLOSE),
        ("-", "+", Action.POP),
        ("-", "/", Action.PUSH),
        ("*", "(", Action.PUSH),
        ("*", ")", Action.CLOSE),
        ("*", "+", Action.POP),
        ("*", "/", Action.POP),
        ("/", "(", Action.PUSH),
        ("/", ")", Action.CLOSE),
        ("/", "*", Action.POP),
        ("(", "+", Action.PUSH),
        ("(", ")", Action.PUSH),
        (")", "+", Action.INVALID),
        ("=", "*", Action.INVALID),
    ],
)
def test_compare_operators(stacked, incoming, expected):
    assert compare_operators(stacked, incoming) is expected


def test_token_kinds():
    assert Token(4.0).is_operator is False
    assert op("+").is_operator is True


def test_postfix_simple_sum():
    assert to_postfix("1+2") == [Token(1.0), Token(2.0), op("+")]


def test_postfix_precedence():
    assert to_postfix("1+2*3") == [Token(1.0), Token(2.0), Token(3.0), op("*"), op("+")]


def test_postfix_parentheses():
    assert to_postfix("(1+2)*3") == [Token(1.0), Token(2.0), op("+"), Token(3.0), op("*")]


def test_postfix_multi_digit_number():
    assert to_postfix("12") == [Token(12.0)]


def test_postfix_decimal_number():
    tokens = to_postfix("3.5")
    assert len(tokens) == 1
    assert tokens[0].value == pytest.approx(3.5)


def test_postfix_empty():
    assert to_postfix("") == []


def test_operator_after_drained_stack_is_pushed_without_comparison():
    assert to_postfix("1+2-3+4") == [
        Token(1.0),
        Token(2.0),
        op("+"),
        Token(3.0),
        Token(4.0),
        op("+"),
        op("-"),
    ]


def test_decimal_point_without_digit_raises():
    with pytest.raises(ValueError):
        to_postfix("1.")
    with pytest.raises(ValueError):
        to_postfix("1..2")


def test_unmatched_closing_parenthesis_raises():
    with pytest.raises(ValueError):
        to_postfix("1+2)")


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("7*6", 7 * 6),
        ("8/2", 8 / 2),
        ("9-4", 9 - 4),
        ("10-2-3", 10 - 2 - 3),
        ("2+3*4", 2 + 3 * 4),
        ("(2+3)*4", (2 + 3) * 4),
        ("100/8-3", 100 / 8 - 3),
        ("42", 42),
    ],
)
def test_evaluate_expressions(expression, expected):
    assert evaluate(to_postfix(expression)) == pytest.approx(expected)


def test_division_by_zero_gives_infinity():
    assert evaluate(to_postfix("1/0")) == math.inf


def test_zero_by_zero_is_nan():
    result = evaluate(to_postfix("0/0"))
    assert repr(result) == "nan"


def test_unknown_operator_keeps_left_operand():
    assert evaluate([Token(5.0), Token(9.0), op("(")]) == 5.0


def test_evaluate_empty_raises():
    with pytest.raises(ValueError):
        evaluate([])


def test_evaluate_without_operator_raises():
    with pytest.raises(ValueError):
        evaluate([Token(1.0), Token(2.0)])


def test_evaluate_operator_missing_operands_raises():
    with pytest.raises(ValueError):
        evaluate([Token(1.0), op("+"), Token(2.0)])


def test_evaluate_does_not_modify_input():
    tokens = to_postfix("2*3")
    copy = list(tokens)
    evaluate(tokens)
    assert tokens == copy


@pytest.mark.parametrize(
    "value, expected",
    [
        (2.5, "2.5"),
        (100.0, "100"),
        (0.25, "0.25"),
        (-3.0, "-3"),
        (math.inf, "inf"),
    ],
)
def test_format_result(value, expected):
    assert format_result(value) == expected


def test_format_result_six_decimals():
    assert format_result(1 / 3) == "0.333333"


@pytest.mark.parametrize("number", [0, 1, 7, 10, 250, 1000, -40])
def test_format_integers_round_trip(number):
    assert format_result(float(number)) == str(number)


def test_format_result_has_no_trailing_zero_after_point():
    for value in (0.5, 1.75, 12.125, 3.1):
        text = format_result(value)
        assert "." in text
        assert not text.endswith("0")
        assert float(text) == pytest.approx(value)