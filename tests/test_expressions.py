import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.expressions import (
    UnbalancedError,
    check_parentheses,
    evaluate_postfix,
    is_balanced,
    is_valid_brackets,
)


@pytest.mark.parametrize("text", ["", "()", "(())", "(a)(b)", "()()"])
def test_balanced(text):
    assert is_balanced(text) is True


def test_unmatched_close_reports_its_index():
    with pytest.raises(UnbalancedError) as info:
        check_parentheses(")(")
    assert info.value.index == 0


def test_unmatched_close_in_middle():
    with pytest.raises(UnbalancedError) as info:
        check_parentheses("())(")
    assert info.value.index == 2


def test_unclosed_open_reports_length():
    text = "(()"
    with pytest.raises(UnbalancedError) as info:
        check_parentheses(text)
    assert info.value.index == len(text)
    assert is_balanced(text) is False


@given(st.integers(min_value=0, max_value=50))
def test_nested_parentheses_balance(depth):
    assert is_balanced("(" * depth + ")" * depth)
    assert is_balanced("(" * (depth + 1) + ")" * depth) is False


@pytest.mark.parametrize("text", ["()", "()[]{}", "{[]}", "([{}])", ""])
def test_valid_brackets(text):
    assert is_valid_brackets(text) is True


@pytest.mark.parametrize("text", ["(", "([)]", "(]", "))", "((", "{[}]"])
def test_invalid_brackets(text):
    assert is_valid_brackets(text) is False


def test_evaluate_postfix_mixed_operators():
    assert evaluate_postfix("231*+9-") == -4


def test_evaluate_postfix_truncates_division_toward_zero():
    assert evaluate_postfix("07-2/") == -3


@given(st.integers(0, 9), st.integers(0, 9))
def test_evaluate_postfix_matches_arithmetic(left, right):
    assert evaluate_postfix(f"{left}{right}+") == left + right
    assert evaluate_postfix(f"{left}{right}-") == left - right
    assert evaluate_postfix(f"{left}{right}*") == left * right


@given(st.integers(0, 9))
def test_evaluate_single_digit(digit):
    assert evaluate_postfix(str(digit)) == digit


def test_evaluate_postfix_ignores_whitespace():
    assert evaluate_postfix("2 3 1 * + 9 -") == evaluate_postfix("231*+9-")


@pytest.mark.parametrize("expression", ["", "+", "1+", "12", "1a+"])
def test_evaluate_postfix_malformed(expression):
    with pytest.raises(ValueError):
        evaluate_postfix(expression)


def test_evaluate_postfix_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        evaluate_postfix("10/")