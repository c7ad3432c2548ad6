import pytest

from dsakit.expressions import (
    evaluate_postfix,
    infix_to_postfix,
    infix_to_postfix_full,
    is_balanced,
)


@pytest.mark.parametrize(
    "expr, expected",
    [
        ("((a+b)*(c-d))", True),
        ("{([a+b]*[c-d])/e}}", False),
        ("{([a+b]*[c-d])/e}", True),
        ("", True),
        ("(]", False),
        ("([)]", False),
        ("(", False),
        (")", False),
    ],
)
def test_is_balanced(expr, expected):
    assert is_balanced(expr) is expected


def test_simple_conversion():
    assert infix_to_postfix("a+b*c") == "abc*+"


def test_full_conversion_with_parentheses_and_power():
    assert infix_to_postfix_full("((a+b)*c)-d^e^f") == "ab+c*def^^-"


def test_evaluate_worked_example():
    assert evaluate_postfix("234*+82/-") == 10


@pytest.mark.parametrize("infix", ["a+b*c", "a*b+c", "a-b-c", "a/b*c-d+e", "x"])
def test_both_converters_agree_without_parentheses(infix):
    assert infix_to_postfix(infix) == infix_to_postfix_full(infix)


def test_conversion_keeps_operands_in_order():
    postfix = infix_to_postfix_full("(p+q)*(r-s)/t")
    operands = [ch for ch in postfix if ch.isalpha()]
    assert operands == ["p", "q", "r", "s", "t"]
    assert "(" not in postfix and ")" not in postfix


def test_redundant_parentheses_do_not_change_result():
    assert infix_to_postfix_full("((a))") == infix_to_postfix_full("a")


def test_converted_expression_evaluates_like_handwritten_postfix():
    assert evaluate_postfix(infix_to_postfix("2+3*4")) == evaluate_postfix("234*+")
    assert evaluate_postfix(infix_to_postfix_full("(2+3)*4")) == evaluate_postfix(
        "23+4*"
    )


def test_division_truncates_toward_zero():
    assert evaluate_postfix("07-2/") == evaluate_postfix("03-")


def test_simple_conversion_rejects_power_and_parentheses():
    with pytest.raises(ValueError):
        infix_to_postfix("a^b")
    with pytest.raises(ValueError):
        infix_to_postfix("(a+b)")


def test_full_conversion_rejects_unmatched_parentheses():
    with pytest.raises(ValueError):
        infix_to_postfix_full("(a+b")
    with pytest.raises(ValueError):
        infix_to_postfix_full("a+b)")


@pytest.mark.parametrize("postfix", ["2+", "22", "", "2a+"])
def test_malformed_postfix(postfix):
    with pytest.raises(ValueError):
        evaluate_postfix(postfix)


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        evaluate_postfix("20/")