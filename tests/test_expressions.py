import random
import string

import pytest

from dsakit.expressions import (
    ExpressionError,
    evaluate_postfix,
    evaluate_prefix,
    infix_to_postfix,
    infix_to_prefix,
    is_balanced,
    is_operand,
    postfix_to_infix,
    precedence,
)

_TO_DIGITS = str.maketrans(string.ascii_lowercase, (string.digits * 3)[:26])


def _random_expression(rng, depth, operators):
    """Return (fully parenthesised infix, prefix, postfix) for a random tree."""
    if depth == 0 or rng.random() < 0.3:
        letter = rng.choice(string.ascii_lowercase)
        return letter, letter, letter
    op = rng.choice(operators)
    left = _random_expression(rng, depth - 1, operators)
    right = _random_expression(rng, depth - 1, operators)
    infix = f"({left[0]}{op}{right[0]})"
    return infix, op + left[1] + right[1], left[2] + right[2] + op


@pytest.mark.parametrize("seed", range(20))
def test_parenthesised_infix_to_postfix(seed):
    infix, _, postfix = _random_expression(random.Random(seed), 4, "+-*/^")
    assert infix_to_postfix(infix) == postfix


@pytest.mark.parametrize("seed", range(20))
def test_parenthesised_infix_to_prefix(seed):
    infix, prefix, _ = _random_expression(random.Random(seed), 4, "+-*/^")
    assert infix_to_prefix(infix) == prefix


@pytest.mark.parametrize("seed", range(20))
def test_postfix_to_infix_round_trip(seed):
    infix, _, postfix = _random_expression(random.Random(seed), 4, "+-*/")
    assert postfix_to_infix(postfix) == infix
    assert infix_to_postfix(postfix_to_infix(postfix)) == postfix


@pytest.mark.parametrize("seed", range(20))
def test_prefix_and_postfix_evaluate_alike(seed):
    infix, _, _ = _random_expression(random.Random(seed), 4, "+-*")
    prefix = infix_to_prefix(infix).translate(_TO_DIGITS)
    postfix = infix_to_postfix(infix).translate(_TO_DIGITS)
    assert evaluate_prefix(prefix) == evaluate_postfix(postfix)


def test_equal_precedence_groups_from_right():
    assert infix_to_postfix("a-b+c") == "abc+-"


def test_prefix_respects_precedence():
    assert infix_to_prefix("a+b*c") == "+a*bc"


def test_operands_keep_their_order():
    infix = "a*b+c-d/e"
    letters = "".join(ch for ch in infix if ch.isalpha())
    for converted in (infix_to_postfix(infix), infix_to_prefix(infix)):
        assert "".join(ch for ch in converted if ch.isalpha()) == letters
        assert sorted(converted) == sorted(infix)


def test_division_truncates_toward_zero():
    assert evaluate_postfix("07-3/") == -2


@pytest.mark.parametrize("digit", list("0123456789"))
def test_single_operand_evaluates_to_itself(digit):
    assert evaluate_postfix(digit) == int(digit)
    assert evaluate_prefix(digit) == int(digit)


@pytest.mark.parametrize("op", list("+-*/"))
def test_prefix_operand_order_matches_postfix(op):
    assert evaluate_prefix(op + "94") == evaluate_postfix("94" + op)


def test_sum_of_subexpressions():
    left, right = "23*", "84-"
    assert evaluate_postfix(left + right + "+") == (
        evaluate_postfix(left) + evaluate_postfix(right)
    )


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        evaluate_postfix("50/")
    with pytest.raises(ZeroDivisionError):
        evaluate_prefix("/50")


@pytest.mark.parametrize("expression", ["", "1+", "+"])
def test_postfix_evaluation_underflow(expression):
    with pytest.raises(ExpressionError):
        evaluate_postfix(expression)


@pytest.mark.parametrize("expression", ["", "+1", "*"])
def test_prefix_evaluation_underflow(expression):
    with pytest.raises(ExpressionError):
        evaluate_prefix(expression)


@pytest.mark.parametrize("expression", ["", "a+", "+"])
def test_postfix_to_infix_underflow(expression):
    with pytest.raises(ExpressionError):
        postfix_to_infix(expression)


def test_unmatched_closing_parenthesis_in_postfix_conversion():
    with pytest.raises(ExpressionError):
        infix_to_postfix("a+b)")


def test_unmatched_opening_parenthesis_in_prefix_conversion():
    with pytest.raises(ExpressionError):
        infix_to_prefix("(a+b")


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("{[()]}", True),
        ("()[]{}", True),
        ("", True),
        ("a+(b*c)", True),
        ("([)]", False),
        ("(", False),
        (")", False),
        ("{[}", False),
    ],
)
def test_is_balanced(expression, expected):
    assert is_balanced(expression) is expected


@pytest.mark.parametrize("ch", ["a", "z", "A", "Z", "m"])
def test_letters_are_operands(ch):
    assert is_operand(ch) is True


@pytest.mark.parametrize("ch", ["0", "9", "+", "(", "#", " ", "é"])
def test_other_characters_are_not_operands(ch):
    assert is_operand(ch) is False


def test_precedence_ordering():
    assert precedence("^") > precedence("*")
    assert precedence("*") == precedence("/") == precedence("%")
    assert precedence("/") > precedence("+")
    assert precedence("+") == precedence("-")
    assert precedence("+") > precedence("x") > precedence("(")
    assert precedence("(") == precedence("#")