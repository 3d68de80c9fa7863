"""Conversion and evaluation of single-character arithmetic expressions."""

from __future__ import annotations

from collections.abc import Iterable

_ARITHMETIC = frozenset("+-*/")
_MIRROR = str.maketrans("()", ")(")
_PAIRS = {")": "(", "}": "{", "]": "["}
_OPENERS = frozenset(_PAIRS.values())

_PRECEDENCE = {"^": 3, "/": 2, "*": 2, "%": 2, "+": 1, "-": 1, "(": -1, "#": -1}
_PREFIX_PRECEDENCE = {op: _PRECEDENCE[op] for op in "+-*/^"}


class ExpressionError(ValueError):
    """Raised when an expression is malformed."""


def is_operand(ch: str) -> bool:
    """Return True if ``ch`` is an ASCII letter, i.e. a variable name."""
    return "A" <= ch <= "Z" or "a" <= ch <= "z"


def precedence(op: str) -> int:
    """Return the binding strength of ``op`` during infix conversion.

    ``(`` and the bottom marker ``#`` rank lowest (-1); characters that
    are not operators rank 0.
    """
    return _PRECEDENCE.get(op, 0)


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression of single-letter operands to postfix.

    An incoming operator that binds less tightly than the operator on top
    of the stack releases just that one operator; otherwise it is stacked.
    Operators of equal strength are therefore grouped from the right.
    """
    stack = ["#"]
    output: list[str] = []
    for ch in infix:
        if is_operand(ch):
            output.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            while (top := stack.pop()) != "(":
                if top == "#":
                    raise ExpressionError("unmatched ')'")
                output.append(top)
        else:
            if precedence(ch) < precedence(stack[-1]):
                output.append(stack.pop())
            stack.append(ch)
    output.extend(reversed(stack[1:]))
    return "".join(output)


def infix_to_prefix(infix: str) -> str:
    """Convert an infix expression of single-letter operands to prefix."""
    stack: list[str] = []
    output: list[str] = []
    for ch in infix[::-1].translate(_MIRROR):
        if is_operand(ch):
            output.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ExpressionError("unmatched '('")
            stack.pop()
        else:
            rank = _PREFIX_PRECEDENCE.get(ch, 0)
            while stack and rank <= _PREFIX_PRECEDENCE.get(stack[-1], 0):
                output.append(stack.pop())
            stack.append(ch)
    output.extend(reversed(stack))
    return "".join(reversed(output))


def postfix_to_infix(expression: str) -> str:
    """Convert a postfix expression to a fully parenthesised infix one."""
    stack: list[str] = []
    for ch in expression:
        if is_operand(ch):
            stack.append(ch)
        else:
            right = _pop(stack)
            left = _pop(stack)
            stack.append(f"({left}{ch}{right})")
    return _pop(stack)


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands.

    Every character other than ``+ - * /`` is an operand whose value is its
    offset from ``'0'``. Division truncates toward zero.
    """
    return _evaluate(expression, left_popped_first=False)


def evaluate_prefix(expression: str) -> int:
    """Evaluate a prefix expression of single-digit operands.

    Operands are read as in :func:`evaluate_postfix`; division truncates
    toward zero.
    """
    return _evaluate(reversed(expression), left_popped_first=True)


def is_balanced(expression: str) -> bool:
    """Return True if every bracket in ``expression`` is properly matched."""
    stack: list[str] = []
    for ch in expression:
        if ch in _OPENERS:
            stack.append(ch)
        elif ch in _PAIRS:
            if not stack or stack.pop() != _PAIRS[ch]:
                return False
    return not stack


def _evaluate(chars: Iterable[str], *, left_popped_first: bool) -> int:
    stack: list[int] = []
    for ch in chars:
        if ch in _ARITHMETIC:
            first = _pop(stack)
            second = _pop(stack)
            left, right = (first, second) if left_popped_first else (second, first)
            stack.append(_apply(ch, left, right))
        else:
            stack.append(ord(ch) - ord("0"))
    return _pop(stack)


def _pop(stack: list):
    if not stack:
        raise ExpressionError("Stack underflow: too few operands")
    return stack.pop()


def _apply(op: str, left: int, right: int) -> int:
    if op == "+":
        return left + right
    if op == "-":
        return left - right
    if op == "*":
        return left * right
    if right == 0:
        raise ZeroDivisionError("division by zero in expression")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient