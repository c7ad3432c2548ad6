"""Bracket matching, infix to postfix conversion and postfix evaluation."""

from __future__ import annotations

__all__ = [
    "is_balanced",
    "infix_to_postfix",
    "infix_to_postfix_full",
    "evaluate_postfix",
]

_CLOSING = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset(_CLOSING.values())

_SIMPLE_OPERATORS = frozenset("+-*/")
_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2}

_FULL_SYMBOLS = frozenset("+-*/^()")
_SENTINEL = "#"
# Precedence of a symbol when it arrives from the input.
_OUT_PRECEDENCE = {"+": 1, "-": 1, "*": 3, "/": 3, "^": 6, "(": 7, ")": 0}
# Precedence of a symbol while it sits on the stack.
_IN_PRECEDENCE = {"+": 2, "-": 2, "*": 4, "/": 4, "^": 5, "(": 0}


def is_balanced(expr: str) -> bool:
    """True if every (), [] and {} in expr is properly opened and closed."""
    pending: list[str] = []
    for ch in expr:
        if ch in _OPENING:
            pending.append(ch)
        elif ch in _CLOSING:
            if not pending or pending[-1] != _CLOSING[ch]:
                return False
            pending.pop()
    return not pending


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression over + - * / (no parentheses) to postfix."""
    operators: list[str] = []
    output: list[str] = []
    for ch in infix:
        if ch in "^()":
            raise ValueError(f"unsupported symbol {ch!r}; use infix_to_postfix_full")
        if ch not in _SIMPLE_OPERATORS:
            output.append(ch)
            continue
        while operators and _PRECEDENCE[ch] <= _PRECEDENCE[operators[-1]]:
            output.append(operators.pop())
        operators.append(ch)
    output.extend(reversed(operators))
    return "".join(output)


def infix_to_postfix_full(infix: str) -> str:
    """Convert infix to postfix with parentheses and right-associative ^."""
    stack: list[str] = [_SENTINEL]
    output: list[str] = []
    for ch in infix:
        if ch not in _FULL_SYMBOLS:
            output.append(ch)
            continue
        incoming = _OUT_PRECEDENCE[ch]
        while True:
            top = stack[-1]
            if ch == ")" and top == _SENTINEL:
                raise ValueError("unmatched ')'")
            stacked = _IN_PRECEDENCE.get(top, -1)
            if incoming > stacked:
                stack.append(ch)
                break
            if incoming == stacked:
                stack.pop()
                break
            output.append(stack.pop())
    while stack[-1] != _SENTINEL:
        symbol = stack.pop()
        if symbol == "(":
            raise ValueError("unmatched '('")
        output.append(symbol)
    return "".join(output)


def _truncating_divide(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def evaluate_postfix(postfix: str) -> int:
    """Evaluate a postfix expression of single-digit operands and + - * /.

    Division truncates toward zero.
    """
    values: list[int] = []
    for ch in postfix:
        if ch not in _SIMPLE_OPERATORS:
            if not ch.isdigit() or not ch.isascii():
                raise ValueError(f"invalid operand {ch!r}")
            values.append(int(ch))
            continue
        if len(values) < 2:
            raise ValueError(f"operator {ch!r} lacks operands")
        right = values.pop()
        left = values.pop()
        if ch == "+":
            values.append(left + right)
        elif ch == "-":
            values.append(left - right)
        elif ch == "*":
            values.append(left * right)
        else:
            if right == 0:
                raise ZeroDivisionError("division by zero in postfix expression")
            values.append(_truncating_divide(left, right))
    if len(values) != 1:
        raise ValueError("malformed postfix expression")
    return values[0]