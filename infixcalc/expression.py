"""Infix expression parsing, postfix evaluation and result formatting."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable

DIGITS = frozenset("0123456789")


class Action(Enum):
    """What to do with an incoming symbol, given the symbol on top of the stack."""

    PUSH = 0
    POP = 1
    CLOSE = 2
    INVALID = 3


@dataclass(frozen=True)
class Token:
    """One item of a postfix sequence: a number or an operator symbol."""

    value: float = 0.0
    operator: str | None = None

    @property
    def is_operator(self) -> bool:
        return self.operator is not None


def compare_operators(stacked: str, incoming: str) -> Action:
    """Decide how ``incoming`` interacts with ``stacked``, the top of the stack."""
    if stacked in "+-" and len(stacked) == 1:
        if incoming == ")":
            return Action.CLOSE
        if incoming in ("+", "-"):
            return Action.POP
        return Action.PUSH
    if stacked in ("*", "/"):
        if incoming == "(":
            return Action.PUSH
        if incoming == ")":
            return Action.CLOSE
        return Action.POP
    if stacked == "(":
        return Action.PUSH
    return Action.INVALID


def _read_number(expression: str, start: int) -> tuple[float, int]:
    """Read a decimal number at ``start``; return its value and the index after it."""
    whole: list[int] = []
    fraction: list[int] = []
    in_fraction = False
    index = start
    while index < len(expression) and (
        expression[index] in DIGITS or expression[index] == "."
    ):
        char = expression[index]
        if char == ".":
            in_fraction = True
            index += 1
            if index >= len(expression) or expression[index] not in DIGITS:
                raise ValueError(
                    f"decimal point at position {index - 1} is not followed by a digit"
                )
            char = expression[index]
        (fraction if in_fraction else whole).append(ord(char) - ord("0"))
        index += 1

    value = 0.0
    for position, digit in enumerate(whole):
        value += 10.0 ** (len(whole) - position - 1) * digit
    for position, digit in enumerate(fraction):
        value += 0.1 ** (position + 1) * digit
    return value, index


def to_postfix(expression: str) -> list[Token]:
    """Convert an infix expression to a postfix token list.

    Any character that is not a digit or part of a number is handled as an
    operator symbol.  After the operator stack has been emptied by a run of
    pops, the next operator is pushed without being compared with the top.
    """
    output: list[Token] = []
    stack: list[str] = []
    compare = False
    index = 0
    while index < len(expression):
        char = expression[index]
        if char in DIGITS:
            value, index = _read_number(expression, index)
            output.append(Token(value))
            continue

        if not compare:
            compare = True
            stack.append(char)
        else:
            action = compare_operators(stack[-1], char)
            if action is Action.PUSH:
                stack.append(char)
            elif action is Action.POP:
                while compare_operators(stack[-1], char) is Action.POP:
                    output.append(Token(operator=stack.pop()))
                    if not stack:
                        compare = False
                        break
                stack.append(char)
            elif action is Action.CLOSE:
                while True:
                    if not stack:
                        raise ValueError(
                            f"closing parenthesis at position {index} has no match"
                        )
                    top = stack.pop()
                    if top == "(":
                        break
                    output.append(Token(operator=top))
                if not stack:
                    compare = False
            # Action.INVALID: the incoming symbol is dropped.
        index += 1

    output.extend(Token(operator=symbol) for symbol in reversed(stack))
    return output


def _divide(left: float, right: float) -> float:
    try:
        return left / right
    except ZeroDivisionError:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)


_OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "+": lambda left, right: left + right,
    "-": lambda left, right: left - right,
    "*": lambda left, right: left * right,
    "/": _divide,
}


def evaluate(postfix: Iterable[Token]) -> float:
    """Evaluate a postfix token sequence.

    Operators without a known meaning consume their two operands and leave
    the earlier one in place.  Division by zero yields an infinity or NaN.
    """
    items = list(postfix)
    if not items:
        raise ValueError("empty expression")
    while len(items) > 1:
        position = next(
            (i for i, token in enumerate(items) if token.is_operator), None
        )
        if position is None:
            raise ValueError("operands left without an operator")
        if position < 2:
            raise ValueError(
                f"operator {items[position].operator!r} lacks two operands"
            )
        operation = _OPERATIONS.get(items[position].operator or "")
        if operation is not None:
            left, right = items[position - 2], items[position - 1]
            items[position - 2] = Token(operation(left.value, right.value))
        del items[position - 1 : position + 1]
    return items[0].value


def format_result(value: float) -> str:
    """Format with six decimals, then drop trailing zeros and a bare point."""
    text = f"{value:f}"
    if "." in text:
        text = text.rstrip("0")
        if text.endswith("."):
            text = text[:-1]
    return text