"""Evaluation of space-separated postfix arithmetic expressions."""

from __future__ import annotations

import re
import sys

from dsalgo.stack import Stack, StackOverflowError, StackUnderflowError

MAX = 100

_OPERATORS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": lambda a, b: a / b,
}

_NUMBER_PREFIX = re.compile(
    r"\s*([+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))",
    re.IGNORECASE,
)


class PostfixError(ValueError):
    """Raised when a postfix expression cannot be evaluated."""


def tokenize(expression: str) -> list[str]:
    """Split an expression on spaces, dropping empty pieces."""
    return [token for token in expression.split(" ") if token]


def _to_number(token: str) -> float:
    """Read the leading number of ``token``; 0.0 if there is none."""
    match = _NUMBER_PREFIX.match(token)
    return float(match.group(1)) if match else 0.0


def evaluate_postfix(expression: str) -> float:
    """Evaluate a postfix expression and return its value."""
    stack: Stack[float] = Stack(MAX)
    try:
        for token in tokenize(expression):
            operation = _OPERATORS.get(token)
            if operation is None:
                stack.push(_to_number(token))
                continue
            right = stack.pop()
            left = stack.pop()
            if token == "/" and right == 0:
                raise PostfixError("Division by zero")
            stack.push(operation(left, right))
    except StackUnderflowError as exc:
        raise PostfixError("Stack Underflow (Insufficient operands)") from exc
    except StackOverflowError as exc:
        raise PostfixError("Stack Overflow") from exc
    if len(stack) != 1:
        raise PostfixError("Invalid postfix expression")
    return stack.pop()


def main(argv: list[str] | None = None) -> int:
    """Evaluate an expression from the arguments or from standard input."""
    if argv is None:
        argv = sys.argv[1:]
    if argv:
        expression = " ".join(argv)
    else:
        try:
            expression = input("Enter the postfix expression: ")[: MAX - 1]
        except EOFError:
            expression = ""
    print("Tokens: " + "".join(f"{token} " for token in tokenize(expression)))
    try:
        result = evaluate_postfix(expression)
    except PostfixError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"The result of the expression is: {result:.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())