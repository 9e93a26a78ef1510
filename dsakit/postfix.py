"""Conversion of infix expressions over single-letter operands to postfix."""

from __future__ import annotations

import argparse
import string
import sys
from collections.abc import Sequence

_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}


def precedence(operator: str) -> int:
    """Return the binding strength of ``operator``; 0 for anything else."""
    return _PRECEDENCE.get(operator, 0)


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression to postfix notation.

    Operands are single ASCII letters; operators are ``+ - * / ^`` and all of
    them associate to the left. Whitespace is ignored.
    """
    output: list[str] = []
    stack: list[str] = []
    for char in expression:
        if char.isspace():
            continue
        if char in string.ascii_letters:
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char in _PRECEDENCE:
            while stack and precedence(stack[-1]) >= precedence(char):
                output.append(stack.pop())
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unbalanced ')' in expression")
            stack.pop()
        else:
            raise ValueError(f"unexpected character {char!r} in expression")
    while stack:
        top = stack.pop()
        if top == "(":
            raise ValueError("unbalanced '(' in expression")
        output.append(top)
    return "".join(output)


def main(argv: Sequence[str] | None = None) -> int:
    """Convert an infix expression given as an argument or on standard input."""
    parser = argparse.ArgumentParser(
        prog="dsakit-postfix",
        description="Convert an infix expression to postfix notation.",
    )
    parser.add_argument(
        "expression",
        nargs="?",
        help="infix expression; read from standard input when omitted",
    )
    args = parser.parse_args(argv)
    expression = args.expression if args.expression is not None else sys.stdin.read()
    try:
        result = infix_to_postfix(expression)
    except ValueError as exc:
        parser.error(str(exc))
    print(f"Postfix expression is {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())