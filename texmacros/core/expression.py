"""Integer expression evaluator behind \\defcounter and \\ifnumcomp.

Pipeline
--------
1. Discard whitespace.
2. Tokenize into numbers, ``( ) + - * /``.
3. Fold unary signs: a run of ``+``/``-`` at the start of the expression,
   after ``(`` or after another operator collapses to nothing (even number
   of ``-``) or to a single unary minus (odd).  ``--3`` → ``3``,
   ``-+-3`` → ``3``, ``2*-3`` → ``2 * neg(3)``.
4. Shunting-yard into postfix.
5. Evaluate the postfix queue on a number stack.

Division
--------
``division="true"`` (default) is plain true division, so ``7/2`` is 3.5.
``division="round"`` rounds to the nearest integer with halves away from
zero, which is what e-TeX's ``\\numexpr`` does.
"""
from __future__ import annotations

import math
import operator
import re
from fractions import Fraction
from typing import Callable, Union

from texmacros.core.constants import DEFAULT_DIVISION, DIVISION_ROUND, DIVISION_TRUE
from texmacros.core.errors import InvalidExpression, MismatchedParentheses

Number = Union[int, float]
PostfixToken = Union[Number, str]

UNARY_MINUS = "m"

# operator → (precedence, associativity)
_OPS: dict[str, tuple[int, str]] = {
    "+":         (1, "left"),
    "-":         (1, "left"),
    "*":         (2, "left"),
    "/":         (2, "left"),
    UNARY_MINUS: (3, "right"),
}

_TOKEN_RE = re.compile(r"\d+\.\d*|\.\d+|\d+|[()+\-*/]|.", re.ASCII)
_WS_RE = re.compile(r"\s+")


# ---------------------------------------------------------------------------
# Tokenizer
# ---------------------------------------------------------------------------

def _to_number(text: str) -> Number | None:
    # only ASCII digits; "²" and friends pass isdigit() but not int()
    if not text.isascii():
        return None
    try:
        number = int(text) if text.isdigit() else float(text)
    except ValueError:
        return None
    if isinstance(number, float) and not math.isfinite(number):
        return None
    return number


def tokenize(expr: str) -> list[PostfixToken]:
    """Split ``expr`` into numbers, parentheses and operators.

    Unary sign runs are already folded in the result; a leftover unary minus
    appears as ``UNARY_MINUS``.
    """
    raw = _TOKEN_RE.findall(_WS_RE.sub("", expr))
    tokens: list[PostfixToken] = []
    i = 0
    while i < len(raw):
        tok = raw[i]
        prev = tokens[-1] if tokens else None
        at_operand_position = prev is None or prev == "(" or prev in _OPS
        if tok in ("+", "-") and at_operand_position:
            minus_count = 0
            while i < len(raw) and raw[i] in ("+", "-"):
                if raw[i] == "-":
                    minus_count += 1
                i += 1
            if minus_count % 2:
                tokens.append(UNARY_MINUS)
            continue
        if tok in _OPS or tok in ("(", ")"):
            tokens.append(tok)
        else:
            number = _to_number(tok)
            if number is None:
                raise InvalidExpression(f"Invalid token {tok!r} in {expr!r}")
            tokens.append(number)
        i += 1
    return tokens


# ---------------------------------------------------------------------------
# Shunting-yard
# ---------------------------------------------------------------------------

def _should_pop(incoming: str, top: str | None) -> bool:
    if top is None or top not in _OPS:
        return False
    in_prec, in_assoc = _OPS[incoming]
    top_prec, _ = _OPS[top]
    return top_prec > in_prec or (top_prec == in_prec and in_assoc == "left")


def to_postfix(expr: str) -> list[PostfixToken]:
    """Convert an infix expression to a postfix token list."""
    output: list[PostfixToken] = []
    stack: list[str] = []

    for tok in tokenize(expr):
        if isinstance(tok, (int, float)):
            output.append(tok)
        elif tok in _OPS:
            while _should_pop(tok, stack[-1] if stack else None):
                output.append(stack.pop())
            stack.append(tok)
        elif tok == "(":
            stack.append(tok)
        else:  # ")"
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise MismatchedParentheses()
            stack.pop()

    while stack:
        top = stack.pop()
        if top == "(":
            raise MismatchedParentheses()
        output.append(top)
    return output


# ---------------------------------------------------------------------------
# Postfix evaluation
# ---------------------------------------------------------------------------

def _divide_rounded(a: Number, b: Number) -> int:
    q = Fraction(a) / Fraction(b)
    magnitude = math.floor(abs(q) + Fraction(1, 2))
    return magnitude if q >= 0 else -magnitude


_BINARY: dict[str, Callable[[Number, Number], Number]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}

_DIVIDERS: dict[str, Callable[[Number, Number], Number]] = {
    DIVISION_TRUE:  operator.truediv,
    DIVISION_ROUND: _divide_rounded,
}


def evaluate_postfix(postfix: list[PostfixToken], division: str = DEFAULT_DIVISION) -> Number:
    """Evaluate a postfix token list produced by ``to_postfix``."""
    binary = dict(_BINARY, **{"/": _DIVIDERS[division]})
    stack: list[Number] = []

    for tok in postfix:
        if isinstance(tok, (int, float)):
            stack.append(tok)
        elif tok == UNARY_MINUS:
            if not stack:
                raise InvalidExpression("Missing operand for unary minus")
            stack.append(-stack.pop())
        else:
            if len(stack) < 2:
                raise InvalidExpression(f"Missing operand for {tok!r}")
            right = stack.pop()
            left = stack.pop()
            try:
                result = binary[tok](left, right)
            except ZeroDivisionError:
                raise InvalidExpression("Division by zero") from None
            except OverflowError:
                raise InvalidExpression("Result out of range") from None
            if isinstance(result, float) and not math.isfinite(result):
                raise InvalidExpression("Result out of range")
            stack.append(result)

    if len(stack) != 1:
        raise InvalidExpression()
    return stack[0]


def evaluate(expr: str, division: str = DEFAULT_DIVISION) -> Number:
    """Evaluate an arithmetic expression string.

    >>> evaluate("2+3*4")
    14
    >>> evaluate("(2+3)*4")
    20
    """
    return evaluate_postfix(to_postfix(expr), division)
