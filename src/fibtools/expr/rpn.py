"""RPN recurrence formulas compiled into recurrence functions.

A formula is a whitespace-separated postfix expression over the window:

    "a b +"        next = window[0] + window[1]      (Fibonacci for k=2)
    "a b c + +"    tribonacci
    "b 2 ** a -"   next = window[1]**2 - window[0]

Letters name window entries, oldest first ('a' is the oldest term).
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from fibtools.engine.recurrence import RecurrenceFunction
from fibtools.errors import MalformedExpression


BINARY_OPS = ("+", "-", "*", "**")
MAX_EXPONENT = 2**32 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")


def tokenize(expression: str) -> Tuple[str, ...]:
    return tuple(expression.split())


def is_window_letter(token: str) -> bool:
    return len(token) == 1 and "a" <= token <= "z"


def letter_index(token: str) -> int:
    return ord(token) - ord("a")


def _check_token(token: str) -> None:
    if token in BINARY_OPS or is_window_letter(token):
        return
    if _INT_RE.fullmatch(token) is None:
        raise MalformedExpression(f"invalid token {token!r}")


def _check_stack_depth(tokens: Tuple[str, ...]) -> None:
    """Every token has fixed arity, so underflow is decidable before evaluation."""
    depth = 0
    for pos, tok in enumerate(tokens):
        if tok in BINARY_OPS:
            if depth < 2:
                raise MalformedExpression(
                    f"stack underflow at token {pos} ({tok!r}): needs 2 operands, have {depth}"
                )
            depth -= 1
        else:
            depth += 1
    if depth != 1:
        raise MalformedExpression(f"expression leaves {depth} values on the stack, expected 1")


def _apply(op: str, a: int, b: int) -> int:
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    # "**": a is the base, b the exponent (top of stack)
    if b < 0 or b > MAX_EXPONENT:
        raise MalformedExpression(f"exponent must be a non-negative machine integer, got {b}")
    return a**b


@dataclass(frozen=True)
class CompiledExpression(RecurrenceFunction):
    """A tokenized RPN formula, reusable across any number of windows."""

    source: str
    tokens: Tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "tokens", tuple(self.tokens))
        if not self.tokens:
            raise MalformedExpression("empty expression")
        for tok in self.tokens:
            _check_token(tok)
        _check_stack_depth(self.tokens)

    @property
    def max_letter(self) -> Optional[str]:
        letters = [t for t in self.tokens if is_window_letter(t)]
        return max(letters) if letters else None

    def required_order(self) -> int:
        """Smallest window length covering every letter in the formula."""
        top = self.max_letter
        return 0 if top is None else letter_index(top) + 1

    def evaluate(self, window: Tuple[int, ...]) -> int:
        k = len(window)
        stack: List[int] = []
        for tok in self.tokens:
            if tok in BINARY_OPS:
                b = stack.pop()
                a = stack.pop()
                stack.append(_apply(tok, a, b))
            elif is_window_letter(tok):
                idx = letter_index(tok)
                if idx >= k:
                    last = chr(ord("a") + k - 1)
                    raise MalformedExpression(
                        f"letter {tok!r} is outside the window a..{last} (k={k})"
                    )
                stack.append(window[idx])
            else:
                stack.append(int(tok))
        return stack[0]


def compile_expression(expression: str, order: Optional[int] = None) -> CompiledExpression:
    """
    Tokenize and check an RPN formula once, returning a reusable function.

    Invalid tokens and stack underflow are reported here. Window letters are
    range-checked on evaluation, or here as well when *order* is given.
    """
    compiled = CompiledExpression(source=expression, tokens=tokenize(expression))
    if order is not None and compiled.required_order() > order:
        raise MalformedExpression(
            f"letter {compiled.max_letter!r} is outside the window for k={order}"
        )
    return compiled


compile = compile_expression
