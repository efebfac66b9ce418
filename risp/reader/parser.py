"""
  risp Reader: tokenizer and tree builder

- Every `(` and `)` is padded with spaces, then the text is split on
  whitespace. Tokens never contain parentheses.
- No comments, no strings, no quoting.
- Atoms:
    - true / false -> Boolean
    - numeric literal -> Number (float)
    - anything else -> Symbol
- Nested forms are read by span: after reading a child, the cursor moves
  forward by exactly token_count(child) tokens.
"""

from __future__ import annotations

import re
from typing import Iterator, Sequence

from risp import SExpression
from risp.errors import RispLexError
from risp.types.expression import Number, List, TRUE, FALSE
from risp.types.symbol import Symbol


NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def tokenize(source: str) -> list[str]:
    """Split program text into tokens."""
    return source.replace("(", " ( ").replace(")", " ) ").split()


def token_count(expr: SExpression) -> int:
    """Number of tokens `expr` occupies in its source, parentheses included."""
    if isinstance(expr, List):
        return 2 + sum(token_count(x) for x in expr.items)
    return 1


def parse_atom(token: str) -> SExpression:
    if token == "true":
        return TRUE
    if token == "false":
        return FALSE
    if NUMBER_RE.fullmatch(token):
        return Number(float(token))
    return Symbol(token)


def read_from_tokens(tokens: Sequence[str], start: int = 0) -> SExpression:
    """Read one complete form beginning at tokens[start]."""
    if start >= len(tokens):
        raise RispLexError("unexpected end of input", tokens)
    token = tokens[start]
    if token == "(":
        items = []
        pos = start + 1
        while True:
            if pos >= len(tokens):
                raise RispLexError("unbalanced `(`: missing `)`", tokens)
            if tokens[pos] == ")":
                break
            child = read_from_tokens(tokens, pos)
            items.append(child)
            pos += token_count(child)
        return List(items)
    if token == ")":
        raise RispLexError("unexpected `)`", tokens)
    return parse_atom(token)


def _read_forms(tokens: list[str]) -> Iterator[SExpression]:
    pos = 0
    while pos < len(tokens):
        expr = read_from_tokens(tokens, pos)
        yield expr
        pos += token_count(expr)


def parse(source: str) -> SExpression:
    """Read exactly one form from `source`."""
    tokens = tokenize(source)
    if not tokens:
        raise RispLexError("empty input", tokens)
    expr = read_from_tokens(tokens)
    span = token_count(expr)
    if span < len(tokens):
        if tokens[span] == ")":
            raise RispLexError("unexpected `)`", tokens)
        raise RispLexError("unexpected tokens after form", tokens)
    return expr


def parse_all(source: str) -> Iterator[SExpression]:
    """Lazily read every top-level form in `source`."""
    return _read_forms(tokenize(source))
