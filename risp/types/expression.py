"""Expression model for risp.

Every value is one of a closed set of variants: Boolean, Symbol, Number,
List and Lambda. Equality and ordering between two expressions are
structural: variants are ranked in that order, and two values of the same
variant compare by their contents. This is unrelated to numeric magnitude
except when both sides are Numbers.

``str()`` of an expression is its display text, which intentionally differs
from the input syntax (lists are comma separated).
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Iterable, Iterator, Optional


def _sign(a, b) -> Optional[int]:
    if a < b:
        return -1
    if a > b:
        return 1
    if a == b:
        return 0
    return None  # unordered, e.g. NaN


def compare(a: Expression, b: Expression) -> Optional[int]:
    """Structural three-way comparison.

    Returns -1, 0 or 1, or None when the two values are unordered (a NaN is
    reached before any decisive difference).
    """
    if a.rank != b.rank:
        return -1 if a.rank < b.rank else 1
    return a._compare_same(b)


class Expression:
    """Base for all expression variants; supplies the structural order."""

    __slots__ = ()

    rank = 0

    def _compare_same(self, other) -> Optional[int]:
        raise NotImplementedError

    def __lt__(self, other: Expression) -> bool:
        return compare(self, other) == -1

    def __le__(self, other: Expression) -> bool:
        return compare(self, other) in (-1, 0)

    def __gt__(self, other: Expression) -> bool:
        return compare(self, other) == 1

    def __ge__(self, other: Expression) -> bool:
        return compare(self, other) in (1, 0)


class Boolean(Expression):
    __slots__ = ("value",)

    rank = 0

    def __init__(self, value: bool):
        self.value = bool(value)

    def _compare_same(self, other: Boolean) -> Optional[int]:
        return _sign(self.value, other.value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Boolean) and self.value == other.value

    def __hash__(self) -> int:
        return hash((Boolean, self.value))

    def __bool__(self) -> bool:
        return self.value

    def __repr__(self):
        return f"Boolean({self.value})"

    def __str__(self):
        return "true" if self.value else "false"


TRUE = Boolean(True)
FALSE = Boolean(False)


def format_number(value: float) -> str:
    """Decimal text of a float: no exponent, no trailing ``.0``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


class Number(Expression):
    __slots__ = ("value",)

    rank = 2

    def __init__(self, value: float):
        self.value = float(value)

    def _compare_same(self, other: Number) -> Optional[int]:
        return _sign(self.value, other.value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Number) and self.value == other.value

    def __hash__(self) -> int:
        return hash((Number, self.value))

    def __repr__(self):
        return f"Number({self.value!r})"

    def __str__(self):
        return format_number(self.value)


class List(Expression):
    """An ordered sequence of expressions; both data and call form."""

    __slots__ = ("items",)

    rank = 3

    def __init__(self, items: Iterable[Expression] = ()):
        self.items: list[Expression] = list(items)

    def _compare_same(self, other: List) -> Optional[int]:
        for x, y in zip(self.items, other.items):
            c = compare(x, y)
            if c != 0:
                return c
        return _sign(len(self.items), len(other.items))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, List) and self.items == other.items

    __hash__ = None

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Expression]:
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __repr__(self):
        return f"List({self.items!r})"

    def __str__(self):
        return "(" + ",".join(str(x) for x in self.items) + ")"
