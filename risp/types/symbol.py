from __future__ import annotations
import sys
from typing import Optional

from risp.types.expression import Expression, _sign


class Symbol(Expression):
    __slots__ = ("id",)

    rank = 1

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.id = sys.intern(name)

    def _compare_same(self, other: Symbol) -> Optional[int]:
        return _sign(self.id, other.id)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
