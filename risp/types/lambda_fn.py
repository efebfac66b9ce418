"""User-defined procedure value for risp."""

from __future__ import annotations

from typing import Optional

from risp import SExpression
from risp.types.expression import Expression, compare


class Lambda(Expression):
    """A parameter list and a body expression.

    No environment is captured: free identifiers in the body resolve against
    whichever scope applies the lambda.
    """

    __slots__ = ("params", "body")

    rank = 4

    def __init__(self, params: SExpression, body: SExpression):
        # params is validated when the lambda is applied, not here
        self.params: SExpression = params
        self.body: SExpression = body

    def _compare_same(self, other: Lambda) -> Optional[int]:
        c = compare(self.params, other.params)
        if c != 0:
            return c
        return compare(self.body, other.body)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Lambda)
            and self.params == other.params
            and self.body == other.body
        )

    __hash__ = None

    def __repr__(self):
        return f"Lambda({self.params!r}, {self.body!r})"

    def __str__(self) -> str:
        return f"{self.params} {self.body}"
