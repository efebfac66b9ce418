from __future__ import annotations

from typing import Any, Sequence


class RispError(Exception):
    """ Base class for all risp errors"""
    pass


class RispLexError(RispError):
    """ Raised when program text cannot be read into a single form"""

    def __init__(self, reason: str, tokens: Sequence[str] = ()):
        super().__init__(reason)
        self.reason = reason
        self.tokens = list(tokens)


class RispArityError(RispError):
    """ Raised when a form or builtin receives the wrong number of arguments"""

    def __init__(self, form: str, expected: str, actual: int):
        super().__init__(f"`{form}` expects {expected} argument(s), got {actual}")
        self.form = form
        self.expected = expected
        self.actual = actual


class RispTypeError(RispError):
    """ Raised when an argument is not of the kind a form requires"""

    def __init__(self, form: str, expected: str, actual: Any):
        super().__init__(f"`{form}` expected {expected}, got {actual}")
        self.form = form
        self.expected = expected
        self.actual = actual


class RispUndefinedProcedure(RispError):
    """ Raised when a call-position symbol names neither a builtin nor a lambda"""

    def __init__(self, name: str):
        super().__init__(f"undefined procedure `{name}`")
        self.name = name


class RispNotCallable(RispError):
    """ Raised when the head of a call form is not a symbol"""

    def __init__(self, head: Any):
        super().__init__(f"{head} is not callable")
        self.head = head
