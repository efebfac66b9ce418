"""Runtime environment for risp.

An Environment holds two maps for one scope: names to bound expression
values, and names to builtin procedures. Scopes nest through an `outer`
link which is walked from innermost to outermost on lookup. Binding forms
only ever write to the current scope.
"""

from __future__ import annotations

from io import StringIO
from typing import Callable, Optional

from risp import LispValue, SExpression
from risp.types.symbol import Symbol

# A builtin receives its raw argument expressions and the caller's scope.
Builtin = Callable[[list[SExpression], "Environment"], LispValue]


class Environment:
    """Chained scope mapping names to values and builtin procedures."""

    __slots__ = ("vars", "procedures", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, LispValue] = {}
        self.procedures: dict[str, Builtin] = {}
        self.outer: Environment | None = outer

    def define_procedure(self, name: str, proc: Builtin) -> None:
        """Register builtin `proc` under `name`.

        The name is also bound to itself as a Symbol value, so a bare
        reference evaluates to the identifier rather than failing.
        """
        self.vars[name] = Symbol(name)
        self.procedures[name] = proc

    def define_variable(self, name: str, value: LispValue) -> None:
        """Bind `name` to `value` in this scope only."""
        self.vars[name] = value

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name` as a value."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: str) -> Optional[LispValue]:
        """Value bound to `name` in the nearest scope, or None."""
        env = self.find(name)
        return env.vars[name] if env is not None else None

    def get_function(self, name: str) -> Optional[Builtin]:
        """Builtin registered under `name` in the nearest scope, or None."""
        env: Optional[Environment] = self
        while env is not None:
            proc = env.procedures.get(name)
            if proc is not None:
                return proc
            env = env.outer
        return None

    def depth(self) -> int:
        """Number of scopes in the chain, counting this one."""
        n, env = 0, self
        while env is not None:
            n += 1
            env = env.outer
        return n

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env = self
            while env is not None:
                with StringIO() as env_buf:
                    env._write_vars(env_buf)
                    chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
