"""Runtime environment for minilisp.

The Environment stores bindings of symbols to evaluated values and supports
nested scopes via an `outer` link. Lookups walk outward through the chain.
Assignment with `set` always lands in the root of the chain, so it mutates
global state regardless of nesting depth; `define` binds in the current frame
and is what closure calls use for their parameters.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from minilisp import LispValue
from minilisp.types.errors import MiniLispInvalidArgument, MiniLispInvalidResult
from minilisp.types.nil import Nil


class Environment:
    """Hierarchical mapping from symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, LispValue] = {}
        self.outer: Environment | None = outer

    def root(self) -> Environment:
        """Return the terminal ancestor of this chain."""
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def has(self, name: str) -> bool:
        """True if `name` is bound in this frame or any ancestor."""
        return self.find(name) is not None

    def get(self, name: str) -> LispValue:
        """Return the value bound to `name` in the nearest frame, or Nil."""
        env = self.find(name)
        if env is None:
            return Nil
        return env.vars[name]

    def set(self, name: str, value: LispValue) -> None:
        """Bind `name` to `value` in the root frame of the chain.

        Raises MiniLispInvalidResult if `name` is not a symbol; callers pass an
        evaluated value here.
        """
        if not isinstance(name, str):
            raise MiniLispInvalidResult(f"Cannot set {name!r}: name must evaluate to a symbol")
        self.root().vars[name] = value

    def define(self, name: str, value: LispValue) -> None:
        """Bind `name` to `value` in this frame only.

        Raises MiniLispInvalidArgument if `name` is not a symbol.
        """
        if not isinstance(name, str):
            raise MiniLispInvalidArgument(f"Cannot define {name!r} as a symbol")
        self.vars[name] = value

    def __contains__(self, name: str) -> bool:
        return self.has(name)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Full chain representation, innermost frame first."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            chain = []
            while env is not None:
                with StringIO() as env_buf:
                    env._write_vars(env_buf)
                    chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
