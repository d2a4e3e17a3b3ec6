"""User-defined operations created by the `lambda` form."""

from __future__ import annotations

import logging
from io import StringIO
from typing import Sequence

from minilisp import SExpression, LispValue, EvaluatorFn
from minilisp.types.environment import Environment
from minilisp.types.errors import MiniLispInvalidArgument
from minilisp.types.nil import Nil

logger = logging.getLogger(__name__)


class Closure:
    """A first-class lambda with formal parameters, body, and captured env."""

    __slots__ = ("params", "body", "env", "evaluate_fn")

    def __init__(
        self,
        params: Sequence[str],
        body: Sequence[SExpression],
        env: Environment,
        evaluate_fn: EvaluatorFn,
    ):
        self.params: tuple[str, ...] = tuple(params)
        # Body forms run in order; the last one is the result.
        self.body: tuple[SExpression, ...] = tuple(body)
        self.env: Environment = env
        self.evaluate_fn: EvaluatorFn = evaluate_fn
        logger.debug(
            "Closure created: params=(%s), body_forms=%d, env_id=%d",
            ", ".join(self.params), len(self.body), id(env),
        )

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(self.params))
            buffer.write(")")
            for form in self.body:
                buffer.write(" ")
                buffer.write(repr(form))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Closure {self}>"

    def extend_env(self, values: Sequence[LispValue]) -> Environment:
        """Return a fresh child of the captured env with params bound to `values`.

        Parameters are bound with `define`, never `set`, so they stay local to
        this call.
        """
        frame = Environment(self.env)
        for name, value in zip(self.params, values):
            frame.define(name, value)
        return frame

    def invoke(self, args: Sequence[SExpression], caller_env: Environment) -> LispValue:
        """Evaluate `args` in `caller_env`, bind them and run the body."""
        if len(args) != len(self.params):
            raise MiniLispInvalidArgument(
                f"lambda parameter count mismatch: requires {len(self.params)}, got {len(args)}"
            )
        values = [self.evaluate_fn(arg, caller_env) for arg in args]
        frame = self.extend_env(values)
        logger.debug("Closure invoked: %s with %r", self, values)

        result: LispValue = Nil
        for form in self.body:
            result = self.evaluate_fn(form, frame)
        return result
