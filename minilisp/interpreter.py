from __future__ import annotations

import logging
from typing import Iterable

from minilisp import SExpression, LispValue
from minilisp.config import trace_enabled
from minilisp.evaluation.evaluator import Evaluator
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Host-facing entry point. Owns one global Environment and one Evaluator and
    keeps them across calls, so bindings made by `set` persist between programs.
    """

    def __init__(self, trace: bool | None = None):
        if trace is None:
            trace = trace_enabled()
        self.env: Environment = Environment()
        self.evaluator = Evaluator(self.env, trace=trace)

    @property
    def trace(self) -> bool:
        return self.evaluator.trace

    def eval(self, program: SExpression) -> LispValue:
        """Evaluate one structured program against the global environment."""
        logger.debug("Evaluating program: %r", program)
        return self.evaluator.evaluate(program, self.env)

    def eval_all(self, programs: Iterable[SExpression]) -> LispValue:
        """Evaluate programs in order; return the last value, or Nil if none."""
        result: LispValue = Nil
        for program in programs:
            result = self.eval(program)
        return result
