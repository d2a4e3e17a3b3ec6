"""Core evaluator for minilisp.

Atoms evaluate through the environment: a bound symbol yields its value, and
anything unbound evaluates to itself. A non-empty list is an invocation whose
head either resolves to a Closure or names a built-in operation. Built-ins
receive their argument nodes unevaluated and call back into the evaluator for
the ones they need.
"""

from __future__ import annotations

import logging
from typing import Optional

from minilisp import SExpression, LispValue
from minilisp.evaluation.registry import OperationRegistry
from minilisp.types.closure import Closure
from minilisp.types.environment import Environment
from minilisp.types.errors import MiniLispInvalidArgument, MiniLispUndefinedOperation
from minilisp.types.kinds import is_list, is_number, is_symbol
from minilisp.types.nil import Nil, NilType

logger = logging.getLogger(__name__)


class Evaluator:
    """Evaluates program nodes against a global environment and a registry."""

    def __init__(
        self,
        env: Optional[Environment] = None,
        registry: Optional[OperationRegistry] = None,
        trace: bool = False,
    ):
        self.env: Environment = env if env is not None else Environment()
        self.registry: OperationRegistry = (
            registry if registry is not None else OperationRegistry.with_builtins()
        )
        self.trace = trace

    def evaluate(self, node: SExpression, env: Optional[Environment] = None) -> LispValue:
        """Evaluate `node` in `env` (the global environment by default)."""
        if env is None:
            env = self.env
        if self.trace:
            logger.debug("eval %r in env %d", node, id(env))

        if node is None or isinstance(node, NilType):
            return Nil

        if is_symbol(node):
            scope = env.find(node)
            if scope is None:
                return node  # unbound symbols are literals
            return scope.vars[node]

        if isinstance(node, bool) or is_number(node) or isinstance(node, Closure):
            return node

        if is_list(node):
            if not node:
                return Nil
            # Fresh list: forms index into it and never see the caller's node
            return self.apply(node[0], list(node[1:]), env)

        raise MiniLispInvalidArgument(f"Cannot evaluate {node!r}: not a program node")

    def apply(self, head: SExpression, tail: list[SExpression], env: Environment) -> LispValue:
        """Invoke the operator `head` with unevaluated argument nodes `tail`."""
        if is_list(head):
            head = self.evaluate(head, env)

        if isinstance(head, Closure):
            return head.invoke(tail, env)

        if not is_symbol(head):
            raise MiniLispUndefinedOperation(head)

        scope = env.find(head)
        if scope is not None and isinstance(scope.vars[head], Closure):
            return scope.vars[head].invoke(tail, env)

        handler = self.registry.lookup(head)
        return handler(tail, env, self.evaluate)
