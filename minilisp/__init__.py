# Core type aliases for minilisp's data model.
# Programs and runtime values are plain Python objects: numbers, str (symbols),
# True, list/tuple and the Nil singleton. Closures are the only dedicated
# runtime type.
#
# Naming guidance:
# - SExpression: an unevaluated program node handed to the evaluator or a form.
# - LispValue:  the result of evaluating a node.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator callback handed to special forms and closures: (node, env) -> value
EvaluatorFn = Callable[..., LispValue]

from minilisp.types.nil import Nil, T  # noqa: E402
from minilisp.types.errors import (  # noqa: E402
    MiniLispError,
    MiniLispInvalidArgument,
    MiniLispInvalidResult,
    MiniLispUndefinedOperation,
)
from minilisp.types.environment import Environment  # noqa: E402
from minilisp.types.closure import Closure  # noqa: E402
from minilisp.evaluation.evaluator import Evaluator  # noqa: E402
from minilisp.interpreter import Interpreter  # noqa: E402

__all__ = [
    "LispValue",
    "SExpression",
    "EvaluatorFn",
    "Nil",
    "T",
    "MiniLispError",
    "MiniLispInvalidArgument",
    "MiniLispInvalidResult",
    "MiniLispUndefinedOperation",
    "Environment",
    "Closure",
    "Evaluator",
    "Interpreter",
]
