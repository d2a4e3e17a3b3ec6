from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.types.environment import Environment
from minilisp.types.errors import MiniLispInvalidArgument


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(set name value): both are evaluated; the binding lands in the root scope."""
    if len(tail) != 2:
        raise MiniLispInvalidArgument("set requires exactly 2 arguments: (set name value)")
    name_expr, val_expr = tail
    name = evaluate_fn(name_expr, env)
    value = evaluate_fn(val_expr, env)
    env.set(name, value)
    return value
