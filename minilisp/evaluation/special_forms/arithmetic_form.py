from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.types.environment import Environment
from minilisp.types.errors import MiniLispInvalidResult
from minilisp.types.kinds import is_number


def add_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Sum every argument, evaluated left to right. (+) is 0."""
    total = 0
    for node in tail:
        value = evaluate_fn(node, env)
        if not is_number(value):
            raise MiniLispInvalidResult(f"+ argument evaluated to non-number: {value!r}")
        try:
            total += value
        except TypeError as e:
            raise MiniLispInvalidResult(f"+ cannot add {value!r} to {total!r}") from e
    return total
