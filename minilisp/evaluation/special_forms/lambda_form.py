from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.types.closure import Closure
from minilisp.types.environment import Environment
from minilisp.types.errors import MiniLispInvalidArgument
from minilisp.types.kinds import is_list, is_nil, is_symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body...) takes zero or more body forms, run in order.
    # With no body, calling the closure yields nil.
    if not tail:
        raise MiniLispInvalidArgument("lambda requires at least a parameter list")

    params = tail[0]
    if is_nil(params):
        params = ()
    elif not is_list(params):
        raise MiniLispInvalidArgument(f"lambda parameters must be a list, got {params!r}")
    for p in params:
        if not is_symbol(p):
            raise MiniLispInvalidArgument(f"lambda parameter must be a symbol, got {p!r}")

    return Closure(params, tail[1:], env, evaluate_fn)
