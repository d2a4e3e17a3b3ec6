from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.types.environment import Environment
from minilisp.types.errors import MiniLispInvalidArgument, MiniLispInvalidResult
from minilisp.types.kinds import is_list
from minilisp.types.nil import Nil, NilType


def _eval_list(name: str, node: SExpression, env: Environment, evaluate_fn: EvaluatorFn):
    value = evaluate_fn(node, env)
    # Nil is the empty list for car/cdr
    if isinstance(value, NilType):
        return ()
    if not is_list(value):
        raise MiniLispInvalidResult(f"{name} argument evaluated to non-list: {value!r}")
    return value


def car_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 1:
        raise MiniLispInvalidArgument("car requires a single argument")
    value = _eval_list("car", tail[0], env, evaluate_fn)
    if not value:
        return Nil
    return value[0]


def cdr_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 1:
        raise MiniLispInvalidArgument("cdr requires a single argument")
    value = _eval_list("cdr", tail[0], env, evaluate_fn)
    rest = list(value[1:])
    if not rest:
        return Nil
    return rest


def cons_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Build a two element list: the first node verbatim, the second evaluated."""
    if len(tail) != 2:
        raise MiniLispInvalidArgument("cons requires two arguments")
    head, rest = tail
    return [head, evaluate_fn(rest, env)]
