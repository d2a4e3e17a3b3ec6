from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.types.environment import Environment
from minilisp.types.errors import MiniLispInvalidArgument
from minilisp.types.kinds import is_nil


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 3:
        raise MiniLispInvalidArgument("if requires a condition, a then-expression and an else-expression")

    cond, then_node, else_node = tail
    # Only Nil (or the empty list) is false
    if is_nil(evaluate_fn(cond, env)):
        return evaluate_fn(else_node, env)
    return evaluate_fn(then_node, env)
