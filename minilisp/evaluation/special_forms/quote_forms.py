from minilisp import SExpression, LispValue, EvaluatorFn
from minilisp.types.errors import MiniLispInvalidArgument


def quote_form(
    tail: list[SExpression], env, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise MiniLispInvalidArgument("quote expects exactly 1 argument")
    return tail[0]
