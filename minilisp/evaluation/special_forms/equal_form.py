from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.types.environment import Environment
from minilisp.types.errors import MiniLispInvalidArgument
from minilisp.types.kinds import is_list, is_nil, is_number
from minilisp.types.nil import Nil, T


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality for minilisp values.

    Lists (and tuples) are equal when they have the same length and every pair
    of corresponding elements is equal. Nil matches Nil and the empty list.
    Numbers compare by value across numeric types; other scalars must also
    share a type.
    """
    if a is b:
        return True
    if is_nil(a) or is_nil(b):
        return is_nil(a) and is_nil(b)
    if is_list(a) and is_list(b):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if is_number(a) and is_number(b):
        return a == b
    if type(a) != type(b):
        return False
    return a == b


def equal_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 2:
        raise MiniLispInvalidArgument("equal requires two arguments")
    first = evaluate_fn(tail[0], env)
    second = evaluate_fn(tail[1], env)
    return T if is_equal(first, second) else Nil
