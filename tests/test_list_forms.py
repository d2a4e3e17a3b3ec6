import pytest

from minilisp.types.errors import MiniLispInvalidResult
from minilisp.types.nil import Nil


# ------------------ car / first ------------------

@pytest.mark.parametrize("op", ["car", "first"])
def test_car(evaluator, op):
    assert evaluator.evaluate([op, ["quote", [1, 2, 3]]]) == 1
    assert evaluator.evaluate([op, ["quote", [[1, 2], 3]]]) == [1, 2]


@pytest.mark.parametrize("op", ["car", "first"])
def test_car_of_empty_list_is_nil(evaluator, op):
    assert evaluator.evaluate([op, ["quote", []]]) is Nil


def test_car_of_nil_is_nil(evaluator):
    assert evaluator.evaluate(["car", ["cdr", ["quote", [1]]]]) is Nil


def test_car_of_variable(evaluator, env):
    env.define("xs", [7, 8])
    assert evaluator.evaluate(["car", "xs"]) == 7


@pytest.mark.parametrize("arg", [5, "sym", True])
def test_car_of_non_list(evaluator, arg):
    with pytest.raises(MiniLispInvalidResult):
        evaluator.evaluate(["car", arg])


# ------------------ cdr ------------------

def test_cdr(evaluator):
    assert evaluator.evaluate(["cdr", ["quote", [1, 2, 3]]]) == [2, 3]


def test_cdr_of_singleton_is_nil(evaluator):
    assert evaluator.evaluate(["cdr", ["quote", [1]]]) is Nil


def test_cdr_of_empty_is_nil(evaluator):
    assert evaluator.evaluate(["cdr", ["quote", []]]) is Nil


def test_cdr_of_tuple_returns_list(evaluator):
    assert evaluator.evaluate(["cdr", ["quote", (1, 2, 3)]]) == [2, 3]


def test_cdr_of_nil_is_nil(evaluator):
    # Nil stands for the empty list, so it is accepted where a list is required
    assert evaluator.evaluate(["cdr", ["cdr", ["quote", [1]]]]) is Nil


def test_car_of_cdr(evaluator):
    assert evaluator.evaluate(["car", ["cdr", ["quote", [1, 2, 3]]]]) == 2


@pytest.mark.parametrize("arg", [5, "sym"])
def test_cdr_of_non_list(evaluator, arg):
    with pytest.raises(MiniLispInvalidResult):
        evaluator.evaluate(["cdr", arg])


# ------------------ cons ------------------

def test_cons_keeps_first_node_verbatim(evaluator):
    assert evaluator.evaluate(["cons", 1, ["quote", [2, 3]]]) == [1, [2, 3]]


def test_cons_does_not_evaluate_first(evaluator, env):
    env.define("x", 10)
    result = evaluator.evaluate(["cons", "x", "x"])
    assert result == ["x", 10]

    result = evaluator.evaluate(["cons", ["+", 1, 2], ["+", 1, 2]])
    assert result == [["+", 1, 2], 3]


def test_cons_with_nil_tail(evaluator):
    assert evaluator.evaluate(["cons", "a", ["quote", []]]) == ["a", []]
