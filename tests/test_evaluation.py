import copy

import pytest

from minilisp.types.errors import MiniLispInvalidArgument, MiniLispUndefinedOperation
from minilisp.types.nil import Nil


# -----------------------------------------------------
# Atoms
# -----------------------------------------------------

@pytest.mark.parametrize("literal", [1, 3.14, -7, True, "hello", "+"])
def test_unbound_atoms_evaluate_to_themselves(evaluator, literal):
    assert evaluator.evaluate(literal) == literal


def test_nil_and_none(evaluator):
    assert evaluator.evaluate(Nil) is Nil
    assert evaluator.evaluate(None) is Nil


@pytest.mark.parametrize("empty", [[], ()])
def test_empty_list_is_nil(evaluator, empty):
    assert evaluator.evaluate(empty) is Nil


def test_symbol_lookup(evaluator, env):
    env.define("x", 42)
    env.define("lst", [1, 2])
    assert evaluator.evaluate("x") == 42
    assert evaluator.evaluate("lst") == [1, 2]


def test_symbol_bound_to_nil(evaluator, env):
    env.define("n", Nil)
    assert evaluator.evaluate("n") is Nil


def test_lookup_in_explicit_env(evaluator, env):
    from minilisp.types.environment import Environment

    local = Environment(env)
    local.define("y", 5)
    assert evaluator.evaluate(["+", "y", 1], local) == 6
    assert evaluator.evaluate("y") == "y"


def test_closure_value_evaluates_to_itself(evaluator):
    fn = evaluator.evaluate(["lambda", ["x"], "x"])
    assert evaluator.evaluate(fn) is fn


@pytest.mark.parametrize("node", [object(), {"a": 1}, {1, 2}])
def test_non_program_node_is_rejected(evaluator, node):
    with pytest.raises(MiniLispInvalidArgument):
        evaluator.evaluate(node)


# -----------------------------------------------------
# Dispatch
# -----------------------------------------------------

def test_tuple_program(evaluator):
    assert evaluator.evaluate(("+", 1, ("+", 2, 3))) == 6


def test_list_head_evaluated_to_operation_name(evaluator):
    assert evaluator.evaluate([["car", ["quote", ["+"]]], 1, 2]) == 3


def test_closure_object_as_head(evaluator):
    fn = evaluator.evaluate(["lambda", ["x"], ["+", "x", 1]])
    assert evaluator.evaluate([fn, 1]) == 2


def test_non_closure_binding_falls_back_to_registry(evaluator, env):
    env.define("car", 99)
    assert evaluator.evaluate(["car", ["quote", [1, 2]]]) == 1


@pytest.mark.parametrize(
    "program",
    [
        ["no-such-op", 1],
        [5, 1],
        [True],
        [Nil, 1],
        [["quote", 5]],
    ],
)
def test_undefined_operation(evaluator, program):
    with pytest.raises(MiniLispUndefinedOperation):
        evaluator.evaluate(program)


def test_undefined_operation_carries_name(evaluator):
    with pytest.raises(MiniLispUndefinedOperation) as exc_info:
        evaluator.evaluate(["frobnicate"])
    assert exc_info.value.name == "frobnicate"


def test_program_nodes_are_not_mutated(evaluator):
    program = ["cons", ["quote", "a"], ["cdr", ["quote", [1, 2, 3]]]]
    snapshot = copy.deepcopy(program)
    first = evaluator.evaluate(program)
    second = evaluator.evaluate(program)
    assert first == second == [["quote", "a"], [2, 3]]
    assert program == snapshot


def test_results_do_not_alias_quoted_data(evaluator):
    data = [1, 2, 3]
    result = evaluator.evaluate(["cdr", ["quote", data]])
    result.append(4)
    assert data == [1, 2, 3]
