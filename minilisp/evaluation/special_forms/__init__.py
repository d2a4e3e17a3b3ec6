"""Built-in operations for the minilisp evaluator.

Every built-in is a special form: it receives its argument nodes unevaluated,
together with the current environment and the evaluator callback, and decides
itself which nodes to evaluate and in what order.
"""

from minilisp.evaluation.special_forms.arithmetic_form import add_form
from minilisp.evaluation.special_forms.list_forms import car_form, cdr_form, cons_form
from minilisp.evaluation.special_forms.quote_forms import quote_form
from minilisp.evaluation.special_forms.if_form import if_form
from minilisp.evaluation.special_forms.set_form import set_form
from minilisp.evaluation.special_forms.equal_form import equal_form
from minilisp.evaluation.special_forms.lambda_form import lambda_form


def builtin_operations() -> dict:
    """Return a fresh name -> handler table of the built-in operations."""
    return {
        "+": add_form,
        "car": car_form,
        "cdr": cdr_form,
        "quote": quote_form,
        "cons": cons_form,
        "if": if_form,
        "set": set_form,
        "equal": equal_form,
        "lambda": lambda_form,
    }


def builtin_aliases() -> dict:
    """Return a fresh alias -> canonical name table."""
    return {
        "first": "car",
        "'": "quote",
    }
