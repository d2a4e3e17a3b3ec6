"""Classification helpers for program nodes and runtime values.

minilisp has no dedicated cons or symbol types: symbols are ``str``, lists are
``list`` or ``tuple``. These predicates keep that mapping in one place.
"""

from __future__ import annotations

from numbers import Number

from minilisp import LispValue
from minilisp.types.nil import NilType


def is_nil(value: LispValue) -> bool:
    """True for Nil, None and the empty list, the only false values."""
    if value is None or isinstance(value, NilType):
        return True
    return isinstance(value, (list, tuple)) and not value


def is_symbol(value: LispValue) -> bool:
    return isinstance(value, str)


def is_number(value: LispValue) -> bool:
    # bool is an int subclass but is a truth value here, not a number
    return isinstance(value, Number) and not isinstance(value, bool)


def is_list(value: LispValue) -> bool:
    return isinstance(value, (list, tuple))
