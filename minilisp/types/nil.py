from __future__ import annotations


class NilType:
    """The empty value. Doubles as false; the only other false value is ()."""

    __slots__ = ()

    def __repr__(self): return "nil"
    def __bool__(self): return False

    # Equal only to Nil; structural comparison with () lives in `equal`
    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


Nil = NilType()

# The single true value produced by predicates such as `equal`.
T = True
