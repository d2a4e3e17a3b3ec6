"""Operation registry: canonical operation names, aliases and their handlers."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Iterator, Mapping, Optional

from minilisp import SExpression, LispValue, EvaluatorFn
from minilisp.types.environment import Environment
from minilisp.types.errors import MiniLispUndefinedOperation
from minilisp.evaluation.special_forms import builtin_operations, builtin_aliases

logger = logging.getLogger(__name__)

OperationHandler = Callable[[list[SExpression], Environment, EvaluatorFn], LispValue]


class OperationRegistry:
    """Immutable table of operations plus an alias table.

    Populated once at construction. Aliases must name a canonical operation.
    """

    __slots__ = ("_operations", "_aliases")

    def __init__(
        self,
        operations: Mapping[str, OperationHandler],
        aliases: Optional[Mapping[str, str]] = None,
    ):
        aliases = dict(aliases or {})
        for alias, target in aliases.items():
            if target not in operations:
                raise ValueError(f"Alias {alias!r} refers to unknown operation {target!r}")
        self._operations = MappingProxyType(dict(operations))
        self._aliases = MappingProxyType(aliases)
        logger.debug(
            "OperationRegistry built: operations=%s aliases=%s",
            list(self._operations), dict(self._aliases),
        )

    @classmethod
    def with_builtins(cls) -> OperationRegistry:
        return cls(builtin_operations(), builtin_aliases())

    @property
    def operations(self) -> Mapping[str, OperationHandler]:
        return self._operations

    @property
    def aliases(self) -> Mapping[str, str]:
        return self._aliases

    def lookup(self, name: str) -> OperationHandler:
        """Return the handler for `name`, resolving aliases.

        Raises MiniLispUndefinedOperation if neither table knows the name.
        """
        if name in self._operations:
            return self._operations[name]
        if name in self._aliases:
            return self._operations[self._aliases[name]]
        raise MiniLispUndefinedOperation(name)

    def names(self) -> Iterator[str]:
        """Canonical operation names, in registration order."""
        return iter(self._operations)

    def __contains__(self, name: str) -> bool:
        return name in self._operations or name in self._aliases
