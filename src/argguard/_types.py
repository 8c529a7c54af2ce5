"""Core type aliases and protocols for argguard.

- Predicate is a plain callable over one value (the registry's leaf matcher)
- Alias names another registry entry instead of carrying a predicate
- AssertionStrategy is the pluggable failure sink used by the guard
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, TypeAlias, runtime_checkable

Predicate: TypeAlias = Callable[[Any], bool]


@dataclass(frozen=True, slots=True)
class Alias:
    """Registry entry that points at another type name.

    Resolved by MatcherRegistry.resolve(); chains are followed until a
    predicate (or an unknown name) is reached.
    """

    target: str


# Tagged entry: a registry value is either a predicate or an alias.
MatcherEntry: TypeAlias = Predicate | Alias

# A schema maps argument name -> type expression, in consumption order.
Schema: TypeAlias = Mapping[str, str]
SchemaList: TypeAlias = Sequence["Schema | SchemaList"]


@runtime_checkable
class AssertionStrategy(Protocol):
    """Receive the outcome of a guard call.

    Called with ok=True and reason=None on success. Implementations decide
    what a failure means: raise, log, collect.
    """

    def __call__(self, ok: bool, reason: str | None, /) -> None: ...
