"""Matcher registry: type name -> predicate or alias.

The registry is the leaf of the type-expression engine. Every leaf name in a
type expression is looked up here and dereferenced to a predicate.

Architecture:
- RegistryBuilder → .build() → MatcherRegistry (immutable)
- MatcherRegistry.extend() → new MatcherRegistry (parent untouched)
- Compound keys (``"s|str|string"``) are unfolded at build/extend time so
  every lookup is a single dict hop per alias

Example::

    registry = BUILTIN_REGISTRY.extend({"Foo": lambda v: isinstance(v, Foo), "foo": "Foo"})
    predicate = registry.resolve("foo")
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from argguard._builtins import BUILTIN_MATCHERS
from argguard._errors import UsageError
from argguard._types import Alias

if TYPE_CHECKING:
    from collections.abc import Iterator

    from argguard._types import MatcherEntry, Predicate

# ═══════════════════════════════════════════════════════════════════════════════
# Limits and reserved names
# ═══════════════════════════════════════════════════════════════════════════════

MAX_ALIAS_HOPS = 32

DEFAULT_MATCHER = "@@argguard/defaultMatcher"
ARGUMENTS_OBJECT = "@@argguard/argumentsObject"

# ═══════════════════════════════════════════════════════════════════════════════
# Error types
# ═══════════════════════════════════════════════════════════════════════════════


class AliasCycleError(UsageError):
    """An alias chain did not reach a predicate within MAX_ALIAS_HOPS."""

    def __init__(self, name: str, hops: int) -> None:
        self.name = name
        self.hops = hops
        super().__init__(
            f"alias chain for {name!r} exceeds {hops} hops (cycle?)"
        )


class InvalidMatchersError(UsageError):
    """Matcher overrides were not a mapping of name -> predicate/alias."""

    def __init__(self, got: object) -> None:
        self.got = got
        super().__init__(
            f"`matchers` argument must be a mapping, got {type(got).__name__}"
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Unfolding
# ═══════════════════════════════════════════════════════════════════════════════


def _never(_value: Any) -> bool:
    return False


def _normalize(entry: MatcherEntry | str) -> MatcherEntry:
    if isinstance(entry, str):
        return Alias(entry)
    return entry


def unfold_matchers(raw: Mapping[str, MatcherEntry | str]) -> dict[str, MatcherEntry]:
    """Expand pipe-delimited keys into one entry per variant.

    ``{"s|str": "string"}`` -> ``{"s": Alias("string"), "str": Alias("string")}``

    Bare string values are normalized to Alias. Later keys win on collision.
    """
    if not isinstance(raw, Mapping):
        raise InvalidMatchersError(raw)

    unfolded: dict[str, MatcherEntry] = {}
    for key, entry in raw.items():
        normalized = _normalize(entry)
        for variant in key.split("|"):
            unfolded[variant] = normalized
    return unfolded


_RESERVED: dict[str, MatcherEntry] = {
    DEFAULT_MATCHER: _never,
    ARGUMENTS_OBJECT: Alias("Object"),
}

# ═══════════════════════════════════════════════════════════════════════════════
# Builder
# ═══════════════════════════════════════════════════════════════════════════════


class RegistryBuilder:
    """Builder for constructing a MatcherRegistry.

    Register predicates and aliases by (possibly compound) name, then call
    build() to produce an immutable registry. The reserved default and
    arguments-object entries are always present; user entries may override
    the default matcher.
    """

    def __init__(self) -> None:
        self._entries: dict[str, MatcherEntry] = dict(_RESERVED)

    def matcher(self, names: str, predicate: Predicate) -> RegistryBuilder:
        """Register a predicate under one or more ``|``-separated names."""
        self._entries.update(unfold_matchers({names: predicate}))
        return self

    def alias(self, names: str, target: str) -> RegistryBuilder:
        """Register ``names`` as aliases of ``target``."""
        self._entries.update(unfold_matchers({names: Alias(target)}))
        return self

    def update(self, raw: Mapping[str, MatcherEntry | str]) -> RegistryBuilder:
        """Register a whole matcher mapping at once."""
        self._entries.update(unfold_matchers(raw))
        return self

    def build(self) -> MatcherRegistry:
        """Freeze the registry. No further registration is possible."""
        return MatcherRegistry(_entries=MappingProxyType(dict(self._entries)))


# ═══════════════════════════════════════════════════════════════════════════════
# Registry
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class MatcherRegistry:
    """Immutable mapping of type name -> predicate or alias.

    Constructed via RegistryBuilder or MatcherRegistry.extend(). Safe to
    share across threads once built.
    """

    _entries: MappingProxyType[str, MatcherEntry] = field(
        default_factory=lambda: MappingProxyType(dict(_RESERVED))
    )

    def resolve(self, name: str) -> Predicate:
        """Dereference ``name`` to a predicate.

        Raises:
            AliasCycleError: alias chain longer than MAX_ALIAS_HOPS
        """
        return self.resolve_named(name)[1]

    def resolve_named(self, name: str) -> tuple[str, Predicate]:
        """Dereference ``name``, returning the last name in the chain and its predicate.

        The returned name is what failure messages cite: ``"s"`` resolves to
        ``("string", is_string)``. Unknown names (at any point in the chain)
        resolve to the default matcher and keep the unknown name, so
        ``"foo" -> "Bar"`` with no ``Bar`` entry yields ``("Bar", <default>)``.

        Raises:
            AliasCycleError: alias chain longer than MAX_ALIAS_HOPS
        """
        current = name
        for _ in range(MAX_ALIAS_HOPS):
            entry = self._entries.get(current)
            if entry is None:
                return current, self._default()
            if not isinstance(entry, Alias):
                return current, entry
            current = entry.target
        raise AliasCycleError(name, MAX_ALIAS_HOPS)

    def extend(self, overrides: Mapping[str, MatcherEntry | str]) -> MatcherRegistry:
        """Return a new registry with ``overrides`` layered on top.

        Raises:
            InvalidMatchersError: overrides is not a mapping
        """
        merged = dict(self._entries)
        merged.update(unfold_matchers(overrides))
        return MatcherRegistry(_entries=MappingProxyType(merged))

    def get(self, name: str) -> MatcherEntry | None:
        """Return the raw entry for ``name`` without dereferencing aliases."""
        return self._entries.get(name)

    def names(self) -> list[str]:
        """Return all registered names (sorted)."""
        return sorted(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    # ── Private ─────────────────────────────────────────────────────────────

    def _default(self) -> Predicate:
        entry = self._entries.get(DEFAULT_MATCHER)
        if entry is None or isinstance(entry, Alias):
            return _never
        return entry


BUILTIN_REGISTRY: MatcherRegistry = RegistryBuilder().update(BUILTIN_MATCHERS).build()
