"""Guard: the public entry point over the matching engine.

A Guard pairs a MatcherRegistry with an assertion strategy. Calling it
resolves the call values against a schema (or schema list), then hands the
outcome to the strategy, which decides what a failure means.

Example::

    def connect(*args):
        opts = have(args, {"host": "str", "port": "opt num", "cb": "func"})

    @guarded({"name": "str", "tags": "opt str array"})
    def tag(name, tags=None): ...
"""

from __future__ import annotations

import functools
import inspect
import logging
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from argguard._errors import ArgumentValidationError
from argguard._matcher import ensure_args
from argguard._registry import ARGUMENTS_OBJECT, BUILTIN_REGISTRY

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from argguard._registry import MatcherRegistry
    from argguard._types import AssertionStrategy, MatcherEntry, Schema, SchemaList

logger = logging.getLogger(__name__)

# Schema-list entry: a lone record argument is re-validated as the call values.
ARGUMENTS_OBJECT_SCHEMA: Schema = MappingProxyType({ARGUMENTS_OBJECT: ARGUMENTS_OBJECT})

# ═══════════════════════════════════════════════════════════════════════════════
# Assertion strategies
# ═══════════════════════════════════════════════════════════════════════════════


def raise_assertion(ok: bool, reason: str | None) -> None:
    """Default strategy: raise ArgumentValidationError on failure."""
    if not ok:
        raise ArgumentValidationError(reason if reason is not None else f"{ok} == True")


def log_assertion(ok: bool, reason: str | None) -> None:
    """Soft-fail strategy: log the failure and let the call proceed."""
    if not ok:
        logger.warning("argument validation failed: %s", reason)


_active_assertion: AssertionStrategy = raise_assertion


def set_assertion(strategy: AssertionStrategy) -> AssertionStrategy:
    """Install the process-wide default strategy; return the previous one.

    Applies to every Guard constructed without an explicit ``assertion``.
    Last writer wins.
    """
    global _active_assertion
    if not callable(strategy):
        msg = f"assertion strategy must be callable, got {type(strategy).__name__}"
        raise TypeError(msg)
    previous = _active_assertion
    _active_assertion = strategy
    return previous


def get_assertion() -> AssertionStrategy:
    """Return the process-wide default strategy."""
    return _active_assertion


# ═══════════════════════════════════════════════════════════════════════════════
# Guard
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Guard:
    """Validate call values against a schema and report through a strategy.

    ``assertion=None`` defers to the process-wide strategy at call time
    (see set_assertion); an explicit strategy pins this guard to it.
    """

    registry: MatcherRegistry = BUILTIN_REGISTRY
    assertion: AssertionStrategy | None = None

    def __call__(
        self,
        values: Any,
        schema: Schema | SchemaList,
        strict: bool = False,
    ) -> dict[str, Any]:
        """Validate ``values`` and return the parsed arguments by name.

        Raises:
            UsageError: malformed schema or unsupported call-values shape
            ArgumentValidationError: validation failed (default strategy)
        """
        result = ensure_args(self.registry, schema, values, strict)
        if ARGUMENTS_OBJECT in result.parsed_args:
            logger.debug("arguments object matched, re-validating its fields")
            return self(result.parsed_args[ARGUMENTS_OBJECT], schema, strict)

        if result.ok:
            logger.debug("arguments matched: %s", list(result.parsed_args))
        self.active_assertion(result.ok, result.fail)
        return result.parsed_args

    def strict(self, values: Any, schema: Schema | SchemaList) -> dict[str, Any]:
        """Validate ``values`` rejecting any value the schema did not consume."""
        return self(values, schema, strict=True)

    @property
    def active_assertion(self) -> AssertionStrategy:
        """The strategy this guard reports through right now."""
        return self.assertion if self.assertion is not None else _active_assertion

    def with_matchers(self, matchers: Mapping[str, MatcherEntry | str]) -> Guard:
        """Return a new guard whose registry is extended with ``matchers``.

        Raises:
            InvalidMatchersError: matchers is not a mapping
        """
        return replace(self, registry=self.registry.extend(matchers))

    def with_assertion(self, strategy: AssertionStrategy | None) -> Guard:
        """Return a new guard pinned to ``strategy`` (None: process-wide)."""
        return replace(self, assertion=strategy)


have = Guard()


def guarded(
    schema: Schema | SchemaList,
    *,
    strict: bool = False,
    guard: Guard | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator validating every call of the wrapped function.

    Arguments are captured with ``inspect.signature(fn).bind`` (defaults are
    not applied), so positional and keyword calls validate alike. Binding
    errors propagate as TypeError before validation runs.
    """
    checker = guard if guard is not None else have

    def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
        signature = inspect.signature(fn)

        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            checker(signature.bind(*args, **kwargs), schema, strict)
            return fn(*args, **kwargs)

        return wrapper

    return decorator
