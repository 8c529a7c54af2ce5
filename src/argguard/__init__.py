"""argguard: runtime argument validation against type-expression schemas.

All public types are exported from this module for flat imports:

    from argguard import have, guarded, Guard, BUILTIN_REGISTRY
"""

__version__ = "0.1.0"

# Call-shape adapter
from argguard._call_values import CallValues, adapt

# Config types: see argguard._config for details
from argguard._config import ConfigParseError, SchemaConfig, parse_schema_config

# Errors
from argguard._errors import (
    ArgumentsShapeError,
    ArgumentValidationError,
    GuardError,
    SchemaError,
    UsageError,
)

# Evaluation
from argguard._evaluator import Verdict, evaluate

# Type expressions
from argguard._expression import (
    ArrayOf,
    Leaf,
    OptionalOf,
    TypeExpression,
    UnionOf,
    parse_expression,
)

# Guard entry point
from argguard._guard import (
    ARGUMENTS_OBJECT_SCHEMA,
    Guard,
    get_assertion,
    guarded,
    have,
    log_assertion,
    raise_assertion,
    set_assertion,
)

# Schema matching
from argguard._matcher import (
    MatchResult,
    ensure_args,
    match_schema,
    resolve_schemas,
)

# Registry: see argguard._registry for details
from argguard._registry import (
    ARGUMENTS_OBJECT,
    BUILTIN_REGISTRY,
    DEFAULT_MATCHER,
    MAX_ALIAS_HOPS,
    AliasCycleError,
    InvalidMatchersError,
    MatcherRegistry,
    RegistryBuilder,
    unfold_matchers,
)
from argguard._types import Alias, AssertionStrategy, MatcherEntry, Predicate, Schema

__all__ = [
    # Protocols and aliases
    "Alias",
    "AssertionStrategy",
    "MatcherEntry",
    "Predicate",
    "Schema",
    # Registry
    "RegistryBuilder",
    "MatcherRegistry",
    "BUILTIN_REGISTRY",
    "unfold_matchers",
    "ARGUMENTS_OBJECT",
    "DEFAULT_MATCHER",
    "MAX_ALIAS_HOPS",
    # Type expressions
    "TypeExpression",
    "Leaf",
    "OptionalOf",
    "UnionOf",
    "ArrayOf",
    "parse_expression",
    # Evaluation
    "Verdict",
    "evaluate",
    # Call values
    "CallValues",
    "adapt",
    # Matching
    "MatchResult",
    "match_schema",
    "resolve_schemas",
    "ensure_args",
    # Guard
    "Guard",
    "have",
    "guarded",
    "ARGUMENTS_OBJECT_SCHEMA",
    "raise_assertion",
    "log_assertion",
    "set_assertion",
    "get_assertion",
    # Config
    "SchemaConfig",
    "parse_schema_config",
    # Errors
    "GuardError",
    "UsageError",
    "SchemaError",
    "ArgumentsShapeError",
    "ArgumentValidationError",
    "AliasCycleError",
    "InvalidMatchersError",
    "ConfigParseError",
]
