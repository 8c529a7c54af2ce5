"""Error hierarchy for argguard.

Two families:
- UsageError: the engine was called wrongly (bad schema, bad call-values
  shape, bad matcher overrides). Raised immediately, never routed through
  the assertion strategy.
- ArgumentValidationError: the data did not match. Only raised by the
  default assertion strategy; the core returns MatchResult instead.
"""

from __future__ import annotations


class GuardError(Exception):
    """Base class for all argguard errors."""


class UsageError(GuardError):
    """The engine was integrated incorrectly."""


class SchemaError(UsageError):
    """A schema or schema list is malformed."""


class ArgumentsShapeError(UsageError):
    """Call values are not a sequence, mapping or bound arguments."""

    def __init__(self, got: object) -> None:
        self.got = got
        super().__init__(
            "`values` argument should be bound arguments, a sequence or a mapping, "
            f"got {type(got).__name__}"
        )


class ArgumentValidationError(GuardError):
    """Arguments did not satisfy any candidate schema."""
