"""Schema matching: one schema, or the best of several.

Single-schema semantics (match_schema):
- Schema entries are consumed in declaration order, one call value each
- Fail-fast: the first hard failure stops the walk
- An optional entry that rejects a present value is skipped without
  consuming it (the value is offered to the next entry)
- Strict mode rejects call values left over after a successful walk

Multi-schema semantics (resolve_schemas):
- Every candidate is matched independently against the same values
- Candidates are ranked by consumed count, descending, stable
- First success wins; if none succeed, the furthest-progressed failure is
  returned as the most relevant explanation
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from argguard._call_values import adapt
from argguard._errors import SchemaError
from argguard._evaluator import evaluate
from argguard._expression import parse_expression

if TYPE_CHECKING:
    from argguard._call_values import CallValues
    from argguard._registry import MatcherRegistry
    from argguard._types import Schema, SchemaList

PREVIEW_LENGTH = 15


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Result of matching call values against a schema.

    ``consumed`` counts the schema entries that took a value slot, including
    trailing optional entries that read past the end of the values.
    """

    parsed_args: dict[str, Any] = field(default_factory=dict)
    fail: str | None = None
    consumed: int = 0

    @property
    def ok(self) -> bool:
        return self.fail is None


def match_schema(
    registry: MatcherRegistry,
    schema: Schema,
    values: Any,
    strict: bool = False,
) -> MatchResult:
    """Match call values against a single schema.

    Raises:
        SchemaError: schema is not a mapping, or a type expression is not a string
        ArgumentsShapeError: values is not an accepted call shape
    """
    if not isinstance(schema, Mapping):
        msg = f"`schema` should be a mapping or a list of mappings, got {type(schema).__name__}"
        raise SchemaError(msg)

    call_values = adapt(values)
    parsed_args: dict[str, Any] = {}
    cursor = 0
    fail: str | None = None

    for arg_name, type_text in schema.items():
        if not isinstance(type_text, str):
            msg = (
                f"type expression for `{arg_name}` must be a string, "
                f"got {type(type_text).__name__}"
            )
            raise SchemaError(msg)

        value = call_values.value_at(cursor)
        verdict = evaluate(registry, arg_name, parse_expression(type_text), value)
        if verdict.soft:
            continue
        if not verdict.ok:
            fail = verdict.reason
            break
        parsed_args[arg_name] = value
        cursor += 1

    if strict and fail is None and cursor < len(call_values):
        fail = _unexpected(call_values, cursor)

    return MatchResult(parsed_args=parsed_args, fail=fail, consumed=cursor)


def resolve_schemas(
    registry: MatcherRegistry,
    schemas: SchemaList,
    values: Any,
    strict: bool = False,
) -> MatchResult:
    """Match call values against each candidate and pick the best result.

    Raises:
        SchemaError: empty schema list or a malformed candidate
    """
    if not schemas:
        msg = "`schema` list is empty: expected at least one schema"
        raise SchemaError(msg)

    call_values = adapt(values)
    results = [ensure_args(registry, candidate, call_values, strict) for candidate in schemas]
    # sorted() is stable: equal consumed counts keep declaration order.
    ranked = sorted(results, key=lambda r: r.consumed, reverse=True)
    for result in ranked:
        if result.ok:
            return result
    return ranked[0]


def ensure_args(
    registry: MatcherRegistry,
    schema: Schema | SchemaList,
    values: Any,
    strict: bool = False,
) -> MatchResult:
    """Dispatch to match_schema or resolve_schemas by schema shape.

    Raises:
        SchemaError: schema is neither a mapping nor a list of schemas
    """
    if isinstance(schema, Mapping):
        return match_schema(registry, schema, values, strict)
    if isinstance(schema, Sequence) and not isinstance(schema, str | bytes):
        return resolve_schemas(registry, schema, values, strict)
    msg = f"`schema` should be a mapping or a list of mappings, got {type(schema).__name__}"
    raise SchemaError(msg)


def preview(value: Any) -> str:
    """Short textual form of a value for error messages."""
    text = str(value)
    if len(text) > PREVIEW_LENGTH:
        return text[:PREVIEW_LENGTH] + ".."
    return text


def _unexpected(call_values: CallValues, index: int) -> str:
    key = call_values.key_at(index)
    if isinstance(key, str):
        return f"Unexpected `{key}` argument"
    return f'Unexpected argument "{preview(call_values.value_at(index))}"'
