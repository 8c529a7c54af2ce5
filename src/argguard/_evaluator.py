"""Type-expression evaluation: does one value satisfy one expression?

Walks a parsed TypeExpression tree against a value and produces a Verdict.
Failure reasons are part of the public contract (callers match on them):

    `<arg>` is not <type>
    `<arg>` is neither a <left> nor <right>
    `<arg>` element is falsy or not a <member>

``<type>`` is the name the alias chain ends at (``"s"`` is reported as
``string``); ``<left>``, ``<right>`` and ``<member>`` are the source text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from argguard._expression import (
    ArrayOf,
    Leaf,
    OptionalOf,
    UnionOf,
    parse_expression,
)

if TYPE_CHECKING:
    from argguard._expression import TypeExpression
    from argguard._registry import MatcherRegistry

_ARRAY = Leaf("array")


@dataclass(frozen=True, slots=True)
class Verdict:
    """Outcome of evaluating one expression against one value.

    ``soft`` marks an optional expression rejecting a present value: the
    schema matcher skips such an entry instead of failing.
    """

    ok: bool
    reason: str | None = None
    soft: bool = False


_OK = Verdict(ok=True)


def evaluate(
    registry: MatcherRegistry,
    arg_name: str,
    expr: str | TypeExpression,
    value: Any,
) -> Verdict:
    """Evaluate ``value`` against ``expr`` for the argument ``arg_name``.

    ``expr`` may be source text (parsed through the shared cache) or an
    already parsed tree.
    """
    if isinstance(expr, str):
        expr = parse_expression(expr)
    return _evaluate(registry, arg_name, expr, value)


def _evaluate(
    registry: MatcherRegistry,
    arg_name: str,
    expr: TypeExpression,
    value: Any,
) -> Verdict:
    match expr:
        case OptionalOf(inner=inner):
            verdict = _evaluate(registry, arg_name, inner, value)
            if verdict.ok or value is None:
                return _OK
            return Verdict(ok=False, reason=verdict.reason, soft=True)

        case UnionOf(left=left, right=right, left_text=lt, right_text=rt):
            if _evaluate(registry, arg_name, left, value).ok:
                return _OK
            if _evaluate(registry, arg_name, right, value).ok:
                return _OK
            return Verdict(ok=False, reason=f"`{arg_name}` is neither a {lt} nor {rt}")

        case ArrayOf(member=member, member_text=member_text):
            verdict = _evaluate(registry, arg_name, _ARRAY, value)
            if not verdict.ok:
                return verdict
            for element in value:
                if not _evaluate(registry, arg_name, member, element).ok:
                    return Verdict(
                        ok=False,
                        reason=f"`{arg_name}` element is falsy or not a {member_text}",
                    )
            return _OK

        case Leaf(name=name):
            resolved, predicate = registry.resolve_named(name)
            if predicate(value):
                return _OK
            return Verdict(ok=False, reason=f"`{arg_name}` is not {resolved}")

        case _:  # pragma: no cover
            msg = f"unknown expression type: {type(expr).__name__}"
            raise TypeError(msg)
