"""Type-expression parsing: string → TypeExpression tree.

Grammar (outer to inner)::

    expr := ("opt" | "optional") SP expr
          | expr SP "or" SP expr
          | expr SP ("a" | "arr" | "array")
          | leafName

Decomposition runs optional → union → array → leaf, so ``"opt str or num"``
parses as OptionalOf(UnionOf(str, num)) and ``"num arr arr"`` as
ArrayOf(ArrayOf(num)). The optional and array keywords are
case-insensitive; ``or`` is not.

Patterns are compiled with ``google-re2``: linear-time regardless of input,
so hostile schema strings cannot stall the parser.

The TypeExpression union is pattern-matchable via match/case.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import TypeAlias

import re2

_OPTIONAL_RX = re2.compile(r"^(?i:opt(?:ional)?) (.+)$")
_UNION_RX = re2.compile(r"^(.+) or (.+)$")
_ARRAY_RX = re2.compile(r"^(.+) (?i:a(?:rr(?:ay)?)?)$")

# Parse cache size; schemas are usually module-level constants.
PARSE_CACHE_SIZE = 1024


@dataclass(frozen=True, slots=True)
class Leaf:
    """A base type name, resolved through the matcher registry."""

    name: str


@dataclass(frozen=True, slots=True)
class OptionalOf:
    """Value may be None, otherwise must satisfy ``inner``."""

    inner: TypeExpression


@dataclass(frozen=True, slots=True)
class UnionOf:
    """Value must satisfy ``left`` or ``right`` (left tried first).

    The source texts are kept verbatim for failure messages.
    """

    left: TypeExpression
    right: TypeExpression
    left_text: str
    right_text: str


@dataclass(frozen=True, slots=True)
class ArrayOf:
    """Value must be an array whose every element satisfies ``member``."""

    member: TypeExpression
    member_text: str


TypeExpression: TypeAlias = Leaf | OptionalOf | UnionOf | ArrayOf


@lru_cache(maxsize=PARSE_CACHE_SIZE)
def parse_expression(text: str) -> TypeExpression:
    """Parse a type-expression string into a TypeExpression tree.

    Never fails: any string that matches no modifier form is a Leaf, and
    unknown leaf names fail closed at evaluation time instead.
    """
    match = _OPTIONAL_RX.match(text)
    if match:
        return OptionalOf(inner=parse_expression(match.group(1)))

    match = _UNION_RX.match(text)
    if match:
        left, right = match.group(1), match.group(2)
        return UnionOf(
            left=parse_expression(left),
            right=parse_expression(right),
            left_text=left,
            right_text=right,
        )

    match = _ARRAY_RX.match(text)
    if match:
        member = match.group(1)
        return ArrayOf(member=parse_expression(member), member_text=member)

    return Leaf(name=text)

