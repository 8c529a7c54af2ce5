"""Built-in leaf predicates.

Each predicate takes a single value and answers whether it has the named
shape. All predicates return False for None, so an absent argument never
satisfies a leaf type on its own.

Key syntax follows the registry's pipe convention: ``"s|str"`` registers
both ``s`` and ``str`` as aliases of ``string``.
"""

from __future__ import annotations

import datetime
import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from argguard._types import MatcherEntry

_SCALARS = (str, bytes, bytearray, int, float, complex)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    # bool is an int subclass but is its own leaf type here.
    return isinstance(value, int | float) and not isinstance(value, bool)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_function(value: Any) -> bool:
    return callable(value)


def is_array(value: Any) -> bool:
    return isinstance(value, list | tuple)


def is_object(value: Any) -> bool:
    """Any non-scalar, non-callable value: records, arrays, dates, patterns."""
    if value is None or isinstance(value, _SCALARS):
        return False
    return not callable(value)


def is_plain_object(value: Any) -> bool:
    """A named-field record."""
    return isinstance(value, Mapping)


def is_regexp(value: Any) -> bool:
    return isinstance(value, re.Pattern)


def is_date(value: Any) -> bool:
    return isinstance(value, datetime.date)


BUILTIN_MATCHERS: dict[str, MatcherEntry | str] = {
    "string": is_string,
    "s|str": "string",
    "number": is_number,
    "n|num": "number",
    "boolean": is_boolean,
    "b|bool": "boolean",
    "function": is_function,
    "f|fun|func": "function",
    "array": is_array,
    "a|arr": "array",
    "object": is_object,
    "o|obj": "object",
    "regexp": is_regexp,
    "r|rx|regex": "regexp",
    "date": is_date,
    "d": "date",
    "Object": is_plain_object,
    "Obj": "Object",
}
