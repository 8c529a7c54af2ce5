"""Call-shape adapter: normalize caller values into one indexed view.

Accepted shapes (closed set):
- a sequence (list, tuple, ...; not str/bytes) → integer keys
- inspect.BoundArguments → positional args (integer keys) then keyword
  args (string keys)
- a mapping → its keys, in iteration order

Anything else is an integration bug and raises ArgumentsShapeError.
"""

from __future__ import annotations

import inspect
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from argguard._errors import ArgumentsShapeError


@dataclass(frozen=True, slots=True)
class CallValues:
    """Ordered, index-addressable view over call values.

    ``keys[i]`` is the position (int) or field name (str) that produced
    ``values[i]``.
    """

    keys: tuple[int | str, ...]
    values: tuple[Any, ...]

    def __len__(self) -> int:
        return len(self.values)

    def value_at(self, index: int) -> Any:
        """Return the value at ``index``, or None past the end."""
        if index < len(self.values):
            return self.values[index]
        return None

    def key_at(self, index: int) -> int | str | None:
        """Return the key at ``index``, or None past the end."""
        if index < len(self.keys):
            return self.keys[index]
        return None


def adapt(values: Any) -> CallValues:
    """Normalize ``values`` into a CallValues view.

    Raises:
        ArgumentsShapeError: values is not one of the accepted shapes
    """
    match values:
        case CallValues():
            return values
        case inspect.BoundArguments():
            positional = tuple(values.args)
            named = values.kwargs
            return CallValues(
                keys=(*range(len(positional)), *named.keys()),
                values=(*positional, *named.values()),
            )
        case str() | bytes() | bytearray():
            raise ArgumentsShapeError(values)
        case Sequence():
            return CallValues(keys=tuple(range(len(values))), values=tuple(values))
        case Mapping():
            return CallValues(keys=tuple(values.keys()), values=tuple(values.values()))
        case _:
            raise ArgumentsShapeError(values)
