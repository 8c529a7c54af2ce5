"""Schema config: JSON/YAML-shaped dicts → SchemaConfig.

Lets schemas live in data files instead of code. Accepted shape::

    schema: {name: "string", count: "opt number"}      # exactly one of
    schemas: [{...}, {...}]                              # schema / schemas
    strict: false                                        # optional

Structure is checked at load time and reported with a path-bearing
message. Type expressions are parsed eagerly, which warms the parse cache
before the first guarded call.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from argguard._errors import UsageError
from argguard._expression import parse_expression

if TYPE_CHECKING:
    from argguard._types import Schema


class ConfigParseError(UsageError):
    """Error parsing a config dict into a SchemaConfig."""


@dataclass(frozen=True, slots=True)
class SchemaConfig:
    """Parsed, read-only schema configuration.

    ``multiple`` records whether the source used the ``schemas`` list form,
    so a one-element list still resolves as a list.
    """

    schemas: tuple[Schema, ...]
    strict: bool = False
    multiple: bool = False

    @property
    def schema(self) -> Schema | list[Schema]:
        """The schema argument to pass to a guard call."""
        if self.multiple:
            return list(self.schemas)
        return self.schemas[0]


def parse_schema_config(data: dict[str, Any]) -> SchemaConfig:
    """Parse a dict into a SchemaConfig.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"expected dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    has_schema = "schema" in data
    has_schemas = "schemas" in data
    if has_schema and has_schemas:
        msg = "config has both 'schema' and 'schemas' (exactly one required)"
        raise ConfigParseError(msg)
    if not has_schema and not has_schemas:
        msg = "config missing required field 'schema' or 'schemas'"
        raise ConfigParseError(msg)

    strict = data.get("strict", False)
    if not isinstance(strict, bool):
        msg = f"'strict' must be a bool, got {type(strict).__name__}"
        raise ConfigParseError(msg)

    if has_schema:
        schemas = (_parse_schema(data["schema"], "schema"),)
        return SchemaConfig(schemas=schemas, strict=strict)

    raw = data["schemas"]
    if not isinstance(raw, list):
        msg = f"'schemas' must be a list, got {type(raw).__name__}"
        raise ConfigParseError(msg)
    if not raw:
        msg = "'schemas' must not be empty"
        raise ConfigParseError(msg)
    schemas = tuple(_parse_schema(s, f"schemas[{i}]") for i, s in enumerate(raw))
    return SchemaConfig(schemas=schemas, strict=strict, multiple=True)


def _parse_schema(data: Any, path: str) -> Schema:
    """Parse one schema mapping, validating names and expression types."""
    if not isinstance(data, dict):
        msg = f"{path} must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    for name, type_text in data.items():
        if not isinstance(name, str):
            msg = f"{path}: argument names must be strings, got {name!r}"
            raise ConfigParseError(msg)
        if not isinstance(type_text, str) or not type_text.strip():
            msg = f"{path}.{name}: type expression must be a non-empty string"
            raise ConfigParseError(msg)
        parse_expression(type_text)

    return MappingProxyType(dict(data))
