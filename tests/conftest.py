"""Conformance fixture loader for argguard.

Loads YAML fixtures from tests/fixtures/ and converts them to SchemaConfig
plus expected outcomes for parametrized testing.

Fixture document shape::

    name: basic
    schema: {one: string}          # or schemas: [...]
    strict: false                  # optional
    cases:
      - name: all given
        values: ["x"]              # list or mapping
        expect: {parsed: {one: x}} # or {fail: "`one` is not string"}
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest
import yaml

from argguard import SchemaConfig, get_assertion, parse_schema_config, set_assertion

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures"


@dataclass
class FixtureCase:
    """A single case from a conformance fixture."""

    fixture_name: str
    case_name: str
    config: SchemaConfig
    values: Any
    parsed: dict[str, Any] | None
    fail: str | None

    @property
    def id(self) -> str:
        return f"{self.fixture_name}::{self.case_name}"


# ─── Fixture loading ────────────────────────────────────────────────────────


def load_fixtures() -> list[FixtureCase]:
    """Load every fixture document under FIXTURE_DIR, in file order."""
    cases: list[FixtureCase] = []
    for yaml_file in sorted(FIXTURE_DIR.glob("*.yaml")):
        cases.extend(_load_file(yaml_file))
    return cases


def _load_file(path: Path) -> list[FixtureCase]:
    """Load a single fixture YAML file (may contain multiple documents)."""
    cases: list[FixtureCase] = []
    with path.open() as f:
        for doc in yaml.safe_load_all(f):
            if doc is None:
                continue
            fixture_name = doc.pop("name")
            raw_cases = doc.pop("cases")
            config = parse_schema_config(doc)
            for case in raw_cases:
                expect = case["expect"]
                if "parsed" not in expect and "fail" not in expect:
                    msg = f"{path.name}/{fixture_name}/{case['name']}: expect needs parsed or fail"
                    raise ValueError(msg)
                cases.append(
                    FixtureCase(
                        fixture_name=fixture_name,
                        case_name=case["name"],
                        config=config,
                        values=case["values"],
                        parsed=expect.get("parsed"),
                        fail=expect.get("fail"),
                    )
                )
    return cases


# ─── Shared fixtures ────────────────────────────────────────────────────────


@pytest.fixture
def restore_assertion():
    """Restore the process-wide assertion strategy after the test."""
    previous = get_assertion()
    yield
    set_assertion(previous)
