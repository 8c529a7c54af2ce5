"""Tests for type-expression evaluation (argguard._evaluator)."""

from __future__ import annotations

from typing import Any

import pytest

from argguard import BUILTIN_REGISTRY, Leaf, Verdict, evaluate


class _Counting:
    """Predicate that counts its calls."""

    def __init__(self, result: bool) -> None:
        self.result = result
        self.calls: list[Any] = []

    def __call__(self, value: Any) -> bool:
        self.calls.append(value)
        return self.result


class TestLeaf:
    def test_match(self) -> None:
        assert evaluate(BUILTIN_REGISTRY, "one", "string", "x") == Verdict(ok=True)

    def test_reason_names_argument_and_type(self) -> None:
        verdict = evaluate(BUILTIN_REGISTRY, "one", "number", "x")
        assert verdict.ok is False
        assert verdict.reason == "`one` is not number"
        assert verdict.soft is False

    def test_alias_reason_names_resolved_type(self) -> None:
        assert evaluate(BUILTIN_REGISTRY, "arg", "s", 1).reason == "`arg` is not string"

    def test_alias_to_unknown_names_last_link(self) -> None:
        registry = BUILTIN_REGISTRY.extend({"foo": "Bar"})
        assert evaluate(registry, "arg", "foo", 1).reason == "`arg` is not Bar"

    def test_unknown_name_is_reported_as_written(self) -> None:
        assert evaluate(BUILTIN_REGISTRY, "arg", "Widget", 1).reason == "`arg` is not Widget"

    def test_accepts_parsed_tree(self) -> None:
        assert evaluate(BUILTIN_REGISTRY, "one", Leaf("num"), 3).ok is True

    def test_truthy_predicate_result_is_ok(self) -> None:
        registry = BUILTIN_REGISTRY.extend({"Sized": len})
        assert evaluate(registry, "one", "Sized", [1]).ok is True
        assert evaluate(registry, "one", "Sized", []).ok is False


class TestOptional:
    @pytest.mark.parametrize("inner", ["string", "number", "num array", "Unknown", "str or num"])
    def test_none_always_valid(self, inner: str) -> None:
        assert evaluate(BUILTIN_REGISTRY, "one", f"opt {inner}", None).ok is True

    def test_present_matching_value(self) -> None:
        assert evaluate(BUILTIN_REGISTRY, "one", "opt num", 5).ok is True

    def test_present_mismatch_is_soft(self) -> None:
        verdict = evaluate(BUILTIN_REGISTRY, "one", "opt num", "x")
        assert verdict.ok is False
        assert verdict.soft is True
        assert verdict.reason == "`one` is not number"


class TestUnion:
    def test_either_branch(self) -> None:
        assert evaluate(BUILTIN_REGISTRY, "one", "str or num", "x").ok is True
        assert evaluate(BUILTIN_REGISTRY, "one", "str or num", 1).ok is True

    def test_reason_cites_both_branches_verbatim(self) -> None:
        verdict = evaluate(BUILTIN_REGISTRY, "one", "str array or num", {})
        assert verdict.reason == "`one` is neither a str array nor num"

    def test_short_circuits_on_left(self) -> None:
        left, right = _Counting(True), _Counting(True)
        registry = BUILTIN_REGISTRY.extend({"L": left, "R": right})
        assert evaluate(registry, "one", "L or R", 1).ok is True
        assert left.calls == [1]
        assert right.calls == []

    def test_tries_right_after_left_fails(self) -> None:
        left, right = _Counting(False), _Counting(True)
        registry = BUILTIN_REGISTRY.extend({"L": left, "R": right})
        assert evaluate(registry, "one", "L or R", 1).ok is True
        assert right.calls == [1]

    def test_optional_branch_rejecting_value_fails_union(self) -> None:
        """A soft optional failure inside a union still fails the union.

        Only a top-level optional entry may be skipped by the schema matcher.
        """
        verdict = evaluate(BUILTIN_REGISTRY, "one", "str or opt num", {})
        assert verdict.ok is False
        assert verdict.soft is False
        assert verdict.reason == "`one` is neither a str nor opt num"

    def test_optional_branch_accepts_none(self) -> None:
        assert evaluate(BUILTIN_REGISTRY, "one", "str or opt num", None).ok is True


class TestArray:
    def test_every_element_checked(self) -> None:
        assert evaluate(BUILTIN_REGISTRY, "nums", "number array", [1, 2, 3]).ok is True
        assert evaluate(BUILTIN_REGISTRY, "nums", "number array", (1, 2)).ok is True

    def test_not_an_array_uses_array_leaf_reason(self) -> None:
        verdict = evaluate(BUILTIN_REGISTRY, "nums", "number array", "123")
        assert verdict.reason == "`nums` is not array"

    def test_element_reason(self) -> None:
        verdict = evaluate(BUILTIN_REGISTRY, "nums", "number array", [1, None])
        assert verdict.reason == "`nums` element is falsy or not a number"

    def test_short_circuits_on_first_bad_element(self) -> None:
        member = _Counting(False)
        registry = BUILTIN_REGISTRY.extend({"M": member})
        assert evaluate(registry, "one", "M array", [1, 2, 3]).ok is False
        assert member.calls == [1]

    def test_array_of_arrays(self) -> None:
        assert evaluate(BUILTIN_REGISTRY, "one", "num array array", [[1], [], [2, 3]]).ok is True
        assert evaluate(BUILTIN_REGISTRY, "one", "num array array", [[1], 2]).ok is False

    def test_array_check_goes_through_registry(self) -> None:
        registry = BUILTIN_REGISTRY.extend({"array": lambda v: isinstance(v, list)})
        assert evaluate(registry, "one", "num array", (1,)).ok is False
        assert evaluate(registry, "one", "num array", [1]).ok is True
