"""Tests for input classification."""

from __future__ import annotations

from decimal import Decimal

import pytest

from fluentval.domain.inputs import MISSING, InputKind, classify, runtime_type_name


class _Text(str):
    pass


class TestClassify:
    def test_string(self) -> None:
        candidate = classify("abc")
        assert candidate.kind is InputKind.STRING
        assert candidate.text == "abc"

    def test_empty_string_is_a_string(self) -> None:
        assert classify("").kind is InputKind.STRING

    def test_str_subclass_is_a_string(self) -> None:
        value = _Text("abc")
        candidate = classify(value)
        assert candidate.kind is InputKind.STRING
        assert candidate.text is value

    def test_none_is_null(self) -> None:
        candidate = classify(None)
        assert candidate.kind is InputKind.NULL
        assert candidate.type_name == "null"
        assert candidate.text is None

    def test_no_argument_is_absent(self) -> None:
        candidate = classify()
        assert candidate.kind is InputKind.ABSENT
        assert candidate.type_name == "undefined"

    def test_missing_sentinel_is_absent(self) -> None:
        assert classify(MISSING).kind is InputKind.ABSENT

    def test_other(self) -> None:
        candidate = classify(42)
        assert candidate.kind is InputKind.OTHER
        assert candidate.type_name == "number"


class TestRuntimeTypeName:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (42, "number"),
            (3.5, "number"),
            (Decimal("1.5"), "number"),
            (True, "boolean"),
            (False, "boolean"),
            (len, "function"),
            (lambda: None, "function"),
            ([1, 2], "list"),
            ({"a": 1}, "dict"),
            (b"abc", "bytes"),
            (object(), "object"),
        ],
    )
    def test_names(self, value: object, expected: str) -> None:
        assert runtime_type_name(value) == expected


class TestMissing:
    def test_singleton(self) -> None:
        assert type(MISSING)() is MISSING

    def test_falsy(self) -> None:
        assert not MISSING

    def test_repr(self) -> None:
        assert repr(MISSING) == "MISSING"
