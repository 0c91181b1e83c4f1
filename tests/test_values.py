"""Tests for the value domain: ABSENT, ValueKind, kind_of, validate_value."""

from __future__ import annotations

import copy
import pickle
from collections import OrderedDict
from fractions import Fraction
from types import MappingProxyType

import pytest

from leven_diff.errors import CyclicInputError, InvalidInputKind
from leven_diff.values import ABSENT, ValueKind, kind_of, validate_value


class TestAbsent:
    def test_is_falsy(self) -> None:
        assert not ABSENT

    def test_repr(self) -> None:
        assert repr(ABSENT) == "ABSENT"

    def test_is_not_none(self) -> None:
        assert ABSENT is not None
        assert ABSENT != None  # noqa: E711

    def test_singleton_survives_copy_and_pickle(self) -> None:
        assert copy.deepcopy(ABSENT) is ABSENT
        assert pickle.loads(pickle.dumps(ABSENT)) is ABSENT


class TestKindOf:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (ABSENT, ValueKind.ABSENT),
            (None, ValueKind.NULL),
            (True, ValueKind.BOOLEAN),
            (False, ValueKind.BOOLEAN),
            (0, ValueKind.NUMBER),
            (1.5, ValueKind.NUMBER),
            (Fraction(1, 3), ValueKind.NUMBER),
            ("", ValueKind.STRING),
            ([], ValueKind.ARRAY),
            ((1, 2), ValueKind.ARRAY),
            ({}, ValueKind.OBJECT),
            (OrderedDict(a=1), ValueKind.OBJECT),
            (MappingProxyType({"a": 1}), ValueKind.OBJECT),
        ],
    )
    def test_classification(self, value: object, expected: ValueKind) -> None:
        assert kind_of(value) == expected

    def test_bool_is_not_a_number(self) -> None:
        assert kind_of(True) != ValueKind.NUMBER

    @pytest.mark.parametrize("value", [object(), {1, 2}, b"bytes", len, 1j])
    def test_unsupported_types_raise(self, value: object) -> None:
        with pytest.raises(InvalidInputKind):
            kind_of(value)


class TestValidateValue:
    def test_accepts_nested_json_like_values(self) -> None:
        validate_value({"a": [1, 2.5, None, True, {"b": "c"}], "d": ()})

    def test_reports_path_of_unsupported_value(self) -> None:
        with pytest.raises(InvalidInputKind) as exc_info:
            validate_value({"a": [1, object()]})
        assert exc_info.value.path == ("a", "1")
        assert exc_info.value.value_type is object

    def test_rejects_non_string_keys(self) -> None:
        with pytest.raises(InvalidInputKind, match="keys must be str"):
            validate_value({"a": {1: "x"}})

    def test_error_is_a_type_error(self) -> None:
        with pytest.raises(TypeError):
            validate_value({1, 2})

    def test_detects_self_containing_list(self) -> None:
        value: list[object] = []
        value.append(value)
        with pytest.raises(CyclicInputError):
            validate_value(value)

    def test_detects_indirect_cycle(self) -> None:
        inner: dict[str, object] = {}
        outer = {"inner": inner}
        inner["outer"] = outer
        with pytest.raises(CyclicInputError) as exc_info:
            validate_value(outer)
        assert exc_info.value.path == ("inner", "outer")

    def test_shared_subvalue_is_not_a_cycle(self) -> None:
        shared = [1, 2]
        validate_value({"a": shared, "b": shared, "c": [shared, shared]})
