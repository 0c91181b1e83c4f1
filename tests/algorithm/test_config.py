"""Tests for the DiffOptions frozen dataclass.

Covers:
- Default values
- Immutability (FrozenInstanceError on assignment)
- Key-set coercion to frozenset and rejection of bare strings
- Validation of boolean flags
- from_mapping (camelCase names, historical aliases, unknown names)
- coerce and presence_only
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from leven_diff.algorithm.config import DiffOptions
from leven_diff.errors import InvalidOptionsError

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------


class TestDiffOptionsDefaults:
    def test_color_on_by_default(self) -> None:
        assert DiffOptions().color is True

    def test_flags_off_by_default(self) -> None:
        options = DiffOptions()
        assert options.structure_only is False
        assert options.full_output is False
        assert options.ignore_values is False
        assert options.with_similarity is False

    def test_key_sets_empty_by_default(self) -> None:
        options = DiffOptions()
        assert options.output_keys == frozenset()
        assert options.ignore_keys == frozenset()

    def test_not_presence_only_by_default(self) -> None:
        assert DiffOptions().presence_only is False


# ---------------------------------------------------------------------------
# Immutability and coercion
# ---------------------------------------------------------------------------


class TestDiffOptionsImmutability:
    def test_cannot_assign(self) -> None:
        options = DiffOptions()
        with pytest.raises(FrozenInstanceError):
            options.color = False  # type: ignore[misc]

    def test_key_lists_become_frozensets(self) -> None:
        options = DiffOptions(
            ignore_keys=["a", "b"],  # type: ignore[arg-type]
            output_keys=("c",),  # type: ignore[arg-type]
        )
        assert options.ignore_keys == frozenset({"a", "b"})
        assert isinstance(options.output_keys, frozenset)

    def test_equal_options_compare_equal(self) -> None:
        assert DiffOptions(ignore_keys=["a"]) == DiffOptions(  # type: ignore[arg-type]
            ignore_keys=frozenset({"a"})
        )


class TestDiffOptionsValidation:
    def test_bare_string_key_set_is_rejected(self) -> None:
        with pytest.raises(InvalidOptionsError, match="ignore_keys"):
            DiffOptions(ignore_keys="timestamp")  # type: ignore[arg-type]

    def test_non_string_key_is_rejected(self) -> None:
        with pytest.raises(InvalidOptionsError, match="output_keys"):
            DiffOptions(output_keys=[1])  # type: ignore[list-item]

    def test_non_bool_flag_is_rejected(self) -> None:
        with pytest.raises(InvalidOptionsError, match="full_output"):
            DiffOptions(full_output="yes")  # type: ignore[arg-type]

    def test_error_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            DiffOptions(color=1)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# presence_only
# ---------------------------------------------------------------------------


class TestPresenceOnly:
    def test_structure_only(self) -> None:
        assert DiffOptions(structure_only=True).presence_only is True

    def test_ignore_values(self) -> None:
        assert DiffOptions(ignore_values=True).presence_only is True

    def test_both_set(self) -> None:
        options = DiffOptions(structure_only=True, ignore_values=True)
        assert options.presence_only is True


# ---------------------------------------------------------------------------
# from_mapping / coerce
# ---------------------------------------------------------------------------


class TestFromMapping:
    def test_camel_case_names(self) -> None:
        options = DiffOptions.from_mapping(
            {
                "color": False,
                "structureOnly": True,
                "fullOutput": True,
                "outputKeys": ["name"],
                "ignoreKeys": ["ts"],
                "ignoreValues": True,
                "withSimilarity": True,
            }
        )
        assert options == DiffOptions(
            color=False,
            structure_only=True,
            full_output=True,
            output_keys=frozenset({"name"}),
            ignore_keys=frozenset({"ts"}),
            ignore_values=True,
            with_similarity=True,
        )

    def test_historical_aliases(self) -> None:
        options = DiffOptions.from_mapping({"keysOnly": True, "full": True})
        assert options.structure_only is True
        assert options.full_output is True

    def test_snake_case_names(self) -> None:
        options = DiffOptions.from_mapping({"ignore_values": True})
        assert options.ignore_values is True

    def test_unknown_name_is_rejected(self) -> None:
        with pytest.raises(InvalidOptionsError, match="colour"):
            DiffOptions.from_mapping({"colour": False})


class TestCoerce:
    def test_none_gives_defaults(self) -> None:
        assert DiffOptions.coerce(None) == DiffOptions()

    def test_instance_is_returned_as_is(self) -> None:
        options = DiffOptions(color=False)
        assert DiffOptions.coerce(options) is options

    def test_mapping_is_converted(self) -> None:
        assert DiffOptions.coerce({"ignoreKeys": ["a"]}).ignore_keys == {"a"}

    def test_other_types_are_rejected(self) -> None:
        with pytest.raises(InvalidOptionsError):
            DiffOptions.coerce(["color"])  # type: ignore[arg-type]
