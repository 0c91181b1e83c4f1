"""DiffOptions: immutable configuration threaded through every comparison.

``DiffOptions`` is a frozen dataclass.  Comparison-affecting options
(``structure_only``, ``ignore_values``, ``ignore_keys``) change the diff tree;
display options (``color``, ``full_output``, ``output_keys``,
``with_similarity``) only change how the formatter renders it.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar

from leven_diff.errors import InvalidOptionsError

__all__ = ["DiffOptions"]


def _as_key_set(name: str, value: Any) -> frozenset[str]:
    # A bare string would otherwise become a set of its characters
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        msg = f"{name} must be an iterable of str, got {value!r}"
        raise InvalidOptionsError(msg)
    keys = frozenset(value)
    for key in keys:
        if not isinstance(key, str):
            msg = f"{name} must contain only str, got {key!r}"
            raise InvalidOptionsError(msg)
    return keys


@dataclass(frozen=True, slots=True)
class DiffOptions:
    """Immutable diff configuration.

    Attributes:
        color: Emit ANSI color codes in rendered output.  Default True.
        structure_only: Compare only the presence of keys, never their values.
        full_output: Render unchanged nodes too, not only the deltas.
        output_keys: Object keys always rendered, even when unchanged.
        ignore_keys: Object keys excluded from comparison at every level.
        ignore_values: Suppress value-based change detection (presence only).
        with_similarity: Append a similarity percentage to changed strings.
    """

    color: bool = True
    structure_only: bool = False
    full_output: bool = False
    output_keys: frozenset[str] = field(default_factory=frozenset)
    ignore_keys: frozenset[str] = field(default_factory=frozenset)
    ignore_values: bool = False
    with_similarity: bool = False

    # camelCase option names (plus historical aliases) -> field names
    _ALIASES: ClassVar[dict[str, str]] = {
        "color": "color",
        "structureOnly": "structure_only",
        "keysOnly": "structure_only",
        "fullOutput": "full_output",
        "full": "full_output",
        "outputKeys": "output_keys",
        "ignoreKeys": "ignore_keys",
        "ignoreValues": "ignore_values",
        "withSimilarity": "with_similarity",
    }

    def __post_init__(self) -> None:
        for name in (
            "color",
            "structure_only",
            "full_output",
            "ignore_values",
            "with_similarity",
        ):
            value = getattr(self, name)
            if not isinstance(value, bool):
                msg = f"{name} must be a bool, got {value!r}"
                raise InvalidOptionsError(msg)
        # frozen: normalize through object.__setattr__
        object.__setattr__(
            self, "output_keys", _as_key_set("output_keys", self.output_keys)
        )
        object.__setattr__(
            self, "ignore_keys", _as_key_set("ignore_keys", self.ignore_keys)
        )

    @property
    def presence_only(self) -> bool:
        """True when values are not compared, only presence."""
        return self.structure_only or self.ignore_values

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> DiffOptions:
        """Build options from a mapping of camelCase or snake_case names.

        Accepts the camelCase names (``structureOnly``, ``fullOutput``, ...),
        the historical aliases ``keysOnly`` and ``full``, and the field names
        themselves.

        Raises:
            InvalidOptionsError: On an unknown option name or a bad value.
        """
        names = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for name, value in mapping.items():
            target = cls._ALIASES.get(name, name)
            if target not in names:
                msg = f"Unknown diff option: {name!r}"
                raise InvalidOptionsError(msg)
            kwargs[target] = value
        return cls(**kwargs)

    @classmethod
    def coerce(cls, options: DiffOptions | Mapping[str, Any] | None) -> DiffOptions:
        """Return *options* as a ``DiffOptions`` (None -> defaults)."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if isinstance(options, Mapping):
            return cls.from_mapping(options)
        msg = f"options must be DiffOptions, a mapping or None, got {options!r}"
        raise InvalidOptionsError(msg)
