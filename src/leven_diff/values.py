"""Value domain shared by every component of the diff engine.

A comparable value is one of: ``str``, a real number, ``bool``, ``None``,
the ``ABSENT`` marker, a list/tuple of values, or a mapping from ``str`` keys
to values.  ``None`` (an explicit null) and ``ABSENT`` (no value at all, e.g.
a missing key) are deliberately distinct.
"""

from __future__ import annotations

import numbers
from collections.abc import Mapping
from enum import StrEnum, auto
from typing import Any, Final

from leven_diff.errors import CyclicInputError, InvalidInputKind

__all__ = [
    "ABSENT",
    "CONTAINER_KINDS",
    "ValueKind",
    "kind_of",
    "validate_value",
]


class _AbsentType:
    """Type of the ``ABSENT`` singleton."""

    _instance: _AbsentType | None = None

    def __new__(cls) -> _AbsentType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "ABSENT"


#: Marker for "no value present"; distinct from ``None``.
ABSENT: Final = _AbsentType()


class ValueKind(StrEnum):
    """Classification of a comparable value.

    - ABSENT  -> "absent"  : no value present
    - NULL    -> "null"    : ``None``
    - BOOLEAN -> "boolean" : ``True`` / ``False``
    - NUMBER  -> "number"  : ``int`` / ``float`` / other ``numbers.Real``
    - STRING  -> "string"  : ``str``
    - ARRAY   -> "array"   : ``list`` / ``tuple``
    - OBJECT  -> "object"  : ``Mapping`` with ``str`` keys
    """

    ABSENT = auto()
    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()


CONTAINER_KINDS: Final = frozenset({ValueKind.ARRAY, ValueKind.OBJECT})


def kind_of(value: Any) -> ValueKind:
    """Classify *value* into a ``ValueKind``.

    Raises:
        InvalidInputKind: If *value* is not part of the value domain.
    """
    # bool MUST be checked before numbers: bool subclasses int
    if value is ABSENT:
        return ValueKind.ABSENT
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, numbers.Real):
        return ValueKind.NUMBER
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, Mapping):
        return ValueKind.OBJECT
    raise InvalidInputKind(
        f"Unsupported value type: {type(value)!r}", value_type=type(value)
    )


def validate_value(value: Any) -> None:
    """Check that *value* is a well-formed, acyclic comparable value.

    Walks the whole value once.  Mapping keys must be strings and no
    container may appear inside itself.

    Raises:
        InvalidInputKind: On an unsupported type or a non-string key.
        CyclicInputError: When a container is reachable from itself.
    """
    _validate(value, (), set())


def _validate(value: Any, path: tuple[str, ...], active: set[int]) -> None:
    try:
        kind = kind_of(value)
    except InvalidInputKind as exc:
        raise InvalidInputKind(
            f"Unsupported value type {type(value).__name__!r} at path {list(path)}",
            path=path,
            value_type=type(value),
        ) from exc

    if kind not in CONTAINER_KINDS:
        return

    marker = id(value)
    if marker in active:
        raise CyclicInputError(
            f"Cyclic reference detected at path {list(path)}",
            path=path,
            value_type=type(value),
        )
    active.add(marker)
    try:
        if kind == ValueKind.ARRAY:
            for idx, item in enumerate(value):
                _validate(item, (*path, str(idx)), active)
        else:
            for key, item in value.items():
                if not isinstance(key, str):
                    raise InvalidInputKind(
                        f"Object keys must be str, got {type(key).__name__!r} "
                        f"at path {list(path)}",
                        path=path,
                        value_type=type(key),
                    )
                _validate(item, (*path, key), active)
    finally:
        active.discard(marker)
