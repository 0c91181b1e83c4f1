"""Exception hierarchy for leven-diff.

The diff core is total over well-formed values; these exceptions only
surface when a caller breaks the input contract.

Hierarchy::

    DiffError
    ├── InvalidInputKind (also a TypeError)
    │   └── CyclicInputError
    └── InvalidOptionsError (also a ValueError)
"""

from __future__ import annotations

__all__ = [
    "CyclicInputError",
    "DiffError",
    "InvalidInputKind",
    "InvalidOptionsError",
]


class DiffError(Exception):
    """Base class for every error raised by leven-diff.

    Attributes:
        message: Human-readable description of the error.
        original_error: The wrapped exception that caused this one, if any.
    """

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class InvalidInputKind(DiffError, TypeError):
    """A compared value lies outside the supported value domain.

    Supported values are ``str``, real numbers, ``bool``, ``None``, lists or
    tuples of values, and mappings from ``str`` to values.

    Attributes:
        path: Key/index path from the comparison root to the offending value.
        value_type: ``type()`` of the offending value.
    """

    def __init__(
        self,
        message: str,
        path: tuple[str, ...] = (),
        value_type: type | None = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.value_type = value_type


class CyclicInputError(InvalidInputKind):
    """A container value contains itself, directly or through descendants."""


class InvalidOptionsError(DiffError, ValueError):
    """Diff options were malformed (unknown name or wrong type)."""
