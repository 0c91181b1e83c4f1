"""Normalized similarity score between two comparable values.

The score lies in [0, 1]; 1.0 means identical.  It is used by the array
aligner to decide which old element corresponds to which new element.

Per-kind rules:

- strings:  ``1 - edit_distance(a, b) / max(len(a), len(b))``
- numbers:  ``1 - |a - b| / (2 * max(|a|, |b|))``
- booleans: 1.0 if equal else 0.0
- arrays:   ``(sum of positional similarities / max_len) * (min_len / max_len)``
- objects:  ``(sum of shared-key similarities / union) * (shared / union)``

Null, absent and kind mismatches score 0.0 unless the values are equal.
"""

from __future__ import annotations

import math
import numbers
from fractions import Fraction
from typing import Any

from leven_diff.algorithm.equality import is_equal
from leven_diff.algorithm.levenshtein import edit_distance
from leven_diff.values import CONTAINER_KINDS, ValueKind, kind_of

__all__ = ["similarity", "string_similarity"]


def string_similarity(a: str, b: str, distance: int | None = None) -> float:
    """Similarity of two strings derived from their edit distance.

    Args:
        a: First string.
        b: Second string.
        distance: Precomputed ``edit_distance(a, b)``, if the caller has it.

    Returns:
        Float in [0.0, 1.0]; two empty strings score 1.0.
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    if distance is None:
        distance = edit_distance(a, b)
    return 1.0 - distance / longest


def similarity(a: Any, b: Any) -> float:
    """Compute how alike *a* and *b* are, as a float in [0.0, 1.0].

    Total over the value domain: never raises for supported values.
    """
    if a is b:
        return 1.0

    kind_a = kind_of(a)
    kind_b = kind_of(b)

    if kind_a not in CONTAINER_KINDS and kind_a == kind_b and is_equal(a, b):
        return 1.0
    if kind_a in (ValueKind.NULL, ValueKind.ABSENT) or kind_b in (
        ValueKind.NULL,
        ValueKind.ABSENT,
    ):
        return 0.0
    if kind_a != kind_b:
        return 0.0

    if kind_a == ValueKind.STRING:
        return string_similarity(a, b)
    if kind_a == ValueKind.NUMBER:
        return _number_similarity(a, b)
    if kind_a == ValueKind.BOOLEAN:
        return 1.0 if a == b else 0.0
    if kind_a == ValueKind.ARRAY:
        return _array_similarity(a, b)
    if kind_a == ValueKind.OBJECT:
        return _object_similarity(a, b)

    return 1.0 if is_equal(a, b) else 0.0


def _is_finite(value: float) -> bool:
    # Rationals (ints included) are always finite; math.isfinite would
    # convert them to float and overflow above ~1e308
    return isinstance(value, numbers.Rational) or math.isfinite(value)


def _number_similarity(a: float, b: float) -> float:
    # inf/nan break the ratio; only exact equality (handled above) scores
    if not (_is_finite(a) and _is_finite(b)):
        return 0.0
    # Exact arithmetic: huge ints mixed with floats must not overflow
    left, right = Fraction(a), Fraction(b)
    largest = max(abs(left), abs(right))
    if largest == 0:
        return 1.0
    score = 1 - abs(left - right) / (2 * largest)
    return float(min(Fraction(1), max(Fraction(0), score)))


def _array_similarity(a: Any, b: Any) -> float:
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0

    shortest = min(len(a), len(b))
    longest = max(len(a), len(b))
    total = sum(similarity(a[i], b[i]) for i in range(shortest))
    return (total / longest) * (shortest / longest)


def _object_similarity(a: Any, b: Any) -> float:
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0

    union = set(a) | set(b)
    shared = [key for key in a if key in b]
    total = sum(similarity(a[key], b[key]) for key in shared)
    return (total / len(union)) * (len(shared) / len(union))
