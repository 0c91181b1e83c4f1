"""Deep, order-sensitive, type-sensitive structural equality."""

from __future__ import annotations

from typing import Any

from leven_diff.values import ValueKind, kind_of

__all__ = ["is_equal"]


def is_equal(a: Any, b: Any) -> bool:
    """Return True if *a* and *b* are structurally equal.

    - Identical objects are equal.
    - ``None`` and ``ABSENT`` are each equal only to themselves.
    - Values of different kinds are never equal (``1 != True``, ``"1" != 1``).
    - Arrays must have equal length and equal elements at every index.
    - Objects must have the same key set and equal values per key; key order
      is irrelevant.
    - Other primitives compare with ``==`` (so ``1 == 1.0``).
    """
    if a is b:
        return True

    kind_a = kind_of(a)
    if kind_a != kind_of(b):
        return False

    if kind_a == ValueKind.ARRAY:
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b, strict=True))

    if kind_a == ValueKind.OBJECT:
        if len(a) != len(b):
            return False
        for key, value in a.items():
            if key not in b:
                return False
            if not is_equal(value, b[key]):
                return False
        return True

    # NULL and ABSENT are singletons already handled by the identity check
    if kind_a in (ValueKind.NULL, ValueKind.ABSENT):
        return True

    return bool(a == b)
