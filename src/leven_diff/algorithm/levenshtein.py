"""Levenshtein edit distance between two character sequences."""

from __future__ import annotations

__all__ = ["edit_distance"]


def edit_distance(a: str, b: str) -> int:
    """Return the Levenshtein distance between *a* and *b*.

    Counts the minimum number of single-character insertions, deletions or
    substitutions needed to turn one string into the other.  The result is
    symmetric, satisfies the triangle inequality, and is zero iff ``a == b``.

    Uses a rolling-row dynamic program; the shorter string sits on the inner
    loop so only ``min(len(a), len(b)) + 1`` cells are allocated.

    Args:
        a: First string.
        b: Second string.

    Returns:
        Non-negative edit count.
    """
    if a == b:
        return 0

    if len(a) < len(b):
        a, b = b, a

    if not b:
        return len(a)

    prev_row = list(range(len(b) + 1))

    for i, ch_a in enumerate(a):
        curr_row = [i + 1] + [0] * len(b)
        for j, ch_b in enumerate(b):
            curr_row[j + 1] = min(
                curr_row[j] + 1,
                prev_row[j + 1] + 1,
                prev_row[j] + (ch_a != ch_b),
            )
        prev_row = curr_row

    return prev_row[-1]
