"""algorithm subpackage: the building blocks of the diff engine.

Provides the edit distance, the similarity metric, structural equality, the
greedy array aligner and the options object.  Import from this module (not
from sub-modules directly) to stay on the stable public interface.

Example::

    from leven_diff.algorithm import similarity, is_equal

    similarity("hello", "hallo")   # 0.8
    is_equal({"a": [1, 2]}, {"a": [1, 2]})   # True
"""

from __future__ import annotations

from leven_diff.algorithm.aligner import MATCH_THRESHOLD, align_arrays
from leven_diff.algorithm.config import DiffOptions
from leven_diff.algorithm.equality import is_equal
from leven_diff.algorithm.levenshtein import edit_distance
from leven_diff.algorithm.similarity import similarity

__all__ = [
    "MATCH_THRESHOLD",
    "DiffOptions",
    "align_arrays",
    "edit_distance",
    "is_equal",
    "similarity",
]
