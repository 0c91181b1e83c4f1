"""leven-diff - structural diff of JSON-like values with git-style output."""

from __future__ import annotations

from leven_diff.algorithm.config import DiffOptions
from leven_diff.algorithm.equality import is_equal
from leven_diff.algorithm.levenshtein import edit_distance
from leven_diff.algorithm.similarity import similarity
from leven_diff.api import compare_raw, compare_to_string, has_difference
from leven_diff.comparator import TreeComparator
from leven_diff.errors import (
    CyclicInputError,
    DiffError,
    InvalidInputKind,
    InvalidOptionsError,
)
from leven_diff.formatter import DiffFormatter
from leven_diff.tree.nodes import DiffKind, DiffMeta, DiffNode
from leven_diff.values import ABSENT

__version__: str = "0.1.0"
__all__: list[str] = [
    "ABSENT",
    "CyclicInputError",
    "DiffError",
    "DiffFormatter",
    "DiffKind",
    "DiffMeta",
    "DiffNode",
    "DiffOptions",
    "InvalidInputKind",
    "InvalidOptionsError",
    "TreeComparator",
    "compare_raw",
    "compare_to_string",
    "edit_distance",
    "has_difference",
    "is_equal",
    "similarity",
]
