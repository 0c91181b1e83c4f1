"""Greedy best-match alignment of two ordered sequences.

Each old element, in order, claims the unclaimed new element with the highest
``similarity`` score, provided the score exceeds ``MATCH_THRESHOLD``.  Ties go
to the lowest new index.  Unmatched old elements become REMOVED nodes; new
elements left unclaimed become ADDED nodes appended in ascending index order.

This is intentionally not an optimal bipartite assignment: the greedy,
claim-in-order behavior determines which pairs are reported on ambiguous
inputs and must stay stable.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any, Final

import numpy as np

from leven_diff.algorithm.config import DiffOptions
from leven_diff.algorithm.equality import is_equal
from leven_diff.algorithm.similarity import similarity
from leven_diff.tree.nodes import DiffKind, DiffNode

__all__ = ["MATCH_THRESHOLD", "DiffPair", "align_arrays", "similarity_matrix"]

logger = logging.getLogger(__name__)

#: A candidate pair is accepted only when its score is strictly above this.
MATCH_THRESHOLD: Final = 0.7

#: Callback diffing a matched (old, new) pair at the given child path.
DiffPair = Callable[[Any, Any, tuple[str, ...]], DiffNode]


def similarity_matrix(old: Sequence[Any], new: Sequence[Any]) -> np.ndarray:
    """Return the ``(len(old), len(new))`` matrix of pairwise similarities."""
    scores = np.zeros((len(old), len(new)), dtype=float)
    for i, old_item in enumerate(old):
        for j, new_item in enumerate(new):
            scores[i, j] = similarity(old_item, new_item)
    return scores


def align_arrays(
    old: Sequence[Any],
    new: Sequence[Any],
    options: DiffOptions,
    path: tuple[str, ...],
    diff_pair: DiffPair,
) -> tuple[DiffNode, ...]:
    """Align *old* against *new* and return one child node per outcome.

    Args:
        old: Elements of the old array.
        new: Elements of the new array.
        options: Active diff options.  With presence-only comparison the
            arrays are aligned by index instead of by similarity.
        path: Path of the array node; child paths append an index.
        diff_pair: Recursion callback used for every matched pair.

    Returns:
        Child nodes: matched/removed nodes in old order, then added nodes
        in new order.  Removed children carry their old index, the others
        their new index.
    """
    if not old and not new:
        return ()

    if is_equal(old, new):
        return tuple(
            DiffNode(
                kind=DiffKind.UNCHANGED,
                path=(*path, str(idx)),
                old_value=item,
                new_value=new[idx],
            )
            for idx, item in enumerate(old)
        )

    if not old:
        return _all_added(new, path)
    if not new:
        return _all_removed(old, path)

    if options.presence_only:
        return _align_by_index(old, new, path, diff_pair)

    return _align_by_similarity(old, new, path, diff_pair)


# ------------------------------------------------------------------
# Strategies
# ------------------------------------------------------------------


def _align_by_similarity(
    old: Sequence[Any],
    new: Sequence[Any],
    path: tuple[str, ...],
    diff_pair: DiffPair,
) -> tuple[DiffNode, ...]:
    scores = similarity_matrix(old, new)
    claimed = np.zeros(len(new), dtype=bool)
    children: list[DiffNode] = []

    for i, old_item in enumerate(old):
        candidates = np.where(claimed, -np.inf, scores[i])
        # argmax returns the first maximum: lowest index wins ties
        j = int(np.argmax(candidates))
        if candidates[j] > MATCH_THRESHOLD:
            claimed[j] = True
            children.append(diff_pair(old_item, new[j], (*path, str(j))))
        else:
            children.append(_removed(old_item, path, i))

    added = [
        _added(new[j], path, j) for j in range(len(new)) if not claimed[j]
    ]
    logger.debug(
        f"Aligned array at {list(path)}: {int(claimed.sum())} matched, "
        f"{len(children) - int(claimed.sum())} removed, {len(added)} added"
    )
    return (*children, *added)


def _align_by_index(
    old: Sequence[Any],
    new: Sequence[Any],
    path: tuple[str, ...],
    diff_pair: DiffPair,
) -> tuple[DiffNode, ...]:
    shared = min(len(old), len(new))
    children = [diff_pair(old[i], new[i], (*path, str(i))) for i in range(shared)]
    children.extend(_removed(old[i], path, i) for i in range(shared, len(old)))
    children.extend(_added(new[j], path, j) for j in range(shared, len(new)))
    return tuple(children)


# ------------------------------------------------------------------
# Node helpers
# ------------------------------------------------------------------


def _added(value: Any, path: tuple[str, ...], idx: int) -> DiffNode:
    return DiffNode(kind=DiffKind.ADDED, path=(*path, str(idx)), new_value=value)


def _removed(value: Any, path: tuple[str, ...], idx: int) -> DiffNode:
    return DiffNode(kind=DiffKind.REMOVED, path=(*path, str(idx)), old_value=value)


def _all_added(new: Sequence[Any], path: tuple[str, ...]) -> tuple[DiffNode, ...]:
    return tuple(_added(item, path, j) for j, item in enumerate(new))


def _all_removed(old: Sequence[Any], path: tuple[str, ...]) -> tuple[DiffNode, ...]:
    return tuple(_removed(item, path, i) for i, item in enumerate(old))
