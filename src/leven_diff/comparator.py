"""Tree comparator: recursive diff of two values into a DiffNode tree.

Dispatch order for a pair of values:

1. both absent              -> UNCHANGED placeholder
2. only the new value       -> ADDED
3. only the old value       -> REMOVED
4. primitive vs container   -> CHANGED leaf (null counts as a primitive)
5. two primitives           -> UNCHANGED or CHANGED leaf; changed string
                               pairs get edit-distance/similarity metadata
6. two arrays               -> children from ``align_arrays``
7. two objects              -> one child per key in the key union, minus
                               ``ignore_keys``
8. array vs object          -> CHANGED leaf (opaque value swap)

With presence-only comparison (``structure_only`` or ``ignore_values``) every
pair present on both sides that is not two same-shaped containers is
UNCHANGED with ``meta.ignored`` set.

The options object is passed explicitly through every recursive call; the
comparator keeps no state between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import partial
from typing import Any

from leven_diff.algorithm.aligner import align_arrays
from leven_diff.algorithm.config import DiffOptions
from leven_diff.algorithm.equality import is_equal
from leven_diff.algorithm.levenshtein import edit_distance
from leven_diff.algorithm.similarity import string_similarity
from leven_diff.tree.nodes import DiffKind, DiffMeta, DiffNode
from leven_diff.values import (
    ABSENT,
    CONTAINER_KINDS,
    ValueKind,
    kind_of,
    validate_value,
)

__all__ = ["TreeComparator", "compare"]

logger = logging.getLogger(__name__)

_IGNORED = DiffMeta(ignored=True)


def compare(
    old_value: Any,
    new_value: Any,
    options: DiffOptions,
    path: tuple[str, ...] = (),
) -> DiffNode:
    """Diff *old_value* against *new_value* at *path*.

    Inputs are assumed to be validated (see ``validate_value``); the
    function is total over the value domain.

    Args:
        old_value: The old value, or ``ABSENT``.
        new_value: The new value, or ``ABSENT``.
        options: Active diff options.
        path: Path of this node from the comparison root.

    Returns:
        A new, immutable ``DiffNode``.
    """
    if old_value is ABSENT and new_value is ABSENT:
        return DiffNode(kind=DiffKind.UNCHANGED, path=path)
    if old_value is ABSENT:
        return DiffNode(kind=DiffKind.ADDED, path=path, new_value=new_value)
    if new_value is ABSENT:
        return DiffNode(kind=DiffKind.REMOVED, path=path, old_value=old_value)

    old_kind = kind_of(old_value)
    new_kind = kind_of(new_value)
    old_is_container = old_kind in CONTAINER_KINDS
    new_is_container = new_kind in CONTAINER_KINDS

    if not (old_is_container and new_is_container):
        return _compare_leaves(
            old_value, new_value, old_kind, new_kind, options, path
        )

    if old_kind != new_kind:
        if options.presence_only:
            return _ignored(old_value, new_value, path)
        return DiffNode(
            kind=DiffKind.CHANGED, path=path, old_value=old_value, new_value=new_value
        )

    if old_kind == ValueKind.ARRAY:
        children = align_arrays(
            old_value,
            new_value,
            options,
            path,
            partial(_compare_child, options=options),
        )
    else:
        children = _compare_objects(old_value, new_value, options, path)

    changed = any(child.kind != DiffKind.UNCHANGED for child in children)
    return DiffNode(
        kind=DiffKind.CHANGED if changed else DiffKind.UNCHANGED,
        path=path,
        old_value=old_value,
        new_value=new_value,
        children=children,
    )


def _compare_child(
    old_value: Any, new_value: Any, path: tuple[str, ...], *, options: DiffOptions
) -> DiffNode:
    return compare(old_value, new_value, options, path)


def _compare_leaves(
    old_value: Any,
    new_value: Any,
    old_kind: ValueKind,
    new_kind: ValueKind,
    options: DiffOptions,
    path: tuple[str, ...],
) -> DiffNode:
    if options.presence_only:
        return _ignored(old_value, new_value, path)

    if is_equal(old_value, new_value):
        return DiffNode(
            kind=DiffKind.UNCHANGED, path=path, old_value=old_value, new_value=new_value
        )

    meta = None
    if old_kind == ValueKind.STRING and new_kind == ValueKind.STRING:
        distance = edit_distance(old_value, new_value)
        meta = DiffMeta(
            edit_distance=distance,
            similarity=string_similarity(old_value, new_value, distance),
        )
    return DiffNode(
        kind=DiffKind.CHANGED,
        path=path,
        old_value=old_value,
        new_value=new_value,
        meta=meta,
    )


def _compare_objects(
    old_obj: Mapping[str, Any],
    new_obj: Mapping[str, Any],
    options: DiffOptions,
    path: tuple[str, ...],
) -> tuple[DiffNode, ...]:
    # Old key order first, then keys only present in the new object
    keys = [key for key in old_obj if key not in options.ignore_keys]
    keys.extend(
        key for key in new_obj if key not in old_obj and key not in options.ignore_keys
    )
    return tuple(
        compare(
            old_obj.get(key, ABSENT),
            new_obj.get(key, ABSENT),
            options,
            (*path, key),
        )
        for key in keys
    )


def _ignored(old_value: Any, new_value: Any, path: tuple[str, ...]) -> DiffNode:
    return DiffNode(
        kind=DiffKind.UNCHANGED,
        path=path,
        old_value=old_value,
        new_value=new_value,
        meta=_IGNORED,
    )


class TreeComparator:
    """Stateless diff engine bound to one ``DiffOptions`` value.

    Validates both inputs once (unsupported types and cycles fail fast with
    ``InvalidInputKind``), then runs the recursive ``compare``.

    Example::

        from leven_diff.comparator import TreeComparator

        cmp = TreeComparator()
        node = cmp.compare({"foo": "bar"}, {"foo": "baz"})
        node.kind                 # DiffKind.CHANGED
        node.children[0].path     # ("foo",)
    """

    def __init__(self, options: DiffOptions | None = None) -> None:
        self._options = options if options is not None else DiffOptions()

    @property
    def options(self) -> DiffOptions:
        return self._options

    def compare(self, old_value: Any, new_value: Any) -> DiffNode:
        """Validate both values and return their diff tree."""
        validate_value(old_value)
        validate_value(new_value)
        node = compare(old_value, new_value, self._options)
        logger.debug(f"Compared values: root kind={node.kind}")
        return node

