"""DiffKind StrEnum, DiffMeta and DiffNode: the typed diff tree.

A ``DiffNode`` is the result of comparing two values at one path.  Nodes are
frozen; children are stored as tuples so a returned tree can never be mutated
by a later comparison.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from leven_diff.values import ABSENT

__all__ = ["DiffKind", "DiffMeta", "DiffNode"]


class DiffKind(StrEnum):
    """How a value changed between the old and the new revision.

    - ADDED     -> "added"     : present only in the new value
    - REMOVED   -> "removed"   : present only in the old value
    - CHANGED   -> "changed"   : present in both, different
    - UNCHANGED -> "unchanged" : present in both, equal (or not compared)
    """

    ADDED = auto()
    REMOVED = auto()
    CHANGED = auto()
    UNCHANGED = auto()


@dataclass(frozen=True, slots=True)
class DiffMeta:
    """Auxiliary data attached to a DiffNode.

    Attributes:
        edit_distance: Levenshtein distance, for changed string pairs.
        similarity: Similarity in [0, 1], for changed string pairs.
        ignored: True when the pair was deliberately not compared
            (presence-only comparison) but kept for display.
    """

    edit_distance: int | None = None
    similarity: float | None = None
    ignored: bool = False

    def as_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.edit_distance is not None:
            data["editDistance"] = self.edit_distance
        if self.similarity is not None:
            data["similarity"] = self.similarity
        if self.ignored:
            data["ignored"] = True
        return data


@dataclass(frozen=True, slots=True)
class DiffNode:
    """One node of a diff tree.

    Attributes:
        kind: ADDED, REMOVED, CHANGED or UNCHANGED.
        path: Keys/indices (as strings) from the comparison root; root is ().
        old_value: The old value, or ``ABSENT`` (always ``ABSENT`` for ADDED).
        new_value: The new value, or ``ABSENT`` (always ``ABSENT`` for REMOVED).
        children: Child nodes for array/object comparisons; ``None`` for
            leaves.  An empty tuple means two empty containers were compared.
        meta: Optional ``DiffMeta``.
    """

    kind: DiffKind
    path: tuple[str, ...] = ()
    old_value: Any = ABSENT
    new_value: Any = ABSENT
    children: tuple[DiffNode, ...] | None = None
    meta: DiffMeta | None = None

    def __post_init__(self) -> None:
        if self.kind == DiffKind.ADDED:
            if self.old_value is not ABSENT:
                msg = f"ADDED node must not carry an old value, got {self.old_value!r}"
                raise ValueError(msg)
            if self.new_value is ABSENT:
                msg = "ADDED node requires a new value"
                raise ValueError(msg)
        if self.kind == DiffKind.REMOVED:
            if self.new_value is not ABSENT:
                msg = f"REMOVED node must not carry a new value, got {self.new_value!r}"
                raise ValueError(msg)
            if self.old_value is ABSENT:
                msg = "REMOVED node requires an old value"
                raise ValueError(msg)
        if self.kind == DiffKind.CHANGED and (
            self.old_value is ABSENT or self.new_value is ABSENT
        ):
            msg = "CHANGED node requires both an old and a new value"
            raise ValueError(msg)
        if self.children is not None:
            if not isinstance(self.children, tuple):
                object.__setattr__(self, "children", tuple(self.children))
            depth = len(self.path) + 1
            for child in self.children:
                if len(child.path) != depth or child.path[:-1] != self.path:
                    msg = (
                        f"child path {list(child.path)} does not extend "
                        f"parent path {list(self.path)} by one segment"
                    )
                    raise ValueError(msg)

    # ------------------------------------------------------------------
    # Convenience accessors
    # ------------------------------------------------------------------

    @property
    def key(self) -> str | None:
        """Last path segment (object key or array index), None at the root."""
        return self.path[-1] if self.path else None

    @property
    def is_leaf(self) -> bool:
        """True when the node has no children collection at all."""
        return self.children is None

    @property
    def has_changes(self) -> bool:
        return self.kind != DiffKind.UNCHANGED

    def as_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable mapping of this subtree.

        Absent values, missing children and empty metadata are omitted.
        """
        data: dict[str, Any] = {"kind": str(self.kind), "path": list(self.path)}
        if self.old_value is not ABSENT:
            data["oldValue"] = self.old_value
        if self.new_value is not ABSENT:
            data["newValue"] = self.new_value
        if self.children is not None:
            data["children"] = [child.as_dict() for child in self.children]
        if self.meta is not None:
            meta = self.meta.as_dict()
            if meta:
                data["meta"] = meta
        return data
