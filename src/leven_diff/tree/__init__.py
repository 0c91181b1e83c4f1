"""Tree subpackage: the typed diff tree.

Re-exports:
- DiffKind: StrEnum of the four change kinds
- DiffMeta: edit-distance/similarity/ignored metadata
- DiffNode: frozen node of the diff tree
"""

from leven_diff.tree.nodes import DiffKind, DiffMeta, DiffNode

__all__ = ["DiffKind", "DiffMeta", "DiffNode"]
