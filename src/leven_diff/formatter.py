"""DiffFormatter: render a DiffNode tree as an indented, git-style string.

Layout rules:

- Containers render as ``{ ... }`` / ``[ ... ]`` blocks, two spaces of
  indentation per nesting level; object children are labelled ``key: ``.
- Every child line starts with a two-character marker: ``+ `` (added),
  ``- `` (removed) or two spaces (unchanged, nested block).
- A changed leaf renders its new value (``+``) first, then its old value
  (``-``).
- Unchanged nodes are only rendered when ``full_output`` is set or, for
  object children, when their key is listed in ``output_keys``.
- Empty containers, or containers with no visible child, render inline as
  ``{}`` / ``[]``.
"""

from __future__ import annotations

import json
import math
import numbers
from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from leven_diff.algorithm.config import DiffOptions
from leven_diff.tree.nodes import DiffKind, DiffNode
from leven_diff.values import ABSENT, ValueKind, kind_of

__all__ = ["AnsiColor", "DiffFormatter", "format_diff", "format_value"]

_INDENT = "  "


class AnsiColor(StrEnum):
    """ANSI escape sequences used for colorized output."""

    RESET = "\x1b[0m"
    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    DIM = "\x1b[2m"
    GRAY = "\x1b[90m"


def _json_default(value: Any) -> Any:
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        return float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def format_value(value: Any) -> str:
    """Render a single value.

    Strings are double-quoted (JSON escaping), ``None`` is ``null``,
    ``ABSENT`` is ``undefined``, booleans are ``true``/``false``, and
    containers become a two-space-indented JSON block.
    """
    kind = kind_of(value)
    if kind == ValueKind.ABSENT:
        return "undefined"
    if kind == ValueKind.NULL:
        return "null"
    if kind == ValueKind.BOOLEAN:
        return "true" if value else "false"
    if kind == ValueKind.NUMBER:
        return str(value)
    return json.dumps(value, indent=2, ensure_ascii=False, default=_json_default)


class DiffFormatter:
    """Renders diff trees according to one ``DiffOptions`` value.

    Output is deterministic: children are emitted in the order the
    comparator produced them, and no other ordering is involved.
    """

    def __init__(self, options: DiffOptions | None = None) -> None:
        self._options = options if options is not None else DiffOptions()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def format(self, node: DiffNode) -> str:
        """Render *node* and its visible descendants.

        Returns the empty string for an unchanged primitive root that is not
        retained by ``full_output``.
        """
        if node.children is not None:
            return "\n".join(self._block(node, 0, ""))
        if node.kind == DiffKind.UNCHANGED and not self._options.full_output:
            return ""
        return "\n".join(self._leaf(node, 0, ""))

    # ------------------------------------------------------------------
    # Visibility
    # ------------------------------------------------------------------

    def _is_visible(self, child: DiffNode, in_object: bool) -> bool:
        if child.kind != DiffKind.UNCHANGED or self._options.full_output:
            return True
        return in_object and child.key in self._options.output_keys

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _block(self, node: DiffNode, level: int, label: str) -> list[str]:
        is_array = kind_of(node.new_value) == ValueKind.ARRAY
        opener, closer = ("[", "]") if is_array else ("{", "}")
        lead = "" if level == 0 else _INDENT * level + "  "

        children = node.children or ()
        visible = [c for c in children if self._is_visible(c, not is_array)]
        if not visible:
            return [f"{lead}{label}{opener}{closer}"]

        lines = [f"{lead}{label}{opener}"]
        for child in visible:
            child_label = "" if is_array else f"{child.key}: "
            if child.children is not None and (
                child.kind != DiffKind.UNCHANGED or self._options.full_output
            ):
                lines.extend(self._block(child, level + 1, child_label))
            else:
                lines.extend(self._leaf(child, level + 1, child_label))
        lines.append(f"{lead}{closer}")
        return lines

    def _leaf(self, node: DiffNode, level: int, label: str) -> list[str]:
        pad = _INDENT * level
        if node.kind == DiffKind.ADDED:
            return [self._line(pad, "+", label, node.new_value, AnsiColor.GREEN)]
        if node.kind == DiffKind.REMOVED:
            return [self._line(pad, "-", label, node.old_value, AnsiColor.RED)]
        if node.kind == DiffKind.CHANGED:
            return [
                self._line(
                    pad,
                    "+",
                    label,
                    node.new_value,
                    AnsiColor.GREEN,
                    suffix=self._similarity_suffix(node),
                ),
                self._line(pad, "-", label, node.old_value, AnsiColor.RED),
            ]
        value = node.new_value if node.new_value is not ABSENT else node.old_value
        return [self._line(pad, " ", label, value, AnsiColor.DIM)]

    def _line(
        self,
        pad: str,
        sign: str,
        label: str,
        value: Any,
        color: AnsiColor,
        suffix: str = "",
    ) -> str:
        # Continuation lines of a multi-line value stay under the label
        body = format_value(value).replace("\n", "\n" + pad + "  ")
        if not self._options.color:
            return f"{pad}{sign} {label}{body}{suffix}"
        if suffix:
            suffix = f"{AnsiColor.GRAY}{suffix}"
        return f"{pad}{color}{sign} {label}{body}{suffix}{AnsiColor.RESET}"

    def _similarity_suffix(self, node: DiffNode) -> str:
        if not self._options.with_similarity:
            return ""
        if node.meta is None or node.meta.similarity is None:
            return ""
        # Half-up rounding: 0.125 -> 13%
        percent = math.floor(node.meta.similarity * 100 + 0.5)
        return f" ({percent}% similar)"


def format_diff(node: DiffNode, options: DiffOptions | None = None) -> str:
    """Render *node* with a fresh ``DiffFormatter``."""
    return DiffFormatter(options).format(node)
