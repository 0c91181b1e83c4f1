"""Public API functions for leven-diff.

This module provides the three user-facing operations: compare_raw,
compare_to_string and has_difference.  Each call resolves its own options
and builds a fresh diff tree, so calls never share state.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from leven_diff.algorithm.config import DiffOptions
from leven_diff.comparator import TreeComparator
from leven_diff.formatter import DiffFormatter
from leven_diff.tree.nodes import DiffKind, DiffNode

__all__ = ["compare_raw", "compare_to_string", "has_difference"]

logger = logging.getLogger(__name__)

OptionsLike = DiffOptions | Mapping[str, Any] | None


def _resolve(options: OptionsLike) -> DiffOptions:
    resolved = DiffOptions.coerce(options)
    logger.debug(f"Resolved diff options: {resolved}")
    return resolved


def compare_raw(
    old_value: Any, new_value: Any, options: OptionsLike = None
) -> DiffNode:
    """Compare two values and return the full diff tree.

    Args:
        old_value: The original value (dict, list, str, number, bool, None).
        new_value: The value to compare against.
        options: ``DiffOptions``, a mapping of option names (camelCase or
            snake_case), or None for the defaults.

    Returns:
        The root ``DiffNode``; its ``kind`` is UNCHANGED iff the values are
        equal under the active comparison options.

    Raises:
        InvalidInputKind: If either value is outside the value domain or
            contains a cycle.
        InvalidOptionsError: If *options* is malformed.
    """
    return TreeComparator(_resolve(options)).compare(old_value, new_value)


def compare_to_string(
    old_value: Any, new_value: Any, options: OptionsLike = None
) -> str:
    """Compare two values and return the rendered, git-style diff.

    Colors are on by default; pass ``{"color": False}`` for plain text.

    Example::

        text = compare_to_string({"foo": "bar"}, {"foo": "baz"}, {"color": False})
        print(text)
        # {
        #   + foo: "baz"
        #   - foo: "bar"
        # }
    """
    resolved = _resolve(options)
    node = TreeComparator(resolved).compare(old_value, new_value)
    return DiffFormatter(resolved).format(node)


def has_difference(
    old_value: Any, new_value: Any, options: OptionsLike = None
) -> bool:
    """Return True if the values differ under the comparison options.

    Only ``ignore_keys``, ``structure_only`` and ``ignore_values`` influence
    the answer; display options are irrelevant here.
    """
    return compare_raw(old_value, new_value, options).kind != DiffKind.UNCHANGED
