"""Integrations subpackage for leven-diff.

Contains the pytest plugin (auto-discovered via the pytest11 entry point),
which provides the ``assert_no_diff`` fixture.
"""

from __future__ import annotations

__all__: list[str] = []
