"""pytest plugin for leven-diff.

Auto-discovered by pytest via the pytest11 entry point declared in
pyproject.toml.  Once the package is installed (even in editable mode), the
``assert_no_diff`` fixture is available without any conftest.py changes.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

import pytest

from leven_diff import DiffOptions, compare_raw
from leven_diff.formatter import DiffFormatter


@pytest.fixture(scope="session")
def assert_no_diff() -> Any:
    """Fixture that returns a callable asserting two values do not differ.

    Session-scoped because the returned callable is stateless.

    Usage in tests::

        def test_payload(assert_no_diff):
            assert_no_diff(response.json(), {"status": "ok"})

        def test_ignores_timestamps(assert_no_diff):
            assert_no_diff(a, b, options={"ignoreKeys": ["timestamp"]})

    Returns:
        A callable ``_assert(actual, expected, options=None) -> None`` that
        raises ``AssertionError`` with the uncolored diff when the values
        differ.
    """

    def _assert(
        actual: Any,
        expected: Any,
        options: DiffOptions | dict[str, Any] | None = None,
    ) -> None:
        """Assert that *actual* and *expected* have no difference.

        The diff is computed from *expected* (old) to *actual* (new), so
        ``+`` lines show what the code under test produced.

        Raises:
            AssertionError: When the values differ, with the rendered diff.
        """
        resolved = DiffOptions.coerce(options)
        node = compare_raw(expected, actual, resolved)
        if node.has_changes:
            plain = replace(resolved, color=False)
            raise AssertionError(
                "Values differ (+ actual, - expected):\n"
                + DiffFormatter(plain).format(node)
            )

    return _assert
