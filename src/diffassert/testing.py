#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffassert/testing.py
"""Assertion helpers that fail the running pytest test with a diff report.

Each helper runs the matching adapter from :mod:`diffassert.compare`. On a
mismatch it calls :func:`pytest.fail` with the Expect / Actual / Difference
report, which stops the current test immediately; other tests keep running.
On a match it does nothing.

Examples
--------
    >>> from diffassert.testing import assert_http_equal
    >>> def test_response(client):
    ...     assert_http_equal(client.get("/").dump(), '''
    ...         HTTP/1.1 200 OK
    ...         Content-Type: application/json
    ...
    ...         {"hello": "world"}
    ...     ''')

"""

from __future__ import annotations

from typing import Any

import pytest

from diffassert.compare import compare_content, compare_http, compare_strings, compare_values
from diffassert.options import CompareOptions
from diffassert.outcome import ComparisonOutcome


def _fail_on_mismatch(outcome: ComparisonOutcome) -> None:
    __tracebackhide__ = True
    if outcome is not None:
        pytest.fail(outcome.report(), pytrace=False)


def assert_strings_equal(actual: str, expect: str, options: CompareOptions | None = None) -> None:
    """Fail the current test unless both strings are identical."""
    __tracebackhide__ = True
    _fail_on_mismatch(compare_strings(actual, expect, options))


def assert_values_equal(actual: Any, expect: Any, options: CompareOptions | None = None) -> None:
    """Fail the current test unless both values format to the same text."""
    __tracebackhide__ = True
    _fail_on_mismatch(compare_values(actual, expect, options))


def assert_content_equal(actual: Any, expect: Any, options: CompareOptions | None = None) -> None:
    """Fail the current test unless both blocks match after dedenting and stripping."""
    __tracebackhide__ = True
    _fail_on_mismatch(compare_content(actual, expect, options))


def assert_http_equal(actual: str | bytes, expect: str | bytes, options: CompareOptions | None = None) -> None:
    """Fail the current test unless both HTTP dumps match, ignoring indentation and CRLF."""
    __tracebackhide__ = True
    _fail_on_mismatch(compare_http(actual, expect, options))
