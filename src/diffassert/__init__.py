#  Copyright (c) 2025 Tom Villani, Ph.D.
"""diffassert - readable, colorized diffs for test assertions.

diffassert compares two values or strings and, when they differ, renders an
inline character-level difference with inserted text on a green background
and deleted text on a red background. It is meant to be used inside test
assertions so a failure shows *what* differs instead of an opaque "not equal".

Key Features
------------
- Deterministic pretty-printing of arbitrary values via rich
- Character-level diffs via diff-match-patch, in exact or readable mode
- Dedent and CRLF normalization for indented literals and HTTP dumps
- Structured Match / Mismatch outcomes with an Expect / Actual / Difference report
- pytest assertion helpers that fail the running test with the report

Examples
--------
Inspect an outcome:

    >>> from diffassert import compare_strings
    >>> compare_strings("hi", "hi") is None
    True
    >>> mismatch = compare_strings("hi", "cool")
    >>> print(mismatch.report())

Fail a test with a diff:

    >>> from diffassert.testing import assert_values_equal
    >>> assert_values_equal({"a": 1}, {"a": 2})

"""

from diffassert.compare import (
    compare,
    compare_content,
    compare_http,
    compare_strings,
    compare_values,
    diff,
    diff_content,
    diff_http,
    diff_strings,
    diff_values,
)
from diffassert.engine import DiffSpan, SpanKind, compute_spans
from diffassert.exceptions import DiffAssertError, MismatchError, ValidationError
from diffassert.formatter import Formattable, format_value
from diffassert.normalize import normalize
from diffassert.options import CompareOptions, FormatOptions, RenderOptions
from diffassert.outcome import ComparisonOutcome, Mismatch, check, raise_for_mismatch
from diffassert.renderers import TerminalDiffRenderer, render_spans

__version__ = "0.1.0"

__all__ = [
    "CompareOptions",
    "ComparisonOutcome",
    "DiffAssertError",
    "DiffSpan",
    "FormatOptions",
    "Formattable",
    "Mismatch",
    "MismatchError",
    "RenderOptions",
    "SpanKind",
    "TerminalDiffRenderer",
    "ValidationError",
    "check",
    "compare",
    "compare_content",
    "compare_http",
    "compare_strings",
    "compare_values",
    "compute_spans",
    "diff",
    "diff_content",
    "diff_http",
    "diff_strings",
    "diff_values",
    "format_value",
    "normalize",
    "raise_for_mismatch",
    "render_spans",
]
