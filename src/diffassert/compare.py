#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffassert/compare.py
"""Comparison entry points for the supported kinds of input.

Each adapter prepares both sides in its own way, then hands them to the shared
diff and render core:

==========  ===============  ===============  ==================
kind        formats values   normalization    default diff mode
==========  ===============  ===============  ==================
string      no               raw              readable
value       yes              raw              readable
content     yes              dedent           readable
http        no               dedent_crlf      exact
==========  ===============  ===============  ==================

Every adapter comes in two flavours: ``compare_*`` returns a
:data:`~diffassert.outcome.ComparisonOutcome` (``None`` or a
:class:`~diffassert.outcome.Mismatch`), and ``diff_*`` returns the rendered
diff text directly, which is the prepared input unchanged when both sides
match.

Examples
--------
    >>> from diffassert.compare import compare_content
    >>> compare_content(
    ...     '''
    ...     line one
    ...     line two
    ...     ''',
    ...     "line one\\nline two",
    ... ) is None
    True

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from diffassert.constants import AdapterKind, DiffMode, NormalizeMode
from diffassert.engine import compute_spans
from diffassert.exceptions import ValidationError
from diffassert.formatter import format_value
from diffassert.normalize import normalize
from diffassert.options import CompareOptions
from diffassert.outcome import ComparisonOutcome, check
from diffassert.renderers.terminal import render_spans

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Adapter:
    normalize_mode: NormalizeMode
    diff_mode: DiffMode
    format_values: bool
    accept_bytes: bool = False


_ADAPTERS: Mapping[str, _Adapter] = MappingProxyType(
    {
        "string": _Adapter(normalize_mode="raw", diff_mode="readable", format_values=False),
        "value": _Adapter(normalize_mode="raw", diff_mode="readable", format_values=True),
        "content": _Adapter(normalize_mode="dedent", diff_mode="readable", format_values=True),
        # status lines and headers differ by single tokens; keep the exact boundaries
        "http": _Adapter(normalize_mode="dedent_crlf", diff_mode="exact", format_values=False, accept_bytes=True),
    }
)


def _get_adapter(kind: str) -> _Adapter:
    try:
        return _ADAPTERS[kind]
    except KeyError:
        raise ValidationError(
            f"Invalid comparison kind: {kind!r}. Must be one of: {', '.join(_ADAPTERS)}",
            parameter_name="kind",
            parameter_value=kind,
        ) from None


def _prepare(value: Any, kind: str, adapter: _Adapter, options: CompareOptions) -> str:
    if adapter.format_values:
        text = format_value(value, options.format)
    elif isinstance(value, str):
        text = value
    elif adapter.accept_bytes and isinstance(value, (bytes, bytearray)):
        text = bytes(value).decode("utf-8", errors="replace")
    else:
        raise ValidationError(
            f"{kind} comparison expects text, got {type(value).__name__}; use compare_values for other types",
            parameter_name="value",
            parameter_value=value,
        )
    return normalize(text, adapter.normalize_mode)


def compare(
    actual: Any,
    expect: Any,
    kind: AdapterKind = "string",
    options: CompareOptions | None = None,
) -> ComparisonOutcome:
    """Compare two inputs with the named adapter.

    Parameters
    ----------
    actual : Any
        Value produced by the code under test
    expect : Any
        Expected value
    kind : {"string", "value", "content", "http"}, default "string"
        Adapter used to prepare both sides
    options : CompareOptions, optional
        Comparison options. An unset ``diff_mode`` uses the adapter default.

    Returns
    -------
    Mismatch or None
        ``None`` when the prepared sides are equal

    Raises
    ------
    ValidationError
        If ``kind`` is unknown, or a text-only adapter receives a non-text
        value

    """
    adapter = _get_adapter(kind)
    options = options or CompareOptions()
    actual_text = _prepare(actual, kind, adapter, options)
    expect_text = _prepare(expect, kind, adapter, options)
    logger.debug("Comparing %s inputs", kind)
    return check(actual_text, expect_text, options.create_updated(diff_mode=options.resolve_mode(adapter.diff_mode)))


def diff(
    actual: Any,
    expect: Any,
    kind: AdapterKind = "string",
    options: CompareOptions | None = None,
) -> str:
    """Render the difference between two inputs with the named adapter.

    Parameters
    ----------
    actual : Any
        Value produced by the code under test
    expect : Any
        Expected value
    kind : {"string", "value", "content", "http"}, default "string"
        Adapter used to prepare both sides
    options : CompareOptions, optional
        Comparison options. An unset ``diff_mode`` uses the adapter default.

    Returns
    -------
    str
        Rendered diff, or the prepared input unchanged when both sides are
        equal

    """
    adapter = _get_adapter(kind)
    options = options or CompareOptions()
    actual_text = _prepare(actual, kind, adapter, options)
    expect_text = _prepare(expect, kind, adapter, options)
    if actual_text == expect_text:
        return actual_text
    spans = compute_spans(
        actual_text,
        expect_text,
        options.resolve_mode(adapter.diff_mode),
        timeout=options.timeout,
        line_mode=options.line_mode,
    )
    return render_spans(spans, options.render)


def compare_strings(actual: str, expect: str, options: CompareOptions | None = None) -> ComparisonOutcome:
    """Compare two strings as they are."""
    return compare(actual, expect, "string", options)


def compare_values(actual: Any, expect: Any, options: CompareOptions | None = None) -> ComparisonOutcome:
    """Compare two values by their formatted text.

    Equality is decided on the rendered content, not on identity, so two
    separately built but structurally equal objects match.
    """
    return compare(actual, expect, "value", options)


def compare_content(actual: Any, expect: Any, options: CompareOptions | None = None) -> ComparisonOutcome:
    """Compare two text blocks ignoring common indentation and outer whitespace."""
    return compare(actual, expect, "content", options)


def compare_http(
    actual: str | bytes,
    expect: str | bytes,
    options: CompareOptions | None = None,
) -> ComparisonOutcome:
    """Compare two serialized HTTP messages.

    Both dumps are dedented and stripped, and CRLF line endings are treated as
    LF, so a wire dump can be checked against an indented literal in the test.
    ``bytes`` dumps are decoded as UTF-8.
    """
    return compare(actual, expect, "http", options)


def diff_strings(actual: str, expect: str, options: CompareOptions | None = None) -> str:
    """Render the difference between two strings."""
    return diff(actual, expect, "string", options)


def diff_values(actual: Any, expect: Any, options: CompareOptions | None = None) -> str:
    """Render the difference between the formatted text of two values."""
    return diff(actual, expect, "value", options)


def diff_content(actual: Any, expect: Any, options: CompareOptions | None = None) -> str:
    """Render the difference between two dedented text blocks."""
    return diff(actual, expect, "content", options)


def diff_http(actual: str | bytes, expect: str | bytes, options: CompareOptions | None = None) -> str:
    """Render the difference between two serialized HTTP messages."""
    return diff(actual, expect, "http", options)
