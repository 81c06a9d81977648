#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffassert/engine.py
"""Character-level diff between two strings.

The edit script itself comes from ``diff-match-patch``; this module selects
the mode and turns the library's ``(op, text)`` tuples into typed spans.

Two modes are supported:

- ``exact``: the raw minimal edit script. Use it when the precise boundary
  matters, e.g. a single digit of an HTTP status code.
- ``readable``: the raw script followed by a semantic cleanup pass that merges
  small fragments into word-like chunks for a person to read.

Spans are oriented from ``actual`` to ``expect``: ``DELETE`` text exists only
in ``actual``, ``INSERT`` text exists only in ``expect``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from diff_match_patch import diff_match_patch

from diffassert.constants import DEFAULT_DIFF_TIMEOUT, DEFAULT_LINE_MODE, DIFF_MODES, DiffMode
from diffassert.exceptions import ValidationError

logger = logging.getLogger(__name__)


class SpanKind(str, Enum):
    """Tag of a diff span."""

    EQUAL = "equal"
    INSERT = "insert"
    DELETE = "delete"


_OP_KINDS = {
    diff_match_patch.DIFF_EQUAL: SpanKind.EQUAL,
    diff_match_patch.DIFF_INSERT: SpanKind.INSERT,
    diff_match_patch.DIFF_DELETE: SpanKind.DELETE,
}


@dataclass(frozen=True, slots=True)
class DiffSpan:
    """A contiguous run of text tagged equal, inserted or deleted."""

    kind: SpanKind
    text: str


def compute_spans(
    actual: str,
    expect: str,
    mode: DiffMode = "readable",
    *,
    timeout: float = DEFAULT_DIFF_TIMEOUT,
    line_mode: bool = DEFAULT_LINE_MODE,
) -> tuple[DiffSpan, ...]:
    """Compute the diff spans that turn ``actual`` into ``expect``.

    Parameters
    ----------
    actual : str
        Text produced by the code under test
    expect : str
        Text the test expects
    mode : {"exact", "readable"}, default "readable"
        ``exact`` keeps the minimal edit script; ``readable`` additionally
        applies semantic cleanup.
    timeout : float, default 0.0
        Diff deadline in seconds; ``0`` means no deadline, which keeps the
        result independent of machine speed.
    line_mode : bool, default False
        Run a line-level pass first (only affects long inputs).

    Returns
    -------
    tuple of DiffSpan
        Ordered spans partitioning both inputs. Empty when both inputs are
        empty.

    Raises
    ------
    ValidationError
        If ``mode`` is not a known diff mode

    """
    if mode not in DIFF_MODES:
        raise ValidationError(
            f"Invalid diff mode: {mode!r}. Must be one of: {', '.join(DIFF_MODES)}",
            parameter_name="mode",
            parameter_value=mode,
        )

    dmp = diff_match_patch()
    dmp.Diff_Timeout = timeout
    diffs = dmp.diff_main(actual, expect, line_mode)
    if mode == "readable":
        dmp.diff_cleanupSemantic(diffs)

    spans = tuple(DiffSpan(_OP_KINDS[op], text) for op, text in diffs if text)
    logger.debug("Computed %d diff spans (mode=%s, %d vs %d chars)", len(spans), mode, len(actual), len(expect))
    return spans


def source_text(spans: Iterable[DiffSpan]) -> str:
    """Rebuild the ``actual`` side from equal and deleted spans."""
    return "".join(span.text for span in spans if span.kind is not SpanKind.INSERT)


def target_text(spans: Iterable[DiffSpan]) -> str:
    """Rebuild the ``expect`` side from equal and inserted spans."""
    return "".join(span.text for span in spans if span.kind is not SpanKind.DELETE)


def has_changes(spans: Iterable[DiffSpan]) -> bool:
    """Return True if any span is an insertion or deletion."""
    return any(span.kind is not SpanKind.EQUAL for span in spans)
