#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffassert/outcome.py
"""Comparison outcomes and the failure report.

A comparison either matches, represented by ``None``, or produces a
:class:`Mismatch` carrying both inputs and the rendered diff. A mismatch is a
normal return value; only :func:`raise_for_mismatch` and the pytest wrappers in
:mod:`diffassert.testing` turn it into a failure.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from diffassert.constants import (
    ANSI_RESET,
    ANSI_UNDERLINE,
    REPORT_ACTUAL_LABEL,
    REPORT_DIFFERENCE_LABEL,
    REPORT_EXPECT_LABEL,
)
from diffassert.engine import compute_spans
from diffassert.exceptions import MismatchError
from diffassert.options import CompareOptions
from diffassert.renderers.terminal import render_spans

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Mismatch:
    """Outcome of a comparison whose two sides differ.

    Parameters
    ----------
    actual : str
        Text form of the value produced by the code under test
    expect : str
        Text form of the expected value
    diff : str
        Rendered difference between ``actual`` and ``expect``
    use_color : bool, default True
        Whether the report labels are underlined with ANSI codes. Not part
        of equality.

    """

    actual: str
    expect: str
    diff: str
    use_color: bool = field(default=True, compare=False)

    def report(self) -> str:
        """Format the mismatch as Expect / Actual / Difference sections.

        Returns
        -------
        str
            Multi-line report. The section order and labels are fixed.

        """
        sections = (
            (REPORT_EXPECT_LABEL, self.expect),
            (REPORT_ACTUAL_LABEL, self.actual),
            (REPORT_DIFFERENCE_LABEL, self.diff),
        )
        blocks = [f"{self._label(label)}:\n{body}" for label, body in sections]
        return "\n" + "\n\n".join(blocks) + "\n"

    def _label(self, label: str) -> str:
        if self.use_color:
            return f"{ANSI_UNDERLINE}{label}{ANSI_RESET}"
        return label

    def __str__(self) -> str:
        return self.report()


ComparisonOutcome = Optional[Mismatch]


def check(actual: str, expect: str, options: CompareOptions | None = None) -> ComparisonOutcome:
    """Compare two strings and describe any difference.

    Parameters
    ----------
    actual : str
        Text produced by the code under test
    expect : str
        Expected text
    options : CompareOptions, optional
        Diff and rendering options. An unset ``diff_mode`` means readable.

    Returns
    -------
    Mismatch or None
        ``None`` when the strings are equal, otherwise a :class:`Mismatch`

    """
    if actual == expect:
        return None

    options = options or CompareOptions()
    mode = options.resolve_mode("readable")
    spans = compute_spans(actual, expect, mode, timeout=options.timeout, line_mode=options.line_mode)
    logger.debug("Strings differ; rendering %d spans", len(spans))
    return Mismatch(
        actual=actual,
        expect=expect,
        diff=render_spans(spans, options.render),
        use_color=options.render.use_color,
    )


def raise_for_mismatch(outcome: ComparisonOutcome) -> None:
    """Raise :class:`MismatchError` if ``outcome`` is a mismatch.

    Parameters
    ----------
    outcome : Mismatch or None
        Result of a comparison

    Raises
    ------
    MismatchError
        If ``outcome`` is a :class:`Mismatch`

    """
    if outcome is not None:
        raise MismatchError(outcome)
