#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffassert/normalize.py
"""Text normalization applied before and after diffing.

Before diffing, :func:`normalize` lets test literals be indented to match the
surrounding code (``dedent``) and makes CRLF and LF line endings equivalent
(``dedent_crlf``). After diffing, the renderer uses :func:`unescape` and
:func:`make_whitespace_visible` to make spans legible.
"""

from __future__ import annotations

import re
import textwrap

from diffassert.constants import ESCAPE_SEQUENCES, NORMALIZE_MODES, WHITESPACE_GLYPHS, NormalizeMode
from diffassert.exceptions import ValidationError

_ESCAPE_RE = re.compile("|".join(re.escape(sequence) for sequence in ESCAPE_SEQUENCES))
_WHITESPACE_RE = re.compile("|".join(re.escape(char) for char in WHITESPACE_GLYPHS))
_LINE_ENDING_RE = re.compile(r"\r\n")


def dedent(text: str) -> str:
    """Remove the longest common leading whitespace from every line.

    Lines consisting solely of whitespace do not take part in the prefix
    computation and are reduced to an empty line. Tabs and spaces are
    compared literally and never treated as equivalent.

    Parameters
    ----------
    text : str
        Multi-line text, typically a triple-quoted test literal

    Returns
    -------
    str
        Text with the common indentation removed

    """
    return textwrap.dedent(text)


def canonicalize_newlines(text: str) -> str:
    """Convert CRLF line endings to LF. A lone CR is kept."""
    return _LINE_ENDING_RE.sub("\n", text)


def normalize(text: str, mode: NormalizeMode = "raw") -> str:
    """Normalize text before comparison.

    Parameters
    ----------
    text : str
        Text to normalize
    mode : {"raw", "dedent", "dedent_crlf"}, default "raw"
        - ``raw``: return the text unchanged
        - ``dedent``: remove common indentation, then strip leading and
          trailing whitespace
        - ``dedent_crlf``: as ``dedent``, with CRLF line endings converted
          to LF

    Returns
    -------
    str
        Normalized text

    Raises
    ------
    ValidationError
        If ``mode`` is not a known normalization mode

    Notes
    -----
    Dedenting happens before stripping. Stripping first would remove the
    indentation of the first line only and leave nothing in common with the
    remaining lines. Line endings are canonicalized before dedenting so a
    trailing carriage return never hides a line from the common prefix.

    """
    if mode == "raw":
        return text
    if mode == "dedent":
        return dedent(text).strip()
    if mode == "dedent_crlf":
        return dedent(canonicalize_newlines(text)).strip()
    raise ValidationError(
        f"Invalid normalize mode: {mode!r}. Must be one of: {', '.join(NORMALIZE_MODES)}",
        parameter_name="mode",
        parameter_value=mode,
    )


def unescape(text: str) -> str:
    r"""Collapse literal ``\n`` and ``\t`` sequences into real newlines and tabs."""
    return _ESCAPE_RE.sub(lambda match: ESCAPE_SEQUENCES[match.group(0)], text)


def make_whitespace_visible(text: str) -> str:
    """Replace spaces, tabs, carriage returns and newlines with visible glyphs.

    A newline keeps its line break after the glyph.

    Examples
    --------
        >>> make_whitespace_visible("a b\\tc")
        'a·b→c'

    """
    return _WHITESPACE_RE.sub(lambda match: WHITESPACE_GLYPHS[match.group(0)], text)
