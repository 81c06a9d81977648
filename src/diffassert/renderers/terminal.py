#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffassert/renderers/terminal.py
"""Inline terminal renderer for diff spans.

The renderer concatenates all spans into a single string. Inserted text gets a
green background, deleted text a red background, and equal text is emitted as
is. Without colors, wdiff-style ``{+inserted+}`` / ``[-deleted-]`` markers are
used so the output stays readable in plain logs.
"""

from __future__ import annotations

from typing import Iterable

from diffassert.constants import (
    ANSI_DELETE,
    ANSI_INSERT,
    ANSI_RESET,
    DEFAULT_SHOW_WHITESPACE,
    DEFAULT_UNESCAPE,
    DEFAULT_USE_COLOR,
    PLAIN_DELETE_CLOSE,
    PLAIN_DELETE_OPEN,
    PLAIN_INSERT_CLOSE,
    PLAIN_INSERT_OPEN,
)
from diffassert.engine import DiffSpan, SpanKind
from diffassert.normalize import make_whitespace_visible, unescape
from diffassert.options import RenderOptions


class TerminalDiffRenderer:
    """Render diff spans as one inline string.

    Parameters
    ----------
    use_color : bool, default = True
        If True, wrap changed spans in ANSI background colors
    show_whitespace : bool, default = False
        If True, replace whitespace inside changed spans with visible glyphs
    unescape : bool, default = True
        If True, turn literal ``\\n``/``\\t`` sequences into real characters

    Examples
    --------
    Render a diff for the terminal:
        >>> from diffassert.engine import compute_spans
        >>> renderer = TerminalDiffRenderer(use_color=False)
        >>> renderer.render(compute_spans("hi", "cool"))
        '[-hi-]{+cool+}'

    """

    def __init__(
        self,
        use_color: bool = DEFAULT_USE_COLOR,
        show_whitespace: bool = DEFAULT_SHOW_WHITESPACE,
        unescape: bool = DEFAULT_UNESCAPE,
    ):
        """Initialize the terminal diff renderer."""
        self.use_color = use_color
        self.show_whitespace = show_whitespace
        self.unescape = unescape

    @classmethod
    def from_options(cls, options: RenderOptions) -> TerminalDiffRenderer:
        """Create a renderer configured from :class:`RenderOptions`."""
        return cls(
            use_color=options.use_color,
            show_whitespace=options.show_whitespace,
            unescape=options.unescape,
        )

    def render(self, spans: Iterable[DiffSpan]) -> str:
        """Render spans into a single string.

        Parameters
        ----------
        spans : iterable of DiffSpan
            Spans produced by :func:`~diffassert.engine.compute_spans`

        Returns
        -------
        str
            Rendered diff. Every marker opened for a span is closed before
            the next span starts.

        """
        return "".join(self._render_span(span) for span in spans if span.text)

    def _render_span(self, span: DiffSpan) -> str:
        text = unescape(span.text) if self.unescape else span.text
        if span.kind is SpanKind.EQUAL:
            return text

        if self.show_whitespace:
            text = make_whitespace_visible(text)
        if span.kind is SpanKind.INSERT:
            return self._wrap(text, ANSI_INSERT, PLAIN_INSERT_OPEN, PLAIN_INSERT_CLOSE)
        return self._wrap(text, ANSI_DELETE, PLAIN_DELETE_OPEN, PLAIN_DELETE_CLOSE)

    def _wrap(self, text: str, color: str, plain_open: str, plain_close: str) -> str:
        if self.use_color:
            return f"{color}{text}{ANSI_RESET}"
        return f"{plain_open}{text}{plain_close}"


def render_spans(spans: Iterable[DiffSpan], options: RenderOptions | None = None) -> str:
    """Render diff spans with the given options.

    Parameters
    ----------
    spans : iterable of DiffSpan
        Spans to render
    options : RenderOptions, optional
        Rendering options, defaults to :class:`RenderOptions()`

    Returns
    -------
    str
        Rendered diff

    """
    renderer = TerminalDiffRenderer.from_options(options or RenderOptions())
    return renderer.render(spans)
