#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffassert/renderers/__init__.py
"""Renderers turning diff spans into displayable text.

Available Renderers
-------------------
- TerminalDiffRenderer: inline output with ANSI background colors, or
  wdiff-style markers when colors are disabled

Examples
--------
Render spans with colors for the terminal:
    >>> from diffassert.engine import compute_spans
    >>> from diffassert.renderers import TerminalDiffRenderer
    >>> spans = compute_spans("HTTP/1.1 200 OK", "HTTP/1.1 404 Not Found")
    >>> print(TerminalDiffRenderer().render(spans))

"""

from diffassert.renderers.terminal import TerminalDiffRenderer, render_spans

__all__ = [
    "TerminalDiffRenderer",
    "render_spans",
]
