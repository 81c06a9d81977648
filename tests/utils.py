"""Test utilities for the diffassert test suite.

Helpers that build the expected marker sequences so assertions read like the
diff they describe.
"""

import re
from dataclasses import dataclass

from diffassert.constants import ANSI_DELETE, ANSI_INSERT, ANSI_RESET

_MARKER_RE = re.compile(r"\x1b\[10[12]m\x1b\[30m|\x1b\[0m")


def red(text: str) -> str:
    """Wrap text the way the renderer marks a deletion."""
    return f"{ANSI_DELETE}{text}{ANSI_RESET}"


def green(text: str) -> str:
    """Wrap text the way the renderer marks an insertion."""
    return f"{ANSI_INSERT}{text}{ANSI_RESET}"


def markers_balanced(rendered: str) -> bool:
    """Return True if every opened color marker is closed before the next one opens."""
    is_open = False
    for marker in _MARKER_RE.findall(rendered):
        opening = marker != ANSI_RESET
        if opening == is_open:
            return False
        is_open = opening
    return not is_open


def has_markers(rendered: str) -> bool:
    """Return True if the rendered text contains any color marker."""
    return bool(_MARKER_RE.search(rendered))


@dataclass
class Leaf:
    """Innermost value of the nested fixture structure."""

    d: str


@dataclass
class Inner:
    """Middle layer embedding a Leaf."""

    c: Leaf


@dataclass
class Empty:
    """Composite without fields."""


@dataclass
class Web:
    """Outer composite embedding an Inner and an Empty."""

    a: Inner
    b: Empty
