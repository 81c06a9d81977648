#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffassert/constants.py
"""Constants and default values for diffassert.

This module centralizes the literal types, ANSI marker sequences, replacement
tables and option defaults used across the comparison pipeline. The tables are
exposed as read-only mappings; they are built once at import time and never
modified afterwards.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Terminal Markers - ANSI sequences used by the renderer and report
3. Replacement Tables - escape and whitespace substitution tables
4. Option Defaults - default values for the options dataclasses
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Literal, Mapping

# =============================================================================
# Type Definitions
# =============================================================================

DiffMode = Literal["exact", "readable"]
NormalizeMode = Literal["raw", "dedent", "dedent_crlf"]
AdapterKind = Literal["string", "value", "content", "http"]

DIFF_MODES: tuple[str, ...] = ("exact", "readable")
NORMALIZE_MODES: tuple[str, ...] = ("raw", "dedent", "dedent_crlf")

# =============================================================================
# Terminal Markers
# =============================================================================

ANSI_RESET = "\x1b[0m"
ANSI_UNDERLINE = "\x1b[4m"

# Bright background with black foreground so the span stays legible on both
# light and dark terminals.
ANSI_INSERT = "\x1b[102m\x1b[30m"
ANSI_DELETE = "\x1b[101m\x1b[30m"

# wdiff-style markers for output that cannot carry escape codes
PLAIN_INSERT_OPEN = "{+"
PLAIN_INSERT_CLOSE = "+}"
PLAIN_DELETE_OPEN = "[-"
PLAIN_DELETE_CLOSE = "-]"

REPORT_EXPECT_LABEL = "Expect"
REPORT_ACTUAL_LABEL = "Actual"
REPORT_DIFFERENCE_LABEL = "Difference"

# =============================================================================
# Replacement Tables
# =============================================================================

# Literal backslash sequences produced by repr()-style formatting, mapped back
# to the characters they stand for.
ESCAPE_SEQUENCES: Mapping[str, str] = MappingProxyType(
    {
        "\\n": "\n",
        "\\t": "\t",
    }
)

# Newline keeps its line break after the glyph so multi-line spans keep their shape.
WHITESPACE_GLYPHS: Mapping[str, str] = MappingProxyType(
    {
        " ": "·",
        "\t": "→",
        "\r": "␍",
        "\n": "↵\n",
    }
)

# =============================================================================
# Option Defaults
# =============================================================================

DEFAULT_MAX_WIDTH = 80
DEFAULT_INDENT_SIZE = 4
DEFAULT_EXPAND_ALL = False
DEFAULT_SORT_KEYS = True

DEFAULT_USE_COLOR = True
DEFAULT_SHOW_WHITESPACE = False
DEFAULT_UNESCAPE = True

# 0 disables the diff deadline so the edit script never depends on machine speed
DEFAULT_DIFF_TIMEOUT = 0.0
DEFAULT_LINE_MODE = False
