#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffassert/options.py
"""Configuration options for formatting, diffing and rendering.

All options are frozen dataclasses so a single instance can be shared across
threads and tests. Use :meth:`CloneFrozenMixin.create_updated` to derive a
modified copy.

Examples
--------
Disable colors for CI logs:

    >>> from diffassert.options import CompareOptions, RenderOptions
    >>> options = CompareOptions(render=RenderOptions(use_color=False))

Force exact mode for a single comparison:

    >>> exact = options.create_updated(diff_mode="exact")

"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from diffassert.constants import (
    DEFAULT_DIFF_TIMEOUT,
    DEFAULT_EXPAND_ALL,
    DEFAULT_INDENT_SIZE,
    DEFAULT_LINE_MODE,
    DEFAULT_MAX_WIDTH,
    DEFAULT_SHOW_WHITESPACE,
    DEFAULT_SORT_KEYS,
    DEFAULT_UNESCAPE,
    DEFAULT_USE_COLOR,
    DIFF_MODES,
    DiffMode,
)
from diffassert.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class FormatOptions(CloneFrozenMixin):
    """Options controlling how non-string values are turned into text.

    Parameters
    ----------
    max_width : int, default 80
        Width at which the pretty printer starts wrapping nested structures.
    indent_size : int, default 4
        Number of spaces per nesting level in wrapped output.
    expand_all : bool, default False
        Expand every container onto its own lines regardless of width.
    sort_keys : bool, default True
        Sort plain ``dict`` keys (when orderable) so equal mappings built in a
        different insertion order format identically.

    """

    max_width: int = field(
        default=DEFAULT_MAX_WIDTH,
        metadata={"help": "Maximum line width before nested values are wrapped", "type": int, "importance": "core"},
    )
    indent_size: int = field(
        default=DEFAULT_INDENT_SIZE,
        metadata={"help": "Spaces per indentation level in wrapped values", "type": int, "importance": "advanced"},
    )
    expand_all: bool = field(
        default=DEFAULT_EXPAND_ALL,
        metadata={"help": "Expand all containers one item per line", "importance": "advanced"},
    )
    sort_keys: bool = field(
        default=DEFAULT_SORT_KEYS,
        metadata={"help": "Sort dictionary keys for deterministic output", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValidationError
            If any field value is outside its valid range.

        """
        if self.max_width <= 0:
            raise ValidationError(
                f"max_width must be positive, got {self.max_width}",
                parameter_name="max_width",
                parameter_value=self.max_width,
            )
        if self.indent_size < 0:
            raise ValidationError(
                f"indent_size must be non-negative, got {self.indent_size}",
                parameter_name="indent_size",
                parameter_value=self.indent_size,
            )


@dataclass(frozen=True)
class RenderOptions(CloneFrozenMixin):
    """Options controlling how diff spans are rendered.

    Parameters
    ----------
    use_color : bool, default True
        Wrap changed spans in ANSI background colors. When False, the
        plain ``{+inserted+}`` / ``[-deleted-]`` markers are used instead.
    show_whitespace : bool, default False
        Replace whitespace inside changed spans with visible glyphs.
    unescape : bool, default True
        Turn literal ``\\n`` and ``\\t`` sequences back into real newlines
        and tabs before emitting a span.

    """

    use_color: bool = field(
        default=DEFAULT_USE_COLOR,
        metadata={"help": "Use ANSI colors for inserted/deleted spans", "importance": "core"},
    )
    show_whitespace: bool = field(
        default=DEFAULT_SHOW_WHITESPACE,
        metadata={"help": "Show whitespace in changed spans as visible glyphs", "importance": "core"},
    )
    unescape: bool = field(
        default=DEFAULT_UNESCAPE,
        metadata={"help": "Collapse escaped \\n and \\t sequences into real characters", "importance": "advanced"},
    )


@dataclass(frozen=True)
class CompareOptions(CloneFrozenMixin):
    """Top-level options accepted by every comparison adapter.

    Parameters
    ----------
    diff_mode : {"exact", "readable"} or None, default None
        Diff strategy. ``None`` lets each adapter pick its own default
        (readable for text blocks, exact for message dumps).
    timeout : float, default 0.0
        Seconds the diff algorithm may spend before settling for a
        non-minimal script. ``0`` disables the deadline.
    line_mode : bool, default False
        Let the diff algorithm run a line-level pass first on long inputs.
    format : FormatOptions
        Value formatting options.
    render : RenderOptions
        Span rendering options.

    """

    diff_mode: DiffMode | None = field(
        default=None,
        metadata={"help": "Diff strategy: 'exact' or 'readable' (None = adapter default)", "importance": "core"},
    )
    timeout: float = field(
        default=DEFAULT_DIFF_TIMEOUT,
        metadata={"help": "Diff deadline in seconds (0 = unlimited)", "type": float, "importance": "advanced"},
    )
    line_mode: bool = field(
        default=DEFAULT_LINE_MODE,
        metadata={"help": "Run a line-level speedup pass on long inputs", "importance": "advanced"},
    )
    format: FormatOptions = field(
        default_factory=FormatOptions,
        metadata={"help": "Value formatting options", "importance": "core"},
    )
    render: RenderOptions = field(
        default_factory=RenderOptions,
        metadata={"help": "Diff rendering options", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate the diff mode and timeout.

        Raises
        ------
        ValidationError
            If the diff mode is unknown or the timeout is negative.

        """
        if self.diff_mode is not None and self.diff_mode not in DIFF_MODES:
            raise ValidationError(
                f"Invalid diff_mode: {self.diff_mode!r}. Must be one of: {', '.join(DIFF_MODES)}",
                parameter_name="diff_mode",
                parameter_value=self.diff_mode,
            )
        if self.timeout < 0:
            raise ValidationError(
                f"timeout must be non-negative, got {self.timeout}",
                parameter_name="timeout",
                parameter_value=self.timeout,
            )

    def resolve_mode(self, default: DiffMode) -> DiffMode:
        """Return the configured diff mode, or ``default`` when unset."""
        return self.diff_mode if self.diff_mode is not None else default
