"""Render options and environment configuration."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass

from .exceptions import InvalidOptionError
from .styles import BorderStyle, resolve_style
from .width import Alignment

DEFAULT_KEY_HEADER = "Key"
DEFAULT_VALUE_HEADER = "Value"
DEFAULT_STYLE = "thin"


@dataclass(frozen=True)
class RenderOptions:
    """
    Options shared by every formatting operation.

    Attributes:
        alignment: Alignment for every column, or a tuple with one
            alignment per column (missing trailing columns are left-aligned,
            entries past the last column are ignored)
        key_header: Header of the key column for mappings
        value_header: Header of the value column for mappings. When both
            headers are empty strings, mappings render without a header.
        max_rows: Maximum number of items drained from an iterable.
            None means unbounded.
    """

    alignment: Alignment | tuple[Alignment, ...] = Alignment.LEFT
    key_header: str = DEFAULT_KEY_HEADER
    value_header: str = DEFAULT_VALUE_HEADER
    max_rows: int | None = None

    def __post_init__(self) -> None:
        if self.max_rows is not None and self.max_rows < 0:
            raise InvalidOptionError("max_rows must be non-negative")

    @classmethod
    def from_environment(cls) -> RenderOptions:
        """
        Create RenderOptions from environment variables.

        Reads:
            BORDERS_ALIGNMENT: 'l', 'r' or 'c', or a comma-separated list
                with one entry per column (e.g. "l,r")
            BORDERS_KEY_HEADER: Key column header (default "Key")
            BORDERS_VALUE_HEADER: Value column header (default "Value")
            BORDERS_MAX_ROWS: Integer iterable row limit (default unbounded)

        Raises:
            InvalidOptionError: If a variable holds an invalid value
        """
        max_rows_env = os.environ.get("BORDERS_MAX_ROWS", "").strip()
        try:
            max_rows = int(max_rows_env) if max_rows_env else None
        except ValueError:
            raise InvalidOptionError(
                f"BORDERS_MAX_ROWS must be an integer, got {max_rows_env!r}"
            ) from None

        return cls(
            alignment=parse_alignment(os.environ.get("BORDERS_ALIGNMENT", "l")),
            key_header=os.environ.get("BORDERS_KEY_HEADER", DEFAULT_KEY_HEADER),
            value_header=os.environ.get("BORDERS_VALUE_HEADER", DEFAULT_VALUE_HEADER),
            max_rows=max_rows,
        )


def parse_alignment(value: str | Sequence[str]) -> Alignment | tuple[Alignment, ...]:
    """
    Parse a single alignment or a comma-separated list of alignments.

    Examples:
        "r"      -> Alignment.RIGHT
        "l,r"    -> (Alignment.LEFT, Alignment.RIGHT)
        ["c"]    -> (Alignment.CENTER,)
    """
    if isinstance(value, str):
        parts = [p for p in value.split(",") if p.strip()]
        if len(parts) == 1 and "," not in value:
            return Alignment.parse(parts[0])
        if not parts:
            return Alignment.LEFT
        return tuple(Alignment.parse(p) for p in parts)
    return tuple(Alignment.parse(p) for p in value)


def default_style_from_environment() -> BorderStyle:
    """Return the style named by BORDERS_STYLE (default "thin")."""
    return resolve_style(os.environ.get("BORDERS_STYLE", DEFAULT_STYLE))
