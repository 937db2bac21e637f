"""
borders: render data structures as box-drawn text tables.

Supported inputs:
- sequences with format_slice()
- iterables with format_iter()
- mappings with format_hash_map() and format_hash_map_headers()
- any value's str() with format_display()
- any value's repr() with format_debug()

Example:
    from borders import THIN, format_hash_map, format_slice

    print(format_slice(THIN, [0, 1, 2, 3, 4]))
    print(format_hash_map("double", {"Jon": 38, "Jake": 25, "Josh": 17}))
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from .config import RenderOptions, default_style_from_environment
from .exceptions import (
    BordersError,
    GridError,
    InvalidColumnCountError,
    InvalidOptionError,
    InvalidStyleError,
    RaggedGridError,
    UnboundedInputError,
)
from .formatters import BorderFormatter
from .grid import CellGrid
from .renderer import TableRenderer
from .styles import (
    ASCII,
    DOUBLE,
    THIN,
    BorderPosition,
    BorderStyle,
    BuiltinStyle,
    StyleLike,
    StyleLookup,
    resolve_style,
)
from .width import Alignment, column_widths, display_width

__version__ = "0.1.0"


def format_slice(
    style: StyleLike, values: Sequence[Any], *, options: RenderOptions | None = None
) -> str:
    """Format a sequence as a single-column table, one row per element."""
    return BorderFormatter(style, options).format_slice(values)


def format_iter(
    style: StyleLike, values: Iterable[Any], *, options: RenderOptions | None = None
) -> str:
    """Drain an iterable and format it like format_slice()."""
    return BorderFormatter(style, options).format_iter(values)


def format_hash_map(
    style: StyleLike, mapping: Mapping[Any, Any], *, options: RenderOptions | None = None
) -> str:
    """Format a mapping as a two-column "Key"/"Value" table."""
    return BorderFormatter(style, options).format_hash_map(mapping)


def format_hash_map_headers(
    style: StyleLike,
    mapping: Mapping[Any, Any],
    key_header: str,
    value_header: str,
    *,
    options: RenderOptions | None = None,
) -> str:
    """Format a mapping with the given headers (both empty: no header row)."""
    return BorderFormatter(style, options).format_hash_map_headers(
        mapping, key_header, value_header
    )


def format_display(
    style: StyleLike, value: Any, *, options: RenderOptions | None = None
) -> str:
    """Add a border around ``str(value)``."""
    return BorderFormatter(style, options).format_display(value)


def format_debug(
    style: StyleLike, value: Any, *, options: RenderOptions | None = None
) -> str:
    """Add a border around ``repr(value)``."""
    return BorderFormatter(style, options).format_debug(value)


__all__ = [
    # Formatting
    "format_slice",
    "format_iter",
    "format_hash_map",
    "format_hash_map_headers",
    "format_display",
    "format_debug",
    "BorderFormatter",
    "TableRenderer",
    # Styles
    "THIN",
    "DOUBLE",
    "ASCII",
    "BorderPosition",
    "BorderStyle",
    "BuiltinStyle",
    "StyleLike",
    "StyleLookup",
    "resolve_style",
    # Grid and widths
    "CellGrid",
    "Alignment",
    "column_widths",
    "display_width",
    # Configuration
    "RenderOptions",
    "default_style_from_environment",
    # Exceptions
    "BordersError",
    "GridError",
    "RaggedGridError",
    "UnboundedInputError",
    "InvalidColumnCountError",
    "InvalidStyleError",
    "InvalidOptionError",
]
