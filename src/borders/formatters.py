"""
Input adapters and the BorderFormatter facade.

The grid_from_* functions convert supported input shapes into a CellGrid;
BorderFormatter binds a style and options and renders those grids.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from itertools import islice
from typing import Any

from .config import DEFAULT_KEY_HEADER, DEFAULT_VALUE_HEADER, RenderOptions
from .exceptions import UnboundedInputError
from .grid import CellGrid
from .renderer import TableRenderer
from .styles import THIN, BorderStyle, StyleLike

logger = logging.getLogger(__name__)

ToText = Callable[[Any], str]


def grid_from_sequence(values: Sequence[Any], to_text: ToText = str) -> CellGrid:
    """One column, one row per element, no header."""
    return CellGrid.from_rows(((to_text(v),) for v in values), columns=1)


def grid_from_iterable(
    values: Iterable[Any],
    to_text: ToText = str,
    max_rows: int | None = None,
) -> CellGrid:
    """
    Drain an iterable and build a single-column grid from it.

    Args:
        values: Any finite iterable
        to_text: Conversion applied to each element
        max_rows: Maximum number of elements to accept

    Raises:
        UnboundedInputError: If the iterable yields more than ``max_rows``
            elements. At most ``max_rows + 1`` elements are consumed.
    """
    if max_rows is None:
        items = list(values)
    else:
        items = list(islice(values, max_rows + 1))
        if len(items) > max_rows:
            raise UnboundedInputError(max_rows)
    logger.debug("Drained %d items from iterable", len(items))
    return grid_from_sequence(items, to_text)


def grid_from_mapping(
    mapping: Mapping[Any, Any],
    key_header: str = DEFAULT_KEY_HEADER,
    value_header: str = DEFAULT_VALUE_HEADER,
    to_text: ToText = str,
) -> CellGrid:
    """
    Two columns, one row per entry, in the mapping's iteration order.

    Order is whatever the mapping yields; sort beforehand when the output
    must be deterministic. When both headers are empty the grid has no
    header row.
    """
    header = (key_header, value_header) if key_header or value_header else None
    rows = ((to_text(k), to_text(v)) for k, v in mapping.items())
    return CellGrid.from_rows(rows, header=header, columns=2)


def grid_from_text(text: str) -> CellGrid:
    """Single column with one row per line of ``text``."""
    lines = text.splitlines() or [""]
    return CellGrid.from_rows(((line,) for line in lines), columns=1)


def grid_from_display(value: Any) -> CellGrid:
    """Grid of the human-readable representation (``str``) of a value."""
    return grid_from_text(str(value))


def grid_from_debug(value: Any) -> CellGrid:
    """Grid of the debug representation (``repr``) of a value."""
    return grid_from_text(repr(value))


class BorderFormatter:
    """
    Format values as bordered tables using one style and one set of options.

    Example:
        >>> from borders import BorderFormatter
        >>> print(BorderFormatter("ascii").format_slice([1, 22]))
        +----+
        | 1  |
        | 22 |
        +----+
    """

    def __init__(self, style: StyleLike = THIN, options: RenderOptions | None = None) -> None:
        self._options = options or RenderOptions()
        self._renderer = TableRenderer(style, alignments=self._options.alignment)

    @property
    def style(self) -> BorderStyle:
        return self._renderer.style

    @property
    def options(self) -> RenderOptions:
        return self._options

    def format_grid(self, grid: CellGrid) -> str:
        """Render an already-built grid."""
        return self._renderer.render(grid)

    def format_slice(self, values: Sequence[Any]) -> str:
        """Format a sequence as a single-column table, one row per element."""
        return self.format_grid(grid_from_sequence(values))

    def format_iter(self, values: Iterable[Any]) -> str:
        """
        Format an iterable as a single-column table.

        The iterable is fully drained before rendering; see
        RenderOptions.max_rows to bound it.
        """
        return self.format_grid(grid_from_iterable(values, max_rows=self._options.max_rows))

    def format_hash_map(self, mapping: Mapping[Any, Any]) -> str:
        """Format a mapping as a two-column table using the configured headers."""
        return self.format_hash_map_headers(
            mapping, self._options.key_header, self._options.value_header
        )

    def format_hash_map_headers(
        self,
        mapping: Mapping[Any, Any],
        key_header: str,
        value_header: str,
    ) -> str:
        """Format a mapping with explicit headers; two empty headers omit the header row."""
        return self.format_grid(grid_from_mapping(mapping, key_header, value_header))

    def format_display(self, value: Any) -> str:
        """Add a border around ``str(value)``, one row per line."""
        return self.format_grid(grid_from_display(value))

    def format_debug(self, value: Any) -> str:
        """Add a border around ``repr(value)``, one row per line."""
        return self.format_grid(grid_from_debug(value))
