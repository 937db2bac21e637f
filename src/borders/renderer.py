"""
Generic table renderer with box-drawing borders.

This module provides a TableRenderer class for rendering a CellGrid as a
framed text table with a selectable border style and alignment.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .exceptions import InvalidOptionError
from .grid import CellGrid
from .styles import THIN, BorderPosition, BorderStyle, StyleLike, resolve_style
from .width import Alignment, column_widths, pad, split_lines

logger = logging.getLogger(__name__)

AlignmentSpec = Alignment | str | Sequence[Alignment | str] | None


def resolve_alignments(alignments: AlignmentSpec, column_count: int) -> list[Alignment]:
    """
    Expand an alignment option to one Alignment per column.

    Args:
        alignments: None (all left), a single alignment for every column,
            or a sequence with one alignment per column. Columns past the
            end of a short sequence are left-aligned; entries past the last
            column are ignored, so one sequence serves grids of any width.
        column_count: Number of columns in the grid

    Returns:
        List of exactly ``column_count`` alignments

    Raises:
        InvalidOptionError: If an entry is not a known alignment
    """
    if alignments is None:
        return [Alignment.LEFT] * column_count
    if isinstance(alignments, (Alignment, str)):
        return [Alignment.parse(alignments)] * column_count

    resolved = [Alignment.parse(a) for a in alignments][:column_count]
    return resolved + [Alignment.LEFT] * (column_count - len(resolved))


class TableRenderer:
    """Render a cell grid as a box-drawing table.

    Example output (THIN style, header present):
        ┌──────┬───────┐
        │ Key  │ Value │
        ├──────┼───────┤
        │ Jon  │ 38    │
        │ Jake │ 25    │
        └──────┴───────┘
    """

    def __init__(
        self,
        style: StyleLike = THIN,
        alignments: AlignmentSpec = None,
    ) -> None:
        """Initialize the table renderer.

        Args:
            style: Border style, or anything resolve_style() accepts
            alignments: Alignment for all columns ('l', 'r', or 'c'), or a
                list of alignments per column. Defaults to left-aligned
                for all columns.
        """
        self._style = resolve_style(style)
        self._alignments = alignments

    @property
    def style(self) -> BorderStyle:
        return self._style

    def render(self, grid: CellGrid, widths: Sequence[int] | None = None) -> str:
        """Render a grid as a formatted table.

        Args:
            grid: Grid to render
            widths: Precomputed column widths. Computed from the grid when
                omitted; a width narrower than its column's content is
                widened to fit.

        Returns:
            Table string with box-drawing borders, lines joined by newlines
            and no trailing newline
        """
        return "\n".join(self.render_lines(grid, widths))

    def render_lines(self, grid: CellGrid, widths: Sequence[int] | None = None) -> list[str]:
        """Render a grid as a list of table lines (see render())."""
        measured = column_widths(grid)
        if widths is None:
            final_widths = measured
        else:
            if len(widths) != grid.column_count:
                raise InvalidOptionError(
                    f"Got {len(widths)} widths for {grid.column_count} columns"
                )
            final_widths = [max(w, m) for w, m in zip(widths, measured)]

        alignments = resolve_alignments(self._alignments, grid.column_count)

        logger.debug(
            "Rendering %d rows x %d columns (header=%s, style=%s, widths=%s)",
            len(grid.rows),
            grid.column_count,
            grid.header is not None,
            self._style.name,
            final_widths,
        )

        lines: list[str] = []
        lines.append(
            self._rule(
                final_widths,
                BorderPosition.TOP_LEFT,
                BorderPosition.TOP_EDGE,
                BorderPosition.TOP_JOINT,
                BorderPosition.TOP_RIGHT,
            )
        )

        if grid.header is not None:
            lines.extend(self._content_lines(grid.header, final_widths, alignments))
            lines.append(
                self._rule(
                    final_widths,
                    BorderPosition.MID_LEFT,
                    BorderPosition.TOP_EDGE,
                    BorderPosition.MID_JOINT,
                    BorderPosition.MID_RIGHT,
                )
            )

        for row in grid.rows:
            lines.extend(self._content_lines(row, final_widths, alignments))

        lines.append(
            self._rule(
                final_widths,
                BorderPosition.BOTTOM_LEFT,
                BorderPosition.BOTTOM_EDGE,
                BorderPosition.BOTTOM_JOINT,
                BorderPosition.BOTTOM_RIGHT,
            )
        )
        return lines

    def _rule(
        self,
        widths: Sequence[int],
        left: BorderPosition,
        edge: BorderPosition,
        joint: BorderPosition,
        right: BorderPosition,
    ) -> str:
        """Build a horizontal border line; each run covers the cell plus its padding."""
        glyph = self._style.glyph
        horizontal = glyph(edge)
        runs = glyph(joint).join(horizontal * (w + 2) for w in widths)
        return glyph(left) + runs + glyph(right)

    def _content_lines(
        self,
        row: Sequence[str],
        widths: Sequence[int],
        alignments: Sequence[Alignment],
    ) -> list[str]:
        """Build the physical lines of one logical row.

        Multi-line cells make the row as tall as its tallest cell; shorter
        cells are filled with blank lines. Cells are split with split_lines(),
        so "\\r\\n", "\\f", "\\u2028" and the other str.splitlines() separators
        all start a new line and tabs are expanded.
        """
        vertical = self._style.glyph(BorderPosition.VERTICAL_EDGE)
        cell_lines = [split_lines(cell) for cell in row]
        height = max((len(c) for c in cell_lines), default=1)

        lines: list[str] = []
        for i in range(height):
            cells = []
            for col, parts in enumerate(cell_lines):
                text = parts[i] if i < len(parts) else ""
                cells.append(" " + pad(text, widths[col], alignments[col]) + " ")
            lines.append(vertical + vertical.join(cells) + vertical)
        return lines
