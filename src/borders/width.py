"""
Display width calculation.

Column widths are measured in terminal columns, not characters or bytes:
wide and fullwidth East-Asian characters occupy two columns, combining
marks and other zero-width code points occupy none.
"""

from __future__ import annotations

import unicodedata
from enum import Enum
from typing import TYPE_CHECKING

from .exceptions import InvalidOptionError

if TYPE_CHECKING:
    from .grid import CellGrid


class Alignment(Enum):
    """Placement of text within a padded cell."""

    LEFT = "l"
    RIGHT = "r"
    CENTER = "c"

    @classmethod
    def parse(cls, value: Alignment | str) -> Alignment:
        """Convert 'l'/'r'/'c' or 'left'/'right'/'center' to an Alignment."""
        if isinstance(value, Alignment):
            return value
        key = str(value).strip().lower()
        for member in cls:
            if key in (member.value, member.name.lower()):
                return member
        raise InvalidOptionError(f"Unknown alignment: {value!r}")


_ZERO_WIDTH_CATEGORIES = ("Mn", "Me", "Cf", "Cc")


def char_width(char: str) -> int:
    """
    Return the number of terminal columns a single character occupies.

    Control characters count as zero. Tabs never reach this function when
    text goes through split_lines(), which expands them first.
    """
    # Combining marks, variation selectors, format characters (ZWJ, ZWSP), controls
    if unicodedata.combining(char) or unicodedata.category(char) in _ZERO_WIDTH_CATEGORIES:
        return 0
    if unicodedata.east_asian_width(char) in ("W", "F"):
        return 2
    return 1


def split_lines(text: str) -> list[str]:
    """
    Split cell text into display lines.

    Lines break on every separator str.splitlines() recognises: "\\n",
    "\\r\\n", "\\r", "\\v", "\\f", "\\x1c"-"\\x1e", "\\x85", "\\u2028" and
    "\\u2029". The separators themselves are dropped, so a trailing one adds
    no blank line. Tabs are expanded to 8-column stops.

    Returns:
        At least one line; empty text gives [""]
    """
    return [line.expandtabs() for line in text.splitlines()] or [""]


def display_width(text: str) -> int:
    """
    Calculate the display width of a string.

    Multi-line text measures as its widest line (see split_lines()).

    Args:
        text: Text to measure

    Returns:
        Width in terminal columns
    """
    return max(sum(char_width(c) for c in line) for line in split_lines(text))


def column_widths(grid: CellGrid) -> list[int]:
    """
    Compute the width of each column of a grid.

    Every cell, header included, is scanned; the width of a column is the
    widest display width found in it.

    Args:
        grid: Grid to measure

    Returns:
        One non-negative width per column
    """
    widths = [0] * grid.column_count
    rows = list(grid.rows)
    if grid.header is not None:
        rows.insert(0, grid.header)

    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], display_width(cell))

    return widths


def pad(text: str, width: int, alignment: Alignment = Alignment.LEFT) -> str:
    """
    Pad a single line with spaces to a target display width.

    Text already at or beyond the width is returned unchanged.

    Args:
        text: Line to pad (must not contain newlines)
        width: Target width in terminal columns
        alignment: Where the text sits within the padded space

    Returns:
        Padded line
    """
    padding = width - display_width(text)
    if padding <= 0:
        return text

    if alignment == Alignment.RIGHT:
        return " " * padding + text
    if alignment == Alignment.CENTER:
        left = padding // 2
        return " " * left + text + " " * (padding - left)
    return text + " " * padding
