"""Cell grid model."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .exceptions import InvalidColumnCountError, RaggedGridError

# Row index reported when the header disagrees with an explicit column count
HEADER_ROW = -1


@dataclass(frozen=True)
class CellGrid:
    """
    Rectangular table of string cells with an optional header row.

    Grids are built fresh for each render and never mutated. Every row
    must have the header's column count, or the first row's when there is
    no header. A cell may span several lines; it still counts as one cell.

    Attributes:
        rows: Body rows, in display order
        header: Header row, or None for a headerless grid
        columns: Explicit column count. Only needed to give an empty grid
            its shape; when set, the header and every row must match it.
    """

    rows: tuple[tuple[str, ...], ...]
    header: tuple[str, ...] | None = None
    columns: int | None = None

    def __post_init__(self) -> None:
        if self.columns is not None and self.columns < 0:
            raise InvalidColumnCountError(self.columns)
        if (
            self.header is not None
            and self.columns is not None
            and len(self.header) != self.columns
        ):
            raise RaggedGridError(HEADER_ROW, self.columns, len(self.header))

        expected = self.column_count
        for index, row in enumerate(self.rows):
            if len(row) != expected:
                raise RaggedGridError(index, expected, len(row))

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Sequence[str]],
        header: Sequence[str] | None = None,
        columns: int | None = None,
    ) -> CellGrid:
        """
        Build a grid from any iterable of row sequences.

        Args:
            rows: Body rows; each row is a sequence of cell strings
            header: Optional header row
            columns: Optional explicit column count

        Returns:
            Validated, immutable grid

        Raises:
            RaggedGridError: If any row's cell count differs from the
                header's (or the first row's when there is no header)
        """
        return cls(
            rows=tuple(tuple(row) for row in rows),
            header=tuple(header) if header is not None else None,
            columns=columns,
        )

    @property
    def column_count(self) -> int:
        """Number of columns: header, explicit count, then first row."""
        if self.header is not None:
            return len(self.header)
        if self.columns is not None:
            return self.columns
        if self.rows:
            return len(self.rows[0])
        return 0

    @property
    def is_empty(self) -> bool:
        """True when the grid has neither a header nor body rows."""
        return self.header is None and not self.rows
