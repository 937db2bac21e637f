"""Exceptions for borders."""

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class BordersError(Exception):
    """
    Base exception for all borders errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Category Exceptions
# ---------------------------------------------------------------------------


class GridError(BordersError):
    """
    Base exception for cell grid construction errors.

    Raised when input cannot be normalized into a rectangular,
    bounded grid of cells.
    """

    pass


# ---------------------------------------------------------------------------
# Grid Exceptions
# ---------------------------------------------------------------------------


class RaggedGridError(GridError):
    """
    Raised when a row's cell count disagrees with the grid's column count.

    The column count comes from the header when one is present, otherwise
    from the first row. Rows are never padded or truncated to fit.

    Attributes:
        row_index: Zero-based index of the offending body row, or -1
            when the header disagrees with an explicit column count
        expected: Column count the row should have
        actual: Column count the row has
    """

    def __init__(self, row_index: int, expected: int, actual: int) -> None:
        self.row_index = row_index
        self.expected = expected
        self.actual = actual
        super().__init__(f"Row {row_index} has {actual} cells, expected {expected}")


class UnboundedInputError(GridError):
    """Raised when an iterable yields more rows than the configured limit."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"Iterable yielded more than {limit} rows")


class InvalidColumnCountError(GridError, ValueError):
    """Raised when a grid is given a negative explicit column count."""

    def __init__(self, columns: int) -> None:
        self.columns = columns
        super().__init__(f"columns must be non-negative, got {columns}")


# ---------------------------------------------------------------------------
# Configuration Exceptions
# ---------------------------------------------------------------------------


class InvalidStyleError(BordersError, ValueError):
    """Raised when a border style is unknown or has unusable glyphs."""

    pass


class InvalidOptionError(BordersError, ValueError):
    """Raised when a render option (alignment, row limit) is invalid."""

    pass
