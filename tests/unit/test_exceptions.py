"""Tests for exception classes."""

import pytest

from borders import (
    BordersError,
    GridError,
    InvalidColumnCountError,
    InvalidOptionError,
    InvalidStyleError,
    RaggedGridError,
    UnboundedInputError,
)


class TestExceptionHierarchy:
    """Tests for the exception hierarchy."""

    @pytest.mark.parametrize(
        "exc_class",
        [
            GridError,
            RaggedGridError,
            UnboundedInputError,
            InvalidColumnCountError,
            InvalidStyleError,
            InvalidOptionError,
        ],
    )
    def test_all_inherit_from_base(self, exc_class: type[Exception]) -> None:
        assert issubclass(exc_class, BordersError)

    def test_grid_errors(self) -> None:
        assert issubclass(RaggedGridError, GridError)
        assert issubclass(UnboundedInputError, GridError)
        assert issubclass(InvalidColumnCountError, GridError)

    def test_configuration_errors_are_value_errors(self) -> None:
        assert issubclass(InvalidStyleError, ValueError)
        assert issubclass(InvalidOptionError, ValueError)
        assert issubclass(InvalidColumnCountError, ValueError)


class TestRaggedGridError:
    """Tests for RaggedGridError."""

    def test_attributes_and_message(self) -> None:
        exc = RaggedGridError(row_index=2, expected=3, actual=1)
        assert exc.row_index == 2
        assert exc.expected == 3
        assert exc.actual == 1
        assert str(exc) == "Row 2 has 1 cells, expected 3"


class TestUnboundedInputError:
    """Tests for UnboundedInputError."""

    def test_attributes_and_message(self) -> None:
        exc = UnboundedInputError(limit=100)
        assert exc.limit == 100
        assert str(exc) == "Iterable yielded more than 100 rows"


class TestInvalidColumnCountError:
    """Tests for InvalidColumnCountError."""

    def test_attributes_and_message(self) -> None:
        exc = InvalidColumnCountError(columns=-2)
        assert exc.columns == -2
        assert str(exc) == "columns must be non-negative, got -2"
