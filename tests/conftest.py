"""Pytest fixtures for borders tests."""

from collections.abc import Callable

import pytest

from borders import THIN, Alignment, BorderPosition, BorderStyle, display_width

TableParser = Callable[..., list[list[str]]]


def pytest_collection_modifyitems(config, items):  # noqa: ARG001
    """Add doctest marker to documentation example tests."""
    for item in items:
        if "doctest" in str(item.fspath):
            item.add_marker(pytest.mark.doctest)


def parse_table(
    rendered: str,
    style: BorderStyle = THIN,
    alignment: Alignment = Alignment.LEFT,
) -> list[list[str]]:
    """Recover cell text from rendered content lines.

    Border lines are dropped; each content line is split on the vertical
    glyph and exactly one padding space is removed from each side. Only the
    side the alignment pads is stripped further, so leading spaces survive
    left alignment and trailing spaces survive right alignment.
    """
    vertical = style.glyph(BorderPosition.VERTICAL_EDGE)
    rule_starts = {
        style.glyph(BorderPosition.TOP_LEFT),
        style.glyph(BorderPosition.MID_LEFT),
        style.glyph(BorderPosition.BOTTOM_LEFT),
    }
    strip = {
        Alignment.LEFT: str.rstrip,
        Alignment.RIGHT: str.lstrip,
        Alignment.CENTER: str.strip,
    }[alignment]
    rows = []
    for line in rendered.split("\n"):
        if line[:1] in rule_starts and line[:1] != vertical:
            continue
        cells = line[1:-1].split(vertical)
        rows.append([strip(cell[1:-1], " ") for cell in cells])
    return rows


@pytest.fixture
def table_parser() -> TableParser:
    """Parser that strips borders and padding from THIN tables."""
    return parse_table


@pytest.fixture
def line_widths() -> Callable[[str], set[int]]:
    """Return the set of display widths of every line in a rendered table."""

    def _widths(rendered: str) -> set[int]:
        return {display_width(line) for line in rendered.split("\n")}

    return _widths


@pytest.fixture
def people() -> dict[str, int]:
    """Mapping used throughout the docs."""
    return {"Jon": 38, "Jake": 25, "Josh": 17}
