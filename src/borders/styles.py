"""
Border styles.

A style is the set of glyphs used to draw a table's frame. Three styles
are built in:

- THIN: single thin line
    ┌───┬───┐
    │   │   │
    ├───┼───┤
    └───┴───┘
- DOUBLE: double line
    ╔═══╦═══╗
    ║   ║   ║
    ╠═══╬═══╣
    ╚═══╩═══╝
- ASCII: ``+``, ``-`` and ``|`` only
    +---+---+
    |   |   |
    +---+---+
    +---+---+

Any object with a ``glyph(position)`` method, any mapping from
BorderPosition to glyph, or any callable taking a BorderPosition can be
used as a custom style; resolve_style() freezes it into a BorderStyle.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields
from enum import Enum
from typing import Protocol, runtime_checkable

from .exceptions import InvalidStyleError
from .width import display_width


class BorderPosition(Enum):
    """Structural role a glyph fills in a table's frame."""

    TOP_LEFT = "top_left"
    TOP_EDGE = "top_edge"
    TOP_JOINT = "top_joint"
    TOP_RIGHT = "top_right"
    VERTICAL_EDGE = "vertical_edge"
    MID_LEFT = "mid_left"
    MID_JOINT = "mid_joint"
    MID_RIGHT = "mid_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_EDGE = "bottom_edge"
    BOTTOM_JOINT = "bottom_joint"
    BOTTOM_RIGHT = "bottom_right"


@runtime_checkable
class StyleLookup(Protocol):
    """Protocol for anything that can supply a glyph per border position."""

    def glyph(self, position: BorderPosition) -> str:
        """Return the glyph drawn at ``position``."""
        ...


@dataclass(frozen=True)
class BorderStyle:
    """
    Immutable set of box-drawing glyphs.

    Each glyph must be a single character one terminal column wide.

    Attributes:
        name: Human-readable style name
        vertical: Vertical edge, also the separator between columns
        horizontal: Horizontal edge for the top, bottom and header separator
        top_left: Corner connecting down and right
        top_right: Corner connecting down and left
        bottom_left: Corner connecting up and right
        bottom_right: Corner connecting up and left
        top_joint: Joint connecting down, left and right
        bottom_joint: Joint connecting up, left and right
        mid_left: Joint connecting up, down and right
        mid_right: Joint connecting up, down and left
        cross: Joint connecting in every direction
    """

    name: str
    vertical: str
    horizontal: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    top_joint: str
    bottom_joint: str
    mid_left: str
    mid_right: str
    cross: str

    def __post_init__(self) -> None:
        for f in fields(self):
            if f.name == "name":
                continue
            value = getattr(self, f.name)
            if not isinstance(value, str) or len(value) != 1 or display_width(value) != 1:
                raise InvalidStyleError(
                    f"Style {self.name!r}: {f.name} glyph must be a single "
                    f"character one column wide, got {value!r}"
                )

    def glyph(self, position: BorderPosition) -> str:
        """Return the glyph drawn at ``position``."""
        return getattr(self, _POSITION_FIELDS[position])


_POSITION_FIELDS: dict[BorderPosition, str] = {
    BorderPosition.TOP_LEFT: "top_left",
    BorderPosition.TOP_EDGE: "horizontal",
    BorderPosition.TOP_JOINT: "top_joint",
    BorderPosition.TOP_RIGHT: "top_right",
    BorderPosition.VERTICAL_EDGE: "vertical",
    BorderPosition.MID_LEFT: "mid_left",
    BorderPosition.MID_JOINT: "cross",
    BorderPosition.MID_RIGHT: "mid_right",
    BorderPosition.BOTTOM_LEFT: "bottom_left",
    BorderPosition.BOTTOM_EDGE: "horizontal",
    BorderPosition.BOTTOM_JOINT: "bottom_joint",
    BorderPosition.BOTTOM_RIGHT: "bottom_right",
}


THIN = BorderStyle(
    name="thin",
    vertical="│",
    horizontal="─",
    top_left="┌",
    top_right="┐",
    bottom_left="└",
    bottom_right="┘",
    top_joint="┬",
    bottom_joint="┴",
    mid_left="├",
    mid_right="┤",
    cross="┼",
)

DOUBLE = BorderStyle(
    name="double",
    vertical="║",
    horizontal="═",
    top_left="╔",
    top_right="╗",
    bottom_left="╚",
    bottom_right="╝",
    top_joint="╦",
    bottom_joint="╩",
    mid_left="╠",
    mid_right="╣",
    cross="╬",
)

ASCII = BorderStyle(
    name="ascii",
    vertical="|",
    horizontal="-",
    top_left="+",
    top_right="+",
    bottom_left="+",
    bottom_right="+",
    top_joint="+",
    bottom_joint="+",
    mid_left="+",
    mid_right="+",
    cross="+",
)


class BuiltinStyle(Enum):
    """Names of the built-in border styles."""

    THIN = "thin"
    DOUBLE = "double"
    ASCII = "ascii"

    @property
    def style(self) -> BorderStyle:
        """The BorderStyle instance this name refers to."""
        return _BUILTIN_STYLES[self]


_BUILTIN_STYLES: dict[BuiltinStyle, BorderStyle] = {
    BuiltinStyle.THIN: THIN,
    BuiltinStyle.DOUBLE: DOUBLE,
    BuiltinStyle.ASCII: ASCII,
}


StyleLike = (
    BorderStyle
    | BuiltinStyle
    | str
    | StyleLookup
    | Mapping[BorderPosition, str]
    | Callable[[BorderPosition], str]
)


def _from_lookup(name: str, lookup: Callable[[BorderPosition], str]) -> BorderStyle:
    try:
        glyphs = {position: lookup(position) for position in BorderPosition}
    except KeyError as e:
        raise InvalidStyleError(f"Style {name!r} has no glyph for {e.args[0]}") from e

    if glyphs[BorderPosition.TOP_EDGE] != glyphs[BorderPosition.BOTTOM_EDGE]:
        raise InvalidStyleError(
            f"Style {name!r}: top and bottom edges must use the same horizontal glyph"
        )

    return BorderStyle(
        name=name,
        vertical=glyphs[BorderPosition.VERTICAL_EDGE],
        horizontal=glyphs[BorderPosition.TOP_EDGE],
        top_left=glyphs[BorderPosition.TOP_LEFT],
        top_right=glyphs[BorderPosition.TOP_RIGHT],
        bottom_left=glyphs[BorderPosition.BOTTOM_LEFT],
        bottom_right=glyphs[BorderPosition.BOTTOM_RIGHT],
        top_joint=glyphs[BorderPosition.TOP_JOINT],
        bottom_joint=glyphs[BorderPosition.BOTTOM_JOINT],
        mid_left=glyphs[BorderPosition.MID_LEFT],
        mid_right=glyphs[BorderPosition.MID_RIGHT],
        cross=glyphs[BorderPosition.MID_JOINT],
    )


def resolve_style(style: StyleLike) -> BorderStyle:
    """
    Turn any supported style description into a BorderStyle.

    Args:
        style: A BorderStyle, a BuiltinStyle, a built-in style name
            ("thin", "double", "ascii"; case-insensitive), a mapping from
            BorderPosition to glyph, an object with a ``glyph(position)``
            method, or a callable taking a BorderPosition

    Returns:
        Validated, immutable BorderStyle

    Raises:
        InvalidStyleError: If the name is unknown, a position has no glyph,
            or a glyph is not a single one-column character
    """
    if isinstance(style, BorderStyle):
        return style
    if isinstance(style, BuiltinStyle):
        return style.style
    if isinstance(style, str):
        try:
            return BuiltinStyle(style.strip().lower()).style
        except ValueError:
            valid = ", ".join(s.value for s in BuiltinStyle)
            raise InvalidStyleError(
                f"Unknown style {style!r}. Valid styles: {valid}"
            ) from None
    if isinstance(style, Mapping):
        return _from_lookup("custom", style.__getitem__)
    if isinstance(style, StyleLookup):
        return _from_lookup(type(style).__name__, style.glyph)
    if callable(style):
        return _from_lookup(getattr(style, "__name__", "custom"), style)
    raise InvalidStyleError(f"Unsupported style type: {type(style).__name__}")
