#!/usr/bin/env python3
"""
Basic Borders Example

Demonstrates every formatting entry point and the three built-in styles.

Run:
    uv run python examples/basic_borders.py

Set BORDERS_STYLE (thin, double or ascii) to change the style of the
environment-configured section.
"""

from collections import Counter

from borders import (
    ASCII,
    DOUBLE,
    THIN,
    BorderFormatter,
    RenderOptions,
    default_style_from_environment,
    format_debug,
    format_display,
    format_hash_map,
    format_hash_map_headers,
    format_iter,
    format_slice,
)


def sequences() -> None:
    """Sequences and iterables become single-column tables."""
    print("=== Sequences ===\n")
    print(format_iter(THIN, iter([0, 5, 12, 3, 234, 124, 4234, 234, 234, 234])))
    print(format_slice(THIN, ["hello", "world"]))
    print(format_slice(THIN, ["hello\nworld", "goodbye\nworld"]))
    print(format_slice(THIN, [0, 1, 2, 3, 4]))


def mappings() -> None:
    """Mappings become Key/Value tables in iteration order."""
    print("\n=== Mappings ===\n")
    letters = Counter("hello world, how are you doing today?")
    print(format_hash_map(THIN, dict(sorted(letters.items()))))

    ages = {"Jon": 38, "Jake": 25, "Josh": 17}
    print(format_hash_map(THIN, ages))
    print(format_hash_map_headers(THIN, ages, "Name", "Score"))


def values() -> None:
    """Any value can be framed through str() or repr()."""
    print("\n=== Values ===\n")
    print(format_display(DOUBLE, "Hello World!"))
    print(format_debug(DOUBLE, "Hello World!"))
    print(format_debug(DOUBLE, [1, 2, 3, 4, 5, 6, 7, 8, 9]))

    # Tables nest: a rendered table is just multi-line text
    inner = format_hash_map_headers(THIN, {"   ": "   "}, "   ", "   ")
    print(format_display(ASCII, format_display(DOUBLE, inner)))


def configured() -> None:
    """Style and options taken from BORDERS_* environment variables."""
    print("\n=== From environment ===\n")
    formatter = BorderFormatter(
        default_style_from_environment(),
        RenderOptions.from_environment(),
    )
    print(formatter.format_hash_map({"日本": "Japan", "café": "coffee"}))


if __name__ == "__main__":
    sequences()
    mappings()
    values()
    configured()
