"""Configuration for documentation example tests."""

from pytest_examples import CodeExample
from pytest_examples.config import ExamplesConfig

# Ruff config for doc examples: ignore rules that are inherent to documentation style.
# - F401: imported but unused (doc examples import for illustration)
# - F821: undefined name (snippets reference variables from prose context)
# - I001: import not sorted (cosmetic, doc examples prioritize readability)
DOCS_EXAMPLES_CONFIG = ExamplesConfig(
    line_length=100,
    target_version="py311",
    ruff_select=["E", "F", "I", "N", "W", "UP"],
    ruff_ignore=["F401", "F821", "I001"],
)

# Paths scanned for Python code blocks
DOCS_PATHS = ("README.md", "docs/")

# Tags that cause an example to be skipped during execution tests.
# - lint-only: fragments that reference names defined in surrounding prose
SKIP_TAGS = {"lint-only"}


def should_skip(example: CodeExample, tags_to_skip: set[str]) -> str | None:
    """Return a skip reason if the example has any skip tags, else None."""
    tags = example.prefix_tags()
    matched = tags & tags_to_skip
    if matched:
        return f"tagged with {', '.join(sorted(matched))}"
    return None
