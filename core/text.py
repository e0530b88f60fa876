# =============================================================================
# core/text.py  —  Word Counting & Slug Generation
# =============================================================================
#
# Two total functions: any string in, a result out, no error cases.
#
# COUNTING RULES:
#   - words:  whitespace-delimited, non-empty tokens ("" and "   " → 0)
#   - characters:  len(text), whitespace included
#   - characters_no_whitespace:  len(text) after removing spaces and
#     newlines ONLY.  Tabs, carriage returns and other whitespace are still
#     counted.
#   - lines:  number of "\n" + 1, except the empty string which has 0 lines
#     (so "a\n" has 2 lines: the trailing newline opens an empty one)
#
# SLUG RULES:
#   lowercase → trim → every run of characters outside [a-z0-9] becomes a
#   single "-" → strip leading/trailing "-".  ASCII only: "café" → "caf".
# =============================================================================

import re

from core.models import TextStats


_NON_SLUG_RUN = re.compile(r"[^a-z0-9]+")


def count_text(text: str) -> TextStats:
    """Count words, characters and lines in text."""
    words = len(text.split()) if text.strip() else 0
    lines = text.count("\n") + 1 if text else 0
    stripped = text.replace(" ", "").replace("\n", "")

    return TextStats(
        words=words,
        characters=len(text),
        characters_no_whitespace=len(stripped),
        lines=lines,
    )


def slugify(text: str) -> str:
    """Convert text to a URL-friendly slug.

    Example:
        slugify("Hello World! This is a Test.") == "hello-world-this-is-a-test"
    """
    slug = text.lower().strip()
    slug = _NON_SLUG_RUN.sub("-", slug)
    return slug.strip("-")
