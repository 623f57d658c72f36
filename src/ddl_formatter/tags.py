# -*- coding: utf-8 -*-
"""
All canonical formatter error tags as a single flat Enum.

This module is the single source of truth for:
  - Every error tag string (ErrorTag enum)
  - The category of each tag (derived from the tag value prefix)
"""

from __future__ import annotations

from enum import Enum

# ─── Tag prefix → category ───────────────────────────────────────────────────
# The convention is that every tag value is "{prefix}_{name}".
# The prefix determines the category automatically.
_PREFIX_TO_CATEGORY: dict[str, str] = {
    "parse": "syntax",
    "unsupported": "unsupported",
    "missing": "precondition",
}


class ErrorTag(str, Enum):
    """
    All canonical formatter error tags.

    Since this class inherits from str, members compare equal to their
    string values:
        ErrorTag.PARSE_ERROR == "parse_error"  # True
    """

    # ── Syntax ────────────────────────────────────────────────────────────
    PARSE_ERROR = "parse_error"

    # ── Unsupported input ─────────────────────────────────────────────────
    UNSUPPORTED_STATEMENT = "unsupported_statement"
    UNSUPPORTED_COLUMN_OPTION = "unsupported_column_option"
    UNSUPPORTED_CONSTRAINT = "unsupported_constraint"

    # ── Preconditions ─────────────────────────────────────────────────────
    MISSING_CONSTRAINT_NAME = "missing_constraint_name"

    @property
    def category(self) -> str:
        """Category derived from tag value prefix (no lookup needed)."""
        prefix = self.value.split("_")[0]
        return _PREFIX_TO_CATEGORY.get(prefix, "syntax")


def category_for_tag(tag: str) -> str:
    """Return the category for a tag string, ``"unknown"`` if it is not canonical."""
    try:
        return ErrorTag(tag).category
    except ValueError:
        return "unknown"
