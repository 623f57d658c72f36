# -*- coding: utf-8 -*-
"""
ddl_formatter: aligned pretty-printing of CREATE TABLE statements.

Public API
----------
Main entry point::

    from ddl_formatter import format_sql
    output = format_sql(sql)                      # default dialect (mysql)
    output = format_sql(sql, dialect="postgres")

Non-raising variant::

    from ddl_formatter import try_format
    result = try_format(sql)
    if not result.ok: print(result.error.tag)

Errors::

    from ddl_formatter import FormatError, UnsupportedStatementError, ErrorTag
"""

from ddl_formatter.errors import (
    FormatError,
    MissingConstraintNameError,
    SqlParseError,
    UnsupportedColumnOptionError,
    UnsupportedConstraintError,
    UnsupportedStatementError,
)
from ddl_formatter.formatter import DdlFormatter, format_sql, format_statement, try_format
from ddl_formatter.layout import (
    compute_widths,
    render_column_row,
    render_constraint_row,
)
from ddl_formatter.result import FormatIssue, FormatResult
from ddl_formatter.segments import (
    COLUMN_ARITY,
    CONSTRAINT_ARITY,
    column_segments,
    constraint_segments,
)
from ddl_formatter.tags import ErrorTag, category_for_tag

__all__ = [
    # ── Main entry points ─────────────────────────────────────────────────
    "format_sql",
    "try_format",
    "DdlFormatter",
    "format_statement",
    # ── Layout engine ─────────────────────────────────────────────────────
    "column_segments",
    "constraint_segments",
    "compute_widths",
    "render_column_row",
    "render_constraint_row",
    "COLUMN_ARITY",
    "CONSTRAINT_ARITY",
    # ── Result types ──────────────────────────────────────────────────────
    "FormatResult",
    "FormatIssue",
    # ── Errors ────────────────────────────────────────────────────────────
    "ErrorTag",
    "category_for_tag",
    "FormatError",
    "SqlParseError",
    "UnsupportedStatementError",
    "UnsupportedColumnOptionError",
    "UnsupportedConstraintError",
    "MissingConstraintNameError",
]
