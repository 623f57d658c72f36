# -*- coding: utf-8 -*-
"""Exception types raised by the formatter. Each carries a canonical ErrorTag."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ddl_formatter.result import FormatIssue
from ddl_formatter.tags import ErrorTag


class FormatError(Exception):
    """Base class for every error the formatter raises."""

    tag: ErrorTag = ErrorTag.PARSE_ERROR

    def __init__(self, message: str, statement_index: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.statement_index = statement_index

    def to_issue(self) -> FormatIssue:
        return FormatIssue(
            tag=self.tag,
            message=self.message,
            statement_index=self.statement_index,
        )


class SqlParseError(FormatError):
    """The input is not valid SQL under the configured dialect.

    ``errors`` holds sqlglot's structured error dicts (line, col, highlight, ...)
    when the parser provided them.
    """

    tag = ErrorTag.PARSE_ERROR

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors: List[Dict[str, Any]] = errors or []


class UnsupportedStatementError(FormatError):
    """A parsed statement is not a CREATE TABLE with a column list."""

    tag = ErrorTag.UNSUPPORTED_STATEMENT

    def __init__(self, kind: str, statement_index: Optional[int] = None):
        super().__init__(
            f"Unsupported statement: {kind} (only CREATE TABLE can be formatted)",
            statement_index,
        )
        self.kind = kind


class UnsupportedColumnOptionError(FormatError):
    tag = ErrorTag.UNSUPPORTED_COLUMN_OPTION

    def __init__(self, column: str, option: str, statement_index: Optional[int] = None):
        super().__init__(
            f"Unsupported option on column {column}: {option}",
            statement_index,
        )
        self.column = column
        self.option = option


class UnsupportedConstraintError(FormatError):
    tag = ErrorTag.UNSUPPORTED_CONSTRAINT

    def __init__(self, definition: str, statement_index: Optional[int] = None):
        super().__init__(f"Unsupported table constraint: {definition}", statement_index)
        self.definition = definition


class MissingConstraintNameError(FormatError):
    """Table-level constraints must be named (CONSTRAINT <name> ...)."""

    tag = ErrorTag.MISSING_CONSTRAINT_NAME

    def __init__(self, definition: str, statement_index: Optional[int] = None):
        super().__init__(f"Table constraint has no name: {definition}", statement_index)
        self.definition = definition
