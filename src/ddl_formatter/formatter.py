# -*- coding: utf-8 -*-
"""
CREATE TABLE pretty-printing with a single entry point.

    output = format_sql(sql)                     # default dialect
    output = format_sql(sql, dialect="postgres")
    result = try_format(sql)                     # never raises FormatError

Output layout::

    CREATE TABLE operators_create_consumers (
        operator_api_key_id INT(11)  NOT NULL
      , created_date        DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP()
      , CONSTRAINT fk_operator_api_key_id FOREIGN KEY (operator_api_key_id) REFERENCES api_keys (id)
    )
    ;

Parses exactly once. Raises on the first unsupported construct; no partial
output is ever returned.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import sqlglot
from sqlglot import exp
from sqlglot.errors import ErrorLevel, ParseError, TokenError

from ddl_formatter.config import get_dialect
from ddl_formatter.errors import FormatError, SqlParseError, UnsupportedStatementError
from ddl_formatter.layout import render_columns, render_constraints
from ddl_formatter.result import FormatResult
from ddl_formatter.segments import COLUMN_NODES, column_segments, constraint_segments

logger = logging.getLogger(__name__)

STATEMENT_SEPARATOR = "\n"


class DdlFormatter:
    """Formats CREATE TABLE statements for one dialect."""

    def __init__(self, dialect: Optional[str] = None):
        self.dialect = get_dialect(dialect)

    def format(self, sql: str) -> str:
        """Parse ``sql`` and return the aligned rendering of every statement.

        Raises:
            SqlParseError: the input does not parse under ``self.dialect``.
            UnsupportedStatementError: a statement is not a CREATE TABLE.
            UnsupportedColumnOptionError, UnsupportedConstraintError,
            MissingConstraintNameError: a definition cannot be laid out.
        """
        statements = self.parse(sql)
        rendered: List[str] = []
        for index, statement in enumerate(statements):
            try:
                rendered.append(format_statement(statement, self.dialect))
            except FormatError as exc:
                if exc.statement_index is None:
                    exc.statement_index = index
                raise
        return STATEMENT_SEPARATOR.join(rendered)

    def parse(self, sql: str) -> List[exp.Expression]:
        try:
            statements = sqlglot.parse(sql, read=self.dialect, error_level=ErrorLevel.RAISE)
        except ParseError as exc:
            raise SqlParseError(str(exc), errors=exc.errors) from exc
        except TokenError as exc:
            raise SqlParseError(str(exc)) from exc

        # Empty statements (stray semicolons) come back as None
        statements = [statement for statement in statements if statement is not None]
        logger.debug("Parsed %d statement(s) with dialect %s", len(statements), self.dialect)
        return statements


def format_statement(statement: exp.Expression, dialect: str) -> str:
    """Render one parsed CREATE TABLE statement."""
    schema = _table_schema(statement)

    columns = []
    constraints = []
    for definition in schema.expressions:
        if isinstance(definition, COLUMN_NODES):
            columns.append(column_segments(definition, dialect))
        else:
            constraints.append(constraint_segments(definition, dialect))

    name = schema.this.sql(dialect=dialect)
    not_rendered = [key for key in ("replace", "exists", "properties") if statement.args.get(key)]
    if not_rendered:
        logger.debug("Table %s: %s not rendered", name, ", ".join(not_rendered))
    logger.debug(
        "Rendering table %s: %d column(s), %d constraint(s)",
        name,
        len(columns),
        len(constraints),
    )

    output = f"CREATE TABLE {name} (\n"
    output += f"    {render_columns(columns)}\n"
    if constraints:
        output += f"  , {render_constraints(constraints)}\n"
    output += ")\n;"
    return output


def _table_schema(statement: exp.Expression) -> exp.Schema:
    if isinstance(statement, exp.Create):
        kind = (statement.kind or "").upper()
        if kind != "TABLE":
            raise UnsupportedStatementError(f"CREATE {kind}".strip())
        if not isinstance(statement.this, exp.Schema):
            raise UnsupportedStatementError("CREATE TABLE without a column list")
        return statement.this
    raise UnsupportedStatementError(statement.key.upper())


def format_sql(sql: str, dialect: Optional[str] = None) -> str:
    """Format every CREATE TABLE statement in ``sql``; see DdlFormatter.format."""
    return DdlFormatter(dialect).format(sql)


def try_format(sql: str, dialect: Optional[str] = None) -> FormatResult:
    """
    Format ``sql`` without raising formatter errors.

    Returns:
        FormatResult with ``ok=True`` and ``output`` on success, or
        ``ok=False`` and the ``error`` that stopped formatting.
    """
    formatter = DdlFormatter(dialect)
    try:
        output = formatter.format(sql)
    except FormatError as exc:
        logger.debug("Formatting failed: %s", exc.message)
        return FormatResult(ok=False, sql=sql, dialect=formatter.dialect, error=exc.to_issue())
    return FormatResult(ok=True, sql=sql, dialect=formatter.dialect, output=output)
