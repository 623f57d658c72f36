# -*- coding: utf-8 -*-
"""
Tests for the CREATE TABLE formatter: full documents, error paths and
round trips through sqlglot.
"""

import logging

import pytest
import sqlglot
from sqlglot.errors import ParseError

from ddl_formatter import (
    DdlFormatter,
    ErrorTag,
    FormatError,
    MissingConstraintNameError,
    SqlParseError,
    UnsupportedColumnOptionError,
    UnsupportedConstraintError,
    UnsupportedStatementError,
    format_sql,
    try_format,
)


# =============================================================================
# Fixtures (from the operators_create_consumers table)
# =============================================================================

CONSUMERS_SQL = (
    "cReAtE tAbLe operators_create_consumers ("
    "operator_api_key_id    int(11)    NOT NULL, "
    "operator_ip_address_id int(11)   nOt NuLl, "
    "create_consumers JSON NuLl, "
    "retries int(11) nOt NuLl dEfAuLt 0"
    "{constraints});"
)

CONSUMERS_CONSTRAINTS = (
    " , CONSTRAINT fk_operators_create_consumers_operator_api_key_id "
    "FOREIGN KEY (operator_api_key_id ) REFERENCES api_keys (id) "
    " , CONSTRAINT fk_operators_create_consumers_operator_ip_address_id  "
    "FOREIGN KEY (operator_ip_address_id ) REFERENCES operator_ip_addresses (id) "
    " , CONSTRAINT uq_operator_api_key_id_operator_ip_address_id "
    "UNIQUE (operator_api_key_id, operator_ip_address_id)"
)

CONSUMERS_COLUMN_LINES = [
    "    operator_api_key_id    INT(11) NOT NULL          ",
    "  , operator_ip_address_id INT(11) NOT NULL          ",
    "  , create_consumers       JSON        NULL          ",
    "  , retries                INT(11) NOT NULL DEFAULT 0",
]

CONSUMERS_CONSTRAINT_LINES = [
    "  , CONSTRAINT fk_operators_create_consumers_operator_api_key_id    FOREIGN KEY (operator_api_key_id)                         REFERENCES api_keys              (id)",
    "  , CONSTRAINT fk_operators_create_consumers_operator_ip_address_id FOREIGN KEY (operator_ip_address_id)                      REFERENCES operator_ip_addresses (id)",
    "  , CONSTRAINT uq_operator_api_key_id_operator_ip_address_id        UNIQUE      (operator_api_key_id, operator_ip_address_id)",
]


def _document(header: str, lines) -> str:
    return "\n".join([header, *lines, ")", ";"])


# =============================================================================
# Full documents
# =============================================================================

class TestFormatSql:
    """Tests for format_sql() output layout."""

    def test_basic_create_table(self):
        """Columns are aligned; NULL is right-justified under NOT NULL."""
        result = format_sql("CREATE TABLE t (a INT NOT NULL, bb TEXT NULL)", dialect="mysql")

        assert result == _document(
            "CREATE TABLE t (",
            [
                "    a  INT  NOT NULL ",
                "  , bb TEXT     NULL ",
            ],
        )

    def test_columns_only(self):
        """Without constraints there is no constraint block and no dangling comma."""
        sql = CONSUMERS_SQL.format(constraints="")

        result = format_sql(sql, dialect="mysql")

        assert result == _document(
            "CREATE TABLE operators_create_consumers (", CONSUMERS_COLUMN_LINES
        )
        assert "\n  , \n" not in result
        assert not result.splitlines()[-3].startswith("  , CONSTRAINT")

    def test_columns_and_constraints(self):
        """Foreign keys and a unique key share one width table."""
        sql = CONSUMERS_SQL.format(constraints=CONSUMERS_CONSTRAINTS)

        result = format_sql(sql, dialect="mysql")

        assert result == _document(
            "CREATE TABLE operators_create_consumers (",
            CONSUMERS_COLUMN_LINES + CONSUMERS_CONSTRAINT_LINES,
        )

    def test_default_expression_passthrough(self):
        """A function default is printed in the trailing field."""
        result = format_sql(
            "CREATE TABLE t (id INT NOT NULL, "
            "created_date datetime NOT NULL DEFAULT CURRENT_TIMESTAMP())",
            dialect="mysql",
        )

        lines = result.splitlines()
        assert lines[1].startswith("    id           INT      NOT NULL ")
        assert lines[2].startswith("  , created_date DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP")
        assert len(lines[1]) == len(lines[2])

    def test_foreign_key_with_parentheses(self):
        """The referenced table and column appear as REFERENCES api_keys (id)."""
        result = format_sql(
            "CREATE TABLE c (api_key_id INT NOT NULL, "
            "CONSTRAINT fk_api_key FOREIGN KEY (api_key_id) REFERENCES api_keys (id))",
            dialect="mysql",
        )

        assert result.splitlines()[2] == (
            "  , CONSTRAINT fk_api_key FOREIGN KEY (api_key_id) REFERENCES api_keys (id)"
        )

    def test_mixed_constraint_kinds(self):
        """The UNIQUE row aligns with the FK row and carries no trailing padding."""
        result = format_sql(
            "CREATE TABLE orders (id INT NOT NULL, customer_id INT NOT NULL, "
            "CONSTRAINT uq_orders_customer UNIQUE (id, customer_id), "
            "CONSTRAINT fk_orders_customer FOREIGN KEY (customer_id) REFERENCES customers (id))",
            dialect="mysql",
        )

        assert result == _document(
            "CREATE TABLE orders (",
            [
                "    id          INT NOT NULL ",
                "  , customer_id INT NOT NULL ",
                "  , CONSTRAINT uq_orders_customer UNIQUE      (id, customer_id)",
                "  , CONSTRAINT fk_orders_customer FOREIGN KEY (customer_id)     REFERENCES customers (id)",
            ],
        )

    def test_multiple_statements(self):
        """Each CREATE TABLE is rendered on its own, in input order."""
        result = format_sql("CREATE TABLE a (x INT); CREATE TABLE b (y INT);", dialect="mysql")

        assert result == (
            "CREATE TABLE a (\n    x INT  \n)\n;"
            "\n"
            "CREATE TABLE b (\n    y INT  \n)\n;"
        )

    def test_empty_input(self):
        """No statements, no output."""
        assert format_sql("", dialect="mysql") == ""

    def test_postgres_dialect(self):
        """The dialect controls parsing and rendering."""
        result = format_sql(
            "CREATE TABLE t (id INTEGER NOT NULL, name TEXT)", dialect="postgres"
        )

        assert result == _document(
            "CREATE TABLE t (",
            [
                "    id   INT  NOT NULL ",
                "  , name TEXT          ",
            ],
        )

    def test_formatter_holds_dialect(self):
        formatter = DdlFormatter("postgres")

        assert formatter.dialect == "postgres"
        assert formatter.format("CREATE TABLE t (a TEXT)").startswith("CREATE TABLE t (")

    def test_untyped_sqlite_columns(self):
        """SQLite columns without a type are laid out as columns."""
        result = format_sql("CREATE TABLE t (a, bb)", dialect="sqlite")

        assert result == _document("CREATE TABLE t (", ["    a    ", "  , bb   "])

    def test_table_modifiers_logged(self, caplog):
        """IF NOT EXISTS is not part of the layout and is reported at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="ddl_formatter.formatter"):
            result = format_sql("CREATE TABLE IF NOT EXISTS t (a INT)", dialect="mysql")

        assert result.startswith("CREATE TABLE t (")
        assert "exists not rendered" in caplog.text


# =============================================================================
# Alignment properties
# =============================================================================

class TestAlignment:
    """Field boundaries line up across every row of a category."""

    def test_column_rows_same_length(self):
        result = format_sql(CONSUMERS_SQL.format(constraints=""), dialect="mysql")
        rows = [line[4:] for line in result.splitlines()[1:-2]]

        assert len({len(row) for row in rows}) == 1

    def test_constraint_fields_aligned(self):
        result = format_sql(
            CONSUMERS_SQL.format(constraints=CONSUMERS_CONSTRAINTS), dialect="mysql"
        )
        constraint_rows = [line for line in result.splitlines() if "CONSTRAINT" in line]

        assert len({row.index("(") for row in constraint_rows}) == 1
        fk_rows = [row for row in constraint_rows if "REFERENCES" in row]
        assert len({row.index("REFERENCES") for row in fk_rows}) == 1
        assert len({row.rindex("(") for row in fk_rows}) == 1


# =============================================================================
# Round trip
# =============================================================================

class TestRoundTrip:
    """Formatted output parses back to the same statement."""

    @pytest.mark.parametrize(
        "sql",
        [
            "CREATE TABLE t (a INT NOT NULL, bb TEXT NULL)",
            CONSUMERS_SQL.format(constraints=""),
            CONSUMERS_SQL.format(constraints=CONSUMERS_CONSTRAINTS),
        ],
    )
    def test_semantic_round_trip(self, sql):
        formatted = format_sql(sql, dialect="mysql")

        original = sqlglot.parse_one(sql, read="mysql").sql(dialect="mysql")
        reparsed = sqlglot.parse_one(formatted, read="mysql").sql(dialect="mysql")

        assert reparsed == original

    def test_formatting_is_idempotent(self):
        formatted = format_sql(CONSUMERS_SQL.format(constraints=CONSUMERS_CONSTRAINTS), dialect="mysql")

        assert format_sql(formatted, dialect="mysql") == formatted


# =============================================================================
# Errors
# =============================================================================

class TestErrors:
    """Unsupported input fails with no partial output."""

    def test_unsupported_statement(self):
        with pytest.raises(UnsupportedStatementError) as excinfo:
            format_sql("DELETE FROM t", dialect="mysql")

        assert excinfo.value.tag == ErrorTag.UNSUPPORTED_STATEMENT
        assert excinfo.value.kind == "DELETE"
        assert excinfo.value.statement_index == 0

    def test_unsupported_statement_after_table(self):
        """A later bad statement fails the whole call."""
        with pytest.raises(UnsupportedStatementError) as excinfo:
            format_sql("CREATE TABLE t (a INT); SELECT 1", dialect="mysql")

        assert excinfo.value.statement_index == 1

    def test_create_view_unsupported(self):
        with pytest.raises(UnsupportedStatementError) as excinfo:
            format_sql("CREATE VIEW v AS SELECT 1", dialect="mysql")

        assert excinfo.value.kind == "CREATE VIEW"

    def test_parse_error(self):
        with pytest.raises(SqlParseError) as excinfo:
            format_sql("CREATE TABLE t (a INT", dialect="mysql")

        assert excinfo.value.tag == ErrorTag.PARSE_ERROR
        assert isinstance(excinfo.value.__cause__, ParseError)
        assert str(excinfo.value) == str(excinfo.value.__cause__)

    def test_unsupported_column_option(self):
        with pytest.raises(UnsupportedColumnOptionError):
            format_sql("CREATE TABLE t (id INT NOT NULL AUTO_INCREMENT)", dialect="mysql")

    def test_missing_constraint_name(self):
        with pytest.raises(MissingConstraintNameError):
            format_sql("CREATE TABLE t (id INT NOT NULL, PRIMARY KEY (id))", dialect="mysql")

    @pytest.mark.parametrize(
        "sql, dialect",
        [
            ("CREATE TABLE t (a INT, CONSTRAINT uq UNIQUE NULLS NOT DISTINCT (a))", "postgres"),
            ("CREATE TABLE t (a INT, CONSTRAINT fk FOREIGN KEY (a) REFERENCES b (id) MATCH FULL)", "postgres"),
        ],
    )
    def test_constraint_options_not_dropped(self, sql, dialect):
        """Input whose key options cannot be laid out fails instead of losing them."""
        with pytest.raises(UnsupportedConstraintError):
            format_sql(sql, dialect=dialect)

    def test_errors_share_base_class(self):
        with pytest.raises(FormatError):
            format_sql("DROP TABLE t", dialect="mysql")

    def test_unknown_dialect(self):
        with pytest.raises(ValueError):
            format_sql("CREATE TABLE t (a INT)", dialect="not_a_dialect")


# =============================================================================
# Non-raising entry point
# =============================================================================

class TestTryFormat:
    """Tests for try_format()."""

    def test_success(self):
        result = try_format("CREATE TABLE t (a INT)", dialect="mysql")

        assert result.ok is True
        assert result.error is None
        assert result.output == format_sql("CREATE TABLE t (a INT)", dialect="mysql")
        assert result.dialect == "mysql"

    def test_failure(self):
        result = try_format("DELETE FROM t", dialect="mysql")

        assert result.ok is False
        assert result.output is None
        assert result.error.tag == ErrorTag.UNSUPPORTED_STATEMENT
        assert result.error.category == "unsupported"
        assert result.error.statement_index == 0

    def test_to_dict(self):
        d = try_format("CREATE TABLE t (a INT, UNIQUE (a))", dialect="mysql").to_dict()

        assert d["ok"] is False
        assert d["error"]["tag"] == "missing_constraint_name"
        assert d["error"]["category"] == "precondition"
