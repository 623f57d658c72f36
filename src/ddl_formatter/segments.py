# -*- coding: utf-8 -*-
"""
Field extraction: sqlglot column / constraint nodes → display segments.

A column becomes four segments::

    CREATE TABLE table_name (
        NAME   TEXT        NOT NULL           DEFAULT ''
      , {name} {data_type} {options:nullable} {options:default}
    )
    ;

Every table constraint becomes eight segments, whatever its kind, so all
constraint rows of a table share one width table::

    CREATE TABLE table_name (
      , CONSTRAINT NAME   FOREIGN KEY       (COLUMN)   REFERENCES TARGET_TABLE   (TARGET_COLUMN)
      , CONSTRAINT {name} {constraint_type} ({column}) REFERENCES {target_table} ({target_column})
    )
    ;

Column lists are returned without parentheses; the row renderer adds them.
"""

from __future__ import annotations

from typing import Iterable, List

from sqlglot import exp

from ddl_formatter.errors import (
    MissingConstraintNameError,
    UnsupportedColumnOptionError,
    UnsupportedConstraintError,
)

COLUMN_ARITY = 4
CONSTRAINT_ARITY = 8

# Position of each segment in a constraint row
NAME, KIND, COLUMNS, REFERENCES, FOREIGN_TABLE, REFERRED_COLUMNS, ON_DELETE, ON_UPDATE = range(
    CONSTRAINT_ARITY
)

# Table-level key definitions that are supported once they carry a name
_KEY_KINDS = (
    exp.PrimaryKey,
    exp.UniqueColumnConstraint,
    exp.ForeignKey,
    exp.CheckColumnConstraint,
)

# Schema items laid out as columns; untyped SQLite columns are bare identifiers
COLUMN_NODES = (exp.ColumnDef, exp.Identifier)


# ─── Columns ──────────────────────────────────────────────────────────────────


def column_segments(column: exp.Expression, dialect: str) -> List[str]:
    """Return ``[name, type, nullability, default]`` for one column definition.

    SQLite allows untyped columns (``CREATE TABLE t (a, b)``); they arrive as a
    bare identifier and yield only a name.

    The first ``NULL``/``NOT NULL`` option and the first ``DEFAULT`` option win.
    Any other option raises UnsupportedColumnOptionError: dropping it would
    print a definition that no longer matches the input.
    """
    if isinstance(column, exp.Identifier):
        return [column.sql(dialect=dialect), "", "", ""]

    name = column.this.sql(dialect=dialect)
    data_type = column.kind.sql(dialect=dialect) if column.kind else ""

    nullable = ""
    default = ""
    for option in column.constraints:
        kind = option.kind
        if isinstance(kind, exp.NotNullColumnConstraint):
            if not nullable:
                nullable = "NULL" if kind.args.get("allow_null") else "NOT NULL"
        elif isinstance(kind, exp.DefaultColumnConstraint):
            if not default:
                default = f"DEFAULT {kind.this.sql(dialect=dialect)}"
        else:
            raise UnsupportedColumnOptionError(name, option.sql(dialect=dialect))

    return [name, data_type, nullable, default]


# ─── Constraints ──────────────────────────────────────────────────────────────


def constraint_segments(constraint: exp.Expression, dialect: str) -> List[str]:
    """Return the eight display segments of one table-level constraint."""
    if not isinstance(constraint, exp.Constraint):
        if isinstance(constraint, _KEY_KINDS):
            raise MissingConstraintNameError(constraint.sql(dialect=dialect))
        raise UnsupportedConstraintError(constraint.sql(dialect=dialect))

    name = constraint.this
    if name is None or not name.name:
        raise MissingConstraintNameError(constraint.sql(dialect=dialect))

    kinds = constraint.expressions
    if len(kinds) != 1:
        raise UnsupportedConstraintError(constraint.sql(dialect=dialect))
    kind = kinds[0]

    segments = [""] * CONSTRAINT_ARITY
    segments[NAME] = f"CONSTRAINT {name.sql(dialect=dialect)}"

    if isinstance(kind, exp.PrimaryKey):
        _require_rendered_args(kind, {"expressions"}, constraint, dialect)
        segments[KIND] = "PRIMARY KEY"
        segments[COLUMNS] = _column_list(kind.expressions, dialect)
    elif isinstance(kind, exp.UniqueColumnConstraint):
        _require_rendered_args(kind, {"this"}, constraint, dialect)
        # A MySQL index name sits on the Schema: UNIQUE KEY uq_idx (a)
        if not isinstance(kind.this, exp.Schema) or kind.this.this is not None:
            raise UnsupportedConstraintError(constraint.sql(dialect=dialect))
        segments[KIND] = "UNIQUE"
        segments[COLUMNS] = _column_list(kind.this.expressions, dialect)
    elif isinstance(kind, exp.ForeignKey):
        _require_rendered_args(
            kind, {"expressions", "reference", "delete", "update", "options"}, constraint, dialect
        )
        _require_referential_options(kind, constraint, dialect)
        foreign_table, referred_columns = _reference_target(kind, dialect)
        segments[KIND] = "FOREIGN KEY"
        segments[COLUMNS] = _column_list(kind.expressions, dialect)
        segments[REFERENCES] = "REFERENCES"
        segments[FOREIGN_TABLE] = foreign_table
        segments[REFERRED_COLUMNS] = referred_columns
        segments[ON_DELETE] = _referential_action(kind, "delete")
        segments[ON_UPDATE] = _referential_action(kind, "update")
    elif isinstance(kind, exp.CheckColumnConstraint):
        _require_rendered_args(kind, {"this"}, constraint, dialect)
        segments[KIND] = f"CHECK ({kind.this.sql(dialect=dialect)})"
    else:
        raise UnsupportedConstraintError(constraint.sql(dialect=dialect))

    return segments


def _is_set(value) -> bool:
    if value is None or value is False:
        return False
    if isinstance(value, (list, str)):
        return len(value) > 0
    return True


def _require_rendered_args(
    node: exp.Expression, rendered: set, constraint: exp.Expression, dialect: str
) -> None:
    """Raise UnsupportedConstraintError when ``node`` carries an arg the row cannot show."""
    for key, value in node.args.items():
        if key not in rendered and _is_set(value):
            raise UnsupportedConstraintError(constraint.sql(dialect=dialect))


def _require_referential_options(
    foreign_key: exp.ForeignKey, constraint: exp.Expression, dialect: str
) -> None:
    """Only ON DELETE / ON UPDATE may follow REFERENCES; MATCH, DEFERRABLE etc. may not."""
    options = list(foreign_key.args.get("options") or [])
    reference = foreign_key.args.get("reference")
    if reference is not None:
        _require_rendered_args(reference, {"this", "options"}, constraint, dialect)
        options.extend(reference.args.get("options") or [])

    for option in options:
        text = " ".join(str(option).split()).upper()
        if not text.startswith(("ON DELETE ", "ON UPDATE ")):
            raise UnsupportedConstraintError(constraint.sql(dialect=dialect))


def _column_list(columns: Iterable[exp.Expression], dialect: str) -> str:
    names = []
    for column in columns:
        # Key parts may come back wrapped in an ascending Ordered node
        if isinstance(column, exp.Ordered) and not column.args.get("desc"):
            column = column.this
        names.append(column.sql(dialect=dialect))
    return ", ".join(names)


def _reference_target(foreign_key: exp.ForeignKey, dialect: str) -> tuple[str, str]:
    """Return ``(table, referred columns)`` of a FOREIGN KEY's REFERENCES clause."""
    reference = foreign_key.args.get("reference")
    target = reference.this if reference is not None else None
    if isinstance(target, exp.Schema):
        return target.this.sql(dialect=dialect), _column_list(target.expressions, dialect)
    if target is not None:
        return target.sql(dialect=dialect), ""
    return "", ""


def _referential_action(foreign_key: exp.ForeignKey, event: str) -> str:
    """Return ``"ON DELETE <action>"`` / ``"ON UPDATE <action>"`` or ``""``.

    Depending on where the parser stopped, the action is stored either on the
    ForeignKey itself or among the key-constraint options of its Reference.
    """
    prefix = f"ON {event.upper()} "

    action = foreign_key.args.get(event)
    if action:
        return prefix + str(action).upper()

    options = list(foreign_key.args.get("options") or [])
    reference = foreign_key.args.get("reference")
    if reference is not None:
        options.extend(reference.args.get("options") or [])

    for option in options:
        text = " ".join(str(option).split()).upper()
        if text.startswith(prefix):
            return text
    return ""
