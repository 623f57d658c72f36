# -*- coding: utf-8 -*-
"""
Width calculation and aligned row rendering.

    widths = compute_widths(rows, COLUMN_ARITY)
    lines  = [render_column_row(row, widths) for row in rows]

Widths are only meaningful for the rows they were computed from; they are
recomputed for every statement.
"""

from __future__ import annotations

from typing import Callable, List, Sequence

from ddl_formatter.segments import COLUMN_ARITY, COLUMNS, CONSTRAINT_ARITY, REFERRED_COLUMNS

ROW_SEPARATOR = "\n  , "


def compute_widths(rows: Sequence[Sequence[str]], arity: int) -> List[int]:
    """Maximum segment length per position across ``rows`` (zeros when empty)."""
    widths = [0] * arity
    for row in rows:
        if len(row) != arity:
            raise ValueError(f"Expected {arity} segments, got {len(row)}: {list(row)!r}")
        for position, segment in enumerate(row):
            widths[position] = max(widths[position], len(segment))
    return widths


def render_column_row(segments: Sequence[str], widths: Sequence[int]) -> str:
    """Render ``name type nullability default``.

    Nullability is right-justified so ``NOT NULL`` and ``NULL`` end in the same
    column. Trailing padding is kept: every column row has the same length.
    """
    name, data_type, nullable, default = segments
    return (
        f"{name:<{widths[0]}} "
        f"{data_type:<{widths[1]}} "
        f"{nullable:>{widths[2]}} "
        f"{default:<{widths[3]}}"
    )


def render_constraint_row(segments: Sequence[str], widths: Sequence[int]) -> str:
    """Render the eight constraint segments, left-justified and stripped.

    The column list and the referred columns are wrapped in parentheses when
    non-empty, so their widths grow by two.
    """
    fields = []
    for position in range(CONSTRAINT_ARITY):
        segment = segments[position]
        width = widths[position]
        if position in (COLUMNS, REFERRED_COLUMNS):
            segment = f"({segment})" if segment else ""
            width += 2
        fields.append(f"{segment:<{width}}")
    return " ".join(fields).strip()


def render_block(
    rows: Sequence[Sequence[str]],
    arity: int,
    render_row: Callable[[Sequence[str], Sequence[int]], str],
) -> str:
    """Align ``rows`` under one width table and join them with the row separator."""
    widths = compute_widths(rows, arity)
    return ROW_SEPARATOR.join(render_row(row, widths) for row in rows)


def render_columns(rows: Sequence[Sequence[str]]) -> str:
    return render_block(rows, COLUMN_ARITY, render_column_row)


def render_constraints(rows: Sequence[Sequence[str]]) -> str:
    return render_block(rows, CONSTRAINT_ARITY, render_constraint_row)
