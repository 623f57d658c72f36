# -*- coding: utf-8 -*-
"""
Pydantic models for the non-raising formatter entry point.

Two types cover the public surface:
  FormatIssue  – one error with a canonical ErrorTag
  FormatResult – top-level result: ok flag + output or issue
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, computed_field

from ddl_formatter.tags import ErrorTag


class FormatIssue(BaseModel):
    """A single formatting error with a canonical tag."""

    tag: ErrorTag
    message: str
    statement_index: Optional[int] = None

    @computed_field  # type: ignore[misc]
    @property
    def category(self) -> str:
        """Category derived from the tag (no extra field needed)."""
        return self.tag.category

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "tag": self.tag.value,
            "message": self.message,
            "category": self.category,
        }
        if self.statement_index is not None:
            d["statement_index"] = self.statement_index
        return d

    model_config = {"extra": "forbid"}


class FormatResult(BaseModel):
    """Result of formatting: ok flag, formatted output or the error that stopped it."""

    ok: bool
    sql: str = ""
    dialect: str = ""
    output: Optional[str] = None
    error: Optional[FormatIssue] = None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "ok": self.ok,
            "sql": self.sql,
            "dialect": self.dialect,
            "output": self.output,
        }
        if self.error is not None:
            result["error"] = self.error.to_dict()
        return result

    def __repr__(self) -> str:
        if self.ok:
            return f"FormatResult(ok=True, sql={self.sql[:50]!r})"
        return (
            f"FormatResult(ok=False, tag={self.error.tag.value if self.error else None!r}, "
            f"sql={self.sql[:50]!r})"
        )

    model_config = {"extra": "forbid"}
