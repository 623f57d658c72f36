"""
ddl-formatter - command line driver

Usage:
    # Format a file with the default dialect (mysql, or DDL_FORMATTER_DIALECT)
    ddl-formatter schema.sql

    # Read from stdin with another dialect
    cat schema.sql | ddl-formatter --dialect postgres
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.markup import escape

from ddl_formatter.config import DEFAULT_DIALECT, LOG_LEVEL
from ddl_formatter.errors import FormatError
from ddl_formatter.formatter import DdlFormatter
from ddl_formatter.logger_config import setup_logger


def read_sources(paths: List[str]) -> List[str]:
    """Read every path ("-" means stdin); stdin alone when no path is given."""
    if not paths:
        return [sys.stdin.read()]
    sources = []
    for path in paths:
        if path == "-":
            sources.append(sys.stdin.read())
        else:
            sources.append(Path(path).read_text(encoding="utf-8"))
    return sources


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Pretty-print CREATE TABLE statements with aligned columns and constraints",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ddl-formatter schema.sql                   # Format a file
  ddl-formatter --dialect postgres a.sql     # Use another sqlglot dialect
  cat schema.sql | ddl-formatter             # Read from stdin
		""",
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="SQL files to format (default: stdin)",
    )
    parser.add_argument(
        "--dialect",
        type=str,
        default=DEFAULT_DIALECT,
        help=f"sqlglot dialect used to parse the input (default: {DEFAULT_DIALECT})",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Console log level (default: {LOG_LEVEL})",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    logger = setup_logger(args.log_level)

    try:
        formatter = DdlFormatter(args.dialect)
    except ValueError as e:
        logger.error(f"Unknown dialect: {escape(str(e))}")
        return 2

    for source in read_sources(args.files):
        try:
            output = formatter.format(source)
        except FormatError as e:
            logger.error(f"[bold red]{e.tag.value}[/bold red]: {escape(e.message)}")
            return 1
        if output:
            print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
