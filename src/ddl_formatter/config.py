"""Configuration management for the DDL formatter"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from sqlglot.dialects.dialect import Dialect

# Load environment variables from root .env
ROOT_DIR = Path(__file__).parent.parent.parent
ENV_PATH = ROOT_DIR / ".env"
load_dotenv(ENV_PATH)

# Dialect used when the caller does not pass one (any sqlglot dialect name)
DEFAULT_DIALECT = os.getenv("DDL_FORMATTER_DIALECT", "mysql")

# Console log level for the CLI
LOG_LEVEL = os.getenv("DDL_FORMATTER_LOG_LEVEL", "WARNING").upper()


def get_dialect(name: Optional[str] = None) -> str:
    """
    Resolve a dialect name, falling back to DEFAULT_DIALECT.

    Args:
        name: sqlglot dialect name such as "mysql" or "postgres"

    Returns:
        The lower-cased dialect name

    Raises:
        ValueError: If sqlglot does not know the dialect
    """
    dialect = (name or DEFAULT_DIALECT).strip().lower()
    # get_or_raise raises ValueError for unknown names
    Dialect.get_or_raise(dialect)
    return dialect
