"""Input validation utilities."""

from typing import Iterable, Optional

import sqlglot
from sqlglot import exp
from sqlglot.errors import SqlglotError


MAX_STATEMENT_LENGTH = 1_000_000


def validate_sql_input(sql: str, dialect: str) -> Optional[str]:
    """
    Validate that the input holds exactly one statement.

    Recognizers bind one statement to its text, so scripts with several
    statements are rejected rather than silently truncated to the first.

    Args:
        sql: SQL text to validate
        dialect: sqlglot dialect used to split statements

    Returns:
        Error message if invalid, None if valid
    """
    if not isinstance(sql, str):
        return "SQL statement must be a string"

    if not sql.strip():
        return "SQL statement cannot be empty"

    if len(sql) > MAX_STATEMENT_LENGTH:
        return "SQL statement is too large (max 1MB)"

    try:
        statements = [s for s in sqlglot.parse(sql, read=dialect) if s is not None]
    except SqlglotError as e:
        return f"Failed to parse SQL: {e}"

    if len(statements) != 1:
        return f"Expected exactly one statement, found {len(statements)}"

    return None


def validate_insert_statement(ast: exp.Expression) -> Optional[str]:
    """Check that a parsed statement is an INSERT."""
    if not isinstance(ast, exp.Insert):
        return f"Only INSERT statements can be recognized, got {type(ast).__name__.upper()}"
    return None


def validate_dialect(dialect: str, supported_dialects: Iterable[str]) -> Optional[str]:
    """
    Validate SQL dialect against the dialects that have a recognizer.

    Args:
        dialect: SQL dialect string
        supported_dialects: Names accepted by the caller

    Returns:
        Error message if invalid, None if valid
    """
    if not dialect:
        return "Dialect cannot be empty"

    supported = {d.lower() for d in supported_dialects}
    if dialect.lower() not in supported:
        return f"Unsupported dialect '{dialect}'. Supported: {', '.join(sorted(supported))}"

    return None
