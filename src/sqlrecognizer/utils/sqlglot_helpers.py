"""SQLGlot helper functions for consistent SQL parsing and rendering."""

from typing import Optional

import sqlglot
import sqlglot.expressions as exp
from sqlglot.errors import SqlglotError

from .logging_config import get_logger


logger = get_logger('utils.sqlglot_helpers')


def parse_statement(sql: str, dialect: str) -> exp.Expression:
    """Parse a single SQL statement into a sqlglot AST."""
    try:
        logger.debug(f"Parsing SQL with dialect {dialect}")
        return sqlglot.parse_one(sql, dialect=dialect)
    except SqlglotError as e:
        logger.error(f"Failed to parse SQL: {e}")
        raise ValueError(f"Failed to parse SQL: {e}") from e


def render_node(node: exp.Expression, dialect: str) -> str:
    """Render a node back to SQL, keeping identifier quoting."""
    return node.sql(dialect=dialect)


def render_table_name(table: exp.Table, dialect: str) -> str:
    """Render a table reference as catalog.db.name without its alias."""
    parts = [table.args.get(key) for key in ("catalog", "db", "this")]
    return ".".join(render_node(part, dialect) for part in parts if part)


def alias_of(node: exp.Expression, dialect: str) -> Optional[str]:
    """Return the alias carried by a node, or None if it has no alias clause."""
    alias = node.args.get("alias")
    if alias is None:
        return None
    if isinstance(alias, exp.TableAlias):
        alias = alias.this
    if alias is None:
        return None
    if isinstance(alias, exp.Expression):
        return render_node(alias, dialect) or None
    return str(alias) or None


def unescape_name(name: str, escape_chars: str) -> str:
    """Strip dialect quoting from each part of a (possibly qualified) name."""
    if not escape_chars:
        return name
    parts = []
    for part in name.split("."):
        if len(part) >= 2 and part[0] in escape_chars and part[-1] == part[0]:
            part = part[1:-1]
        parts.append(part)
    return ".".join(parts)
