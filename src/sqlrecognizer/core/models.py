"""Data models for SQL statement recognition."""

from typing import Dict, List, Optional, Any, Union
from dataclasses import dataclass, field
from decimal import Decimal
from datetime import date, time, datetime
from enum import Enum


class SQLType(str, Enum):
    """Statement category reported by a recognizer."""
    SELECT = "SELECT"
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    SELECT_FOR_UPDATE = "SELECT_FOR_UPDATE"
    REPLACE = "REPLACE"
    TRUNCATE = "TRUNCATE"
    CREATE = "CREATE"
    DROP = "DROP"
    LOAD = "LOAD"
    MERGE = "MERGE"
    ALTER = "ALTER"
    INSERT_ON_DUPLICATE_UPDATE = "INSERT_ON_DUPLICATE_UPDATE"
    INSERT_IGNORE = "INSERT_IGNORE"
    MULTI_UPDATE = "MULTI_UPDATE"
    MULTI_DELETE = "MULTI_DELETE"


class ValueKind(str, Enum):
    """Classification of a node found in a VALUES tuple."""
    LITERAL = "LITERAL"
    NULL = "NULL"
    PLACEHOLDER = "PLACEHOLDER"
    OPAQUE = "OPAQUE"
    UNRECOGNIZED = "UNRECOGNIZED"


LiteralValue = Union[str, int, Decimal, bool, date, time, datetime]


@dataclass(frozen=True)
class Literal:
    """A constant written in the statement."""
    value: LiteralValue


@dataclass(frozen=True)
class ExplicitNull:
    """An explicit NULL keyword in a VALUES tuple."""

    def __repr__(self) -> str:
        return "ExplicitNull"


NULL = ExplicitNull()


@dataclass(frozen=True)
class Placeholder:
    """A bind parameter; ``index`` is the 0-based ordinal within the statement."""
    index: int
    name: Optional[str] = None


@dataclass(frozen=True)
class OpaqueExpression:
    """An expression kept unevaluated, rendered back to SQL."""
    text: str
    node_type: str = ""


Value = Union[Literal, ExplicitNull, Placeholder, OpaqueExpression]
Row = List[Value]


def serialize_value(value: Value) -> Dict[str, Any]:
    """Serialize a resolved value for JSON output."""
    if isinstance(value, Literal):
        raw = value.value
        if isinstance(raw, (date, time, datetime)):
            raw = raw.isoformat()
        elif isinstance(raw, Decimal):
            raw = str(raw)
        return {"kind": ValueKind.LITERAL.value, "value": raw}
    if isinstance(value, ExplicitNull):
        return {"kind": ValueKind.NULL.value}
    if isinstance(value, Placeholder):
        data = {"kind": ValueKind.PLACEHOLDER.value, "index": value.index}
        if value.name is not None:
            data["name"] = value.name
        return data
    return {"kind": ValueKind.OPAQUE.value, "text": value.text, "node_type": value.node_type}


def format_value(value: Value) -> str:
    """Short human readable form of a value."""
    if isinstance(value, Literal):
        if isinstance(value.value, str):
            return repr(value.value)
        return str(value.value)
    if isinstance(value, ExplicitNull):
        return "NULL"
    if isinstance(value, Placeholder):
        return f"?{value.index}" if value.name is None else f":{value.name}"
    return value.text


@dataclass
class InsertRecognition:
    """Result of recognizing one INSERT statement."""
    sql: str
    dialect: str
    sql_type: SQLType
    table_name: Optional[str] = None
    table_alias: Optional[str] = None
    insert_columns: Optional[List[str]] = None
    insert_rows: List[Row] = field(default_factory=list)
    primary_key_positions: List[int] = field(default_factory=list)
    duplicate_key_update: Optional[List[str]] = None
    errors: List[str] = field(default_factory=list)

    def has_errors(self) -> bool:
        """Check if recognition failed."""
        return len(self.errors) > 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "sql": self.sql,
            "dialect": self.dialect,
            "sql_type": self.sql_type.value,
            "table_name": self.table_name,
            "table_alias": self.table_alias,
            "insert_columns": self.insert_columns,
            "insert_rows": [[serialize_value(v) for v in row] for row in self.insert_rows],
            "primary_key_positions": self.primary_key_positions,
            "duplicate_key_update": self.duplicate_key_update,
            "errors": self.errors
        }
