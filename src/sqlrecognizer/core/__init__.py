"""Core recognition components."""

from .exceptions import SQLParsingException
from .models import (
    SQLType, ValueKind, Literal, ExplicitNull, NULL, Placeholder, OpaqueExpression, InsertRecognition
)
from .value_resolver import ValueResolver
from .recognizers import (
    SQLRecognizer, BaseInsertRecognizer, MySQLInsertRecognizer, MariadbInsertRecognizer,
    PostgresqlInsertRecognizer
)

__all__ = [
    "SQLParsingException",
    "SQLType",
    "ValueKind",
    "Literal",
    "ExplicitNull",
    "NULL",
    "Placeholder",
    "OpaqueExpression",
    "InsertRecognition",
    "ValueResolver",
    "SQLRecognizer",
    "BaseInsertRecognizer",
    "MySQLInsertRecognizer",
    "MariadbInsertRecognizer",
    "PostgresqlInsertRecognizer"
]
