"""SQL Recognizer - structured extraction of INSERT statements for rollback images."""

from .core import (
    SQLParsingException, SQLType, Literal, ExplicitNull, NULL, Placeholder, OpaqueExpression,
    InsertRecognition, MySQLInsertRecognizer, MariadbInsertRecognizer, PostgresqlInsertRecognizer
)

__version__ = "1.0.0"
__all__ = [
    "SQLParsingException",
    "SQLType",
    "Literal",
    "ExplicitNull",
    "NULL",
    "Placeholder",
    "OpaqueExpression",
    "InsertRecognition",
    "MySQLInsertRecognizer",
    "MariadbInsertRecognizer",
    "PostgresqlInsertRecognizer"
]
