"""Utility functions."""

from .validation import validate_sql_input, validate_insert_statement, validate_dialect

__all__ = ["validate_sql_input", "validate_insert_statement", "validate_dialect"]
