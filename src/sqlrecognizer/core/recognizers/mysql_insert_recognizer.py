"""MySQL INSERT recognizer."""

from .insert_recognizer import BaseInsertRecognizer


class MySQLInsertRecognizer(BaseInsertRecognizer):
    """INSERT recognizer for MySQL; identifiers are quoted with backticks."""

    db_type = "mysql"
    dialect = "mysql"
    escape_chars = "`"
