"""PostgreSQL INSERT recognizer."""

from .insert_recognizer import BaseInsertRecognizer


class PostgresqlInsertRecognizer(BaseInsertRecognizer):
    """INSERT recognizer for PostgreSQL; identifiers are quoted with double quotes."""

    db_type = "postgresql"
    dialect = "postgres"
    escape_chars = '"'
