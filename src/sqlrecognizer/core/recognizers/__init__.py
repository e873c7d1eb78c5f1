"""Statement recognizers for the supported dialects."""

from .base_recognizer import SQLRecognizer
from .insert_recognizer import BaseInsertRecognizer
from .mysql_insert_recognizer import MySQLInsertRecognizer
from .mariadb_insert_recognizer import MariadbInsertRecognizer
from .postgresql_insert_recognizer import PostgresqlInsertRecognizer

__all__ = [
    'SQLRecognizer',
    'BaseInsertRecognizer',
    'MySQLInsertRecognizer',
    'MariadbInsertRecognizer',
    'PostgresqlInsertRecognizer'
]
