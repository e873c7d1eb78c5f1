"""MariaDB INSERT recognizer."""

from .mysql_insert_recognizer import MySQLInsertRecognizer


class MariadbInsertRecognizer(MySQLInsertRecognizer):
    """INSERT recognizer for MariaDB, which sqlglot parses with the MySQL grammar."""

    db_type = "mariadb"
