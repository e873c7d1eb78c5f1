#!/usr/bin/env python3
"""
Sample usage examples for SQL Recognizer.
"""

import sqlglot

from sqlrecognizer import MySQLInsertRecognizer, SQLParsingException
from sqlrecognizer.formatters import JSONFormatter, ConsoleFormatter


def main():
    """Demonstrate various usage patterns."""
    print("SQL Recognizer - Sample Usage")
    print("=" * 50)

    # Example 1: Multi-row INSERT
    print("\n1. Multi-row INSERT:")
    sql1 = "INSERT INTO orders (id, customer, total) VALUES (1, 'alice', 10.50), (2, 'bob', NULL)"
    recognizer = MySQLInsertRecognizer(sql1, sqlglot.parse_one(sql1, dialect="mysql"))
    ConsoleFormatter().format_compact(recognizer.recognize([0]))

    # Example 2: Placeholders and function calls
    print("\n2. Placeholders and function calls:")
    sql2 = "insert into t(id, no, name, age, time) values (1, null, 'a', ?, now())"
    recognizer = MySQLInsertRecognizer(sql2, sqlglot.parse_one(sql2, dialect="mysql"))
    print(JSONFormatter().format(recognizer.recognize([0])))

    # Example 3: INSERT ... SELECT has no rows to extract
    print("\n3. INSERT ... SELECT:")
    sql3 = "INSERT INTO archive (id) SELECT id FROM orders"
    recognizer = MySQLInsertRecognizer(sql3, sqlglot.parse_one(sql3, dialect="mysql"))
    try:
        recognizer.get_insert_rows([0])
    except SQLParsingException as e:
        print(f"Not recognized: {e}")


if __name__ == "__main__":
    main()
