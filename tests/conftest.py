"""Pytest configuration and fixtures."""

import pytest
import sqlglot


@pytest.fixture
def parse():
    """Parse one statement with sqlglot, the way callers hand ASTs to recognizers."""
    def _parse(sql, dialect="mysql"):
        return sqlglot.parse_one(sql, dialect=dialect)
    return _parse


@pytest.fixture
def pk_index():
    """Primary key position used by the row extraction tests."""
    return 0


@pytest.fixture
def sample_insert_statements():
    """Sample INSERT statements for testing."""
    return {
        "single_column": "INSERT INTO t1 (name) VALUES ('name1')",
        "two_columns": "INSERT INTO t1 (name1, name2) VALUES ('name1', 'name2')",
        "multi_row": "INSERT INTO t1 (name1, name2) VALUES ('name1', 'name2'), ('name3', 'name4'), ('name5', 'name6')",
        "implicit_columns": "insert into t values (?)",
        "mixed_values": "insert into t(id, no, name, age, time) values (1, null, 'a', ?, now())",
        "quoted_columns": "insert into t(`id`, `no`, `name`, `age`) values (1, 'no001', 'aaa', '20')"
    }
