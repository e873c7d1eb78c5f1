"""Base recognizer class with the accessors shared by every statement."""

from abc import ABC, abstractmethod
from typing import Optional

from sqlglot import exp

from ..models import SQLType
from ...utils.logging_config import get_logger


class SQLRecognizer(ABC):
    """
    Base class for all statement recognizers.

    A recognizer is a read-only view over the original SQL text and the AST the
    caller parsed from it. Dialect specifics are class attributes.
    """

    db_type: str = ""
    dialect: str = ""
    escape_chars: str = ""

    def __init__(self, original_sql: str, ast: exp.Expression):
        self.original_sql = original_sql
        self.ast = ast
        self.logger = get_logger('recognizers.base')

    def get_original_sql(self) -> str:
        """Return the SQL text exactly as supplied."""
        return self.original_sql

    @abstractmethod
    def get_sql_type(self) -> SQLType:
        """Return the statement category."""
        pass

    @abstractmethod
    def get_table_name(self) -> str:
        """Return the target table as written, quoting included."""
        pass

    @abstractmethod
    def get_table_alias(self) -> Optional[str]:
        """Return the table alias, or None without an alias clause."""
        pass
