"""Recognizer for INSERT statements."""

from typing import List, Optional, Sequence

from sqlglot import exp

from .base_recognizer import SQLRecognizer
from ..exceptions import SQLParsingException
from ..models import SQLType, Row, InsertRecognition
from ..value_resolver import ValueResolver
from ...utils.logging_config import get_logger
from ...utils.sqlglot_helpers import render_node, render_table_name, alias_of, unescape_name


# Plain name references allowed in a column list
COLUMN_NODE_TYPES = (exp.Identifier, exp.Column)


class BaseInsertRecognizer(SQLRecognizer):
    """Shared INSERT recognition; dialect subclasses only set the class attributes."""

    def __init__(self, original_sql: str, ast: exp.Expression):
        super().__init__(original_sql, ast)
        self.value_resolver = ValueResolver(self.dialect)
        self.logger = get_logger('recognizers.insert')

    def get_sql_type(self) -> SQLType:
        return SQLType.INSERT

    def get_table_name(self) -> str:
        return render_table_name(self._target_table(), self.dialect)

    def get_table_alias(self) -> Optional[str]:
        alias = alias_of(self._insert_statement(), self.dialect)
        if alias is None:
            alias = alias_of(self._target_table(), self.dialect)
        return alias

    def insert_columns_is_empty(self) -> bool:
        """Check whether the statement omits its column list."""
        return not self._column_nodes()

    def get_insert_columns(self) -> Optional[List[str]]:
        """
        Extract the explicit column list.

        Returns:
            Column names as written, or None when the statement has no column list

        Raises:
            SQLParsingException: If an entry is not a plain name reference
        """
        column_nodes = self._column_nodes()
        if not column_nodes:
            return None

        columns = []
        for node in column_nodes:
            if not isinstance(node, COLUMN_NODE_TYPES):
                self.logger.error(f"Unexpected {type(node).__name__} in INSERT column list")
                raise SQLParsingException.unrecognized(node, "INSERT column list")
            columns.append(render_node(node, self.dialect))

        self.logger.debug(f"INSERT columns: {columns}")
        return columns

    def get_insert_columns_unescaped(self) -> Optional[List[str]]:
        """Column list with the dialect's quoting characters removed."""
        columns = self.get_insert_columns()
        if columns is None:
            return None
        return [unescape_name(column, self.escape_chars) for column in columns]

    def get_insert_rows(self, primary_key_positions: Sequence[int]) -> List[Row]:
        """
        Extract one row of values per VALUES tuple, in source order.

        Args:
            primary_key_positions: Positions of primary key columns, passed through
                for the caller's rollback image matching; row shape does not depend on it

        Returns:
            List of rows, each a list of resolved values

        Raises:
            SQLParsingException: If any element has no extraction rule
        """
        self.logger.debug(f"Extracting INSERT rows (primary key positions: {list(primary_key_positions)})")

        values = self._values_clause()
        ordinals = self.value_resolver.placeholder_ordinals(values)

        rows = []
        try:
            for tuple_node in self._value_tuples(values):
                rows.append([self.value_resolver.resolve(node, ordinals) for node in tuple_node.expressions])
        except SQLParsingException as e:
            self.logger.error(f"INSERT row extraction failed: {str(e)}", exc_info=True)
            raise

        self.logger.debug(f"Extracted {len(rows)} INSERT rows")
        return rows

    def get_insert_params_value(self) -> List[str]:
        """Render each VALUES tuple's elements, e.g. ``"?, ?"`` for ``(?, ?)``."""
        return [
            ", ".join(render_node(node, self.dialect) for node in tuple_node.expressions)
            for tuple_node in self._value_tuples(self._values_clause())
        ]

    def get_duplicate_key_update(self) -> Optional[List[str]]:
        """
        Extract the columns assigned by ON DUPLICATE KEY UPDATE.

        Returns:
            Column names as written, or None without that clause
        """
        conflict = self._insert_statement().args.get("conflict")
        if not isinstance(conflict, exp.OnConflict) or not conflict.args.get("duplicate"):
            return None

        columns = []
        for assignment in conflict.expressions:
            target = assignment.this if isinstance(assignment, exp.EQ) else assignment
            if not isinstance(target, COLUMN_NODE_TYPES):
                self.logger.error(f"Unexpected {type(target).__name__} in ON DUPLICATE KEY UPDATE")
                raise SQLParsingException.unrecognized(target, "ON DUPLICATE KEY UPDATE")
            columns.append(render_node(target, self.dialect))
        return columns

    def recognize(self, primary_key_positions: Sequence[int] = ()) -> InsertRecognition:
        """Run every accessor and collect the results."""
        self.logger.info(f"Recognizing INSERT statement (length: {len(self.original_sql)})")
        self.logger.debug(
            f"INSERT SQL: {self.original_sql[:200]}..." if len(self.original_sql) > 200
            else f"INSERT SQL: {self.original_sql}"
        )

        result = InsertRecognition(
            sql=self.get_original_sql(),
            dialect=self.db_type,
            sql_type=self.get_sql_type(),
            table_name=self.get_table_name(),
            table_alias=self.get_table_alias(),
            insert_columns=self.get_insert_columns(),
            insert_rows=self.get_insert_rows(primary_key_positions),
            primary_key_positions=list(primary_key_positions),
            duplicate_key_update=self.get_duplicate_key_update()
        )

        self.logger.info(f"INSERT recognition completed - table: {result.table_name}, {len(result.insert_rows)} rows")
        return result

    def _insert_statement(self) -> exp.Insert:
        if not isinstance(self.ast, exp.Insert):
            raise SQLParsingException(
                f"Expected an INSERT statement, got {type(self.ast).__name__}", self.ast
            )
        return self.ast

    def _target_table(self) -> exp.Table:
        target = self._insert_statement().this
        if isinstance(target, exp.Schema):
            target = target.this
        if not isinstance(target, exp.Table):
            raise SQLParsingException.unrecognized(target, "INSERT target")
        return target

    def _column_nodes(self) -> List[exp.Expression]:
        target = self._insert_statement().this
        if isinstance(target, exp.Schema):
            return list(target.expressions)
        # INSERT INTO t AS a (cols): the column list hangs off the table alias
        alias = self._target_table().args.get("alias")
        if isinstance(alias, exp.TableAlias):
            return list(alias.args.get("columns") or [])
        return []

    def _values_clause(self) -> exp.Values:
        source = self._insert_statement().expression
        if not isinstance(source, exp.Values):
            kind = type(source).__name__ if source is not None else "nothing"
            raise SQLParsingException(f"INSERT rows can only be extracted from VALUES, got {kind}", source)
        return source

    def _value_tuples(self, values: exp.Values) -> List[exp.Tuple]:
        tuples = []
        for node in values.expressions:
            if not isinstance(node, exp.Tuple):
                raise SQLParsingException.unrecognized(node, "VALUES")
            tuples.append(node)
        return tuples
