"""Resolution of VALUES tuple elements into canonical values."""

from datetime import date, time, datetime
from decimal import Decimal, InvalidOperation
from typing import Dict, Optional

from sqlglot import exp

from .exceptions import SQLParsingException
from .models import (
    ValueKind, Value, LiteralValue, Literal, Placeholder, OpaqueExpression, NULL
)
from ..utils.logging_config import get_logger


# String literals cast to these types are date-like constants
TEMPORAL_PARSERS = {
    exp.DataType.Type.DATE: date.fromisoformat,
    exp.DataType.Type.TIME: time.fromisoformat,
    exp.DataType.Type.DATETIME: datetime.fromisoformat,
    exp.DataType.Type.TIMESTAMP: datetime.fromisoformat,
    exp.DataType.Type.TIMESTAMPTZ: datetime.fromisoformat,
    exp.DataType.Type.TIMESTAMPLTZ: datetime.fromisoformat,
    exp.DataType.Type.DATETIME64: datetime.fromisoformat,
}

# Prefixed string constants: N'..', E'..', U&'..', raw strings
STRING_NODE_TYPES = (
    exp.National,
    exp.ByteString,
    exp.UnicodeString,
    exp.RawString,
)

# Expressions the grammar allows in a value position but which have no constant value
OPAQUE_NODE_TYPES = (
    exp.Func,
    exp.Binary,
    exp.Unary,
    exp.Column,
    exp.Subquery,
    exp.Var,
    exp.Interval,
    exp.Parameter,
    exp.SessionParameter,
    exp.Introducer,
)


def placeholder_number(node: exp.Expression) -> Optional[int]:
    """Return the explicit number of a numbered bind parameter ($1, :1), if any."""
    name = node.text("this")
    if name and name.isdigit():
        return int(name)
    return None


def is_placeholder(node: exp.Expression) -> bool:
    """Check whether a node is a bind parameter."""
    if isinstance(node, exp.Placeholder):
        return True
    # @var is a MySQL user variable, only $1 style parameters bind
    return isinstance(node, exp.Parameter) and placeholder_number(node) is not None


class ValueResolver:
    """Classifies and extracts single value-expression nodes."""

    def __init__(self, dialect: str):
        self.dialect = dialect
        self.logger = get_logger('value_resolver')

    def classify(self, node: exp.Expression) -> ValueKind:
        """Map a node to exactly one value kind."""
        if isinstance(node, exp.Null):
            return ValueKind.NULL
        if isinstance(node, (exp.Literal, exp.Boolean, exp.HexString, exp.BitString) + STRING_NODE_TYPES):
            return ValueKind.LITERAL
        if is_placeholder(node):
            return ValueKind.PLACEHOLDER
        if self._introduced_literal(node) is not None:
            return ValueKind.LITERAL
        if isinstance(node, exp.Neg) and isinstance(node.this, exp.Literal) and node.this.is_number:
            return ValueKind.LITERAL
        if self._temporal_type(node) is not None:
            return ValueKind.LITERAL
        if isinstance(node, OPAQUE_NODE_TYPES):
            return ValueKind.OPAQUE
        return ValueKind.UNRECOGNIZED

    def placeholder_ordinals(self, root: exp.Expression) -> Dict[int, int]:
        """
        Number the bind parameters under ``root`` in source order.

        Ordinals are 0-based. Unnumbered placeholders take their position among
        all placeholders; numbered ones ($1, :1) take ``number - 1``.

        Args:
            root: Node whose subtree holds the placeholders, usually the VALUES clause

        Returns:
            Mapping of ``id(node)`` to ordinal
        """
        ordinals = {}
        position = 0
        for node in root.find_all(exp.Placeholder, exp.Parameter, bfs=False):
            if not is_placeholder(node):
                continue
            number = placeholder_number(node)
            ordinals[id(node)] = number - 1 if number is not None else position
            position += 1
        return ordinals

    def resolve(self, node: exp.Expression, ordinals: Optional[Dict[int, int]] = None) -> Value:
        """
        Resolve one VALUES element.

        Args:
            node: Value expression node
            ordinals: Placeholder numbering from ``placeholder_ordinals``

        Returns:
            Literal, ExplicitNull, Placeholder or OpaqueExpression

        Raises:
            SQLParsingException: If the node kind has no extraction rule
        """
        kind = self.classify(node)

        if kind == ValueKind.NULL:
            return NULL
        if kind == ValueKind.LITERAL:
            return Literal(self._literal_value(node))
        if kind == ValueKind.PLACEHOLDER:
            return self._placeholder(node, ordinals)
        if kind == ValueKind.OPAQUE:
            return OpaqueExpression(node.sql(dialect=self.dialect), type(node).__name__)

        self.logger.error(f"No extraction rule for {type(node).__name__} in VALUES")
        raise SQLParsingException.unrecognized(node, "VALUES")

    def _placeholder(self, node: exp.Expression, ordinals: Optional[Dict[int, int]]) -> Placeholder:
        if ordinals is None:
            ordinals = self.placeholder_ordinals(node)
        index = ordinals[id(node)]
        name = node.text("this") or None
        if name is not None and name.isdigit():
            name = None
        return Placeholder(index, name)

    @staticmethod
    def _introduced_literal(node: exp.Expression) -> Optional[exp.Literal]:
        """Return the literal behind a charset introducer such as _utf8mb4'abc'."""
        if not isinstance(node, exp.Introducer):
            return None
        literal = node.args.get("expression")
        if isinstance(literal, exp.Literal):
            return literal
        return None

    def _temporal_type(self, node: exp.Expression) -> Optional[exp.DataType.Type]:
        if not isinstance(node, exp.Cast) or not isinstance(node.this, exp.Literal):
            return None
        if not node.this.is_string:
            return None
        for data_type in TEMPORAL_PARSERS:
            if node.to.is_type(data_type):
                try:
                    TEMPORAL_PARSERS[data_type](node.this.this)
                except ValueError:
                    return None
                return data_type
        return None

    def _literal_value(self, node: exp.Expression) -> LiteralValue:
        if isinstance(node, exp.Boolean):
            return bool(node.this)
        if isinstance(node, exp.HexString):
            return int(node.this, 16)
        if isinstance(node, exp.BitString):
            return int(node.this, 2)
        if isinstance(node, exp.Neg):
            return -self._number(node.this.this)
        if isinstance(node, exp.Introducer):
            return self._literal_value(self._introduced_literal(node))
        if isinstance(node, exp.Cast):
            return TEMPORAL_PARSERS[self._temporal_type(node)](node.this.this)
        if isinstance(node, STRING_NODE_TYPES) or node.is_string:
            return node.this
        return self._number(node.this)

    @staticmethod
    def _number(text: str):
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return Decimal(text)
        except InvalidOperation:
            return text
