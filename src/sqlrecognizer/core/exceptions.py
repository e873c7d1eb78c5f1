"""Recognition errors."""

from typing import Optional
from sqlglot import exp


class SQLParsingException(ValueError):
    """Raised when a statement's AST holds a node the recognizer cannot interpret."""

    def __init__(self, message: str, node: Optional[exp.Expression] = None):
        super().__init__(message)
        self.node = node

    @classmethod
    def unrecognized(cls, node: exp.Expression, position: str) -> "SQLParsingException":
        """Build the error for a node found where no extraction rule applies."""
        return cls(f"Unknown SQLExpr in {position}: {type(node).__name__} {node!r}", node)
