"""JSON output formatter."""

import json
from typing import Optional
from ..core.models import InsertRecognition


class JSONFormatter:
    """Formats recognition results as JSON."""

    def __init__(self, indent: Optional[int] = 2):
        """
        Initialize JSON formatter.

        Args:
            indent: JSON indentation level (None for compact output)
        """
        self.indent = indent

    def format(self, result: InsertRecognition) -> str:
        """
        Format recognition result as JSON string.

        Args:
            result: InsertRecognition to format

        Returns:
            JSON string representation
        """
        return json.dumps(result.to_dict(), indent=self.indent, ensure_ascii=False)

    def format_to_file(self, result: InsertRecognition, file_path: str) -> None:
        """Format recognition result and write to file."""
        json_str = self.format(result)
        with open(file_path, 'w', encoding='utf-8') as f:
            f.write(json_str)
