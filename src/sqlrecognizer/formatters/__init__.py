"""Output formatters for recognition results."""

from .json_formatter import JSONFormatter
from .console_formatter import ConsoleFormatter

__all__ = ["JSONFormatter", "ConsoleFormatter"]
