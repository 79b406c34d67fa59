"""Value formatting: format rules, built-in formatters and the registry."""

from revisionist.formatting.formatters import Formatter, is_truthy, to_display
from revisionist.formatting.registry import FormatterRegistry, ValueFormatter
from revisionist.formatting.rules import FormatRule

__all__ = [
    "FormatRule",
    "Formatter",
    "FormatterRegistry",
    "ValueFormatter",
    "is_truthy",
    "to_display",
]
