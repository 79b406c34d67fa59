"""Formatter registry and the schema-aware value formatter."""

from typing import TYPE_CHECKING, Any

from revisionist.errors import UnsupportedFormatKindError
from revisionist.formatting.formatters import BUILTIN_FORMATTERS, Formatter, to_display
from revisionist.formatting.rules import FormatRule

if TYPE_CHECKING:
    from revisionist.schema.provider import SchemaProvider


class FormatterRegistry:
    """Maps rule kinds to formatter functions.

    Starts with the built-in kinds; integrators may register more at startup.
    """

    def __init__(self, formatters: dict[str, Formatter] | None = None) -> None:
        self._formatters: dict[str, Formatter] = dict(
            BUILTIN_FORMATTERS if formatters is None else formatters
        )

    def register(self, kind: str, formatter: Formatter) -> None:
        """Register (or replace) the formatter for a kind."""
        self._formatters[kind] = formatter

    def supports(self, kind: str) -> bool:
        return kind in self._formatters

    @property
    def kinds(self) -> list[str]:
        return sorted(self._formatters)

    def format(self, value: Any, rule: FormatRule, field: str | None = None) -> str:
        """Apply a rule to a value.

        Raises:
            UnsupportedFormatKindError: If no formatter is registered for rule.kind
        """
        formatter = self._formatters.get(rule.kind)
        if formatter is None:
            raise UnsupportedFormatKindError(rule.kind, field)
        return formatter(value, rule)


class ValueFormatter:
    """Formats a field value using the owning entity type's format rules."""

    def __init__(
        self,
        schemas: "SchemaProvider",
        registry: FormatterRegistry | None = None,
    ) -> None:
        self._schemas = schemas
        self._registry = registry or FormatterRegistry()

    def format(self, entity_type: str, field: str, value: Any) -> str:
        """Format a value for (entity_type, field).

        Without a rule for the field, or without a registered schema for the
        entity type, the value's natural string form is returned.
        """
        rule = self._schemas.get_formatter_rules(entity_type).get(field)
        if rule is None:
            return to_display(value)
        return self._registry.format(value, rule, field)
