"""Format rule descriptors.

Rules are declared per (entity type, field) either as structured tables or in
the compact ``kind:argument`` notation, e.g.::

    format_rules = {
        "public": "boolean:No|Yes",
        "minimum": "string:Min: %s",
        "status": "options:draft.Draft|published.Published",
    }
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from revisionist.errors import InvalidFormatRuleError

RULE_SEPARATOR = ":"
LIST_SEPARATOR = "|"


class FormatRule(BaseModel):
    """Declarative description of how to render one field's values."""

    model_config = ConfigDict(frozen=True)

    kind: str = Field(..., min_length=1, description="Formatter kind")
    argument: str | None = Field(
        default=None,
        description="Compact argument following the kind, e.g. 'No|Yes'",
    )
    parameters: dict[str, Any] = Field(
        default_factory=dict,
        description="Structured parameters; take precedence over argument",
    )

    @classmethod
    def parse(cls, notation: str) -> "FormatRule":
        """Parse the compact ``kind:argument`` notation.

        Only the first colon separates the kind, so templates such as
        ``string:Min: %s`` keep their own colons.

        Raises:
            InvalidFormatRuleError: If the notation has no kind separator
        """
        kind, separator, argument = notation.partition(RULE_SEPARATOR)
        kind = kind.strip()
        if not separator or not kind:
            raise InvalidFormatRuleError(
                f"Format rule '{notation}' must use the 'kind:argument' notation"
            )
        return cls(kind=kind, argument=argument)

    def argument_list(self) -> list[str]:
        """Split the compact argument on '|'."""
        if not self.argument:
            return []
        return self.argument.split(LIST_SEPARATOR)

    def param(self, name: str, position: int | None = None, default: Any = None) -> Any:
        """Read a structured parameter, falling back to a positional argument."""
        if name in self.parameters:
            return self.parameters[name]
        if position is not None:
            items = self.argument_list()
            if position < len(items) and items[position] != "":
                return items[position]
        return default


def coerce_rule(value: Any) -> Any:
    """Accept compact string notation wherever a FormatRule is expected."""
    if isinstance(value, str):
        return FormatRule.parse(value)
    return value
