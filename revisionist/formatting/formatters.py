"""Built-in value formatters.

Each formatter is a pure function ``(value, rule) -> str``. Values arrive
type-erased (strings, numbers or None as stored), so every formatter accepts
strings and degrades to the natural string form when the data does not fit
the rule. Rules that cannot be applied as configured raise
InvalidFormatRuleError.
"""

from collections.abc import Callable
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any

from dateutil import parser as date_parser

from revisionist.errors import InvalidFormatRuleError
from revisionist.formatting.rules import FormatRule
from revisionist.observability.logging import get_logger

logger = get_logger(__name__)

Formatter = Callable[[Any, FormatRule], str]

FALSY_STRINGS = frozenset({"", "0", "false", "no", "off"})

DEFAULT_BOOLEAN_LABELS = ("No", "Yes")
DEFAULT_DATETIME_PATTERN = "%Y-%m-%d %H:%M:%S"
DEFAULT_DATE_PATTERN = "%Y-%m-%d"
DEFAULT_OPTION_LABEL = "undefined"
DEFAULT_CURRENCY_SYMBOL = "$"
DEFAULT_CURRENCY_PRECISION = 2

# Widest rounded number rendered as digits; larger values render raw
MAX_RENDERED_DIGITS = 1000


def to_display(value: Any) -> str:
    """Natural string representation of a stored value."""
    if value is None:
        return ""
    if isinstance(value, datetime | date):
        return value.isoformat()
    return str(value)


def is_truthy(value: Any) -> bool:
    """Truthiness of a stored value; "0", "false", "no" and "off" are false."""
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip().lower() not in FALSY_STRINGS
    return bool(value)


def _is_set(value: Any) -> bool:
    return value is not None and value != ""


def _precision(rule: FormatRule, position: int, default: int | None) -> int | None:
    raw = rule.param("precision", position, default)
    if raw is None:
        return None
    try:
        precision = int(raw)
    except (TypeError, ValueError) as e:
        raise InvalidFormatRuleError(f"Invalid precision '{raw}' in {rule.kind} rule") from e
    if precision < 0:
        raise InvalidFormatRuleError(f"Negative precision in {rule.kind} rule")
    return precision


def _to_decimal(value: Any) -> Decimal | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    return number if number.is_finite() else None


def _quantize(number: Decimal, precision: int | None) -> Decimal | None:
    """Round to the given places, or None when the result is too wide to render."""
    if precision is None:
        width = max(number.adjusted(), 0) - min(int(number.as_tuple().exponent), 0)
        return number if width <= MAX_RENDERED_DIGITS else None
    with localcontext() as ctx:
        ctx.prec = min(max(ctx.prec, number.adjusted() + precision + 2), MAX_RENDERED_DIGITS)
        try:
            return number.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP)
        except InvalidOperation:
            return None


def format_boolean(value: Any, rule: FormatRule) -> str:
    """Map a value to the 'false|true' labels (default 'No|Yes')."""
    false_label = rule.param("false", 0, DEFAULT_BOOLEAN_LABELS[0])
    true_label = rule.param("true", 1, DEFAULT_BOOLEAN_LABELS[1])
    return str(true_label if is_truthy(value) else false_label)


def format_string(value: Any, rule: FormatRule) -> str:
    """Substitute the value into a '%s' template."""
    template = rule.param("template") or rule.argument or "%s"
    try:
        return str(template) % (to_display(value),)
    except (TypeError, ValueError) as e:
        raise InvalidFormatRuleError(
            f"Template '{template}' must contain exactly one %s placeholder"
        ) from e


def format_is_empty(value: Any, rule: FormatRule) -> str:
    """Choose the 'empty|set' label, then substitute the value into it."""
    empty_label = rule.param("empty", 0, DEFAULT_BOOLEAN_LABELS[0])
    set_label = rule.param("set", 1, DEFAULT_BOOLEAN_LABELS[1])
    label = str(set_label if _is_set(value) else empty_label)
    try:
        try:
            return label % (to_display(value),)
        except TypeError:
            # no placeholder for the value; "%%" still collapses
            return label % ()
    except (TypeError, ValueError) as e:
        raise InvalidFormatRuleError(f"Label '{label}' is not a valid %s template") from e


def format_options(value: Any, rule: FormatRule) -> str:
    """Map stored keys to labels, e.g. 'draft.Draft|published.Published'."""
    options: dict[str, Any] = dict(rule.parameters.get("options", {}))
    if not options:
        for item in rule.argument_list():
            key, separator, label = item.partition(".")
            if not separator:
                raise InvalidFormatRuleError(
                    f"Option '{item}' must use the 'key.Label' notation"
                )
            options[key] = label
    default = rule.parameters.get("default", DEFAULT_OPTION_LABEL)
    return str(options.get(to_display(value), default))


def _format_temporal(value: Any, pattern: str) -> str:
    if not _is_set(value):
        return ""
    if isinstance(value, datetime | date):
        return value.strftime(pattern)
    try:
        parsed = date_parser.parse(str(value))
    except (ValueError, OverflowError):
        logger.warning("date_value_unparseable", value=to_display(value), pattern=pattern)
        return to_display(value)
    return parsed.strftime(pattern)


def format_datetime(value: Any, rule: FormatRule) -> str:
    """Render a date/time value with a strftime pattern."""
    pattern = rule.param("pattern") or rule.argument or DEFAULT_DATETIME_PATTERN
    return _format_temporal(value, str(pattern))


def format_date(value: Any, rule: FormatRule) -> str:
    """Render a date value with a strftime pattern (default ISO date)."""
    pattern = rule.param("pattern") or rule.argument or DEFAULT_DATE_PATTERN
    return _format_temporal(value, str(pattern))


def format_numeric(value: Any, rule: FormatRule) -> str:
    """Render a number with optional precision and unit ('precision|unit')."""
    number = _to_decimal(value)
    if number is None:
        return to_display(value)

    rounded = _quantize(number, _precision(rule, 0, None))
    if rounded is None:
        return to_display(value)
    grouping = "," if rule.parameters.get("thousands", False) else ""
    rendered = format(rounded, f"{grouping}f")

    unit = rule.param("unit", 1)
    if unit:
        separator = rule.parameters.get("separator", " ")
        rendered = f"{rendered}{separator}{unit}"
    return rendered


def format_currency(value: Any, rule: FormatRule) -> str:
    """Render a monetary amount ('symbol|precision'), e.g. '-$1,234.50'."""
    number = _to_decimal(value)
    if number is None:
        return to_display(value)

    symbol = rule.param("symbol", 0, DEFAULT_CURRENCY_SYMBOL)
    precision = _precision(rule, 1, DEFAULT_CURRENCY_PRECISION)
    rounded = _quantize(number, precision)
    if rounded is None:
        return to_display(value)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{format(abs(rounded), ',f')}"


BUILTIN_FORMATTERS: dict[str, Formatter] = {
    "boolean": format_boolean,
    "string": format_string,
    "is_empty": format_is_empty,
    "isEmpty": format_is_empty,
    "options": format_options,
    "datetime": format_datetime,
    "date": format_date,
    "numeric": format_numeric,
    "currency": format_currency,
}
