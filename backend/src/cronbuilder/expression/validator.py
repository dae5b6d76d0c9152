"""Validation for cron expression fields and values.

Every check is a pure function over the constant tables in
``cronbuilder.expression.types``; nothing here holds state. Failures raise a
subclass of :class:`CronExpressionError` before any caller mutates anything.

Accepted value syntax is deliberately small: digits, commas, whitespace and
the ``*`` wildcard. Steps (``*/5``), ranges (``1-5``) and names (``MON``) are
rejected as invalid characters.
"""

import logging
import re
from typing import Any, Mapping, Sequence

from cronbuilder.expression.types import (
    FIELD_ORDER,
    FIELD_RANGES,
    MEASURE_OF_TIME_VALUES,
    WILDCARD,
    MeasureOfTime,
    field_name,
)

logger = logging.getLogger(__name__)

MAX_FIELDS = len(FIELD_ORDER)

# Anything outside this class is rejected
INVALID_CHARS_PATTERN = re.compile(r"[^0-9*,\s]")

# Leading integer prefix, after optional whitespace
LEADING_INT_PATTERN = re.compile(r"\s*(\d+)")


# =============================================================================
# Errors
# =============================================================================


class CronExpressionError(Exception):
    """Base class for cron expression validation failures.

    Attributes:
        message: Human-readable message
        code: Machine-readable error code (e.g., "OUT_OF_RANGE")
        field: Field name this error relates to, or None for expression-level errors
    """

    code = "INVALID_EXPRESSION"

    def __init__(self, message: str, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "field": self.field,
        }


class InvalidFieldError(CronExpressionError):
    """Field identifier is not one of the five known fields."""

    code = "INVALID_FIELD"


class TooManyFieldsError(CronExpressionError):
    """More than five fields were supplied."""

    code = "TOO_MANY_FIELDS"


class InvalidCharacterError(CronExpressionError):
    """A value contains a character outside digits, commas, whitespace and '*'."""

    code = "INVALID_CHARACTER"


class OutOfRangeError(CronExpressionError):
    """A numeric token is outside its field's bounds."""

    code = "OUT_OF_RANGE"

    def __init__(self, message: str, field: str, bound: str, limit: int):
        self.bound = bound
        self.limit = limit
        super().__init__(message, field)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["bound"] = self.bound
        data["limit"] = self.limit
        return data


class InvalidValueTypeError(CronExpressionError):
    """A field was set from something other than a sequence of tokens."""

    code = "INVALID_VALUE_TYPE"


# =============================================================================
# Helpers
# =============================================================================


def _invalid_field_message() -> str:
    return "Invalid measureOfTime; Valid options are: " + ", ".join(MEASURE_OF_TIME_VALUES)


def resolve_field(name: MeasureOfTime | str) -> MeasureOfTime:
    """Map a field name (or member) to its MeasureOfTime member.

    Raises:
        InvalidFieldError: If the name is not a known field
    """
    if isinstance(name, MeasureOfTime):
        return name
    try:
        return MeasureOfTime(name)
    except ValueError:
        raise InvalidFieldError(_invalid_field_message(), field=str(name)) from None


def parse_leading_int(token: str) -> int | None:
    """Parse the leading integer of a token, ignoring trailing characters.

    Returns None when the token has no leading digits; such tokens carry no
    number to range-check.
    """
    match = LEADING_INT_PATTERN.match(token)
    if match is None:
        return None
    return int(match.group(1))


# =============================================================================
# Public API
# =============================================================================


def validate_field_name(name: MeasureOfTime | str) -> None:
    """Raise InvalidFieldError unless name is one of the five fields."""
    resolve_field(name)


def validate_value(field: MeasureOfTime | str, value: str) -> None:
    """Validate a single token, or a comma-joined list of tokens, for a field.

    Args:
        field: The field the value belongs to
        value: "*", a decimal integer, or several integers joined by commas

    Raises:
        InvalidFieldError: If field is unknown
        InvalidValueTypeError: If value is not a string
        InvalidCharacterError: If value has characters outside [0-9,*\\s]
        OutOfRangeError: If a number is below the field's min or above its max
    """
    measure = resolve_field(field)
    name = measure.value

    if not isinstance(value, str):
        raise InvalidValueTypeError(
            f'Invalid value {value!r} for "{name}"; values must be strings',
            field=name,
        )

    if INVALID_CHARS_PATTERN.search(value):
        raise InvalidCharacterError(
            'Invalid value; Only numbers 0-9, and "*" chars are allowed',
            field=name,
        )

    if value == WILDCARD:
        return

    if "," in value:
        for part in value.split(","):
            validate_value(measure, part)
        return

    number = parse_leading_int(value)
    if number is None:
        return

    limits = FIELD_RANGES[measure]
    if number in limits:
        return
    if number < limits.min:
        raise OutOfRangeError(
            f'Invalid value; given value is not valid for "{name}". '
            f'Minimum value is "{limits.min}".',
            field=name,
            bound="min",
            limit=limits.min,
        )
    raise OutOfRangeError(
        f'Invalid value; given value is not valid for "{name}". '
        f'Maximum value is "{limits.max}".',
        field=name,
        bound="max",
        limit=limits.max,
    )


def validate_expression_object(fields_to_values: Mapping[str, str | Sequence[str]]) -> None:
    """Validate a mapping of field name to value.

    Fewer than five entries is fine; unsupplied fields are implicitly "*".
    Values may be comma-joined strings or sequences of tokens.

    Raises:
        TooManyFieldsError: If more than five entries are supplied
        InvalidValueTypeError: If a sequence value holds non-string items
        CronExpressionError: From validate_value for any bad entry
    """
    if len(fields_to_values) > MAX_FIELDS:
        raise TooManyFieldsError(
            f"Invalid cron expression; limited to {MAX_FIELDS} values."
        )

    for name, value in fields_to_values.items():
        if not isinstance(value, str):
            if not isinstance(value, Sequence) or not all(
                isinstance(item, str) for item in value
            ):
                raise InvalidValueTypeError(
                    f'Invalid value {value!r} for "{field_name(name)}"; '
                    "values must be strings",
                    field=str(field_name(name)),
                )
            value = ",".join(value)
        validate_value(field_name(name), value)


def validate_expression_string(expression: str) -> None:
    """Validate a space-delimited expression of at most five parts.

    Each part is checked against the field at its own position, so
    ``"0 24 * * *"`` fails on hour.

    Raises:
        TooManyFieldsError: If the string has more than five parts
        CronExpressionError: From validate_value for any bad part
    """
    parts = expression.split(" ")
    if len(parts) > MAX_FIELDS:
        raise TooManyFieldsError(
            f"Invalid cron expression; limited to {MAX_FIELDS} values."
        )

    for position, part in enumerate(parts):
        validate_value(MeasureOfTime.from_position(position), part)
    logger.debug("Validated expression %r", expression)
