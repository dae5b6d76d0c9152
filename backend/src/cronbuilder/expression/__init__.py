"""Cron expression model for cronbuilder.

This module provides:
- MeasureOfTime / FIELD_RANGES: the five fields and their numeric bounds
- Validator functions: check field names, values and whole expressions
- CronBuilder: mutable five-field expression guarded by the validator
- CronExpression: immutable snapshot returned by CronBuilder.get_all()
"""

from cronbuilder.expression.builder import CronBuilder
from cronbuilder.expression.types import (
    DEFAULT_INTERVAL,
    FIELD_ORDER,
    FIELD_RANGES,
    MEASURE_OF_TIME_VALUES,
    WILDCARD,
    CronExpression,
    FieldRange,
    MeasureOfTime,
)
from cronbuilder.expression.validator import (
    CronExpressionError,
    InvalidCharacterError,
    InvalidFieldError,
    InvalidValueTypeError,
    OutOfRangeError,
    TooManyFieldsError,
    validate_expression_object,
    validate_expression_string,
    validate_field_name,
    validate_value,
)

__all__ = [
    # Types
    "DEFAULT_INTERVAL",
    "FIELD_ORDER",
    "FIELD_RANGES",
    "MEASURE_OF_TIME_VALUES",
    "WILDCARD",
    "CronExpression",
    "FieldRange",
    "MeasureOfTime",
    # Errors
    "CronExpressionError",
    "InvalidCharacterError",
    "InvalidFieldError",
    "InvalidValueTypeError",
    "OutOfRangeError",
    "TooManyFieldsError",
    # Validator
    "validate_expression_object",
    "validate_expression_string",
    "validate_field_name",
    "validate_value",
    # Builder
    "CronBuilder",
]
