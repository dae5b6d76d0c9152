"""Core types for cron expressions.

This module defines the constant tables every other layer relies on:
- MeasureOfTime: the five fields of an expression, in canonical order
- FIELD_RANGES: inclusive numeric bounds per field
- CronExpression: an immutable snapshot of all five fields
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

WILDCARD = "*"
DEFAULT_INTERVAL: tuple[str, ...] = (WILDCARD,)


class MeasureOfTime(Enum):
    """The five fields of a cron expression.

    Declaration order is the position of the field in the canonical string.
    """

    MINUTE = "minute"
    HOUR = "hour"
    DAY_OF_THE_MONTH = "dayOfTheMonth"
    MONTH = "month"
    DAY_OF_THE_WEEK = "dayOfTheWeek"

    @classmethod
    def from_position(cls, position: int) -> "MeasureOfTime":
        return FIELD_ORDER[position]


@dataclass(frozen=True)
class FieldRange:
    """Inclusive bounds for the numeric tokens of one field."""

    min: int
    max: int

    def __contains__(self, value: int) -> bool:
        return self.min <= value <= self.max


FIELD_ORDER: tuple[MeasureOfTime, ...] = tuple(MeasureOfTime)

# Field name strings, in canonical order
MEASURE_OF_TIME_VALUES: tuple[str, ...] = tuple(m.value for m in FIELD_ORDER)

FIELD_RANGES: Mapping[MeasureOfTime, FieldRange] = MappingProxyType({
    MeasureOfTime.MINUTE: FieldRange(0, 59),
    MeasureOfTime.HOUR: FieldRange(0, 23),
    MeasureOfTime.DAY_OF_THE_MONTH: FieldRange(0, 30),
    MeasureOfTime.MONTH: FieldRange(1, 12),
    MeasureOfTime.DAY_OF_THE_WEEK: FieldRange(0, 6),
})


@dataclass(frozen=True)
class CronExpression:
    """Snapshot of the state of a cron expression.

    Attributes:
        minute: Tokens for the minute field
        hour: Tokens for the hour field
        dayOfTheMonth: Tokens for the day-of-the-month field
        month: Tokens for the month field
        dayOfTheWeek: Tokens for the day-of-the-week field
    """

    minute: tuple[str, ...] = DEFAULT_INTERVAL
    hour: tuple[str, ...] = DEFAULT_INTERVAL
    dayOfTheMonth: tuple[str, ...] = DEFAULT_INTERVAL
    month: tuple[str, ...] = DEFAULT_INTERVAL
    dayOfTheWeek: tuple[str, ...] = DEFAULT_INTERVAL

    def __getitem__(self, field: MeasureOfTime | str) -> tuple[str, ...]:
        name = field.value if isinstance(field, MeasureOfTime) else field
        if name not in MEASURE_OF_TIME_VALUES:
            raise KeyError(name)
        return getattr(self, name)

    def to_dict(self) -> dict[str, list[str]]:
        return {name: list(getattr(self, name)) for name in MEASURE_OF_TIME_VALUES}

    def __str__(self) -> str:
        return " ".join(
            ",".join(getattr(self, name)) for name in MEASURE_OF_TIME_VALUES
        )


def field_name(field: Any) -> str:
    """Normalize a MeasureOfTime member or raw value to its string name."""
    if isinstance(field, MeasureOfTime):
        return field.value
    return field
