"""Mutable cron expression builder.

CronBuilder owns the five fields of one expression. Every mutation runs the
validator first, so a failed call leaves the builder exactly as it was.
"""

import logging
from typing import Mapping, Sequence

from cronbuilder.expression.types import (
    DEFAULT_INTERVAL,
    FIELD_ORDER,
    WILDCARD,
    CronExpression,
    MeasureOfTime,
    field_name,
)
from cronbuilder.expression.validator import (
    InvalidCharacterError,
    InvalidValueTypeError,
    resolve_field,
    validate_expression_object,
    validate_expression_string,
    validate_value,
)

logger = logging.getLogger(__name__)


def _default() -> list[str]:
    return list(DEFAULT_INTERVAL)


def _is_default(tokens: list[str]) -> bool:
    return len(tokens) == 1 and tokens[0] == WILDCARD


def _clean_token(name: str, token: str) -> str:
    """Strip surrounding whitespace; whitespace inside a token is rejected.

    A space inside a stored token would split the field when the expression
    is serialized.
    """
    token = token.strip()
    if any(char.isspace() for char in token):
        raise InvalidCharacterError(
            f'Invalid value {token!r} for "{name}"; '
            "whitespace is only allowed around a value",
            field=name,
        )
    return token


def _check_sequence(name: str, values: Sequence[str]) -> None:
    """Raise InvalidValueTypeError unless values is a non-string sequence of strings."""
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        raise InvalidValueTypeError(
            "Invalid value; Value must be in the form of a list of strings.",
            field=name,
        )
    for value in values:
        if not isinstance(value, str):
            raise InvalidValueTypeError(
                f'Invalid value {value!r} for "{name}"; values must be strings',
                field=name,
            )


class CronBuilder:
    """Builds a cron expression one field at a time.

    Example:
        builder = CronBuilder()
        builder.add_value("hour", "5")
        builder.add_value("hour", "10")
        builder.build()  # "* 5,10 * * *"
    """

    def __init__(self, initial_expression: str | None = None):
        """Initialize the builder, optionally from an existing expression.

        Args:
            initial_expression: Up to five space-delimited parts; missing or
                empty parts default to "*"

        Raises:
            CronExpressionError: If initial_expression fails validation
        """
        self._fields: dict[MeasureOfTime, list[str]] = {
            measure: _default() for measure in FIELD_ORDER
        }

        if initial_expression:
            validate_expression_string(initial_expression)
            parts = initial_expression.split(" ")
            for measure, part in zip(FIELD_ORDER, parts):
                if part:
                    self._fields[measure] = part.split(",")

    def __str__(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        return f"CronBuilder({self.build()!r})"

    def build(self) -> str:
        """Serialize the current state into the canonical five-field string."""
        return " ".join(",".join(self._fields[measure]) for measure in FIELD_ORDER)

    def add_value(self, field: MeasureOfTime | str, value: str) -> None:
        """Add one value, or several comma-joined values, to a field.

        A field at the default wildcard is replaced by the new values.
        Otherwise each value not already present is appended, in order.
        Adding "*" resets the field to the wildcard.

        Raises:
            CronExpressionError: If field or value fail validation
        """
        validate_value(field, value)
        measure = resolve_field(field)

        parts: list[str] = []
        for part in value.split(","):
            part = _clean_token(measure.value, part)
            if part and part not in parts:
                parts.append(part)

        if not parts:
            return

        if WILDCARD in parts:
            self._fields[measure] = _default()
        elif _is_default(self._fields[measure]):
            self._fields[measure] = parts
        else:
            tokens = self._fields[measure]
            for part in parts:
                if part not in tokens:
                    tokens.append(part)

        logger.debug("Added %r to %s -> %s", value, measure.value, self.get(measure))

    def remove_value(self, field: MeasureOfTime | str, value: str) -> str | None:
        """Remove every occurrence of a single token from a field.

        Returns:
            An informational message if the field is already at the default
            "*" (nothing changes), otherwise None.

        Raises:
            InvalidFieldError: If field is not a known field
        """
        measure = resolve_field(field)
        tokens = self._fields[measure]

        if _is_default(tokens):
            message = (
                f'The value for "{measure.value}" is already at the default '
                f'value of "*" - this is a no-op.'
            )
            logger.debug(message)
            return message

        remaining = [token for token in tokens if token != value]
        self._fields[measure] = remaining or _default()
        logger.debug("Removed %r from %s -> %s", value, measure.value, self.get(measure))
        return None

    def get(self, field: MeasureOfTime | str) -> str:
        """Return the comma-joined tokens of a field.

        Raises:
            InvalidFieldError: If field is not a known field
        """
        return ",".join(self._fields[resolve_field(field)])

    def set(self, field: MeasureOfTime | str, values: Sequence[str]) -> str:
        """Replace the tokens of a field.

        An empty sequence resets the field to "*". Values are stripped of
        surrounding whitespace (blank ones are dropped) and otherwise stored
        as given, without deduplication.

        Returns:
            The comma-joined value now held by the field

        Raises:
            InvalidFieldError: If field is not a known field
            InvalidValueTypeError: If values is not a sequence of strings
            CronExpressionError: If any element fails validation
        """
        measure = resolve_field(field)
        _check_sequence(measure.value, values)

        tokens: list[str] = []
        for value in values:
            validate_value(measure, value)
            token = _clean_token(measure.value, value)
            if token:
                tokens.append(token)

        self._fields[measure] = tokens or _default()
        return self.get(measure)

    def reset(self, field: MeasureOfTime | str | None = None) -> None:
        """Reset one field, or every field when none is given, to "*"."""
        if field is None:
            for measure in FIELD_ORDER:
                self._fields[measure] = _default()
            return
        self._fields[resolve_field(field)] = _default()

    def get_all(self) -> CronExpression:
        """Return an immutable snapshot of all five fields."""
        return CronExpression(
            **{measure.value: tuple(self._fields[measure]) for measure in FIELD_ORDER}
        )

    def set_all(
        self,
        expression: CronExpression | Mapping[MeasureOfTime | str, Sequence[str]],
    ) -> None:
        """Set several fields at once.

        Every supplied field is validated before any is changed. Fields not
        supplied keep their current value.

        Raises:
            TooManyFieldsError: If more than five fields are supplied
            InvalidValueTypeError: If a field's value is not a sequence
            CronExpressionError: If any field or value fails validation
        """
        if isinstance(expression, CronExpression):
            expression = expression.to_dict()

        joined: dict[str, str] = {}
        for name, values in expression.items():
            name = field_name(name)
            _check_sequence(name, values)
            for value in values:
                _clean_token(name, value)
            joined[name] = ",".join(values)

        validate_expression_object(joined)

        for name, values in expression.items():
            self.set(name, values)
