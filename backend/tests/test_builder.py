"""Tests for CronBuilder.

Tests cover:
- Construction: default and from an initial expression
- Per-field mutation: add_value, remove_value, set, reset
- Whole-expression access: get_all snapshots, set_all
"""

import dataclasses

import pytest

from cronbuilder.expression import (
    CronBuilder,
    CronExpression,
    InvalidCharacterError,
    InvalidFieldError,
    InvalidValueTypeError,
    MeasureOfTime,
    OutOfRangeError,
    TooManyFieldsError,
)


@pytest.fixture
def builder():
    return CronBuilder()


# =============================================================================
# Construction
# =============================================================================


class TestConstruction:
    def test_default_build(self, builder):
        assert builder.build() == "* * * * *"

    def test_round_trip(self):
        assert CronBuilder("0 0 1 1 0").build() == "0 0 1 1 0"

    def test_comma_lists_split_into_tokens(self):
        builder = CronBuilder("0,30 9,17 * * 1,2,3")

        assert builder.get_all().minute == ("0", "30")
        assert builder.get("hour") == "9,17"
        assert builder.get_all().dayOfTheWeek == ("1", "2", "3")

    def test_partial_expression_defaults_remaining_fields(self):
        assert CronBuilder("15 3").build() == "15 3 * * *"

    def test_empty_part_defaults_to_wildcard(self):
        builder = CronBuilder("5  1")

        assert builder.get("hour") == "*"
        assert builder.get("dayOfTheMonth") == "1"

    def test_empty_string_is_default(self):
        assert CronBuilder("").build() == "* * * * *"

    def test_invalid_expression_raises(self):
        with pytest.raises(OutOfRangeError):
            CronBuilder("60 * * * *")

    def test_too_many_fields_raises(self):
        with pytest.raises(TooManyFieldsError):
            CronBuilder("* * * * * *")

    def test_str_and_repr(self):
        builder = CronBuilder("0 12 * * *")

        assert str(builder) == "0 12 * * *"
        assert repr(builder) == "CronBuilder('0 12 * * *')"

    def test_builders_do_not_share_defaults(self):
        first = CronBuilder()
        second = CronBuilder()

        first.add_value("hour", "5")
        first.add_value("hour", "6")

        assert second.get("hour") == "*"
        assert CronBuilder().build() == "* * * * *"


# =============================================================================
# add_value
# =============================================================================


class TestAddValue:
    def test_replaces_default_wildcard(self, builder):
        builder.add_value("hour", "5")

        assert builder.get("hour") == "5"
        assert builder.build() == "* 5 * * *"

    def test_appends_to_explicit_values(self, builder):
        builder.add_value("hour", "5")
        builder.add_value("hour", "10")

        assert builder.get("hour") == "5,10"

    def test_duplicate_is_ignored(self, builder):
        builder.add_value("minute", "5")
        builder.add_value("minute", "5")

        assert builder.get("minute") == "5"

    def test_comma_list_on_default(self, builder):
        builder.add_value("minute", "0,15,30")

        assert builder.get_all().minute == ("0", "15", "30")

    def test_comma_list_appends_each_new_part(self, builder):
        builder.add_value("hour", "5,10")
        builder.add_value("hour", "10,11")

        assert builder.get_all().hour == ("5", "10", "11")
        assert builder.get("hour") == "5,10,11"

    def test_wildcard_resets_field(self, builder):
        builder.add_value("hour", "5")
        builder.add_value("hour", "*")

        assert builder.get("hour") == "*"

    def test_accepts_enum_member(self, builder):
        builder.add_value(MeasureOfTime.DAY_OF_THE_WEEK, "3")

        assert builder.get("dayOfTheWeek") == "3"

    def test_out_of_range_does_not_mutate(self, builder):
        builder.add_value("hour", "5")

        with pytest.raises(OutOfRangeError):
            builder.add_value("hour", "6,24")

        assert builder.get("hour") == "5"

    def test_invalid_character_raises(self, builder):
        with pytest.raises(InvalidCharacterError):
            builder.add_value("minute", "*/5")

    def test_unknown_field_raises(self, builder):
        with pytest.raises(InvalidFieldError):
            builder.add_value("second", "5")

    def test_empty_value_is_noop(self, builder):
        builder.add_value("hour", "")

        assert builder.get("hour") == "*"

    def test_surrounding_whitespace_is_stripped(self, builder):
        builder.add_value("hour", " 7 ")
        builder.add_value("minute", "0, 30")

        assert builder.get_all().hour == ("7",)
        assert builder.get("minute") == "0,30"
        assert CronBuilder(builder.build()).build() == builder.build()

    def test_inner_whitespace_raises_without_mutating(self, builder):
        builder.add_value("hour", "1")

        with pytest.raises(InvalidCharacterError) as exc_info:
            builder.add_value("hour", "5 6")

        assert exc_info.value.field == "hour"
        assert builder.get("hour") == "1"
        assert CronBuilder(builder.build()).build() == "* 1 * * *"


# =============================================================================
# remove_value
# =============================================================================


class TestRemoveValue:
    def test_noop_on_default_returns_message(self, builder):
        result = builder.remove_value("hour", "5")

        assert result == 'The value for "hour" is already at the default value of "*" - this is a no-op.'
        assert builder.get("hour") == "*"

    def test_removes_value(self, builder):
        builder.set("minute", ["0", "15", "30"])

        assert builder.remove_value("minute", "15") is None
        assert builder.get("minute") == "0,30"

    def test_removes_every_occurrence(self, builder):
        builder.set("minute", ["5", "10", "5"])
        builder.remove_value("minute", "5")

        assert builder.get("minute") == "10"

    def test_removing_last_value_resets_to_wildcard(self, builder):
        builder.add_value("month", "6")
        builder.remove_value("month", "6")

        assert builder.get("month") == "*"

    def test_missing_value_leaves_field_alone(self, builder):
        builder.add_value("month", "6")
        builder.remove_value("month", "7")

        assert builder.get("month") == "6"

    def test_unknown_field_raises(self, builder):
        with pytest.raises(InvalidFieldError):
            builder.remove_value("year", "2024")


# =============================================================================
# get / set / reset
# =============================================================================


class TestGet:
    def test_unknown_field_raises(self, builder):
        with pytest.raises(InvalidFieldError):
            builder.get("year")


class TestSet:
    def test_replaces_values(self, builder):
        builder.add_value("hour", "1")

        assert builder.set("hour", ["2", "3"]) == "2,3"
        assert builder.get("hour") == "2,3"

    def test_empty_sequence_resets_to_wildcard(self, builder):
        builder.set("month", ["1", "2"])

        assert builder.set("month", []) == "*"
        assert builder.get_all().month == ("*",)

    def test_accepts_tuple(self, builder):
        assert builder.set("dayOfTheWeek", ("0", "6")) == "0,6"

    def test_does_not_deduplicate(self, builder):
        assert builder.set("minute", ["5", "5"]) == "5,5"

    def test_out_of_range_raises(self, builder):
        with pytest.raises(OutOfRangeError):
            builder.set("minute", ["60"])

        assert builder.get("minute") == "*"

    def test_validates_every_element_before_mutating(self, builder):
        builder.set("hour", ["1"])

        with pytest.raises(OutOfRangeError):
            builder.set("hour", ["2", "25"])

        assert builder.get("hour") == "1"

    @pytest.mark.parametrize("value", ["5", 5, None, {"a": "1"}])
    def test_non_sequence_raises(self, builder, value):
        with pytest.raises(InvalidValueTypeError) as exc_info:
            builder.set("hour", value)

        assert exc_info.value.code == "INVALID_VALUE_TYPE"

    def test_unknown_field_raises(self, builder):
        with pytest.raises(InvalidFieldError):
            builder.set("year", [])

    def test_stored_list_is_a_copy(self, builder):
        values = ["1", "2"]
        builder.set("hour", values)
        values.append("3")

        assert builder.get("hour") == "1,2"

    def test_whitespace_is_stripped_and_round_trips(self, builder):
        assert builder.set("hour", ["5", " 6"]) == "5,6"
        assert CronBuilder(builder.build()).build() == builder.build()

    def test_blank_elements_reset_to_wildcard(self, builder):
        builder.set("hour", ["1"])

        assert builder.set("hour", [" ", ""]) == "*"

    def test_inner_whitespace_raises(self, builder):
        with pytest.raises(InvalidCharacterError):
            builder.set("hour", ["5 6"])

        assert builder.get("hour") == "*"

    def test_non_string_element_raises(self, builder):
        with pytest.raises(InvalidValueTypeError) as exc_info:
            builder.set("hour", [5])

        assert exc_info.value.field == "hour"
        assert builder.get("hour") == "*"


class TestReset:
    def test_reset_one_field(self):
        builder = CronBuilder("0 12 1 6 3")
        builder.reset("hour")

        assert builder.build() == "0 * 1 6 3"

    def test_reset_all_fields(self):
        builder = CronBuilder("0 12 1 6 3")
        builder.reset()

        assert builder.build() == "* * * * *"

    def test_reset_unknown_field_raises(self, builder):
        with pytest.raises(InvalidFieldError):
            builder.reset("year")


# =============================================================================
# get_all / set_all
# =============================================================================


class TestGetAll:
    def test_returns_snapshot(self):
        builder = CronBuilder("0 0 1 1 0")
        snapshot = builder.get_all()

        assert isinstance(snapshot, CronExpression)
        assert snapshot == CronExpression(
            minute=("0",),
            hour=("0",),
            dayOfTheMonth=("1",),
            month=("1",),
            dayOfTheWeek=("0",),
        )

    def test_snapshot_is_independent_of_builder(self, builder):
        snapshot = builder.get_all()
        builder.add_value("hour", "5")

        assert snapshot.hour == ("*",)
        assert builder.get_all().hour == ("5",)

    def test_snapshot_is_immutable(self, builder):
        snapshot = builder.get_all()

        with pytest.raises(dataclasses.FrozenInstanceError):
            snapshot.hour = ("1",)

    def test_snapshot_helpers(self):
        snapshot = CronBuilder("0,30 6 * * 1").get_all()

        assert str(snapshot) == "0,30 6 * * 1"
        assert snapshot["minute"] == ("0", "30")
        assert snapshot[MeasureOfTime.DAY_OF_THE_WEEK] == ("1",)
        assert snapshot.to_dict() == {
            "minute": ["0", "30"],
            "hour": ["6"],
            "dayOfTheMonth": ["*"],
            "month": ["*"],
            "dayOfTheWeek": ["1"],
        }

        with pytest.raises(KeyError):
            snapshot["year"]


class TestSetAll:
    def test_only_supplied_fields_change(self):
        builder = CronBuilder("0 0 1 1 0")
        builder.set_all({"hour": ["5"]})

        assert builder.build() == "0 5 1 1 0"

    def test_sets_every_field(self, builder):
        builder.set_all({
            "minute": ["0"],
            "hour": ["6", "18"],
            "dayOfTheMonth": ["1"],
            "month": ["1", "7"],
            "dayOfTheWeek": ["*"],
        })

        assert builder.build() == "0 6,18 1 1,7 *"

    def test_empty_sequence_resets_field(self):
        builder = CronBuilder("0 0 1 1 0")
        builder.set_all({"month": []})

        assert builder.get("month") == "*"

    def test_accepts_cron_expression(self, builder):
        builder.set_all(CronBuilder("15 3 * * 1").get_all())

        assert builder.build() == "15 3 * * 1"

    def test_invalid_value_leaves_builder_untouched(self):
        builder = CronBuilder("0 0 1 1 0")

        with pytest.raises(OutOfRangeError):
            builder.set_all({"hour": ["5"], "month": ["13"]})

        assert builder.build() == "0 0 1 1 0"

    def test_too_many_fields_raises(self, builder):
        with pytest.raises(TooManyFieldsError):
            builder.set_all({
                "minute": ["0"],
                "hour": ["0"],
                "dayOfTheMonth": ["1"],
                "month": ["1"],
                "dayOfTheWeek": ["0"],
                "year": ["2024"],
            })

    def test_unknown_field_raises(self, builder):
        with pytest.raises(InvalidFieldError):
            builder.set_all({"second": ["0"]})

    def test_non_sequence_value_raises(self, builder):
        with pytest.raises(InvalidValueTypeError):
            builder.set_all({"hour": "5"})

        assert builder.get("hour") == "*"

    def test_non_string_element_leaves_builder_untouched(self):
        builder = CronBuilder("0 0 1 1 0")

        with pytest.raises(InvalidValueTypeError):
            builder.set_all({"minute": ["5"], "hour": [5]})

        assert builder.build() == "0 0 1 1 0"

    def test_inner_whitespace_leaves_builder_untouched(self):
        builder = CronBuilder("0 0 1 1 0")

        with pytest.raises(InvalidCharacterError):
            builder.set_all({"minute": ["5"], "hour": ["1 2"]})

        assert builder.build() == "0 0 1 1 0"
