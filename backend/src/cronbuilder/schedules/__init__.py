"""Named cron schedules loaded from YAML files."""

from cronbuilder.schedules.config import ScheduleConfig
from cronbuilder.schedules.loader import (
    ScheduleFileError,
    ScheduleIssue,
    load_schedule_file,
    validate_schedule_file,
)

__all__ = [
    "ScheduleConfig",
    "ScheduleFileError",
    "ScheduleIssue",
    "load_schedule_file",
    "validate_schedule_file",
]
