"""Schedule file configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_SCHEDULES_FILENAME = "schedules.yaml"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class ScheduleConfig:
    """Where schedules are read from and how loudly to log."""

    schedules_path: Path
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, base_path: Path | None = None) -> ScheduleConfig:
        """Create config from environment variables.

        Resolution order for the schedule file:
        1. CRONBUILDER_SCHEDULES_PATH env var
        2. {base_path}/schedules.yaml
        3. Default: schedules.yaml in the working directory

        The log level comes from CRONBUILDER_LOG_LEVEL (default WARNING).
        """
        log_level = os.environ.get("CRONBUILDER_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

        path = os.environ.get("CRONBUILDER_SCHEDULES_PATH")
        if path:
            return cls(schedules_path=Path(path), log_level=log_level)

        if base_path:
            return cls(
                schedules_path=base_path / DEFAULT_SCHEDULES_FILENAME,
                log_level=log_level,
            )

        return cls(schedules_path=Path(DEFAULT_SCHEDULES_FILENAME), log_level=log_level)
