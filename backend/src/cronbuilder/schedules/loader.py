"""
schedules/loader.py — named cron schedules stored in YAML.

A schedule file has a single top-level ``schedules`` mapping. Each entry is
either a canonical expression string or a mapping of field name to tokens::

    schedules:
      nightly: "0 2 * * *"
      weekly-report:
        minute: ["0"]
        hour: ["6"]
        dayOfTheWeek: ["1"]

Usage:
    from cronbuilder.schedules.loader import load_schedule_file, validate_schedule_file

    issues = validate_schedule_file(Path("schedules.yaml"))
    for issue in issues:
        print(issue)

PyYAML quirk: unquoted numeric tokens (``hour: [6]``) load as ints, and a bare
``*`` is not valid YAML. Scalars are converted to strings before validation.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from cronbuilder.expression import CronBuilder, CronExpressionError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public data types
# ---------------------------------------------------------------------------


class ScheduleFileError(Exception):
    """A schedule file could not be loaded."""

    def __init__(self, message: str, path: Path, schedule: str | None = None):
        self.path = path
        self.schedule = schedule
        super().__init__(message)


@dataclass
class ScheduleIssue:
    """A single validation finding for a schedule file."""

    file: Path
    message: str
    schedule: str = ""      # Name of the offending schedule entry, if any
    severity: str = "error" # "error" | "warning"
    code: str = ""

    def __str__(self) -> str:
        loc = f" at {self.schedule}" if self.schedule else ""
        return f"[{self.severity.upper()}] {self.file}{loc}: {self.message}"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _read_yaml(path: Path) -> Any:
    try:
        with path.open(encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except OSError as exc:
        raise ScheduleFileError(f"Cannot read schedule file: {exc}", path) from exc
    except UnicodeDecodeError as exc:
        raise ScheduleFileError(f"Schedule file is not valid UTF-8: {exc}", path) from exc
    except yaml.YAMLError as exc:
        raise ScheduleFileError(f"YAML parse error: {exc}", path) from exc


def _schedules_section(raw: Any, path: Path) -> dict[Any, Any]:
    if raw is None:
        raise ScheduleFileError("File is empty or contains only whitespace", path)
    if not isinstance(raw, dict) or "schedules" not in raw:
        raise ScheduleFileError("Missing top-level 'schedules' mapping", path)

    section = raw["schedules"]
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ScheduleFileError("'schedules' must be a mapping of name to expression", path)
    return section


def _normalize_tokens(value: Any) -> list[str]:
    """Convert a YAML field value into a list of string tokens."""
    if isinstance(value, list):
        return [str(item) for item in value]
    return [str(value)]


def _build_schedule(name: str, definition: Any) -> CronBuilder:
    """Build one schedule entry.

    Raises:
        CronExpressionError: If the entry fails validation
        TypeError: If the entry is neither a string nor a mapping
    """
    if isinstance(definition, str):
        return CronBuilder(definition)

    if isinstance(definition, dict):
        builder = CronBuilder()
        builder.set_all(
            {str(field): _normalize_tokens(value) for field, value in definition.items()}
        )
        return builder

    raise TypeError(
        f"Schedule '{name}' must be an expression string or a mapping of fields, "
        f"got {type(definition).__name__}"
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_schedule_file(path: Path) -> dict[str, CronBuilder]:
    """
    Load every schedule in *path*.

    Args:
        path: Path to the YAML schedule file.

    Returns:
        Mapping of schedule name to a :class:`CronBuilder`, in file order.

    Raises:
        ScheduleFileError: If the file is unreadable, malformed, or any entry is invalid.
    """
    section = _schedules_section(_read_yaml(path), path)

    schedules: dict[str, CronBuilder] = {}
    for name, definition in section.items():
        name = str(name)
        try:
            schedules[name] = _build_schedule(name, definition)
        except (CronExpressionError, TypeError) as exc:
            raise ScheduleFileError(
                f"Invalid schedule '{name}': {exc}", path, schedule=name
            ) from exc

    logger.debug("Loaded %d schedule(s) from %s", len(schedules), path)
    return schedules


def validate_schedule_file(path: Path, *, strict: bool = False) -> list[ScheduleIssue]:
    """
    Validate every schedule in *path*, collecting all problems.

    Args:
        path:   Path to the YAML schedule file.
        strict: If ``True``, warnings are escalated to errors.

    Returns:
        A list of :class:`ScheduleIssue` objects (empty on success).
    """
    try:
        section = _schedules_section(_read_yaml(path), path)
    except ScheduleFileError as exc:
        return [ScheduleIssue(file=path, message=str(exc), code="INVALID_FILE")]

    issues: list[ScheduleIssue] = []

    if not section:
        issues.append(
            ScheduleIssue(
                file=path,
                message="No schedules defined",
                severity="warning",
                code="EMPTY",
            )
        )

    for name, definition in section.items():
        name = str(name)
        try:
            _build_schedule(name, definition)
        except CronExpressionError as exc:
            issues.append(
                ScheduleIssue(file=path, message=exc.message, schedule=name, code=exc.code)
            )
        except TypeError as exc:
            issues.append(
                ScheduleIssue(file=path, message=str(exc), schedule=name, code="INVALID_ENTRY")
            )

    if strict:
        for issue in issues:
            if issue.severity == "warning":
                issue.severity = "error"

    for issue in issues:
        logger.debug("%s", issue)

    return issues
