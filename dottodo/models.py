"""Data types for tasks and configuration, with their JSON forms."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping

DEFAULT_TODO_FILE_NAME = ".todo"

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_TIME_RE = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})"
    r"(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})$"
)


def _now() -> datetime:
    return datetime.now().astimezone()


def format_time(value: datetime) -> str:
    """Render a timestamp as RFC 3339 with trailing fraction zeros trimmed."""
    if value.tzinfo is None:
        value = value.astimezone()
    text = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    if value.microsecond:
        text += "." + f"{value.microsecond:06d}".rstrip("0")
    offset = value.utcoffset() or timedelta(0)
    if not offset:
        return text + "Z"
    sign = "-" if offset < timedelta(0) else "+"
    minutes = int(abs(offset).total_seconds()) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def parse_time(text: str) -> datetime:
    """Parse an RFC 3339 timestamp; fractions beyond microseconds are dropped."""
    if not isinstance(text, str):
        raise ValueError(f"timestamp must be a string, got {text!r}")
    match = _TIME_RE.match(text)
    if match is None:
        raise ValueError(f"invalid timestamp: {text!r}")
    year, month, day, hour, minute, second, fraction, zone = match.groups()
    micro = int((fraction or "")[:6].ljust(6, "0"))
    if zone in ("Z", "z"):
        tz = timezone.utc
    else:
        sign = -1 if zone[0] == "-" else 1
        delta = timedelta(hours=int(zone[1:3]), minutes=int(zone[4:6]))
        tz = timezone.utc if not delta else timezone(sign * delta)
    return datetime(
        int(year), int(month), int(day),
        int(hour), int(minute), int(second), micro, tzinfo=tz,
    )


def _get(data: Mapping[str, Any], key: str, kind: type, default: Any) -> Any:
    if key not in data or data[key] is None:
        return default
    value = data[key]
    if kind is int and (isinstance(value, bool) or not isinstance(value, int)):
        raise ValueError(f"field {key!r} must be an integer, got {value!r}")
    if not isinstance(value, kind):
        raise ValueError(f"field {key!r} must be {kind.__name__}, got {value!r}")
    return value


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be a JSON object, got {data!r}")
    return data


@dataclass
class Config:
    """User configuration."""

    todo_file_name: str = DEFAULT_TODO_FILE_NAME

    def to_dict(self) -> dict[str, Any]:
        return {"todo_file_name": self.todo_file_name}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Config":
        data = _require_mapping(data, "config")
        return cls(todo_file_name=_get(data, "todo_file_name", str, ""))


def default_config() -> Config:
    """Return the configuration used when no config file exists."""
    return Config(todo_file_name=DEFAULT_TODO_FILE_NAME)


@dataclass
class Todo:
    """A single task."""

    id: int
    title: str
    description: str = ""
    completed: bool = False
    archived: bool = False
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "title": self.title}
        if self.description:
            data["description"] = self.description
        data["completed"] = self.completed
        data["archived"] = self.archived
        data["created_at"] = format_time(self.created_at)
        data["updated_at"] = format_time(self.updated_at)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Todo":
        data = _require_mapping(data, "task")
        created = data.get("created_at")
        updated = data.get("updated_at")
        return cls(
            id=_get(data, "id", int, 0),
            title=_get(data, "title", str, ""),
            description=_get(data, "description", str, ""),
            completed=_get(data, "completed", bool, False),
            archived=_get(data, "archived", bool, False),
            created_at=_ZERO_TIME if created is None else parse_time(created),
            updated_at=_ZERO_TIME if updated is None else parse_time(updated),
        )