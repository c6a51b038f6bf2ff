"""Task, tag and work-session records with their JSON representations."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_TIME_RE = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})"
    r"(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})$"
)


def _format_time(value: datetime) -> str:
    """Render a datetime as an RFC 3339 timestamp with trimmed fraction."""
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
    sign = "+" if offset >= timedelta(0) else "-"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def _parse_time(text: str) -> datetime:
    """Parse an RFC 3339 timestamp, keeping at most microsecond precision."""
    match = _TIME_RE.match(text)
    if match is None:
        raise ValueError(f"invalid timestamp: {text!r}")
    year, month, day, hour, minute, second, fraction, zone = match.groups()
    micro = int((fraction or "").ljust(6, "0")[:6])
    if zone == "Z":
        tz = timezone.utc
    else:
        sign = 1 if zone[0] == "+" else -1
        hours, minutes = int(zone[1:3]), int(zone[4:6])
        tz = timezone(sign * timedelta(hours=hours, minutes=minutes))
    return datetime(
        int(year), int(month), int(day), int(hour), int(minute), int(second), micro, tzinfo=tz
    )


@dataclass
class Tag:
    """A label attached to a task."""

    name: str
    context: str = ""
    colour: str = ""

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "context": self.context}
        if self.colour:
            data["colour"] = self.colour
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Tag:
        return cls(
            name=data.get("name") or "",
            context=data.get("context") or "",
            colour=data.get("colour") or "",
        )


@dataclass
class WorkSession:
    """One stretch of work on a task; open while ended_at is None."""

    started_at: datetime
    ended_at: datetime | None = None
    auto_closed: bool = False

    @property
    def is_open(self) -> bool:
        return self.ended_at is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "started_at": _format_time(self.started_at),
            "ended_at": None if self.ended_at is None else _format_time(self.ended_at),
            "auto_closed": self.auto_closed,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WorkSession:
        started = data.get("started_at")
        ended = data.get("ended_at")
        return cls(
            started_at=_parse_time(started) if started else ZERO_TIME,
            ended_at=_parse_time(ended) if ended else None,
            auto_closed=bool(data.get("auto_closed", False)),
        )


@dataclass
class Task:
    """A to-do item. Priority: 1 high, 2 medium, 3 low.

    Status is one of "todo", "in_progress", "done" or "blocked".
    """

    id: str
    title: str
    body: str = ""
    tags: list[Tag] = field(default_factory=list)
    priority: int = 0
    status: str = ""
    is_active: bool = False
    estimated_task_time_in_days: float = 0.0
    entered_at: datetime = ZERO_TIME
    work_log: list[WorkSession] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)
    last_updated: datetime = ZERO_TIME

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "body": self.body,
            "tags": [tag.to_dict() for tag in self.tags],
            "priority": self.priority,
            "status": self.status,
            "is_active": self.is_active,
            "estimated_task_time_in_days": self.estimated_task_time_in_days,
            "entered_at": _format_time(self.entered_at),
            "work_log": [session.to_dict() for session in self.work_log],
            "notes": list(self.notes),
            "last_updated": _format_time(self.last_updated),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Task:
        entered = data.get("entered_at")
        updated = data.get("last_updated")
        return cls(
            id=data.get("id") or "",
            title=data.get("title") or "",
            body=data.get("body") or "",
            tags=[Tag.from_dict(item) for item in data.get("tags") or []],
            priority=int(data.get("priority") or 0),
            status=data.get("status") or "",
            is_active=bool(data.get("is_active", False)),
            estimated_task_time_in_days=float(data.get("estimated_task_time_in_days") or 0.0),
            entered_at=_parse_time(entered) if entered else ZERO_TIME,
            work_log=[WorkSession.from_dict(item) for item in data.get("work_log") or []],
            notes=list(data.get("notes") or []),
            last_updated=_parse_time(updated) if updated else ZERO_TIME,
        )