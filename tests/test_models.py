from datetime import datetime, timedelta, timezone

import pytest

from localtodo.models import Tag, Task, WorkSession

UTC = timezone.utc


def test_tag_omits_empty_colour():
    assert Tag(name="home").to_dict() == {"name": "home", "context": ""}


def test_tag_keeps_colour_and_round_trips():
    tag = Tag(name="work", context="office", colour="red")
    data = tag.to_dict()
    assert data["colour"] == "red"
    assert Tag.from_dict(data) == tag


def test_open_session_serialises_null_end():
    session = WorkSession(started_at=datetime(2024, 3, 1, 9, 30, tzinfo=UTC))
    data = session.to_dict()
    assert data["ended_at"] is None
    assert data["auto_closed"] is False
    assert WorkSession.from_dict(data) == session
    assert session.is_open


def test_closed_session_round_trip_with_offset():
    tz = timezone(timedelta(hours=-5))
    session = WorkSession(
        started_at=datetime(2024, 3, 1, 9, 30, 15, 250000, tzinfo=tz),
        ended_at=datetime(2024, 3, 1, 11, 0, tzinfo=tz),
        auto_closed=True,
    )
    restored = WorkSession.from_dict(session.to_dict())
    assert restored == session
    assert restored.started_at.utcoffset() == timedelta(hours=-5)
    assert not restored.is_open


def test_zero_time_format():
    data = Task(id="1", title="t").to_dict()
    assert data["entered_at"] == "0001-01-01T00:00:00Z"


def test_nanosecond_timestamp_is_truncated():
    session = WorkSession.from_dict({"started_at": "2024-05-01T10:00:00.123456789+02:00"})
    assert session.started_at.microsecond == 123456
    assert session.started_at.utcoffset() == timedelta(hours=2)


def test_task_full_round_trip():
    now = datetime(2024, 6, 2, 8, 15, tzinfo=UTC)
    task = Task(
        id="abc",
        title="Write report",
        body="Quarterly numbers",
        tags=[Tag(name="work")],
        priority=2,
        status="in_progress",
        is_active=True,
        estimated_task_time_in_days=1.5,
        entered_at=now,
        work_log=[WorkSession(started_at=now, ended_at=now + timedelta(hours=1))],
        notes=["first note"],
        last_updated=now,
    )
    assert Task.from_dict(task.to_dict()) == task


def test_task_from_dict_accepts_nulls():
    task = Task.from_dict({"id": "1", "title": "x", "tags": None, "work_log": None, "notes": None})
    assert task.tags == []
    assert task.work_log == []
    assert task.notes == []


def test_invalid_timestamp_raises():
    with pytest.raises(ValueError):
        WorkSession.from_dict({"started_at": "yesterday"})