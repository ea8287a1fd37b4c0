from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import FrozenSet, Mapping, Optional

from ..common.datetime_utils import format_hhmm, parse_hhmm
from ..core.enums import WorkDay

DEFAULT_START = time(7, 0)
DEFAULT_END = time(15, 0)


def _minutes(value: time) -> int:
    return value.hour * 60 + value.minute


@dataclass(frozen=True)
class DaySchedule:
    """Working hours of one weekday; minute precision, end exclusive."""

    start_time: time = DEFAULT_START
    end_time: time = DEFAULT_END
    is_work_day: bool = True

    def is_within(self, at: time) -> bool:
        return _minutes(self.start_time) <= _minutes(at) < _minutes(self.end_time)

    def to_dict(self) -> dict:
        return {
            "startTime": format_hhmm(self.start_time),
            "endTime": format_hhmm(self.end_time),
            "isWorkDay": self.is_work_day,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DaySchedule":
        return cls(
            start_time=parse_hhmm(data.get("startTime") or format_hhmm(DEFAULT_START)),
            end_time=parse_hhmm(data.get("endTime") or format_hhmm(DEFAULT_END)),
            is_work_day=bool(data.get("isWorkDay", True)),
        )


def _default_work_days() -> FrozenSet[WorkDay]:
    return frozenset({WorkDay.MONDAY, WorkDay.TUESDAY, WorkDay.WEDNESDAY, WorkDay.THURSDAY, WorkDay.FRIDAY})


def _default_schedules() -> dict[WorkDay, DaySchedule]:
    schedules = {d: DaySchedule() for d in (WorkDay.MONDAY, WorkDay.TUESDAY, WorkDay.WEDNESDAY, WorkDay.THURSDAY)}
    schedules[WorkDay.FRIDAY] = DaySchedule(end_time=time(11, 0))
    return schedules


@dataclass(frozen=True)
class ShiftConfig:
    """Company-wide shift: which weekdays are worked and the hours of each."""

    shift_id: str = "default"
    name: str = "Default Shift"
    work_days: FrozenSet[WorkDay] = field(default_factory=_default_work_days)
    schedules: Mapping[WorkDay, DaySchedule] = field(default_factory=_default_schedules)
    is_active: bool = True

    def schedule_for(self, day: WorkDay) -> Optional[DaySchedule]:
        """Hours of a work day; a work day without explicit hours uses the defaults."""
        if day not in self.work_days:
            return None
        schedule = self.schedules.get(day) or DaySchedule()
        return schedule if schedule.is_work_day else None

    def is_work_day(self, value: date) -> bool:
        return self.schedule_for(WorkDay.from_date(value)) is not None

    def is_within_schedule(self, at: datetime) -> bool:
        schedule = self.schedule_for(WorkDay.from_date(at.date()))
        return schedule is not None and schedule.is_within(at.time())

    def to_dict(self) -> dict:
        return {
            "id": self.shift_id,
            "name": self.name,
            "workDays": [d.value for d in WorkDay if d in self.work_days],
            "schedules": {d.value: s.to_dict() for d, s in self.schedules.items()},
            "isActive": self.is_active,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ShiftConfig":
        """Unknown day names are skipped; missing parts fall back to the defaults."""
        days = data.get("workDays")
        work_days = (
            frozenset(d for d in (WorkDay.from_value(str(v)) for v in days) if d is not None)
            if days is not None
            else _default_work_days()
        )

        raw = data.get("schedules")
        if raw is None:
            schedules = _default_schedules()
        else:
            schedules = {}
            for key, value in raw.items():
                day = WorkDay.from_value(str(key))
                if day is not None:
                    schedules[day] = DaySchedule.from_dict(value or {})

        return cls(
            shift_id=str(data.get("id") or "default"),
            name=str(data.get("name") or "Default Shift"),
            work_days=work_days,
            schedules=schedules,
            is_active=bool(data.get("isActive", True)),
        )
