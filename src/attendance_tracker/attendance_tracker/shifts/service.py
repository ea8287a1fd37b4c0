from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import parse_hhmm, to_local_naive
from ..common.validators import require_non_empty
from ..core.enums import WorkDay
from ..core.exceptions import ValidationError
from .model import DaySchedule, ShiftConfig
from .repository import ShiftRepository

logger = logging.getLogger(__name__)


class ShiftService:
    """Company shift configuration: work days and per-day hours.

    An inactive configuration enforces nothing: every day is a work day and
    every time is within the schedule.
    """

    def __init__(self, shifts: ShiftRepository):
        self._shifts = shifts

    def get_config(self) -> ShiftConfig:
        return self._shifts.get_config() or ShiftConfig()

    def save_config(self, config: ShiftConfig) -> ShiftConfig:
        name = require_non_empty(config.name, "Shift name")
        for day, schedule in config.schedules.items():
            if schedule.is_work_day and schedule.start_time >= schedule.end_time:
                raise ValidationError(f"{day.value}: start time must be before end time")

        config = replace(config, name=name)
        self._shifts.save_config(config)
        logger.info("Shift config %s saved (%d work days)", config.shift_id, len(config.work_days))
        return config

    def update_day(
        self,
        day: WorkDay,
        *,
        start_time: str,
        end_time: str,
        is_work_day: bool = True,
    ) -> ShiftConfig:
        config = self.get_config()
        schedules = dict(config.schedules)
        schedules[day] = DaySchedule(
            start_time=parse_hhmm(start_time),
            end_time=parse_hhmm(end_time),
            is_work_day=is_work_day,
        )
        work_days = config.work_days | {day} if is_work_day else config.work_days - {day}
        return self.save_config(replace(config, schedules=schedules, work_days=frozenset(work_days)))

    def is_work_day(self, value: date) -> bool:
        config = self.get_config()
        return not config.is_active or config.is_work_day(value)

    def is_within_schedule(self, at: datetime) -> bool:
        config = self.get_config()
        return not config.is_active or config.is_within_schedule(to_local_naive(at))

    def schedule_for(self, value: date) -> Optional[DaySchedule]:
        return self.get_config().schedule_for(WorkDay.from_date(value))
