"""
Map calendar dates onto the workout program.

Day 1 of every program week falls on the weekday of the program start date:

    start = 2025-07-07 (Mon)  ->  2025-07-07 is Week 1 Day 1
                                  2025-07-13 is Week 1 Day 7
                                  2025-07-14 is Week 2 Day 1

Everything here is a pure function of (date, start date, curriculum,
total weeks); nothing is cached or persisted.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import List, Optional, Tuple

from curriculum import Curriculum, CurriculumEntry, DAYS_PER_WEEK
from models import DateLike, to_date


class Status(Enum):
    WORKOUT = "workout"
    REST = "rest"
    NOT_STARTED = "not_started"
    COMPLETED = "completed"
    # inside the program but the table has no entry for the day
    UNPLANNED = "unplanned"


@dataclass(frozen=True)
class Resolution:
    week: int
    day: int
    status: Status
    entry: Optional[CurriculumEntry] = None

    @property
    def has_workout(self) -> bool:
        return self.status is Status.WORKOUT


@dataclass(frozen=True)
class ScheduledDay:
    day: int
    date: date
    resolution: Resolution


def get_week_and_day(current_date: DateLike, program_start_date: DateLike) -> Tuple[int, int]:
    """
    Return the 1-based (week, day) of current_date in the program.

    Returns (0, 0) if the program has not started yet. Time of day is ignored.
    """
    today = to_date(current_date)
    start = to_date(program_start_date)
    if today < start:
        return 0, 0

    diff_days = (today - start).days
    return diff_days // DAYS_PER_WEEK + 1, diff_days % DAYS_PER_WEEK + 1


def _lookup(week: int, day: int, curriculum: Curriculum) -> Resolution:
    entry = curriculum.get(week, day)
    if entry is None:
        return Resolution(week, day, Status.UNPLANNED)
    status = Status.REST if entry.is_rest else Status.WORKOUT
    return Resolution(week, day, status, entry)


def resolve_today(
    current_date: DateLike,
    program_start_date: DateLike,
    curriculum: Curriculum,
    total_weeks: int,
) -> Resolution:
    """Resolve the planned activity for current_date."""
    week, day = get_week_and_day(current_date, program_start_date)
    if week == 0:
        return Resolution(0, 0, Status.NOT_STARTED)
    if week > total_weeks:
        return Resolution(week, day, Status.COMPLETED)
    return _lookup(week, day, curriculum)


def date_for_coordinate(program_start_date: DateLike, week: int, day: int) -> date:
    """Compute the calendar date of a given week/day of the program."""
    if week < 1:
        raise ValueError(f"week must be >= 1, got {week}")
    if not 1 <= day <= DAYS_PER_WEEK:
        raise ValueError(f"day must be between 1 and {DAYS_PER_WEEK}, got {day}")
    offset = (week - 1) * DAYS_PER_WEEK + (day - 1)
    return to_date(program_start_date) + timedelta(days=offset)


def resolve_week(
    week_number: int,
    program_start_date: DateLike,
    curriculum: Curriculum,
    total_weeks: int,
) -> List[ScheduledDay]:
    """Resolve all seven days of a program week, in day order."""
    start = to_date(program_start_date)
    days: List[ScheduledDay] = []
    for day in range(1, DAYS_PER_WEEK + 1):
        if week_number < 1:
            # dates before the program are still shown, counted back from the start
            offset = (week_number - 1) * DAYS_PER_WEEK + (day - 1)
            days.append(ScheduledDay(
                day, start + timedelta(days=offset), Resolution(0, 0, Status.NOT_STARTED)
            ))
            continue
        when = date_for_coordinate(start, week_number, day)
        if week_number > total_weeks:
            resolution = Resolution(week_number, day, Status.COMPLETED)
        else:
            resolution = _lookup(week_number, day, curriculum)
        days.append(ScheduledDay(day, when, resolution))
    return days


class ProgramCalendar:
    """Program configuration bound once at startup."""

    def __init__(self, start_date: DateLike, curriculum: Curriculum, total_weeks: int):
        self.start_date = to_date(start_date)
        self.curriculum = curriculum
        self.total_weeks = total_weeks

    def resolve_today(self, today: Optional[DateLike] = None) -> Resolution:
        return resolve_today(
            today if today is not None else date.today(),
            self.start_date,
            self.curriculum,
            self.total_weeks,
        )

    def resolve_week(self, week_number: int) -> List[ScheduledDay]:
        return resolve_week(week_number, self.start_date, self.curriculum, self.total_weeks)

    def current_week(self, today: Optional[DateLike] = None) -> int:
        week, _ = get_week_and_day(
            today if today is not None else date.today(), self.start_date
        )
        return week

    def date_for(self, week: int, day: int) -> date:
        return date_for_coordinate(self.start_date, week, day)
