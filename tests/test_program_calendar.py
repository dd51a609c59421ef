from datetime import date, datetime, timedelta

import pytest

from curriculum import Curriculum, CurriculumEntry, Exercise
from program_calendar import (
    ProgramCalendar,
    Status,
    date_for_coordinate,
    get_week_and_day,
    resolve_today,
    resolve_week,
)

START = date(2025, 7, 7)


def test_start_date_is_week_one_day_one():
    assert get_week_and_day(START, START) == (1, 1)


def test_day_before_start_is_not_started(curriculum):
    res = resolve_today(START - timedelta(days=1), START, curriculum, 26)
    assert res.status is Status.NOT_STARTED
    assert (res.week, res.day) == (0, 0)
    assert res.entry is None


def test_one_week_after_start_is_week_two_day_one():
    assert get_week_and_day(START + timedelta(days=7), START) == (2, 1)


def test_first_sunday_resolves_to_week_one_rest(curriculum):
    res = resolve_today(date(2025, 7, 13), "2025-07-07", curriculum, 26)
    assert (res.week, res.day) == (1, 7)
    assert res.status is Status.REST
    assert res.entry.type == "Rest"


def test_workout_day(curriculum):
    res = resolve_today(date(2025, 8, 4), START, curriculum, 26)
    assert (res.week, res.day) == (5, 1)
    assert res.status is Status.WORKOUT
    assert res.entry.type == "Upper Body Strength A"
    assert res.entry.exercises[0].reps == "8-12"


def test_missing_day_is_unplanned_not_rest(curriculum):
    # the bundled plan has no Week 4
    res = resolve_today(date(2025, 7, 28), START, curriculum, 26)
    assert (res.week, res.day) == (4, 1)
    assert res.status is Status.UNPLANNED
    assert res.entry is None


def test_past_last_week_is_completed_even_with_an_entry():
    entry = CurriculumEntry("Bonus", "", (Exercise("Plank", 1, "60 sec"),))
    table = Curriculum({(27, 1): entry})
    res = resolve_today(START + timedelta(weeks=26), START, table, 26)
    assert res.week == 27
    assert res.status is Status.COMPLETED
    assert res.entry is None


def test_last_day_of_program_is_still_in_range(curriculum):
    res = resolve_today(START + timedelta(weeks=26) - timedelta(days=1), START, curriculum, 26)
    assert (res.week, res.day) == (26, 7)
    assert res.status is Status.UNPLANNED


def test_resolution_is_deterministic(curriculum):
    args = (date(2025, 9, 1), START, curriculum, 26)
    assert resolve_today(*args) == resolve_today(*args)


def test_time_of_day_is_ignored():
    # crosses the end of daylight saving time in most northern timezones
    current = datetime(2025, 11, 3, 0, 5)
    start = datetime(2025, 10, 27, 23, 55)
    assert get_week_and_day(current, start) == (2, 1)


def test_date_for_coordinate():
    assert date_for_coordinate(START, 1, 1) == START
    assert date_for_coordinate(START, 2, 3) == date(2025, 7, 16)
    with pytest.raises(ValueError):
        date_for_coordinate(START, 0, 1)
    with pytest.raises(ValueError):
        date_for_coordinate(START, 1, 8)


def test_resolve_week_returns_seven_days_in_order(curriculum):
    days = resolve_week(2, START, curriculum, 26)
    assert [d.day for d in days] == list(range(1, 8))
    assert days[0].date == date(2025, 7, 14)
    assert days[1].resolution.entry.type == "HIIT Cardio"
    assert days[3].resolution.status is Status.REST


def test_resolve_week_outside_program(curriculum):
    assert {d.resolution.status for d in resolve_week(27, START, curriculum, 26)} == {
        Status.COMPLETED
    }
    before = resolve_week(0, START, curriculum, 26)
    assert {d.resolution.status for d in before} == {Status.NOT_STARTED}
    assert before[-1].date == START - timedelta(days=1)


def test_resolve_week_agrees_with_resolve_today(curriculum):
    for offset in range(0, 70, 3):
        today = START + timedelta(days=offset)
        res = resolve_today(today, START, curriculum, 26)
        scheduled = resolve_week(res.week, START, curriculum, 26)[res.day - 1]
        assert scheduled.date == today
        assert scheduled.resolution == res


def test_program_calendar_binds_configuration(curriculum):
    cal = ProgramCalendar("2025-07-07", curriculum, 26)
    assert cal.current_week(date(2025, 7, 20)) == 2
    assert cal.resolve_today(date(2025, 7, 13)).status is Status.REST
    assert cal.date_for(1, 7) == date(2025, 7, 13)
    assert len(cal.resolve_week(1)) == 7
