from datetime import date

from logic.logic_schedule import (
    NOT_RUNNING_TXT,
    load_schedule_action,
    load_schedule_day_action,
    load_today_workout_action,
    today_workout_markdown,
)
from program_calendar import Resolution, Status


def test_today_workout_lists_exercises(calendar):
    md = load_today_workout_action(calendar, today=date(2025, 7, 7))
    assert md.startswith("### Today's Workout (Week 1, Day 1)")
    assert "Full Body Strength A" in md
    assert "**Goblet Squats (Kettlebell/Dumbbell)**: 3 sets x 10 reps (Focus on depth.)" in md


def test_today_workout_sentinels():
    assert today_workout_markdown(Resolution(0, 0, Status.NOT_STARTED)).startswith(NOT_RUNNING_TXT)
    assert today_workout_markdown(Resolution(27, 1, Status.COMPLETED)).startswith(NOT_RUNNING_TXT)
    assert "Likely a rest day" in today_workout_markdown(Resolution(4, 2, Status.UNPLANNED))


def test_weekly_schedule(calendar):
    header, df = load_schedule_action(calendar, today=date(2025, 7, 9))
    assert header == "### Week 1 of 26"
    assert len(df) == 7
    assert df.iloc[0]["Day"] == "Monday"
    assert df.iloc[0]["Date"] == "Mon, Jul 7"
    assert list(df["Today"]) == ["", "", "<-", "", "", "", ""]
    assert df.iloc[3]["Workout"] == "Rest"


def test_weekly_schedule_unplanned_week(calendar):
    _, df = load_schedule_action(calendar, today=date(2025, 7, 29))
    assert set(df["Workout"]) == {"Rest/Active Recovery"}


def test_weekly_schedule_before_start(calendar):
    header, df = load_schedule_action(calendar, today=date(2025, 7, 1))
    assert header == NOT_RUNNING_TXT
    assert df.empty


def test_schedule_day_detail(calendar):
    md = load_schedule_day_action(calendar, "2", today=date(2025, 7, 9))
    assert md.startswith("**Workout for Tuesday:**")
    assert "Skipping Rope" in md
    rest = load_schedule_day_action(calendar, "1", today=date(2025, 7, 29))
    assert rest.endswith("Rest or active recovery.")
    assert load_schedule_day_action(calendar, None) == "Please select a day."
