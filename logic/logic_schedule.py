from datetime import date
from typing import List, Optional, Tuple

import pandas as pd

from curriculum import CurriculumEntry
from models import to_date
from program_calendar import ProgramCalendar, Resolution, ScheduledDay, Status

SCHEDULE_COLUMNS = ["Day", "Date", "Workout", "Today"]
NOT_RUNNING_TXT = "Workout program completed or not started yet."


def _exercise_lines(entry: CurriculumEntry) -> List[str]:
    lines = []
    for ex in entry.exercises:
        notes = f" ({ex.notes})" if ex.notes else ""
        lines.append(f"- **{ex.name}**: {ex.sets} sets x {ex.reps} reps{notes}")
    return lines


def entry_markdown(entry: CurriculumEntry) -> str:
    parts = [f"#### {entry.type}", entry.description]
    if entry.exercises:
        parts.append("**Exercises:**")
        parts.extend(_exercise_lines(entry))
    return "\n".join(p for p in parts if p)


def today_workout_markdown(resolution: Resolution) -> str:
    """Render a resolved day for the dashboard."""
    week, day = resolution.week, resolution.day
    if resolution.status in (Status.NOT_STARTED, Status.COMPLETED):
        return f"{NOT_RUNNING_TXT} Week {week}, Day {day}."
    if resolution.status is Status.UNPLANNED:
        return (
            f"No specific workout planned for Week {week}, Day {day}. "
            "Likely a rest day or active recovery."
        )
    return f"### Today's Workout (Week {week}, Day {day})\n\n" + entry_markdown(resolution.entry)


def day_label(resolution: Resolution) -> str:
    if resolution.entry is not None:
        return resolution.entry.type
    return "Rest/Active Recovery"


def weekly_schedule_rows(
    calendar: ProgramCalendar, today: Optional[date] = None
) -> Tuple[int, List[ScheduledDay], int]:
    """
    Resolve the week containing today.

    Returns:
        (week, days, current_day): week is 0 before the start and greater than
        calendar.total_weeks after the end; days is empty in both cases.
    """
    today = to_date(today) if today else date.today()
    current = calendar.resolve_today(today)
    if current.status in (Status.NOT_STARTED, Status.COMPLETED):
        return current.week, [], 0
    return current.week, calendar.resolve_week(current.week), current.day


def schedule_frame(days: List[ScheduledDay], current_day: int) -> pd.DataFrame:
    rows = [
        {
            "Day": f"{d.date:%A}",
            "Date": f"{d.date:%a, %b} {d.date.day}",
            "Workout": day_label(d.resolution),
            "Today": "<-" if d.day == current_day else "",
        }
        for d in days
    ]
    return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)


# ================== Gradio callbacks ==================


def load_today_workout_action(calendar: ProgramCalendar, today=None) -> str:
    return today_workout_markdown(calendar.resolve_today(today))


def load_schedule_action(calendar: ProgramCalendar, today=None):
    """
    Gradio callback: this week's plan.

    Returns:
        header_md:   str
        schedule_df: pd.DataFrame, one row per day
    """
    week, days, current_day = weekly_schedule_rows(calendar, today)
    if not days:
        return NOT_RUNNING_TXT, schedule_frame([], 0)
    header = f"### Week {week} of {calendar.total_weeks}"
    return header, schedule_frame(days, current_day)


def load_schedule_day_action(calendar: ProgramCalendar, day, today=None) -> str:
    """Gradio callback: full plan for one day of the current week."""
    try:
        d = int(day)
    except (TypeError, ValueError):
        return "Please select a day."

    _, days, _ = weekly_schedule_rows(calendar, today)
    match = [s for s in days if s.day == d]
    if not match:
        return NOT_RUNNING_TXT
    scheduled = match[0]
    heading = f"**Workout for {scheduled.date:%A}:**\n\n"
    if scheduled.resolution.entry is None:
        return heading + "Rest or active recovery."
    return heading + entry_markdown(scheduled.resolution.entry)
