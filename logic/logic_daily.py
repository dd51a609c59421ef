import logging
import math
import threading
from datetime import date
from typing import Any, Dict, Optional, Tuple

from errors import StorageError, ValidationError
from models import DAILY_FIELDS, FLOAT_FIELDS, DailyRecord, DateLike, date_key, to_date
from storage import DAILY_DATA

logger = logging.getLogger(__name__)

MACRO_FIELDS = ("calories", "protein", "carbs", "fat")


def coerce_int(value: Any) -> int:
    """Parse a whole non-negative number from user input; anything else becomes 0."""
    try:
        number = int(float(str(value).strip()))
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(number, 0)


def coerce_float(value: Any) -> float:
    """Parse a non-negative real number from user input; anything else becomes 0."""
    try:
        number = float(str(value).strip())
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def _coerce_field(name: str, value: Any):
    return coerce_float(value) if name in FLOAT_FIELDS else coerce_int(value)


class DailyMetricsAggregator:
    """
    Read-merge-write access to the dailyData collection.

    Saving steps/water and saving macros are separate actions against the same
    date, so an upsert only overwrites the fields it is given. Upserts for the
    same date are serialized with a per-date lock because Gradio runs
    callbacks on worker threads.
    """

    def __init__(self, store):
        self.store = store
        self._locks: Dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def _lock_for(self, key: str) -> threading.Lock:
        with self._locks_guard:
            return self._locks.setdefault(key, threading.Lock())

    def get_daily_record(self, day: DateLike) -> Optional[DailyRecord]:
        data = self.store.get(DAILY_DATA, day)
        if data is None:
            return None
        return DailyRecord.from_dict(data)

    def upsert_daily(self, day: DateLike, partial_fields: Dict[str, Any]) -> DailyRecord:
        """Merge partial_fields into the record for day and write it back."""
        unknown = set(partial_fields) - set(DAILY_FIELDS)
        if unknown:
            raise ValidationError(
                f"Unknown daily field(s): {', '.join(sorted(unknown))}. "
                f"Allowed: {', '.join(DAILY_FIELDS)}"
            )
        updates = {name: _coerce_field(name, v) for name, v in partial_fields.items()}

        key = date_key(day)
        with self._lock_for(key):
            # a failed read raises before anything is written
            existing = self.store.get(DAILY_DATA, key)
            if existing is None:
                merged = DailyRecord(date=to_date(key)).to_dict()
            else:
                merged = dict(existing)
            merged.update(updates)
            self.store.put(DAILY_DATA, key, merged)

        logger.info("Saved %s for %s", ", ".join(sorted(updates)), key)
        return DailyRecord.from_dict(merged)


# ================== Formatting ==================


def daily_summary_markdown(record: Optional[DailyRecord]) -> str:
    r = record or DailyRecord(date=date.today())
    return (
        f"**Steps:** {r.steps}  \n"
        f"**Water:** {r.water:g} L  \n"
        f"**Calories:** {r.calories}  \n"
        f"**Protein:** {r.protein}g · **Carbs:** {r.carbs}g · **Fat:** {r.fat}g"
    )


def _prefill(record: Optional[DailyRecord]) -> Tuple:
    # blank inputs rather than zeros when nothing was entered
    if record is None:
        return (None,) * len(DAILY_FIELDS)
    return tuple(getattr(record, name) or None for name in DAILY_FIELDS)


# ================== Gradio callbacks ==================


def save_daily_action(aggregator: DailyMetricsAggregator, steps, water, today=None) -> str:
    """Gradio callback: save steps and water for today."""
    day = to_date(today) if today else date.today()
    fields = {"steps": coerce_int(steps), "water": coerce_float(water)}
    try:
        aggregator.upsert_daily(day, fields)
    except StorageError as e:
        logger.exception("Saving daily data for %s failed", day)
        return f"Error saving daily data: {e}"
    return "Daily data saved!"


def save_macros_action(
    aggregator: DailyMetricsAggregator,
    calories,
    protein,
    carbs,
    fat,
    today=None,
) -> str:
    """Gradio callback: save calories and macros for today."""
    day = to_date(today) if today else date.today()
    fields = {
        "calories": coerce_int(calories),
        "protein": coerce_int(protein),
        "carbs": coerce_int(carbs),
        "fat": coerce_int(fat),
    }
    if not any(fields.values()):
        logger.warning("Refused empty macro entry for %s", day)
        return "Please enter at least one macro value."

    try:
        aggregator.upsert_daily(day, fields)
    except StorageError as e:
        logger.exception("Saving macros for %s failed", day)
        return f"Error saving macros: {e}"
    return "Macros saved!"


def load_dashboard_action(aggregator: DailyMetricsAggregator, today=None):
    """
    Gradio callback: today's totals for the dashboard.

    Returns:
        summary_md, then the six input prefill values
        (steps, water, calories, protein, carbs, fat), None where empty.
    """
    day = to_date(today) if today else date.today()
    try:
        record = aggregator.get_daily_record(day)
    except StorageError as e:
        logger.exception("Loading daily data for %s failed", day)
        return (f"Error loading daily data: {e}",) + (None,) * len(DAILY_FIELDS)

    header = f"### Today ({day.isoformat()})\n\n"
    return (header + daily_summary_markdown(record),) + _prefill(record)


def load_day_action(aggregator: DailyMetricsAggregator, calendar, week, day):
    """Gradio callback: show the record stored for a program week/day."""
    try:
        w = int(week)
        d = int(day)
        abs_date = calendar.date_for(w, d)
    except (TypeError, ValueError):
        return "", "", "Please select a valid week and day."

    date_str = abs_date.isoformat()
    try:
        record = aggregator.get_daily_record(abs_date)
    except StorageError as e:
        logger.exception("Loading daily data for %s failed", date_str)
        return date_str, "", f"Error loading daily data: {e}"

    if record is None:
        return date_str, "", f"Date: {date_str} (no record for week {w}, day {d})"
    return date_str, daily_summary_markdown(record), f"Date: {date_str} (loaded existing record)"
