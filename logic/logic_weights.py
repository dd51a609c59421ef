import logging
import math
from datetime import date
from typing import Any, List

import pandas as pd

from errors import StorageError, ValidationError
from models import DateLike, WeightSample, to_date
from storage import WEIGHTS

logger = logging.getLogger(__name__)

HISTORY_COLUMNS = ["date", "weight"]


def parse_weight(value: Any) -> float:
    """
    Parse a body weight in kg.

    Unlike the daily fields, a bad weight is not coerced to 0: a blank or
    zero entry means "no weight entered" and the save is refused.
    """
    try:
        weight = float(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"Weight must be a number, got {value!r}")
    if not math.isfinite(weight) or weight <= 0:
        raise ValidationError(f"Weight must be greater than 0, got {value!r}")
    return weight


class WeightLog:
    """Access to the weights collection: one sample per date."""

    def __init__(self, store):
        self.store = store

    def save_weight(self, day: DateLike, weight: Any) -> WeightSample:
        sample = WeightSample(date=to_date(day), weight=parse_weight(weight))
        self.store.put(WEIGHTS, sample.date, sample.to_dict())
        logger.info("Saved weight %.1f kg for %s", sample.weight, sample.date)
        return sample

    def get_all_weights(self) -> List[WeightSample]:
        return [WeightSample.from_dict(r) for r in self.store.get_all(WEIGHTS)]


def weight_history_frame(samples: List[WeightSample]) -> pd.DataFrame:
    """Tabulate samples newest first."""
    if not samples:
        return pd.DataFrame(columns=HISTORY_COLUMNS)
    df = pd.DataFrame(
        [{"date": s.date.isoformat(), "weight": s.weight} for s in samples],
        columns=HISTORY_COLUMNS,
    )
    return df.sort_values("date", ascending=False).reset_index(drop=True)


def weight_trend_text(df: pd.DataFrame) -> str:
    """One-line change from the oldest to the newest sample."""
    if len(df) < 2:
        return ""
    newest = df["weight"].iloc[0]
    oldest = df["weight"].iloc[-1]
    change = newest - oldest
    if change == 0:
        return f"No change since {df['date'].iloc[-1]} ({newest:g} kg)."
    direction = "down" if change < 0 else "up"
    return (
        f"{direction.capitalize()} {abs(change):.1f} kg since {df['date'].iloc[-1]} "
        f"({oldest:g} kg -> {newest:g} kg)."
    )


# ================== Gradio callbacks ==================


def save_weight_action(weight_log: WeightLog, weight, today=None) -> str:
    """Gradio callback: record today's weight."""
    day = to_date(today) if today else date.today()
    try:
        weight_log.save_weight(day, weight)
    except ValidationError as e:
        logger.warning("Refused weight entry for %s: %s", day, e)
        return "Please enter a valid weight."
    except StorageError as e:
        logger.exception("Saving weight for %s failed", day)
        return f"Error saving weight: {e}"
    return "Weight saved!"


def load_weight_history_action(weight_log: WeightLog):
    """
    Gradio callback: weight log table plus a status line.

    Returns:
        history_df: pd.DataFrame (newest first)
        status_md:  str
    """
    try:
        samples = weight_log.get_all_weights()
    except StorageError as e:
        logger.exception("Loading weight history failed")
        return weight_history_frame([]), f"Error loading weight history: {e}"

    df = weight_history_frame(samples)
    if df.empty:
        return df, "No weight data yet."
    return df, weight_trend_text(df)
