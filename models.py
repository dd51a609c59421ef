"""
Records persisted by the tracker.

- DailyRecord: steps, water and nutrition totals for one calendar date
- WeightSample: one body-weight reading per calendar date

Dates are `datetime.date` everywhere in the code and are converted to the
`YYYY-MM-DD` text form only when a record crosses the storage boundary.
"""

from dataclasses import dataclass, asdict
from datetime import date, datetime
from typing import Any, Dict, Union

DateLike = Union[date, datetime, str]

DAILY_FIELDS = ("steps", "water", "calories", "protein", "carbs", "fat")
# water is liters; everything else is a whole number
FLOAT_FIELDS = {"water"}


def to_date(value: DateLike) -> date:
    """Reduce a date, datetime or ISO string to a calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value).strip()[:10])


def date_key(value: DateLike) -> str:
    """Return the storage key (YYYY-MM-DD) for a date."""
    return to_date(value).isoformat()


@dataclass
class DailyRecord:
    """Daily metrics for one date."""
    date: date
    steps: int = 0
    water: float = 0.0
    calories: int = 0
    protein: int = 0
    carbs: int = 0
    fat: int = 0

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["date"] = self.date.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DailyRecord":
        # stored documents may hold only some of the fields
        values = {}
        for name in DAILY_FIELDS:
            raw = data.get(name) or 0
            values[name] = float(raw) if name in FLOAT_FIELDS else int(raw)
        return cls(date=to_date(data["date"]), **values)


@dataclass(frozen=True)
class WeightSample:
    """Body weight in kilograms recorded on a date."""
    date: date
    weight: float

    def to_dict(self) -> Dict[str, Any]:
        return {"date": self.date.isoformat(), "weight": self.weight}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WeightSample":
        return cls(date=to_date(data["date"]), weight=float(data["weight"]))
