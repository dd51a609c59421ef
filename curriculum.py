"""
Static workout curriculum.

The plan is stored as JSON:

    {
      "program": "...",
      "total_weeks": 26,
      "weeks": {"1": {"1": {"type": ..., "description": ..., "exercises": [...]}}}
    }

and is loaded once into an immutable (week, day) -> CurriculumEntry table.
"""

import json
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

logger = logging.getLogger(__name__)

Coordinate = Tuple[int, int]

DEFAULT_TOTAL_WEEKS = 26
DAYS_PER_WEEK = 7


@dataclass(frozen=True)
class Exercise:
    name: str
    sets: Union[int, str]
    reps: Union[int, str]
    notes: Optional[str] = None


@dataclass(frozen=True)
class CurriculumEntry:
    """A planned day: either a workout or an explicit rest marker."""
    type: str
    description: str = ""
    exercises: Tuple[Exercise, ...] = ()

    @property
    def is_rest(self) -> bool:
        return not self.exercises and self.type.strip().lower().startswith("rest")


def _parse_entry(raw: Dict[str, Any], where: str) -> CurriculumEntry:
    if not isinstance(raw, dict) or not raw.get("type"):
        raise ValueError(f"{where}: entry must be an object with a 'type'")
    exercises = []
    for idx, ex in enumerate(raw.get("exercises") or []):
        if not isinstance(ex, dict) or "name" not in ex:
            raise ValueError(f"{where}: exercise {idx} must have a 'name'")
        exercises.append(Exercise(
            name=str(ex["name"]),
            sets=ex.get("sets", 1),
            reps=ex.get("reps", ""),
            notes=ex.get("notes"),
        ))
    return CurriculumEntry(
        type=str(raw["type"]),
        description=str(raw.get("description", "")),
        exercises=tuple(exercises),
    )


class Curriculum:
    """Read-only lookup of planned days by (week, day)."""

    def __init__(
        self,
        entries: Mapping[Coordinate, CurriculumEntry],
        total_weeks: int = DEFAULT_TOTAL_WEEKS,
        name: str = "",
    ):
        self._entries = MappingProxyType(dict(entries))
        self.total_weeks = total_weeks
        self.name = name

    @property
    def entries(self) -> Mapping[Coordinate, CurriculumEntry]:
        return self._entries

    def get(self, week: int, day: int) -> Optional[CurriculumEntry]:
        return self._entries.get((week, day))

    def __contains__(self, coord) -> bool:
        return coord in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def weeks(self) -> List[int]:
        """Weeks that have at least one planned day."""
        return sorted({w for (w, _) in self._entries})

    def missing_coordinates(self, total_weeks: Optional[int] = None) -> List[Coordinate]:
        """Coordinates inside the program with no entry (not even a rest marker)."""
        n = total_weeks if total_weeks is not None else self.total_weeks
        return [
            (w, d)
            for w in range(1, n + 1)
            for d in range(1, DAYS_PER_WEEK + 1)
            if (w, d) not in self._entries
        ]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Curriculum":
        if "weeks" not in data or not isinstance(data["weeks"], dict):
            raise ValueError("Curriculum JSON must contain a 'weeks' object")

        entries: Dict[Coordinate, CurriculumEntry] = {}
        for week_key, days in data["weeks"].items():
            try:
                week = int(week_key)
            except ValueError:
                raise ValueError(f"Invalid week key {week_key!r}")
            if week < 1 or not isinstance(days, dict):
                raise ValueError(f"Week {week_key}: must be >= 1 and map days to entries")
            for day_key, raw in days.items():
                try:
                    day = int(day_key)
                except ValueError:
                    raise ValueError(f"Week {week}: invalid day key {day_key!r}")
                if not 1 <= day <= DAYS_PER_WEEK:
                    raise ValueError(f"Week {week}: day {day} is outside 1..{DAYS_PER_WEEK}")
                entries[(week, day)] = _parse_entry(raw, f"Week {week}, Day {day}")

        try:
            total_weeks = int(data.get("total_weeks", DEFAULT_TOTAL_WEEKS))
        except (TypeError, ValueError):
            raise ValueError("'total_weeks' must be an integer")
        return cls(entries, total_weeks=total_weeks, name=str(data.get("program", "")))


def load_curriculum(path: str) -> Curriculum:
    """Load the curriculum JSON file at path."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Curriculum file not found: {path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in curriculum file: {e}")

    curriculum = Curriculum.from_dict(data)
    logger.info(
        "Loaded curriculum %r: %d planned days across weeks %s",
        curriculum.name, len(curriculum), curriculum.weeks(),
    )
    return curriculum
