# tracker_config.py
"""
Central configuration for the fitness tracker.

- TRACKER_DATA_DIR: directory holding the JSON store.
- PROGRAM_START_DATE: first day (Week 1, Day 1) of the workout program.
- TOTAL_WEEKS: length of the program in weeks.
- CURRICULUM_PATH: JSON file with the static workout plan.
- UI_TEST_MODE: if True, keep everything in memory and write nothing to disk.
- LOG_LEVEL: level passed to logging.basicConfig by app.py.
"""

import os
from datetime import date

_HERE = os.path.dirname(os.path.abspath(__file__))


def _bool_env(name: str, default: str = "false") -> bool:
    value = os.getenv(name, default).strip().lower()
    return value in {"1", "true", "yes", "y"}


def _date_env(name: str, default: str) -> date:
    try:
        return date.fromisoformat(os.getenv(name, default).strip())
    except ValueError:
        return date.fromisoformat(default)


UI_TEST_MODE: bool = _bool_env("UI_TEST_MODE", "false")

TRACKER_DATA_DIR: str = os.getenv("TRACKER_DATA_DIR", "user_data")

# The reference program starts on Monday, July 7th, 2025
PROGRAM_START_DATE: date = _date_env("PROGRAM_START_DATE", "2025-07-07")

try:
    TOTAL_WEEKS: int = int(os.getenv("TOTAL_WEEKS", "26"))
except ValueError:
    TOTAL_WEEKS = 26
if TOTAL_WEEKS < 1:
    TOTAL_WEEKS = 26

CURRICULUM_PATH: str = os.getenv(
    "CURRICULUM_PATH", os.path.join(_HERE, "data", "curriculum.json")
)

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
