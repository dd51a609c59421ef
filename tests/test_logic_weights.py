from datetime import date

import pandas as pd
import pytest

from errors import ValidationError
from logic.logic_weights import (
    WeightLog,
    load_weight_history_action,
    parse_weight,
    save_weight_action,
    weight_history_frame,
)
from models import WeightSample
from storage import WEIGHTS


@pytest.mark.parametrize("raw", [0, "0", -70, "", None, "heavy", "nan"])
def test_invalid_weights_are_refused_and_not_written(store, raw):
    log = WeightLog(store)
    with pytest.raises(ValidationError):
        log.save_weight("2025-01-01", raw)
    assert store.get_all(WEIGHTS) == []


def test_parse_weight():
    assert parse_weight(" 81.2 ") == 81.2


def test_same_day_save_overwrites(store):
    log = WeightLog(store)
    log.save_weight("2025-01-01", 82)
    log.save_weight("2025-01-01", 81.5)
    assert log.get_all_weights() == [WeightSample(date(2025, 1, 1), 81.5)]


def test_history_frame_is_newest_first():
    samples = [
        WeightSample(date(2025, 1, 8), 81.0),
        WeightSample(date(2025, 1, 1), 82.0),
        WeightSample(date(2025, 1, 15), 80.2),
    ]
    df = weight_history_frame(samples)
    assert list(df["date"]) == ["2025-01-15", "2025-01-08", "2025-01-01"]
    assert list(df.columns) == ["date", "weight"]


def test_history_frame_empty():
    df = weight_history_frame([])
    assert df.empty
    assert list(df.columns) == ["date", "weight"]


def test_save_weight_action(store):
    log = WeightLog(store)
    assert save_weight_action(log, 0, today=date(2025, 1, 1)) == "Please enter a valid weight."
    assert save_weight_action(log, 75.4, today=date(2025, 1, 1)) == "Weight saved!"
    assert store.get(WEIGHTS, "2025-01-01") == {"date": "2025-01-01", "weight": 75.4}


def test_load_weight_history_action(store):
    log = WeightLog(store)
    df, status = load_weight_history_action(log)
    assert isinstance(df, pd.DataFrame) and df.empty
    assert status == "No weight data yet."

    log.save_weight("2025-01-01", 82.0)
    log.save_weight("2025-02-01", 79.5)
    df, status = load_weight_history_action(log)
    assert len(df) == 2
    assert status == "Down 2.5 kg since 2025-01-01 (82 kg -> 79.5 kg)."
