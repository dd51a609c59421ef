import os
import time

import pytest

from curriculum import load_curriculum
from errors import StorageError
from program_calendar import ProgramCalendar
from storage import JsonFileStore, MemoryStore

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
CURRICULUM_FILE = os.path.join(ROOT, "data", "curriculum.json")
START = "2025-07-07"


class FlakyStore(MemoryStore):
    """MemoryStore that can be told to fail reads or writes."""

    def __init__(self):
        super().__init__()
        self.fail_reads = False
        self.fail_writes = False
        self.writes = 0

    def _read(self, collection):
        if self.fail_reads:
            raise StorageError("backend unavailable")
        return super()._read(collection)

    def _write(self, collection, docs):
        if self.fail_writes:
            raise StorageError("quota exceeded")
        self.writes += 1
        super()._write(collection, docs)


class SlowStore(MemoryStore):
    """Widens the gap between a read and the following write."""

    def get(self, collection, key):
        record = super().get(collection, key)
        time.sleep(0.02)
        return record


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def flaky_store():
    return FlakyStore()


@pytest.fixture
def slow_store():
    return SlowStore()


@pytest.fixture
def file_store(tmp_path):
    return JsonFileStore(str(tmp_path / "user_data"))


@pytest.fixture(scope="session")
def curriculum():
    return load_curriculum(CURRICULUM_FILE)


@pytest.fixture
def calendar(curriculum):
    return ProgramCalendar(START, curriculum, 26)
