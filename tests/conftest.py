import datetime
import pathlib
import sys

import pytest

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from deadline_triage.triage.models import Task  # noqa: E402


@pytest.fixture
def reference_date() -> datetime.date:
    """A Monday."""
    return datetime.date(2024, 1, 1)


@pytest.fixture
def scenario_tasks() -> list[Task]:
    return [
        Task(id="t1", kind="tactical", deadline="2024-01-01"),
        Task(id="t2", kind="tactical", title="finish by tomorrow"),
    ]
