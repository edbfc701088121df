from __future__ import annotations

from pathlib import Path

import pytest

from retention.core.result import Ok
from retention.services.retention.loader import Dataset, load_dataset
from retention.services.retention.reasons import MockReasonSink
from retention.services.retention.service import ReleaseRetentionService


@pytest.fixture(scope="session")
def data_dir() -> Path:
    return Path(__file__).resolve().parent / "data"


@pytest.fixture(scope="session")
def dataset(data_dir: Path) -> Dataset:
    result = load_dataset(data_dir)
    assert isinstance(result, Ok), result
    return result.value


@pytest.fixture
def reasons() -> MockReasonSink:
    return MockReasonSink()


@pytest.fixture
def service(dataset: Dataset, reasons: MockReasonSink) -> ReleaseRetentionService:
    return dataset.service(reasons=reasons)
