from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from sqlalchemy import create_engine

from gasstation.domain.entities.gas_estimate import EstimateRecord, GasTier
from gasstation.domain.exceptions import StoreReadError, StoreWriteError
from gasstation.infrastructure.db.engine import create_schema, get_engine
from gasstation.infrastructure.db.mappers.gas_estimate_mapper import map_row_to_estimate_record
from gasstation.infrastructure.db.repositories.gas_estimate_repository import (
    SqlGasEstimateRepository,
)


BASE_TIME = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


def _record(tier: GasTier, block_num: int, minutes: int) -> EstimateRecord:
    return EstimateRecord(
        type=tier,
        cost_per_gwei=float(block_num) / 10,
        wait_time_in_min=0.5,
        block_num=block_num,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )


@pytest.fixture
def repository(tmp_path: Path) -> SqlGasEstimateRepository:
    engine = get_engine(f"sqlite:///{tmp_path / 'estimates.db'}")
    create_schema(engine)
    return SqlGasEstimateRepository(engine)


def test_fetch_last_returns_most_recent_in_insertion_order(repository: SqlGasEstimateRepository):
    written = [
        _record(tier, block_num, minute)
        for minute, block_num in enumerate((100, 101))
        for tier in GasTier
    ]
    for record in written:
        repository.append(record=record)

    last = repository.fetch_last(limit=4)

    assert last == written[4:]
    assert last[0].created_at.tzinfo is not None


def test_fetch_last_with_window_larger_than_store(repository: SqlGasEstimateRepository):
    record = _record(GasTier.FAST, 100, 0)
    repository.append(record=record)

    assert repository.fetch_last(limit=240) == [record]


def test_fetch_last_on_empty_store(repository: SqlGasEstimateRepository):
    assert repository.fetch_last(limit=240) == []


def test_store_errors_are_translated(tmp_path: Path):
    engine = create_engine(f"sqlite:///{tmp_path / 'no_schema.db'}")
    repository = SqlGasEstimateRepository(engine)

    with pytest.raises(StoreWriteError):
        repository.append(record=_record(GasTier.FASTEST, 1, 0))
    with pytest.raises(StoreReadError):
        repository.fetch_last(limit=4)


def test_mapper_restores_utc_on_naive_timestamps():
    row = {
        "type": "Safelow",
        "cost_per_gwei": "0.5",
        "wait_time_in_min": 12,
        "block_num": 7,
        "created_at": datetime(2026, 3, 1, 12, 0, 0),
    }

    mapped = map_row_to_estimate_record(row)

    assert mapped.type is GasTier.SAFELOW
    assert mapped.cost_per_gwei == 0.5
    assert mapped.wait_time_in_min == 12.0
    assert mapped.created_at == BASE_TIME
