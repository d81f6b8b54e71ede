from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from gasstation.domain.entities.gas_estimate import EstimateRecord, GasTier


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def map_row_to_estimate_record(row: Mapping[str, Any]) -> EstimateRecord:
    return EstimateRecord(
        type=GasTier(row["type"]),
        cost_per_gwei=float(row["cost_per_gwei"]),
        wait_time_in_min=float(row["wait_time_in_min"]),
        block_num=int(row["block_num"]),
        created_at=_as_utc(row["created_at"]),
    )


def map_estimate_record_to_params(record: EstimateRecord) -> dict[str, Any]:
    return {
        "type": record.type.value,
        "cost_per_gwei": record.cost_per_gwei,
        "wait_time_in_min": record.wait_time_in_min,
        "block_num": record.block_num,
        "created_at": _as_utc(record.created_at),
    }
