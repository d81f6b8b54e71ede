from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any


RawSnapshot = Mapping[str, Any]


class GasTier(str, Enum):
    FASTEST = "Fastest"
    FAST = "Fast"
    STANDARD = "Standard"
    SAFELOW = "Safelow"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class EstimateRecord:
    type: GasTier
    cost_per_gwei: float
    wait_time_in_min: float
    block_num: int
    created_at: datetime


@dataclass(frozen=True)
class GroupedEstimate:
    total_cost_per_gwei: float
    total_wait_time_in_min: float
    num_records: int


@dataclass(frozen=True)
class AveragedEstimate:
    type: GasTier
    total_cost_per_gwei: float
    total_wait_time_in_min: float
    num_records: int
    avg_cost_per_gwei: str
    avg_wait_time_in_min: str
    label: str
