from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class IngestGasEstimatesOutput:
    block_num: int
    created_at: datetime
    records_submitted: int


@dataclass(frozen=True)
class GetGasEstimatesInput:
    limit: int | None = None
