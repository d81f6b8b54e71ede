from __future__ import annotations

from typing import Protocol

from gasstation.domain.entities.gas_estimate import EstimateRecord


class EstimateStorePort(Protocol):
    def append(self, *, record: EstimateRecord) -> None:
        ...

    def fetch_last(self, *, limit: int) -> list[EstimateRecord]:
        ...
