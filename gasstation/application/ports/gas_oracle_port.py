from __future__ import annotations

from typing import Protocol

from gasstation.domain.entities.gas_estimate import RawSnapshot


class GasOraclePort(Protocol):
    def fetch_snapshot(self) -> RawSnapshot:
        ...
