from __future__ import annotations

from gasstation.application.dto.gas_estimates import GetGasEstimatesInput
from gasstation.application.ports.estimate_store_port import EstimateStorePort
from gasstation.application.use_cases.estimates_window import resolve_window_limit
from gasstation.domain.entities.gas_estimate import EstimateRecord


class GetRecentGasEstimatesUseCase:
    def __init__(self, *, store_port: EstimateStorePort, default_limit: int, max_limit: int):
        self._store_port = store_port
        self._default_limit = default_limit
        self._max_limit = max_limit

    def execute(self, command: GetGasEstimatesInput) -> list[EstimateRecord]:
        limit = resolve_window_limit(
            limit=command.limit,
            default_limit=self._default_limit,
            max_limit=self._max_limit,
        )
        return self._store_port.fetch_last(limit=limit)
