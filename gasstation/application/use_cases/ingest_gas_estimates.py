from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
import logging

from gasstation.application.dto.gas_estimates import IngestGasEstimatesOutput
from gasstation.application.ports.estimate_store_port import EstimateStorePort
from gasstation.application.ports.gas_oracle_port import GasOraclePort
from gasstation.application.ports.write_dispatcher_port import WriteDispatcherPort
from gasstation.domain.entities.gas_estimate import EstimateRecord
from gasstation.domain.exceptions import DomainError
from gasstation.domain.services.estimate_normalizer import (
    ORACLE_DIVISOR_POLICY,
    DivisorPolicy,
    normalize_snapshot,
)


logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class IngestGasEstimatesUseCase:
    def __init__(
        self,
        *,
        oracle_port: GasOraclePort,
        store_port: EstimateStorePort,
        write_dispatcher: WriteDispatcherPort,
        divisor_policy: DivisorPolicy = ORACLE_DIVISOR_POLICY,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._oracle_port = oracle_port
        self._store_port = store_port
        self._write_dispatcher = write_dispatcher
        self._divisor_policy = divisor_policy
        self._clock = clock

    def execute(self) -> IngestGasEstimatesOutput:
        try:
            snapshot = self._oracle_port.fetch_snapshot()
            records = normalize_snapshot(
                snapshot,
                observed_at=self._clock(),
                divisor_policy=self._divisor_policy,
            )
        except DomainError as exc:
            logger.warning("ingest_gas_estimates: aborted error=%s", exc)
            raise

        for record in records:
            self._write_dispatcher.submit(
                self._append_write(record),
                description=f"append {record.type} block={record.block_num}",
            )

        logger.info(
            "ingest_gas_estimates: submitted records=%s block_num=%s policy=%s",
            len(records),
            records[0].block_num,
            self._divisor_policy.name,
        )
        return IngestGasEstimatesOutput(
            block_num=records[0].block_num,
            created_at=records[0].created_at,
            records_submitted=len(records),
        )

    def _append_write(self, record: EstimateRecord) -> Callable[[], None]:
        def _write() -> None:
            self._store_port.append(record=record)

        return _write
