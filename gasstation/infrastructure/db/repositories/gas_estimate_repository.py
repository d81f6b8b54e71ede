from __future__ import annotations

import logging

from sqlalchemy import insert, select
from sqlalchemy.exc import SQLAlchemyError

from gasstation.application.ports.estimate_store_port import EstimateStorePort
from gasstation.domain.entities.gas_estimate import EstimateRecord
from gasstation.domain.exceptions import StoreReadError, StoreWriteError
from gasstation.infrastructure.db.mappers.gas_estimate_mapper import (
    map_estimate_record_to_params,
    map_row_to_estimate_record,
)
from gasstation.infrastructure.db.models.gas_estimate import GasEstimateModel


logger = logging.getLogger(__name__)


class SqlGasEstimateRepository(EstimateStorePort):
    def __init__(self, engine):
        self._engine = engine

    def append(self, *, record: EstimateRecord) -> None:
        stmt = insert(GasEstimateModel).values(**map_estimate_record_to_params(record))
        try:
            with self._engine.begin() as conn:
                conn.execute(stmt)
        except SQLAlchemyError as exc:
            raise StoreWriteError(
                f"Failed to append {record.type} estimate for block {record.block_num}."
            ) from exc

    def fetch_last(self, *, limit: int) -> list[EstimateRecord]:
        table = GasEstimateModel.__table__
        latest = (
            select(table)
            .order_by(table.c.id.desc())
            .limit(limit)
            .subquery()
        )
        stmt = select(latest).order_by(latest.c.id.asc())
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(stmt).mappings().all()
        except SQLAlchemyError as exc:
            raise StoreReadError(f"Failed to read last {limit} estimates.") from exc
        logger.debug("gas_estimate_repository: fetched_last limit=%s rows=%s", limit, len(rows))
        return [map_row_to_estimate_record(row) for row in rows]
