from __future__ import annotations

from functools import lru_cache

from gasstation.application.use_cases.get_average_gas_estimates import GetAverageGasEstimatesUseCase
from gasstation.application.use_cases.get_recent_gas_estimates import GetRecentGasEstimatesUseCase
from gasstation.application.use_cases.ingest_gas_estimates import IngestGasEstimatesUseCase
from gasstation.domain.services.estimate_normalizer import get_divisor_policy
from gasstation.infrastructure.background.write_dispatcher import BackgroundWriteDispatcher
from gasstation.infrastructure.clients.eth_gas_station_client import (
    EthGasStationClient,
    EthGasStationClientSettings,
)
from gasstation.infrastructure.clients.http_json_fetcher import HttpxJsonFetcher
from gasstation.infrastructure.db.engine import get_engine
from gasstation.infrastructure.db.repositories.gas_estimate_repository import (
    SqlGasEstimateRepository,
)
from gasstation.shared.config import get_settings


def _get_db_engine():
    return get_engine(get_settings().database_url)


def _get_estimate_repository() -> SqlGasEstimateRepository:
    return SqlGasEstimateRepository(_get_db_engine())


@lru_cache(maxsize=1)
def get_write_dispatcher() -> BackgroundWriteDispatcher:
    return BackgroundWriteDispatcher(max_workers=get_settings().store_write_workers)


@lru_cache(maxsize=1)
def _get_gas_oracle_client() -> EthGasStationClient:
    settings = get_settings()
    return EthGasStationClient(
        EthGasStationClientSettings(url=settings.oracle_url),
        fetcher=HttpxJsonFetcher(timeout_seconds=settings.oracle_timeout_seconds),
    )


def get_ingest_gas_estimates_use_case() -> IngestGasEstimatesUseCase:
    settings = get_settings()
    return IngestGasEstimatesUseCase(
        oracle_port=_get_gas_oracle_client(),
        store_port=_get_estimate_repository(),
        write_dispatcher=get_write_dispatcher(),
        divisor_policy=get_divisor_policy(settings.oracle_divisor_policy),
    )


def get_recent_gas_estimates_use_case() -> GetRecentGasEstimatesUseCase:
    settings = get_settings()
    return GetRecentGasEstimatesUseCase(
        store_port=_get_estimate_repository(),
        default_limit=settings.estimates_window_size,
        max_limit=settings.estimates_max_window_size,
    )


def get_average_gas_estimates_use_case() -> GetAverageGasEstimatesUseCase:
    settings = get_settings()
    return GetAverageGasEstimatesUseCase(
        store_port=_get_estimate_repository(),
        default_limit=settings.estimates_window_size,
        max_limit=settings.estimates_max_window_size,
    )
