from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from gasstation.application.ports.gas_oracle_port import GasOraclePort
from gasstation.domain.entities.gas_estimate import RawSnapshot
from gasstation.domain.exceptions import MalformedResponseError


ETH_GAS_STATION_URL = "https://ethgasstation.info/json/ethgasAPI.json"


class JsonFetcher(Protocol):
    def get_json(self, url: str) -> Any:
        ...


@dataclass(frozen=True)
class EthGasStationClientSettings:
    url: str = ETH_GAS_STATION_URL


class EthGasStationClient(GasOraclePort):
    """Reads the ETH Gas Station snapshot.

    Sample body::

        {"fastest": 40.0, "fast": 10.0, "average": 10.0, "safeLow": 10.0,
         "fastestWait": 0.5, "fastWait": 0.5, "avgWait": 0.5, "safeLowWait": 0.5,
         "blockNum": 5406970, "average_calc": 10.0, "safelow_calc": 10.0, ...}
    """

    def __init__(self, settings: EthGasStationClientSettings, *, fetcher: JsonFetcher):
        self._settings = settings
        self._fetcher = fetcher

    def fetch_snapshot(self) -> RawSnapshot:
        payload = self._fetcher.get_json(self._settings.url)
        if not isinstance(payload, Mapping):
            raise MalformedResponseError(
                f"Expected a JSON object from gas oracle, got {type(payload).__name__}."
            )
        return dict(payload)
