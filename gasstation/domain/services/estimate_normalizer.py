from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from gasstation.domain.entities.gas_estimate import EstimateRecord, GasTier, RawSnapshot
from gasstation.domain.exceptions import InvalidSnapshotError


ORACLE_BLOCK_FIELD = "blockNum"


@dataclass(frozen=True)
class TierFields:
    price: str
    wait: str


TIER_FIELDS: dict[GasTier, TierFields] = {
    GasTier.FASTEST: TierFields(price="fastest", wait="fastestWait"),
    GasTier.FAST: TierFields(price="fast", wait="fastWait"),
    GasTier.STANDARD: TierFields(price="average", wait="avgWait"),
    GasTier.SAFELOW: TierFields(price="safeLow", wait="safeLowWait"),
}


@dataclass(frozen=True)
class DivisorSource:
    """Where a tier's price divisor comes from: a snapshot field or a constant."""

    field: str | None = None
    constant: float | None = None

    def resolve(self, snapshot: RawSnapshot) -> float:
        if self.field is not None:
            return _number_field(snapshot, self.field)
        if self.constant is None:
            raise InvalidSnapshotError("Divisor source has neither field nor constant.")
        return float(self.constant)

    def describe(self) -> str:
        return self.field if self.field is not None else str(self.constant)


@dataclass(frozen=True)
class DivisorPolicy:
    name: str
    divisors: dict[GasTier, DivisorSource]

    def source_for(self, tier: GasTier) -> DivisorSource:
        try:
            return self.divisors[tier]
        except KeyError as exc:
            raise InvalidSnapshotError(f"No divisor configured for tier {tier}.") from exc


ORACLE_DIVISOR_POLICY = DivisorPolicy(
    name="oracle",
    divisors={
        GasTier.FASTEST: DivisorSource(field="average_calc"),
        GasTier.FAST: DivisorSource(field="average_calc"),
        GasTier.STANDARD: DivisorSource(field="average_calc"),
        GasTier.SAFELOW: DivisorSource(field="safelow_calc"),
    },
)

# Oracle prices are published in tenths of gwei.
CONSTANT_DIVISOR_POLICY = DivisorPolicy(
    name="constant",
    divisors={tier: DivisorSource(constant=10.0) for tier in GasTier},
)

DIVISOR_POLICIES: dict[str, DivisorPolicy] = {
    ORACLE_DIVISOR_POLICY.name: ORACLE_DIVISOR_POLICY,
    CONSTANT_DIVISOR_POLICY.name: CONSTANT_DIVISOR_POLICY,
}


def get_divisor_policy(name: str) -> DivisorPolicy:
    policy = DIVISOR_POLICIES.get(name.strip().lower())
    if policy is None:
        allowed = ", ".join(sorted(DIVISOR_POLICIES))
        raise ValueError(f"Unknown divisor policy '{name}'. Expected one of: {allowed}.")
    return policy


def _number_field(snapshot: RawSnapshot, field: str) -> float:
    value: Any = snapshot.get(field)
    if value is None:
        raise InvalidSnapshotError(f"Snapshot field '{field}' is missing.")
    if isinstance(value, bool):
        raise InvalidSnapshotError(f"Snapshot field '{field}' must be numeric.")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidSnapshotError(f"Snapshot field '{field}' must be numeric.") from exc
    if not math.isfinite(number):
        raise InvalidSnapshotError(f"Snapshot field '{field}' must be finite.")
    return number


def _non_negative_field(snapshot: RawSnapshot, field: str) -> float:
    number = _number_field(snapshot, field)
    if number < 0:
        raise InvalidSnapshotError(f"Snapshot field '{field}' must be non-negative.")
    return number


def _block_num(snapshot: RawSnapshot) -> int:
    number = _number_field(snapshot, ORACLE_BLOCK_FIELD)
    if not number.is_integer():
        raise InvalidSnapshotError(f"Snapshot field '{ORACLE_BLOCK_FIELD}' must be an integer.")
    return int(number)


def _tier_divisor(snapshot: RawSnapshot, tier: GasTier, policy: DivisorPolicy) -> float:
    source = policy.source_for(tier)
    divisor = source.resolve(snapshot)
    if divisor == 0:
        raise InvalidSnapshotError(
            f"Divisor '{source.describe()}' for tier {tier} is zero."
        )
    return divisor


def normalize_snapshot(
    snapshot: RawSnapshot,
    *,
    observed_at: datetime,
    divisor_policy: DivisorPolicy = ORACLE_DIVISOR_POLICY,
) -> list[EstimateRecord]:
    """Map one oracle snapshot to one record per tier, in tier order.

    All records share ``block_num`` and ``observed_at``. Missing, non-numeric
    or negative fields and zero divisors raise ``InvalidSnapshotError``.
    """
    block_num = _block_num(snapshot)
    records: list[EstimateRecord] = []
    for tier, fields in TIER_FIELDS.items():
        price = _non_negative_field(snapshot, fields.price)
        divisor = _tier_divisor(snapshot, tier, divisor_policy)
        cost_per_gwei = price / divisor
        if cost_per_gwei < 0:
            raise InvalidSnapshotError(f"Cost for tier {tier} must be non-negative.")
        records.append(
            EstimateRecord(
                type=tier,
                cost_per_gwei=cost_per_gwei,
                wait_time_in_min=_non_negative_field(snapshot, fields.wait),
                block_num=block_num,
                created_at=observed_at,
            )
        )
    return records
