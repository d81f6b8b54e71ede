from __future__ import annotations

import math
from collections.abc import Iterable
from decimal import Decimal

from gasstation.domain.entities.gas_estimate import (
    AveragedEstimate,
    EstimateRecord,
    GasTier,
    GroupedEstimate,
)
from gasstation.domain.services.number_format import format_num


AVERAGE_DECIMALS = 6


def group_estimates(records: Iterable[EstimateRecord]) -> dict[GasTier, GroupedEstimate]:
    """Accumulate per-tier totals; tiers missing from ``records`` are left out."""
    totals: dict[GasTier, list[float]] = {}
    counts: dict[GasTier, int] = {}
    for record in records:
        bucket = totals.setdefault(record.type, [0.0, 0.0])
        bucket[0] += record.cost_per_gwei
        bucket[1] += record.wait_time_in_min
        counts[record.type] = counts.get(record.type, 0) + 1

    return {
        tier: GroupedEstimate(
            total_cost_per_gwei=totals[tier][0],
            total_wait_time_in_min=totals[tier][1],
            num_records=counts[tier],
        )
        for tier in GasTier
        if tier in counts
    }


def build_label(tier: GasTier, avg_wait_time_in_min: str) -> str:
    return f"{tier} < {math.ceil(Decimal(avg_wait_time_in_min))}m"


def average_grouped_estimates(
    grouped: dict[GasTier, GroupedEstimate],
) -> dict[GasTier, AveragedEstimate]:
    averaged: dict[GasTier, AveragedEstimate] = {}
    for tier, group in grouped.items():
        avg_cost = format_num(group.total_cost_per_gwei / group.num_records, AVERAGE_DECIMALS)
        avg_wait = format_num(group.total_wait_time_in_min / group.num_records, AVERAGE_DECIMALS)
        averaged[tier] = AveragedEstimate(
            type=tier,
            total_cost_per_gwei=group.total_cost_per_gwei,
            total_wait_time_in_min=group.total_wait_time_in_min,
            num_records=group.num_records,
            avg_cost_per_gwei=avg_cost,
            avg_wait_time_in_min=avg_wait,
            label=build_label(tier, avg_wait),
        )
    return averaged


def aggregate_estimates(records: Iterable[EstimateRecord]) -> dict[GasTier, AveragedEstimate]:
    return average_grouped_estimates(group_estimates(records))
