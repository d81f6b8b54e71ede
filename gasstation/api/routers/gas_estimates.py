from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query

from gasstation.api.deps import (
    get_average_gas_estimates_use_case,
    get_ingest_gas_estimates_use_case,
    get_recent_gas_estimates_use_case,
)
from gasstation.api.schemas.gas_estimates import (
    AverageGasEstimateResponse,
    GasEstimateResponse,
    IngestGasEstimatesResponse,
)
from gasstation.application.dto.gas_estimates import GetGasEstimatesInput
from gasstation.application.use_cases.get_average_gas_estimates import GetAverageGasEstimatesUseCase
from gasstation.application.use_cases.get_recent_gas_estimates import GetRecentGasEstimatesUseCase
from gasstation.application.use_cases.ingest_gas_estimates import IngestGasEstimatesUseCase
from gasstation.domain.exceptions import (
    EstimateWindowInputError,
    InvalidSnapshotError,
    MalformedResponseError,
    StoreReadError,
    UpstreamUnavailableError,
)

router = APIRouter()


def _epoch_millis(value: datetime) -> int:
    return int(round(value.timestamp() * 1000))


@router.post(
    "/gas-estimate",
    response_model=IngestGasEstimatesResponse,
    response_model_by_alias=True,
)
def ingest_gas_estimates(
    use_case: IngestGasEstimatesUseCase = Depends(get_ingest_gas_estimates_use_case),
):
    try:
        result = use_case.execute()
    except UpstreamUnavailableError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    except (MalformedResponseError, InvalidSnapshotError) as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    return IngestGasEstimatesResponse(
        block_num=result.block_num,
        records_submitted=result.records_submitted,
    )


@router.get(
    "/gas-estimate",
    response_model=list[GasEstimateResponse],
    response_model_by_alias=True,
)
def get_recent_gas_estimates(
    limit: int | None = Query(None, description="Number of most recent records to return."),
    use_case: GetRecentGasEstimatesUseCase = Depends(get_recent_gas_estimates_use_case),
):
    try:
        records = use_case.execute(GetGasEstimatesInput(limit=limit))
    except EstimateWindowInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except StoreReadError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc

    return [
        GasEstimateResponse(
            type=record.type.value,
            cost_per_gwei=record.cost_per_gwei,
            wait_time_in_min=record.wait_time_in_min,
            block_num=record.block_num,
            created_at=_epoch_millis(record.created_at),
        )
        for record in records
    ]


@router.get(
    "/gas-estimate/average",
    response_model=dict[str, AverageGasEstimateResponse],
    response_model_by_alias=True,
)
def get_average_gas_estimates(
    limit: int | None = Query(None, description="Number of most recent records to average."),
    use_case: GetAverageGasEstimatesUseCase = Depends(get_average_gas_estimates_use_case),
):
    try:
        averages = use_case.execute(GetGasEstimatesInput(limit=limit))
    except EstimateWindowInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except StoreReadError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc

    return {
        tier.value: AverageGasEstimateResponse(
            total_cost_per_gwei=avg.total_cost_per_gwei,
            total_wait_time_in_min=avg.total_wait_time_in_min,
            num_records=avg.num_records,
            avg_cost_per_gwei=avg.avg_cost_per_gwei,
            avg_wait_time_in_min=avg.avg_wait_time_in_min,
            label=avg.label,
            type=avg.type.value,
        )
        for tier, avg in averages.items()
    }
