from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GasEstimateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: str
    cost_per_gwei: float = Field(..., alias="costPerGwei")
    wait_time_in_min: float = Field(..., alias="waitTimeInMin")
    block_num: int = Field(..., alias="blockNum")
    created_at: int = Field(..., alias="createdAt", description="Ingestion time in epoch milliseconds.")


class AverageGasEstimateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_cost_per_gwei: float = Field(..., alias="totalCostPerGwei")
    total_wait_time_in_min: float = Field(..., alias="totalWaitTimeInMin")
    num_records: int = Field(..., alias="numRecords")
    avg_cost_per_gwei: str = Field(..., alias="avgCostPerGwei")
    avg_wait_time_in_min: str = Field(..., alias="avgWaitTimeInMin")
    label: str
    type: str


class IngestGasEstimatesResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: str = "ok"
    block_num: int = Field(..., alias="blockNum")
    records_submitted: int = Field(..., alias="recordsSubmitted")
