from __future__ import annotations

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Float, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from gasstation.infrastructure.db.engine import Base


class GasEstimateModel(Base):
    __tablename__ = "gas_estimates"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    type: Mapped[str] = mapped_column(Text, nullable=False)
    cost_per_gwei: Mapped[float] = mapped_column(Float, nullable=False)
    wait_time_in_min: Mapped[float] = mapped_column(Float, nullable=False)
    block_num: Mapped[int] = mapped_column(BigInteger, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
