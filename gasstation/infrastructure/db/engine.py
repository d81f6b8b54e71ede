from __future__ import annotations

from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


@lru_cache(maxsize=4)
def get_engine(dsn: str):
    connect_args = {"check_same_thread": False} if dsn.startswith("sqlite") else {}
    return create_engine(dsn, future=True, pool_pre_ping=True, connect_args=connect_args)


def create_schema(engine) -> None:
    from gasstation.infrastructure.db.models import gas_estimate  # noqa: F401

    Base.metadata.create_all(engine)
