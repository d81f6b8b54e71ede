from __future__ import annotations

from gasstation.domain.exceptions import EstimateWindowInputError


def resolve_window_limit(*, limit: int | None, default_limit: int, max_limit: int) -> int:
    if limit is None:
        return default_limit
    if limit <= 0:
        raise EstimateWindowInputError("limit must be a positive integer.")
    if limit > max_limit:
        raise EstimateWindowInputError(f"limit must be at most {max_limit}.")
    return limit
