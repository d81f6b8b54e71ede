from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""


class UpstreamUnavailableError(DomainError):
    """Gas oracle could not be reached or answered with a non-success status."""


class MalformedResponseError(DomainError):
    """Gas oracle body is not a JSON object."""


class InvalidSnapshotError(DomainError):
    """Gas oracle snapshot failed field or divisor validation."""


class StoreWriteError(DomainError):
    """Appending an estimate to the store failed."""


class StoreReadError(DomainError):
    """Reading the estimates window from the store failed."""


class EstimateWindowInputError(DomainError):
    """Invalid window size for an estimates query."""
