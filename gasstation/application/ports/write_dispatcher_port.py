from __future__ import annotations

from collections.abc import Callable
from typing import Protocol


class WriteDispatcherPort(Protocol):
    def submit(self, write: Callable[[], None], *, description: str) -> None:
        ...
