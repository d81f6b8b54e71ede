from __future__ import annotations

import logging
from threading import Lock

import pytest

from gasstation.infrastructure.background.write_dispatcher import BackgroundWriteDispatcher


def test_dispatcher_runs_every_submitted_write():
    dispatcher = BackgroundWriteDispatcher(max_workers=4)
    lock = Lock()
    written: list[int] = []

    def make_write(value: int):
        def _write() -> None:
            with lock:
                written.append(value)

        return _write

    for value in range(8):
        dispatcher.submit(make_write(value), description=f"write {value}")
    dispatcher.shutdown(wait=True)

    assert sorted(written) == list(range(8))
    assert dispatcher.pending_count() == 0


def test_dispatcher_logs_failed_writes_without_raising(caplog: pytest.LogCaptureFixture):
    dispatcher = BackgroundWriteDispatcher(max_workers=1)

    def failing_write() -> None:
        raise RuntimeError("disk full")

    with caplog.at_level(logging.ERROR, logger="gasstation"):
        dispatcher.submit(failing_write, description="append Fastest block=1")
        dispatcher.shutdown(wait=True)

    assert any(
        "write_failed" in record.getMessage() and "append Fastest block=1" in record.getMessage()
        for record in caplog.records
    )


def test_dispatcher_requires_workers():
    with pytest.raises(ValueError):
        BackgroundWriteDispatcher(max_workers=0)
