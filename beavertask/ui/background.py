from __future__ import annotations

import logging
from typing import Any, Callable

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal, Slot

logger = logging.getLogger(__name__)


class _JobSignals(QObject):
    finished = Signal(object, object)


class _Job(QRunnable):
    def __init__(self, work: Callable[[], Any], on_done: Callable[[Any], None], signals: _JobSignals):
        super().__init__()
        self._work = work
        self._on_done = on_done
        self.signals = signals

    def run(self) -> None:
        try:
            result = self._work()
        except Exception:  # noqa: BLE001
            logger.exception("Background job failed")
            result = None
        self.signals.finished.emit(self._on_done, result)


class BackgroundRunner(QObject):
    """Runs network work on the thread pool and calls back on the UI thread.

    Jobs are never cancelled and completions are delivered in the order they
    finish, not the order they were submitted.
    """

    def __init__(self, parent: QObject | None = None, pool: QThreadPool | None = None):
        super().__init__(parent)
        self._pool = pool or QThreadPool.globalInstance()
        self._pending: set[_JobSignals] = set()

    def submit(self, work: Callable[[], Any], on_done: Callable[[Any], None]) -> None:
        signals = _JobSignals()
        signals.finished.connect(self._deliver)
        self._pending.add(signals)
        job = _Job(work, on_done, signals)
        self._pool.start(job)

    @Slot(object, object)
    def _deliver(self, on_done: Callable[[Any], None], result: Any) -> None:
        sender = self.sender()
        if sender is not None:
            self._pending.discard(sender)
        on_done(result)
