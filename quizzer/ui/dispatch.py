"""Delivers background-thread callbacks onto the Qt event loop."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QObject, Qt, Signal, Slot


class QtDispatcher(QObject):
    """Runs callables on the thread that owns this object.

    Pass an instance as the ``dispatcher`` of a ``CountdownTimer`` so tick and
    expiry callbacks touch widgets only from the GUI thread.
    """

    _dispatched = Signal(object)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._dispatched.connect(self._run, Qt.QueuedConnection)

    def __call__(self, callback: Callable[[], None]) -> None:
        self._dispatched.emit(callback)

    @Slot(object)
    def _run(self, callback: Callable[[], None]) -> None:
        callback()
