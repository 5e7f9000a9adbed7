"""Cancellable countdown used to bound the time allowed per question."""

from __future__ import annotations

from enum import Enum, auto
from functools import partial
import logging
from threading import Event, Lock, RLock, Thread, current_thread
from typing import Callable

from quizzer.constants.quiz_constants import MIN_TIMER_DURATION_MS

logger = logging.getLogger(__name__)

Dispatcher = Callable[[Callable[[], None]], None]


class TimerState(Enum):
    """Lifecycle of a single countdown run."""

    IDLE = auto()
    RUNNING = auto()
    CANCELLED = auto()
    EXPIRED = auto()


class _CountdownRun:
    """State for one start/restart cycle.

    ``state`` leaves RUNNING exactly once, either to CANCELLED or EXPIRED.
    """

    def __init__(self) -> None:
        self.stop_event = Event()
        self.lock = RLock()
        self.state = TimerState.RUNNING


def _call_directly(callback: Callable[[], None]) -> None:
    callback()


class CountdownTimer:
    """Counts down from a fixed duration on a background thread.

    ``on_tick`` receives the remaining milliseconds after every elapsed tick
    interval and ``on_expire`` is called once the countdown reaches zero.
    Callbacks are handed to ``dispatcher``, which may forward them to another
    thread (a GUI event loop for example). Without a dispatcher they run on
    the timer thread. A callback delivered after ``cancel`` is dropped.
    """

    def __init__(
        self,
        total_duration_ms: int,
        on_tick: Callable[[int], None],
        on_expire: Callable[[], None],
        tick_interval_ms: int = 1,
        dispatcher: Dispatcher | None = None,
    ) -> None:
        if total_duration_ms < MIN_TIMER_DURATION_MS:
            raise ValueError(
                f"A timer must run for at least {MIN_TIMER_DURATION_MS} millisecond(s)."
            )
        if tick_interval_ms < 1:
            raise ValueError("Tick interval must be at least 1 millisecond.")

        self._total_duration_ms = total_duration_ms
        self._tick_interval_ms = tick_interval_ms
        self._on_tick = on_tick
        self._on_expire = on_expire
        self._dispatcher: Dispatcher = dispatcher or _call_directly

        self._lock = Lock()
        self._run: _CountdownRun | None = None
        self._thread: Thread | None = None
        self._remaining_ms: int = total_duration_ms

    @property
    def total_duration_ms(self) -> int:
        return self._total_duration_ms

    @property
    def remaining_ms(self) -> int:
        return self._remaining_ms

    @property
    def state(self) -> TimerState:
        run = self._run
        return run.state if run is not None else TimerState.IDLE

    def is_running(self) -> bool:
        return self.state is TimerState.RUNNING

    def start(self) -> None:
        """Begin counting down. A countdown already in progress is replaced."""
        self.restart()

    def restart(self) -> None:
        """Cancel any countdown in progress and count down again from the start."""
        run = _CountdownRun()
        with self._lock:
            previous = self._run
            self._run = run
            self._remaining_ms = self._total_duration_ms
            self._thread = Thread(
                target=self._count_down,
                args=(run,),
                name="countdown-timer",
                daemon=True,
            )
            thread = self._thread
        if previous is not None:
            self._cancel_run(previous)
        logger.debug("Countdown started for %d ms", self._total_duration_ms)
        thread.start()

    def cancel(self) -> None:
        """Stop the countdown. Does nothing when no countdown is running."""
        with self._lock:
            run = self._run
        if run is not None:
            self._cancel_run(run)

    def join(self, timeout: float | None = None) -> None:
        """Wait for the current countdown thread to finish."""
        thread = self._thread
        if thread is not None and thread is not current_thread():
            thread.join(timeout)

    def _cancel_run(self, run: _CountdownRun) -> None:
        run.stop_event.set()
        with run.lock:
            if run.state is TimerState.RUNNING:
                run.state = TimerState.CANCELLED
                logger.debug("Countdown cancelled with %d ms remaining", self._remaining_ms)

    def _count_down(self, run: _CountdownRun) -> None:
        remaining_ms = self._total_duration_ms
        interval_seconds = self._tick_interval_ms / 1000
        while remaining_ms > 0:
            if run.stop_event.wait(interval_seconds):
                return
            remaining_ms = max(0, remaining_ms - self._tick_interval_ms)
            if self._run is run:
                self._remaining_ms = remaining_ms
            self._dispatcher(partial(self._deliver_tick, run, remaining_ms))
        self._dispatcher(partial(self._deliver_expiry, run))

    def _deliver_tick(self, run: _CountdownRun, remaining_ms: int) -> None:
        with run.lock:
            if run.state is not TimerState.RUNNING:
                return
            self._on_tick(remaining_ms)

    def _deliver_expiry(self, run: _CountdownRun) -> None:
        with run.lock:
            if run.state is not TimerState.RUNNING:
                return
            run.state = TimerState.EXPIRED
        logger.debug("Countdown expired")
        self._on_expire()
