"""
Per-keystroke trigger controller.

Decides, as the user types, whether suggestions should be showing. The
active ``AutosuggestConfig`` picks the mode:

* ``disabled``: never visible.
* ``continuous``: visible on every keystroke once the minimum length is met.
* ``interval``: visible when the minimum is first met, then each time
  ``trigger_every_n_chars`` more characters have been typed.
* ``pause``: every keystroke restarts a ``pause_threshold_ms``
  countdown; suggestions appear only when it elapses without input.

Input shorter than the minimum hides suggestions and cancels any pending
countdown.

State changes are serialized by a lock, so a wall-clock scheduler may
fire the countdown on its own thread while keystrokes arrive on another.
A countdown cancelled after it already started firing is ignored.
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Callable, Optional

from copilotsuggest.autosuggest.models import AutosuggestConfig, TriggerMode
from copilotsuggest.trigger.scheduler import Scheduler, TimerHandle, cancel

logger = logging.getLogger(__name__)


class TriggerState(str, Enum):
    IDLE = "idle"
    ARMED = "armed"
    VISIBLE = "visible"


class PauseTimerState(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    FIRED = "fired"


StateListener = Callable[["TriggerState"], None]


class TriggerController:
    """Stateful show/hide decision for one input box."""

    def __init__(
        self,
        config: AutosuggestConfig,
        scheduler: Scheduler,
        on_change: Optional[StateListener] = None,
    ) -> None:
        self._config = config
        self._scheduler = scheduler
        self._on_change = on_change
        self._state = TriggerState.IDLE
        self._text = ""
        self._last_trigger_length = 0
        self._trigger_count = 0
        self._pause_timer: Optional[TimerHandle] = None
        self._pause_state = PauseTimerState.IDLE
        self._pause_generation = 0
        self._lock = threading.RLock()

    @property
    def state(self) -> TriggerState:
        return self._state

    @property
    def pause_state(self) -> PauseTimerState:
        return self._pause_state

    @property
    def trigger_count(self) -> int:
        """How many times suggestions were (re)requested for display."""
        return self._trigger_count

    @property
    def is_visible(self) -> bool:
        return self._state is TriggerState.VISIBLE

    @property
    def config(self) -> AutosuggestConfig:
        return self._config

    def set_config(self, config: AutosuggestConfig) -> None:
        """Switch users/policies; the controller starts over."""
        with self._lock:
            self._config = config
            self.reset()

    def reset(self) -> None:
        """Input hidden or cleared externally: hide and forget progress."""
        with self._lock:
            self._cancel_pause()
            self._last_trigger_length = 0
            self._text = ""
            self._set_state(TriggerState.IDLE)

    def on_input(self, text: str) -> TriggerState:
        """Feed the full current input text after a keystroke."""
        with self._lock:
            return self._on_input(text)

    # ----- internals -----

    def _on_input(self, text: str) -> TriggerState:
        self._text = text
        length = len(text.strip())
        self._cancel_pause()

        if length == 0:
            self._last_trigger_length = 0
            self._set_state(TriggerState.IDLE)
            return self._state

        if length < self._config.min_prefix_length:
            self._set_state(TriggerState.IDLE)
            return self._state

        mode = self._config.trigger_mode
        if mode is TriggerMode.DISABLED:
            self._set_state(TriggerState.IDLE)

        elif mode is TriggerMode.CONTINUOUS:
            self._trigger(length)

        elif mode is TriggerMode.INTERVAL:
            first = self._last_trigger_length == 0
            typed_since = length - self._last_trigger_length
            if first or typed_since >= self._config.trigger_every_n_chars:
                self._trigger(length)
            elif self._state is TriggerState.IDLE:
                self._set_state(TriggerState.ARMED)

        elif mode is TriggerMode.PAUSE:
            if self._state is TriggerState.IDLE:
                self._set_state(TriggerState.ARMED)
            self._pause_state = PauseTimerState.PENDING
            generation = self._pause_generation
            self._pause_timer = self._scheduler.call_later(
                self._config.pause_threshold_ms, lambda: self._on_pause_elapsed(generation),
            )

        return self._state

    def _on_pause_elapsed(self, generation: int) -> None:
        with self._lock:
            if generation != self._pause_generation:
                return
            self._pause_timer = None
            self._pause_state = PauseTimerState.FIRED
            length = len(self._text.strip())
            if length >= self._config.min_prefix_length:
                self._trigger(length)

    def _trigger(self, length: int) -> None:
        self._last_trigger_length = length
        self._trigger_count += 1
        self._set_state(TriggerState.VISIBLE)

    def _cancel_pause(self) -> None:
        cancel(self._pause_timer)
        self._pause_timer = None
        self._pause_generation += 1
        self._pause_state = PauseTimerState.IDLE

    def _set_state(self, state: TriggerState) -> None:
        if state is self._state:
            return
        logger.debug("Trigger %s -> %s (mode=%s)", self._state.value, state.value, self._config.trigger_mode.value)
        self._state = state
        if self._on_change is not None:
            self._on_change(state)
