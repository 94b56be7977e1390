"""Cursor blink state machine driven by the cursor's blink timings."""

from __future__ import annotations

import copy
import enum
import time
from typing import Any, Callable, Optional


class BlinkState(enum.Enum):
    WAITING = "waiting"
    ON = "on"
    OFF = "off"


_NEXT_STATE = {
    BlinkState.WAITING: BlinkState.ON,
    BlinkState.ON: BlinkState.OFF,
    BlinkState.OFF: BlinkState.ON,
}


class BlinkStatus:
    """Decides whether the cursor is visible, given blinkwait/blinkon/blinkoff in ms.

    ``clock`` returns the current time in seconds; ``schedule``, when given, is
    called with the time at which the next blink transition is due.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        schedule: Optional[Callable[[float], None]] = None,
    ) -> None:
        self._clock = clock
        self._schedule = schedule
        self.state = BlinkState.WAITING
        self.last_transition = clock()
        self._previous_cursor: Any = None

    def _delay_ms(self, cursor: Any) -> Optional[int]:
        if self.state is BlinkState.WAITING:
            return cursor.blinkwait
        if self.state is BlinkState.OFF:
            return cursor.blinkoff
        return cursor.blinkon

    def update_status(self, cursor: Any) -> bool:
        """Advance the blink state for ``cursor``; return whether it should be drawn."""
        if self._previous_cursor is None or cursor != self._previous_cursor:
            self._previous_cursor = copy.copy(cursor)
            self.last_transition = self._clock()
            if cursor.blinkwait is not None and cursor.blinkwait != 0:
                self.state = BlinkState.WAITING
            else:
                self.state = BlinkState.ON

        if 0 in (cursor.blinkwait, cursor.blinkoff, cursor.blinkon):
            return True

        delay = self._delay_ms(cursor)
        if (
            delay is not None
            and delay > 0
            and self.last_transition + delay / 1000.0 < self._clock()
        ):
            self.state = _NEXT_STATE[self.state]
            self.last_transition = self._clock()

        delay = self._delay_ms(cursor)
        if delay is not None and self._schedule is not None:
            self._schedule(self.last_transition + delay / 1000.0)

        return self.state is not BlinkState.OFF