"""Single source of truth for the current confidence threshold."""

import math
from typing import Callable, List

from ledger.logging_config import get_logger
from ledger.schemas.claim import to_percent

logger = get_logger(__name__)

Listener = Callable[[float], None]

DEFAULT_THRESHOLD = 0.70


class ThresholdController:
    """Holds the threshold and notifies listeners synchronously on change.

    Listeners run in registration order. One failing listener is logged and
    does not stop the rest (the list must still refilter if the funnel
    update blows up, and vice versa).
    """

    def __init__(self, initial: float = DEFAULT_THRESHOLD):
        self._value = self._validate(initial)
        self._listeners: List[Listener] = []

    @property
    def value(self) -> float:
        return self._value

    @property
    def percent(self) -> int:
        return to_percent(self._value)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set(self, value: float) -> float:
        """Update the threshold and notify every listener.

        Raises:
            ValueError: if ``value`` is not a real number in [0, 1].
        """
        self._value = self._validate(value)
        logger.debug("threshold_changed", threshold=self._value, listeners=len(self._listeners))
        for listener in list(self._listeners):
            try:
                listener(self._value)
            except Exception:
                logger.exception("threshold_listener_failed", threshold=self._value)
        return self._value

    def set_percent(self, percent: int) -> float:
        """Slider entry point: integer percentage 0-100."""
        percent = int(percent)
        if not 0 <= percent <= 100:
            raise ValueError(f"Threshold percent must be within [0, 100], got {percent}")
        return self.set(percent / 100)

    @staticmethod
    def _validate(value: float) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"Threshold must be a real number, got {value!r}")
        if math.isnan(value) or not 0.0 <= value <= 1.0:
            raise ValueError(f"Threshold must be within [0, 1], got {value!r}")
        return float(value)
