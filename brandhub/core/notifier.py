"""
Notifier
Transient status message shown after each mutation.

Only one notification is visible at a time: a new notify() replaces the
pending message and restarts the expiry delay (no queueing). Expiry is
evaluated against an injectable monotonic clock, so the message disappears
exactly `delay_seconds` after it was issued.
"""
import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_DELAY_SECONDS = 3.0


class NotificationLevel(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"


@dataclass(frozen=True)
class Notification:
    message: str
    level: NotificationLevel
    issued_at: float
    expires_at: float


class Notifier:
    def __init__(
        self,
        delay_seconds: float = DEFAULT_DELAY_SECONDS,
        clock: Callable[[], float] = time.monotonic
    ):
        if delay_seconds <= 0:
            raise ValueError("delay_seconds must be positive")
        self.delay_seconds = delay_seconds
        self._clock = clock
        self._current: Optional[Notification] = None

    def notify(
        self,
        message: str,
        level: NotificationLevel = NotificationLevel.SUCCESS
    ) -> Notification:
        """Show `message`, replacing whatever is currently visible"""
        now = self._clock()
        self._current = Notification(
            message=message,
            level=level,
            issued_at=now,
            expires_at=now + self.delay_seconds,
        )
        if level is NotificationLevel.WARNING:
            logger.warning(f"[NOTIFY] {message}")
        else:
            logger.info(f"[NOTIFY] {message}")
        return self._current

    def warn(self, message: str) -> Notification:
        return self.notify(message, NotificationLevel.WARNING)

    def current(self) -> Optional[Notification]:
        """The visible notification, or None once it has expired"""
        if self._current is not None and self._clock() >= self._current.expires_at:
            self._current = None
        return self._current

    def clear(self):
        self._current = None

    def time_left(self) -> float:
        """Seconds until the visible notification clears, 0 if none"""
        current = self.current()
        if current is None:
            return 0.0
        return max(0.0, current.expires_at - self._clock())
