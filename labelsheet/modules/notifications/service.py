"""Transient success/error messages with a fixed display duration."""

from __future__ import annotations

import time
from typing import Callable, Optional

from labelsheet.core.config import NotificationSettings

from .models import Notification, NotificationKind


class Notifier:
    """Holds at most one message, visible until ``display_seconds`` elapse.

    A newer message replaces the current one and restarts the timer.
    """

    def __init__(self, display_seconds: float = 3.0, *, clock: Callable[[], float] = time.monotonic) -> None:
        if display_seconds <= 0:
            raise ValueError("display_seconds must be positive")
        self.display_seconds = display_seconds
        self._clock = clock
        self._notification: Optional[Notification] = None

    @classmethod
    def from_settings(
        cls, settings: NotificationSettings, *, clock: Callable[[], float] = time.monotonic
    ) -> "Notifier":
        return cls(settings.display_seconds, clock=clock)

    def show(self, text: str, kind: NotificationKind = NotificationKind.SUCCESS) -> Notification:
        self._notification = Notification(
            text=text,
            kind=NotificationKind(kind),
            expires_at=self._clock() + self.display_seconds,
        )
        return self._notification

    @property
    def current(self) -> Optional[Notification]:
        notification = self._notification
        if notification is not None and self._clock() >= notification.expires_at:
            self._notification = None
            return None
        return notification

    def clear(self) -> None:
        self._notification = None
