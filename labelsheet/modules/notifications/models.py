"""Domain models for transient user notifications."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NotificationKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class Notification:
    text: str
    kind: NotificationKind
    expires_at: float
