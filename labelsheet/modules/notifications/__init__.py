"""Public exports for user notifications."""

from .models import Notification, NotificationKind
from .service import Notifier

__all__ = [
    "Notification",
    "NotificationKind",
    "Notifier",
]
