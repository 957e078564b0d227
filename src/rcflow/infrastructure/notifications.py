"""
Notifier adapters.

LoggingNotifier is the default sink; InMemoryNotifier collects notifications
for tests and for callers that render them later.
"""

import logging

from rcflow.domain.interfaces import NotifierInterface
from rcflow.domain.models import Notification, NotificationLevel


class LoggingNotifier(NotifierInterface):
    """Writes notifications to a logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("rcflow.notifications")

    def notify(self, notification: Notification) -> None:
        level = (
            logging.ERROR
            if notification.level == NotificationLevel.ERROR
            else logging.INFO
        )
        self._logger.log(level, "%s: %s", notification.title, notification.description)


class InMemoryNotifier(NotifierInterface):
    """Keeps every notification in order."""

    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    @property
    def errors(self) -> list[Notification]:
        return [n for n in self.notifications if n.level == NotificationLevel.ERROR]
