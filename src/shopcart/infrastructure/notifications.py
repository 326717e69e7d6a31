"""NotificationSink implementations."""

from __future__ import annotations

import logging

import click

from shopcart.domain.gateway.notification_sink import NotificationLevel, NotificationSink

_LOG_LEVELS = {
    NotificationLevel.INFO: logging.INFO,
    NotificationLevel.WARNING: logging.WARNING,
    NotificationLevel.ERROR: logging.ERROR,
}

_COLORS = {
    NotificationLevel.INFO: "blue",
    NotificationLevel.WARNING: "yellow",
    NotificationLevel.ERROR: "red",
}


class LoggingNotificationSink(NotificationSink):
    """Send notifications to a logger, for headless use."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("shopcart.notifications")

    def notify(self, level: NotificationLevel, message: str) -> None:
        self._logger.log(_LOG_LEVELS[level], message)


class ConsoleNotificationSink(NotificationSink):
    """Print notifications to stderr, coloured by level."""

    def notify(self, level: NotificationLevel, message: str) -> None:
        click.secho(f"[{level.value}] {message}", fg=_COLORS[level], err=True)
