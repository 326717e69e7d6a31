"""Outbound port for user-facing transient messages."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class NotificationLevel(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class NotificationSink(ABC):

    @abstractmethod
    def notify(self, level: NotificationLevel, message: str) -> None:
        """Surface ``message`` to the user. The core never reads a result."""
