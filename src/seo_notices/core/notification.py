"""Notification value types shared by the notice rules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NotificationType(Enum):
    """Severity of a dashboard notification.

    Values double as the CSS class the dashboard renders the notice with.
    """

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    UPDATED = "updated"


@dataclass(frozen=True)
class Notification:
    """A dismissible dashboard message identified by a stable id."""

    id: str
    body: str
    severity: NotificationType = NotificationType.WARNING
    required_capability: str = "wpseo_manage_options"
    priority: float = 0.5


@dataclass(frozen=True)
class Show:
    notification: Notification


@dataclass(frozen=True)
class Hide:
    pass


Decision = Show | Hide


@dataclass(frozen=True)
class Redirect:
    """Terminal response: the caller must send it and stop handling the request."""

    url: str
