"""In-memory collaborators for the notice rules."""

from __future__ import annotations

from typing import Mapping

from ..core.notification import Notification
from ..core.post_types import PostTypeDescriptor


class InMemoryOptionsStore:
    def __init__(self, values: Mapping | None = None, title_defaults: Mapping[str, str] | None = None):
        self.values = dict(values or {})
        self.title_defaults = dict(title_defaults or {})

    def get(self, key: str):
        return self.values.get(key)

    def get_title_defaults(self) -> Mapping[str, str]:
        return self.title_defaults


class StaticPostTypeRegistry:
    def __init__(self, post_types: list[PostTypeDescriptor] | None = None):
        self.post_types = list(post_types or [])

    def list_public_types(self) -> list[PostTypeDescriptor]:
        return list(self.post_types)


class InMemoryNotificationCenter:
    """Notifications keyed by id, kept in insertion order."""

    def __init__(self):
        self._notifications: dict[str, Notification] = {}

    def get_by_id(self, notification_id: str) -> Notification | None:
        return self._notifications.get(notification_id)

    def add(self, notification: Notification) -> None:
        self._notifications[notification.id] = notification

    def remove(self, notification: Notification) -> None:
        self._notifications.pop(notification.id, None)

    def all(self) -> list[Notification]:
        return list(self._notifications.values())


class InMemoryUserMetaStore:
    def __init__(self):
        self._meta: dict[tuple[str, str], str] = {}

    def get(self, user_id, key: str) -> str | None:
        return self._meta.get((str(user_id), key))

    def set(self, user_id, key: str, value: str) -> None:
        self._meta[(str(user_id), key)] = value

    def as_dict(self) -> dict[str, dict[str, str]]:
        users: dict[str, dict[str, str]] = {}
        for (user_id, key), value in self._meta.items():
            users.setdefault(user_id, {})[key] = value
        return users
