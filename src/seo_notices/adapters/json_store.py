"""JSON site snapshot adapter.

Also reads the settings errors list rendered by the settings-errors command.

A snapshot file holds everything the notice rules read from a site:

    {
        "options": {"first_activated_on": 1500000000, "title-ptarchive-book": "..."},
        "title_defaults": {"title-ptarchive-book": "..."},
        "post_types": [{"name": "book", "has_archive": "books"}],
        "notifications": [{"id": "...", "body": "...", "severity": "warning"}],
        "user_meta": {"1": {"wpseo-remove-post-type-archive-notification": "1"}}
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from ..core.notification import Notification, NotificationType
from ..core.post_types import PostTypeDescriptor
from ..core.settings_errors import SettingsError
from .memory import (
    InMemoryNotificationCenter,
    InMemoryOptionsStore,
    InMemoryUserMetaStore,
    StaticPostTypeRegistry,
)

logger = logging.getLogger(__name__)


class JsonFileError(Exception):
    """A JSON input file cannot be read or is malformed."""


class SiteSnapshotError(JsonFileError):
    """The site snapshot file cannot be read or is malformed."""


class SettingsErrorsFileError(JsonFileError):
    """The settings errors file cannot be read or is malformed."""


def _read_json(path: Path, error_cls: type[JsonFileError], what: str):
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise error_cls(f"Cannot read {what} {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise error_cls(f"Invalid JSON in {what} {path}: {e}") from e


def load_settings_errors(path: str | Path) -> list[SettingsError]:
    """Read a JSON list of settings error records."""
    path = Path(path)
    data = _read_json(path, SettingsErrorsFileError, "settings errors file")
    if not isinstance(data, list):
        raise SettingsErrorsFileError(f"Settings errors file {path} must be a JSON list")
    try:
        return [SettingsError.from_dict(item) for item in data]
    except AttributeError as e:
        raise SettingsErrorsFileError(f"Malformed settings errors file {path}: {e}") from e


class JsonSiteStore:
    """Loads a site snapshot into in-memory collaborators and writes it back."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        data = self._read()

        try:
            self.options = InMemoryOptionsStore(
                data.get("options", {}), data.get("title_defaults", {})
            )
            self.registry = StaticPostTypeRegistry(
                [
                    PostTypeDescriptor.from_registration(item["name"], item.get("has_archive", False))
                    for item in data.get("post_types", [])
                ]
            )
            self.notifications = InMemoryNotificationCenter()
            for item in data.get("notifications", []):
                self.notifications.add(_notification_from_dict(item))
            self.user_meta = InMemoryUserMetaStore()
            for user_id, meta in data.get("user_meta", {}).items():
                for key, value in meta.items():
                    self.user_meta.set(user_id, key, _meta_value(value))
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise SiteSnapshotError(f"Malformed site snapshot {self.path}: {e}") from e

        self._post_types = data.get("post_types", [])

    def _read(self) -> dict:
        data = _read_json(self.path, SiteSnapshotError, "site snapshot")
        if not isinstance(data, dict):
            raise SiteSnapshotError(f"Site snapshot {self.path} must be a JSON object")
        return data

    def save(self) -> None:
        data = {
            "options": self.options.values,
            "title_defaults": self.options.title_defaults,
            "post_types": self._post_types,
            "notifications": [_notification_to_dict(n) for n in self.notifications.all()],
            "user_meta": self.user_meta.as_dict(),
        }
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            tmp_path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
            tmp_path.replace(self.path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            raise SiteSnapshotError(f"Cannot write site snapshot {self.path}: {e}") from e
        logger.debug("Saved site snapshot to %s", self.path)


def _meta_value(value) -> str:
    # Booleans are stored the way the CMS stores them: "1" or "".
    if isinstance(value, bool):
        return "1" if value else ""
    return str(value)


def _notification_from_dict(item: dict) -> Notification:
    return Notification(
        id=item["id"],
        body=item.get("body", ""),
        severity=NotificationType(item.get("severity", NotificationType.WARNING.value)),
        required_capability=item.get("required_capability", "wpseo_manage_options"),
        priority=float(item.get("priority", 0.5)),
    )


def _notification_to_dict(notification: Notification) -> dict:
    return {
        "id": notification.id,
        "body": notification.body,
        "severity": notification.severity.value,
        "required_capability": notification.required_capability,
        "priority": notification.priority,
    }
