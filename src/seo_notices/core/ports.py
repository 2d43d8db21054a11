"""Core ports (interfaces) for SEO Notices.

These protocols define the boundaries between the notice rules and the
CMS-specific storage behind them. They are intentionally small and
capability-oriented so the rules can be exercised without a CMS.
"""

from __future__ import annotations

from typing import Mapping, Protocol, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from .notification import Notification
    from .post_types import PostTypeDescriptor


@runtime_checkable
class OptionsStore(Protocol):
    """Site-wide plugin options."""

    def get(self, key: str):
        """Return the stored option value, or None when unset."""

    def get_title_defaults(self) -> Mapping[str, str]:
        """Return the shipped defaults of the title/metadesc template options."""


@runtime_checkable
class PostTypeRegistry(Protocol):
    """Registered content types."""

    def list_public_types(self) -> list["PostTypeDescriptor"]:
        """Return public post types, in registration order."""


@runtime_checkable
class NotificationCenter(Protocol):
    """Dashboard notifications keyed by id."""

    def get_by_id(self, notification_id: str) -> "Notification | None":
        """Return the notification with this id, if present."""

    def add(self, notification: "Notification") -> None:
        """Add the notification, replacing any existing one with the same id."""

    def remove(self, notification: "Notification") -> None:
        """Remove the notification; removing an absent one is a no-op."""


@runtime_checkable
class UserMetaStore(Protocol):
    """Per-user metadata."""

    def get(self, user_id, key: str) -> str | None:
        """Return the stored value, or None when unset."""

    def set(self, user_id, key: str, value: str) -> None:
        """Store the value."""


@runtime_checkable
class MessageFormatter(Protocol):
    """Translation/pluralization of user-facing strings."""

    def gettext(self, message: str) -> str:
        """Translate a message."""

    def ngettext(self, singular: str, plural: str, n: int) -> str:
        """Pick and translate the singular or plural form for n."""
