"""Post type archive notice.

Warns site owners whose post type archives use a custom slug that the
archive title/description templates may have been saved under the wrong
key by an earlier release, and keeps the notification center in sync with
that decision.
"""

from __future__ import annotations

import html
import logging
from urllib.parse import urlencode

from .config_model import AppConfig
from .notification import Decision, Hide, Notification, NotificationType, Redirect, Show
from .ports import MessageFormatter, NotificationCenter, OptionsStore, PostTypeRegistry, UserMetaStore
from .post_types import EvaluationCache

logger = logging.getLogger(__name__)

NOTIFICATION_IDENTIFIER = "post-type-archive-notification"
NOTIFICATION_ID = "wpseo-" + NOTIFICATION_IDENTIFIER
DISMISSED_META_KEY = "wpseo-remove-" + NOTIFICATION_IDENTIFIER
DISMISS_QUERY_PARAM = "yoast_dismiss"
DASHBOARD_PAGE = "wpseo_dashboard"

INTRO_MESSAGE = (
    "We've recently improved the functionality of the Search Appearance settings. "
    "Unfortunately, we've discovered that for some edge-cases, saving the settings "
    "for specific post type archives might have gone wrong."
)
CHECK_MESSAGE_SINGULAR = (
    "Please check the %(link_start)sarchive template%(link_end)s "
    "for the following content type: %(post_types)s"
)
CHECK_MESSAGE_PLURAL = (
    "Please check the %(link_start)sarchive templates%(link_end)s "
    "for the following content types: %(post_types)s"
)
DISMISS_MESSAGE = "%(link_start)sRemove this message%(link_end)s"


def admin_url(config: AppConfig, path: str = "") -> str:
    return config.admin_url.rstrip("/") + "/" + path.lstrip("/")


class ArchiveNoticeRule:
    """Decides whether the post type archive notice applies to a user."""

    def __init__(
        self,
        options: OptionsStore,
        registry: PostTypeRegistry,
        notifications: NotificationCenter,
        user_meta: UserMetaStore,
        formatter: MessageFormatter,
        config: AppConfig | None = None,
    ):
        self._options = options
        self._registry = registry
        self._notifications = notifications
        self._user_meta = user_meta
        self._formatter = formatter
        self._config = config or AppConfig()

    def handle_request(self, params: dict, user_id) -> Redirect | None:
        """Handle the dismiss trigger carried in the request query parameters.

        Returns a Redirect to the dashboard when the request dismissed the
        notice; the caller must send it and stop processing the request.
        """
        if params.get(DISMISS_QUERY_PARAM) != NOTIFICATION_IDENTIFIER:
            return None

        self.dismiss(user_id)
        return Redirect(url=admin_url(self._config, "admin.php?page=" + DASHBOARD_PAGE))

    def handle_notification(self, user_id) -> Decision:
        """Evaluate the rule and add or remove the notification accordingly."""
        decision = self.evaluate(user_id)

        if isinstance(decision, Show):
            self._notifications.add(decision.notification)
            return decision

        existing = self._notifications.get_by_id(NOTIFICATION_ID)
        if existing is not None:
            logger.debug("Removing %s", NOTIFICATION_ID)
            self._notifications.remove(existing)
        return decision

    def evaluate(self, user_id) -> Decision:
        if self.is_dismissed(user_id):
            logger.debug("%s dismissed by user %s", NOTIFICATION_ID, user_id)
            return Hide()

        if self.is_new_install():
            logger.debug("Install is newer than the archive settings fix")
            return Hide()

        cache = EvaluationCache(self._options, self._registry)
        post_types = cache.affected_types
        if not post_types:
            return Hide()

        logger.debug("Post types with possibly wrong archive settings: %s", post_types)
        return Show(self.build_notification(post_types))

    def is_dismissed(self, user_id) -> bool:
        return self._user_meta.get(user_id, DISMISSED_META_KEY) == "1"

    def dismiss(self, user_id) -> None:
        self._user_meta.set(user_id, DISMISSED_META_KEY, "1")

    def is_new_install(self) -> bool:
        """True when the plugin was first activated on or after the cutoff date."""
        first_activated_on = self._options.get("first_activated_on")
        try:
            activated_at = float(first_activated_on)
        except (TypeError, ValueError):
            # Unknown activation date: assume the install predates the fix.
            return False
        return activated_at >= self._config.new_install_cutoff_timestamp

    def build_notification(self, post_types: list[str]) -> Notification:
        fmt = self._formatter
        titles_url = admin_url(self._config, "admin.php?page=wpseo_titles#top#post-types")
        dismiss_url = admin_url(
            self._config,
            "?" + urlencode({"page": DASHBOARD_PAGE, DISMISS_QUERY_PARAM: NOTIFICATION_IDENTIFIER}),
        )

        message = html.escape(fmt.gettext(INTRO_MESSAGE))
        message += "\n\n"
        message += fmt.ngettext(CHECK_MESSAGE_SINGULAR, CHECK_MESSAGE_PLURAL, len(post_types)) % {
            "link_start": '<a href="%s">' % html.escape(titles_url),
            "link_end": "</a>",
            "post_types": html.escape(", ".join(post_types)),
        }
        message += "\n\n"
        message += fmt.gettext(DISMISS_MESSAGE) % {
            "link_start": '<a class="button" href="%s">' % html.escape(dismiss_url),
            "link_end": "</a>",
        }

        return Notification(
            id=NOTIFICATION_ID,
            body=message,
            severity=NotificationType.WARNING,
            required_capability=self._config.required_capability,
            priority=1.0,
        )
