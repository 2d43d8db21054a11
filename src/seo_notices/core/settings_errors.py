"""Settings errors raised while saving the plugin's admin forms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

from .ports import MessageFormatter

PLUGIN_SETTING_PREFIX = "yoast"
SETTINGS_UPDATED_CODE = "settings_updated"

TITLE_ERRORS_SINGULAR = "The form contains %(count)s error. %(title)s"
TITLE_ERRORS_PLURAL = "The form contains %(count)s errors. %(title)s"


@dataclass(frozen=True)
class SettingsError:
    """A settings error record as produced by the admin settings API.

    Attributes:
        setting: Settings group the error belongs to
        code: Error code; "settings_updated" marks the success message
        message: Human-readable message
        type: Notice class ("error", "updated", ...)
    """

    setting: str
    code: str
    message: str
    type: str = "error"

    @classmethod
    def from_dict(cls, data: Mapping) -> "SettingsError":
        return cls(
            setting=data.get("setting", ""),
            code=data.get("code", ""),
            message=data.get("message", ""),
            type=data.get("type", "error"),
        )


def count_plugin_errors(
    errors: Iterable[SettingsError], prefix: str = PLUGIN_SETTING_PREFIX
) -> int:
    """Count errors that belong to the plugin's settings, ignoring success messages."""
    return sum(
        1
        for error in errors
        if error.setting.startswith(prefix) and error.code != SETTINGS_UPDATED_CODE
    )


def add_admin_document_title_errors(
    admin_title: str, errors: Iterable[SettingsError], formatter: MessageFormatter
) -> str:
    """Prefix the admin document title with the number of form errors, if any."""
    count = count_plugin_errors(errors)
    if count == 0:
        return admin_title

    template = formatter.ngettext(TITLE_ERRORS_SINGULAR, TITLE_ERRORS_PLURAL, count)
    return template % {"count": count, "title": admin_title}


def render_settings_errors(errors: Iterable[SettingsError]) -> str:
    """Render errors as admin notice markup, one notice per error."""
    return "".join(
        "<div class='%s notice'><p>%s</p></div>" % (error.type, error.message)
        for error in errors
    )


def settings_error_announcement(
    errors: list[SettingsError], error_prefix: str, success_prefix: str
) -> str | None:
    """Screen reader announcement for the first error; None when there are none."""
    if not errors:
        return None

    first = errors[0]
    prefix = success_prefix if first.type == "updated" else error_prefix
    return prefix.replace("%s", first.message, 1)
