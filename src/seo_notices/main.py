#!/usr/bin/env python3
"""SEO Notices: admin notices and settings error reporting for an SEO toolkit"""

import argparse
import logging
import sys

from .adapters.config_env import load_app_config
from .adapters.formatting import GettextFormatter
from .adapters.json_store import JsonFileError, JsonSiteStore, load_settings_errors
from .core.archive_notice import DISMISS_QUERY_PARAM, NOTIFICATION_IDENTIFIER, ArchiveNoticeRule
from .core.notification import Show
from .core.settings_errors import (
    add_admin_document_title_errors,
    render_settings_errors,
    settings_error_announcement,
)

ERROR_PREFIX = "Error: %s"
SUCCESS_PREFIX = "Success: %s"


def build_formatter(args) -> GettextFormatter:
    if args.localedir and args.locale:
        return GettextFormatter.for_locale(args.localedir, [args.locale])
    return GettextFormatter()


def build_rule(store: JsonSiteStore, app_config=None, formatter=None) -> ArchiveNoticeRule:
    return ArchiveNoticeRule(
        options=store.options,
        registry=store.registry,
        notifications=store.notifications,
        user_meta=store.user_meta,
        formatter=formatter or GettextFormatter(),
        config=app_config or load_app_config(),
    )


def _evaluate(args, app_config, formatter) -> int:
    store = JsonSiteStore(args.site)
    decision = build_rule(store, app_config, formatter).handle_notification(args.user)
    store.save()

    if isinstance(decision, Show):
        notification = decision.notification
        print(f"show {notification.id} ({notification.severity.value})")
        print(notification.body)
    else:
        print("hide")
    return 0


def _dismiss(args, app_config, formatter) -> int:
    store = JsonSiteStore(args.site)
    rule = build_rule(store, app_config, formatter)
    redirect = rule.handle_request({DISMISS_QUERY_PARAM: NOTIFICATION_IDENTIFIER}, args.user)
    store.save()
    print(f"redirect {redirect.url}")
    return 0


def _settings_errors(args, app_config, formatter) -> int:
    errors = load_settings_errors(args.errors)

    print(add_admin_document_title_errors(args.title, errors, formatter))
    markup = render_settings_errors(errors)
    if markup:
        print(markup)
    announcement = settings_error_announcement(
        errors, formatter.gettext(ERROR_PREFIX), formatter.gettext(SUCCESS_PREFIX)
    )
    if announcement:
        print(announcement)
    return 0


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="seo-notices", description="Admin notices for an SEO toolkit"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--localedir", help="Directory holding translation catalogs")
    parser.add_argument("--locale", help="Language to translate messages to (e.g. nl_NL)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, handler, help_text in (
        ("evaluate", _evaluate, "Show or hide the notice for a user"),
        ("dismiss", _dismiss, "Dismiss the notice for a user"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--site", required=True, help="Path to the JSON site snapshot")
        sub.add_argument("--user", required=True, help="Current user id")
        sub.set_defaults(handler=handler)

    sub = subparsers.add_parser(
        "settings-errors", help="Report settings errors for the admin document title"
    )
    sub.add_argument("--errors", required=True, help="Path to a JSON list of settings errors")
    sub.add_argument("--title", default="", help="Admin document title to prefix")
    sub.set_defaults(handler=_settings_errors)

    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    app_config = load_app_config()

    logging.basicConfig(
        level=logging.DEBUG if args.debug or app_config.debug else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        return args.handler(args, app_config, build_formatter(args))
    except JsonFileError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
