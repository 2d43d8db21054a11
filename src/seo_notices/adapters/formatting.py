"""Message formatter adapter backed by gettext translations."""

from __future__ import annotations

import gettext

TEXT_DOMAIN = "wordpress-seo"


class GettextFormatter:
    def __init__(self, translations: gettext.NullTranslations | None = None):
        self._translations = translations or gettext.NullTranslations()

    @classmethod
    def for_locale(cls, localedir: str, languages: list[str]) -> "GettextFormatter":
        """Load the plugin catalog, falling back to untranslated strings."""
        return cls(gettext.translation(TEXT_DOMAIN, localedir, languages, fallback=True))

    def gettext(self, message: str) -> str:
        return self._translations.gettext(message)

    def ngettext(self, singular: str, plural: str, n: int) -> str:
        return self._translations.ngettext(singular, plural, n)
