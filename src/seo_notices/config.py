"""Configuration for SEO Notices"""

import os
from datetime import datetime, timezone

from dotenv import load_dotenv

load_dotenv()


def _parse_cutoff(value: str) -> datetime:
    """Parse an ISO date or datetime; naive values are taken as UTC."""
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class Config:
    """Environment driven settings"""

    # Base URL of the admin area; notice links are built relative to it
    ADMIN_URL = os.getenv("SEO_NOTICES_ADMIN_URL", "http://localhost/wp-admin/")

    # Installs first activated on/after this date already run the fixed code
    NEW_INSTALL_CUTOFF = _parse_cutoff(os.getenv("SEO_NOTICES_NEW_INSTALL_CUTOFF", "2018-07-24"))

    REQUIRED_CAPABILITY = os.getenv("SEO_NOTICES_REQUIRED_CAPABILITY", "wpseo_manage_options")

    DEBUG = os.getenv("SEO_NOTICES_DEBUG", "false").lower() == "true"


config = Config()
