from datetime import datetime, timezone

from seo_notices.adapters.config_env import load_app_config
from seo_notices.config import _parse_cutoff


class _Source:
    ADMIN_URL = "https://example.com/wp-admin/"
    NEW_INSTALL_CUTOFF = datetime(2019, 1, 1, tzinfo=timezone.utc)
    REQUIRED_CAPABILITY = "manage_options"
    DEBUG = True


def test_parse_cutoff_defaults_to_utc():
    assert _parse_cutoff("2018-07-24") == datetime(2018, 7, 24, tzinfo=timezone.utc)
    assert _parse_cutoff("2018-07-24").timestamp() == 1532390400


def test_parse_cutoff_keeps_explicit_offset():
    assert _parse_cutoff("2018-07-24T00:00:00+02:00").utcoffset().total_seconds() == 7200


def test_load_app_config_from_source():
    app_config = load_app_config(_Source())

    assert app_config.admin_url == "https://example.com/wp-admin/"
    assert app_config.new_install_cutoff_timestamp == int(_Source.NEW_INSTALL_CUTOFF.timestamp())
    assert app_config.required_capability == "manage_options"
    assert app_config.debug is True


def test_parse_cutoff_accepts_zulu_suffix():
    assert _parse_cutoff("2018-07-24T00:00:00Z") == datetime(2018, 7, 24, tzinfo=timezone.utc)
