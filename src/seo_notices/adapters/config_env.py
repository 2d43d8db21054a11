"""Env configuration adapter producing a structured AppConfig."""

from __future__ import annotations

from ..config import config as env_config
from ..core.config_model import AppConfig


def load_app_config(source=None) -> AppConfig:
    source = source or env_config
    return AppConfig(
        admin_url=source.ADMIN_URL,
        new_install_cutoff=source.NEW_INSTALL_CUTOFF,
        required_capability=source.REQUIRED_CAPABILITY,
        debug=source.DEBUG,
    )
