"""Core configuration model (structured view)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class AppConfig:
    admin_url: str = "http://localhost/wp-admin/"
    new_install_cutoff: datetime = datetime(2018, 7, 24, tzinfo=timezone.utc)
    required_capability: str = "wpseo_manage_options"
    debug: bool = False

    @property
    def new_install_cutoff_timestamp(self) -> int:
        return int(self.new_install_cutoff.timestamp())
