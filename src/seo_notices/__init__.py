"""SEO Notices - admin dashboard notice rules for an SEO toolkit"""

__version__ = "1.0.0"
__description__ = "Admin dashboard notice rules for an SEO toolkit"

__all__ = ["main", "ArchiveNoticeRule", "__version__"]


def __getattr__(name: str):
    """Lazy import so that importing seo_notices.config does not pull in the CLI."""
    if name == "ArchiveNoticeRule":
        from .core.archive_notice import ArchiveNoticeRule

        return ArchiveNoticeRule
    if name == "main":
        from .main import main

        return main
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
