"""Output formatters."""
from .rss_out import RSSFormatter

__all__ = ["RSSFormatter"]
