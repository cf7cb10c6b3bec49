"""Public Python API for feedscraper — use as a library.

Quick start:

    from feedscraper.api import generate_rss_feed

    xml = generate_rss_feed([
        {
            "id": "tw-1",
            "url": "https://x.com/someone/status/1",
            "author": "someone",
            "source": "twitter",
            "content": "Loving the new release!",
            "timestamp": "2024-10-02T15:04:05Z",
            "metadata": {"likes": 5},
        },
    ])

Channel settings:

    xml = generate_rss_feed(items, title="Mentions", link="https://example.com")
    xml = generate_rss_feed(items, FeedOptions(description="Weekly digest"))

Items may be ``FeedItem`` instances or plain dicts in the scraper's JSON shape.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Any, Iterable, List, Mapping, Optional, Union

from feedscraper.formatters import RSSFormatter
from feedscraper.models import FeedItem, FeedOptions
from feedscraper.utils import escape_xml, to_rfc822

__all__ = ["generate_rss_feed", "escape_xml", "to_rfc822", "FeedItem", "FeedOptions"]


def _coerce_items(items: Iterable[Union[FeedItem, Mapping[str, Any]]]) -> List[FeedItem]:
    return [i if isinstance(i, FeedItem) else FeedItem.from_dict(i) for i in items]


def generate_rss_feed(
    items: Iterable[Union[FeedItem, Mapping[str, Any]]],
    options: Optional[FeedOptions] = None,
    *,
    title: Optional[str] = None,
    link: Optional[str] = None,
    description: Optional[str] = None,
) -> str:
    """Render feed items as a complete RSS 2.0 document.

    Args:
        items: Feed items, rendered in the given order.
        options: Channel settings; unset fields fall back to the defaults.
        title: Channel title override (wins over ``options``).
        link: Channel link override (wins over ``options``).
        description: Channel description override (wins over ``options``).

    Raises ValueError if a dict item is missing a required key.
    """
    options = options or FeedOptions()
    overrides = {k: v for k, v in (("title", title), ("link", link), ("description", description)) if v}
    if overrides:
        options = replace(options, **overrides)
    return RSSFormatter().format(_coerce_items(items), options)
