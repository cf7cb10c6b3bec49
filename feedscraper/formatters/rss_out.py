"""RSS 2.0 output formatter — generates a valid RSS 2.0 XML feed."""
from datetime import datetime, timezone
from typing import Iterable, Optional

from feedscraper.models import FeedItem, FeedOptions, derive_title
from feedscraper.sources import display_name
from feedscraper.utils import escape_xml, to_rfc822

ATOM_NS = "http://www.w3.org/2005/Atom"
GENERATOR = "Factory AI Feed Scraper"
LANGUAGE = "en-us"
TTL = 10
UNCATEGORIZED = "uncategorized"


def _engagement_line(metadata) -> str:
    likes = metadata.get("likes") or 0
    retweets = metadata.get("retweets") or 0
    replies = metadata.get("replies") or 0
    return f"Likes: {likes} | Retweets: {retweets} | Replies: {replies}"


def _description(item: FeedItem, source_name: str) -> str:
    # Verbatim HTML for readers that render descriptions; nothing here is escaped
    parts = [
        "<![CDATA[",
        f"<p><strong>Author:</strong> {item.author}</p>",
        f"<p><strong>Source:</strong> {source_name}</p>",
    ]
    if item.category:
        parts.append(f"<p><strong>Category:</strong> {item.category}</p>")
    parts.append("<hr/>")
    parts.append(f"<p>{item.content or ''}</p>")
    if item.source == "twitter" and item.metadata is not None:
        parts.append("<hr/>")
        parts.append(f"<p><small>{_engagement_line(item.metadata)}</small></p>")
    parts.append("]]>")
    return "".join(parts)


class RSSFormatter:
    """Format feed items as an RSS 2.0 feed."""

    def format_item(self, item: FeedItem) -> str:
        title = escape_xml(derive_title(item))
        link = escape_xml(item.url)
        author = escape_xml(item.author)
        source = display_name(item.source)
        category = escape_xml(item.category) if item.category else UNCATEGORIZED
        pub_date = to_rfc822(item.timestamp)
        guid = escape_xml(item.id)
        description = _description(item, source)
        return (
            f"    <item>\n"
            f"      <title>{title}</title>\n"
            f"      <link>{link}</link>\n"
            f"      <description>{description}</description>\n"
            f"      <author>{author}</author>\n"
            f"      <category>{category}</category>\n"
            f"      <pubDate>{pub_date}</pubDate>\n"
            f"      <guid isPermaLink=\"false\">{guid}</guid>\n"
            f"      <source url=\"{link}\">{escape_xml(source)}</source>\n"
            f"    </item>"
        )

    def format(self, items: Iterable[FeedItem], options: Optional[FeedOptions] = None) -> str:
        options = options or FeedOptions()
        title = escape_xml(options.resolved_title)
        link = escape_xml(options.resolved_link)
        description = escape_xml(options.resolved_description)
        now = to_rfc822(datetime.now(tz=timezone.utc))
        body = "\n".join(self.format_item(item) for item in items)
        return (
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            f'<rss version="2.0" xmlns:atom="{ATOM_NS}">\n'
            '  <channel>\n'
            f'    <title>{title}</title>\n'
            f'    <link>{link}</link>\n'
            f'    <description>{description}</description>\n'
            f'    <language>{LANGUAGE}</language>\n'
            f'    <lastBuildDate>{now}</lastBuildDate>\n'
            f'    <generator>{GENERATOR}</generator>\n'
            f'    <ttl>{TTL}</ttl>\n'
            f'{body}\n'
            '  </channel>\n'
            '</rss>'
        )
