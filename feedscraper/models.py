"""Data models for feedscraper."""
from dataclasses import dataclass, fields
from datetime import date, datetime
from typing import Any, Mapping, Optional, Union

from feedscraper.utils import collapse_whitespace

DEFAULT_TITLE = "Factory AI Social Feed"
DEFAULT_LINK = "https://factory.ai"
DEFAULT_DESCRIPTION = "Aggregated mentions from Twitter, Reddit, and GitHub"

TITLE_MAX_LENGTH = 80
_ELLIPSIS = "..."

_REQUIRED_KEYS = ("id", "url", "author", "source", "timestamp")
_TEXT_KEYS = ("id", "url", "author", "source", "category", "content")

Timestamp = Union[str, datetime, date, int, float]


@dataclass(frozen=True)
class FeedItem:
    id: str
    url: str
    author: str
    source: str
    timestamp: Timestamp
    category: Optional[str] = None
    content: Optional[str] = None
    metadata: Optional[Mapping[str, Any]] = None  # engagement counts, twitter only

    @property
    def title(self) -> str:
        """Display title derived from the content (see ``derive_title``)."""
        return derive_title(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FeedItem":
        """Build an item from a scraped JSON/YAML mapping. Unknown keys are ignored.

        Numbers in text fields become strings (tweet and Reddit ids are often
        numeric). Raises ValueError if a required key is missing or a field has
        the wrong type.
        """
        missing = [k for k in _REQUIRED_KEYS if k not in data]
        if missing:
            raise ValueError(f"Feed item is missing required key(s): {', '.join(missing)}")
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}
        for key in _TEXT_KEYS:
            if key in values:
                values[key] = _as_text(key, values[key], required=key in _REQUIRED_KEYS)
        metadata = values.get("metadata")
        if metadata is not None and not isinstance(metadata, Mapping):
            raise ValueError(f"Feed item 'metadata' must be a mapping, got {type(metadata).__name__}")
        return cls(**values)


def _as_text(key: str, value: Any, required: bool) -> Optional[str]:
    if value is None and not required:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise ValueError(f"Feed item '{key}' must be a string, got {type(value).__name__}")


def derive_title(item: FeedItem) -> str:
    """Compute a title for an item, which has no title field of its own.

    Uses the whitespace-collapsed content, cut to 77 characters plus "..."
    when longer than 80. Items without content get "{source} post by {author}".
    """
    if item.content:
        text = collapse_whitespace(item.content)
        if len(text) > TITLE_MAX_LENGTH:
            return text[:TITLE_MAX_LENGTH - len(_ELLIPSIS)] + _ELLIPSIS
        return text
    return f"{item.source} post by {item.author}"


@dataclass(frozen=True)
class FeedOptions:
    """Channel-level feed settings. Unset or empty fields fall back to defaults."""
    title: Optional[str] = None
    link: Optional[str] = None
    description: Optional[str] = None

    @property
    def resolved_title(self) -> str:
        return self.title or DEFAULT_TITLE

    @property
    def resolved_link(self) -> str:
        return self.link or DEFAULT_LINK

    @property
    def resolved_description(self) -> str:
        return self.description or DEFAULT_DESCRIPTION
