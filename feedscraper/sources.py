"""Known social sources and their display names.

Scraped items carry a short source key ("twitter", "reddit", ...). Feeds show
the human-friendly name instead. Unknown keys are passed through unchanged, so
new upstream sources render without a code change; add an entry below to give
one a nicer name.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class SourceEntry:
    """Metadata for a known source."""
    key: str                    # Source key as found on scraped items
    display_name: str           # Human-friendly name


# ── Registry ──────────────────────────────────────────────────────────
SOURCES: Tuple[SourceEntry, ...] = (
    SourceEntry("twitter",  "Twitter/X"),
    SourceEntry("reddit",   "Reddit"),
    SourceEntry("github",   "GitHub"),
)

_BY_KEY: Dict[str, SourceEntry] = {s.key: s for s in SOURCES}


def get_all_keys() -> List[str]:
    """Return all registered source keys."""
    return [s.key for s in SOURCES]


def get_entry(key: str) -> Optional[SourceEntry]:
    """Look up a source entry by key."""
    return _BY_KEY.get(key)


def display_name(source: str) -> str:
    """Map a source key to its display name, falling back to the key itself."""
    entry = get_entry(source)
    if entry is None:
        return source
    return entry.display_name
