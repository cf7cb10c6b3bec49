"""JSON/YAML feed items loader."""
import json
import logging
from pathlib import Path
from typing import List

import yaml

from feedscraper.models import FeedItem

logger = logging.getLogger(__name__)

_FORMATS = {".json": "json", ".yaml": "yaml", ".yml": "yaml"}


def load_items(content: str, fmt: str = "json") -> List[FeedItem]:
    """Parse feed items from JSON or YAML text.

    Accepts either a top-level list of items or a mapping with an ``items`` list:

        items:
          - id: "tw-1"
            url: https://x.com/someone/status/1
            author: someone
            source: twitter
            timestamp: "2024-10-02T15:04:05Z"
    """
    if fmt == "yaml":
        data = yaml.safe_load(content)
    elif fmt == "json":
        data = json.loads(content)
    else:
        raise ValueError(f"Unsupported items format: {fmt} (use json or yaml)")

    if data is None:
        raise ValueError("Items document is empty")
    if isinstance(data, dict):
        if "items" not in data:
            raise ValueError("Items file must be a list or contain a top-level 'items' key")
        data = data["items"]
    if not isinstance(data, list):
        raise ValueError("'items' must be a list")

    items = []
    for i, raw in enumerate(data):
        if not isinstance(raw, dict):
            raise ValueError(f"Item #{i+1} must be a mapping")
        try:
            items.append(FeedItem.from_dict(raw))
        except ValueError as e:
            raise ValueError(f"Item #{i+1}: {e}") from e
    return items


def load_items_file(path: str) -> List[FeedItem]:
    """Load feed items from a .json, .yaml or .yml file."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Items file not found: {path}")

    fmt = _FORMATS.get(p.suffix.lower())
    if fmt is None:
        raise ValueError(f"Unsupported items file format: {p.suffix} (use .json, .yaml, or .yml)")

    items = load_items(p.read_text(encoding="utf-8"), fmt)
    logger.info(f"[Items] Loaded {len(items)} items from {path}")
    return items
