"""Config file support for feedscraper.

Channel settings and output defaults can live in YAML instead of on the
command line. Later sources win:

  1. ~/.feedscraper.yaml   (user-level)
  2. ./feedscraper.yaml    (project-level)
  3. FEEDSCRAPER_* environment variables
  4. CLI flags

Example config file:

    # ~/.feedscraper.yaml
    title: Acme Mentions
    link: https://acme.example
    output: feed.xml
    quiet: true
"""
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

# Config key -> type; anything else in a config file is ignored
_FIELDS = {
    "title": str,
    "link": str,
    "description": str,
    "output": str,
    "quiet": bool,
    "verbose": bool,
}

_TRUTHY = ("1", "true", "yes", "on")


def _config_paths():
    home = Path.home()
    return [home / ".feedscraper.yaml", home / ".feedscraper.yml",
            Path("feedscraper.yaml"), Path("feedscraper.yml")]


def _coerce(key: str, value: Any) -> Optional[Any]:
    """Coerce a raw config value to its field type. Empty values give None."""
    if value is None:
        return None
    if _FIELDS[key] is bool:
        if isinstance(value, str):
            return value.strip().lower() in _TRUTHY
        return bool(value)
    return str(value)


def load_config() -> Dict[str, Any]:
    """Load known settings from the YAML config files, project level last."""
    config: Dict[str, Any] = {}
    for p in _config_paths():
        if not p.is_file():
            continue
        try:
            data = yaml.safe_load(p.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"[Config] Failed to load {p}: {e}")
            continue
        if data is None:
            continue
        if not isinstance(data, dict):
            logger.warning(f"[Config] Ignoring {p}: expected a mapping")
            continue
        for key, value in data.items():
            if key in _FIELDS and value is not None:
                config[key] = _coerce(key, value)
        logger.debug(f"[Config] Loaded {p}")
    return config


def load_env_config() -> Dict[str, Any]:
    """Load settings from FEEDSCRAPER_* environment variables (FEEDSCRAPER_QUIET=1 etc.)."""
    config: Dict[str, Any] = {}
    for key in _FIELDS:
        value = os.environ.get(f"FEEDSCRAPER_{key.upper()}")
        if value is not None:
            config[key] = _coerce(key, value)
    return config


def apply_config_defaults(parser, args):
    """Fill CLI args still at their parser default from env vars and config files."""
    config = load_config()
    config.update(load_env_config())

    for key, value in config.items():
        if value is None or not hasattr(args, key):
            continue
        if getattr(args, key) != parser.get_default(key):
            continue  # Given on the command line
        setattr(args, key, value)

    return args


_STARTER_CONFIG = """\
# feedscraper configuration — customize your defaults here.
# CLI flags always override these values.

# Channel title, link and description
# title: Factory AI Social Feed
# link: https://factory.ai
# description: Aggregated mentions from Twitter, Reddit, and GitHub

# Write the feed to this file instead of stdout
# output: feed.xml

# Suppress status messages
# quiet: false
"""


def generate_starter_config() -> Path:
    """Write a starter config file to ~/.feedscraper.yaml (won't overwrite existing)."""
    path = Path.home() / ".feedscraper.yaml"
    if path.exists():
        path = Path.home() / ".feedscraper.yaml.new"
    path.write_text(_STARTER_CONFIG, encoding="utf-8")
    return path
