"""CLI entry point for feedscraper."""
import argparse
import logging
import sys

import yaml

from feedscraper import __version__
from feedscraper.formatters import RSSFormatter
from feedscraper.models import FeedOptions


def _read_stdin_items():
    """Read items from stdin, as JSON when it looks like JSON, else YAML."""
    from feedscraper.items_file import load_items
    content = sys.stdin.read()
    stripped = content.lstrip()
    if not stripped:
        raise ValueError("No items on stdin")
    fmt = "json" if stripped.startswith(("[", "{")) else "yaml"
    return load_items(content, fmt)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="feedscraper",
        description="📡 feedscraper — render scraped social feed items as RSS 2.0",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("input", nargs="?", default="-",
                        help="Items file (.json, .yaml, .yml) or '-' for stdin (default: stdin)")
    parser.add_argument("--title", type=str, default=None,
                        help="Channel title (default: Factory AI Social Feed)")
    parser.add_argument("--link", type=str, default=None,
                        help="Channel link (default: https://factory.ai)")
    parser.add_argument("--description", type=str, default=None,
                        help="Channel description")
    parser.add_argument("-o", "--output", type=str, default=None,
                        help="Write output to file instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress status messages on stderr")
    parser.add_argument("--no-config", action="store_true",
                        help="Ignore config files (~/.feedscraper.yaml, ./feedscraper.yaml)")
    parser.add_argument("--init-config", action="store_true",
                        help="Write a starter config to ~/.feedscraper.yaml and exit")

    args = parser.parse_args(argv)

    if args.init_config:
        from feedscraper.config import generate_starter_config
        path = generate_starter_config()
        print(f"✅ Wrote starter config to {path}")
        return

    # Apply config file defaults (CLI args always win)
    if not args.no_config:
        from feedscraper.config import apply_config_defaults
        args = apply_config_defaults(parser, args)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    try:
        if args.input == "-":
            items = _read_stdin_items()
        else:
            from feedscraper.items_file import load_items_file
            items = load_items_file(args.input)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error loading items: {e}", file=sys.stderr)
        sys.exit(1)

    if not args.quiet:
        print(f"📥 Loaded {len(items)} items", file=sys.stderr)

    options = FeedOptions(title=args.title, link=args.link, description=args.description)
    output = RSSFormatter().format(items, options)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output)
        if not args.quiet:
            print(f"✅ Wrote {len(items)} items to {args.output}", file=sys.stderr)
    else:
        print(output)


if __name__ == "__main__":
    main()
