"""Shared utility functions: XML escaping and RFC 822 dates."""
import logging
import re
from datetime import date, datetime, timezone
from email.utils import format_datetime

from dateutil import parser as dateparser

logger = logging.getLogger(__name__)

INVALID_DATE = "Invalid Date"

# Order matters: "&" first so later entities aren't double-escaped
_XML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)

_WHITESPACE_RE = re.compile(r"\s+")

# RFC 822 zone names dateutil doesn't know; offsets in seconds
_RFC822_ZONES = {
    "UT": 0,
    "EST": -5 * 3600, "EDT": -4 * 3600,
    "CST": -6 * 3600, "CDT": -5 * 3600,
    "MST": -7 * 3600, "MDT": -6 * 3600,
    "PST": -8 * 3600, "PDT": -7 * 3600,
}


def escape_xml(text) -> str:
    """Escape the five reserved XML characters. Falsy input returns ''."""
    if not text:
        return ""
    for char, entity in _XML_ESCAPES:
        text = text.replace(char, entity)
    return text


def collapse_whitespace(text: str) -> str:
    """Collapse whitespace runs (spaces, tabs, newlines) to one space and trim."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def _to_datetime(value) -> datetime:
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime(value.year, value.month, value.day)
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        # Epoch milliseconds
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    elif isinstance(value, str) and value.strip():
        dt = dateparser.parse(value, tzinfos=_RFC822_ZONES)
    else:
        raise ValueError(f"Unsupported date value: {value!r}")
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_rfc822(value) -> str:
    """Format a date string, datetime, date or epoch-ms number as an RFC 822 date.

    Output is always UTC, e.g. ``Wed, 02 Oct 2024 15:04:05 GMT``. Naive
    datetimes and strings without an offset are taken as UTC.

    Never raises: unparseable input yields ``INVALID_DATE`` so one bad
    timestamp doesn't abort a whole feed.
    """
    try:
        dt = _to_datetime(value)
    except (ValueError, OverflowError, OSError) as e:
        logger.warning(f"[RSS] Unparseable date {value!r}: {e}")
        return INVALID_DATE
    return format_datetime(dt, usegmt=True)
