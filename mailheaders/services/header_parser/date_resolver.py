"""Message date resolution from Date and Received headers."""

import logging
import re
from datetime import datetime
from typing import Optional

from mailheaders.utils.date_utils import to_null_date

logger = logging.getLogger(__name__)

MIN_DATE = datetime.min

# Tried in order against the Received trace; the last match of a pattern wins
RECEIVED_DATE_PATTERNS = (
    # 12 Mar 2013 10:15:00 +0000
    re.compile(r"\d{1,2}\s+[a-z]{3}\s+\d{2,4}\s+\d{1,2}:\d{2}:\d{1,2}\s+[+\-\d:]*", re.IGNORECASE),
    # 2013-03-12 10:15[:00] [+0000]
    re.compile(r"\d{4}-\d{1,2}-\d{1,2}\s+\d{1,2}:\d{2}(?::\d{2})?(?:\s+[+\-\d:]+)?", re.IGNORECASE),
)


def date_from_received(received: str) -> Optional[datetime]:
    """
    Find a usable timestamp inside Received header text.

    Args:
        received: Raw Received header value

    Returns:
        Parsed datetime, or None if no pattern yields a date
    """
    if not received:
        return None

    for pattern in RECEIVED_DATE_PATTERNS:
        matches = pattern.findall(received)
        if not matches:
            continue
        value = to_null_date(matches[-1])
        if value is not None:
            return value

    return None


def resolve_date(date_header: str, received_header: str) -> datetime:
    """
    Resolve a message timestamp, never raising.

    Args:
        date_header: Raw Date header value
        received_header: Raw Received header value

    Returns:
        Parsed datetime, or ``datetime.min`` when nothing parses
    """
    value = to_null_date(date_header)
    if value is not None:
        return value

    if date_header:
        logger.debug("Unparsable Date header %r, falling back to Received", date_header)

    value = date_from_received(received_header)
    if value is None:
        logger.debug("No date could be resolved")
        return MIN_DATE
    return value
