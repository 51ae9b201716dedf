"""Lenient date parsing for header values."""

import logging
import re
from datetime import datetime
from email.utils import parsedate_to_datetime
from typing import Optional

from dateutil import parser as date_parser

logger = logging.getLogger(__name__)

_COMMENT = re.compile(r"\([^()]*\)")

# Two unrelated dates; a result that differs between them borrowed a field
_DEFAULTS = (datetime(1900, 1, 1), datetime(2000, 2, 2))


def to_null_date(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a header date, returning None instead of raising.

    RFC 5322 dates are tried first; anything else (ISO-style stamps,
    missing weekday, odd spacing) goes through dateutil.

    Args:
        value: Date text, e.g. ``Tue, 1 Jan 2013 10:00:00 +0000 (UTC)``

    Returns:
        Parsed datetime, or None if the text is not a date

    Examples:
        >>> to_null_date("1 Jan 2013 10:00:00 +0000").year
        2013
        >>> to_null_date("Tuesday") is None
        True
    """
    if not value or not value.strip():
        return None

    text = _COMMENT.sub(" ", value).strip()
    if not text:
        return None

    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        pass

    try:
        first = date_parser.parse(text, default=_DEFAULTS[0])
        second = date_parser.parse(text, default=_DEFAULTS[1])
    except (ValueError, OverflowError) as e:
        logger.debug("Could not parse date %r: %s", value, e)
        return None

    # Fields missing from the text come from the default and differ between runs
    if first != second:
        logger.debug("Date %r lacks an explicit day, month or year", value)
        return None
    return first
