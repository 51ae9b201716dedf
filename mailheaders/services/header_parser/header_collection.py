"""Header block parsing and typed header accessors."""

import logging
import re
from datetime import datetime
from enum import Enum
from functools import lru_cache
from typing import Optional, TypeVar

from mailheaders.config.parser_config import ParsingConfig
from mailheaders.models.default_map import DefaultValueMap
from mailheaders.models.header_value import HeaderValue
from mailheaders.models.mail_address import MailAddress
from mailheaders.utils.unicode_utils import decode_encoded_words

from .address_tokenizer import parse_addresses
from .date_resolver import resolve_date

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

_LINE_BREAKS = re.compile(r"[\r\n]+")


@lru_cache(maxsize=None)
def _enum_names(enum_type: type[Enum]) -> dict[str, Enum]:
    """Case-folded member name -> member, built once per enum type."""
    names: dict[str, Enum] = {}
    for name, member in enum_type.__members__.items():
        names.setdefault(name.casefold(), member)
    return names


def default_member(enum_type: type[E]) -> E:
    """
    Zero value of an enum: the member equal to 0, else the first declared.

    Args:
        enum_type: Enum class

    Returns:
        Default member

    Raises:
        TypeError: If the enum declares no members
    """
    members = list(enum_type)
    if not members:
        raise TypeError(f"{enum_type.__name__} has no members to resolve into")
    for member in members:
        if member.value == 0:
            return member
    return members[0]


class HeaderCollection(DefaultValueMap):
    """
    Case-insensitive map of header name to HeaderValue.

    Looking up a header that was not present yields an empty HeaderValue,
    so accessors can be chained without checks:

        >>> headers = HeaderCollection.parse("Content-Type: text/plain; charset=utf-8")
        >>> headers["content-type"]["charset"]
        'utf-8'
        >>> headers["X-Missing"].value
        ''
    """

    def __init__(self, data=None):
        super().__init__(data, default_factory=HeaderValue, case_insensitive=True)

    @classmethod
    def parse(cls, headers: Optional[str], config: Optional[ParsingConfig] = None) -> "HeaderCollection":
        """
        Parse a raw header block.

        Folded continuation lines (starting with a space or tab) are joined
        to the header before them. Lines without a colon are dropped. When a
        header name repeats, the last occurrence wins.

        Args:
            headers: Raw header block, separated from the message body
            config: Parsing options (defaults when omitted)

        Returns:
            HeaderCollection with one HeaderValue per header name
        """
        config = config or ParsingConfig()
        text = headers or ""
        if config.decode_encoded_words:
            text = decode_encoded_words(text, config.fallback_charset)

        unfolded = DefaultValueMap(default="", case_insensitive=True)
        key = None
        for line in _LINE_BREAKS.split(text):
            if not line:
                continue

            if key is not None and line[0] in " \t":
                continuation = line.strip()
                if continuation:
                    current = unfolded[key]
                    unfolded[key] = f"{current} {continuation}" if current else continuation
                continue

            name, colon, value = line.partition(":")
            if not colon:
                logger.debug("Dropping header line without colon: %r", line)
                continue

            key = name.strip()
            if key in unfolded:
                logger.debug("Header %r repeated, keeping last value", key)
            unfolded[key] = value.strip()

        return cls((name, HeaderValue(value)) for name, value in unfolded.items())

    def get_boundary(self) -> str:
        """Multipart boundary from the Content-Type header, or ``""``."""
        return self["Content-Type"]["boundary"]

    def get_message_id(self) -> str:
        """Message-ID without its enclosing angle brackets, or ``""``."""
        return self["Message-ID"].raw_value_without_markers

    def get_date(self) -> datetime:
        """
        Resolve the message date.

        The Date header is used when it parses. Otherwise the Received
        header is scanned for an RFC 822 style timestamp, then an ISO style
        one, taking the last match of each.

        Returns:
            Message datetime, or ``datetime.min`` when none can be found
        """
        return resolve_date(self["Date"].raw_value, self["Received"].raw_value)

    def get_enum(self, enum_type: type[E], name: str) -> E:
        """
        Match a header's raw value against an enum's member names.

        Matching is case-insensitive. Empty or unrecognized values give the
        enum's default member rather than an error.

        Args:
            enum_type: Enum class to resolve into
            name: Header name

        Returns:
            Matching member, or the default member

        Raises:
            TypeError: If the enum declares no members
        """
        value = self[name].raw_value.strip()
        if not value:
            return default_member(enum_type)
        member = _enum_names(enum_type).get(value.casefold())
        if member is None:
            return default_member(enum_type)
        return member

    def get_addresses(self, header: str) -> list[MailAddress]:
        """
        Parse an address-list header.

        Args:
            header: Header name, e.g. ``To`` or ``Cc``

        Returns:
            Parsed addresses; tokens that are not addresses are skipped
        """
        return parse_addresses(self[header].raw_value)
