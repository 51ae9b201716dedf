"""Splitting of address-list headers into mailboxes."""

import logging
from collections.abc import Iterator

from mailheaders.models.mail_address import InvalidAddressError, MailAddress

logger = logging.getLogger(__name__)


def _find_separator(values: str) -> int:
    """Index of the first comma or semicolon outside double quotes, or -1."""
    quoted = False
    for i, ch in enumerate(values):
        if ch == '"':
            quoted = not quoted
        elif not quoted and ch in ",;":
            return i
    return -1


def tokenize_addresses(values: str) -> Iterator[str]:
    """
    Yield address tokens from an address list.

    Commas and semicolons separate addresses, except that a ``>`` reached
    before the next separator closes the token there. This keeps display
    names containing separators together, as in ``Doe, John <john@x.com>``.

    Args:
        values: Raw address list

    Yields:
        Trimmed, non-empty address tokens
    """
    values = (values or "").strip()
    while values:
        # Separators left over from the previous token start no new address
        values = values.lstrip(",; \t")
        if not values:
            return

        semicolon = _find_separator(values)
        bracket = values.find(">")
        if semicolon == -1 and bracket == -1:
            yield values
            return

        if bracket > -1 and semicolon > -1 and semicolon < bracket:
            # A separator inside a display name still waiting for its <addr>
            prefix = values[:semicolon].strip()
            if prefix and "@" not in prefix and "<" in values[semicolon:bracket]:
                semicolon = -1

        if bracket > -1 and (semicolon == -1 or bracket < semicolon):
            token = values[:bracket + 1]
            values = values[len(token):]
        else:
            token = values[:semicolon]
            values = values[semicolon + 1:]

        token = token.strip()
        if token:
            yield token
        values = values.strip()


def parse_addresses(values: str) -> list[MailAddress]:
    """
    Parse an address list, dropping tokens that are not addresses.

    Args:
        values: Raw address list

    Returns:
        Parsed addresses in header order

    Examples:
        >>> [a.address for a in parse_addresses("Doe, John <john@x.com>, jane@y.com")]
        ['john@x.com', 'jane@y.com']
    """
    addresses = []
    for token in tokenize_addresses(values):
        try:
            addresses.append(MailAddress.parse(token))
        except InvalidAddressError as e:
            logger.debug("Dropping address token %r: %s", token, e)
    return addresses
