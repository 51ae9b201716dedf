"""Encoded-word (RFC 2047) decoding for header text."""

import logging
import re
from email.errors import HeaderParseError
from email.header import decode_header

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"(\r\n|\r|\n)")
_LEADING_WS = re.compile(r"^[ \t]*")


def decode_email_header(header_value: str | None, fallback_charset: str = "utf-8") -> str:
    """
    Decode RFC 2047 encoded-word header to Unicode string.

    Args:
        header_value: Raw header value (may be encoded)
        fallback_charset: Charset used when the declared one is unknown

    Returns:
        Decoded Unicode string

    Examples:
        >>> decode_email_header("=?UTF-8?B?5Lit5paH?=")
        '中文'
        >>> decode_email_header("plain text")
        'plain text'
    """
    if not header_value:
        return ""
    if "=?" not in header_value:
        return header_value

    try:
        parts = decode_header(header_value)
    except HeaderParseError as e:
        logger.debug("Leaving undecodable header text as-is: %s", e)
        return header_value

    decoded_parts = []
    for content, encoding in parts:
        if isinstance(content, bytes):
            if encoding:
                try:
                    decoded_parts.append(content.decode(encoding))
                except (UnicodeDecodeError, LookupError):
                    decoded_parts.append(content.decode(fallback_charset, errors="replace"))
            else:
                # Unencoded runs come back as raw-unicode-escape bytes
                decoded_parts.append(content.decode("raw-unicode-escape"))
        else:
            decoded_parts.append(str(content))

    return "".join(decoded_parts)


def decode_encoded_words(block: str | None, fallback_charset: str = "utf-8") -> str:
    """
    Decode encoded words across a whole header block.

    Each physical line is decoded on its own so line breaks and the leading
    whitespace that marks folded continuation lines survive decoding.

    Args:
        block: Raw header block
        fallback_charset: Charset used when the declared one is unknown

    Returns:
        Header block with encoded words replaced by their text
    """
    if not block:
        return ""
    if "=?" not in block:
        return block

    pieces = _LINE_BREAK.split(block)
    # Odd positions hold the line breaks themselves
    for i in range(0, len(pieces), 2):
        line = pieces[i]
        if "=?" not in line:
            continue
        indent = _LEADING_WS.match(line).group(0)
        pieces[i] = indent + decode_email_header(line[len(indent):], fallback_charset)

    return "".join(pieces)
