"""
mailheaders: permissive parsing of Internet message headers.

Unfolds raw header blocks, splits header values from their parameters,
tokenizes address lists and resolves message dates.
"""

import logging

__version__ = "1.0.0"

from mailheaders.config import AppConfig, ConfigError, ConfigLoader, ParsingConfig
from mailheaders.models import DefaultValueMap, HeaderValue, InvalidAddressError, MailAddress
from mailheaders.services import HeaderCollection

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "HeaderCollection",
    "HeaderValue",
    "DefaultValueMap",
    "MailAddress",
    "InvalidAddressError",
    "ConfigError",
    "ConfigLoader",
    "AppConfig",
    "ParsingConfig",
]
