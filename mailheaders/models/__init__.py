"""Data models for parsed headers"""

from .default_map import DefaultValueMap
from .header_value import HeaderValue
from .mail_address import InvalidAddressError, MailAddress

__all__ = [
    "DefaultValueMap",
    "HeaderValue",
    "InvalidAddressError",
    "MailAddress",
]
