"""Business logic services"""

from .header_parser import HeaderCollection, parse_addresses, resolve_date

__all__ = [
    "HeaderCollection",
    "parse_addresses",
    "resolve_date",
]
