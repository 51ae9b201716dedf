"""Header parsing services."""

from .address_tokenizer import parse_addresses, tokenize_addresses
from .date_resolver import resolve_date
from .header_collection import HeaderCollection

__all__ = [
    "parse_addresses",
    "tokenize_addresses",
    "resolve_date",
    "HeaderCollection",
]
