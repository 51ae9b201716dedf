"""Utility functions"""

from .date_utils import to_null_date
from .parameter_tokenizer import parse_parameters
from .unicode_utils import decode_email_header, decode_encoded_words

__all__ = ["to_null_date", "parse_parameters", "decode_email_header", "decode_encoded_words"]
