"""Tokenizer for ``name=value`` header parameter lists."""

from collections.abc import MutableMapping

_UNQUOTED_TERMINATORS = (" ", ",", ";")


def _find_any(text: str, chars, start: int = 0) -> int:
    """Index of the first of ``chars`` at or after ``start``, or ``len(text)``."""
    positions = [pos for pos in (text.find(ch, start) for ch in chars) if pos >= 0]
    return min(positions) if positions else len(text)


def parse_parameters(header: str, result: MutableMapping) -> MutableMapping:
    """
    Split a parameter list into ``result``.

    The input is the part of a header after its primary value, e.g.
    ``; charset="UTF-8"; boundary=XYZ``. Quoted values run to the next
    matching quote; escaped quotes are not unescaped. Unquoted values stop
    at the first space, comma or semicolon. A repeated name overwrites the
    earlier value.

    Args:
        header: Parameter text
        result: Mapping to populate, normally a case-insensitive
            DefaultValueMap

    Returns:
        The populated mapping

    Examples:
        >>> parse_parameters('; charset="UTF-8"; boundary=XYZ', {})
        {'charset': 'UTF-8', 'boundary': 'XYZ'}
    """
    header = header or ""
    while header:
        eq = header.find("=")
        if eq < 0:
            eq = len(header)
        name = header[:eq].strip().strip(";,").strip()

        header = value = header[eq + 1:].strip()

        if value.startswith('"'):
            skip, end = 1, _find_any(value, ('"',), 1)
        elif value.startswith("'"):
            skip, end = 1, _find_any(value, ("'",), 1)
        else:
            skip, end = 0, _find_any(value, _UNQUOTED_TERMINATORS)

        # An unterminated value ends at the string end, so the cursor always advances
        header = header[end + 1:]
        result[name] = value[skip:end]

    return result
