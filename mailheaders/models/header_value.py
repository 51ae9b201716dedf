"""Structured representation of a single header value."""

import re

from mailheaders.utils.parameter_tokenizer import parse_parameters

from .default_map import DefaultValueMap

_MARKERS = re.compile(r"^<(?P<content>.*)>$", re.DOTALL)


class HeaderValue:
    """
    One header's raw text split into a primary value and parameters.

    ``Content-Type: text/plain; charset="UTF-8"`` becomes a primary value
    of ``text/plain`` and a ``charset`` parameter. The empty parameter name
    is an alias for the primary value, so ``hv[""] == hv.value``.

    Instances are immutable once constructed.
    """

    __slots__ = ("_raw_value", "_parameters")

    def __init__(self, value: str | None = None):
        """
        Parse a raw header value.

        Args:
            value: Raw header text (None is treated as empty)
        """
        raw = value or ""
        parameters = DefaultValueMap(default="", case_insensitive=True)
        parameters[""] = raw.strip()

        semicolon = raw.find(";")
        if semicolon > 0:
            primary = raw[:semicolon].strip()
            parse_parameters(raw[semicolon:].strip(), parameters)
            # A stray empty parameter name must not replace the primary value
            parameters[""] = primary

        object.__setattr__(self, "_raw_value", raw)
        object.__setattr__(self, "_parameters", parameters)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def value(self) -> str:
        """Primary value: the text before the first semicolon, trimmed."""
        return self._parameters.get("", "")

    @property
    def raw_value(self) -> str:
        """Original text, or an empty string if it was blank."""
        if not self._raw_value.strip():
            return ""
        return self._raw_value

    @property
    def raw_value_without_markers(self) -> str:
        """
        Raw value with one enclosing ``<...>`` pair removed.

        Examples:
            >>> HeaderValue("<abc123@example.com>").raw_value_without_markers
            'abc123@example.com'
        """
        raw = self.raw_value
        match = _MARKERS.match(raw)
        if match is None:
            return raw
        return match.group("content")

    @property
    def parameters(self) -> DefaultValueMap:
        """Copy of the parameter map, including the ``""`` alias."""
        return DefaultValueMap(self._parameters, default="", case_insensitive=True)

    def __getitem__(self, name: str) -> str:
        return self._parameters.get(name, "")

    def __contains__(self, name: str) -> bool:
        return name in self._parameters

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HeaderValue):
            return NotImplemented
        return self._raw_value == other._raw_value

    def __hash__(self) -> int:
        return hash(self._raw_value)

    def __bool__(self) -> bool:
        return bool(self.raw_value)

    def __str__(self) -> str:
        props = [f"{name}={value}" for name, value in self._parameters.items() if name]
        if not props:
            return self.value
        return f"{self.value}; {', '.join(props)}"

    def __repr__(self) -> str:
        return f"HeaderValue({self._raw_value!r})"
