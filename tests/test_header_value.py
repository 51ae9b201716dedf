"""Tests for HeaderValue and the parameter tokenizer."""

import pytest

from mailheaders.models.header_value import HeaderValue
from mailheaders.utils.parameter_tokenizer import parse_parameters


class TestHeaderValue:
    """Test primary value and parameter splitting."""

    def test_content_type_with_parameters(self):
        """Test primary value and quoted/unquoted parameters."""
        hv = HeaderValue('text/plain; charset="UTF-8"; boundary=XYZ')

        assert hv.value == "text/plain"
        assert hv["charset"] == "UTF-8"
        assert hv["boundary"] == "XYZ"

    def test_parameter_names_case_insensitive(self):
        """Test parameter lookup ignores case."""
        hv = HeaderValue("text/plain; Charset=utf-8")
        assert hv["CHARSET"] == "utf-8"

    def test_missing_parameter_is_empty(self):
        """Test an absent parameter reads as an empty string."""
        assert HeaderValue("text/plain")["charset"] == ""

    def test_empty_key_aliases_primary_value(self):
        """Test parameters[""] always equals the primary value."""
        for raw in ("text/plain; a=1", "  plain  ", "", ";a=1", "x;;", "x; =y"):
            hv = HeaderValue(raw)
            assert hv.parameters[""] == hv.value
            assert hv[""] == hv.value

    def test_primary_value_ignores_stray_parameters(self):
        """Test empty parameter names do not overwrite the primary value."""
        assert HeaderValue("x;;").value == "x"
        assert HeaderValue("text/plain; =y").value == "text/plain"

    def test_leading_semicolon_keeps_whole_value(self):
        """Test a value starting with ';' has no parameters split off."""
        hv = HeaderValue("; charset=utf-8")
        assert hv.value == "; charset=utf-8"
        assert hv["charset"] == ""

    def test_none_and_blank_values(self):
        """Test None and whitespace-only input read as empty."""
        assert HeaderValue(None).value == ""
        assert HeaderValue(None).raw_value == ""
        assert HeaderValue("   ").raw_value == ""
        assert not HeaderValue("   ")

    def test_raw_value_preserved(self):
        """Test raw_value returns the original text."""
        raw = 'attachment; filename="report.pdf"'
        assert HeaderValue(raw).raw_value == raw

    def test_raw_value_without_markers(self):
        """Test one enclosing angle-bracket pair is removed."""
        assert HeaderValue("<abc123@example.com>").raw_value_without_markers == "abc123@example.com"
        assert HeaderValue("abc123@example.com").raw_value_without_markers == "abc123@example.com"
        assert HeaderValue("<a@b> <c@d>").raw_value_without_markers == "a@b> <c@d"

    def test_str_renders_parameters(self):
        """Test string form lists non-empty-keyed parameters."""
        hv = HeaderValue('text/plain; charset="UTF-8"; boundary=XYZ')
        assert str(hv) == "text/plain; charset=UTF-8, boundary=XYZ"
        assert str(HeaderValue("text/plain")) == "text/plain"

    def test_immutable(self):
        """Test attributes cannot be reassigned."""
        hv = HeaderValue("text/plain")
        with pytest.raises(AttributeError):
            hv.value = "text/html"

    def test_parameters_returns_copy(self):
        """Test mutating the returned parameter map does not change the value."""
        hv = HeaderValue("text/plain; charset=utf-8")
        params = hv.parameters
        params["charset"] = "latin-1"
        assert hv["charset"] == "utf-8"


class TestParseParameters:
    """Test the name=value tokenizer."""

    def test_single_quoted_value(self):
        """Test single quotes delimit a value."""
        assert parse_parameters("; name='a b'", {}) == {"name": "a b"}

    def test_unquoted_value_stops_at_space_comma_semicolon(self):
        """Test unquoted values end at the first separator."""
        result = parse_parameters("; a=1 b=2, c=3;d=4", {})
        assert result == {"a": "1", "b": "2", "c": "3", "d": "4"}

    def test_duplicate_name_last_wins(self):
        """Test a repeated name overwrites the earlier value."""
        assert parse_parameters("; a=1; a=2", {}) == {"a": "2"}

    def test_unterminated_quote_consumes_rest(self):
        """Test an unterminated quoted value runs to the end and terminates."""
        assert parse_parameters('; name="abc; other=1', {}) == {"name": "abc; other=1"}

    def test_escaped_quote_not_unescaped(self):
        """Test the closing quote scan ignores backslash escapes."""
        result = parse_parameters(r'; name="a\"b"', {})
        assert result["name"] == "a\\"

    def test_bare_separators_produce_empty_name(self):
        """Test a bare ';;' yields an empty-name entry."""
        assert parse_parameters(";;", {}) == {"": ""}

    def test_name_without_value(self):
        """Test a trailing name without '=' maps to an empty value."""
        assert parse_parameters("; a=1; flag", {}) == {"a": "1", "flag": ""}

    def test_equals_inside_quoted_value(self):
        """Test '=' inside a quoted value stays part of the value."""
        assert parse_parameters('; boundary="----=_Part_0"', {}) == {"boundary": "----=_Part_0"}

    def test_empty_input(self):
        """Test empty input leaves the mapping untouched."""
        assert parse_parameters("", {}) == {}
