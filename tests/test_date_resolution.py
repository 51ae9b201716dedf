"""Tests for message date resolution."""

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from mailheaders.services.header_parser.date_resolver import MIN_DATE, date_from_received, resolve_date
from mailheaders.services.header_parser.header_collection import HeaderCollection


class TestGetDate:
    """Test the Date/Received fallback chain."""

    def test_date_header(self):
        """Test a valid Date header is used directly."""
        headers = HeaderCollection.parse("Date: Tue, 12 Mar 2013 10:15:00 +0000")
        assert headers.get_date() == datetime(2013, 3, 12, 10, 15, tzinfo=timezone.utc)

    def test_date_header_with_comment(self):
        """Test a trailing zone comment does not break parsing."""
        headers = HeaderCollection.parse("Date: Tue, 12 Mar 2013 10:15:00 +0000 (UTC)")
        assert headers.get_date() == datetime(2013, 3, 12, 10, 15, tzinfo=timezone.utc)

    def test_received_fallback_uses_last_match(self):
        """Test the last RFC 822 style stamp in Received is used."""
        path = Path(__file__).parent / "fixtures" / "headers" / "received_only.txt"
        headers = HeaderCollection.parse(path.read_text(encoding="utf-8"))

        assert headers.get_date() == datetime(2013, 3, 12, 9, 30, tzinfo=timezone.utc)

    def test_received_fallback_when_date_unparsable(self):
        """Test an unparsable Date header falls back to Received."""
        headers = HeaderCollection.parse(
            "Date: unknown\r\n"
            "Received: from a by b; 5 Apr 2014 06:07:08 +0000"
        )
        assert headers.get_date() == datetime(2014, 4, 5, 6, 7, 8, tzinfo=timezone.utc)

    @pytest.mark.parametrize("date_text", ["1", "42", "Tuesday", "10:00"])
    def test_partial_date_falls_back_to_received(self, date_text):
        """Test a Date header lacking day, month or year is not completed from today."""
        headers = HeaderCollection.parse(
            f"Date: {date_text}\r\n"
            "Received: from a by b; 5 Apr 2014 06:07:08 +0000"
        )
        assert headers.get_date() == datetime(2014, 4, 5, 6, 7, 8, tzinfo=timezone.utc)

    @pytest.mark.parametrize("date_text", ["1", "Tuesday"])
    def test_partial_date_without_received(self, date_text):
        """Test a partial Date header alone yields the sentinel."""
        assert HeaderCollection.parse(f"Date: {date_text}").get_date() == datetime.min

    def test_received_iso_fallback(self):
        """Test ISO style stamps are tried after RFC 822 style ones."""
        headers = HeaderCollection.parse("Received: from a by b with SMTP; 2013-03-12 10:15 +0100")

        expected = datetime(2013, 3, 12, 10, 15, tzinfo=timezone(timedelta(hours=1)))
        assert headers.get_date() == expected

    def test_min_date_when_nothing_parses(self):
        """Test the sentinel is returned when no date can be found."""
        assert HeaderCollection.parse("").get_date() == datetime.min
        headers = HeaderCollection.parse(
            "Date: unknown\r\nReceived: from mail.example.com by mx.example.org"
        )
        assert headers.get_date() == datetime.min


class TestResolveDate:
    """Test the resolver functions directly."""

    def test_resolve_date_prefers_date_header(self):
        """Test Date wins over Received."""
        result = resolve_date("1 Jan 2013 00:00:00 +0000", "from a; 2 Jan 2013 00:00:00 +0000")
        assert result.day == 1

    def test_resolve_date_sentinel(self):
        """Test empty input yields MIN_DATE."""
        assert resolve_date("", "") == MIN_DATE

    def test_date_from_received_none(self):
        """Test Received text without a stamp yields None."""
        assert date_from_received("from a by b") is None
        assert date_from_received("") is None
