"""Tests for common.datetime module."""

from datetime import date, datetime, timedelta, timezone

from common.datetime import parse_datetime, to_iso


class TestParseDatetime:
    def test_rfc3339_with_offset(self) -> None:
        result = parse_datetime("2024-05-01T10:00:00-07:00")
        assert result == datetime(2024, 5, 1, 10, 0, tzinfo=timezone(timedelta(hours=-7)))

    def test_zulu_suffix(self) -> None:
        result = parse_datetime("2024-05-01T17:00:00Z")
        assert result.tzinfo == timezone.utc

    def test_date_only(self) -> None:
        assert parse_datetime("2024-05-01") == datetime(2024, 5, 1)

    def test_date_object(self) -> None:
        assert parse_datetime(date(2024, 5, 1)) == datetime(2024, 5, 1)

    def test_missing(self) -> None:
        assert parse_datetime(None) is None
        assert parse_datetime("") is None

    def test_unparseable(self) -> None:
        assert parse_datetime("sometime next week") is None


class TestToIso:
    def test_keeps_offset(self) -> None:
        assert to_iso("2024-05-01T10:00:00-07:00") == "2024-05-01T10:00:00-07:00"

    def test_unparseable_is_none(self) -> None:
        assert to_iso("TBD") is None
