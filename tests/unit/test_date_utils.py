"""Unit tests for date utilities."""
import pytest
from datetime import datetime, timezone
from src.utils.date_utils import format_timestamp, now_iso, parse_timestamp


class TestNowIso:
    """Test current timestamp generation."""

    def test_now_iso_is_parseable(self):
        """Test now_iso returns ISO 8601 with offset."""
        value = now_iso()
        parsed = datetime.fromisoformat(value)
        assert "T" in value
        assert parsed.tzinfo is not None


class TestParseTimestamp:
    """Test timestamp parsing."""

    def test_parse_with_offset(self):
        """Test offset timestamps keep their offset."""
        result = parse_timestamp("2025-10-28T14:00:10+08:00")
        assert result.hour == 14
        assert result.utcoffset().total_seconds() == 8 * 3600

    def test_parse_z_suffix(self):
        """Test trailing Z is read as UTC."""
        result = parse_timestamp("2025-10-28T06:00:10Z")
        assert result.tzinfo is not None
        assert result.utcoffset().total_seconds() == 0

    def test_naive_timestamp_assumed_utc(self):
        """Test naive timestamps become UTC-aware."""
        result = parse_timestamp("2025-10-28T06:00:10")
        assert result.tzinfo == timezone.utc

    def test_offsets_compare_by_instant(self):
        """Test timestamps with different offsets order by real time."""
        earlier = parse_timestamp("2025-10-28T14:00:00+08:00")  # 06:00 UTC
        later = parse_timestamp("2025-10-28T07:00:00+00:00")
        assert earlier < later

    def test_invalid_timestamp_raises_error(self):
        """Test invalid format raises ValueError."""
        with pytest.raises(ValueError, match="Invalid timestamp format"):
            parse_timestamp("yesterday")

    def test_non_string_raises_error(self):
        """Test non-string input raises ValueError."""
        with pytest.raises(ValueError):
            parse_timestamp(None)


class TestFormatTimestamp:
    """Test timestamp display formatting."""

    def test_format_uses_requested_pattern(self):
        """Test output follows the given strftime format."""
        result = format_timestamp("2025-10-28T14:00:10+00:00", "%Y")
        assert result == "2025"

    def test_invalid_timestamp_returned_as_is(self):
        """Test unparseable input is shown raw."""
        assert format_timestamp("not a date") == "not a date"

    def test_empty_timestamp(self):
        """Test empty input gives empty output."""
        assert format_timestamp("") == ""
