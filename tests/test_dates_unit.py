"""Unit tests for timestamp selection and formatting."""

from datetime import UTC, datetime, timedelta, timezone

from amazon_rss.dates import RFC1123Z, any_time_format


class TestAnyTimeFormatUnit:
    """Unit tests for any_time_format."""

    def test_numeric_zone_is_kept(self):
        """RFC1123Z keeps the source offset rather than converting to GMT."""
        mountain = timezone(timedelta(hours=-7))
        created = datetime(2006, 1, 2, 15, 4, 5, tzinfo=mountain)

        assert any_time_format(RFC1123Z, created) == "Mon, 02 Jan 2006 15:04:05 -0700"

    def test_utc_renders_plus_zero(self):
        """UTC timestamps render with a +0000 offset."""
        created = datetime(2024, 1, 1, 10, 0, 0, tzinfo=UTC)

        assert any_time_format(RFC1123Z, created) == "Mon, 01 Jan 2024 10:00:00 +0000"

    def test_naive_datetime_is_taken_as_utc(self):
        """Naive timestamps are formatted as UTC."""
        created = datetime(2024, 1, 1, 10, 0, 0)

        assert any_time_format(RFC1123Z, created) == "Mon, 01 Jan 2024 10:00:00 +0000"

    def test_first_present_candidate_wins(self):
        """The first candidate that is not None is formatted."""
        created = datetime(2024, 1, 1, tzinfo=UTC)
        updated = datetime(2024, 2, 1, tzinfo=UTC)

        assert any_time_format(RFC1123Z, created, updated) == (
            "Mon, 01 Jan 2024 00:00:00 +0000"
        )
        assert any_time_format(RFC1123Z, None, updated) == (
            "Thu, 01 Feb 2024 00:00:00 +0000"
        )

    def test_all_absent_gives_empty_string(self):
        """No present candidate gives an empty string."""
        assert any_time_format(RFC1123Z) == ""
        assert any_time_format(RFC1123Z, None) == ""
        assert any_time_format(RFC1123Z, None, None) == ""

    def test_other_layouts_use_strftime(self):
        """Layouts other than RFC1123Z go through strftime."""
        updated = datetime(2006, 1, 2, 15, 4, 5, tzinfo=UTC)

        assert any_time_format("%Y-%m-%d", None, updated) == "2006-01-02"
