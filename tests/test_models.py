"""
Tests for the data models.
"""

from datetime import date

import pytest

from music_ledger.models import (
    DateRange,
    ErrorKind,
    FetchError,
    FetchResult,
    Release,
    Tally,
    parse_date,
)

from conftest import TODAY


class TestRelease:
    """Tests for the Release dataclass."""

    def test_requires_artist_and_title(self):
        with pytest.raises(ValueError):
            Release(artist="  ", title="Title", platforms=["iTunes"])
        with pytest.raises(ValueError):
            Release(artist="Artist", title="", platforms=["iTunes"])

    def test_defaults(self):
        release = Release(artist="Metz", title="Up on Gravity Hill", platforms=["MusicBrainz"])
        assert release.primary_genre == "Other"
        assert release.release_kind == "Unknown"
        assert release.artist_country == "CA"
        assert release.is_independent is True
        assert release.observed_at

    def test_secondary_genres_invariant(self):
        release = Release(
            artist="Suuns",
            title="Fiction",
            platforms=["Bandcamp"],
            primary_genre="Experimental",
            secondary_genres=["Other", "Experimental", "Rock", "Rock"],
        )
        assert release.secondary_genres == ["Rock"]

    def test_platforms_deduplicated_in_order(self, make_release):
        release = make_release(platforms=["Bandcamp", "MusicBrainz", "Bandcamp"])
        assert release.platforms == ["Bandcamp", "MusicBrainz"]

    def test_parsed_date(self, make_release):
        assert make_release(release_date="2026-10-01").parsed_date == date(2026, 10, 1)
        assert make_release(release_date="2026-10-01T00:00:00-07:00").parsed_date == date(2026, 10, 1)
        assert make_release(release_date="2026").parsed_date is None
        assert make_release(release_date="").parsed_date is None

    def test_copy_does_not_share_lists(self, make_release):
        original = make_release(platforms=["Bandcamp"])
        clone = original.copy()
        clone.platforms.append("iTunes")
        assert original.platforms == ["Bandcamp"]

    def test_to_dict_uses_dashboard_field_names(self, make_release):
        release = make_release(
            artist="Haviah Mighty",
            title="Full Circle",
            platforms=["Bandcamp"],
            artist_region="ON",
            artist_locality="Toronto",
            release_kind="Album",
            release_date="2026-10-18",
            primary_genre="Hip-Hop",
            source_url="https://bandcamp.com",
        )
        data = release.to_dict()
        assert set(data) == {
            "artist", "artist_country", "artist_city", "artist_province",
            "release_title", "release_type", "release_date", "primary_genre",
            "subgenres", "platforms", "label", "independent", "source_url",
            "date_added",
        }
        assert data["release_title"] == "Full Circle"
        assert data["artist_province"] == "ON"
        assert data["independent"] is True

    def test_from_dict_reads_to_dict(self, make_release):
        release = make_release(label="Arts & Crafts", is_independent=False, secondary_genres=["Rock"])
        assert Release.from_dict(release.to_dict()) == release


class TestDateRange:
    """Tests for DateRange."""

    def test_lookback(self):
        window = DateRange.lookback(60, TODAY)
        assert window.end == TODAY
        assert (window.end - window.start).days == 60

    def test_contains(self):
        window = DateRange(date(2026, 1, 1), date(2026, 1, 31))
        assert date(2026, 1, 15) in window
        assert date(2026, 2, 1) not in window


class TestFetchResult:
    """Tests for FetchResult/FetchError."""

    def test_success(self):
        result = FetchResult.success("page 1", [1, 2])
        assert result.ok
        assert result.value == [1, 2]

    def test_failure(self):
        error = FetchError("iTunes", "feed x", ErrorKind.TRANSPORT, "timed out")
        result = FetchResult.failure(error)
        assert not result.ok
        assert result.unit == "feed x"
        assert "transport" in str(error)


def test_parse_date_garbage():
    assert parse_date("not a date") is None
    assert parse_date(None) is None


def test_tally_to_dict_keys():
    tally = Tally(generated_at="2026-10-19T12:00:00+00:00")
    assert list(tally.to_dict()) == [
        "generated_at",
        "total_releases_last_7_days",
        "total_releases_last_30_days",
        "by_genre",
        "by_province",
        "independent_count",
        "label_count",
    ]
