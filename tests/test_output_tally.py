"""
Tests for the tally engine.
"""

from unittest.mock import patch

from music_ledger.output import compute_tally

from conftest import NOW, days_ago


class TestComputeTally:
    """Tests for compute_tally."""

    def test_twenty_record_scenario(self, make_release):
        releases = []
        for i in range(20):
            age = [0, 3, 6][i] if i < 3 else 8 + i
            releases.append(
                make_release(
                    title=f"Release {i}",
                    release_date=days_ago(age),
                    label="" if i < 12 else "Arts & Crafts",
                    is_independent=i < 12,
                )
            )

        tally = compute_tally(releases, NOW).to_dict()

        assert tally["total_releases_last_7_days"] == 3
        assert tally["total_releases_last_30_days"] == 20
        assert tally["independent_count"] == 12
        assert tally["label_count"] == 8

    def test_undated_records_excluded_from_windows(self, make_release):
        releases = [make_release(title="Undated", release_date=""), make_release(title="Odd", release_date="2026")]

        tally = compute_tally(releases, NOW)

        assert tally.total_releases_last_7_days == 0
        assert tally.total_releases_last_30_days == 0
        assert tally.by_genre == {}
        assert tally.independent_count == 0
        assert tally.label_count == 0

    def test_breakdowns_cover_thirty_day_subset_only(self, make_release):
        releases = [
            make_release(title="A", release_date=days_ago(1), primary_genre="Rock", artist_region="ON"),
            make_release(title="B", release_date=days_ago(10), primary_genre="Rock", artist_region="QC"),
            make_release(title="C", release_date=days_ago(29), primary_genre="Jazz", artist_region=""),
            make_release(title="D", release_date=days_ago(45), primary_genre="Folk", artist_region="BC"),
        ]

        tally = compute_tally(releases, NOW)

        assert tally.by_genre == {"Rock": 2, "Jazz": 1}
        assert tally.by_province == {"Ontario": 1, "Quebec": 1, "Unknown": 1}

    def test_window_boundaries(self, make_release):
        releases = [
            make_release(title="Edge7", release_date=days_ago(7)),
            make_release(title="Past7", release_date=days_ago(8)),
            make_release(title="Edge30", release_date=days_ago(30)),
            make_release(title="Past30", release_date=days_ago(31)),
        ]

        tally = compute_tally(releases, NOW)

        assert tally.total_releases_last_7_days == 1
        assert tally.total_releases_last_30_days == 3

    def test_unmapped_region_is_unknown(self, make_release):
        releases = [make_release(release_date=days_ago(1), artist_region="ZZ")]
        assert compute_tally(releases, NOW).by_province == {"Unknown": 1}

    def test_generated_at(self):
        assert compute_tally([], NOW).generated_at == NOW.isoformat()

    def test_windows_follow_configuration(self, make_release):
        releases = [
            make_release(title="Today", release_date=days_ago(0)),
            make_release(title="Five", release_date=days_ago(5)),
            make_release(title="Twelve", release_date=days_ago(12)),
        ]

        with patch("music_ledger.output.tally.TALLY_WINDOWS", (1, 10)):
            tally = compute_tally(releases, NOW)

        assert tally.total_releases_last_7_days == 1
        assert tally.total_releases_last_30_days == 2
        assert sum(tally.by_genre.values()) == 2
