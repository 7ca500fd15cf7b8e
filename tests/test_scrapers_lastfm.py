"""
Tests for the Last.fm adapter.
"""

import requests

from music_ledger.models import ErrorKind
from music_ledger.scrapers import LastFmAdapter

from conftest import json_response


def top_artists(*names):
    return json_response({"topartists": {"artist": [{"name": n} for n in names]}})


def top_albums(*titles):
    return json_response(
        {"topalbums": {"album": [{"name": t, "url": f"https://www.last.fm/{t}"} for t in titles]}}
    )


def make_adapter(mock_session, governor, api_key="key", **kwargs):
    return LastFmAdapter(governor=governor, session=mock_session, api_key=api_key, **kwargs)


class TestLastFmAdapter:
    """Tests for LastFmAdapter."""

    def test_skips_without_api_key(self, mock_session, no_wait_governor, window):
        adapter = make_adapter(mock_session, no_wait_governor, api_key="")

        assert adapter.fetch(window) == []
        mock_session.get.assert_not_called()

    def test_fetches_albums_per_artist(self, mock_session, no_wait_governor, window):
        mock_session.get.side_effect = [
            top_artists("Destroyer", "Metz"),
            top_albums("Labyrinthitis", "(null)"),
            top_albums("Atlas Vending"),
        ]
        adapter = make_adapter(mock_session, no_wait_governor)

        results = adapter.fetch(window)
        releases = adapter.collect(results)

        assert [r.unit for r in results] == ["geo.gettopartists", "artist Destroyer", "artist Metz"]
        assert [(r.artist, r.title) for r in releases] == [
            ("Destroyer", "Labyrinthitis"),
            ("Metz", "Atlas Vending"),
        ]
        assert all(r.release_date == "" for r in releases)
        assert all(r.platforms == ["Last.fm"] for r in releases)

    def test_artist_failure_is_isolated(self, mock_session, no_wait_governor, window):
        mock_session.get.side_effect = [
            top_artists("Destroyer", "Metz"),
            requests.ConnectionError("reset"),
            top_albums("Atlas Vending"),
        ]
        adapter = make_adapter(mock_session, no_wait_governor)

        results = adapter.fetch(window)

        assert results[1].error.kind == ErrorKind.TRANSPORT
        assert [r.title for r in adapter.collect(results)] == ["Atlas Vending"]

    def test_api_error_payload_is_parse_failure(self, mock_session, no_wait_governor, window):
        mock_session.get.return_value = json_response({"error": 10, "message": "Invalid API key"})
        adapter = make_adapter(mock_session, no_wait_governor)

        results = adapter.fetch(window)

        assert len(results) == 1
        assert results[0].error.kind == ErrorKind.PARSE

    def test_denylisted_and_capped_artists(self, mock_session, no_wait_governor, window):
        mock_session.get.side_effect = [
            top_artists("Foo Fighters", "Destroyer", "Metz"),
            top_albums("Labyrinthitis"),
        ]
        adapter = make_adapter(mock_session, no_wait_governor, max_artists=2)

        results = adapter.fetch(window)

        assert [r.unit for r in results] == ["geo.gettopartists", "artist Destroyer"]

    def test_malformed_album_skipped_siblings_kept(self, mock_session, no_wait_governor, window):
        mock_session.get.side_effect = [
            top_artists("Feist"),
            json_response(
                {"topalbums": {"album": [{"name": "Metals"}, "garbage-record", {"name": "Pleasure"}]}}
            ),
        ]
        adapter = make_adapter(mock_session, no_wait_governor)

        results = adapter.fetch(window)

        assert all(r.ok for r in results)
        assert [r.title for r in adapter.collect(results)] == ["Metals", "Pleasure"]

    def test_malformed_artist_skipped(self, mock_session, no_wait_governor, window):
        mock_session.get.side_effect = [
            json_response({"topartists": {"artist": [None, {"name": "Feist"}]}}),
            top_albums("Metals"),
        ]
        adapter = make_adapter(mock_session, no_wait_governor)

        results = adapter.fetch(window)

        assert [r.unit for r in results] == ["geo.gettopartists", "artist Feist"]

    def test_single_album_object(self, mock_session, no_wait_governor, window):
        mock_session.get.side_effect = [
            json_response({"topartists": {"artist": {"name": "Feist"}}}),
            json_response({"topalbums": {"album": {"name": "Multitudes", "url": "https://www.last.fm/x"}}}),
        ]
        adapter = make_adapter(mock_session, no_wait_governor)

        releases = adapter.collect(adapter.fetch(window))

        assert [(r.artist, r.title) for r in releases] == [("Feist", "Multitudes")]
