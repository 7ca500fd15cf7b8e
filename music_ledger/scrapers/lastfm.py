"""Adapter for Last.fm top Canadian artists and their albums."""

from typing import List, Optional

from ..config import LASTFM_API_KEY, LASTFM_BASE_URL, LASTFM_MAX_ARTISTS
from ..models import DateRange, Release
from .base import BaseAdapter, UnitResults


class LastFmAdapter(BaseAdapter):
    """
    Albums by the most-listened Canadian artists on Last.fm.

    Needs an API key; without one the adapter does nothing. Last.fm
    does not expose release dates here, so every candidate is undated.
    """

    SOURCE_NAME = "Last.fm"
    RATE_LIMIT_KEY = "lastfm"

    def __init__(
        self,
        *args,
        api_key: str = LASTFM_API_KEY,
        max_artists: int = LASTFM_MAX_ARTISTS,
        **kwargs,
    ):
        super().__init__(*args, **kwargs)
        self.api_key = api_key
        self.max_artists = max_artists

    def fetch(self, window: DateRange) -> UnitResults:
        if not self.api_key:
            self.logger.info("Last.fm: no API key, skipping")
            return []

        artists: List[str] = []
        results: UnitResults = [
            self._run_unit("geo.gettopartists", self._fetch_top_artists, artists)
        ]
        if not results[0].ok:
            return results

        self.logger.info(f"  Last.fm artists: {len(artists)}")
        for name in artists[: self.max_artists]:
            if self.tables.is_denylisted(name):
                continue
            results.append(
                self._run_unit(f"artist {name}", self._fetch_artist_albums, name, window)
            )

        self._validate_results(results)
        return results

    def _call(self, method: str, **params) -> dict:
        params.update({"method": method, "api_key": self.api_key, "format": "json"})
        data = self._fetch_json(LASTFM_BASE_URL, params=params)
        if "error" in data:
            raise ValueError(f"Last.fm error {data['error']}: {data.get('message', '')}")
        return data

    def _fetch_top_artists(self, artists: List[str]) -> List[Release]:
        """Fill ``artists`` with artist names; produces no releases itself."""
        data = self._call("geo.gettopartists", country="Canada", limit=100)
        for artist in _as_list((data.get("topartists") or {}).get("artist")):
            try:
                name = (artist.get("name") or "").strip()
            except AttributeError as e:
                self.logger.warning(f"  Last.fm artist skip: {e}")
                continue
            if name:
                artists.append(name)
        return []

    def _fetch_artist_albums(self, artist: str, window: DateRange) -> List[Release]:
        data = self._call("artist.gettopalbums", artist=artist, limit=5)
        releases = []
        for album in _as_list((data.get("topalbums") or {}).get("album")):
            try:
                release = self._parse_album(artist, album, window)
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                self.logger.warning(f"  Last.fm album skip: {e}")
                continue
            if release:
                releases.append(release)
        return releases

    def _parse_album(self, artist: str, album: dict, window: DateRange) -> Optional[Release]:
        title = (album.get("name") or "").strip()
        if not title or title == "(null)":
            return None
        return self._build_release(
            artist=artist,
            title=title,
            window=window,
            kind="Album",
            source_url=album.get("url", ""),
        )


def _as_list(value) -> list:
    # A single artist or album comes back as an object, not a list
    if isinstance(value, dict):
        return [value]
    return value or []
