"""Adapter for the iTunes Canada RSS JSON feeds."""

from typing import List, Optional

from ..models import DateRange, Release
from .base import BaseAdapter, UnitResults


class ITunesFeedAdapter(BaseAdapter):
    """Top albums and new music from the Canadian iTunes store feeds."""

    SOURCE_NAME = "iTunes"
    RATE_LIMIT_KEY = "itunes"

    FEEDS = [
        "https://itunes.apple.com/ca/rss/topalbums/limit=100/json",
        "https://itunes.apple.com/ca/rss/newmusic/limit=100/json",
    ]

    def __init__(self, *args, feeds: Optional[List[str]] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.feeds = list(feeds) if feeds is not None else list(self.FEEDS)

    def fetch(self, window: DateRange) -> UnitResults:
        results: UnitResults = []
        for feed_url in self.feeds:
            results.append(self._run_unit(f"feed {feed_url}", self._fetch_feed, feed_url, window))
        self._validate_results(results)
        return results

    def _fetch_feed(self, feed_url: str, window: DateRange) -> List[Release]:
        data = self._fetch_json(feed_url)
        entries = (data.get("feed") or {}).get("entry") or []
        # A feed with a single entry comes back as an object, not a list
        if isinstance(entries, dict):
            entries = [entries]
        self.logger.info(f"  iTunes feed entries: {len(entries)}")

        releases = []
        for entry in entries:
            try:
                release = self._parse_entry(entry, window)
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                self.logger.warning(f"  iTunes skip: {e}")
                continue
            if release:
                releases.append(release)
        return releases

    def _parse_entry(self, entry: dict, window: DateRange) -> Optional[Release]:
        title = _label(entry.get("im:name"))
        artist = _label(entry.get("im:artist"))
        if not title or not artist:
            return None

        genre = _attribute(entry.get("category"), "label")
        release_date = _label(entry.get("im:releaseDate")).split("T")[0]

        link = entry.get("link")
        # Entries may carry several links; the first is the store page
        if isinstance(link, list):
            link = link[0] if link else {}

        return self._build_release(
            artist=artist,
            title=title,
            window=window,
            tags=[genre] if genre else [],
            kind="Album",
            release_date=release_date,
            source_url=_attribute(link, "href"),
        )


def _label(node) -> str:
    if isinstance(node, dict):
        return (node.get("label") or "").strip()
    return ""


def _attribute(node, name: str) -> str:
    if isinstance(node, dict):
        return ((node.get("attributes") or {}).get(name) or "").strip()
    return ""
