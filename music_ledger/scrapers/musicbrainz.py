"""Adapter for the MusicBrainz release search API."""

from typing import List, Optional

from ..config import MB_BASE_URL, MB_MAX_RECORDS, MB_PAGE_SIZE, MB_USER_AGENT
from ..models import DateRange, ErrorKind, Release
from .base import BaseAdapter, UnitResults


class MusicBrainzAdapter(BaseAdapter):
    """Releases by artists whose country is Canada, paged by offset."""

    SOURCE_NAME = "MusicBrainz"
    RATE_LIMIT_KEY = "musicbrainz"
    USER_AGENT = MB_USER_AGENT
    RELEASE_URL = "https://musicbrainz.org/release/"

    def __init__(
        self, *args, max_records: int = MB_MAX_RECORDS, page_size: int = MB_PAGE_SIZE, **kwargs
    ):
        super().__init__(*args, **kwargs)
        self.max_records = max_records
        self.page_size = page_size

    def fetch(self, window: DateRange) -> UnitResults:
        """
        Page through the search results for the window.

        The total is read from the first page and capped at max_records;
        the last page only asks for what is left under the cap. A failed
        page or an unreadable total ends pagination, keeping the
        candidates already read.
        """
        results: UnitResults = []
        offset = 0
        total: Optional[int] = None
        query = f"artistcountry:CA AND date:[{window.start.isoformat()} TO {window.end.isoformat()}]"

        while total is None or offset < total:
            unit = f"offset {offset}"
            limit = min(self.page_size, (self.max_records if total is None else total) - offset)
            self.logger.info(f"  MB {unit}")
            page = {}
            result = self._run_unit(unit, self._fetch_search_page, query, offset, limit, window, page)
            results.append(result)
            if not result.ok:
                break

            if total is None:
                try:
                    total = min(int(page.get("count") or 0), self.max_records)
                except (TypeError, ValueError) as e:
                    results.append(self._failure(f"{unit} count", ErrorKind.PARSE, e))
                    break
                self.logger.info(f"  MB total (capped): {total}")

            batch_size = len(page.get("releases") or [])
            if not batch_size:
                break
            offset += batch_size

        self._validate_results(results)
        return results

    def _fetch_search_page(
        self, query: str, offset: int, limit: int, window: DateRange, page: dict
    ) -> List[Release]:
        """Fetch one page; the raw response is copied into ``page`` for paging."""
        data = self._fetch_json(
            f"{MB_BASE_URL}/release",
            params={
                "query": query,
                "limit": limit,
                "offset": offset,
                "fmt": "json",
            },
        )
        if not isinstance(data, dict):
            raise ValueError("unexpected search response shape")
        page.update(data)
        return self._parse_releases(data.get("releases") or [], window)

    def _parse_releases(self, raw_releases: list, window: DateRange) -> List[Release]:
        releases = []
        for raw in raw_releases:
            try:
                release = self._parse_release(raw, window)
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                self.logger.warning(f"  MB skip: {e}")
                continue
            if release:
                releases.append(release)
        return releases

    def _parse_release(self, raw: dict, window: DateRange) -> Optional[Release]:
        credits = raw.get("artist-credit") or []
        artist = self._credited_artist(credits)

        label_info = raw.get("label-info") or []
        label = ""
        if label_info and label_info[0].get("label"):
            label = label_info[0]["label"].get("name", "")

        release_group = raw.get("release-group") or {}
        tags = [t["name"] for t in raw.get("tags") or []]
        tags += [t["name"] for t in release_group.get("tags") or []]
        tags = list(dict.fromkeys(tags))

        return self._build_release(
            artist=artist,
            title=raw.get("title", ""),
            window=window,
            tags=tags,
            locality=self._locality(raw, credits),
            label=label,
            kind=release_group.get("primary-type", ""),
            release_date=raw.get("date", ""),
            source_url=f"{self.RELEASE_URL}{raw['id']}",
        )

    def _locality(self, raw: dict, credits: list) -> str:
        """Location of the release event, else of the first credited performer."""
        candidates = []
        events = raw.get("release-events") or []
        if events:
            candidates.append((events[0].get("area") or {}).get("name", ""))
        for credit in credits:
            if isinstance(credit, dict):
                performer = credit.get("artist") or {}
                candidates.append((performer.get("area") or {}).get("name", ""))
                candidates.append((performer.get("begin-area") or {}).get("name", ""))
                break

        for name in candidates:
            if name and name.strip().lower() != "canada":
                return name.strip()
        return ""

    @staticmethod
    def _credited_artist(credits: list) -> str:
        """Join artist-credit names with their join phrases ("A feat. B")."""
        parts = []
        for credit in credits:
            if isinstance(credit, str):
                parts.append(credit)
                continue
            name = credit.get("name") or (credit.get("artist") or {}).get("name", "")
            parts.append(name + credit.get("joinphrase", ""))
        return "".join(parts)
