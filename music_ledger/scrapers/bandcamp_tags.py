"""Scraper for Bandcamp location tag pages."""

import re
from typing import List, NamedTuple, Optional

from bs4 import BeautifulSoup
from playwright.sync_api import Error as PlaywrightError

from ..config import SCRAPE_SETTLE_DELAY
from ..models import DateRange, ErrorKind, Release
from .base import BaseAdapter, StructureChangedError, UnitResults
from .rate_limiter import PolitenessGovernor
from .renderer import PageRenderer


class TagTarget(NamedTuple):
    tag: str
    locality: Optional[str] = None


class BandcampTagAdapter(BaseAdapter):
    """
    Scraper for Bandcamp tag pages (new releases under Canadian place tags).

    Tag pages fill their release grid with scripts, so they are loaded in
    a headless browser. Tag pages expose no release dates, so every
    candidate is undated. Targets are loaded one after another over the
    one shared browser page.
    """

    SOURCE_NAME = "Bandcamp"
    BASE_URL = "https://bandcamp.com/tag/"
    RATE_LIMIT_KEY = "bandcamp"
    TRANSPORT_ERRORS = BaseAdapter.TRANSPORT_ERRORS + (PlaywrightError,)

    TARGETS = [
        TagTarget("toronto", "Toronto"),
        TagTarget("montreal", "Montreal"),
        TagTarget("vancouver", "Vancouver"),
        TagTarget("calgary", "Calgary"),
        TagTarget("edmonton", "Edmonton"),
        TagTarget("winnipeg", "Winnipeg"),
        TagTarget("ottawa", "Ottawa"),
        TagTarget("halifax", "Halifax"),
        TagTarget("quebec"),
        TagTarget("nova-scotia"),
        TagTarget("canada"),
        TagTarget("canadian"),
    ]

    # Card layout used by the tag page grid
    PRIMARY_SELECTOR = "li.results-grid-item, div.discover-item"
    TITLE_SELECTOR = ".title, .item-title"
    ARTIST_SELECTOR = ".artist, .item-artist"
    GENRE_SELECTOR = ".genre, .item-genre"

    # Bare album/track links, used when the grid markup is not found
    FALLBACK_SELECTOR = "a[href*='/album/'], a[href*='/track/']"

    LINK_PATTERN = re.compile(r"https?://([^./]+)\.bandcamp\.com/(album|track)/([^/?#]+)")

    def __init__(
        self,
        *args,
        targets: Optional[List[TagTarget]] = None,
        renderer: Optional[PageRenderer] = None,
        **kwargs,
    ):
        kwargs.setdefault(
            "governor",
            PolitenessGovernor.for_source(self.RATE_LIMIT_KEY, settle_delay=SCRAPE_SETTLE_DELAY),
        )
        super().__init__(*args, **kwargs)
        self.targets = list(targets) if targets is not None else list(self.TARGETS)
        self.renderer = renderer or PageRenderer(self.USER_AGENT)

    def fetch(self, window: DateRange) -> UnitResults:
        """Scrape each tag target in declared order."""
        try:
            self.renderer.start()
        except PlaywrightError as e:
            failed = [self._failure("browser", ErrorKind.TRANSPORT, e)]
            self._validate_results(failed)
            return failed

        results: UnitResults = []
        try:
            for target in self.targets:
                self.logger.info(f"  Bandcamp tag: {target.tag}")
                results.append(
                    self._run_unit(f"tag {target.tag}", self._scrape_target, target, window)
                )
        finally:
            self.renderer.close()

        self._validate_results(results)
        return results

    def _fetch_page(self, url: str) -> BeautifulSoup:
        """Render a page with a hard navigation timeout and the fixed settle delay."""
        self.governor.wait()
        self.logger.debug(f"Rendering: {url}")
        html = self.renderer.render(url, self.governor.timeout, settle=self.governor.settle)
        return BeautifulSoup(html, "lxml")

    def _scrape_target(self, target: TagTarget, window: DateRange) -> List[Release]:
        soup = self._fetch_page(f"{self.BASE_URL}{target.tag}?tab=all_releases")
        region = self._target_region(target)

        cards = self._find_cards(soup)
        releases = []
        for card in cards:
            try:
                release = self._parse_card(card, target, region, window)
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                self.logger.debug(f"Failed to parse card: {e}")
                continue
            if release:
                releases.append(release)
        return releases

    def _target_region(self, target: TagTarget) -> str:
        """Region from the target's known locality, else from the tag text."""
        if target.locality:
            region = self.tables.infer_region(target.locality)
            if region:
                return region
        return self.tables.infer_region(target.tag.replace("-", " "))

    def _find_cards(self, soup: BeautifulSoup) -> List:
        items = soup.select(self.PRIMARY_SELECTOR)
        if items:
            self.logger.debug(f"Found {len(items)} cards with primary selector")
            return items

        items = soup.select(self.FALLBACK_SELECTOR)
        if items:
            self.logger.debug(f"Found {len(items)} links with fallback selector")
            return items

        raise StructureChangedError("no release cards found with either selector")

    def _parse_card(
        self, card, target: TagTarget, region: str, window: DateRange
    ) -> Optional[Release]:
        link = card if card.name == "a" else card.select_one("a[href]")
        url = link.get("href", "") if link else ""
        url = url.split("?")[0]

        title = self._safe_extract_text(card, self.TITLE_SELECTOR)
        artist = self._safe_extract_text(card, self.ARTIST_SELECTOR)
        genre = self._safe_extract_text(card, self.GENRE_SELECTOR)

        if not (title and artist) and link is not None:
            title, artist = self._names_from_link(link, url, title, artist)

        artist = re.sub(r"^by\s+", "", artist or "", flags=re.IGNORECASE).strip()
        if not title or not artist:
            return None

        kind = ""
        if "/album/" in url:
            kind = "Album"
        elif "/track/" in url:
            kind = "Single"

        return self._build_release(
            artist=artist,
            title=title,
            window=window,
            tags=[t for t in re.split(r"[/,]", genre) if t.strip()],
            locality=target.locality or "",
            region=region,
            kind=kind,
            source_url=url,
        )

    def _names_from_link(self, link, url: str, title: str, artist: str) -> tuple:
        """Recover title and artist from link text ("Title by Artist") or the URL slugs."""
        text = link.get_text(" ", strip=True)
        if " by " in text:
            link_title, link_artist = text.rsplit(" by ", 1)
            return title or link_title.strip(), artist or link_artist.strip()

        match = self.LINK_PATTERN.search(url)
        if match:
            slug_artist = match.group(1).replace("-", " ").title()
            slug_title = match.group(3).replace("-", " ").title()
            return title or text or slug_title, artist or slug_artist
        return title, artist
