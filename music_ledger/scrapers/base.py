"""Base adapter class with common functionality."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, List, Optional, Tuple, Type

import requests

from ..classification import DEFAULT_TABLES, ClassificationTables
from ..config import USER_AGENT
from ..errors import LedgerError
from ..models import DateRange, ErrorKind, FetchError, FetchResult, Release
from .rate_limiter import PolitenessGovernor

UnitResults = List[FetchResult[List[Release]]]


class ScraperError(LedgerError):
    """Base exception for adapter errors."""

    pass


class StructureChangedError(ScraperError):
    """Raised when expected HTML structure is not found."""

    pass


class BaseAdapter(ABC):
    """
    Abstract base class for all source adapters.

    Subclasses split their work into units (one page, tag, feed or
    artist) and run each through ``_run_unit`` so a failure only costs
    that unit. ``fetch`` never raises for per-unit problems.
    """

    SOURCE_NAME: str = ""
    RATE_LIMIT_KEY: str = "default"
    USER_AGENT: str = USER_AGENT
    TRANSPORT_ERRORS: Tuple[Type[Exception], ...] = (requests.RequestException,)

    def __init__(
        self,
        tables: ClassificationTables = DEFAULT_TABLES,
        governor: Optional[PolitenessGovernor] = None,
        session: Optional[requests.Session] = None,
    ):
        self.tables = tables
        self.governor = governor or PolitenessGovernor.for_source(self.RATE_LIMIT_KEY)
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": self.USER_AGENT})
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def fetch(self, window: DateRange) -> UnitResults:
        """Fetch candidate releases, one result per unit of work."""
        pass

    @staticmethod
    def collect(results: Iterable[FetchResult[List[Release]]]) -> List[Release]:
        """Flatten the successful units into one candidate list."""
        releases: List[Release] = []
        for result in results:
            if result.ok and result.value:
                releases.extend(result.value)
        return releases

    def _get(self, url: str, params: Optional[dict] = None) -> requests.Response:
        """Paced GET with the hard timeout; raises on non-success status."""
        self.governor.wait()
        self.logger.debug(f"Fetching: {url} {params or ''}")
        response = self.session.get(url, params=params, timeout=self.governor.timeout)
        response.raise_for_status()
        return response

    def _fetch_json(self, url: str, params: Optional[dict] = None) -> Any:
        return self._get(url, params).json()

    def _run_unit(self, unit: str, func: Callable[..., List[Release]], *args) -> FetchResult:
        """Run one unit of work, turning its failure into a FetchError."""
        try:
            value = func(*args)
        except requests.exceptions.JSONDecodeError as e:
            return self._failure(unit, ErrorKind.PARSE, e)
        except self.TRANSPORT_ERRORS as e:
            return self._failure(unit, ErrorKind.TRANSPORT, e)
        except (ScraperError, KeyError, TypeError, ValueError, AttributeError) as e:
            return self._failure(unit, ErrorKind.PARSE, e)
        self.logger.debug(f"{unit}: {len(value)} candidates")
        return FetchResult.success(unit, value)

    def _failure(self, unit: str, kind: ErrorKind, exc: Exception) -> FetchResult:
        error = FetchError(self.SOURCE_NAME, unit, kind, str(exc) or exc.__class__.__name__)
        self.logger.error(f"Failed {unit}: {error.message}")
        return FetchResult.failure(error)

    def _build_release(
        self,
        artist: str,
        title: str,
        window: DateRange,
        tags: Iterable[str] = (),
        locality: str = "",
        label: str = "",
        kind: str = "",
        release_date: str = "",
        source_url: str = "",
        region: Optional[str] = None,
    ) -> Optional[Release]:
        """Map source fields into a Release, applying the classification tables."""
        if self.tables.is_denylisted(artist):
            self.logger.debug(f"Denylisted artist skipped: {artist}")
            return None

        primary, secondary = self.tables.genres_from_tags(tags)
        label = (label or "").strip()
        return Release(
            artist=artist,
            title=title,
            platforms=[self.SOURCE_NAME],
            source_url=source_url,
            artist_region=region if region is not None else self.tables.infer_region(locality),
            artist_locality=locality,
            release_kind=self.tables.normalize_kind(kind),
            release_date=release_date,
            primary_genre=primary,
            secondary_genres=secondary,
            label=label,
            is_independent=self.tables.is_independent(label),
            observed_at=window.end.isoformat(),
        )

    def _safe_extract_text(self, element, selector: str, default: str = "") -> str:
        """Safely extract text from an element using CSS selector."""
        if element is None:
            return default
        found = element.select_one(selector)
        if found:
            return found.get_text(strip=True)
        return default

    def _validate_results(self, results: UnitResults) -> bool:
        """Warn when a whole adapter came back empty."""
        if not self.collect(results):
            self.logger.warning(
                f"{self.SOURCE_NAME}: No results found - source may have changed"
            )
            return False
        return True
