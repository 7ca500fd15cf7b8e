"""Data model for release records."""

from dataclasses import dataclass, field, replace
from datetime import date, timedelta
from typing import Any, Dict, List, Optional

from ..classification import OTHER

COUNTRY_CODE = "CA"


def parse_date(value: Optional[str]) -> Optional[date]:
    """
    Parse the leading YYYY-MM-DD of a date string.

    Partial dates ("2024", "2024-05") and garbage return None.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        return None


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar window handed to adapters."""

    start: date
    end: date

    @classmethod
    def lookback(cls, days: int, today: Optional[date] = None) -> "DateRange":
        today = today or date.today()
        return cls(start=today - timedelta(days=days), end=today)

    def __contains__(self, day: date) -> bool:
        return self.start <= day <= self.end


@dataclass
class Release:
    """A release observation, either a candidate or reconciled record."""

    artist: str
    title: str
    platforms: List[str]
    source_url: str = ""
    artist_region: str = ""
    artist_locality: str = ""
    artist_country: str = COUNTRY_CODE
    release_kind: str = "Unknown"
    release_date: str = ""
    primary_genre: str = OTHER
    secondary_genres: List[str] = field(default_factory=list)
    label: str = ""
    is_independent: bool = True
    observed_at: str = ""

    def __post_init__(self):
        self.artist = (self.artist or "").strip()
        self.title = (self.title or "").strip()
        if not self.artist or not self.title:
            raise ValueError("Release requires both artist and title")
        if not self.primary_genre:
            self.primary_genre = OTHER
        self.platforms = list(dict.fromkeys(self.platforms))
        self.secondary_genres = [
            g for g in dict.fromkeys(self.secondary_genres)
            if g != OTHER and g != self.primary_genre
        ]
        if not self.observed_at:
            self.observed_at = date.today().isoformat()

    @property
    def parsed_date(self) -> Optional[date]:
        return parse_date(self.release_date)

    def copy(self, **changes) -> "Release":
        """Create a copy of this release, optionally with changed fields."""
        changes.setdefault("platforms", list(self.platforms))
        changes.setdefault("secondary_genres", list(self.secondary_genres))
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the field names the dashboard reads."""
        return {
            "artist": self.artist,
            "artist_country": self.artist_country,
            "artist_city": self.artist_locality,
            "artist_province": self.artist_region,
            "release_title": self.title,
            "release_type": self.release_kind,
            "release_date": self.release_date,
            "primary_genre": self.primary_genre,
            "subgenres": list(self.secondary_genres),
            "platforms": list(self.platforms),
            "label": self.label,
            "independent": self.is_independent,
            "source_url": self.source_url,
            "date_added": self.observed_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Release":
        return cls(
            artist=data["artist"],
            title=data["release_title"],
            platforms=list(data.get("platforms") or []),
            source_url=data.get("source_url", ""),
            artist_region=data.get("artist_province", ""),
            artist_locality=data.get("artist_city", ""),
            artist_country=data.get("artist_country", COUNTRY_CODE),
            release_kind=data.get("release_type", "Unknown"),
            release_date=data.get("release_date", ""),
            primary_genre=data.get("primary_genre", OTHER),
            secondary_genres=list(data.get("subgenres") or []),
            label=data.get("label", ""),
            is_independent=bool(data.get("independent", True)),
            observed_at=data.get("date_added", ""),
        )
