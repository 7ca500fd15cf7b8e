"""Lookup mechanism over the static classification tables."""

from dataclasses import dataclass, field
from typing import Iterable, List, Mapping, Optional, Tuple

from ..config import MAX_SECONDARY_GENRES
from .genres import GENRE_MAP, OTHER
from .labels import ARTIST_DENYLIST, NO_LABEL_SYNONYMS, RELEASE_KINDS, UNKNOWN_KIND
from .regions import CITY_TO_REGION, REGION_NAMES, UNKNOWN_REGION


def normalize_text(value: Optional[str]) -> str:
    """Lowercase, trim and collapse internal whitespace."""
    if not value:
        return ""
    return " ".join(value.lower().split())


@dataclass(frozen=True)
class ClassificationTables:
    """
    Read-only genre, region and label lookups.

    Built once per run and handed to every adapter and to the reconciler,
    so concurrent adapters only ever read from it.
    """

    genre_map: Mapping[str, str] = field(default_factory=lambda: GENRE_MAP)
    city_to_region: Mapping[str, str] = field(default_factory=lambda: CITY_TO_REGION)
    region_names: Mapping[str, str] = field(default_factory=lambda: REGION_NAMES)
    no_label_synonyms: frozenset = NO_LABEL_SYNONYMS
    artist_denylist: frozenset = ARTIST_DENYLIST
    max_secondary_genres: int = MAX_SECONDARY_GENRES

    def normalize_genre(self, raw: Optional[str]) -> str:
        """Map a free-text tag to its canonical genre, or Other."""
        return self.genre_map.get(normalize_text(raw), OTHER)

    def genres_from_tags(self, tags: Iterable[str]) -> Tuple[str, List[str]]:
        """
        Split source tags into a primary genre and secondary genres.

        The first tag decides the primary genre. The rest are mapped,
        stripped of Other and of the primary, deduplicated and capped.
        """
        tags = [t for t in tags if t and t.strip()]
        if not tags:
            return OTHER, []

        primary = self.normalize_genre(tags[0])
        secondary: List[str] = []
        for tag in tags[1:]:
            genre = self.normalize_genre(tag)
            if genre == OTHER or genre == primary or genre in secondary:
                continue
            secondary.append(genre)
            if len(secondary) >= self.max_secondary_genres:
                break
        return primary, secondary

    def infer_region(self, locality: Optional[str]) -> str:
        """Infer a province code from a city or locale name ('' if unknown)."""
        text = normalize_text(locality)
        if not text:
            return ""
        if text in self.city_to_region:
            return self.city_to_region[text]
        for city, region in self.city_to_region.items():
            if city in text:
                return region
        return ""

    def region_name(self, code: Optional[str]) -> str:
        """Display name for a region code."""
        if not code:
            return UNKNOWN_REGION
        return self.region_names.get(code.strip().upper(), UNKNOWN_REGION)

    def is_independent(self, label: Optional[str]) -> bool:
        return normalize_text(label) in self.no_label_synonyms

    def is_denylisted(self, artist: Optional[str]) -> bool:
        return normalize_text(artist) in self.artist_denylist

    def normalize_kind(self, raw: Optional[str]) -> str:
        """Map a source release type onto Album/Single/EP/Unknown."""
        if not raw or not raw.strip():
            return UNKNOWN_KIND
        return RELEASE_KINDS.get(normalize_text(raw), raw.strip())


DEFAULT_TABLES = ClassificationTables()
