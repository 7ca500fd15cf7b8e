from .base import BaseAdapter, ScraperError, StructureChangedError
from .bandcamp_tags import BandcampTagAdapter, TagTarget
from .itunes_feed import ITunesFeedAdapter
from .lastfm import LastFmAdapter
from .musicbrainz import MusicBrainzAdapter
from .rate_limiter import PolitenessGovernor
from .renderer import PageRenderer

__all__ = [
    "BaseAdapter",
    "ScraperError",
    "StructureChangedError",
    "BandcampTagAdapter",
    "TagTarget",
    "ITunesFeedAdapter",
    "LastFmAdapter",
    "MusicBrainzAdapter",
    "PolitenessGovernor",
    "PageRenderer",
]
