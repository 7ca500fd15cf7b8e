"""Configuration for the Canadian music ledger build."""

import os
from pathlib import Path

from .errors import ConfigError


def env_int(name: str, default: int) -> int:
    """Read a positive integer from the environment."""
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {value}")
    return value


def env_float(name: str, default: float) -> float:
    """Read a non-negative number of seconds from the environment."""
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}")
    if value < 0:
        raise ConfigError(f"{name} must not be negative, got {value}")
    return value


# Output location - both artifacts are replaced wholesale every run
OUTPUT_DIR = Path(os.environ.get("LEDGER_OUTPUT_DIR", "data"))
RELEASES_FILE = "releases.json"
TALLY_FILE = "tally.json"

# Lookback window (days) for admitting dated releases
DAYS_BACK = env_int("LEDGER_DAYS_BACK", 60)

# Tally windows (days)
TALLY_WINDOWS = (7, 30)

# MusicBrainz requires an identifying client string
MB_USER_AGENT = os.environ.get(
    "MB_USER_AGENT",
    "CanadianMusicLedger/1.0.0 "
    "(https://github.com/canadian-music-ledger/canadian-music-ledger)",
)
MB_BASE_URL = "https://musicbrainz.org/ws/2"
MB_PAGE_SIZE = 100
MB_MAX_RECORDS = env_int("LEDGER_MB_MAX", 500)

# Last.fm is optional - the adapter skips itself without a key
LASTFM_API_KEY = os.environ.get("LASTFM_API_KEY", "").strip()
LASTFM_BASE_URL = "https://ws.audioscrobbler.com/2.0/"
LASTFM_MAX_ARTISTS = 50

# Hard per-request timeout (seconds)
REQUEST_TIMEOUT = env_float("LEDGER_REQUEST_TIMEOUT", 20.0)

# Rate limiting (seconds between requests to one source)
RATE_LIMITS = {
    "musicbrainz": env_float("LEDGER_MB_DELAY", 1.2),
    "bandcamp": 2.0,
    "itunes": 0.5,
    "lastfm": 0.25,
    "default": 2.0,
}

# Fixed delay after each scraped page load, instead of waiting for network idle
SCRAPE_SETTLE_DELAY = env_float("LEDGER_SCRAPE_SETTLE", 3.0)

# Cap on secondary genres kept per release
MAX_SECONDARY_GENRES = 3

# User agent for page scrapes
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)
