"""Windowed counts and cross-tabulations over reconciled releases."""

import logging
from collections import Counter
from datetime import date, datetime, timedelta, timezone
from typing import List, Optional

from ..classification import DEFAULT_TABLES, OTHER, ClassificationTables
from ..config import TALLY_WINDOWS
from ..models import Release, Tally

logger = logging.getLogger(__name__)


def in_window(release: Release, cutoff: date) -> bool:
    """Only parseable dates on or after the cutoff count; undated never do."""
    parsed = release.parsed_date
    return parsed is not None and parsed >= cutoff


def compute_tally(
    releases: List[Release],
    now: Optional[datetime] = None,
    tables: ClassificationTables = DEFAULT_TABLES,
) -> Tally:
    """
    Recompute the tally from scratch.

    Genre, region and independent/label breakdowns cover the longer
    (30-day) window only.
    """
    now = now or datetime.now(timezone.utc)
    today = now.date()
    short_days, long_days = TALLY_WINDOWS
    short_window = [r for r in releases if in_window(r, today - timedelta(days=short_days))]
    long_window = [r for r in releases if in_window(r, today - timedelta(days=long_days))]

    by_genre = Counter(r.primary_genre or OTHER for r in long_window)
    by_province = Counter(tables.region_name(r.artist_region) for r in long_window)
    independent = sum(1 for r in long_window if r.is_independent)

    tally = Tally(
        generated_at=now.isoformat(),
        total_releases_last_7_days=len(short_window),
        total_releases_last_30_days=len(long_window),
        by_genre=dict(by_genre.most_common()),
        by_province=dict(by_province.most_common()),
        independent_count=independent,
        label_count=len(long_window) - independent,
    )
    logger.info(f"7-day: {tally.total_releases_last_7_days}")
    logger.info(f"30-day: {tally.total_releases_last_30_days}")
    return tally
