"""Lookback-window admission filter."""

import logging
from datetime import date, timedelta
from typing import List, Optional

from ..models import Release

logger = logging.getLogger(__name__)


def passes_age_filter(release: Release, cutoff: date) -> bool:
    """
    Undated and unparseable dates pass (assume recent); dated
    releases pass iff they are on or after the cutoff.
    """
    if not release.release_date:
        return True
    parsed = release.parsed_date
    if parsed is None:
        return True
    return parsed >= cutoff


def filter_by_age(
    releases: List[Release], lookback_days: int, today: Optional[date] = None
) -> List[Release]:
    """Keep releases inside the lookback window."""
    today = today or date.today()
    cutoff = today - timedelta(days=lookback_days)
    kept = [r for r in releases if passes_age_filter(r, cutoff)]
    logger.info(
        f"Age filter ({lookback_days} days, cutoff {cutoff.isoformat()}): "
        f"{len(releases)} -> {len(kept)}"
    )
    return kept
