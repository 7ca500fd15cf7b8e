"""Deduplication and merging of release candidates across sources."""

import logging
from datetime import date
from typing import Dict, List, Optional

from ..classification import DEFAULT_TABLES, ClassificationTables, normalize_text
from ..config import DAYS_BACK
from ..models import Release
from .age_filter import filter_by_age
from .merge_policy import MERGE_POLICIES, merge

logger = logging.getLogger(__name__)


def identity_key(release: Release) -> str:
    """
    Normalized artist + title.

    The release date is deliberately not part of the key, so the same
    release seen with and without a date still merges. Two different
    releases sharing a title by the same artist collapse into one.
    """
    return f"{normalize_text(release.artist)}||{normalize_text(release.title)}"


def sort_for_output(releases: List[Release]) -> List[Release]:
    """Newest first; undated releases last, in their existing order."""
    dated = [r for r in releases if r.parsed_date is not None]
    undated = [r for r in releases if r.parsed_date is None]
    dated.sort(key=lambda r: r.parsed_date, reverse=True)
    return dated + undated


class Reconciler:
    """Merge duplicate observations and admit releases inside the lookback window."""

    def __init__(
        self,
        tables: ClassificationTables = DEFAULT_TABLES,
        lookback_days: int = DAYS_BACK,
        policies=MERGE_POLICIES,
    ):
        self.tables = tables
        self.lookback_days = lookback_days
        self.policies = policies

    def reconcile(self, candidates: List[Release]) -> List[Release]:
        """
        Deduplicate candidates by identity key.

        Pure and deterministic: the first-seen record for a key keeps
        its position and its first-wins fields, so the result depends only
        on candidate order (adapter dispatch order, never arrival time).
        """
        merged: Dict[str, Release] = {}
        duplicates = 0

        for candidate in candidates:
            key = identity_key(candidate)
            if key in merged:
                merged[key] = merge(merged[key], candidate, self.policies, self.tables)
                duplicates += 1
            else:
                merged[key] = candidate.copy()

        reconciled = list(merged.values())
        multi_source = sum(1 for r in reconciled if len(r.platforms) > 1)
        logger.info(
            f"Deduplication: {len(candidates)} candidates -> {len(reconciled)} unique "
            f"({duplicates} merged, {multi_source} multi-source)"
        )
        return reconciled

    def run(self, candidates: List[Release], today: Optional[date] = None) -> List[Release]:
        """Age filter, deduplicate, and order for output."""
        admitted = filter_by_age(candidates, self.lookback_days, today)
        return sort_for_output(self.reconcile(admitted))
