"""Fetch, reconcile, tally and persist one ledger snapshot."""

import logging
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from .aggregator import Aggregator
from .classification import DEFAULT_TABLES, ClassificationTables
from .config import DAYS_BACK
from .filters import Reconciler
from .models import DateRange
from .output import ReleaseSink, compute_tally
from .scrapers import (
    BandcampTagAdapter,
    BaseAdapter,
    ITunesFeedAdapter,
    LastFmAdapter,
    MusicBrainzAdapter,
)

logger = logging.getLogger(__name__)


def default_adapters(tables: ClassificationTables = DEFAULT_TABLES) -> List[BaseAdapter]:
    """Adapters in dispatch order: API, scrape, feeds."""
    return [
        MusicBrainzAdapter(tables),
        BandcampTagAdapter(tables),
        ITunesFeedAdapter(tables),
        LastFmAdapter(tables),
    ]


def run_pipeline(
    adapters: Sequence[BaseAdapter],
    sink: ReleaseSink,
    now: Optional[datetime] = None,
    lookback_days: int = DAYS_BACK,
    tables: ClassificationTables = DEFAULT_TABLES,
):
    """
    Fetch, reconcile, tally and persist one snapshot.

    Returns the (releases, tally) that were written. Raises SinkError
    if the artifacts cannot be written.
    """
    now = now or datetime.now(timezone.utc)
    today = now.date()
    window = DateRange.lookback(lookback_days, today)

    logger.info("=" * 60)
    logger.info("Canadian Music Ledger - Build")
    logger.info(f"Lookback: {lookback_days} days from {today.isoformat()}")
    logger.info("=" * 60)

    # ========================================
    # Phase 1: Fetch all sources
    # ========================================
    logger.info("")
    logger.info("Phase 1: Fetching sources...")
    logger.info("-" * 40)

    aggregate = Aggregator(adapters).run(window)
    logger.info(f"Combined raw: {len(aggregate.candidates)}")

    if aggregate.errors:
        logger.warning(f"{len(aggregate.errors)} units failed this run:")
        for error in aggregate.errors:
            logger.warning(f"  {error}")

    if aggregate.empty_sources:
        logger.warning(f"WARNING: These sources returned no results: {aggregate.empty_sources}")
        logger.warning("Source structures may have changed - manual review needed")

    # ========================================
    # Phase 2: Reconcile
    # ========================================
    logger.info("")
    logger.info("Phase 2: Filtering and deduplicating...")
    logger.info("-" * 40)

    releases = Reconciler(tables, lookback_days).run(aggregate.candidates, today)
    logger.info(f"After dedup: {len(releases)}")

    if not releases:
        logger.warning("No releases survived reconciliation. Writing an empty snapshot.")

    # ========================================
    # Phase 3: Tally
    # ========================================
    logger.info("")
    logger.info("Phase 3: Computing tally...")
    logger.info("-" * 40)

    tally = compute_tally(releases, now, tables)

    # ========================================
    # Phase 4: Write output
    # ========================================
    logger.info("")
    logger.info("Phase 4: Writing output...")
    logger.info("-" * 40)

    sink.write(releases, tally)

    logger.info("")
    logger.info("=" * 60)
    logger.info(f"Done. {len(releases)} releases written.")
    logger.info("=" * 60)
    return releases, tally
