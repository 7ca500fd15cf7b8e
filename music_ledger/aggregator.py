"""Concurrent dispatch of source adapters."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from .models import DateRange, ErrorKind, FetchError, FetchResult, Release
from .scrapers import BaseAdapter

logger = logging.getLogger(__name__)


@dataclass
class AggregateResult:
    """Candidates from all adapters, concatenated in dispatch order."""

    candidates: List[Release] = field(default_factory=list)
    errors: List[FetchError] = field(default_factory=list)
    counts_by_source: Dict[str, int] = field(default_factory=dict)

    @property
    def empty_sources(self) -> List[str]:
        return [name for name, count in self.counts_by_source.items() if count == 0]


class Aggregator:
    """
    Run adapters concurrently and gather their candidates.

    Adapters use blocking HTTP, so each runs on a worker thread as its own
    asyncio task. Every adapter fills its own result list; lists are only
    concatenated after all tasks finish, in the order the adapters were
    given, which is the first-seen order the reconciler relies on.
    """

    def __init__(self, adapters: Sequence[BaseAdapter]):
        self.adapters = list(adapters)

    def run(self, window: DateRange) -> AggregateResult:
        return asyncio.run(self.gather(window))

    async def gather(self, window: DateRange) -> AggregateResult:
        tasks = [
            asyncio.create_task(self._run_adapter(adapter, window))
            for adapter in self.adapters
        ]
        per_adapter = await asyncio.gather(*tasks)

        result = AggregateResult()
        for adapter, unit_results in zip(self.adapters, per_adapter):
            releases = adapter.collect(unit_results)
            result.candidates.extend(releases)
            result.errors.extend(r.error for r in unit_results if not r.ok)
            result.counts_by_source[adapter.SOURCE_NAME] = len(releases)
            logger.info(f"  {adapter.SOURCE_NAME}: {len(releases)} releases")

        return result

    async def _run_adapter(
        self, adapter: BaseAdapter, window: DateRange
    ) -> List[FetchResult[List[Release]]]:
        """Run one adapter; a failure of the whole adapter becomes one error result."""
        logger.info(f"Fetching {adapter.SOURCE_NAME}...")
        try:
            return await asyncio.to_thread(adapter.fetch, window)
        except Exception as e:
            logger.error(f"{adapter.SOURCE_NAME} failed: {e}")
            error = FetchError(adapter.SOURCE_NAME, "adapter", ErrorKind.ADAPTER, str(e))
            return [FetchResult.failure(error)]
