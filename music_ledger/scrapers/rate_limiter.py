"""Fixed-delay request pacing per external source."""

import logging
import threading
import time
from typing import Callable

from ..config import RATE_LIMITS, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class PolitenessGovernor:
    """
    Serialize requests to one source at a minimum interval.

    This is strict pacing with no burst capacity: every permitted request
    starts at least ``min_interval`` seconds after the previous one. The
    hard ``timeout`` is what callers pass to each HTTP request, and
    ``settle_delay`` is the fixed pause taken after a page load.
    """

    def __init__(
        self,
        min_interval: float,
        timeout: float = REQUEST_TIMEOUT,
        settle_delay: float = 0.0,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.min_interval = min_interval
        self.timeout = timeout
        self.settle_delay = settle_delay
        self._clock = clock
        self._sleep = sleep
        self._lock = threading.Lock()
        self._last_request_time = None

    @classmethod
    def for_source(cls, key: str, **kwargs) -> "PolitenessGovernor":
        """Build a governor using the configured interval for a source."""
        interval = RATE_LIMITS.get(key, RATE_LIMITS["default"])
        return cls(interval, **kwargs)

    def wait(self):
        """Block until the next request to this source is allowed."""
        with self._lock:
            if self._last_request_time is not None:
                elapsed = self._clock() - self._last_request_time
                if elapsed < self.min_interval:
                    delay = self.min_interval - elapsed
                    logger.debug(f"Pacing: sleeping {delay:.2f}s")
                    self._sleep(delay)
            self._last_request_time = self._clock()

    def settle(self):
        """Take the fixed settle delay after a page load."""
        if self.settle_delay > 0:
            self._sleep(self.settle_delay)
