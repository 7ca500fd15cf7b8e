"""Headless browser session for pages that build their content with scripts."""

import logging
from typing import Callable, Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from ..config import USER_AGENT

logger = logging.getLogger(__name__)


class PageRenderer:
    """
    One headless Chromium page, reused for every load in a run.

    The page is a single shared resource, so callers load targets one
    after another. Playwright's sync API must not be used from a thread
    running an event loop; the aggregator runs adapters on worker threads.
    """

    def __init__(self, user_agent: str = USER_AGENT):
        self.user_agent = user_agent
        self._playwright = None
        self._browser = None
        self._page = None

    def start(self):
        """Launch the browser. Raises PlaywrightError if it cannot start."""
        if self._page is not None:
            return
        logger.debug("Launching headless browser")
        self._playwright = sync_playwright().start()
        try:
            self._browser = self._playwright.chromium.launch(headless=True)
            self._page = self._browser.new_page(user_agent=self.user_agent)
        except PlaywrightError:
            self.close()
            raise

    def render(
        self, url: str, timeout: float, settle: Optional[Callable[[], None]] = None
    ) -> str:
        """
        Navigate to url and return the rendered HTML.

        ``timeout`` (seconds) bounds the navigation itself. ``settle`` runs
        between navigation and reading the DOM, giving page scripts a fixed
        amount of time instead of waiting for the network to go idle.
        """
        self.start()
        self._page.goto(url, timeout=timeout * 1000, wait_until="domcontentloaded")
        if settle:
            settle()
        return self._page.content()

    def close(self):
        if self._browser is not None:
            self._browser.close()
        if self._playwright is not None:
            self._playwright.stop()
        self._playwright = None
        self._browser = None
        self._page = None

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
