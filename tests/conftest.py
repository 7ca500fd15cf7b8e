"""
Pytest configuration and shared fixtures.
"""

import sys
from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from typing import Callable
from unittest.mock import Mock

import pytest
import requests

sys.path.insert(0, str(Path(__file__).parent.parent))

from music_ledger.classification import ClassificationTables
from music_ledger.models import DateRange, Release
from music_ledger.scrapers import PolitenessGovernor

TODAY = date(2026, 10, 19)
NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def days_ago(n: int) -> str:
    return (TODAY - timedelta(days=n)).isoformat()


@pytest.fixture
def tables() -> ClassificationTables:
    return ClassificationTables()


@pytest.fixture
def window() -> DateRange:
    return DateRange.lookback(60, TODAY)


@pytest.fixture
def make_release() -> Callable[..., Release]:
    """Factory for releases with sensible defaults."""

    def _make(artist="Artist", title="Title", platforms=("MusicBrainz",), **kwargs):
        kwargs.setdefault("observed_at", TODAY.isoformat())
        return Release(artist=artist, title=title, platforms=list(platforms), **kwargs)

    return _make


@pytest.fixture
def no_wait_governor() -> PolitenessGovernor:
    """Governor that never actually sleeps."""
    return PolitenessGovernor(0.0, timeout=5, sleep=lambda seconds: None)


@pytest.fixture
def mock_session() -> Mock:
    """Stand-in for requests.Session; set .get.side_effect/return_value per test."""
    session = Mock(spec=requests.Session)
    session.headers = {}
    return session


def json_response(payload, status: int = 200) -> Mock:
    """Build a mock requests.Response carrying a JSON payload."""
    response = Mock(spec=requests.Response)
    response.status_code = status
    response.json.return_value = payload
    if status >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status} Error")
    else:
        response.raise_for_status.return_value = None
    return response

