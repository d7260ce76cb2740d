"""
Shared fixtures: an in-memory stand-in for the Hacker News API.
"""

import threading
import time

import pytest

from hn_browser.exceptions import NetworkError
from hn_browser.models import Item


def make_item(item_id, **overrides):
    fields = {
        "id": item_id,
        "by": f"user{item_id}",
        "time": 1700000000,
        "score": item_id * 10,
        "title": f"Story {item_id}",
        "url": f"https://example.com/{item_id}",
        "descendants": item_id,
        "type": "story",
    }
    fields.update(overrides)
    return Item(**fields)


class FakeAPI:
    """Records every call and how many fetches overlap."""

    def __init__(self, identifiers=None, fail_ids=(), delays=None, list_error=None):
        self.identifiers = list(identifiers or [])
        self.fail_ids = set(fail_ids)
        self.delays = delays or {}
        self.list_error = list_error
        self.on_fetch = None
        self.list_calls = []
        self.fetch_calls = []
        self.events = []
        self.in_flight = 0
        self.max_in_flight = 0
        self.closed = False
        self._lock = threading.Lock()

    def list_identifiers(self, category):
        self.list_calls.append(category)
        if self.list_error:
            raise self.list_error
        return list(self.identifiers)

    def fetch_item(self, item_id):
        with self._lock:
            self.fetch_calls.append(item_id)
            self.events.append(("start", item_id))
            self.in_flight += 1
            self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.on_fetch:
                self.on_fetch(item_id)
            time.sleep(self.delays.get(item_id, 0))
            if item_id in self.fail_ids:
                raise NetworkError(f"Item {item_id} timed out")
            return make_item(item_id)
        finally:
            with self._lock:
                self.in_flight -= 1
                self.events.append(("end", item_id))

    def close(self):
        self.closed = True


@pytest.fixture
def fake_api():
    """Factory for FakeAPI instances."""
    return FakeAPI
