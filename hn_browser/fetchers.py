"""
Remote source gateway for the Hacker News API.
"""

import requests
from requests.adapters import HTTPAdapter
from typing import List

from .config import (
    HN_API_BASE_URL,
    HN_CATEGORY_ENDPOINTS,
    HN_ITEM_ENDPOINT,
    DEFAULT_USER_AGENT,
    REQUEST_TIMEOUT,
    CHUNK_SIZE,
)
from .exceptions import NetworkError, DecodeError
from .models import Category, Item
from .logging_config import get_logger, log_performance


class HackerNewsAPI:
    """Client for interacting with the Hacker News API.

    Each call is a single GET with no retries and no caching. The session is
    safe to share between the resolver's worker threads for reads.
    """

    def __init__(self, base_url: str = HN_API_BASE_URL, pool_size: int = CHUNK_SIZE):
        self.base_url = base_url
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": DEFAULT_USER_AGENT})
        adapter = HTTPAdapter(pool_connections=1, pool_maxsize=pool_size)
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)
        self.logger = get_logger(self.__class__.__name__)
        self.logger.debug(f"Initialized HackerNewsAPI with base URL: {self.base_url}")

    def close(self) -> None:
        self.session.close()

    def _get_json(self, url: str):
        try:
            response = self.session.get(url, timeout=REQUEST_TIMEOUT)
            response.raise_for_status()
        except requests.RequestException as e:
            self.logger.warning(f"Request to {url} failed: {e}")
            raise NetworkError(f"Request to {url} failed: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            self.logger.warning(f"Invalid JSON from {url}: {e}")
            raise DecodeError(f"Invalid JSON from {url}") from e

    @log_performance(get_logger("HackerNewsAPI.list_identifiers"), "fetching story IDs")
    def list_identifiers(self, category: Category) -> List[int]:
        """Fetch the full ordered list of story IDs for a category."""
        url = f"{self.base_url}{HN_CATEGORY_ENDPOINTS[category.value]}"
        self.logger.debug(f"Fetching {category.label} story IDs from: {url}")

        data = self._get_json(url)
        if not isinstance(data, list) or not all(_is_int(i) for i in data):
            raise DecodeError(f"Expected a list of story IDs from {url}")

        self.logger.info(f"Fetched {len(data)} {category.label} story IDs")
        self.logger.debug(f"Story IDs: {data[:5]}{'...' if len(data) > 5 else ''}")
        return data

    def fetch_item(self, item_id: int) -> Item:
        """Fetch a single item by ID."""
        url = f"{self.base_url}{HN_ITEM_ENDPOINT.format(item_id)}"
        self.logger.debug(f"Fetching item {item_id} from: {url}")

        data = self._get_json(url)
        item = parse_item(data)
        self.logger.debug(f"Fetched item {item_id}: score {item.score}")
        return item


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def parse_item(data) -> Item:
    """Build an Item from an API payload.

    Raises:
        DecodeError: if the payload is not an object or a required field
            (id, by, time, score) is missing or has the wrong type
    """
    if not isinstance(data, dict):
        raise DecodeError("Item response is not an object")

    for key in ("id", "time", "score"):
        if not _is_int(data.get(key)):
            raise DecodeError(f"Item field '{key}' is missing or not an integer")
    if not isinstance(data.get("by"), str):
        raise DecodeError(f"Item {data['id']} has no author")

    kids = data.get("kids")
    if kids is not None and not isinstance(kids, list):
        raise DecodeError(f"Item {data['id']} has malformed 'kids'")
    descendants = data.get("descendants")
    if descendants is not None and not _is_int(descendants):
        raise DecodeError(f"Item {data['id']} has malformed 'descendants'")

    return Item(
        id=data["id"],
        by=data["by"],
        time=data["time"],
        score=data["score"],
        title=data.get("title"),
        url=data.get("url"),
        descendants=descendants,
        kids=tuple(kids) if kids is not None else None,
        type=data.get("type") or "",
        text=data.get("text"),
    )
