"""
Bounded-concurrency resolution of story IDs into items.
"""

import concurrent.futures
from typing import Iterator, List, Sequence

from .config import CHUNK_SIZE
from .exceptions import FeedError
from .models import Item
from .logging_config import get_logger, log_performance


def chunked(ids: Sequence[int], size: int) -> Iterator[Sequence[int]]:
    """Split ``ids`` into consecutive slices of at most ``size`` elements."""
    for start in range(0, len(ids), size):
        yield ids[start:start + size]


class BatchResolver:
    """Resolves story IDs to items in sequential waves of concurrent fetches.

    Each wave holds at most ``chunk_size`` requests and must fully settle
    before the next one starts. Results come back in input order; IDs whose
    fetch fails are dropped.
    """

    def __init__(self, api, chunk_size: int = CHUNK_SIZE):
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be at least 1, got {chunk_size}")
        self.api = api
        self.chunk_size = chunk_size
        self.logger = get_logger(self.__class__.__name__)

    @log_performance(get_logger("BatchResolver.resolve_many"), "resolving story batch")
    def resolve_many(self, ids: Sequence[int]) -> List[Item]:
        """
        Fetch every ID in ``ids``, ``chunk_size`` at a time.

        Args:
            ids: Story IDs in display order

        Returns:
            The fetched items in the same order as ``ids``, minus failures
        """
        items: List[Item] = []
        if not ids:
            return items

        failed = 0
        with concurrent.futures.ThreadPoolExecutor(
            max_workers=self.chunk_size, thread_name_prefix="hn-fetch"
        ) as executor:
            for wave, chunk in enumerate(chunked(ids, self.chunk_size), 1):
                self.logger.debug(f"Wave {wave}: fetching {len(chunk)} items")
                futures = [executor.submit(self.api.fetch_item, item_id) for item_id in chunk]
                # Submission order, not completion order
                for item_id, future in zip(chunk, futures):
                    try:
                        items.append(future.result())
                    except FeedError as e:
                        failed += 1
                        self.logger.debug(f"Dropping item {item_id}: {e}")

        self.logger.info(f"Resolved {len(items)} of {len(ids)} items ({failed} failed)")
        return items
