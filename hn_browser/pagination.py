"""
Pagination over a category's story ID list.
"""

from typing import List

from .config import BATCH_SIZE
from .exceptions import EmptyBatch
from .models import Category, Item
from .logging_config import get_logger


class PaginationController:
    """Owns the active category's ID list and how much of it is resolved.

    Not re-entrant: callers must not start an operation while another is
    in flight.
    """

    def __init__(self, api, resolver, batch_size: int = BATCH_SIZE):
        if batch_size < 1:
            raise ValueError(f"batch_size must be at least 1, got {batch_size}")
        self.api = api
        self.resolver = resolver
        self.batch_size = batch_size
        self.category = None
        self.identifiers: List[int] = []
        self.resolved_count = 0
        self.logger = get_logger(self.__class__.__name__)

    @property
    def total(self) -> int:
        return len(self.identifiers)

    def can_load_more(self) -> bool:
        return self.resolved_count < len(self.identifiers)

    def start_category(self, category: Category) -> List[Item]:
        """
        Fetch the ID list for ``category`` and resolve its first batch.

        State is only replaced once both steps succeed; on failure the
        exception propagates and the previous ID list is kept.

        Returns:
            The first batch of items
        """
        self.logger.info(f"Starting category {category.label}")
        identifiers = self.api.list_identifiers(category)
        end = min(self.batch_size, len(identifiers))
        items = self.resolver.resolve_many(identifiers[:end])

        self.category = category
        self.identifiers = identifiers
        self.resolved_count = end
        self.logger.info(
            f"Loaded {len(items)} items, resolved {self.resolved_count}/{self.total} IDs"
        )
        return items

    def load_more(self) -> List[Item]:
        """
        Resolve the next batch of IDs.

        ``resolved_count`` only advances after the batch settles, so a
        failed call leaves it pointing at the same slice.

        Raises:
            EmptyBatch: if every ID has already been resolved
        """
        if not self.can_load_more():
            raise EmptyBatch("No more stories to load")

        start = self.resolved_count
        end = min(start + self.batch_size, len(self.identifiers))
        self.logger.debug(f"Loading IDs [{start}, {end}) of {self.total}")
        items = self.resolver.resolve_many(self.identifiers[start:end])

        self.resolved_count = end
        self.logger.info(
            f"Loaded {len(items)} more items, resolved {self.resolved_count}/{self.total} IDs"
        )
        return items
