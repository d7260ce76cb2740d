"""
Application state machine for the HN Browser
"""

from functools import wraps
from typing import List, Optional, Tuple

from .exceptions import EmptyBatch, FeedError
from .fetchers import HackerNewsAPI
from .models import BrowserConfig, Category, FeedSession, Item, Status
from .pagination import PaginationController
from .resolver import BatchResolver
from .logging_config import get_logger


def _navigation(method):
    """Skip the command while a fetch is in flight or the feed is in error."""
    @wraps(method)
    def wrapper(self, *args, **kwargs):
        if self._busy or self.session.status == Status.ERROR:
            self.logger.debug(f"Ignoring {method.__name__} in status {self.session.status.value}")
            return
        return method(self, *args, **kwargs)
    return wrapper


class FeedBrowser:
    """Single owner of the feed session; every mutation goes through here."""

    def __init__(self, api: Optional[HackerNewsAPI] = None, config: Optional[BrowserConfig] = None):
        self.config = config or BrowserConfig()
        self.logger = get_logger(self.__class__.__name__)

        self.api = api or HackerNewsAPI(pool_size=self.config.chunk_size)
        self.resolver = BatchResolver(self.api, chunk_size=self.config.chunk_size)
        self.pagination = PaginationController(
            self.api, self.resolver, batch_size=self.config.batch_size
        )
        self.session = FeedSession(category=self.config.category)
        self._busy = False

    # Commands

    def activate(self, category: Category) -> None:
        """Switch to ``category`` and load its first batch."""
        if self._busy or self.session.status == Status.ERROR:
            self.logger.debug(f"Ignoring activate in status {self.session.status.value}")
            return
        self._start(category)

    def _start(self, category: Category) -> None:
        self.session.category = category
        self.session.status = Status.LOADING
        self.session.error_message = None
        self._busy = True
        try:
            items = self.pagination.start_category(category)
        except FeedError as e:
            self._fail(e)
            return
        finally:
            self._busy = False

        # Replace the collection in one step
        self.session.items = items
        self.session.selected_index = 0
        self.session.scroll_offset = 0
        self.session.status = Status.READY

    def load_more(self) -> None:
        """Append the next batch to the collection."""
        if self._busy or self.session.status != Status.READY:
            self.logger.debug(f"Ignoring load_more in status {self.session.status.value}")
            return
        if not self.pagination.can_load_more():
            return

        self.session.status = Status.LOADING_MORE
        self._busy = True
        try:
            items = self.pagination.load_more()
        except EmptyBatch:
            self.session.status = Status.READY
            return
        except FeedError as e:
            self._fail(e)
            return
        finally:
            self._busy = False

        self.session.items.extend(items)
        self.session.status = Status.READY

    def retry(self) -> None:
        """Reload the active category after an error."""
        if self.session.status != Status.ERROR:
            return
        self.logger.info(f"Retrying {self.session.category.label}")
        self._start(self.session.category)

    @_navigation
    def cycle_category(self) -> None:
        self.activate(self.session.category.successor())

    @_navigation
    def select_next(self) -> None:
        self._move_to(self.session.selected_index + 1)

    @_navigation
    def select_previous(self) -> None:
        self._move_to(self.session.selected_index - 1)

    @_navigation
    def page_forward(self) -> None:
        self._move_to(self.session.selected_index + self.config.page_size)

    @_navigation
    def page_backward(self) -> None:
        self._move_to(self.session.selected_index - self.config.page_size)

    @_navigation
    def jump_to_start(self) -> None:
        self._move_to(0)

    @_navigation
    def jump_to_end(self) -> None:
        self._move_to(len(self.session.items) - 1)

    @_navigation
    def toggle_details(self) -> None:
        self.session.show_details = not self.session.show_details

    def _move_to(self, index: int) -> None:
        if not self.session.items:
            return
        index = max(0, min(index, len(self.session.items) - 1))
        self.session.selected_index = index

        rows = self.config.visible_rows
        if index > self.session.scroll_offset + rows - 1:
            self.session.scroll_offset = index - rows + 1
        elif index < self.session.scroll_offset:
            self.session.scroll_offset = index

    def _fail(self, error: FeedError) -> None:
        self.logger.error(f"Loading {self.session.category.label} stories failed: {error}")
        self.session.status = Status.ERROR
        self.session.error_message = str(error)

    # Read surface

    @property
    def status(self) -> Status:
        return self.session.status

    @property
    def error_message(self) -> Optional[str]:
        return self.session.error_message

    @property
    def category(self) -> Category:
        return self.session.category

    @property
    def category_label(self) -> str:
        return self.session.category.label

    @property
    def _collection(self) -> List[Item]:
        # Empty while loading a category or in error, when it may be the previous category's
        if self.session.status in (Status.READY, Status.LOADING_MORE):
            return self.session.items
        return []

    @property
    def items(self) -> List[Item]:
        return list(self._collection)

    @property
    def show_details(self) -> bool:
        return self.session.show_details

    @property
    def selected_index(self) -> int:
        return self.session.selected_index

    @property
    def scroll_offset(self) -> int:
        return self.session.scroll_offset

    def visible_items(self) -> List[Tuple[int, Item]]:
        """Items inside the visible window, with their collection index."""
        start = self.session.scroll_offset
        window = self._collection[start:start + self.config.visible_rows]
        return list(enumerate(window, start))

    @property
    def selected_item(self) -> Optional[Item]:
        items = self._collection
        if not items:
            return None
        return items[self.session.selected_index]

    @property
    def selected_url(self) -> Optional[str]:
        item = self.selected_item
        return item.url if item else None

    @property
    def has_selected_url(self) -> bool:
        return bool(self.selected_url)

    def can_load_more(self) -> bool:
        return self.session.status == Status.READY and self.pagination.can_load_more()

    @property
    def position(self) -> int:
        """1-based cursor position, or 0 when the collection is empty."""
        return self.session.selected_index + 1 if self._collection else 0

    @property
    def loaded_count(self) -> int:
        return len(self._collection)

    @property
    def total_count(self) -> int:
        if self.session.status not in (Status.READY, Status.LOADING_MORE):
            return 0
        return self.pagination.total
