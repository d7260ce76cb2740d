"""
Data models and type definitions for HN Browser.
"""

import time as _time
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple
from urllib.parse import urlparse

from .config import BATCH_SIZE, CHUNK_SIZE, HN_DOMAIN, PAGE_SIZE, VISIBLE_ROWS


class Category(Enum):
    """Feed orderings offered by the Hacker News API."""
    TOP = "top"
    NEW = "new"
    BEST = "best"
    SHOW = "show"
    ASK = "ask"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]

    def successor(self) -> "Category":
        """Category selected by the "next category" command."""
        return _CATEGORY_SUCCESSORS[self]


_CATEGORY_LABELS = {
    Category.TOP: "Top",
    Category.NEW: "New",
    Category.BEST: "Best",
    Category.SHOW: "Show",
    Category.ASK: "Ask",
}

_CATEGORY_SUCCESSORS = {
    Category.TOP: Category.NEW,
    Category.NEW: Category.BEST,
    Category.BEST: Category.SHOW,
    Category.SHOW: Category.ASK,
    Category.ASK: Category.TOP,
}


class Status(Enum):
    """Lifecycle of the feed session."""
    LOADING = "loading"
    LOADING_MORE = "loading_more"
    READY = "ready"
    ERROR = "error"


def format_age(timestamp: int, now: float) -> str:
    """
    Format the age of a timestamp relative to ``now``.

    Args:
        timestamp: Creation time in epoch seconds
        now: Current time in epoch seconds

    Returns:
        A compact string such as "42s ago", "5m ago", "3h ago" or "2d ago"
    """
    seconds = max(0, int(now - timestamp))
    if seconds < 60:
        return f"{seconds}s ago"
    if seconds < 3600:
        return f"{seconds // 60}m ago"
    if seconds < 86400:
        return f"{seconds // 3600}h ago"
    return f"{seconds // 86400}d ago"


@dataclass(frozen=True)
class Item:
    """Represents a Hacker News item (story, job, poll...)."""
    id: int
    by: str
    time: int
    score: int = 0
    title: Optional[str] = None
    url: Optional[str] = None
    descendants: Optional[int] = None
    kids: Optional[Tuple[int, ...]] = None
    type: str = ""
    text: Optional[str] = None

    @property
    def domain(self) -> str:
        """Host of the external link, or the HN domain when there is none."""
        if not self.url:
            return HN_DOMAIN
        host = urlparse(self.url).netloc
        return host or HN_DOMAIN

    @property
    def has_link(self) -> bool:
        return bool(self.url)

    def time_ago(self, now: Optional[float] = None) -> str:
        # Never cached: the age changes between renders
        if now is None:
            now = _time.time()
        return format_age(self.time, now)

    def summary_line(self, now: Optional[float] = None) -> str:
        return (
            f"{self.score} points by {self.by} {self.time_ago(now)}"
            f" | {self.descendants or 0} comments"
        )


@dataclass
class FeedSession:
    """Mutable state of the active feed, owned by FeedBrowser."""
    category: Category = Category.TOP
    items: List[Item] = field(default_factory=list)
    selected_index: int = 0
    scroll_offset: int = 0
    show_details: bool = False
    status: Status = Status.LOADING
    error_message: Optional[str] = None


@dataclass
class BrowserConfig:
    """Tunables for fetching and navigation."""
    batch_size: int = BATCH_SIZE
    chunk_size: int = CHUNK_SIZE
    visible_rows: int = VISIBLE_ROWS
    page_size: int = PAGE_SIZE
    category: Category = Category.TOP
