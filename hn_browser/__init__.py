"""
Hacker News Browser
A terminal client for browsing Hacker News story feeds
"""

from .app import FeedBrowser
from .models import BrowserConfig, Category, FeedSession, Item, Status
from .fetchers import HackerNewsAPI
from .resolver import BatchResolver
from .pagination import PaginationController
from .exceptions import FeedError, NetworkError, DecodeError, EmptyBatch

__version__ = "0.1.0"

__all__ = [
    "FeedBrowser",
    "BrowserConfig",
    "Category",
    "FeedSession",
    "Item",
    "Status",
    "HackerNewsAPI",
    "BatchResolver",
    "PaginationController",
    "FeedError",
    "NetworkError",
    "DecodeError",
    "EmptyBatch",
]
